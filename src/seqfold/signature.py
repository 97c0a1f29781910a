"""
Introspection of callables: arity, parameter and return annotations.
"""

from __future__ import annotations
from typing import Any, Callable
from dataclasses import dataclass
import inspect
import typing


@dataclass(frozen=True)
class FunctionInfo:
    """Signature summary of a callable."""
    ret: Any
    params: tuple[Any, ...]
    is_member_function: bool

    @property
    def num_params(self) -> int:
        return len(self.params)

    def param(self, index: int) -> Any:
        """Annotation of the parameter at ``index``."""
        if not 0 <= index < len(self.params):
            raise IndexError(
                f"parameter {index} out of range for {len(self.params)} parameters"
            )
        return self.params[index]


def is_callable(obj: Any) -> bool:
    """
    Whether ``obj`` can be called.

    For a class this asks whether its *instances* are callable, so
    ``is_callable(int)`` is False while a class defining ``__call__`` is True.
    """
    if isinstance(obj, type):
        return any("__call__" in vars(klass) for klass in obj.__mro__ if klass is not object)
    return callable(obj)


def _defined_in_class(func: Callable) -> bool:
    qualname = getattr(func, "__qualname__", "")
    if "." not in qualname:
        return False
    return qualname.rsplit(".", 1)[0].rsplit(".", 1)[-1] != "<locals>"


def function_info(obj: Any) -> FunctionInfo:
    """
    Describe a function, method, lambda or callable object.

    Unbound methods drop their ``self`` parameter and report
    ``is_member_function=True``, as do bound methods. Callable classes and
    instances are described through ``__call__``.
    """
    if not is_callable(obj):
        raise TypeError(f"{obj!r} is not callable")

    is_member = inspect.ismethod(obj)
    target = obj
    if isinstance(obj, type):
        target = obj.__call__
    elif not (is_member or inspect.isfunction(obj) or inspect.isbuiltin(obj)):
        target = type(obj).__call__

    sig = inspect.signature(target)
    try:
        hints = typing.get_type_hints(target)
    except (NameError, TypeError):
        # unresolvable forward reference or slot wrapper: keep the raw annotations
        hints = {}

    params = list(sig.parameters.values())
    if target is not obj:
        params = params[1:]
    elif inspect.isfunction(obj) and _defined_in_class(obj) and params and params[0].name == "self":
        is_member = True
        params = params[1:]

    return FunctionInfo(
        ret=hints.get("return", sig.return_annotation),
        params=tuple(hints.get(p.name, p.annotation) for p in params),
        is_member_function=is_member,
    )


def accepts(func: Callable, count: int) -> bool:
    """
    Whether ``func`` can be called with ``count`` positional arguments.

    Callables whose signature cannot be inspected (some builtins) are
    assumed to accept.
    """
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError):
        return True
    try:
        sig.bind(*([None] * count))
    except TypeError:
        return False
    return True
