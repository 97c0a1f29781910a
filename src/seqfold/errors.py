"""
Exceptions raised on precondition violations.

Nothing in seqfold has a recoverable failure mode: every exception here
signals a caller error and is raised at the point the violation is found.
"""


class SeqfoldError(RuntimeError):
    """Base class for seqfold errors."""


class EmptySequenceError(SeqfoldError, IndexError):
    """Front/back access or removal on an empty sequence."""


class KindMismatchError(SeqfoldError, TypeError):
    """
    Element kinds do not line up.

    Raised when a Value's payload is not an instance of its declared kind,
    or when two elements of different kinds are compared.
    """
