"""
Seqfold: generic algorithms over immutable sequences.

Provides construction/decomposition primitives, transform, accumulate and
filter, and order-dependent algorithms: binary-search lower bound,
binary-insertion sort and partition quicksort, all with pluggable
comparators.

Usage:
    from seqfold import Seq, lower_bound, insertion_sort, quicksort, less

    items = Seq(4, 3, -1, 5, 2, -2)

    # Descending by default
    insertion_sort(items)            # Seq(5, 4, 3, 2, -1, -2)
    insertion_sort(items, less)      # Seq(-2, -1, 2, 3, 4, 5)

    # Ascending by default
    quicksort(items)                 # Seq(-2, -1, 2, 3, 4, 5)

    # Insertion point in a descending sequence
    lower_bound(Seq(5, 4, 2, 1), 3)  # 2
"""

import logging

from .errors import SeqfoldError, EmptySequenceError, KindMismatchError
from .sequence import Seq, Value, as_seq, value_list, type_list, concat, join
from .compare import less, greater, larger_value, CountingCompare, CompareFunc, Predicate
from .signature import FunctionInfo, function_info, is_callable, accepts
from .primitives import transform, accumulate, filter, not_, threshold, above, at_most
from .sort import (
    lower_bound,
    insertion_sort,
    quicksort,
    DEFAULT_COMPARE,
    DEFAULT_PARTITION_COMPARE,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    # Sequences
    "Seq",
    "Value",
    "as_seq",
    "value_list",
    "type_list",
    "concat",
    "join",
    # Comparators
    "less",
    "greater",
    "larger_value",
    "CountingCompare",
    "CompareFunc",
    "Predicate",
    # Introspection
    "FunctionInfo",
    "function_info",
    "is_callable",
    "accepts",
    # Primitives
    "transform",
    "accumulate",
    "filter",
    "not_",
    "threshold",
    "above",
    "at_most",
    # Searching and sorting (built on primitives)
    "lower_bound",
    "insertion_sort",
    "quicksort",
    "DEFAULT_COMPARE",
    "DEFAULT_PARTITION_COMPARE",
    # Errors
    "SeqfoldError",
    "EmptySequenceError",
    "KindMismatchError",
]
