from .range_sum import InvalidInput, OutOfRange, RangeSumIndex
from . import array_utils

__all__ = [
    "InvalidInput",
    "OutOfRange",
    "RangeSumIndex",
    "array_utils",
]
