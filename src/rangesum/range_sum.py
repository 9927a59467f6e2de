from __future__ import annotations
from collections.abc import Iterable
import logging
import numbers
import operator
from typing import Any, Optional, Union

import numpy as np
from numpy.typing import DTypeLike

logger = logging.getLogger(__name__)

# --- Configuration ---
DEFAULT_EMPTY_DTYPE: type = np.int64  # table dtype when there's nothing to infer from
NUMERIC_KINDS: str = "iufcO"  # numpy dtype kinds accepted as summable
INT_SUM_LIMIT: int = int(np.iinfo(np.int64).max)  # past this int tables use python ints


Number = Union[int, float, complex, np.number]


class InvalidInput(ValueError):
    """The sequence given to a RangeSumIndex can't be summed"""


class OutOfRange(IndexError):
    """A query index falls outside of the indexed sequence"""


def _zcs(ary: np.ndarray) -> np.ndarray:
    """leading Zero Cumulative Summation"""
    css = np.cumsum(ary)
    return np.concatenate((np.zeros(1, dtype=css.dtype), css))


def _as_array(values: Any, dtype: Optional[DTypeLike]) -> np.ndarray:
    """Turn the incoming values into a flat numeric array"""
    if values is None:
        raise InvalidInput("RangeSumIndex needs a sequence, got None")

    if not isinstance(values, np.ndarray):
        if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
            raise InvalidInput(f"Cannot index values of type {type(values).__name__}")
        values = list(values)

    try:
        ary = np.array(values, dtype=dtype)
    except (TypeError, ValueError, OverflowError) as err:
        raise InvalidInput(f"Cannot build a numeric array: {err}") from err

    if ary.ndim != 1:
        raise InvalidInput(f"Expected a flat sequence, got {ary.ndim} dimensions")

    if ary.size == 0 and dtype is None:
        return ary.astype(DEFAULT_EMPTY_DTYPE)

    if ary.dtype.kind == "b":
        return ary.astype(DEFAULT_EMPTY_DTYPE)

    if ary.dtype.kind not in NUMERIC_KINDS:
        raise InvalidInput(f"Values must be numeric, got dtype {ary.dtype}")

    if ary.dtype.kind in "iu" and dtype is None:
        # Running totals past int64 would silently wrap around
        if sum(abs(v) for v in ary.tolist()) > INT_SUM_LIMIT:
            return ary.astype(object)

    if ary.dtype.kind == "O":
        for v in ary:
            if not isinstance(v, numbers.Number):
                raise InvalidInput(f"Non-numeric value in sequence: {v!r}")

    return ary


class RangeSumIndex:
    """Answer inclusive range-sum queries over a fixed sequence in constant time

    A cumulative sum of the values (with a leading zero) is computed once on
    construction, and every query afterwards is a single subtraction.
    The original values are not kept around, only the cumulative table.

    Properties:
        cumulative: The read-only cumulative sum table. Its length is one more
            than the number of indexed values, and it always starts with 0
    """

    __slots__: tuple[str, ...] = ("_cumulative",)

    def __init__(self, values: Iterable[Number], dtype: Optional[DTypeLike] = None):
        ary = _as_array(values, dtype)
        try:
            css = _zcs(ary)
        except TypeError as err:
            raise InvalidInput(f"Values cannot be added together: {err}") from err
        css.flags.writeable = False
        self._cumulative: np.ndarray = css
        logger.debug(
            "Built RangeSumIndex over %d values (dtype %s)", len(ary), css.dtype
        )

    @property
    def cumulative(self) -> np.ndarray:
        return self._cumulative.view()

    def __len__(self) -> int:
        return len(self._cumulative) - 1

    def __getitem__(self, index: int) -> Number:
        """Get the original value at the given index

        This is recovered from the cumulative table, so for float tables it's
        only as exact as the subtraction. eg: [1e16, 1.0] gives 0.0 at index 1
        """
        index = operator.index(index)
        if index < 0 or index >= len(self):
            raise OutOfRange(f"Index {index} out of range for length {len(self)}")
        return self._cumulative[index + 1] - self._cumulative[index]

    def __repr__(self):
        return f"<RangeSumIndex len: {len(self)} total: {self.total_sum()}>"

    def sum_range(self, left: int, right: int) -> Number:
        """Get the sum of the values from `left` to `right`, both inclusive

        Args:
            left: The index of the first value in the range
            right: The index of the last value in the range

        Returns:
            The sum of the values in the range

        Raises:
            OutOfRange: If the range isn't `0 <= left <= right < len(self)`
        """
        left = operator.index(left)
        right = operator.index(right)
        size = len(self)
        if left < 0:
            raise OutOfRange(f"Range start {left} is negative")
        if right >= size:
            raise OutOfRange(f"Range end {right} out of range for length {size}")
        if left > right:
            raise OutOfRange(f"Range start {left} is after range end {right}")
        return self._cumulative[right + 1] - self._cumulative[left]

    def prefix_sum(self, index: int) -> Number:
        """Sum of items [0: index)"""
        index = operator.index(index)
        if index < 0 or index > len(self):
            raise OutOfRange(f"Prefix {index} out of range for length {len(self)}")
        return self._cumulative[index]

    def total_sum(self) -> Number:
        """Return sum of all values."""
        return self._cumulative[-1]
