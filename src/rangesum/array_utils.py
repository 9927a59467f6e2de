"""Small stateless helpers over integer sequences

None of these keep any state, and none of them depend on RangeSumIndex.
The ones that rearrange an array do it in place and return None.
"""

from __future__ import annotations
from collections import Counter
from collections.abc import MutableSequence, Sequence
from functools import reduce
from operator import xor
from typing import Optional

ROMAN_VALUES: dict[str, int] = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}


def roman_to_int(s: str) -> int:
    """Convert a roman numeral into an integer

    A symbol that's smaller than the one following it gets subtracted
    instead of added, so "IV" is 4 and "MCMXCIV" is 1994
    """
    try:
        vals = [ROMAN_VALUES[c] for c in s]
    except KeyError as err:
        raise ValueError(f"Invalid roman numeral symbol {err.args[0]!r}") from None

    total = 0
    for i, v in enumerate(vals):
        if i + 1 < len(vals) and v < vals[i + 1]:
            total -= v
        else:
            total += v
    return total


def merge_sorted(
    nums1: MutableSequence[int], m: int, nums2: Sequence[int], n: int
) -> None:
    """Merge the first `n` values of nums2 into nums1 in place

    nums1 holds `m` sorted values followed by room for at least `n` more.
    Filling happens from the back so nothing gets overwritten before it's read
    """
    if m + n > len(nums1):
        raise ValueError("nums1 doesn't have room for the merged values")
    p1 = m - 1
    p2 = n - 1
    p = m + n - 1
    while p1 >= 0 and p2 >= 0:
        if nums1[p1] > nums2[p2]:
            nums1[p] = nums1[p1]
            p1 -= 1
        else:
            nums1[p] = nums2[p2]
            p2 -= 1
        p -= 1

    while p2 >= 0:
        nums1[p] = nums2[p2]
        p2 -= 1
        p -= 1


def pascals_triangle(num_rows: int) -> list[list[int]]:
    if num_rows <= 0:
        return []
    triangle = [[1]]
    for _ in range(1, num_rows):
        prev = triangle[-1]
        row = [1] + [a + b for a, b in zip(prev, prev[1:])] + [1]
        triangle.append(row)
    return triangle


def contains_duplicate(nums: Sequence[int]) -> bool:
    seen: set[int] = set()
    for num in nums:
        if num in seen:
            return True
        seen.add(num)
    return False


def contains_nearby_duplicate(nums: Sequence[int], k: int) -> bool:
    """Check if two equal values are at most `k` indices apart"""
    last_seen: dict[int, int] = {}
    for i, num in enumerate(nums):
        prev = last_seen.get(num)
        if prev is not None and i - prev <= k:
            return True
        last_seen[num] = i
    return False


def intersection(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """Get the sorted unique values that are in both sequences"""
    return sorted(set(nums1) & set(nums2))


def intersect(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """Get the multiset intersection of both sequences

    Each shared value shows up as many times as it does in whichever
    sequence has fewer of them, ordered by first appearance in nums1
    """
    common = Counter(nums1) & Counter(nums2)
    return list(common.elements())


def max_profit(prices: Sequence[int]) -> int:
    """Best profit from buying once then selling once later. 0 if there's none"""
    min_price: Optional[int] = None
    best = 0
    for price in prices:
        if min_price is None or price < min_price:
            min_price = price
        best = max(best, price - min_price)
    return best


def missing_number(nums: Sequence[int]) -> int:
    """Find the one value from 0..len(nums) that isn't in nums"""
    n = len(nums)
    return n * (n + 1) // 2 - sum(nums)


def majority_element(nums: Sequence[int]) -> int:
    """Boyer-Moore majority vote

    Assumes there is a value making up more than half of nums. If there isn't
    then the result is just the last surviving candidate
    """
    if not nums:
        raise ValueError("Cannot find the majority of an empty sequence")
    count = 0
    candidate = nums[0]
    for num in nums:
        if count == 0:
            candidate = num
        count += 1 if num == candidate else -1
    return candidate


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move every zero to the end, keeping the order of everything else"""
    last_nonzero = 0
    for num in nums:
        if num != 0:
            nums[last_nonzero] = num
            last_nonzero += 1
    for i in range(last_nonzero, len(nums)):
        nums[i] = 0


def single_number(nums: Sequence[int]) -> int:
    # Every paired value cancels itself out
    return reduce(xor, nums, 0)


def summary_ranges(nums: Sequence[int]) -> list[str]:
    """Collapse sorted unique values into runs like "0->2" or "7" """
    ranges: list[str] = []
    if not nums:
        return ranges

    def _fmt(start: int, end: int) -> str:
        return str(start) if start == end else f"{start}->{end}"

    start = nums[0]
    for prev, cur in zip(nums, nums[1:]):
        if cur != prev + 1:
            ranges.append(_fmt(start, prev))
            start = cur
    ranges.append(_fmt(start, nums[-1]))
    return ranges
