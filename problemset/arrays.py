"""Array problems: k-sums, missing positives, medians, trapped water and windows."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable, Sequence


def four_sum(nums: Iterable[int], target: int) -> list[list[int]]:
    """Return every distinct sorted quadruplet from ``nums`` that sums to ``target``."""
    ordered = sorted(nums)
    size = len(ordered)
    result: list[list[int]] = []
    for i in range(size - 3):
        if i and ordered[i] == ordered[i - 1]:
            continue
        for j in range(i + 1, size - 2):
            if j != i + 1 and ordered[j] == ordered[j - 1]:
                continue
            needed = target - ordered[i] - ordered[j]
            left, right = j + 1, size - 1
            while left < right:
                pair = ordered[left] + ordered[right]
                if pair == needed:
                    result.append([ordered[i], ordered[j], ordered[left], ordered[right]])
                    left += 1
                    right -= 1
                    while left < right and ordered[left] == ordered[left - 1]:
                        left += 1
                    while left < right and ordered[right] == ordered[right + 1]:
                        right -= 1
                elif pair > needed:
                    right -= 1
                else:
                    left += 1
    return result


def first_missing_positive(nums: Iterable[int]) -> int:
    """Return the smallest positive integer that does not occur in ``nums``."""
    present = set(nums)
    candidate = 1
    while candidate in present:
        candidate += 1
    return candidate


def median_of_sorted(first: Iterable[int], second: Iterable[int]) -> float:
    """Return the median of two already sorted sequences taken together."""
    merged = list(heapq.merge(first, second))
    if not merged:
        raise ValueError("the median of no values is undefined")
    middle = len(merged) // 2
    if len(merged) % 2:
        return float(merged[middle])
    return (merged[middle - 1] + merged[middle]) / 2


def trapped_water(heights: Sequence[int]) -> int:
    """Return the units of water held between bars of the given heights."""
    water = 0
    left_max = right_max = 0
    low, high = 0, len(heights) - 1
    while low <= high:
        if heights[low] < heights[high]:
            if heights[low] > left_max:
                left_max = heights[low]
            else:
                water += left_max - heights[low]
            low += 1
        else:
            if heights[high] > right_max:
                right_max = heights[high]
            else:
                water += right_max - heights[high]
            high -= 1
    return water


def sliding_window_max(values: Sequence[int], k: int) -> list[int]:
    """Return the maximum of every contiguous window of ``k`` values."""
    if not 1 <= k <= len(values):
        raise ValueError("window size must be between 1 and the number of values")
    window: deque[int] = deque()
    maxima: list[int] = []
    for index, value in enumerate(values):
        while window and values[window[-1]] <= value:
            window.pop()
        window.append(index)
        if window[0] <= index - k:
            window.popleft()
        if index >= k - 1:
            maxima.append(values[window[0]])
    return maxima


def plus_one(digits: Sequence[int]) -> list[int]:
    """Return the decimal digits of the number ``digits`` plus one."""
    if not digits:
        raise ValueError("at least one digit is needed")
    result: list[int] = []
    carry = 1
    for digit in reversed(digits):
        carry, kept = divmod(digit + carry, 10)
        result.append(kept)
    if carry:
        result.append(carry)
    result.reverse()
    return result