"""Array problems: subset payments, alternating runs, pairing and bit counting."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable, Sequence

_OR_BITS = 31


def can_pay(notes: Iterable[int], amount: int) -> bool:
    """Return True when some subset of ``notes`` sums exactly to ``amount``."""
    notes = list(notes)
    if sum(notes) < amount:
        return False
    reachable = {0}
    for note in notes:
        reachable |= {total + note for total in reachable}
    return amount in reachable


def _same_sign(first: int, second: int) -> bool:
    return (first < 0 and second < 0) or (first > 0 and second > 0)


def alternating_prefix_lengths(values: Sequence[int]) -> list[int]:
    """For each position, the length of the longest alternating-sign run starting there."""
    lengths: list[int] = []
    following: int | None = None
    for value in reversed(values):
        if following is None or _same_sign(value, following):
            lengths.append(1)
        else:
            lengths.append(lengths[-1] + 1)
        following = value
    lengths.reverse()
    return lengths


def can_bench_press(target: int, rod_weight: int, weights: Iterable[int]) -> bool:
    """Return True when the rod plus equal pairs of weights reach ``target``."""
    remaining = target - rod_weight
    for weight, count in Counter(weights).items():
        remaining -= weight * 2 * (count // 2)
    return remaining <= 0


def even_game_winner(values: Iterable[int]) -> int:
    """Return the winning player (1 or 2) of the even-sum game."""
    odd_count = sum(1 for value in values if value & 1)
    return 2 if odd_count & 1 else 1


def min_horse_difference(skills: Iterable[int]) -> int:
    """Return the smallest difference between the skills of any two horses."""
    ordered = sorted(skills)
    if len(ordered) < 2:
        raise ValueError("at least two horses are needed")
    return min(second - first for first, second in zip(ordered, ordered[1:]))


def or_after_updates(values: Sequence[int], updates: Iterable[tuple[int, int]]) -> list[int]:
    """Return the OR of all values, then the OR after each (1-based index, value) update."""
    current = list(values)
    counts = [sum(1 for value in current if value >> bit & 1) for bit in range(_OR_BITS)]

    def combined() -> int:
        return sum(1 << bit for bit, count in enumerate(counts) if count > 0)

    results = [combined()]
    for index, value in updates:
        if not 1 <= index <= len(current):
            raise IndexError(f"update index {index} out of range")
        old = current[index - 1]
        for bit in range(_OR_BITS):
            counts[bit] += (value >> bit & 1) - (old >> bit & 1)
        current[index - 1] = value
        results.append(combined())
    return results


def count_non_decreasing_subarrays(values: Sequence[int]) -> int:
    """Count the contiguous subarrays whose elements never decrease."""
    total = 0
    run = 0
    following: int | None = None
    for value in reversed(values):
        run = run + 1 if following is not None and value <= following else 1
        total += run
        following = value
    return total


def shuffling_parties(values: Sequence[int]) -> int:
    """Return the maximum number of positions whose value and index have matching parity."""
    size = len(values)
    evens = sum(1 for value in values if value % 2 == 0)
    odds = size - evens
    return min(evens, (size + 1) // 2) + min(odds, size // 2)


def smallest_pair_sum(values: Iterable[int]) -> int:
    """Return the sum of the two smallest values."""
    smallest = heapq.nsmallest(2, values)
    if len(smallest) < 2:
        raise ValueError("at least two values are needed")
    return sum(smallest)