"""Count trains under maintenance each day while trains are added and removed."""

from __future__ import annotations

import math
from collections.abc import Sequence


def train_maintenance(
    trains: Sequence[tuple[int, int]],
    operations: Sequence[tuple[int, int]],
) -> list[int]:
    """Return the number of trains in maintenance after each day's operation.

    ``trains`` holds (working days, maintenance days) for each train model,
    numbered from 1. Each operation is (1, train) to add a train that day, or
    any other code with a train number to remove it.
    """
    days = len(operations)
    limit = max(1, math.isqrt(days))
    diff = [0] * (days + 2)
    buckets: dict[int, list[int]] = {}
    start: dict[int, int] = {}
    active = 0
    working = 0
    result: list[int] = []

    for day, (code, train) in enumerate(operations, 1):
        if not 1 <= train <= len(trains):
            raise IndexError(f"unknown train {train}")
        work, rest = trains[train - 1]
        cycle = work + rest
        if code == 1:
            if train in start:
                raise ValueError(f"train {train} is already running")
            start[train] = day
            delta = 1
        else:
            if train not in start:
                raise ValueError(f"train {train} is not running")
            delta = -1
        begin = start[train]
        active += delta

        if cycle > limit:
            for index in range(begin, days + 1, cycle):
                diff[index] += delta
            for index in range(begin + work, days + 1, cycle):
                diff[index] -= delta
        else:
            bucket = buckets.setdefault(cycle, [0] * cycle)
            bucket[begin % cycle] += delta
            bucket[(begin + work) % cycle] -= delta

        if delta == -1:
            if (day - begin - 1) % cycle < work:
                working -= 1
            del start[train]

        working += diff[day]
        working += sum(bucket[day % size] for size, bucket in buckets.items())
        result.append(active - working)

    return result