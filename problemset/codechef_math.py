"""Small arithmetic problems from competitive programming practice sets."""

from __future__ import annotations

import math

MOD = 1_000_000_007


def dice_combinations(n: int) -> int:
    """Count ordered sequences of die throws (1..6) summing to ``n``, modulo 10**9 + 7."""
    if n < 0:
        raise ValueError("n must not be negative")
    ways = [1]
    for total in range(1, n + 1):
        ways.append(sum(ways[max(0, total - 6):total]) % MOD)
    return ways[n]


def steel_grade(hardness: float, carbon: float, tensile: float) -> int:
    """Return the steel grade (5 to 10) for the given measurements."""
    hard = hardness > 50
    low_carbon = carbon < 0.7
    strong = tensile > 5600
    if hard and low_carbon and strong:
        return 10
    if hard and low_carbon:
        return 9
    if low_carbon and strong:
        return 8
    if hard and strong:
        return 7
    if hard or low_carbon or strong:
        return 6
    return 5


def best_box_volume(perimeter: float, surface: float) -> float:
    """Return the largest box volume for a given total edge length and surface area."""
    side = (perimeter - math.sqrt(perimeter ** 2 - 24 * surface)) / 12
    return side * (surface / 2.0 - side * (perimeter / 4.0 - side))


def longest_and_subarray(n: int) -> int:
    """Return the longest run of consecutive integers in 1..n with a non-zero bitwise AND."""
    if n < 1:
        raise ValueError("n must be positive")
    exponent = n.bit_length() - 1
    power = 1 << exponent
    half = power >> 1
    if n == power:
        return (n - half) % MOD
    return max(n + 1 - power, power - half) % MOD


def count_fours(n: int) -> int:
    """Count the digits equal to 4 in ``n``."""
    if n < 0:
        raise ValueError("n must not be negative")
    return str(n).count("4")


def rcb_qualifies(x: int, y: int, z: int) -> bool:
    """Return True when ``x`` points plus two per remaining match ``z`` reach ``y``."""
    return x + 2 * z >= y


def divisible_by_three(n: int) -> str:
    """Return an ``n``-digit odd number divisible by three, as a string."""
    if n < 1:
        raise ValueError("n must be positive")
    if n == 1:
        return "3"
    if n == 2:
        return "15"
    return "1" + "0" * (n - 2) + "5"


def mex_or(x: int) -> int:
    """Return the largest count of distinct non-negative integers whose MEX and OR allow ``x``."""
    if x < 0:
        raise ValueError("x must not be negative")
    if x == 0:
        return 1
    exponent = x.bit_length() - 1
    power = 1 << exponent
    next_power = power << 1
    if x == next_power - 1:
        return next_power
    return power % MOD