"""String problems: pairs, decimal addition, subsequences, brackets and a combination lock."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Sequence
from itertools import permutations, zip_longest

_CLOSERS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset("([{")
_LOCK_START = "0000"


def count_concatenation_pairs(words: Sequence[str], target: str) -> int:
    """Count ordered pairs of different positions whose words concatenate to ``target``."""
    return sum(1 for first, second in permutations(words, 2) if first + second == target)


def _digit(char: str) -> int:
    if len(char) != 1 or not "0" <= char <= "9":
        raise ValueError(f"not a decimal digit: {char!r}")
    return ord(char) - ord("0")


def add_strings(first: str, second: str) -> str:
    """Return the sum of two non-negative decimal numbers given as strings."""
    digits: list[str] = []
    carry = 0
    for a, b in zip_longest(reversed(first), reversed(second), fillvalue="0"):
        carry, kept = divmod(_digit(a) + _digit(b) + carry, 10)
        digits.append(str(kept))
    if carry:
        digits.append(str(carry))
    return "".join(reversed(digits))


def count_distinct_subsequences(text: str, pattern: str) -> int:
    """Count the ways ``pattern`` occurs in ``text`` as a subsequence."""
    ways = [1] + [0] * len(pattern)
    for char in text:
        for j in reversed(range(1, len(pattern) + 1)):
            if pattern[j - 1] == char:
                ways[j] += ways[j - 1]
    return ways[-1]


def is_balanced(text: str) -> bool:
    """Return True when ``text`` is made only of properly nested brackets."""
    stack: list[str] = []
    for char in text:
        if char in _OPENERS:
            stack.append(char)
        elif char in _CLOSERS and stack and stack[-1] == _CLOSERS[char]:
            stack.pop()
        else:
            return False
    return not stack


def _turns(combination: str) -> Iterator[str]:
    for position, char in enumerate(combination):
        for step in (1, -1):
            turned = str((int(char) + step) % 10)
            yield combination[:position] + turned + combination[position + 1:]


def open_lock(deadends: Iterable[str], target: str) -> int:
    """Return the fewest wheel turns from 0000 to ``target`` avoiding dead ends, or -1."""
    dead = set(deadends)
    if _LOCK_START in dead:
        return -1
    if target == _LOCK_START:
        return 0
    seen = {_LOCK_START}
    frontier = [_LOCK_START]
    moves = 0
    while frontier:
        moves += 1
        following: list[str] = []
        for combination in frontier:
            for neighbour in _turns(combination):
                if neighbour in seen or neighbour in dead:
                    continue
                if neighbour == target:
                    return moves
                seen.add(neighbour)
                following.append(neighbour)
        frontier = following
    return -1


def is_perfect_square(num: int) -> bool:
    """Return True when ``num`` is the square of an integer."""
    if num < 0:
        return False
    root = math.isqrt(num)
    return root * root == num