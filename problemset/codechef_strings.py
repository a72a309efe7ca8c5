"""String problems: decreasing strings, bombs, memory limits, prefixes and ship classes."""

from __future__ import annotations

import string
from collections import Counter

_DESCENDING_ALPHABET = string.ascii_lowercase[::-1]

_SHIP_CLASSES = {
    "b": "BattleShip",
    "c": "Cruiser",
    "d": "Destroyer",
    "f": "Frigate",
}


def decreasing_string(k: int) -> str:
    """Return a string with exactly ``k`` positions where a letter is followed by a smaller one."""
    if k < 0:
        raise ValueError("k must not be negative")
    full_blocks, remainder = divmod(k, 25)
    result = _DESCENDING_ALPHABET * full_blocks
    if remainder > 0:
        result += _DESCENDING_ALPHABET[25 - remainder:]
    return result


def surviving_buildings(state: str) -> int:
    """Count the buildings ('0' or '1' for bomb) left standing after all bombs explode."""
    return sum(
        1
        for index in range(len(state))
        if "1" not in state[max(0, index - 1):index + 2]
    )


def fits_in_memory(word: str) -> bool:
    """Return True when typing ``word`` on a circular keyboard takes fewer than 10 steps per letter."""
    steps = sum(
        (ord(following) - ord(current)) % 26
        for current, following in zip(word, word[1:])
    )
    return steps < len(word) * 10


def good_prefix_length(text: str, k: int, x: int) -> int:
    """Return how many letters are kept before some letter would appear more than ``x`` times.

    Up to ``k`` offending letters may be deleted along the way.
    """
    seen: Counter[str] = Counter()
    kept = 0
    for letter in text:
        if seen[letter] >= x:
            if k > 0:
                k -= 1
                continue
            return kept
        seen[letter] += 1
        kept += 1
    return kept


def ship_class(letter: str) -> str:
    """Return the ship class for its identifying letter, in either case."""
    try:
        return _SHIP_CLASSES[letter.lower()]
    except KeyError:
        raise ValueError(f"unknown ship class id {letter!r}") from None