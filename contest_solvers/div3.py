"""Solutions to a set of third-division contest problems."""

from __future__ import annotations

import itertools
import string
from collections import Counter
from collections.abc import Sequence

YES = "YES"
NO = "NO"
MAYBE = "MAYBE"

_LEVELS = string.ascii_uppercase[:7]


def repeating_decrypt(t: str) -> str:
    """Undo the repeating cipher: keep the characters at positions 0, 1, 3, 6, 10, ..."""
    positions = itertools.takewhile(lambda i: i < len(t), itertools.accumulate(itertools.count()))
    return "".join(t[i] for i in positions)


def boring_apartments(x: str | int) -> int:
    """Keypresses made before the resident of a one-digit-repeated apartment x answers."""
    digits = str(x)
    if not digits or not digits.isdigit():
        raise ValueError(f"not an apartment number: {x!r}")
    before = int(digits[0]) - 1
    n = len(digits)
    return before * 10 + n * (n + 1) // 2


def missing_problems(m: int, problems: str) -> int:
    """Problems to add so that each of the levels A to G has at least m problems."""
    counts = Counter(problems)
    unknown = set(counts) - set(_LEVELS)
    if unknown:
        raise ValueError(f"unknown difficulty levels: {''.join(sorted(unknown))}")
    return sum(max(0, m - counts[level]) for level in _LEVELS)


def favorite_cube(a: Sequence[int], f: int, k: int) -> str:
    """Whether the favourite cube (1-based index f) is among the k largest after sorting."""
    if not 1 <= f <= len(a):
        raise ValueError("favourite index out of range")
    if not 0 <= k <= len(a):
        raise ValueError("number of removed cubes out of range")
    favourite = a[f - 1]
    ordered = sorted(a, reverse=True)
    removed = ordered[:k].count(favourite)
    if removed == 0:
        return NO
    if ordered.count(favourite) == removed:
        return YES
    return MAYBE