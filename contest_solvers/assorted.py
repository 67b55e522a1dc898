"""Solutions to assorted contest problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

EASY = "EASY"
HARD = "HARD"


def difficulty(responses: Iterable[int]) -> str:
    """HARD if anyone answered 1, otherwise EASY."""
    return HARD if any(r == 1 for r in responses) else EASY


def sum_check(a: int, b: int, c: int) -> bool:
    """True when c equals a + b."""
    return c == a + b


def adjacent_product_sum(arr: Sequence[int]) -> int:
    """Sum of products of neighbouring elements; a single element is returned as is."""
    if not arr:
        raise ValueError("at least one element is required")
    if len(arr) < 2:
        return arr[0]
    return sum(x * y for x, y in zip(arr, arr[1:]))


def can_play(table: str, hand: Iterable[str]) -> bool:
    """True when some hand card shares a rank or suit character with the table card."""
    if len(table) < 2:
        raise ValueError(f"not a card: {table!r}")
    hand_chars = set()
    for card in hand:
        if len(card) < 2:
            raise ValueError(f"not a card: {card!r}")
        hand_chars.update(card[:2])
    return any(ch in hand_chars for ch in table[:2])


def plus_equal_steps(a: int, b: int, n: int) -> int:
    """Operations 'smaller += larger' needed until the updated value exceeds n."""
    steps = 0
    while True:
        if a > b:
            b += a
            latest = b
        else:
            a += b
            latest = a
        steps += 1
        if latest > n:
            return steps
        if max(a, b) <= 0:
            raise ValueError("values never exceed n")


def longest_increasing_run(arr: Sequence[int]) -> int:
    """Length of the longest strictly increasing contiguous run."""
    if not arr:
        return 0
    best = run = 1
    for prev, cur in zip(arr, arr[1:]):
        run = run + 1 if cur > prev else 1
        best = max(best, run)
    return best