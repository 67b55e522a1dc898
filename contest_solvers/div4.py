"""Solutions to a set of fourth-division contest problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

STAIR = "STAIR"
PEAK = "PEAK"
NONE = "NONE"


def round_summands(n: int) -> list[int]:
    """Split n into round numbers, one per non-zero digit, least significant first."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return [int(d) * 10**power for power, d in enumerate(reversed(str(n))) if d != "0"]


def stair_or_peak(a: int, b: int, c: int) -> str:
    """Classify three digits as a stair, a peak or neither."""
    if a < b < c:
        return STAIR
    if a < b > c:
        return PEAK
    return NONE


def min_max(x: int, y: int) -> tuple[int, int]:
    """The two numbers in ascending order."""
    return min(x, y), max(x, y)


def rearrange_distinct(s: str) -> str | None:
    """A rearrangement of s that differs from s, or None when none exists."""
    if len(set(s)) <= 1:
        return None
    reversed_s = s[::-1]
    if reversed_s != s:
        return reversed_s
    return reversed_s[0] + reversed_s[-1] + reversed_s[1:-1]


def strings_intersect(a: int, b: int, c: int, d: int) -> bool:
    """True when the chord a-b crosses the chord c-d on a twelve-hour clock face."""
    marks = []
    for hour in range(1, 13):
        if hour in (a, b):
            marks.append("a")
        if hour in (c, d):
            marks.append("b")
    return "".join(marks) in ("abab", "baba")


def best_multiple(n: int) -> int:
    """The x in 2..n that maximises the sum of its multiples not above n."""
    best, best_sum = 2, 0
    for x in range(2, n + 1):
        k = n // x
        total = x * k * (k + 1) // 2
        if total > best_sum:
            best, best_sum = x, total
    return best


def good_prefixes(arr: Iterable[int]) -> int:
    """Prefixes in which some element equals the sum of all the others."""
    count = 0
    prefix_sum = 0
    for value in arr:
        prefix_sum += value
        if value == prefix_sum - value:
            count += 1
    return count


def minimize(a: int, b: int) -> int:
    """Minimum of (c - a) + (b - c) over a <= c <= b, i.e. the distance between a and b."""
    return abs(a - b)


def note_columns(rows: Sequence[str]) -> list[int]:
    """1-based column of '#' in each row, from the bottom row up."""
    columns = []
    for row in reversed(rows):
        position = row.find("#")
        if position == -1:
            raise ValueError(f"row has no note: {row!r}")
        columns.append(position + 1)
    return columns


def frog_moves(x: int, y: int, k: int) -> int:
    """Fewest alternating jumps of at most k to reach (x, y), starting along x."""
    if k <= 0:
        raise ValueError("k must be positive")
    jumps_x = -(-x // k)
    jumps_y = -(-y // k)
    if x > y:
        return jumps_x + max(jumps_x - 1, jumps_y)
    return jumps_y + max(jumps_y, jumps_x)