"""Solutions to a set of second-division contest problems."""

from __future__ import annotations

import string
from collections.abc import Iterable, Sequence

YES = "YES"
NO = "NO"

_FACES = {
    "Tetrahedron": 4,
    "Cube": 6,
    "Icosahedron": 20,
    "Dodecahedron": 12,
    "Octahedron": 8,
}


def nearly_lucky(n: int) -> bool:
    """True when the count of 4s and 7s among the digits of n is itself 4 or 7."""
    if n <= 0:
        return False
    count = sum(ch in "47" for ch in str(n))
    return count in (4, 7)


def tram_capacity(stops: Iterable[tuple[int, int]]) -> int:
    """Smallest capacity that fits every passenger load; stops give (exiting, entering)."""
    loads = []
    load = 0
    for leaving, entering in stops:
        load = max(abs(load - leaving) + entering, entering)
        loads.append(load)
    if not loads:
        raise ValueError("at least one stop is required")
    return max(loads)


def zeros_to_erase(s: str) -> int:
    """Zeros that lie between the first and last '1' of s."""
    first = s.find("1")
    if first == -1:
        return 0
    last = s.rfind("1")
    return s.count("0", first, last + 1)


def inverse_permutation(p: Sequence[int]) -> list[int]:
    """Inverse of a permutation of 1..n: position i holds the index whose value is i."""
    n = len(p)
    if sorted(p) != list(range(1, n + 1)):
        raise ValueError("input is not a permutation of 1..n")
    result = [0] * n
    for position, value in enumerate(p, start=1):
        result[value - 1] = position
    return result


def can_sort(arr: Sequence[int], k: int) -> bool:
    """True when arr is already sorted or reversals of length k >= 2 are allowed."""
    return all(a <= b for a, b in zip(arr, arr[1:])) or k >= 2


def is_strong_password(s: str) -> bool:
    """Check the password rules: lowercase letters and digits, digits first, each part sorted."""
    seen_letter = False
    for ch in s:
        if ch in string.ascii_letters:
            seen_letter = True
        elif ch in string.digits and seen_letter:
            return False
    digits = []
    letters = []
    for ch in s:
        if ch in string.digits:
            digits.append(ch)
        elif ch in string.ascii_lowercase:
            letters.append(ch)
        else:
            return False
    return digits == sorted(digits) and letters == sorted(letters)


def gender_by_username(username: str) -> str:
    """Verdict by the parity of the number of distinct characters."""
    if len(set(username)) % 2 == 0:
        return "CHAT WITH HER!"
    return "IGNORE HIM!"


def capitalize_word(word: str) -> str:
    """The word with its first letter in upper case and the rest unchanged."""
    if not word:
        raise ValueError("word must not be empty")
    first = word[0]
    if first in string.ascii_lowercase:
        first = first.upper()
    return first + word[1:]


def rearrange_sum(expression: str) -> str:
    """The digits of a sum written in non-decreasing order, joined by '+'."""
    digits = sorted(ch for ch in expression if ch in string.digits)
    if not digits:
        raise ValueError("expression holds no digits")
    return "+".join(digits)


def pyramid_height(n: int) -> int:
    """Height of the tallest pyramid buildable from n cubes; level i needs 1+2+...+i cubes."""
    height = 0
    level_size = 0
    i = 1
    while n > 0:
        level_size += i
        if n - level_size >= 0:
            height += 1
        n -= level_size
        i += 1
    return height


def money_to_borrow(k: int, n: int, w: int) -> int:
    """Amount to borrow to buy w bananas, the i-th costing i*k, with n in hand."""
    total = k * (w * (w + 1) // 2)
    return max(0, total - n)


def total_faces(names: Iterable[str]) -> int:
    """Total faces of the named polyhedra; unknown names count for nothing."""
    return sum(_FACES.get(name, 0) for name in names)


def years_to_exceed(a: int, b: int) -> int:
    """Years until a, tripling each year, is strictly above b, doubling each year."""
    if a <= 0 and a <= b:
        raise ValueError("a never exceeds b")
    years = 0
    while a <= b:
        a *= 3
        b *= 2
        years += 1
    return years


def wrong_subtraction(n: int, k: int) -> int:
    """Apply k times: drop a trailing zero, otherwise subtract one."""
    for _ in range(k):
        if n % 10:
            n -= 1
        else:
            n //= 10
    return n


def bitpp(statements: Iterable[str]) -> int:
    """Final value of x after running statements such as 'X++' or '--X' from zero."""
    x = 0
    for statement in statements:
        pos = statement.find("X")
        if pos == -1:
            raise ValueError(f"statement has no variable: {statement!r}")
        after = statement[pos + 1:pos + 3]
        before = statement[pos - 2:pos] if pos >= 2 else ""
        for part in (after, before):
            if part == "++":
                x += 1
            elif part == "--":
                x -= 1
    return x


def min_operations(a: Iterable[int], b: Iterable[int]) -> int:
    """Absolute difference between the sums of a and b."""
    return abs(sum(b) - sum(a))