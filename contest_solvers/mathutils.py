"""Number-theory and counting helpers shared by the contest solvers."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Sequence

MOD = 1_000_000_007
SIEVE_LIMIT = 1_000_000
BINARY_WIDTH = 11


def factorial(n: int) -> int:
    """Return n!; values below 2 give 1."""
    return math.prod(range(2, n + 1))


def n_pr(n: int, r: int) -> int:
    """Number of ordered selections of r items out of n."""
    return factorial(n) // factorial(n - r)


def n_cr(n: int, r: int) -> int:
    """Number of unordered selections of r items out of n."""
    return factorial(n) // (factorial(r) * factorial(n - r))


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple of a and b."""
    return a * b // gcd(a, b)


def mod_pow(a: int, b: int) -> int:
    """Return a**b modulo 1_000_000_007."""
    if a < 0 or b < 0:
        raise ValueError("mod_pow takes non-negative arguments")
    return pow(a, b, MOD)


def count_set_bits(n: int) -> int:
    """Number of one bits in a non-negative integer."""
    if n < 0:
        raise ValueError("count_set_bits takes a non-negative integer")
    return bin(n).count("1")


def total_set_bits(n: int) -> int:
    """Total number of one bits in every integer from 1 to n."""
    return sum(count_set_bits(i) for i in range(1, n + 1))


def is_prime(n: int) -> bool:
    """Trial-division primality test."""
    if n <= 1:
        return False
    return all(n % i for i in range(2, math.isqrt(n) + 1))


def binary_search(arr: Sequence[int], key: int) -> int:
    """Index of key in the sorted sequence arr, or -1 when it is absent."""
    start, end = 0, len(arr) - 1
    while start <= end:
        mid = start + (end - start) // 2
        if arr[mid] == key:
            return mid
        if arr[mid] < key:
            start = mid + 1
        else:
            end = mid - 1
    return -1


def prime_sieve(limit: int = SIEVE_LIMIT) -> list[bool]:
    """Sieve of Eratosthenes: flag i is True exactly when i is prime, for i < limit."""
    flags = [True] * limit
    for k in range(min(2, limit)):
        flags[k] = False
    i = 2
    while i * i < limit:
        if flags[i]:
            for j in range(2 * i, limit, i):
                flags[j] = False
        i += 1
    return flags


def binary_string(num: int) -> str:
    """The low eleven bits of num, most significant first."""
    return "".join(str((num >> i) & 1) for i in reversed(range(BINARY_WIDTH)))


def is_even(num: int) -> bool:
    """True when num is even."""
    return num & 1 == 0


def char_frequency(text: str) -> dict[str, int]:
    """Occurrences of each character, keyed in sorted order."""
    return dict(sorted(Counter(text).items()))


def digit_frequency(number: int) -> dict[int, int]:
    """Occurrences of each character of the decimal form, keyed by its offset from '0'."""
    counts = Counter(ord(ch) - ord("0") for ch in str(number))
    return dict(sorted(counts.items()))


def divisor_sum(n: int) -> int:
    """Sum of the positive divisors of n."""
    return sum(i for i in range(1, n + 1) if n % i == 0)