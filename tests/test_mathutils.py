import math

import pytest

from contest_solvers import mathutils


@pytest.mark.parametrize("n", range(0, 15))
def test_factorial_matches_stdlib(n):
    assert mathutils.factorial(n) == math.factorial(n)


def test_factorial_of_zero():
    assert mathutils.factorial(0) == 1


@pytest.mark.parametrize("n,r", [(5, 2), (10, 3), (7, 7), (6, 0)])
def test_permutations_and_combinations(n, r):
    assert mathutils.n_pr(n, r) == math.perm(n, r)
    assert mathutils.n_cr(n, r) == math.comb(n, r)


@pytest.mark.parametrize("a,b", [(12, 18), (17, 5), (0, 9), (100, 75), (48, 180)])
def test_gcd_matches_stdlib(a, b):
    assert mathutils.gcd(a, b) == math.gcd(a, b)


@pytest.mark.parametrize("a,b", [(4, 6), (21, 6), (13, 7), (9, 9)])
def test_lcm_gcd_product(a, b):
    assert mathutils.lcm(a, b) * mathutils.gcd(a, b) == a * b


@pytest.mark.parametrize("a,b", [(2, 10), (3, 200), (10**12, 5), (7, 0)])
def test_mod_pow(a, b):
    assert mathutils.mod_pow(a, b) == pow(a, b, 1000000007)


def test_mod_pow_rejects_negative_exponent():
    with pytest.raises(ValueError):
        mathutils.mod_pow(2, -1)


@pytest.mark.parametrize("k", range(0, 20))
def test_count_set_bits_powers(k):
    assert mathutils.count_set_bits(2**k) == 1
    assert mathutils.count_set_bits(2**k - 1) == k


def test_count_set_bits_rejects_negative():
    with pytest.raises(ValueError):
        mathutils.count_set_bits(-3)


@pytest.mark.parametrize("n", range(1, 40))
def test_total_set_bits_increments(n):
    diff = mathutils.total_set_bits(n) - mathutils.total_set_bits(n - 1)
    assert diff == mathutils.count_set_bits(n)


def test_total_set_bits_of_zero():
    assert mathutils.total_set_bits(0) == 0


def test_is_prime_agrees_with_sieve():
    sieve = mathutils.prime_sieve(300)
    assert [mathutils.is_prime(i) for i in range(300)] == sieve


def test_sieve_default_size():
    sieve = mathutils.prime_sieve()
    assert len(sieve) == 1000000
    assert not sieve[0] and not sieve[1]
    assert sieve[999983]


def test_sieve_tiny_limits():
    assert mathutils.prime_sieve(0) == []
    assert mathutils.prime_sieve(1) == [False]


@pytest.mark.parametrize("key", [1, 3, 5, 8, 13, 21, 34])
def test_binary_search_finds(key):
    arr = [1, 3, 5, 8, 13, 21, 34]
    assert arr[mathutils.binary_search(arr, key)] == key


@pytest.mark.parametrize("key", [0, 2, 35, 9])
def test_binary_search_missing(key):
    assert mathutils.binary_search([1, 3, 5, 8, 13, 21, 34], key) == -1


def test_binary_search_empty():
    assert mathutils.binary_search([], 4) == -1


@pytest.mark.parametrize("num", [0, 1, 5, 100, 1023, 2047])
def test_binary_string_round_trip(num):
    text = mathutils.binary_string(num)
    assert len(text) == 11
    assert int(text, 2) == num


@pytest.mark.parametrize("n", range(-5, 20))
def test_is_even(n):
    assert mathutils.is_even(n) == (n % 2 == 0)


def test_char_frequency():
    result = mathutils.char_frequency("banana")
    assert sum(result.values()) == len("banana")
    assert list(result) == sorted(set("banana"))
    assert result["a"] == "banana".count("a")


@pytest.mark.parametrize("number", [0, 7, 112233, 9876543210 // 10])
def test_digit_frequency(number):
    result = mathutils.digit_frequency(number)
    text = str(number)
    assert sum(result.values()) == len(text)
    assert set(result) == {int(ch) for ch in text}
    assert list(result) == sorted(result)


@pytest.mark.parametrize("p", [2, 3, 5, 7, 11, 97])
def test_divisor_sum_of_prime(p):
    assert mathutils.divisor_sum(p) == p + 1


@pytest.mark.parametrize("n", [6, 28, 496])
def test_divisor_sum_of_perfect_number(n):
    assert mathutils.divisor_sum(n) == 2 * n