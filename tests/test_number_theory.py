import math

import pytest

from algodrills.number_theory import (
    binomial,
    binomial_mod,
    count_primes,
    divisors,
    factorize,
    gcd,
    is_prime,
    kaing_year,
    lcm,
    primes_between,
    sieve,
)


@pytest.mark.parametrize("a,b", [(12, 18), (7, 13), (100, 75), (0, 5), (5, 0), (48, 48)])
def test_gcd_matches_stdlib(a, b):
    assert gcd(a, b) == math.gcd(a, b)


@pytest.mark.parametrize("a,b", [(12, 18), (7, 13), (100, 75), (9, 3)])
def test_lcm_times_gcd_is_product(a, b):
    assert lcm(a, b) * gcd(a, b) == a * b
    assert lcm(a, b) % a == 0
    assert lcm(a, b) % b == 0


def test_binomial_edges_and_symmetry():
    for n in range(0, 12):
        assert binomial(n, 0) == 1
        assert binomial(n, n) == 1
        for k in range(n + 1):
            assert binomial(n, k) == binomial(n, n - k)


def test_binomial_pascal_rule():
    for n in range(1, 15):
        for k in range(1, n):
            assert binomial(n, k) == binomial(n - 1, k) + binomial(n - 1, k - 1)


def test_binomial_rejects_bad_k():
    with pytest.raises(ValueError):
        binomial(3, 4)
    with pytest.raises(ValueError):
        binomial(3, -1)


def test_binomial_mod_agrees_with_exact_value():
    for n in range(0, 60, 7):
        for k in range(0, n + 1, 3):
            assert binomial_mod(n, k) == binomial(n, k) % 10007


def test_binomial_mod_custom_modulus():
    assert binomial_mod(30, 12, 97) == binomial(30, 12) % 97


def test_binomial_mod_rejects_bad_modulus():
    with pytest.raises(ValueError):
        binomial_mod(5, 2, 0)


@pytest.mark.parametrize("n", [2, 12, 72, 97, 360, 9991, 1024])
def test_factorize_product_and_primality(n):
    factors = factorize(n)
    assert math.prod(factors) == n
    assert factors == sorted(factors)
    assert all(is_prime(p) for p in factors)


def test_factorize_one_is_empty():
    assert factorize(1) == []


def test_factorize_rejects_zero():
    with pytest.raises(ValueError):
        factorize(0)


def test_sieve_agrees_with_trial_division():
    flags = sieve(200)
    assert len(flags) == 201
    assert all(flags[i] == is_prime(i) for i in range(201))


def test_sieve_rejects_negative():
    with pytest.raises(ValueError):
        sieve(-1)


def test_primes_between_bounds_and_completeness():
    primes = primes_between(30, 120)
    assert all(30 <= p <= 120 and is_prime(p) for p in primes)
    assert len(primes) == count_primes(range(30, 121))


def test_primes_between_empty_ranges():
    assert primes_between(10, 5) == []
    assert primes_between(0, 1) == []


def test_is_prime_small_values():
    assert not is_prime(1)
    assert not is_prime(0)
    assert is_prime(2)
    assert not is_prime(4)


def test_kaing_year_worked_example():
    assert kaing_year(10, 12, 3, 9) == 33


@pytest.mark.parametrize("m,n,x,y", [(10, 12, 3, 9), (13, 11, 5, 6), (4, 6, 4, 6), (7, 5, 1, 1)])
def test_kaing_year_satisfies_both_cycles(m, n, x, y):
    year = kaing_year(m, n, x, y)
    assert year is not None
    assert (year - 1) % m + 1 == x
    assert (year - 1) % n + 1 == y
    assert year <= lcm(m, n)


def test_kaing_year_impossible():
    assert kaing_year(2, 4, 1, 2) is None


def test_kaing_year_rejects_out_of_range():
    with pytest.raises(ValueError):
        kaing_year(10, 12, 11, 1)


@pytest.mark.parametrize("n", [1, 16, 36, 97, 100, 360])
def test_divisors_complete_and_ordered(n):
    found = divisors(n)
    assert found == sorted(set(found))
    assert found == [d for d in range(1, n + 1) if n % d == 0]
    assert found[0] == 1 and found[-1] == n


def test_divisors_rejects_zero():
    with pytest.raises(ValueError):
        divisors(0)