import math

import pytest

from cpkit.modular import (
    MOD,
    BinomialTable,
    binomial,
    binomial_recursive,
    discrete_log,
    extended_gcd,
    mod_inverse,
    mod_inverse_prime,
    power_mod,
)


@pytest.mark.parametrize(
    "base,exponent,mod",
    [(2, 10, MOD), (3, 0, 7), (123456789, 987654321, MOD), (10, 5, 1), (7, 1, 13)],
)
def test_power_mod_matches_builtin(base, exponent, mod):
    assert power_mod(base, exponent, mod) == pow(base, exponent, mod)


def test_power_mod_default_modulus():
    assert power_mod(2, 100) == pow(2, 100, MOD)


def test_power_mod_negative_exponent():
    with pytest.raises(ValueError):
        power_mod(2, -1, 7)


@pytest.mark.parametrize("p", [7, 13, 101, MOD])
def test_mod_inverse_prime(p):
    for a in (1, 2, 5, 6, p - 1):
        assert a * mod_inverse_prime(a, p) % p == 1


def test_mod_inverse_prime_of_zero():
    with pytest.raises(ValueError):
        mod_inverse_prime(14, 7)


@pytest.mark.parametrize("a,b", [(240, 46), (46, 240), (17, 5), (12, 25), (7, 0), (0, 9)])
def test_extended_gcd_bezout(a, b):
    g, x, y = extended_gcd(a, b)
    assert g == math.gcd(a, b)
    assert a * x + b * y == g


@pytest.mark.parametrize("a,m", [(12, 25), (3, 10), (7, 40), (123, 1000)])
def test_mod_inverse_any_modulus(a, m):
    inv = mod_inverse(a, m)
    assert 0 <= inv < m
    assert a * inv % m == 1


def test_mod_inverse_not_coprime():
    with pytest.raises(ValueError):
        mod_inverse(6, 9)


@pytest.mark.parametrize("a,x,m", [(2, 5, 13), (3, 7, 17), (5, 100, 1009), (7, 12345, MOD)])
def test_discrete_log_solves_equation(a, x, m):
    b = pow(a, x, m)
    found = discrete_log(a, b, m)
    assert found is not None and found >= 1
    assert pow(a, found, m) == b


def test_discrete_log_no_solution():
    assert discrete_log(2, 3, 7) is None


def test_discrete_log_zero_base():
    assert discrete_log(0, 0, 5) == 1
    assert discrete_log(0, 3, 5) is None


@pytest.mark.parametrize("n,r", [(0, 0), (5, 2), (10, 5), (30, 15), (60, 1), (5, 7)])
def test_binomial_matches_math_comb(n, r):
    assert binomial(n, r) == math.comb(n, r)
    assert binomial_recursive(n, r) == math.comb(n, r)


def test_binomial_negative():
    with pytest.raises(ValueError):
        binomial(-1, 2)
    with pytest.raises(ValueError):
        binomial_recursive(3, -2)


def test_binomial_table_matches_comb():
    table = BinomialTable(MOD, 100)
    for n in range(0, 101, 7):
        for r in range(0, n + 1, 3):
            assert table.ncr(n, r) == math.comb(n, r) % MOD


def test_binomial_table_small_prime():
    table = BinomialTable(101, 100)
    assert table.ncr(100, 50) == math.comb(100, 50) % 101
    assert table.ncr(10, 11) == math.comb(10, 11)


def test_binomial_table_rejects_small_modulus():
    with pytest.raises(ValueError):
        BinomialTable(7, 100)


def test_binomial_table_out_of_range():
    table = BinomialTable(MOD, 20)
    with pytest.raises(ValueError):
        table.ncr(21, 3)