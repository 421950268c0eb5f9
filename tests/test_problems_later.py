from itertools import islice

import pytest

from eulerkit import problems_later as pl


@pytest.mark.parametrize("n", [2, 3, 5, 7, 13, 97, 7919])
def test_is_prime_true(n):
    assert pl.is_prime(n) is True


@pytest.mark.parametrize("n", [-7, 0, 1, 4, 9, 15, 7917])
def test_is_prime_false(n):
    assert pl.is_prime(n) is False


def test_triangle_numbers_differences_grow_by_one():
    first = list(islice(pl.triangle_numbers(), 50))
    assert first[0] == 1
    gaps = [b - a for a, b in zip(first, first[1:])]
    assert gaps == list(range(2, 51))


@pytest.mark.parametrize("n", [0, -5])
def test_count_divisors_nonpositive(n):
    assert pl.count_divisors(n) == 0


def test_count_divisors_one():
    assert pl.count_divisors(1) == 1


def test_count_divisors_matches_divisor_list():
    for n in range(1, 300):
        divisors = [d for d in range(1, n + 1) if n % d == 0]
        assert pl.count_divisors(n) == len(divisors)


def test_count_divisors_prime_power():
    assert pl.count_divisors(2**10) == 10 + 1


def test_solve_007_is_10001st_prime():
    result = pl.solve_007()
    assert pl.is_prime(result)
    assert sum(1 for n in range(result + 1) if pl.is_prime(n)) == 10_001


def test_solve_008_value():
    assert pl.solve_008() == 23514624000


def test_solve_009_value():
    assert pl.solve_009() == 31875000


def test_solve_010_value():
    assert pl.solve_010() == 142913828922


def test_solve_011_is_diagonal_run():
    assert pl.solve_011() == 89 * 94 * 97 * 87


def test_solve_012_first_with_enough_divisors():
    result = pl.solve_012()
    assert pl.count_divisors(result) >= 500
    for t in pl.triangle_numbers():
        if t == result:
            break
        assert pl.count_divisors(t) < 500
    else:
        pytest.fail("result is not a triangle number")