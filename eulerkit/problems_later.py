"""Solutions to problems 7 through 12."""

from __future__ import annotations

import math
from collections.abc import Iterator
from itertools import accumulate, count

from eulerkit.registry import register

_DIGITS = (
    "73167176531330624919225119674426574742355349194934"
    "96983520312774506326239578318016984801869478851843"
    "85861560789112949495459501737958331952853208805511"
    "12540698747158523863050715693290963295227443043557"
    "66896648950445244523161731856403098711121722383113"
    "62229893423380308135336276614282806444486645238749"
    "30358907296290491560440772390713810515859307960866"
    "70172427121883998797908792274921901699720888093776"
    "65727333001053367881220235421809751254540594752243"
    "52584907711670556013604839586446706324415722155397"
    "53697817977846174064955149290862569321978468622482"
    "83972241375657056057490261407972968652414535100474"
    "82166370484403199890008895243450658541227588666881"
    "16427171479924442928230863465674813919123162824586"
    "17866458359124566529476545682848912883142607690042"
    "24219022671055626321111109370544217506941658960408"
    "07198403850962455444362981230987879927244284909188"
    "84580156166097919133875499200524063689912560717606"
    "05886116467109405077541002256983155200055935729725"
    "71636269561882670428252483600823257530420752963450"
)

_GRID = (
    (8, 2, 22, 97, 38, 15, 0, 40, 0, 75, 4, 5, 7, 78, 52, 12, 50, 77, 91, 8),
    (49, 49, 99, 40, 17, 81, 18, 57, 60, 87, 17, 40, 98, 43, 69, 48, 4, 56, 62, 0),
    (81, 49, 31, 73, 55, 79, 14, 29, 93, 71, 40, 67, 53, 88, 30, 3, 49, 13, 36, 65),
    (52, 70, 95, 23, 4, 60, 11, 42, 69, 24, 68, 56, 1, 32, 56, 71, 37, 2, 36, 91),
    (22, 31, 16, 71, 51, 67, 63, 89, 41, 92, 36, 54, 22, 40, 40, 28, 66, 33, 13, 80),
    (24, 47, 32, 60, 99, 3, 45, 2, 44, 75, 33, 53, 78, 36, 84, 20, 35, 17, 12, 50),
    (32, 98, 81, 28, 64, 23, 67, 10, 26, 38, 40, 67, 59, 54, 70, 66, 18, 38, 64, 70),
    (67, 26, 20, 68, 2, 62, 12, 20, 95, 63, 94, 39, 63, 8, 40, 91, 66, 49, 94, 21),
    (24, 55, 58, 5, 66, 73, 99, 26, 97, 17, 78, 78, 96, 83, 14, 88, 34, 89, 63, 72),
    (21, 36, 23, 9, 75, 0, 76, 44, 20, 45, 35, 14, 0, 61, 33, 97, 34, 31, 33, 95),
    (78, 17, 53, 28, 22, 75, 31, 67, 15, 94, 3, 80, 4, 62, 16, 14, 9, 53, 56, 92),
    (16, 39, 5, 42, 96, 35, 31, 47, 55, 58, 88, 24, 0, 17, 54, 24, 36, 29, 85, 57),
    (86, 56, 0, 48, 35, 71, 89, 7, 5, 44, 44, 37, 44, 60, 21, 58, 51, 54, 17, 58),
    (19, 80, 81, 68, 5, 94, 47, 69, 28, 73, 92, 13, 86, 52, 17, 77, 4, 89, 55, 40),
    (4, 52, 8, 83, 97, 35, 99, 16, 7, 97, 57, 32, 16, 26, 26, 79, 33, 27, 98, 66),
    (88, 36, 68, 87, 57, 62, 20, 72, 3, 46, 33, 67, 46, 55, 12, 32, 63, 93, 53, 69),
    (4, 42, 16, 73, 38, 25, 39, 11, 24, 94, 72, 18, 8, 46, 29, 32, 40, 62, 76, 36),
    (20, 69, 36, 41, 72, 30, 23, 88, 34, 62, 99, 69, 82, 67, 59, 85, 74, 4, 36, 16),
    (20, 73, 35, 29, 78, 31, 90, 1, 74, 31, 49, 71, 48, 86, 81, 16, 23, 57, 5, 54),
    (1, 70, 54, 71, 83, 51, 54, 69, 16, 92, 33, 48, 61, 43, 52, 1, 89, 19, 67, 48),
)

# (dx, dy): right, down, down-right diagonal, down-left diagonal
_DIRECTIONS = ((1, 0), (0, 1), (1, 1), (-1, 1))


def is_prime(n: int) -> bool:
    """Trial-division primality test."""
    if n < 2:
        return False
    return all(n % i for i in range(2, math.isqrt(n) + 1))


def triangle_numbers() -> Iterator[int]:
    """Yield the triangle numbers 1, 3, 6, 10, ... without end."""
    return accumulate(count(1))


def count_divisors(n: int) -> int:
    """Number of positive divisors of ``n``; zero for ``n`` below 1."""
    if n < 1:
        return 0
    total = 1
    p = 2
    while p * p <= n:
        exponent = 0
        while n % p == 0:
            n //= p
            exponent += 1
        total *= exponent + 1
        p += 1
    if n > 1:
        total *= 2
    return total


@register("7")
def solve_007() -> int:
    """The 10001st prime number."""
    primes = (n for n in count(2) if is_prime(n))
    for index, prime in enumerate(primes, start=1):
        if index == 10_001:
            return prime
    raise AssertionError("unreachable")


def _largest_window_product(digits: list[int], size: int) -> int:
    return max(
        (math.prod(digits[start : start + size]) for start in range(len(digits) - size)),
        default=0,
    )


@register("8")
def solve_008() -> int:
    """Greatest product of thirteen adjacent digits in the 1000-digit number."""
    return _largest_window_product([int(c) for c in _DIGITS], 13)


@register("9")
def solve_009() -> int:
    """Product abc of the Pythagorean triplet with a + b + c = 1000."""
    for a in range(1, 333):
        for b in range(a + 1, 666):
            c = 1000 - a - b
            if c > b and a * a + b * b == c * c:
                return a * b * c
    return -1


@register("10")
def solve_010() -> int:
    """Sum of all primes below two million."""
    limit = 2_000_000
    sieve = bytearray([1]) * limit
    sieve[0:2] = b"\x00\x00"
    for i in range(2, math.isqrt(limit - 1) + 1):
        if sieve[i]:
            sieve[i * i :: i] = bytes(len(range(i * i, limit, i)))
    return sum(i for i, flag in enumerate(sieve) if flag)


def _grid_runs(length: int = 4) -> Iterator[tuple[int, ...]]:
    size = len(_GRID)
    span = length - 1
    for y in range(size):
        for x in range(size):
            for dx, dy in _DIRECTIONS:
                end_x, end_y = x + dx * span, y + dy * span
                if not (0 <= end_x < size and 0 <= end_y < size):
                    continue
                yield tuple(_GRID[y + dy * i][x + dx * i] for i in range(length))


@register("11")
def solve_011() -> int:
    """Greatest product of four adjacent numbers in the 20x20 grid."""
    return max((math.prod(run) for run in _grid_runs()), default=0)


@register("12")
def solve_012() -> int:
    """First triangle number with at least 500 divisors."""
    return next(t for t in triangle_numbers() if count_divisors(t) >= 500)