"""Solutions to problems 1 through 6."""

from __future__ import annotations

import math

from eulerkit.registry import register


def largest_prime_factor(n: int) -> int:
    """Strip small factors from ``n`` while their square stays below it."""
    i = 2
    while i * i < n:
        while n % i == 0:
            n //= i
        i += 1
    return n


def is_palindrome(n: int) -> bool:
    """Tell whether the decimal digits of ``n`` read the same both ways."""
    if n < 0:
        return False
    digits = str(n)
    return digits == digits[::-1]


@register("1")
def solve_001() -> int:
    """Sum of all multiples of 3 or 5 below 1000."""
    return sum(i for i in range(1000) if i % 3 == 0 or i % 5 == 0)


def _fibonacci_below(limit: int):
    a, b = 1, 2
    while b < limit:
        yield b
        a, b = b, a + b


@register("2")
def solve_002() -> int:
    """Sum of the even Fibonacci terms below four million."""
    return sum(term for term in _fibonacci_below(4_000_000) if term % 2 == 0)


@register("3")
def solve_003() -> int:
    """Largest prime factor of 600851475143."""
    return largest_prime_factor(600851475143)


@register("4")
def solve_004() -> int:
    """Largest palindrome made from the product of two 3-digit numbers."""
    limit = 999
    return max(
        product
        for i in range(limit, 100, -1)
        for j in range(limit, i - 1, -1)
        if is_palindrome(product := i * j)
    )


@register("5")
def solve_005() -> int:
    """Smallest positive number evenly divisible by every number from 1 to 20."""
    return math.lcm(*range(1, 21))


@register("6")
def solve_006() -> int:
    """Square of the sum minus the sum of squares of the first 100 numbers."""
    numbers = range(1, 101)
    return sum(numbers) ** 2 - sum(i * i for i in numbers)