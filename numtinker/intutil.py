"""Integer helpers: divisibility, primes, sequences and digit arithmetic."""

from __future__ import annotations

import itertools
import math
from dataclasses import dataclass
from typing import Callable, List


@dataclass(frozen=True)
class Triplet:
    """Three integers a, b, c."""

    a: int
    b: int
    c: int


def divides(n: int, m: int) -> bool:
    """Return True if n divides m evenly."""
    return m % n == 0


def factors(n: int) -> List[int]:
    """Return every positive divisor of n in ascending order; empty for n < 1."""
    if n < 1:
        return []
    small: List[int] = []
    large: List[int] = []
    for i in range(1, math.isqrt(n) + 1):
        if n % i == 0:
            small.append(i)
            partner = n // i
            if partner != i:
                large.append(partner)
    return small + large[::-1]


def proper_divisors(n: int) -> List[int]:
    """Return the divisors of n that are smaller than n, ascending."""
    return factors(n)[:-1]


def are_amicable(m: int, n: int) -> bool:
    """Return True if the proper divisors of each number sum to the other."""
    return sum(proper_divisors(m)) == n and sum(proper_divisors(n)) == m


def is_multiple_of(n: int, m: int) -> bool:
    """Return True if n is a multiple of m."""
    return n % m == 0


def is_even(n: int) -> bool:
    """Return True if n is even."""
    return n % 2 == 0


def fibonacci(n: int) -> int:
    """Return the nth term of the sequence 1, 2, 3, 5, 8, ... (n counts from 0)."""
    if n == 0:
        return 1
    previous, current = 1, 2
    for _ in range(2, n + 1):
        previous, current = current, previous + current
    return current


def is_prime(n: int) -> bool:
    """Return True if n is a prime number."""
    if n < 2:
        return False
    if n in (2, 3):
        return True
    if n % 2 == 0:
        return False
    return all(n % d for d in range(3, math.isqrt(n) + 1, 2))


def remove_if(values: list, predicate: Callable[[int], bool]) -> None:
    """Remove, in place, every element of values for which predicate is true."""
    values[:] = [v for v in values if not predicate(v)]


def is_palindrome(n: int) -> bool:
    """Return True if the decimal form of n reads the same both ways."""
    text = str(n)
    return text == text[::-1]


def sum_of_squares(n: int) -> int:
    """Return 1**2 + 2**2 + ... + n**2, or 0 when n < 1."""
    return sum(i * i for i in range(1, n + 1))


def square_of_sums(n: int) -> int:
    """Return (1 + 2 + ... + n)**2, or 0 when n < 1."""
    if n < 1:
        return 0
    return sum(range(1, n + 1)) ** 2


def nth_prime(n: int) -> int:
    """Return the nth prime, counting 2 as the first."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    if n == 1:
        return 2
    count = 1
    for candidate in itertools.count(3, 2):
        if is_prime(candidate):
            count += 1
            if count >= n:
                return candidate
    raise AssertionError("unreachable")


def greatest_product_of_n_digits_in(n: int, digits: str) -> int:
    """Return the greatest product of n adjacent digits in the digit string."""
    products = (
        math.prod(int(c) for c in digits[start:start + n])
        for start in range(len(digits) - n + 1)
    )
    return max(products, default=0)


def is_pythagorean_triplet(a: int, b: int, c: int) -> bool:
    """Return True if a < b < c and a**2 + b**2 == c**2."""
    if not a < b < c:
        return False
    return a * a + b * b == c * c


def triplets_before(target: int) -> List[Triplet]:
    """Return every increasing triplet of positive integers below target."""
    return [Triplet(a, b, c) for a, b, c in itertools.combinations(range(1, target), 3)]


def pythagorean_triplets_before(target: int) -> List[Triplet]:
    """Return every Pythagorean triplet whose members are all below target."""
    result: List[Triplet] = []
    for a, b in itertools.combinations(range(1, target), 2):
        square = a * a + b * b
        c = math.isqrt(square)
        if c * c == square and b < c < target:
            result.append(Triplet(a, b, c))
    return result


def primes_below(n: int) -> List[int]:
    """Return the primes below n, largest first, with 2 always last.

    For n < 2 the list is empty; for n == 2 it is [2].
    """
    if n < 2:
        return []
    top = n - 1
    if is_even(top):
        top -= 1
    result = [i for i in range(top, 1, -2) if is_prime(i)]
    result.append(2)
    return result


def triangle_number(n: int) -> int:
    """Return the sum of the first n natural numbers, or 0 when n < 1."""
    if n < 1:
        return 0
    return n * (n + 1) // 2


def collatz(n: int) -> int:
    """Return the Collatz successor of the positive integer n."""
    if n < 1:
        raise ValueError(f"collatz is defined for positive integers, got {n}")
    if is_even(n):
        return n // 2
    return 3 * n + 1


def collatz_seq(n: int) -> List[int]:
    """Return the Collatz chain from n down to 1, both included."""
    result = [n]
    current = n
    while current != 1:
        current = collatz(current)
        result.append(current)
    return result


def factorial(n: int) -> int:
    """Return n! for a non-negative integer n."""
    if n < 0:
        raise ValueError(f"factorial is defined for non-negative integers, got {n}")
    return math.prod(range(1, n + 1))


def sum_of_digits(digits: str) -> int:
    """Return the sum of the decimal digits in the string."""
    return sum(int(c) for c in digits)