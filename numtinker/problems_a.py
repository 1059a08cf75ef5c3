"""Solutions to the first ten numbered number puzzles."""

from __future__ import annotations

import itertools
import math
from dataclasses import dataclass
from typing import Iterable, List

from numtinker.intutil import (
    Triplet,
    divides,
    fibonacci,
    greatest_product_of_n_digits_in,
    is_even,
    is_multiple_of,
    is_palindrome,
    is_prime,
    is_pythagorean_triplet,
    nth_prime,
    square_of_sums,
    sum_of_squares,
)

THOUSAND_DIGITS = (
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


@dataclass(frozen=True)
class PalindromeProduct:
    """A palindromic number together with the two factors that produced it."""

    x: int
    y: int
    palindrome: int


def divided_by_all(n: int, divisors: Iterable[int]) -> bool:
    """Return True if every one of the divisors divides n evenly."""
    return all(divides(d, n) for d in divisors)


def problem_1(limit: int = 1000) -> int:
    """Sum the natural numbers below limit that are multiples of 3 or 5."""
    return sum(
        i for i in range(1, limit) if is_multiple_of(i, 3) or is_multiple_of(i, 5)
    )


def problem_2(limit: int = 4_000_000) -> int:
    """Sum the even Fibonacci terms (1, 2, 3, 5, ...) that do not exceed limit."""
    terms = itertools.takewhile(
        lambda term: term <= limit, (fibonacci(i) for i in itertools.count())
    )
    return sum(term for term in terms if is_even(term))


def _odd_prime_factors(n: int) -> List[int]:
    """Return the distinct odd prime factors of n in ascending order."""
    while n > 1 and n % 2 == 0:
        n //= 2
    found: List[int] = []
    divisor = 3
    while divisor * divisor <= n:
        if n % divisor == 0:
            found.append(divisor)
            while n % divisor == 0:
                n //= divisor
        divisor += 2
    if n > 1:
        found.append(n)
    return found


def problem_3(n: int = 600851475143) -> int:
    """Return the largest odd prime factor of n that is smaller than n itself."""
    candidates = [p for p in _odd_prime_factors(n) if p < n]
    if not candidates:
        raise ValueError(f"{n} has no odd prime factor smaller than itself")
    return max(candidates)


def problem_4(upper: int = 1000) -> PalindromeProduct:
    """Find the largest palindrome that is a product of two numbers below upper.

    Ties keep the first pair met, scanning x then y in ascending order.
    """
    best = PalindromeProduct(0, 0, 0)
    for x in range(upper):
        for y in range(upper):
            product = x * y
            if product > best.palindrome and is_palindrome(product):
                best = PalindromeProduct(x, y, product)
    return best


def problem_5(n: int = 20) -> int:
    """Return the smallest positive number evenly divisible by each of 1..n."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    result = math.lcm(*range(1, n + 1))
    assert divided_by_all(result, range(1, n + 1))
    return result


def problem_6(n: int = 100) -> int:
    """Return the square of the sum minus the sum of the squares of 1..n."""
    return square_of_sums(n) - sum_of_squares(n)


def problem_7(n: int = 10001) -> int:
    """Return the nth prime."""
    return nth_prime(n)


def problem_8(window: int = 13) -> int:
    """Return the greatest product of window adjacent digits in the 1000-digit number."""
    return greatest_product_of_n_digits_in(window, THOUSAND_DIGITS)


def problem_9(total: int = 1000) -> Triplet:
    """Return the Pythagorean triplet a < b < c with a + b + c == total."""
    found = None
    for a in range(1, total):
        for b in range(a + 1, total - a):
            c = total - a - b
            if c <= b:
                break
            if is_pythagorean_triplet(a, b, c):
                found = Triplet(a, b, c)
    if found is None:
        raise ValueError(f"no Pythagorean triplet sums to {total}")
    return found


def _primes_below(limit: int) -> List[int]:
    if limit < 3:
        return []
    sieve = bytearray([1]) * limit
    sieve[0] = sieve[1] = 0
    for i in range(2, math.isqrt(limit - 1) + 1):
        if sieve[i]:
            sieve[i * i::i] = bytearray(len(range(i * i, limit, i)))
    return [i for i, flag in enumerate(sieve) if flag]


def problem_10(limit: int = 2_000_000) -> int:
    """Return the sum of all primes below limit."""
    return sum(_primes_below(limit))