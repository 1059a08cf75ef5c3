"""Dice and the primes that a throw of them can total."""

from __future__ import annotations

import argparse
import math
import random
from typing import List, Optional, Sequence, Tuple

from numtinker import intutil


class Die:
    """A fair die whose faces show 1 to `faces`."""

    def __init__(self, faces: int, rng: Optional[random.Random] = None) -> None:
        if faces < 1:
            raise ValueError(f"a die needs at least one face, got {faces}")
        self.faces = faces
        self._rng = rng if rng is not None else random.Random()

    def roll(self) -> int:
        """Return a face value chosen uniformly from 1 to faces."""
        return self._rng.randint(1, self.faces)


def divides(n: int, m: int) -> bool:
    """Return True if n divides m evenly."""
    return intutil.divides(n, m)


def floor_sqrt(n: int) -> int:
    """Return the largest i below n with i*i <= n; 0 when n < 2."""
    if n < 2:
        return 0
    return math.isqrt(n)


def is_even(n: int) -> bool:
    """Return True if n is even."""
    return intutil.is_even(n)


def divisors(n: int) -> List[int]:
    """Return every positive divisor of n, ascending."""
    return intutil.factors(n)


def is_prime(n: int) -> bool:
    """Return True if n has exactly two divisors."""
    return intutil.is_prime(n)


def approximate_pi(max_ator: int) -> Tuple[int, int]:
    """Return (numerator, denominator), both below max_ator, whose ratio is
    nearest to pi.

    Among equally near fractions the smallest numerator, then the smallest
    denominator, wins. Returns (1, 1) when max_ator is at most 1.
    """
    if max_ator <= 1:
        return 1, 1
    top = max_ator - 1
    best: Tuple[float, int, int] = (100.0, 1, 1)
    for denominator in range(1, max_ator):
        below = math.floor(math.pi * denominator)
        for numerator in {min(max(below, 1), top), min(max(below + 1, 1), top)}:
            distance = abs(math.pi - numerator / denominator)
            candidate = (distance, numerator, denominator)
            if distance < 100.0 and candidate < best:
                best = candidate
    return best[1], best[2]


def possible_primes(num_faces: int, num_dice: int) -> List[int]:
    """Return the primes that num_dice dice of num_faces faces can total."""
    low = num_dice
    high = num_faces * num_dice
    return [i for i in range(low, high + 1) if is_prime(i)]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print, for each die size, how many possible totals are prime."""
    parser = argparse.ArgumentParser(
        description="Count the prime totals of throws of dice."
    )
    parser.add_argument("--max-faces", type=int, default=50)
    parser.add_argument("--max-dice", type=int, default=1)
    args = parser.parse_args(argv)

    for num_faces in range(2, args.max_faces + 1):
        for num_dice in range(1, args.max_dice + 1):
            num_primes = len(possible_primes(num_faces, num_dice))
            combinations = num_faces**num_dice
            ratio = num_primes / combinations
            print(
                f"{num_dice} D{num_faces}: {num_primes} | {combinations} = {ratio:.6g}"
            )
    return 0