"""Solutions to number puzzles 15 to 21: lattice paths, digit sums, a greedy
triangle walk, calendar Sundays and amicable numbers, plus a command to run
any solved puzzle."""

from __future__ import annotations

import argparse
import math
from typing import Any, Callable, Dict, List, Optional, Sequence

from numtinker import problems_a, problems_b
from numtinker.dates import Date
from numtinker.intutil import factorial, sum_of_digits
from numtinker.words import total_letters

TRIANGLE: tuple = (
    (75,),
    (95, 64),
    (17, 47, 82),
    (18, 35, 87, 10),
    (20, 4, 82, 47, 65),
    (19, 1, 23, 75, 3, 34),
    (88, 2, 77, 73, 7, 63, 67),
    (99, 65, 4, 28, 6, 16, 70, 92),
    (41, 41, 26, 56, 83, 40, 80, 70, 33),
    (41, 48, 72, 33, 47, 32, 37, 16, 94, 29),
    (53, 71, 44, 65, 25, 43, 91, 52, 97, 51, 14),
    (70, 11, 33, 28, 77, 73, 17, 78, 39, 68, 17, 57),
    (91, 71, 52, 38, 17, 14, 91, 43, 58, 50, 27, 29, 48),
    (63, 66, 4, 68, 89, 53, 67, 30, 73, 16, 69, 87, 40, 31),
    (4, 62, 98, 27, 23, 9, 70, 98, 73, 93, 38, 53, 60, 4, 23),
)


def count_lattice_paths(width: int, height: int) -> int:
    """Count the right/down routes across a width x height grid of squares."""
    if width < 0 or height < 0:
        raise ValueError(f"grid dimensions must be non-negative, got {width}x{height}")
    return math.comb(width + height, width)


def problem_15(size: int = 20) -> int:
    """Count the lattice paths through a size x size grid."""
    return count_lattice_paths(size, size)


def problem_16(exponent: int = 1000) -> int:
    """Return the sum of the decimal digits of 2**exponent."""
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")
    return sum_of_digits(str(2**exponent))


def greedy_triangle_total(triangle: Sequence[Sequence[int]]) -> int:
    """Walk down the triangle, always stepping to the larger of the two
    numbers below, and return the total collected.

    On a tie the walk steps to the right-hand neighbour. This looks only one
    row ahead, so it need not find the maximum path.
    """
    if not triangle or not triangle[0]:
        raise ValueError("triangle must have at least one number")
    total = triangle[0][0]
    column = 0
    for row in triangle[1:]:
        left = row[column]
        right = row[column + 1] if column + 1 < len(row) else 0
        if left > right:
            total += left
        else:
            total += right
            column += 1
    return total


def problem_18() -> int:
    """Return the greedy total for the fifteen-row triangle."""
    return greedy_triangle_total(TRIANGLE)


def _reached_terminal_date(day: Date) -> bool:
    return day.year >= 2000 and day.month >= 12 and day.date >= 31


def problem_19() -> int:
    """Count the firsts of the month from 1 Jan 1901 up to 31 Dec 2000 that
    fall on the same weekday as 1 Jan 1901 (day-of-week counter 1)."""
    day = Date(year=1901, month=1, date=1, day_of_week=1)
    count = 0
    while not _reached_terminal_date(day):
        if day.date == 1 and day.day_of_week == 1:
            count += 1
        day.tomorrow()
    return count


def problem_20(n: int = 100) -> int:
    """Return the sum of the decimal digits of n!."""
    return sum_of_digits(str(factorial(n)))


def _divisor_sums(limit: int) -> List[int]:
    """Return d(k), the sum of proper divisors of k, for k in 0..limit."""
    sums = [0] * (limit + 1)
    for d in range(1, limit // 2 + 1):
        for multiple in range(2 * d, limit + 1, d):
            sums[multiple] += d
    return sums


def problem_21(limit: int = 10000) -> int:
    """Return the sum of every amicable number in pairs whose larger member
    is at most limit."""
    if limit < 2:
        return 0
    d = _divisor_sums(limit)
    total = 0
    for i in range(2, limit + 1):
        partner = d[i]
        if 1 <= partner < i and d[partner] == i:
            total += i + partner
    return total


_SOLUTIONS: Dict[int, Callable[[], Any]] = {
    1: problems_a.problem_1,
    2: problems_a.problem_2,
    3: problems_a.problem_3,
    4: problems_a.problem_4,
    5: problems_a.problem_5,
    6: problems_a.problem_6,
    7: problems_a.problem_7,
    8: problems_a.problem_8,
    9: problems_a.problem_9,
    10: problems_a.problem_10,
    11: problems_b.problem_11,
    12: problems_b.problem_12,
    13: problems_b.problem_13,
    14: problems_b.problem_14,
    15: problem_15,
    16: problem_16,
    17: lambda: total_letters(1000),
    18: problem_18,
    19: problem_19,
    20: problem_20,
    21: problem_21,
}


def run(number: int) -> Any:
    """Solve the numbered puzzle with its default inputs and return the answer."""
    try:
        solution = _SOLUTIONS[number]
    except KeyError:
        raise ValueError(f"no solution for problem {number}") from None
    return solution()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the answers to the requested puzzles (all of them by default)."""
    parser = argparse.ArgumentParser(description="Solve numbered number puzzles.")
    parser.add_argument(
        "numbers",
        nargs="*",
        type=int,
        metavar="N",
        help="puzzle numbers to solve (default: all)",
    )
    args = parser.parse_args(argv)
    numbers = args.numbers or sorted(_SOLUTIONS)
    for number in numbers:
        if number not in _SOLUTIONS:
            parser.error(f"no solution for problem {number}")
    for number in numbers:
        print(f"problem {number}: {run(number)}")
    return 0