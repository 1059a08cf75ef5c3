import pytest

from numtinker.intutil import collatz_seq, factors, triangle_number
from numtinker.problems_b import (
    FIFTY_DIGIT_NUMBERS,
    GRID,
    greatest_grid_product,
    problem_11,
    problem_12,
    problem_13,
    problem_14,
)


def test_grid_shape():
    assert len(GRID) == 20
    assert all(len(row) == 20 for row in GRID)
    assert greatest_grid_product([[GRID[0][0]]], 1) == 8
    assert greatest_grid_product([[GRID[19][19]]], 1) == 48


def test_problem_11_at_least_worked_example():
    # 26 * 63 * 78 * 14 = 1788696 is one diagonal in the grid.
    assert problem_11() >= 1788696


def test_problem_11_matches_generic_function():
    assert problem_11(4) == greatest_grid_product(GRID, 4)


def test_window_one_is_largest_cell():
    assert greatest_grid_product(GRID, 1) == max(max(row) for row in GRID)


def test_transpose_invariant():
    transposed = [list(col) for col in zip(*GRID)]
    assert greatest_grid_product(transposed, 4) == greatest_grid_product(GRID, 4)


def test_mirror_invariant():
    mirrored = [list(reversed(row)) for row in GRID]
    flipped = list(reversed(GRID))
    expected = greatest_grid_product(GRID, 3)
    assert greatest_grid_product(mirrored, 3) == expected
    assert greatest_grid_product(flipped, 3) == expected


def test_anti_diagonal_found():
    grid = [
        [0, 0, 5],
        [0, 5, 0],
        [5, 0, 0],
    ]
    assert greatest_grid_product(grid, 3) == 125


def test_larger_window_never_larger_for_digits_above_one():
    grid = [[c + 2 for c in range(5)] for _ in range(5)]
    assert greatest_grid_product(grid, 3) >= greatest_grid_product(grid, 2)


def test_invalid_window():
    with pytest.raises(ValueError):
        greatest_grid_product(GRID, 0)


def test_problem_12_worked_example():
    assert problem_12(5) == 28


@pytest.mark.parametrize("target", [1, 3, 10, 20])
def test_problem_12_is_first_over_target(target):
    result = problem_12(target)
    assert len(factors(result)) > target
    i = 0
    while triangle_number(i) != result:
        assert len(factors(triangle_number(i))) <= target
        i += 1


def test_problem_13_sum():
    assert problem_13() == 5537376230390876637302048746832985971773659831892672
    assert str(problem_13())[:10] == "5537376230"


def test_problem_13_input_size():
    assert len(FIFTY_DIGIT_NUMBERS) == 100
    assert all(len(n) == 50 and n.isdigit() for n in FIFTY_DIGIT_NUMBERS)
    assert problem_13() == sum(int(n) for n in FIFTY_DIGIT_NUMBERS)


def test_collatz_example_length_consistent():
    assert len(collatz_seq(13)) == 10
    seed, length = problem_14(14)
    assert length >= 10


@pytest.mark.parametrize("limit", [2, 10, 50, 200])
def test_problem_14_invariants(limit):
    seed, length = problem_14(limit)
    assert 1 <= seed < limit
    assert length == len(collatz_seq(seed))
    lengths = [len(collatz_seq(i)) for i in range(1, limit)]
    assert max(lengths) == length
    assert lengths.index(length) + 1 == seed


def test_problem_14_empty_range():
    assert problem_14(1) == (0, 0)