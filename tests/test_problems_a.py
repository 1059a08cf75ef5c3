import pytest

from numtinker.intutil import Triplet, is_palindrome, is_prime
from numtinker.problems_a import (
    THOUSAND_DIGITS,
    PalindromeProduct,
    divided_by_all,
    problem_1,
    problem_2,
    problem_3,
    problem_4,
    problem_5,
    problem_6,
    problem_7,
    problem_8,
    problem_9,
    problem_10,
)


def test_divided_by_all_examples():
    assert divided_by_all(2520, range(1, 11))
    assert not divided_by_all(2519, range(1, 11))
    assert divided_by_all(7, [])


def test_problem_1_small():
    assert problem_1(10) == 23
    assert problem_1(1) == 0


def test_problem_1_grows_with_limit():
    assert problem_1(100) > problem_1(50)


def test_problem_2_small():
    assert problem_2(100) == 44


def test_problem_2_result_is_even():
    assert problem_2(4_000_000) % 2 == 0


def test_problem_3_worked_example():
    assert problem_3(13195) == 29


def test_problem_3_answer_is_prime_factor():
    result = problem_3(600851475143)
    assert is_prime(result)
    assert 600851475143 % result == 0


def test_problem_3_prime_input_raises():
    with pytest.raises(ValueError):
        problem_3(13)


def test_problem_4_two_digit_example():
    assert problem_4(100) == PalindromeProduct(91, 99, 9009)


def test_problem_4_three_digit_invariants():
    result = problem_4(1000)
    assert result.x * result.y == result.palindrome
    assert is_palindrome(result.palindrome)
    assert 100 <= result.x < 1000 and 100 <= result.y < 1000


def test_problem_5_worked_example():
    assert problem_5(10) == 2520


def test_problem_5_divisible_by_all():
    result = problem_5(20)
    assert divided_by_all(result, range(1, 21))
    assert not divided_by_all(result // 2, range(1, 21))


def test_problem_5_rejects_non_positive():
    with pytest.raises(ValueError):
        problem_5(0)


def test_problem_6_ten():
    assert problem_6(10) == 2640


def test_problem_7_sixth_prime():
    assert problem_7(6) == 13
    assert problem_7(1) == 2


def test_problem_8_four_digit_example():
    assert problem_8(4) == 5832


def test_problem_8_window_thirteen_bounds():
    assert len(THOUSAND_DIGITS) == 1000
    assert 0 < problem_8(13) <= 9 ** 13


def test_problem_9_small_example():
    assert problem_9(12) == Triplet(3, 4, 5)


def test_problem_9_thousand_invariants():
    t = problem_9(1000)
    assert t.a + t.b + t.c == 1000
    assert t.a < t.b < t.c
    assert t.a ** 2 + t.b ** 2 == t.c ** 2


def test_problem_9_no_triplet_raises():
    with pytest.raises(ValueError):
        problem_9(10)


def test_problem_10_worked_example():
    assert problem_10(10) == 17
    assert problem_10(1) == 0