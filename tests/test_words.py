import pytest

from numtinker.words import int_to_words, letter_count, total_letters


def test_one_thousand():
    assert int_to_words(1000) == "one thousand "


def test_single_digit():
    assert int_to_words(5) == " five "


def test_worked_examples_from_british_usage():
    assert letter_count(int_to_words(342)) == 23
    assert letter_count(int_to_words(115)) == 20


def test_word_sequence_of_342():
    assert int_to_words(342).split() == ["three", "hundred", "and", "forty", "two"]


def test_first_five_numbers():
    assert total_letters(5) == 19
    assert [int_to_words(i).split() for i in range(1, 6)] == [
        ["one"], ["two"], ["three"], ["four"], ["five"]
    ]


def test_round_hundred_has_no_and():
    for hundreds in range(1, 10):
        words = int_to_words(hundreds * 100).split()
        assert "and" not in words
        assert words[-1] == "hundred"


def test_every_number_above_hundred_with_remainder_has_and():
    for n in range(101, 1000):
        if n % 100:
            assert "and" in int_to_words(n).split()


def test_letter_count_ignores_spaces_and_hyphens():
    assert letter_count(" three - two ") == len("threetwo")


def test_total_letters_is_cumulative():
    assert total_letters(20) == total_letters(19) + letter_count(int_to_words(20))


def test_total_letters_to_one_thousand():
    assert total_letters(1000) == 21124


@pytest.mark.parametrize("n", [0, -3, 1001])
def test_out_of_range_raises(n):
    with pytest.raises(ValueError):
        int_to_words(n)