"""Spell out numbers from 1 to 1000 in British English and count their letters."""

from __future__ import annotations

_ONES = {
    1: " one ",
    2: " two ",
    3: " three ",
    4: " four ",
    5: " five ",
    6: " six ",
    7: " seven ",
    8: " eight ",
    9: " nine ",
}

_TEENS = {
    10: " ten ",
    11: " eleven ",
    12: " twelve ",
    13: " thirteen ",
    14: " fourteen ",
    15: " fifteen ",
    16: " sixteen ",
    17: " seventeen ",
    18: " eighteen ",
    19: " nineteen ",
}

_TENS = {
    2: " twenty ",
    3: " thirty ",
    4: " forty ",
    5: " fifty ",
    6: " sixty ",
    7: " seventy ",
    8: " eighty ",
    9: " ninety ",
}


def int_to_words(n: int) -> str:
    """Spell out n (1 to 1000); words are separated by runs of spaces."""
    if not 1 <= n <= 1000:
        raise ValueError(f"n must be between 1 and 1000, got {n}")
    if n == 1000:
        return "one thousand "

    parts = []
    hundreds, n = divmod(n, 100)
    if hundreds:
        parts.append(_ONES[hundreds] + " hundred ")
        if n > 0:
            parts.append(" and")

    if n >= 20:
        tens, n = divmod(n, 10)
        parts.append(_TENS[tens])
    elif n >= 10:
        parts.append(_TEENS[n])
        n = 0

    if n > 0:
        parts.append(_ONES[n])
    return "".join(parts)


def letter_count(words: str) -> int:
    """Count the characters in words that are neither spaces nor hyphens."""
    return sum(1 for c in words if c not in " -")


def total_letters(limit: int) -> int:
    """Count the letters used in spelling out every number from 1 to limit."""
    return sum(letter_count(int_to_words(i)) for i in range(1, limit + 1))