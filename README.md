# numtinker

Integer and calendar helpers, worked solutions to twenty-one classic number
puzzles, a dice prime-odds explorer, a toy set of atoms and a tokenizer for a
tiny Lisp. Pure Python with no dependencies beyond the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library

### Integer helpers: `numtinker.intutil`

```python
from numtinker import intutil

intutil.is_prime(9929)                              # True
intutil.factors(30)                                 # [1, 2, 3, 5, 6, 10, 15, 30]
intutil.proper_divisors(15)                         # [1, 3, 5]
intutil.are_amicable(220, 284)                      # True
intutil.fibonacci(4)                                # 8  (sequence 1, 2, 3, 5, 8, ...)
intutil.nth_prime(6)                                # 13
intutil.collatz_seq(13)                             # [13, 40, 20, 10, 5, 16, 8, 4, 2, 1]
intutil.greatest_product_of_n_digits_in(2, "987")   # 72
intutil.factorial(10)                               # 3628800
intutil.sum_of_digits("3628800")                    # 27
```

Also here: `divides`, `is_multiple_of`, `is_even`, `is_palindrome`,
`remove_if` (filters a list in place), `sum_of_squares`, `square_of_sums`,
`is_pythagorean_triplet`, `triplets_before`, `pythagorean_triplets_before`
(both return `Triplet` objects with fields `a`, `b`, `c`), `primes_below`
(largest first, with 2 last), `triangle_number` and `collatz`.
`nth_prime`, `collatz` and `factorial` raise `ValueError` for inputs
outside their domain.

### Calendar: `numtinker.dates`

`is_leap_year(year)`, `days_per_month(year, month)` (raises `ValueError`
for a month outside 1–12 or a year below 1), and a `Date` dataclass with
`year`, `month`, `date` and `day_of_week`. `Date.tomorrow()` moves the date
forward one day in place; `Date.roll_day_of_week()` cycles the weekday
counter through 1 to 7.

### Number words: `numtinker.words`

`int_to_words(n)` spells a number from 1 to 1000 in British English ("and"
after the hundreds); `letter_count(words)` counts the characters that are
neither spaces nor hyphens; `total_letters(limit)` totals the letters for
1 to `limit`.

### Puzzle solutions

One function per puzzle, each taking the puzzle's size as a parameter with
the puzzle's own value as default, so smaller cases can be tried quickly:

- `numtinker.problems_a`: `problem_1` to `problem_10`, plus
  `divided_by_all` and the `PalindromeProduct` result of `problem_4`.
- `numtinker.problems_b`: `problem_11` to `problem_14`, plus
  `greatest_grid_product` (rows, columns and both diagonals).
  `problem_14` returns a `(seed, chain_length)` pair.
- `numtinker.problems_c`: `problem_15`, `problem_16` and `problem_18` to
  `problem_21`, plus `count_lattice_paths` and `greedy_triangle_total`.
  `run(number)` solves any of puzzles 1–21 by number (puzzle 17 through
  `words.total_letters`) and raises `ValueError` for any other number.

`problem_18` walks the triangle greedily, stepping to the larger of the two
numbers below; it looks only one row ahead and so need not find the best
path.

### Dice: `numtinker.dice`

`Die(faces)` with `roll()`; `possible_primes(num_faces, num_dice)` lists
the prime totals a throw can make; `approximate_pi(max_ator)` finds the
fraction with both terms below `max_ator` nearest to pi. Also `divides`,
`floor_sqrt`, `is_even`, `divisors` and `is_prime`.

### Atoms: `numtinker.algebra`

`Atom(value)` compares by value; `Set` holds members in order, with
`add`, `contains`, `cardinality`, `len()`, `in` and iteration. Adding does
not remove duplicates.

### Lisp tokens: `numtinker.tokens` and `numtinker.scanner`

`TokenSymbol` names the token kinds (`UNDEFINED`, `LPAREN`, `RPAREN`,
`QUOTE`, `ATOM`, `DEFINE`); `Token` pairs a `trigger` string with a
`symbol`; `TokenSet` maps triggers to kinds (`match`, `triggers`,
`symbols`); `lisp_zero_token_set()` holds the parentheses and the quote.

```python
from numtinker.scanner import Scanner

for token in Scanner().scan("(car '(abc 42))"):
    print(token.trigger, token.symbol)
```

Runs of digits and runs of letters become `ATOM` tokens; spaces and tabs
separate tokens and are dropped; any other single character is looked up
in the token set and is `UNDEFINED` if unknown.

## Commands

```
numtinker-euler [N ...]                      # print answers to puzzles N (all 21 by default)
numtinker-dice [--max-faces F] [--max-dice D]  # prime totals per die size (defaults 50 and 1)
numtinker-algebra                            # a small demonstration of a set of atoms
numtinker-lisp                               # read lines and print the tokens they scan to
```

In `numtinker-lisp`, type `exit` or send end-of-file to leave; empty lines
are ignored.

## What it does not do

The Lisp side stops at tokens: there is no reader that builds lists from
them, no evaluator and no printer, so `numtinker-lisp` shows tokens rather
than running expressions.