# contestkit

This package provides plain Python functions that solve well-known entry-level
contest problems. Each function takes ordinary Python values such as strings,
ints, lists and tuples, and returns the answer.

## Installation

```
pip install .
```

## Modules

- `contestkit.strings` holds the problems about words and characters:
  `amusing_joke`, `anton_and_danik`, `distinct_letters`, `boy_or_girl`,
  `helpful_maths`, `is_pangram`, `compare_ignoring_case`, `is_translation`,
  `ultra_fast_xor`, `abbreviate`, `fix_word_case`, `capitalize_word`,
  `is_dangerous`, `produces_output`, `stones_to_remove`, `queue_after`,
  `hulk_feelings`, `snake_pattern` and `run_bit_program`.
- `contestkit.numbers` holds the arithmetic problems: `years_until_bigger`,
  `next_distinct_year`, `calculating_function`, `candy_distributions`,
  `moves_to_divisible`, `max_dominoes`, `orange_fraction`, `elephant_steps`,
  `min_bills`, `damaged_dragons`, `is_nearly_lucky`, `toasts_per_friend`,
  `borrow_needed`, `one_is_sum`, `round_summands`, `can_split_watermelon`,
  `wrong_subtract`, `even_odds`, `moves_to_center` and `meeting_distance`.
- `contestkit.sequences` holds the problems over lists of values:
  `polyhedron_faces`, `general_swaps`, `uniform_clashes`, `rooms_with_space`,
  `can_pass_all_levels`, `is_easy`, `horseshoes_to_buy`, `magnet_groups`,
  `advancers`, `untreated_crimes`, `gift_givers`, `problems_solved`,
  `tram_capacity`, `fence_width`, `gravity_flip` and `min_coins_to_take`.

If a function receives input it cannot answer, it raises `ValueError`. Examples
are an empty list of drinks or stops, binary strings of different lengths, a
matrix with no 1 in it, or a `receivers` list that is not a permutation of 1..n.

## Examples

```python
from contestkit.strings import abbreviate, helpful_maths, compare_ignoring_case
from contestkit.numbers import min_bills, next_distinct_year
from contestkit.sequences import gravity_flip, tram_capacity

abbreviate("localization")             # "l10n"
helpful_maths("3+2+1")                 # "1+2+3"
compare_ignoring_case("aaaa", "aaaA")  # 0
min_bills(125)                         # 3
next_distinct_year(1987)               # 2013
gravity_flip([3, 2, 1, 2])             # [1, 2, 2, 3]
tram_capacity([(0, 3), (2, 5), (4, 2), (4, 0)])  # 6
```

## What it does not do

The package is a library of functions only. It has no command-line program. It
does not read problem input in judge format from standard input, and it does not
print answers. Your own code must parse the input and pass it to the functions.

## Running the tests

```
pip install .[test]
pytest
```