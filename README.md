# contest_solvers

Solutions to short competitive-programming problems, each written as a plain function that takes Python values and returns the answer. A small module of number and counting helpers comes with them.

## Modules

- `contest_solvers.mathutils`: general helpers. It has `factorial`, `n_pr`, `n_cr`, `gcd`, `lcm`, `mod_pow` (modulo 1 000 000 007), `count_set_bits`, `total_set_bits`, `is_prime`, `binary_search` (returns -1 when the key is absent), `prime_sieve` (a list of booleans, one per number below the limit), `binary_string` (the low eleven bits), `is_even`, `char_frequency`, `digit_frequency` and `divisor_sum`.
- `contest_solvers.div2`: `nearly_lucky`, `tram_capacity`, `zeros_to_erase`, `inverse_permutation`, `can_sort`, `is_strong_password`, `gender_by_username`, `capitalize_word`, `rearrange_sum`, `pyramid_height`, `money_to_borrow`, `total_faces`, `years_to_exceed`, `wrong_subtraction`, `bitpp` and `min_operations`.
- `contest_solvers.div3`: `repeating_decrypt`, `boring_apartments`, `missing_problems` and `favorite_cube` (returns `"YES"`, `"NO"` or `"MAYBE"`).
- `contest_solvers.div4`: `round_summands`, `stair_or_peak` (returns `"STAIR"`, `"PEAK"` or `"NONE"`), `min_max`, `rearrange_distinct` (returns `None` when no different arrangement exists), `strings_intersect`, `best_multiple`, `good_prefixes`, `minimize`, `note_columns` and `frog_moves`.
- `contest_solvers.assorted`: `difficulty` (returns `"EASY"` or `"HARD"`), `sum_check`, `adjacent_product_sum`, `can_play`, `plus_equal_steps` and `longest_increasing_run`.

Yes/no questions are answered with `True` or `False`. Where a problem names its verdicts, the function returns the verdict string. Input that a problem cannot accept raises `ValueError`. Examples are an empty word, a sequence that is not a permutation, and a statement with no variable.

## Example

```python
from contest_solvers.div2 import nearly_lucky, bitpp
from contest_solvers.mathutils import gcd, is_prime

nearly_lucky(40047)        # False
nearly_lucky(7747774)      # True
bitpp(["X++", "--X"])      # 0
gcd(12, 18)                # 6
is_prime(97)               # True
```

## What it does not do

The package has no command-line program. It does not read problem input in contest format from standard input, and it does not print answers. To run a problem on contest input, parse the input yourself and call the matching function.

## Running the tests

```
pip install -e .[test]
pytest
```