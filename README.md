# algonotes

A collection of classic algorithm exercises as plain Python functions. Each
function takes ordinary Python values (lists, strings, integers) and returns
its result. Inputs are left untouched and new lists are returned, with one
exception: `algonotes.matrix.set_zeroes_constant_space` changes the matrix it
is given in place and returns `None`.

Invalid input is reported with exceptions, mostly `ValueError` (for example a
Sudoku board that is not 9x9 or has no solution, a `k` out of range in
`kth_permutation`, or a value other than 0, 1 or 2 in `sort_012`).

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `algonotes.puzzles`: `n_queens`, `n_queens_by_column`, `format_boards`,
  `rat_in_maze`, `solve_sudoku`
- `algonotes.backtracking`: `subsequences_with_sum`, `palindrome_partitions`,
  `min_palindrome_cuts`, `permutations`, `permutations_by_swap`,
  `kth_permutation`, `restore_ip_addresses`, `has_subset_sum`,
  `subsets_with_duplicates`
- `algonotes.arrays`: `next_permutation`, `rearrange_by_sign`, `reverse_array`,
  `reverse_pairs`, `rotate_right`, `rotate_left`, `rotate_by_one`,
  `smallest_missing_positive`, `sort_012`, `union_sorted`, `subarray_with_sum`
- `algonotes.matrix`: `rotate_image`, `set_zeroes`,
  `set_zeroes_constant_space`, `spiral_order`
- `algonotes.text`: `num_matching_subseq`, `orderly_queue`, `is_pangram`,
  `is_balanced`, `repeated_substring_pattern`, `reverse_each_word`,
  `reverse_words`, `frequency_sort`, `compress`, `my_atoi`,
  `array_strings_equal`, `full_justify`, `close_strings`, `is_anagram`,
  `check_compressed`, `is_palindrome`
- `algonotes.greedy`: `max_meetings`, `erase_overlap_intervals`,
  `average_waiting_time`, `check_valid_string`
- `algonotes.sliding_window`: `number_of_nice_subarrays`,
  `substrings_with_all_three`, `largest_variance`, `subarrays_with_k_distinct`
- `algonotes.bits`: `subsets`, `single_number`, `single_number_ii`,
  `single_number_iii`, `xor_range`
- `algonotes.numbers`: `power`, `prime_factors`, `pascal_row`,
  `pascal_triangle`, `ascending`, `descending`

## Example

```python
from algonotes.puzzles import n_queens, format_boards
from algonotes.text import my_atoi
from algonotes.arrays import subarray_with_sum

boards = n_queens(4)
print(len(boards))                              # 2
print(format_boards(boards))                    # one row per line, blank line after each board

print(my_atoi("   -42abc"))                     # -42
print(subarray_with_sum([1, 2, 3, 7, 5], 12))   # (2, 4)
print(subarray_with_sum([1, 2], 10))            # None
```

## What it does not do

There is no command-line program: nothing here prints results or reads
input. Functions such as `ascending`, `descending` and `format_boards` return
lists or text for the caller to print.