# dsakit

A collection of classic data-structure and algorithm exercises written as
plain, importable Python: bit tricks, number theory, recursion, backtracking,
array problems, sorting, binary search variants, hashing, heaps, a streaming
median and linked lists.

The package has no runtime dependencies.

## Installation

```
pip install dsakit
```

To run the test suite, install the test extra and run pytest from the
project root:

```
pip install "dsakit[test]"
pytest
```

## What is inside

| Module                | Contents |
|-----------------------|----------|
| `dsakit.bits`         | `is_even`, `xor_swap`, `bit_is_set`, `set_bit`, `clear_bit`, `bits_to_flip` |
| `dsakit.numbers`      | `factorial`, `trailing_zeros`, `is_palindrome_number`, `composite_flags`, `primes_up_to`, `gcd`, `fast_power` |
| `dsakit.recursion`    | `recursive_sum`, `power`, `grid_paths`, `josephus`, `is_palindrome`, `subsets`, `permutations` |
| `dsakit.backtracking` | `solve_n_queens`, `format_board`, `solve_sudoku`, `format_grid` |
| `dsakit.arrays`       | `majority_element`, `max_subarray_sum`, `best_single_profit`, `total_profit`, `trapped_rain_water`, `reverse_in_place`, `merge_sorted` |
| `dsakit.sorting`      | `bubble_sort`, `insertion_sort`, `quick_sort`, `selection_sort`, `merge_sort` |
| `dsakit.searching`    | `binary_search`, `search_rotated`, `closest_element`, `first_occurrence`, `last_occurrence`, `rotation_count`, `mountain_peak`, `find_pivot`, `search_rotated_with_pivot`, `min_max_pages`, `search_nearly_sorted` |
| `dsakit.hashing`      | `count_distinct`, `union_size`, `intersection_size`, `subarray_with_sum`, `distinct_in_windows` |
| `dsakit.heaps`        | `heap_insert`, `heap_delete_root`, `sift_down`, `build_max_heap`, `heap_sort`, `descending`, `kth_largest`, `kth_smallest`, `min_rope_cost` |
| `dsakit.median`       | `MedianFinder` with `add`, `median` and `len()` |
| `dsakit.patterns`     | `diamond`, `parse_matrix`, `format_matrix` |
| `dsakit.singly`       | `Node`, `SinglyLinkedList` |
| `dsakit.doubly`       | `DoublyNode`, `DoublyLinkedList` |
| `dsakit.circular`     | `CircularLinkedList` |

## Conventions

- The sorting functions accept any iterable and return a new sorted list,
  leaving the input untouched.
- `build_max_heap`, `sift_down`, `heap_insert`, `heap_delete_root` and
  `reverse_in_place` work on the list they are given, in place.
- Search functions that can miss return `None` rather than a sentinel index.
- Invalid arguments (negative sizes, an out-of-range `k`, an empty sequence
  where an item is needed) raise `ValueError`; bad linked-list positions
  raise `IndexError`.
- `solve_n_queens` and `solve_sudoku` return `None` when there is no
  solution; `solve_sudoku` returns a solved copy and leaves its input alone.

## A quick tour

```python
from dsakit.bits import is_even, set_bit
from dsakit.numbers import gcd, fast_power, factorial

is_even(10)          # True
set_bit(5, 1)        # 7
gcd(12, 18)          # 6
fast_power(2, 10)    # 1024
factorial(5)         # 120
```

Searching a sorted sequence:

```python
from dsakit.searching import binary_search, first_occurrence

binary_search([1, 3, 6, 9, 10, 14], 3)   # 1
binary_search([1, 3, 6, 9, 10, 14], 7)   # None
first_occurrence([0, 1, 2, 10, 10, 10, 40], 10)   # 3
```

Solving puzzles by backtracking:

```python
from dsakit.backtracking import solve_n_queens, format_board

board = solve_n_queens(5)
print(format_board(board))
```

Generators for recursive enumerations:

```python
from dsakit.recursion import subsets, permutations

list(subsets("abc"))       # ['abc', 'ab', 'ac', 'a', 'bc', 'b', 'c', '']
list(permutations("ab"))   # ['ab', 'ba']
```

Linked lists behave like ordinary Python containers — they can be iterated,
measured with `len` and printed:

```python
from dsakit.singly import SinglyLinkedList

items = SinglyLinkedList([10, 20, 30])
items.push_front(5)
items.push_back(40)
len(items)           # 5
list(items)          # [5, 10, 20, 30, 40]
items.middle()       # 20
items.reverse_in_groups(2)
list(items)          # [10, 5, 30, 20, 40]
print(items)         # 10 ->5 ->30 ->20 ->40 -> NULL
```

`DoublyLinkedList` also supports `reversed()`, and `CircularLinkedList`
inserts after and deletes by value, starting from its tail node.

A running median over a stream of numbers:

```python
from dsakit.median import MedianFinder

finder = MedianFinder()
finder.add(3)
finder.median()      # 3.0
finder.add(50)
finder.median()      # 26.5
```

## What it does not do

dsakit is a library only: it installs no command-line program and does not
read input interactively. Text input is handled by `parse_matrix`, which
takes a string you supply.

## Supported Python

Python 3.10 and later.