# dsakit

Classic data structures and algorithms in plain Python, with no dependencies
outside the standard library. Requires Python 3.10 or later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

### `dsakit.sorting`

- `bin_sort(items)` sorts a list of non-negative integers in place. It puts
  each value into a bin and then reads the bins back in order. It raises
  `ValueError` if any value is negative.
- `insert_sort(items)` is a stable in-place insertion sort.
- `selection_sort(items)` is an in-place selection sort. It is not stable.
- `is_sorted(items, order=SortOrder.ASCENDING)` checks the order of a
  sequence. `SortOrder.ASCENDING` means non-decreasing and
  `SortOrder.DESCENDING` means non-increasing.

### `dsakit.combinatorics`

- `combination(text, size)` returns every distinct combination of `size`
  characters of `text`. The characters in each combination are sorted, and
  repeated characters do not produce repeated combinations.
  `combination("", 0)` returns `[""]`. A `size` larger than the text returns
  `[]`.
- `permutation(text)` returns the permutations of `text`, built by swapping
  characters after sorting them. A character equal to the one at the current
  position is skipped.

### `dsakit.sequences`

- `reverse_elements(items)` reverses a mutable sequence in place.
- `left_shift_elements(items, positions)` shifts a mutable sequence in place.
  `right_shift_elements(items, positions)` does the same in the other
  direction. Vacated slots are filled with the element type's default value,
  for example `0` for ints and `""` for strings. A shift larger than the
  sequence is capped at its length. A negative shift raises `ValueError`.
- `merge_elements(first, second)` merges two ascending iterables into a new
  ascending list. When values are equal, the one from `second` comes first.
- `delete_duplicates(items)` removes repeated values from a list in place and
  keeps the first occurrence of each.
- `find_duplicate_elements(items)` lists each value that occurs at least
  twice, once each, in order of first appearance. It returns `None` if there
  are no duplicates.

### `dsakit.heap`

`MinHeap` is a binary min-heap backed by a list.

- `insert(value)` adds a value.
- `pop()` removes and returns the smallest value. It returns `None` when the
  heap is empty.
- `to_list()` returns a copy of the array in heap order.
- `len(heap)` gives the number of stored values.

### `dsakit.matrix`

Square matrices that store only the entries their shape needs.

- `DiagonalMatrix(size)` stores only the main diagonal. It can also be built
  with `DiagonalMatrix.from_diagonal(values)` or
  `DiagonalMatrix.from_rows(rows)`. Setting an off-diagonal entry raises
  `ValueError`.
- `LowerTriangularMatrix(rows, columns)` stores the entries on and below the
  diagonal. It can also be built with `LowerTriangularMatrix.from_rows(rows)`.
  Entries above the diagonal read as `0`, and setting one raises
  `ValueError`.
- `SymmetricMatrix(rows, columns)` stores `(i, j)` and `(j, i)` as one entry.
  It can also be built with `SymmetricMatrix.from_rows(rows)`, which reads the
  lower triangle.

The two-argument constructors raise `ValueError` unless `rows == columns`. The
`from_rows` constructors raise `ValueError` for non-square input.

All three share the `MatrixBase` interface:

- `get(i, j)` and `set(i, j, value)` read and write entries. Indexing with
  `m[i, j]` works too.
- The properties `size` (rows times columns), `rows` and `columns` give the
  shape.
- `to_rows()` returns the full matrix as a list of lists.

Indices out of range raise `IndexError`.

### `dsakit.sparse`

`SparseMatrix(rows, columns)` is a matrix of any shape. It keeps only its
non-zero entries, as `Element(i, j, value)` records sorted by row and then
column.

- Setting an entry to `0` removes it.
- `elements()` returns the stored records.
- `copy()` returns an independent copy.
- `add(other)` or `a + b` returns the element-wise sum. It raises `ValueError`
  if the shapes differ.

### `dsakit.taylor`

Four ways to approximate e**x with `n` terms of its Taylor series:

- `e_taylor_recursive(x, n)`
- `e_taylor_iterative(x, n)`
- `e_taylor_iterative_optimized(x, n)` uses the nested (Horner) form.
- `e_taylor_recursive_optimized(x, n)` uses the nested (Horner) form.

The recursive variants raise `ValueError` unless `n` is a non-negative
integer.

## Example

```python
from dsakit.sorting import insert_sort, is_sorted, SortOrder
from dsakit.combinatorics import combination
from dsakit.heap import MinHeap
from dsakit.matrix import SymmetricMatrix
from dsakit.sparse import SparseMatrix

data = [5, 2, 9, 1]
insert_sort(data)
assert data == [1, 2, 5, 9]
assert is_sorted(data, SortOrder.ASCENDING)

assert sorted(combination("abc", 2)) == ["ab", "ac", "bc"]

heap = MinHeap()
for value in (4, 1, 3):
    heap.insert(value)
assert heap.pop() == 1
assert len(heap) == 2

m = SymmetricMatrix.from_rows([[1, 2], [2, 3]])
assert m.get(0, 1) == m.get(1, 0) == 2

a = SparseMatrix(3, 3)
a.set(0, 0, 5)
b = SparseMatrix(3, 3)
b.set(0, 0, 3)
assert (a + b).get(0, 0) == 8
```

## Command line

```
dsakit-taylor [--x X] [--terms N]
```

This command runs each of the four Taylor-series variants and prints each
result with the time it took in microseconds. `--x` defaults to 5 and
`--terms` defaults to 15.