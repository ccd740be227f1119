# kwaymerge

`kwaymerge` merges several sorted lists of integers into one sorted list.
A priority queue holds the current smallest value of each list. When only
one list still has values, the rest of that list is appended in one step.
If two lists offer the same value, the one that comes first wins.

## Installation

```
pip install .
```

## Command line

Each argument names a text file that holds one integer per line. The name
gets `.txt` added to it, and the file is looked for in `../test_data/`. Use
`--data-dir` to choose another directory:

```
kwaymerge first second third
kwaymerge --data-dir data first second
```

The program prints the merged list under `-----MERGED LIST-----`. It then
prints, under `-----TEST-----`, the values of all the input files joined
together and sorted. If this matches the merged list it prints
`DATA SE SHODUJI`. If not, it prints `CHYBA`. When a file cannot be read, or
a line does not start with an integer in the 32-bit signed range, the
program prints an error to standard error and exits with status 1.

## Library

```python
from kwaymerge.intlist import IntList, read_ints
from kwaymerge.merger import ListCollection, merge_sorted

merge_sorted([[1, 4, 9], [2, 3, 10]])   # [1, 2, 3, 4, 9, 10]

collection = ListCollection.from_files(["a.txt", "b.txt"])
collection.total_size()                  # number of values in both files
result = collection.merge()              # an IntList
print(result.format())                   # values separated by spaces
expected, ok = result.verify_merge(["a.txt", "b.txt"])
```

- `merge_sorted(lists)` takes any iterables of sorted integers and returns a
  plain `list`.
- `ListCollection(lists)` accepts `IntList` objects or other iterables of
  integers. `merge()` returns the result as an `IntList`.
- `read_ints(path)` reads one integer per line. Text after the leading
  integer on a line is ignored. A line with no integer raises `ValueError`,
  and so does a value outside the 32-bit signed range.

An `IntList` keeps a cursor over its values:

- `peek()` returns the value at the cursor.
- `advance()` returns that value and moves the cursor on. Both methods raise
  `IndexError` once the list is exhausted.
- `exhausted()` is true once every value has been read.
- `remaining()` returns the values that have not been read yet.
- `len()` and iteration work on all of the values, whatever the cursor
  position.
- `verify_merge(paths)` returns the sorted contents of the files and whether
  they equal the list.

The merge does not sort its inputs. Each list must already be in ascending
order, or the result will not be sorted.

## Tests

```
pip install .[test]
pytest
```