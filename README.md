# iterkit

Small helpers for working with Python iterables. The package uses only the standard
library.

## Installation

```
pip install iterkit
```

## Modules

### `iterkit.iter_index`: select items by position

`get(iterable, index)` returns a lazy iterator over part of an iterable.
`index` is either:

- a `slice` without a step, half-open as in `range`; either bound may be left
  out, or
- an `InclusiveRange(start, end)`, which includes `end`.

Bounds must be non-negative integers. A negative bound raises `ValueError`, as
does a slice with a step. A bound that is not an integer raises `TypeError`,
and so does any other kind of index.

```python
from iterkit.iter_index import get, InclusiveRange

list(get(range(10), slice(2, 5)))           # [2, 3, 4]
list(get(range(10), InclusiveRange(2, 5)))  # [2, 3, 4, 5]
list(get(range(10), slice(None, 3)))        # [0, 1, 2]
list(get(range(10), slice(7, None)))        # [7, 8, 9]
```

### `iterkit.k_smallest`: the k smallest items

`k_smallest(iterable, k, key=None)` consumes the iterable and returns its `k`
smallest items in ascending order. It keeps a heap of at most `k` items.
`k_smallest_relaxed(iterable, k, key=None)` returns the same result and may
keep up to `2 * k` items while it works. A negative `k` raises `ValueError`.
With `k == 0` the iterable is still consumed, and the result is `[]`.

```python
from iterkit.k_smallest import k_smallest, k_smallest_relaxed

k_smallest([5, 1, 4, 2, 3], 3)                       # [1, 2, 3]
k_smallest_relaxed(["ccc", "a", "bb"], 2, key=len)   # ["a", "bb"]
```

`k_smallest_general(iterable, k, compare)` and
`k_smallest_relaxed_general(iterable, k, compare)` take a three-way comparison
function instead of a key. The function returns a negative number, zero or a
positive number. `key_to_cmp(key)` builds such a function from a key function.

### `iterkit.kmerge`: merge sorted iterables

`kmerge(iterables)` merges any number of iterables that are sorted in ascending
order into one ascending iterator. `kmerge_by(iterables, less_than)` uses a
`less_than(a, b)` predicate instead of `<`. Both return a `KMergeBy` iterator.
It reads the first item of every input as soon as it is built, and
`operator.length_hint` gives an estimate of the items that remain.

```python
from iterkit.kmerge import kmerge, kmerge_by

list(kmerge([[0, 2, 4], [1, 3, 5], [6, 7]]))
# [0, 1, 2, 3, 4, 5, 6, 7]

list(kmerge_by([[5, 3, 1], [4, 2]], lambda a, b: a >= b))
# [5, 4, 3, 2, 1]
```

### `iterkit.lazy_buffer`: a buffer filled on demand

`LazyBuffer(iterable)` pulls items from an iterable into a list only when asked
to. Once the source runs out it is never read again.

- `len(buf)` is the number of items buffered so far.
- `buf[i]` indexes or slices the buffered items.
- `get_next()` buffers one more item and returns whether one was available.
- `prefill(length)` reads items until `length` are buffered or the source is
  exhausted.
- `get_at(indices)` returns the buffered items at the given positions.
- `count()` returns the number of buffered items plus the number left in the
  source. It uses up the source to do so.

```python
from iterkit.lazy_buffer import LazyBuffer

buf = LazyBuffer("abcdef")
buf.prefill(3)
len(buf)            # 3
buf[1]              # "b"
buf.get_at([2, 0])  # ["c", "a"]
buf.get_next()      # True; "d" is now buffered
buf.count()         # 6
```

## Running the tests

```
pip install -e ".[test]"
pytest
```