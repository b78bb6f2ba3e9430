# loutil

Small helpers for working with fixed-size tuples and for handling `None`
and "zero" values in Python. The package has no dependencies outside the
standard library.

## Installation

```
pip install loutil
```

To run the test suite, install the test extra and run pytest:

```
pip install "loutil[test]"
pytest
```

## Tuple types

`loutil.types` defines:

- `Entry(key, value)`: a frozen key/value pair.
- `Tuple2` to `Tuple9`: frozen dataclasses with fields `a`, `b`, `c`, … in
  order. Each has an `unpack()` method returning its values as a plain
  Python tuple.

Being dataclasses, they compare by value: `Tuple2("a", 1) == Tuple2("a", 1)`.

## Building, unpacking and zipping

`loutil.tuples` provides:

- `t2` … `t9`: build a `Tuple2` … `Tuple9` from positional values.
- `unpack2` … `unpack9`: return the values of a tuple.
- `zip2` … `zip9`: group the n-th elements of each input into a tuple.
- `zip_by2` … `zip_by9`: pass the n-th elements of each input to a
  function and collect the results.

```python
from loutil.tuples import t2, unpack2, zip2, zip_by2

pair = t2("a", 1)
name, count = unpack2(pair)

zip2(["a", "b"], [1, 2])              # [Tuple2("a", 1), Tuple2("b", 2)]
zip2(["a", "b"], [1])                 # [Tuple2("a", 1), Tuple2("b", None)]
zip_by2(["a", "b"], [1, 2], lambda x, y: f"{x}{y}")   # ["a1", "b2"]
```

The result is as long as the longest input; missing positions are filled
with `None`. One exception: `zip_by7` sizes its result by the longest of its
first six inputs and `zip_by8` by the longest of its first seven, so a longer
last input is cut short.

## Unzipping and cross joins

`loutil.joins` provides:

- `unzip2` … `unzip9`: split a sequence of tuples into one list per field.
- `unzip_by2` … `unzip_by9`: call a function on each item that returns a
  plain tuple of N values, and split those into N lists. A `ValueError` is
  raised if it returns the wrong number of values.
- `cross_join2` … `cross_join9`: the cartesian product of the inputs as
  tuples, the first input varying slowest.
- `cross_join_by2` … `cross_join_by9`: the same product, with each
  combination passed to a projection function.

```python
from loutil.tuples import zip2
from loutil.joins import unzip2, unzip_by2, cross_join2, cross_join_by2

letters, numbers = unzip2(zip2(["a", "b"], [1, 2]))    # ["a", "b"], [1, 2]
unzip_by2([1, 2], lambda n: (n, n * 10))               # [1, 2], [10, 20]
cross_join2(["a", "b"], [1, 2])      # Tuple2 values for a1, a2, b1, b2
cross_join_by2(["a", "b"], [1, 2], lambda x, y: x * y)  # ["a", "aa", "b", "bb"]
```

A cross join is empty if any of its inputs is empty.

## None, zero values and coalescing

`loutil.type_manipulation` treats `None` as "missing" and the value a type
returns when called with no arguments (`0`, `""`, `[]`, `{}`, …) as its zero
value. A dataclass instance is empty when all its fields are empty.

- `is_nil`, `is_not_nil`: test for `None`.
- `empty(kind)`: the zero value of `kind`, or `None` if `kind` is `None` or
  cannot be called without arguments.
- `is_empty`, `is_not_empty`: compare a value with its type's zero value.
- `emptyable_to_ptr(value)`: `None` for a zero value, the value otherwise;
  lists, dicts, sets and bytearrays are kept even when empty.
- `from_ptr(value, kind)`, `from_ptr_or(value, fallback)`: replace `None`
  with a zero value or a fallback.
- `from_slice_ptr(collection, kind)`, `from_slice_ptr_or(collection,
  fallback)`: the same for every item of a collection.
- `to_any_slice(collection)`: the items as a new list.
- `from_any_slice(items, kind)`: `(items, True)` if every item is an instance
  of `kind`, otherwise `([], False)`.
- `coalesce(*args)`: `(first non-empty argument, True)`, or
  `(first argument or None, False)` when none is non-empty;
  `coalesce_or_empty` returns only the value.
- `coalesce_slice`, `coalesce_slice_or_empty`, `coalesce_map`,
  `coalesce_map_or_empty`: the first argument that is not `None` and not
  empty, or a new empty list or dict.

```python
from loutil.type_manipulation import (
    empty, is_empty, from_ptr_or, coalesce, coalesce_slice_or_empty,
)

empty(int)                     # 0
is_empty("")                   # True
from_ptr_or(None, "fallback")  # "fallback"
coalesce(0, 1, 2)              # (1, True)
coalesce_slice_or_empty([], [1, 2])   # [1, 2]
```

## What the package does not do

It is a library only: it has no command-line interface, and it offers no
general slice, map, math, condition, error-handling, retry or concurrency
helpers beyond the tuple and empty-value utilities described above.