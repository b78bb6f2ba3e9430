"""Build, unpack and zip fixed-size tuples."""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Any, Callable, Iterable, Iterator, Sequence

from loutil.types import (
    Tuple2,
    Tuple3,
    Tuple4,
    Tuple5,
    Tuple6,
    Tuple7,
    Tuple8,
    Tuple9,
)

__all__ = [
    "t2",
    "t3",
    "t4",
    "t5",
    "t6",
    "t7",
    "t8",
    "t9",
    "unpack2",
    "unpack3",
    "unpack4",
    "unpack5",
    "unpack6",
    "unpack7",
    "unpack8",
    "unpack9",
    "zip2",
    "zip3",
    "zip4",
    "zip5",
    "zip6",
    "zip7",
    "zip8",
    "zip9",
    "zip_by2",
    "zip_by3",
    "zip_by4",
    "zip_by5",
    "zip_by6",
    "zip_by7",
    "zip_by8",
    "zip_by9",
]


def t2(a: Any, b: Any) -> Tuple2:
    """Create a tuple of 2 values."""
    return Tuple2(a, b)


def t3(a: Any, b: Any, c: Any) -> Tuple3:
    """Create a tuple of 3 values."""
    return Tuple3(a, b, c)


def t4(a: Any, b: Any, c: Any, d: Any) -> Tuple4:
    """Create a tuple of 4 values."""
    return Tuple4(a, b, c, d)


def t5(a: Any, b: Any, c: Any, d: Any, e: Any) -> Tuple5:
    """Create a tuple of 5 values."""
    return Tuple5(a, b, c, d, e)


def t6(a: Any, b: Any, c: Any, d: Any, e: Any, f: Any) -> Tuple6:
    """Create a tuple of 6 values."""
    return Tuple6(a, b, c, d, e, f)


def t7(a: Any, b: Any, c: Any, d: Any, e: Any, f: Any, g: Any) -> Tuple7:
    """Create a tuple of 7 values."""
    return Tuple7(a, b, c, d, e, f, g)


def t8(a: Any, b: Any, c: Any, d: Any, e: Any, f: Any, g: Any, h: Any) -> Tuple8:
    """Create a tuple of 8 values."""
    return Tuple8(a, b, c, d, e, f, g, h)


def t9(
    a: Any, b: Any, c: Any, d: Any, e: Any, f: Any, g: Any, h: Any, i: Any
) -> Tuple9:
    """Create a tuple of 9 values."""
    return Tuple9(a, b, c, d, e, f, g, h, i)


def unpack2(tuple_: Tuple2) -> tuple[Any, ...]:
    """Return the values held by a 2-tuple."""
    return tuple_.unpack()


def unpack3(tuple_: Tuple3) -> tuple[Any, ...]:
    """Return the values held by a 3-tuple."""
    return tuple_.unpack()


def unpack4(tuple_: Tuple4) -> tuple[Any, ...]:
    """Return the values held by a 4-tuple."""
    return tuple_.unpack()


def unpack5(tuple_: Tuple5) -> tuple[Any, ...]:
    """Return the values held by a 5-tuple."""
    return tuple_.unpack()


def unpack6(tuple_: Tuple6) -> tuple[Any, ...]:
    """Return the values held by a 6-tuple."""
    return tuple_.unpack()


def unpack7(tuple_: Tuple7) -> tuple[Any, ...]:
    """Return the values held by a 7-tuple."""
    return tuple_.unpack()


def unpack8(tuple_: Tuple8) -> tuple[Any, ...]:
    """Return the values held by an 8-tuple."""
    return tuple_.unpack()


def unpack9(tuple_: Tuple9) -> tuple[Any, ...]:
    """Return the values held by a 9-tuple."""
    return tuple_.unpack()


def _rows(columns: Sequence[Iterable[Any]], sized_by: int | None = None) -> Iterator[tuple]:
    """Yield rows across ``columns``, padding short columns with None.

    The number of rows is the length of the longest of the first
    ``sized_by`` columns (all columns by default).
    """
    materialised = [list(column) for column in columns]
    size = max((len(column) for column in materialised[:sized_by]), default=0)
    return islice(zip_longest(*materialised, fillvalue=None), size)


def zip2(a: Iterable[Any], b: Iterable[Any]) -> list[Tuple2]:
    """Group the n-th elements of each list; missing ones become None."""
    return [Tuple2(*row) for row in _rows((a, b))]


def zip3(a: Iterable[Any], b: Iterable[Any], c: Iterable[Any]) -> list[Tuple3]:
    """Group the n-th elements of each list; missing ones become None."""
    return [Tuple3(*row) for row in _rows((a, b, c))]


def zip4(a, b, c, d) -> list[Tuple4]:
    """Group the n-th elements of each list; missing ones become None."""
    return [Tuple4(*row) for row in _rows((a, b, c, d))]


def zip5(a, b, c, d, e) -> list[Tuple5]:
    """Group the n-th elements of each list; missing ones become None."""
    return [Tuple5(*row) for row in _rows((a, b, c, d, e))]


def zip6(a, b, c, d, e, f) -> list[Tuple6]:
    """Group the n-th elements of each list; missing ones become None."""
    return [Tuple6(*row) for row in _rows((a, b, c, d, e, f))]


def zip7(a, b, c, d, e, f, g) -> list[Tuple7]:
    """Group the n-th elements of each list; missing ones become None."""
    return [Tuple7(*row) for row in _rows((a, b, c, d, e, f, g))]


def zip8(a, b, c, d, e, f, g, h) -> list[Tuple8]:
    """Group the n-th elements of each list; missing ones become None."""
    return [Tuple8(*row) for row in _rows((a, b, c, d, e, f, g, h))]


def zip9(a, b, c, d, e, f, g, h, i) -> list[Tuple9]:
    """Group the n-th elements of each list; missing ones become None."""
    return [Tuple9(*row) for row in _rows((a, b, c, d, e, f, g, h, i))]


def zip_by2(a, b, iteratee: Callable[..., Any]) -> list[Any]:
    """Apply ``iteratee`` to the n-th elements of each list."""
    return [iteratee(*row) for row in _rows((a, b))]


def zip_by3(a, b, c, iteratee: Callable[..., Any]) -> list[Any]:
    """Apply ``iteratee`` to the n-th elements of each list."""
    return [iteratee(*row) for row in _rows((a, b, c))]


def zip_by4(a, b, c, d, iteratee: Callable[..., Any]) -> list[Any]:
    """Apply ``iteratee`` to the n-th elements of each list."""
    return [iteratee(*row) for row in _rows((a, b, c, d))]


def zip_by5(a, b, c, d, e, iteratee: Callable[..., Any]) -> list[Any]:
    """Apply ``iteratee`` to the n-th elements of each list."""
    return [iteratee(*row) for row in _rows((a, b, c, d, e))]


def zip_by6(a, b, c, d, e, f, iteratee: Callable[..., Any]) -> list[Any]:
    """Apply ``iteratee`` to the n-th elements of each list."""
    return [iteratee(*row) for row in _rows((a, b, c, d, e, f))]


def zip_by7(a, b, c, d, e, f, g, iteratee: Callable[..., Any]) -> list[Any]:
    """Apply ``iteratee`` to the n-th elements of each list.

    The result length follows the longest of the first six lists.
    """
    return [iteratee(*row) for row in _rows((a, b, c, d, e, f, g), sized_by=6)]


def zip_by8(a, b, c, d, e, f, g, h, iteratee: Callable[..., Any]) -> list[Any]:
    """Apply ``iteratee`` to the n-th elements of each list.

    The result length follows the longest of the first seven lists.
    """
    return [iteratee(*row) for row in _rows((a, b, c, d, e, f, g, h), sized_by=7)]


def zip_by9(a, b, c, d, e, f, g, h, i, iteratee: Callable[..., Any]) -> list[Any]:
    """Apply ``iteratee`` to the n-th elements of each list."""
    return [iteratee(*row) for row in _rows((a, b, c, d, e, f, g, h, i))]