"""Regroup zipped tuples and build cartesian products of lists."""

from __future__ import annotations

from itertools import product
from typing import Any, Callable, Iterable

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
    "unzip2",
    "unzip3",
    "unzip4",
    "unzip5",
    "unzip6",
    "unzip7",
    "unzip8",
    "unzip9",
    "unzip_by2",
    "unzip_by3",
    "unzip_by4",
    "unzip_by5",
    "unzip_by6",
    "unzip_by7",
    "unzip_by8",
    "unzip_by9",
    "cross_join2",
    "cross_join3",
    "cross_join4",
    "cross_join5",
    "cross_join6",
    "cross_join7",
    "cross_join8",
    "cross_join9",
    "cross_join_by2",
    "cross_join_by3",
    "cross_join_by4",
    "cross_join_by5",
    "cross_join_by6",
    "cross_join_by7",
    "cross_join_by8",
    "cross_join_by9",
]


def _columns(rows: Iterable[tuple[Any, ...]], width: int) -> tuple[list[Any], ...]:
    """Split rows of ``width`` values into ``width`` lists."""
    columns: tuple[list[Any], ...] = tuple([] for _ in range(width))
    for row in rows:
        values = tuple(row)
        if len(values) != width:
            raise ValueError(f"expected {width} values, got {len(values)}")
        for column, value in zip(columns, values):
            column.append(value)
    return columns


def _unzip(tuples: Iterable[Any], width: int) -> tuple[list[Any], ...]:
    return _columns((item.unpack() for item in tuples), width)


def _unzip_by(
    items: Iterable[Any], iteratee: Callable[[Any], tuple[Any, ...]], width: int
) -> tuple[list[Any], ...]:
    return _columns((iteratee(item) for item in items), width)


def unzip2(tuples: Iterable[Tuple2]) -> tuple[list[Any], ...]:
    """Regroup 2-tuples into 2 lists."""
    return _unzip(tuples, 2)


def unzip3(tuples: Iterable[Tuple3]) -> tuple[list[Any], ...]:
    """Regroup 3-tuples into 3 lists."""
    return _unzip(tuples, 3)


def unzip4(tuples: Iterable[Tuple4]) -> tuple[list[Any], ...]:
    """Regroup 4-tuples into 4 lists."""
    return _unzip(tuples, 4)


def unzip5(tuples: Iterable[Tuple5]) -> tuple[list[Any], ...]:
    """Regroup 5-tuples into 5 lists."""
    return _unzip(tuples, 5)


def unzip6(tuples: Iterable[Tuple6]) -> tuple[list[Any], ...]:
    """Regroup 6-tuples into 6 lists."""
    return _unzip(tuples, 6)


def unzip7(tuples: Iterable[Tuple7]) -> tuple[list[Any], ...]:
    """Regroup 7-tuples into 7 lists."""
    return _unzip(tuples, 7)


def unzip8(tuples: Iterable[Tuple8]) -> tuple[list[Any], ...]:
    """Regroup 8-tuples into 8 lists."""
    return _unzip(tuples, 8)


def unzip9(tuples: Iterable[Tuple9]) -> tuple[list[Any], ...]:
    """Regroup 9-tuples into 9 lists."""
    return _unzip(tuples, 9)


def unzip_by2(items: Iterable[Any], iteratee: Callable[[Any], tuple]) -> tuple[list[Any], ...]:
    """Split each item into 2 values with ``iteratee`` and regroup them."""
    return _unzip_by(items, iteratee, 2)


def unzip_by3(items: Iterable[Any], iteratee: Callable[[Any], tuple]) -> tuple[list[Any], ...]:
    """Split each item into 3 values with ``iteratee`` and regroup them."""
    return _unzip_by(items, iteratee, 3)


def unzip_by4(items: Iterable[Any], iteratee: Callable[[Any], tuple]) -> tuple[list[Any], ...]:
    """Split each item into 4 values with ``iteratee`` and regroup them."""
    return _unzip_by(items, iteratee, 4)


def unzip_by5(items: Iterable[Any], iteratee: Callable[[Any], tuple]) -> tuple[list[Any], ...]:
    """Split each item into 5 values with ``iteratee`` and regroup them."""
    return _unzip_by(items, iteratee, 5)


def unzip_by6(items: Iterable[Any], iteratee: Callable[[Any], tuple]) -> tuple[list[Any], ...]:
    """Split each item into 6 values with ``iteratee`` and regroup them."""
    return _unzip_by(items, iteratee, 6)


def unzip_by7(items: Iterable[Any], iteratee: Callable[[Any], tuple]) -> tuple[list[Any], ...]:
    """Split each item into 7 values with ``iteratee`` and regroup them."""
    return _unzip_by(items, iteratee, 7)


def unzip_by8(items: Iterable[Any], iteratee: Callable[[Any], tuple]) -> tuple[list[Any], ...]:
    """Split each item into 8 values with ``iteratee`` and regroup them."""
    return _unzip_by(items, iteratee, 8)


def unzip_by9(items: Iterable[Any], iteratee: Callable[[Any], tuple]) -> tuple[list[Any], ...]:
    """Split each item into 9 values with ``iteratee`` and regroup them."""
    return _unzip_by(items, iteratee, 9)


def _cross(lists: tuple[Iterable[Any], ...], project: Callable[..., Any]) -> list[Any]:
    """Apply ``project`` to every combination, first list varying slowest."""
    return [project(*combo) for combo in product(*lists)]


def cross_join2(list_a, list_b) -> list[Tuple2]:
    """Cartesian product of 2 lists; empty if any list is empty."""
    return _cross((list_a, list_b), Tuple2)


def cross_join3(list_a, list_b, list_c) -> list[Tuple3]:
    """Cartesian product of 3 lists; empty if any list is empty."""
    return _cross((list_a, list_b, list_c), Tuple3)


def cross_join4(list_a, list_b, list_c, list_d) -> list[Tuple4]:
    """Cartesian product of 4 lists; empty if any list is empty."""
    return _cross((list_a, list_b, list_c, list_d), Tuple4)


def cross_join5(list_a, list_b, list_c, list_d, list_e) -> list[Tuple5]:
    """Cartesian product of 5 lists; empty if any list is empty."""
    return _cross((list_a, list_b, list_c, list_d, list_e), Tuple5)


def cross_join6(list_a, list_b, list_c, list_d, list_e, list_f) -> list[Tuple6]:
    """Cartesian product of 6 lists; empty if any list is empty."""
    return _cross((list_a, list_b, list_c, list_d, list_e, list_f), Tuple6)


def cross_join7(list_a, list_b, list_c, list_d, list_e, list_f, list_g) -> list[Tuple7]:
    """Cartesian product of 7 lists; empty if any list is empty."""
    return _cross((list_a, list_b, list_c, list_d, list_e, list_f, list_g), Tuple7)


def cross_join8(
    list_a, list_b, list_c, list_d, list_e, list_f, list_g, list_h
) -> list[Tuple8]:
    """Cartesian product of 8 lists; empty if any list is empty."""
    return _cross(
        (list_a, list_b, list_c, list_d, list_e, list_f, list_g, list_h), Tuple8
    )


def cross_join9(
    list_a, list_b, list_c, list_d, list_e, list_f, list_g, list_h, list_i
) -> list[Tuple9]:
    """Cartesian product of 9 lists; empty if any list is empty."""
    return _cross(
        (list_a, list_b, list_c, list_d, list_e, list_f, list_g, list_h, list_i),
        Tuple9,
    )


def cross_join_by2(list_a, list_b, project: Callable[..., Any]) -> list[Any]:
    """Cartesian product of 2 lists, each combination passed to ``project``."""
    return _cross((list_a, list_b), project)


def cross_join_by3(list_a, list_b, list_c, project: Callable[..., Any]) -> list[Any]:
    """Cartesian product of 3 lists, each combination passed to ``project``."""
    return _cross((list_a, list_b, list_c), project)


def cross_join_by4(
    list_a, list_b, list_c, list_d, project: Callable[..., Any]
) -> list[Any]:
    """Cartesian product of 4 lists, each combination passed to ``project``."""
    return _cross((list_a, list_b, list_c, list_d), project)


def cross_join_by5(
    list_a, list_b, list_c, list_d, list_e, project: Callable[..., Any]
) -> list[Any]:
    """Cartesian product of 5 lists, each combination passed to ``project``."""
    return _cross((list_a, list_b, list_c, list_d, list_e), project)


def cross_join_by6(
    list_a, list_b, list_c, list_d, list_e, list_f, project: Callable[..., Any]
) -> list[Any]:
    """Cartesian product of 6 lists, each combination passed to ``project``."""
    return _cross((list_a, list_b, list_c, list_d, list_e, list_f), project)


def cross_join_by7(
    list_a, list_b, list_c, list_d, list_e, list_f, list_g, project: Callable[..., Any]
) -> list[Any]:
    """Cartesian product of 7 lists, each combination passed to ``project``."""
    return _cross((list_a, list_b, list_c, list_d, list_e, list_f, list_g), project)


def cross_join_by8(
    list_a,
    list_b,
    list_c,
    list_d,
    list_e,
    list_f,
    list_g,
    list_h,
    project: Callable[..., Any],
) -> list[Any]:
    """Cartesian product of 8 lists, each combination passed to ``project``."""
    return _cross(
        (list_a, list_b, list_c, list_d, list_e, list_f, list_g, list_h), project
    )


def cross_join_by9(
    list_a,
    list_b,
    list_c,
    list_d,
    list_e,
    list_f,
    list_g,
    list_h,
    list_i,
    project: Callable[..., Any],
) -> list[Any]:
    """Cartesian product of 9 lists, each combination passed to ``project``."""
    return _cross(
        (list_a, list_b, list_c, list_d, list_e, list_f, list_g, list_h, list_i),
        project,
    )