"""Small value types: key/value entries and fixed-size tuples."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = [
    "Entry",
    "Tuple2",
    "Tuple3",
    "Tuple4",
    "Tuple5",
    "Tuple6",
    "Tuple7",
    "Tuple8",
    "Tuple9",
]


@dataclass(frozen=True)
class Entry:
    """A key/value pair."""

    key: Any
    value: Any


@dataclass(frozen=True)
class Tuple2:
    """A group of 2 elements (pair)."""

    a: Any
    b: Any

    def unpack(self) -> tuple[Any, Any]:
        """Return the values held by the tuple."""
        return self.a, self.b


@dataclass(frozen=True)
class Tuple3:
    """A group of 3 elements."""

    a: Any
    b: Any
    c: Any

    def unpack(self) -> tuple[Any, Any, Any]:
        """Return the values held by the tuple."""
        return self.a, self.b, self.c


@dataclass(frozen=True)
class Tuple4:
    """A group of 4 elements."""

    a: Any
    b: Any
    c: Any
    d: Any

    def unpack(self) -> tuple[Any, Any, Any, Any]:
        """Return the values held by the tuple."""
        return self.a, self.b, self.c, self.d


@dataclass(frozen=True)
class Tuple5:
    """A group of 5 elements."""

    a: Any
    b: Any
    c: Any
    d: Any
    e: Any

    def unpack(self) -> tuple[Any, Any, Any, Any, Any]:
        """Return the values held by the tuple."""
        return self.a, self.b, self.c, self.d, self.e


@dataclass(frozen=True)
class Tuple6:
    """A group of 6 elements."""

    a: Any
    b: Any
    c: Any
    d: Any
    e: Any
    f: Any

    def unpack(self) -> tuple[Any, Any, Any, Any, Any, Any]:
        """Return the values held by the tuple."""
        return self.a, self.b, self.c, self.d, self.e, self.f


@dataclass(frozen=True)
class Tuple7:
    """A group of 7 elements."""

    a: Any
    b: Any
    c: Any
    d: Any
    e: Any
    f: Any
    g: Any

    def unpack(self) -> tuple[Any, Any, Any, Any, Any, Any, Any]:
        """Return the values held by the tuple."""
        return self.a, self.b, self.c, self.d, self.e, self.f, self.g


@dataclass(frozen=True)
class Tuple8:
    """A group of 8 elements."""

    a: Any
    b: Any
    c: Any
    d: Any
    e: Any
    f: Any
    g: Any
    h: Any

    def unpack(self) -> tuple[Any, Any, Any, Any, Any, Any, Any, Any]:
        """Return the values held by the tuple."""
        return self.a, self.b, self.c, self.d, self.e, self.f, self.g, self.h


@dataclass(frozen=True)
class Tuple9:
    """A group of 9 elements."""

    a: Any
    b: Any
    c: Any
    d: Any
    e: Any
    f: Any
    g: Any
    h: Any
    i: Any

    def unpack(self) -> tuple[Any, Any, Any, Any, Any, Any, Any, Any, Any]:
        """Return the values held by the tuple."""
        return (
            self.a,
            self.b,
            self.c,
            self.d,
            self.e,
            self.f,
            self.g,
            self.h,
            self.i,
        )