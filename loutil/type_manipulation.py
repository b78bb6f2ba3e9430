"""Helpers for nil checks, zero values, optional values and coalescing.

``None`` stands in for a nil pointer: an "optional" value is either a
value or ``None``.
"""

from __future__ import annotations

import dataclasses
from typing import Any, Iterable

__all__ = [
    "is_nil",
    "is_not_nil",
    "empty",
    "is_empty",
    "is_not_empty",
    "emptyable_to_ptr",
    "from_ptr",
    "from_ptr_or",
    "from_slice_ptr",
    "from_slice_ptr_or",
    "to_any_slice",
    "from_any_slice",
    "coalesce",
    "coalesce_or_empty",
    "coalesce_slice",
    "coalesce_slice_or_empty",
    "coalesce_map",
    "coalesce_map_or_empty",
]

# Reference-like containers: an empty one is still a real value, unlike None.
_REFERENCE_TYPES = (list, dict, set, bytearray)


def is_nil(x: Any) -> bool:
    """Return True if ``x`` is nil (``None``)."""
    return x is None


def is_not_nil(x: Any) -> bool:
    """Return True if ``x`` is not nil."""
    return not is_nil(x)


def empty(kind: type | None) -> Any:
    """Return the zero value of ``kind``, or None when it has none."""
    if kind is None:
        return None
    try:
        return kind()
    except TypeError:
        return None


def is_empty(value: Any) -> bool:
    """Return True if ``value`` equals the zero value of its type."""
    if value is None:
        return True
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return all(is_empty(getattr(value, f.name)) for f in dataclasses.fields(value))
    try:
        zero = type(value)()
    except TypeError:
        return False
    return bool(value == zero)


def is_not_empty(value: Any) -> bool:
    """Return True if ``value`` is not the zero value of its type."""
    return not is_empty(value)


def emptyable_to_ptr(value: Any) -> Any:
    """Return ``value``, or None if it is a zero value.

    Containers such as lists and dicts are kept even when empty; only
    ``None`` stands for a missing one.
    """
    if value is None:
        return None
    if isinstance(value, _REFERENCE_TYPES):
        return value
    return None if is_empty(value) else value


def from_ptr(value: Any, kind: type | None) -> Any:
    """Return ``value``, or the zero value of ``kind`` if it is None."""
    return empty(kind) if value is None else value


def from_ptr_or(value: Any, fallback: Any) -> Any:
    """Return ``value``, or ``fallback`` if it is None."""
    return fallback if value is None else value


def from_slice_ptr(collection: Iterable[Any], kind: type | None) -> list[Any]:
    """Return the values, with None replaced by the zero value of ``kind``."""
    return [from_ptr(item, kind) for item in collection]


def from_slice_ptr_or(collection: Iterable[Any], fallback: Any) -> list[Any]:
    """Return the values, with None replaced by ``fallback``."""
    return [from_ptr_or(item, fallback) for item in collection]


def to_any_slice(collection: Iterable[Any]) -> list[Any]:
    """Return the elements of ``collection`` as a new list."""
    return list(collection)


def from_any_slice(items: Iterable[Any], kind: type) -> tuple[list[Any], bool]:
    """Return ``(items, True)`` if every item is a ``kind``, else ``([], False)``."""
    result = list(items)
    if all(isinstance(item, kind) for item in result):
        return result, True
    return [], False


def coalesce(*args: Any) -> tuple[Any, bool]:
    """Return the first non-empty argument and True, or a zero value and False."""
    for value in args:
        if not is_empty(value):
            return value, True
    return (args[0] if args else None), False


def coalesce_or_empty(*args: Any) -> Any:
    """Return the first non-empty argument, or a zero value."""
    return coalesce(*args)[0]


def coalesce_slice(*args: Any) -> tuple[list[Any], bool]:
    """Return the first non-empty list and True, or ``([], False)``."""
    for value in args:
        if value is not None and len(value) > 0:
            return value, True
    return [], False


def coalesce_slice_or_empty(*args: Any) -> list[Any]:
    """Return the first non-empty list, or a new empty list."""
    return coalesce_slice(*args)[0]


def coalesce_map(*args: Any) -> tuple[dict[Any, Any], bool]:
    """Return the first non-empty mapping and True, or ``({}, False)``."""
    for value in args:
        if value is not None and len(value) > 0:
            return value, True
    return {}, False


def coalesce_map_or_empty(*args: Any) -> dict[Any, Any]:
    """Return the first non-empty mapping, or a new empty dict."""
    return coalesce_map(*args)[0]