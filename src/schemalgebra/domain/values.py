"""JSON value kinds and JSON-aware equality.

Python's own ``==`` treats ``True == 1`` and ``False == 0``; JSON does not.
Every literal comparison in the algebra goes through :func:`same_value`.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any


class ValueKind(StrEnum):
    """Kind of a concrete JSON value."""

    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    NULL = "null"
    ARRAY = "array"
    OBJECT = "object"


# Finite primitive domains, enumerable for exact exclusion.
FINITE_DOMAINS: dict[ValueKind, tuple[Any, ...]] = {
    ValueKind.BOOLEAN: (True, False),
    ValueKind.NULL: (None,),
}


def kind_of(value: Any) -> ValueKind:
    """Return the JSON kind of *value*.

    Examples:
        >>> kind_of(True)
        <ValueKind.BOOLEAN: 'boolean'>
        >>> kind_of(2.0)
        <ValueKind.INTEGER: 'integer'>
        >>> kind_of(2.5)
        <ValueKind.NUMBER: 'number'>
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, float):
        return ValueKind.INTEGER if value.is_integer() else ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    if isinstance(value, dict):
        return ValueKind.OBJECT
    msg = f"Not a JSON value: {value!r}"
    raise TypeError(msg)


def kind_within(kind: ValueKind | str, family: ValueKind | str) -> bool:
    """Check whether every value of *kind* is also of *family*.

    Integers are numbers; nothing else nests.
    """
    if kind == family:
        return True
    return kind == ValueKind.INTEGER and family == ValueKind.NUMBER


def same_value(left: Any, right: Any) -> bool:
    """JSON equality: kinds must agree (modulo integer/number), then values."""
    left_kind, right_kind = kind_of(left), kind_of(right)
    numeric = {ValueKind.INTEGER, ValueKind.NUMBER}
    if left_kind != right_kind and not {left_kind, right_kind} <= numeric:
        return False
    if left_kind == ValueKind.ARRAY:
        return len(left) == len(right) and all(
            same_value(a, b) for a, b in zip(left, right, strict=True)
        )
    if left_kind == ValueKind.OBJECT:
        return left.keys() == right.keys() and all(
            same_value(left[key], right[key]) for key in left
        )
    return bool(left == right)


def contains_value(values: tuple[Any, ...] | list[Any], value: Any) -> bool:
    """Membership test using :func:`same_value`."""
    return any(same_value(candidate, value) for candidate in values)
