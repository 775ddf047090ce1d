"""Membership oracle — does a concrete JSON value belong to a descriptor's value-space?

This is the reference semantics the algebra is checked against: for any
descriptors A and B, a value matches ``exclude(A, B)`` only if it matches A
and does not match B, unless the algebra documents an over-approximation.
"""

from __future__ import annotations

from typing import Any

from schemalgebra.domain.descriptors import (
    ArrayDescriptor,
    ConstDescriptor,
    Descriptor,
    EnumDescriptor,
    ErrorDescriptor,
    ExclusionDescriptor,
    IntersectionDescriptor,
    MetaType,
    ObjectDescriptor,
    PrimitiveDescriptor,
    TupleDescriptor,
    UnionDescriptor,
)
from schemalgebra.domain.values import ValueKind, contains_value, kind_of, kind_within, same_value


class UndecidableError(ValueError):
    """Raised when membership is asked of an ``error`` descriptor."""

    def __init__(self, descriptor: ErrorDescriptor) -> None:
        super().__init__(f"Cannot decide membership: {descriptor.kind}: {descriptor.reason}")
        self.descriptor = descriptor


def matches(descriptor: Descriptor, value: Any) -> bool:
    """Return True if *value* lies in the value-space of *descriptor*.

    Raises:
        UndecidableError: If *descriptor* (or a sub-descriptor that must be
            consulted) is an ``error`` descriptor.
    """
    match descriptor.tag:
        case MetaType.ANY:
            return True
        case MetaType.NEVER:
            return False
        case MetaType.CONST:
            assert isinstance(descriptor, ConstDescriptor)
            return same_value(descriptor.value, value)
        case MetaType.ENUM:
            assert isinstance(descriptor, EnumDescriptor)
            return contains_value(descriptor.values, value)
        case MetaType.PRIMITIVE:
            assert isinstance(descriptor, PrimitiveDescriptor)
            return kind_within(kind_of(value), descriptor.kind)
        case MetaType.ARRAY:
            assert isinstance(descriptor, ArrayDescriptor)
            if kind_of(value) != ValueKind.ARRAY:
                return False
            return all(matches(descriptor.items, item) for item in value)
        case MetaType.TUPLE:
            assert isinstance(descriptor, TupleDescriptor)
            return _matches_tuple(descriptor, value)
        case MetaType.OBJECT:
            assert isinstance(descriptor, ObjectDescriptor)
            return _matches_object(descriptor, value)
        case MetaType.UNION:
            assert isinstance(descriptor, UnionDescriptor)
            return any(matches(member, value) for member in descriptor.members)
        case MetaType.INTERSECTION:
            assert isinstance(descriptor, IntersectionDescriptor)
            return all(matches(member, value) for member in descriptor.members)
        case MetaType.EXCLUSION:
            assert isinstance(descriptor, ExclusionDescriptor)
            return matches(descriptor.base, value) and not matches(descriptor.excluded, value)
        case MetaType.ERROR:
            assert isinstance(descriptor, ErrorDescriptor)
            raise UndecidableError(descriptor)


def _matches_tuple(descriptor: TupleDescriptor, value: Any) -> bool:
    if kind_of(value) != ValueKind.ARRAY:
        return False
    for index, item in enumerate(value):
        if index < len(descriptor.items):
            if not matches(descriptor.items[index], item):
                return False
        elif not matches(descriptor.additional_items, item):
            return False
    return True


def _matches_object(descriptor: ObjectDescriptor, value: Any) -> bool:
    if kind_of(value) != ValueKind.OBJECT:
        return False
    if any(key not in value for key in descriptor.required):
        return False
    for key, item in value.items():
        expected = descriptor.properties.get(key, descriptor.additional_properties)
        if not matches(expected, item):
            return False
    return True


def filter_values(descriptor: Descriptor, values: list[Any] | tuple[Any, ...]) -> list[Any]:
    """Return the members of *values* that *descriptor* accepts, in order."""
    return [value for value in values if matches(descriptor, value)]
