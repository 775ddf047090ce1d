"""Literal/Primitive comparator — excluding ``const``/``enum``/``primitive`` from atomic shapes.

Comparison is by value-kind: ``"dog"`` is of kind string and is covered by
``primitive(string)``; ``3`` is not.  The comparator removes whole shapes
and members of a finite enum.  A primitive source is either covered as a
whole (``null`` by ``const null``, ``boolean`` by ``enum true false``) or
returned unchanged, so ``boolean - true`` stays ``boolean``.
"""

from __future__ import annotations

from typing import Any

from schemalgebra.algebra.normalize import make_enum
from schemalgebra.domain.descriptors import (
    NEVER,
    ConstDescriptor,
    Descriptor,
    EnumDescriptor,
    MetaType,
    PrimitiveDescriptor,
)
from schemalgebra.domain.values import FINITE_DOMAINS, ValueKind, kind_of, kind_within, same_value

LiteralDescriptor = ConstDescriptor | EnumDescriptor | PrimitiveDescriptor


def covers(excluded: LiteralDescriptor, value: Any) -> bool:
    """Check whether the literal-family descriptor *excluded* matches *value*."""
    if isinstance(excluded, ConstDescriptor):
        return same_value(excluded.value, value)
    if isinstance(excluded, EnumDescriptor):
        return any(same_value(candidate, value) for candidate in excluded.values)
    return kind_within(kind_of(value), excluded.kind)


def exclude_literal(source: Descriptor, excluded: LiteralDescriptor) -> Descriptor:
    """Remove *excluded* from an atomic *source*.

    *source* must not be a union, intersection, exclusion, never or error;
    the dispatch core handles those before reaching here.
    """
    match source.tag:
        case MetaType.CONST:
            assert isinstance(source, ConstDescriptor)
            return NEVER if covers(excluded, source.value) else source
        case MetaType.ENUM:
            assert isinstance(source, EnumDescriptor)
            return _exclude_from_enum(source, excluded)
        case MetaType.PRIMITIVE:
            assert isinstance(source, PrimitiveDescriptor)
            return _exclude_from_primitive(source, excluded)
        case _:
            # any, array, tuple, object: no partial exclusion is representable
            return source


def _exclude_from_enum(source: EnumDescriptor, excluded: LiteralDescriptor) -> Descriptor:
    remaining = [value for value in source.values if not covers(excluded, value)]
    if len(remaining) == len(source.values):
        return source
    return make_enum(remaining)


def _exclude_from_primitive(
    source: PrimitiveDescriptor, excluded: LiteralDescriptor
) -> Descriptor:
    if isinstance(excluded, PrimitiveDescriptor):
        return NEVER if kind_within(source.kind, excluded.kind) else source

    domain = FINITE_DOMAINS.get(ValueKind(source.kind), ())
    if domain and all(covers(excluded, value) for value in domain):
        return NEVER
    return source
