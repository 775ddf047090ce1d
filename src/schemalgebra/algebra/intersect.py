"""Intersection operator — ``intersect(A, B)`` matches values matched by both.

Compound shapes are resolved away: unions distribute, exclusions push the
intersection into their base, intersections fold member by member.  Atomic
pairs are met directly.  Two structural composites only combine when both
are homogeneous arrays; other structural pairs have no combination rule and
produce an ``unrepresentable`` error.
"""

from __future__ import annotations

import functools
import logging
from typing import Any

from schemalgebra.algebra.frame import Frame, Recurse, root_frame
from schemalgebra.algebra.normalize import (
    compose_error,
    first_error,
    make_enum,
    make_exclusion,
    make_union,
)
from schemalgebra.domain.descriptors import (
    NEVER,
    STRUCTURAL_TAGS,
    ArrayDescriptor,
    ConstDescriptor,
    Descriptor,
    EnumDescriptor,
    ErrorDescriptor,
    ErrorKind,
    ExclusionDescriptor,
    IntersectionDescriptor,
    MetaType,
    PrimitiveDescriptor,
    UnionDescriptor,
    coerce_descriptor,
    error,
)
from schemalgebra.domain.membership import UndecidableError, matches
from schemalgebra.domain.values import kind_within

logger = logging.getLogger(__name__)


def intersect(left: Any, right: Any, *, max_depth: int | None = None) -> Descriptor:
    """Descriptor for values matched by both *left* and *right*.

    Never raises; malformed operands and unrepresentable combinations come
    back as ``error`` descriptors.
    """
    return intersect_in(left, right, root_frame(max_depth))


def intersect_in(left: Any, right: Any, frame: Frame) -> Descriptor:
    """:func:`intersect` continued inside an existing recursion frame."""
    left, right = coerce_descriptor(left), coerce_descriptor(right)
    if frame.exceeded:
        return frame.overflow("intersection")
    if isinstance(left, ErrorDescriptor):
        return left
    if isinstance(right, ErrorDescriptor):
        return right
    if left.tag == MetaType.NEVER or right.tag == MetaType.NEVER:
        return NEVER
    if left.tag == MetaType.ANY:
        return right
    if right.tag == MetaType.ANY:
        return left

    recurse: Recurse = functools.partial(intersect_in, frame=frame.descend())
    for one, other in ((left, right), (right, left)):
        if isinstance(one, UnionDescriptor):
            return make_union(recurse(member, other) for member in one.members)
    for one, other in ((left, right), (right, left)):
        if isinstance(one, ExclusionDescriptor):
            return make_exclusion(recurse(one.base, other), one.excluded)
    for one, other in ((left, right), (right, left)):
        if isinstance(one, IntersectionDescriptor):
            return _fold(one, other, recurse)
    return _intersect_atomic(left, right, recurse)


def _fold(source: IntersectionDescriptor, other: Descriptor, recurse: Recurse) -> Descriptor:
    cause = first_error(source.members)
    if cause is not None:
        return compose_error(cause, "intersection member")
    result = other
    for member in source.members:
        result = recurse(result, member)
        if isinstance(result, ErrorDescriptor):
            return compose_error(result, "intersection member")
        if result.tag == MetaType.NEVER:
            break
    return result


def _intersect_atomic(left: Descriptor, right: Descriptor, recurse: Recurse) -> Descriptor:
    for one, other in ((left, right), (right, left)):
        if isinstance(one, ConstDescriptor | EnumDescriptor):
            return _filter_literals(one, other)

    if isinstance(left, PrimitiveDescriptor) and isinstance(right, PrimitiveDescriptor):
        if kind_within(left.kind, right.kind):
            return left
        if kind_within(right.kind, left.kind):
            return right
        return NEVER
    if isinstance(left, PrimitiveDescriptor) or isinstance(right, PrimitiveDescriptor):
        return NEVER

    assert left.tag in STRUCTURAL_TAGS and right.tag in STRUCTURAL_TAGS
    return _intersect_structural(left, right, recurse)


def _filter_literals(source: ConstDescriptor | EnumDescriptor, other: Descriptor) -> Descriptor:
    values = (source.value,) if isinstance(source, ConstDescriptor) else source.values
    try:
        kept = [value for value in values if matches(other, value)]
    except UndecidableError as exc:
        return compose_error(exc.descriptor, f"intersection with {other.tag}")
    if len(kept) == len(values):
        return source
    return make_enum(kept)


def _family(tag: MetaType) -> str:
    return "object" if tag == MetaType.OBJECT else "list"


def _intersect_structural(left: Descriptor, right: Descriptor, recurse: Recurse) -> Descriptor:
    if _family(left.tag) != _family(right.tag):
        return NEVER
    if isinstance(left, ArrayDescriptor) and isinstance(right, ArrayDescriptor):
        items = recurse(left.items, right.items)
        if isinstance(items, ErrorDescriptor):
            return compose_error(items, "array items")
        return ArrayDescriptor(items=items)
    logger.debug("No combination rule for %s and %s", left.tag, right.tag)
    return error(
        ErrorKind.UNREPRESENTABLE,
        f"cannot intersect {left.tag} and {right.tag} shapes",
    )
