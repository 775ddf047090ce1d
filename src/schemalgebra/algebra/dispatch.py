"""Dispatch core — ``exclude(A, B)``: values matched by A but not by B.

The case is selected by B's tag through :data:`_CASES`, which must cover
every :class:`~schemalgebra.domain.descriptors.MetaType` (checked at import).
Compound cases recurse through the component modules, which call back here
with a deeper :class:`~schemalgebra.algebra.frame.Frame`.

INVARIANT: ``exclude`` never raises.  Malformed operands, unrepresentable
results and runaway nesting are returned as ``error`` descriptors, and an
``error`` operand is returned unchanged.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import Any

from schemalgebra.algebra.exclusion import exclude_exclusion, exclude_from_exclusion
from schemalgebra.algebra.frame import Frame, Recurse, root_frame
from schemalgebra.algebra.intersection import exclude_from_intersection, exclude_intersection
from schemalgebra.algebra.literals import exclude_literal
from schemalgebra.algebra.union import exclude_from_union, exclude_union
from schemalgebra.domain.descriptors import (
    NEVER,
    ConstDescriptor,
    Descriptor,
    EnumDescriptor,
    ErrorDescriptor,
    ExclusionDescriptor,
    IntersectionDescriptor,
    MetaType,
    PrimitiveDescriptor,
    UnionDescriptor,
    coerce_descriptor,
)

logger = logging.getLogger(__name__)

Handler = Callable[[Descriptor, Any, Frame], Descriptor]


def exclude(source: Any, excluded: Any, *, max_depth: int | None = None) -> Descriptor:
    """Descriptor for the values matched by *source* but not by *excluded*.

    Args:
        source: Descriptor A (or its JSON mapping form).
        excluded: Descriptor B (or its JSON mapping form).
        max_depth: Recursion limit; defaults to ``DEFAULT_MAX_DEPTH``.

    Returns:
        The difference in normal form.  An ``error`` descriptor means the
        algebra could not determine the result, not that it is empty.
    """
    result = exclude_in(source, excluded, root_frame(max_depth))
    if isinstance(result, ErrorDescriptor):
        logger.debug("exclude produced error (%s): %s", result.kind, result.reason)
    return result


def exclude_in(source: Any, excluded: Any, frame: Frame) -> Descriptor:
    """:func:`exclude` continued inside an existing recursion frame."""
    source, excluded = coerce_descriptor(source), coerce_descriptor(excluded)
    if frame.exceeded:
        return frame.overflow("exclusion")
    if isinstance(excluded, ErrorDescriptor):
        return excluded
    if isinstance(source, ErrorDescriptor):
        return source
    if source.tag == MetaType.NEVER:
        return NEVER
    return _CASES[excluded.tag](source, excluded, frame)


def _recurse(frame: Frame) -> Recurse:
    return functools.partial(exclude_in, frame=frame.descend())


# --- Cases, keyed by the excluded descriptor's tag ---


def _exclude_any(source: Descriptor, excluded: Any, frame: Frame) -> Descriptor:
    return NEVER


def _exclude_never(source: Descriptor, excluded: Any, frame: Frame) -> Descriptor:
    return source


def _exclude_literal(
    source: Descriptor,
    excluded: ConstDescriptor | EnumDescriptor | PrimitiveDescriptor,
    frame: Frame,
) -> Descriptor:
    recurse = _recurse(frame)
    if isinstance(source, UnionDescriptor):
        return exclude_from_union(source, excluded, recurse)
    if isinstance(source, IntersectionDescriptor):
        return exclude_from_intersection(source, excluded, recurse)
    if isinstance(source, ExclusionDescriptor):
        return exclude_from_exclusion(source, excluded, recurse)
    return exclude_literal(source, excluded)


def _exclude_structural(source: Descriptor, excluded: Any, frame: Frame) -> Descriptor:
    # Structural shapes are opaque: excluding one is a no-op.
    return source


def _exclude_union(source: Descriptor, excluded: UnionDescriptor, frame: Frame) -> Descriptor:
    return exclude_union(source, excluded, _recurse(frame))


def _exclude_intersection(
    source: Descriptor, excluded: IntersectionDescriptor, frame: Frame
) -> Descriptor:
    return exclude_intersection(source, excluded, _recurse(frame), frame)


def _exclude_exclusion(
    source: Descriptor, excluded: ExclusionDescriptor, frame: Frame
) -> Descriptor:
    return exclude_exclusion(source, excluded, _recurse(frame), frame)


def _exclude_error(source: Descriptor, excluded: ErrorDescriptor, frame: Frame) -> Descriptor:
    return excluded


_CASES: dict[MetaType, Handler] = {
    MetaType.ANY: _exclude_any,
    MetaType.NEVER: _exclude_never,
    MetaType.CONST: _exclude_literal,
    MetaType.ENUM: _exclude_literal,
    MetaType.PRIMITIVE: _exclude_literal,
    MetaType.ARRAY: _exclude_structural,
    MetaType.TUPLE: _exclude_structural,
    MetaType.OBJECT: _exclude_structural,
    MetaType.UNION: _exclude_union,
    MetaType.INTERSECTION: _exclude_intersection,
    MetaType.EXCLUSION: _exclude_exclusion,
    MetaType.ERROR: _exclude_error,
}

_unhandled = set(MetaType) - _CASES.keys()
if _unhandled:
    msg = f"exclude has no case for tags: {sorted(_unhandled)}"
    raise RuntimeError(msg)
