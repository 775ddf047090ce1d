"""Intersection exclusion.

Excluding from an intersection distributes over its members:
``(X & Y) - B`` becomes ``(X - B) & (Y - B)``.  Set-theoretically the two
are equal, but each member exclusion may itself be an over-approximation
(``string - "dog"`` stays ``string``), so the result is only as precise as
its members.

Excluding an intersection first tries to resolve it to a single shape with
:func:`~schemalgebra.algebra.intersect.intersect_in`.  If it stays compound,
``A - (X & Y)`` is ``(A - X) | (A - Y)``: a value is removed only when every
member removes it.
"""

from __future__ import annotations

from schemalgebra.algebra.frame import Frame, Recurse
from schemalgebra.algebra.intersect import intersect_in
from schemalgebra.algebra.normalize import (
    compose_error,
    first_error,
    make_intersection,
    make_union,
    same_descriptor,
)
from schemalgebra.domain.descriptors import (
    ANY,
    Descriptor,
    ErrorDescriptor,
    IntersectionDescriptor,
)


def exclude_from_intersection(
    source: IntersectionDescriptor, excluded: Descriptor, recurse: Recurse
) -> Descriptor:
    return make_intersection(recurse(member, excluded) for member in source.members)


def exclude_intersection(
    source: Descriptor,
    excluded: IntersectionDescriptor,
    recurse: Recurse,
    frame: Frame,
) -> Descriptor:
    resolved = ANY
    for member in excluded.members:
        resolved = intersect_in(resolved, member, frame.descend())
        if isinstance(resolved, ErrorDescriptor):
            break
    if not isinstance(resolved, ErrorDescriptor | IntersectionDescriptor):
        return recurse(source, resolved)

    parts = [recurse(source, member) for member in excluded.members]
    cause = first_error(parts)
    if cause is not None:
        return compose_error(cause, "excluded intersection member")
    if any(same_descriptor(part, source) for part in parts):
        return source
    return make_union(parts)
