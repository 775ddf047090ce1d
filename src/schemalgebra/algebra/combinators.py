"""Schema combinators built on the algebra: not, anyOf, allOf, if/then/else."""

from __future__ import annotations

from typing import Any

from schemalgebra.algebra.dispatch import exclude
from schemalgebra.algebra.frame import root_frame
from schemalgebra.algebra.intersect import intersect_in
from schemalgebra.algebra.normalize import compose_error, make_exclusion, make_union
from schemalgebra.domain.descriptors import ANY, Descriptor, ErrorDescriptor, coerce_descriptor


def negate(descriptor: Any) -> Descriptor:
    """``not``: every value except those *descriptor* matches."""
    return make_exclusion(ANY, coerce_descriptor(descriptor))


def any_of(*descriptors: Any) -> Descriptor:
    """``anyOf``: values matched by at least one descriptor.  Empty is ``never``."""
    return make_union(coerce_descriptor(d) for d in descriptors)


def all_of(*descriptors: Any, max_depth: int | None = None) -> Descriptor:
    """``allOf``: values matched by every descriptor.  Empty is ``any``."""
    frame = root_frame(max_depth)
    result: Descriptor = ANY
    for descriptor in descriptors:
        result = intersect_in(result, descriptor, frame)
        if isinstance(result, ErrorDescriptor):
            return compose_error(result, "allOf")
    return result


def if_then_else(
    if_: Any,
    then: Any = None,
    else_: Any = None,
    *,
    parent: Any = None,
    max_depth: int | None = None,
) -> Descriptor:
    """``if``/``then``/``else`` under *parent*.

    Values of *parent* matching *if_* must match *then*; the rest must match
    *else_*.  Missing branches and a missing parent default to ``any``.

    The ``else`` side is ``parent - if_`` and inherits the limits of
    :func:`~schemalgebra.algebra.dispatch.exclude`: a structural ``if_``
    (e.g. a tuple whose first item is a const) leaves the ``else`` side
    unnarrowed, so it still admits values the ``if_`` branch also covers.
    """
    parent = ANY if parent is None else parent
    then = ANY if then is None else then
    else_ = ANY if else_ is None else else_

    matched = all_of(parent, if_, then, max_depth=max_depth)
    unmatched = all_of(exclude(parent, if_, max_depth=max_depth), else_, max_depth=max_depth)
    return make_union([matched, unmatched])
