"""Exclusion of and from already negated descriptors.

A value matches ``Bb - Be`` iff it matches ``Bb`` and not ``Be``.  So a value
of ``A`` survives ``A - (Bb - Be)`` iff it fails ``Bb`` or it matches ``Be``::

    A - (Bb - Be) = (A - Bb) | (A & Be)

Values of ``Be`` outside ``Bb`` already belong to ``A - Bb``, so intersecting
with ``Be`` alone is exact.  When ``A & Be`` has no representation the
result is an ``unrepresentable`` error.

Excluding from an exclusion keeps the existing negation and narrows the base::

    (Ab - Ae) - B = (Ab - B) - Ae
"""

from __future__ import annotations

import logging

from schemalgebra.algebra.frame import Frame, Recurse
from schemalgebra.algebra.intersect import intersect_in
from schemalgebra.algebra.normalize import compose_error, make_exclusion, make_union
from schemalgebra.domain.descriptors import Descriptor, ErrorDescriptor, ExclusionDescriptor

logger = logging.getLogger(__name__)


def exclude_exclusion(
    source: Descriptor,
    excluded: ExclusionDescriptor,
    recurse: Recurse,
    frame: Frame,
) -> Descriptor:
    outside = recurse(source, excluded.base)
    if isinstance(outside, ErrorDescriptor):
        return compose_error(outside, "excluded exclusion base")

    inside = intersect_in(source, excluded.excluded, frame.descend())
    if isinstance(inside, ErrorDescriptor):
        logger.debug("Re-admitted values not representable: %s", inside.reason)
        return compose_error(inside, "excluded exclusion")

    return make_union([outside, inside])


def exclude_from_exclusion(
    source: ExclusionDescriptor, excluded: Descriptor, recurse: Recurse
) -> Descriptor:
    return make_exclusion(recurse(source.base, excluded), source.excluded)
