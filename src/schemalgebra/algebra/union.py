"""Union exclusion.

Two shapes:

- the source is a union: exclude from every member, keep what survives;
- the excluded descriptor is a union: exclude its alternatives one by one.

Both call back into the dispatch core for each member, so nested unions
resolve by induction.
"""

from __future__ import annotations

from schemalgebra.algebra.frame import Recurse
from schemalgebra.algebra.normalize import compose_error, make_union
from schemalgebra.domain.descriptors import (
    Descriptor,
    ErrorDescriptor,
    MetaType,
    UnionDescriptor,
)


def exclude_from_union(
    source: UnionDescriptor, excluded: Descriptor, recurse: Recurse
) -> Descriptor:
    """``(X | Y | ...) - B`` as ``(X - B) | (Y - B) | ...`` in normal form."""
    return make_union(recurse(member, excluded) for member in source.members)


def exclude_union(source: Descriptor, excluded: UnionDescriptor, recurse: Recurse) -> Descriptor:
    """``A - (X | Y | ...)`` as ``((A - X) - Y) - ...``.

    An ``error`` alternative absorbs the result wherever it sits, even when
    an earlier alternative has already emptied the source.
    """
    for index, member in enumerate(excluded.members):
        if isinstance(member, ErrorDescriptor):
            return compose_error(member, f"excluded union member {index}")

    result = source
    for index, member in enumerate(excluded.members):
        result = recurse(result, member)
        if isinstance(result, ErrorDescriptor):
            return compose_error(result, f"excluded union member {index}")
        if result.tag == MetaType.NEVER:
            break
    return result
