"""Normalizing constructors for compound descriptors.

The algebra never builds ``union``/``intersection``/``exclusion``/``enum``
descriptors directly; it goes through these helpers, which keep results in
normal form:

- ``error`` members absorb the whole result, with the reason prefixed by
  where the error was met.
- Unions and intersections are flattened, deduplicated, never empty, and
  never single-member.
- Exclusions never have a ``never`` base or an ``any`` excluded part, and
  exclusions from a finite literal base are filtered down to that literal set.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from schemalgebra.domain.descriptors import (
    ANY,
    NEVER,
    ConstDescriptor,
    Descriptor,
    EnumDescriptor,
    ErrorDescriptor,
    ExclusionDescriptor,
    IntersectionDescriptor,
    MetaType,
    UnionDescriptor,
    error,
)
from schemalgebra.domain.membership import UndecidableError, matches
from schemalgebra.domain.values import contains_value


def compose_error(cause: ErrorDescriptor, context: str) -> ErrorDescriptor:
    """Wrap *cause* with *context*, keeping its kind."""
    return error(cause.kind, f"{context}: {cause.reason}")


def first_error(descriptors: Iterable[Descriptor]) -> ErrorDescriptor | None:
    for descriptor in descriptors:
        if isinstance(descriptor, ErrorDescriptor):
            return descriptor
    return None


def _canonical(node: Any) -> Any:
    # 1.0 and 1 are the same JSON number; bools are left alone.
    if isinstance(node, float) and node.is_integer():
        return int(node)
    if isinstance(node, dict):
        return {key: _canonical(value) for key, value in node.items()}
    if isinstance(node, list | tuple):
        return [_canonical(item) for item in node]
    return node


def same_descriptor(left: Descriptor, right: Descriptor) -> bool:
    """Structural identity over JSON forms.

    ``true`` and ``1`` stay distinct; ``1`` and ``1.0`` do not, matching
    :func:`~schemalgebra.domain.values.same_value`.
    """
    if left is right:
        return True
    return _dump(left) == _dump(right)


def _dump(descriptor: Descriptor) -> str:
    return json.dumps(_canonical(descriptor.model_dump(mode="json")), sort_keys=True)


def _append_unique(acc: list[Descriptor], candidate: Descriptor) -> None:
    if not any(same_descriptor(existing, candidate) for existing in acc):
        acc.append(candidate)


def make_union(members: Iterable[Descriptor]) -> Descriptor:
    """Union of *members* in normal form.

    Drops ``never`` members, collapses to ``any`` if any member is ``any``,
    returns ``never`` when nothing is left and unwraps a single survivor.
    """
    candidates = list(members)
    cause = first_error(candidates)
    if cause is not None:
        return compose_error(cause, "union member")

    flat: list[Descriptor] = []
    for member in candidates:
        if isinstance(member, UnionDescriptor):
            for nested in member.members:
                _append_unique(flat, nested)
        elif member.tag == MetaType.ANY:
            return ANY
        elif member.tag != MetaType.NEVER:
            _append_unique(flat, member)

    if any(member.tag == MetaType.ANY for member in flat):
        return ANY
    if not flat:
        return NEVER
    if len(flat) == 1:
        return flat[0]
    return UnionDescriptor(members=tuple(flat))


def make_intersection(members: Iterable[Descriptor]) -> Descriptor:
    """Intersection of *members* in normal form.

    Any ``never`` member collapses the result to ``never``; ``any`` members
    are dropped; an empty remainder is ``any``; a single survivor is unwrapped.
    """
    candidates = list(members)
    cause = first_error(candidates)
    if cause is not None:
        return compose_error(cause, "intersection member")

    flat: list[Descriptor] = []
    for member in candidates:
        if isinstance(member, IntersectionDescriptor):
            for nested in member.members:
                _append_unique(flat, nested)
        elif member.tag == MetaType.NEVER:
            return NEVER
        elif member.tag != MetaType.ANY:
            _append_unique(flat, member)

    if any(member.tag == MetaType.NEVER for member in flat):
        return NEVER
    if not flat:
        return ANY
    if len(flat) == 1:
        return flat[0]
    return IntersectionDescriptor(members=tuple(flat))


def make_exclusion(base: Descriptor, excluded: Descriptor) -> Descriptor:
    """``base`` minus ``excluded`` in normal form."""
    if isinstance(base, ErrorDescriptor):
        return compose_error(base, "exclusion base")
    if isinstance(excluded, ErrorDescriptor):
        return compose_error(excluded, "excluded descriptor")
    if base.tag == MetaType.NEVER or excluded.tag == MetaType.ANY:
        return NEVER
    if excluded.tag == MetaType.NEVER:
        return base
    if same_descriptor(base, excluded):
        return NEVER
    if isinstance(base, ConstDescriptor | EnumDescriptor):
        # A finite base can be filtered exactly.
        values = (base.value,) if isinstance(base, ConstDescriptor) else base.values
        try:
            kept = [value for value in values if not matches(excluded, value)]
        except UndecidableError as exc:
            return compose_error(exc.descriptor, "excluded descriptor")
        return base if len(kept) == len(values) else make_enum(kept)
    return ExclusionDescriptor(base=base, excluded=excluded)


def make_enum(values: Iterable[Any]) -> Descriptor:
    """Finite literal set: ``never`` when empty, ``const`` for one value."""
    unique: list[Any] = []
    for value in values:
        if not contains_value(unique, value):
            unique.append(value)
    if not unique:
        return NEVER
    if len(unique) == 1:
        return ConstDescriptor(value=unique[0])
    return EnumDescriptor(values=tuple(unique))
