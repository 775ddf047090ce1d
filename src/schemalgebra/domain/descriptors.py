"""Descriptor model — the value-space of a schema as a closed tagged variant.

Every descriptor is a frozen pydantic model discriminated by its ``type``
field.  The set of variants is closed: :data:`Descriptor` is the only union
the algebra dispatches over, and :class:`MetaType` lists its tags.

INVARIANT: descriptors are immutable.  Sequences are tuples and models are
frozen, so algebra results can share sub-descriptors with their inputs.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Annotated, Any, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    JsonValue,
    TypeAdapter,
    ValidationError,
    model_validator,
)


class MetaType(StrEnum):
    """Tag vocabulary of the descriptor variants."""

    ANY = "any"
    NEVER = "never"
    CONST = "const"
    ENUM = "enum"
    PRIMITIVE = "primitive"
    ARRAY = "array"
    TUPLE = "tuple"
    OBJECT = "object"
    UNION = "union"
    INTERSECTION = "intersection"
    EXCLUSION = "exclusion"
    ERROR = "error"


class PrimitiveKind(StrEnum):
    """Named value kinds a ``primitive`` descriptor can match."""

    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    NULL = "null"


class ErrorKind(StrEnum):
    """Why an ``error`` descriptor was produced."""

    MISSING_TAG = "missing_tag"
    INVALID = "invalid"
    UNREPRESENTABLE = "unrepresentable"
    DEPTH_EXCEEDED = "depth_exceeded"


LITERAL_TAGS = frozenset({MetaType.CONST, MetaType.ENUM, MetaType.PRIMITIVE})
STRUCTURAL_TAGS = frozenset({MetaType.ARRAY, MetaType.TUPLE, MetaType.OBJECT})
COMPOUND_TAGS = frozenset({MetaType.UNION, MetaType.INTERSECTION, MetaType.EXCLUSION})

MISSING_TAG_REASON = "missing or unknown type tag"


class BaseDescriptor(BaseModel):
    """Common configuration for all descriptor variants."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: str

    @property
    def tag(self) -> MetaType:
        return MetaType(self.type)


class AnyDescriptor(BaseDescriptor):
    """Matches every value."""

    type: Literal["any"] = "any"


class NeverDescriptor(BaseDescriptor):
    """Matches no value."""

    type: Literal["never"] = "never"


class ConstDescriptor(BaseDescriptor):
    """Matches exactly one literal value."""

    type: Literal["const"] = "const"
    value: JsonValue


class EnumDescriptor(BaseDescriptor):
    """Matches one of a finite, non-empty set of literal values."""

    type: Literal["enum"] = "enum"
    values: tuple[JsonValue, ...] = Field(min_length=1)


class PrimitiveDescriptor(BaseDescriptor):
    """Matches every value of a named kind."""

    type: Literal["primitive"] = "primitive"
    kind: PrimitiveKind


class ArrayDescriptor(BaseDescriptor):
    """Homogeneous list whose every element matches ``items``."""

    type: Literal["array"] = "array"
    items: Descriptor = Field(default_factory=lambda: AnyDescriptor())


class TupleDescriptor(BaseDescriptor):
    """Positional list: element *i* matches ``items[i]``, the rest ``additional_items``."""

    type: Literal["tuple"] = "tuple"
    items: tuple[Descriptor, ...] = ()
    additional_items: Descriptor = Field(default_factory=lambda: AnyDescriptor())


class ObjectDescriptor(BaseDescriptor):
    """Mapping with named ``properties``, ``required`` keys and a fallback for other keys."""

    type: Literal["object"] = "object"
    properties: dict[str, Descriptor] = Field(default_factory=dict)
    required: tuple[str, ...] = ()
    additional_properties: Descriptor = Field(default_factory=lambda: AnyDescriptor())


class UnionDescriptor(BaseDescriptor):
    """Matches a value if any member matches it."""

    type: Literal["union"] = "union"
    members: tuple[Descriptor, ...] = Field(min_length=1)


class IntersectionDescriptor(BaseDescriptor):
    """Matches a value if every member matches it."""

    type: Literal["intersection"] = "intersection"
    members: tuple[Descriptor, ...] = Field(min_length=1)


class ExclusionDescriptor(BaseDescriptor):
    """Matches a value if ``base`` matches it and ``excluded`` does not."""

    type: Literal["exclusion"] = "exclusion"
    base: Descriptor
    excluded: Descriptor

    @model_validator(mode="after")
    def _reject_collapsible(self) -> ExclusionDescriptor:
        if self.base.type == MetaType.NEVER:
            msg = "exclusion base cannot be 'never'"
            raise ValueError(msg)
        if self.excluded.type == MetaType.ANY:
            msg = "exclusion cannot exclude 'any'"
            raise ValueError(msg)
        return self


class ErrorDescriptor(BaseDescriptor):
    """Terminal marker: the algebra could not determine this value-space."""

    type: Literal["error"] = "error"
    kind: ErrorKind
    reason: str


Descriptor = Annotated[
    AnyDescriptor
    | NeverDescriptor
    | ConstDescriptor
    | EnumDescriptor
    | PrimitiveDescriptor
    | ArrayDescriptor
    | TupleDescriptor
    | ObjectDescriptor
    | UnionDescriptor
    | IntersectionDescriptor
    | ExclusionDescriptor
    | ErrorDescriptor,
    Field(discriminator="type"),
]

for _model in (
    ArrayDescriptor,
    TupleDescriptor,
    ObjectDescriptor,
    UnionDescriptor,
    IntersectionDescriptor,
    ExclusionDescriptor,
):
    _model.model_rebuild()

DESCRIPTOR_ADAPTER: TypeAdapter[Descriptor] = TypeAdapter(Descriptor)

ANY = AnyDescriptor()
NEVER = NeverDescriptor()


# --- Plain constructors (no normalization; see schemalgebra.algebra.normalize) ---


def const(value: Any) -> ConstDescriptor:
    return ConstDescriptor(value=value)


def enum(*values: Any) -> EnumDescriptor:
    return EnumDescriptor(values=values)


def primitive(kind: PrimitiveKind | str) -> PrimitiveDescriptor:
    return PrimitiveDescriptor(kind=PrimitiveKind(kind))


def union(*members: Descriptor) -> UnionDescriptor:
    return UnionDescriptor(members=members)


def intersection(*members: Descriptor) -> IntersectionDescriptor:
    return IntersectionDescriptor(members=members)


def exclusion(base: Descriptor, excluded: Descriptor) -> ExclusionDescriptor:
    return ExclusionDescriptor(base=base, excluded=excluded)


def error(kind: ErrorKind | str, reason: str) -> ErrorDescriptor:
    return ErrorDescriptor(kind=ErrorKind(kind), reason=reason)


# --- Loading ---


def load_descriptor(raw: Mapping[str, Any] | str | bytes) -> Descriptor:
    """Validate a JSON document (text or parsed mapping) into a Descriptor.

    Raises:
        pydantic.ValidationError: If *raw* is not a well-formed descriptor.
    """
    if isinstance(raw, (str, bytes)):
        return DESCRIPTOR_ADAPTER.validate_json(raw)
    if isinstance(raw, Mapping):
        raw = dict(raw)
    return DESCRIPTOR_ADAPTER.validate_python(raw)


def coerce_descriptor(raw: Any) -> Descriptor:
    """Return *raw* as a Descriptor, or an ``error`` descriptor if it is not one.

    Never raises.  Used at the algebra boundary so malformed operands become
    inspectable results instead of exceptions.
    """
    if isinstance(raw, BaseDescriptor):
        return raw  # type: ignore[return-value]
    if not isinstance(raw, Mapping):
        return error(ErrorKind.MISSING_TAG, MISSING_TAG_REASON)
    tag = raw.get("type")
    if tag not in {t.value for t in MetaType}:
        return error(ErrorKind.MISSING_TAG, MISSING_TAG_REASON)
    try:
        return load_descriptor(raw)
    except ValidationError as exc:
        return error(ErrorKind.INVALID, f"invalid {tag} descriptor: {exc.error_count()} error(s)")


def dump_descriptor(descriptor: Descriptor) -> dict[str, Any]:
    """JSON-compatible dict form of *descriptor* (inverse of :func:`load_descriptor`)."""
    return descriptor.model_dump(mode="json")
