"""Tests for the descriptor model, its invariants, and loading."""

import json

import pytest
from pydantic import ValidationError

from schemalgebra.domain.descriptors import (
    ANY,
    MISSING_TAG_REASON,
    NEVER,
    ArrayDescriptor,
    ConstDescriptor,
    EnumDescriptor,
    ErrorDescriptor,
    ErrorKind,
    ExclusionDescriptor,
    MetaType,
    ObjectDescriptor,
    PrimitiveKind,
    TupleDescriptor,
    UnionDescriptor,
    coerce_descriptor,
    const,
    dump_descriptor,
    enum,
    exclusion,
    intersection,
    load_descriptor,
    primitive,
    union,
)


class TestMetaType:
    def test_members(self) -> None:
        assert {t.value for t in MetaType} == {
            "any",
            "never",
            "const",
            "enum",
            "primitive",
            "array",
            "tuple",
            "object",
            "union",
            "intersection",
            "exclusion",
            "error",
        }

    def test_tag_property(self) -> None:
        assert const("dog").tag == MetaType.CONST
        assert ANY.tag == MetaType.ANY


class TestInvariants:
    def test_union_requires_members(self) -> None:
        with pytest.raises(ValidationError):
            UnionDescriptor(members=())

    def test_intersection_requires_members(self) -> None:
        with pytest.raises(ValidationError):
            intersection()

    def test_enum_requires_values(self) -> None:
        with pytest.raises(ValidationError):
            EnumDescriptor(values=())

    def test_exclusion_base_not_never(self) -> None:
        with pytest.raises(ValidationError, match="base cannot be 'never'"):
            exclusion(NEVER, const("a"))

    def test_exclusion_excluded_not_any(self) -> None:
        with pytest.raises(ValidationError, match="cannot exclude 'any'"):
            ExclusionDescriptor(base=primitive("string"), excluded=ANY)

    def test_frozen(self) -> None:
        d = const("dog")
        with pytest.raises(ValidationError):
            d.value = "cat"  # type: ignore[misc]

    def test_extra_fields_rejected(self) -> None:
        with pytest.raises(ValidationError):
            load_descriptor({"type": "any", "minLength": 2})

    def test_structural_defaults(self) -> None:
        assert ArrayDescriptor().items == ANY
        assert TupleDescriptor().additional_items == ANY
        assert ObjectDescriptor().required == ()


class TestLoading:
    def test_load_nested(self) -> None:
        d = load_descriptor(
            {
                "type": "union",
                "members": [
                    {"type": "const", "value": "cat"},
                    {"type": "primitive", "kind": "number"},
                ],
            }
        )
        assert d == union(const("cat"), primitive(PrimitiveKind.NUMBER))
        assert isinstance(d.members, tuple)

    def test_load_json_text(self) -> None:
        d = load_descriptor('{"type": "enum", "values": ["cat", "dog"]}')
        assert d == enum("cat", "dog")

    def test_roundtrip_object(self) -> None:
        d = ObjectDescriptor(
            properties={"type": enum("cat", "dog")},
            required=("type",),
        )
        assert load_descriptor(dump_descriptor(d)) == d
        assert json.loads(d.model_dump_json())["type"] == "object"

    def test_load_missing_tag_raises(self) -> None:
        with pytest.raises(ValidationError):
            load_descriptor({"value": "dog"})

    def test_load_rejects_non_mapping(self) -> None:
        with pytest.raises(ValidationError):
            load_descriptor([1, 2])  # type: ignore[arg-type]


class TestCoerce:
    def test_passes_descriptors_through(self) -> None:
        d = const("dog")
        assert coerce_descriptor(d) is d

    def test_missing_tag(self) -> None:
        result = coerce_descriptor({"value": "dog"})
        assert isinstance(result, ErrorDescriptor)
        assert result.kind == ErrorKind.MISSING_TAG
        assert result.reason == MISSING_TAG_REASON

    def test_unknown_tag(self) -> None:
        result = coerce_descriptor({"type": "string"})
        assert isinstance(result, ErrorDescriptor)
        assert result.kind == ErrorKind.MISSING_TAG

    def test_not_a_mapping(self) -> None:
        result = coerce_descriptor(None)
        assert isinstance(result, ErrorDescriptor)
        assert result.kind == ErrorKind.MISSING_TAG

    def test_invalid_payload(self) -> None:
        result = coerce_descriptor({"type": "primitive", "kind": "date"})
        assert isinstance(result, ErrorDescriptor)
        assert result.kind == ErrorKind.INVALID
        assert "primitive" in result.reason

    def test_valid_mapping(self) -> None:
        assert coerce_descriptor({"type": "const", "value": 3}) == ConstDescriptor(value=3)
