"""Tests for the literal/primitive comparator."""

import pytest

from schemalgebra.algebra.literals import covers, exclude_literal
from schemalgebra.domain.descriptors import (
    ANY,
    NEVER,
    ArrayDescriptor,
    ObjectDescriptor,
    TupleDescriptor,
    const,
    enum,
    primitive,
)


class TestCovers:
    def test_const(self) -> None:
        assert covers(const("dog"), "dog")
        assert not covers(const(1), True)

    def test_enum(self) -> None:
        assert covers(enum("cat", "dog"), "cat")
        assert not covers(enum("cat", "dog"), "duck")

    def test_primitive_by_kind(self) -> None:
        assert covers(primitive("string"), "dog")
        assert covers(primitive("number"), 3)
        assert not covers(primitive("string"), 3)


class TestConstSource:
    def test_same_value(self) -> None:
        assert exclude_literal(const("dog"), const("dog")) == NEVER

    def test_other_value(self) -> None:
        assert exclude_literal(const("dog"), const("cat")) == const("dog")

    def test_covering_primitive(self) -> None:
        assert exclude_literal(const("dog"), primitive("string")) == NEVER
        assert exclude_literal(const(3), primitive("number")) == NEVER

    def test_disjoint_primitive(self) -> None:
        assert exclude_literal(const("dog"), primitive("number")) == const("dog")

    def test_listed_in_enum(self) -> None:
        assert exclude_literal(const("dog"), enum("cat", "dog")) == NEVER


class TestEnumSource:
    def test_removes_members(self) -> None:
        assert exclude_literal(enum("cat", "dog", "duck"), const("dog")) == enum("cat", "duck")

    def test_single_survivor_is_const(self) -> None:
        assert exclude_literal(enum("cat", "dog"), enum("dog", "duck")) == const("cat")

    def test_all_removed(self) -> None:
        assert exclude_literal(enum("cat", "dog"), primitive("string")) == NEVER

    def test_untouched_enum_returned_as_is(self) -> None:
        source = enum("cat", "dog")
        assert exclude_literal(source, const(3)) is source

    def test_mixed_kinds(self) -> None:
        assert exclude_literal(enum("cat", 1, None), primitive("string")) == enum(1, None)


class TestPrimitiveSource:
    def test_same_kind(self) -> None:
        assert exclude_literal(primitive("string"), primitive("string")) == NEVER

    def test_integer_within_number(self) -> None:
        assert exclude_literal(primitive("integer"), primitive("number")) == NEVER
        assert exclude_literal(primitive("number"), primitive("integer")) == primitive("number")

    def test_literal_from_infinite_kind_is_noop(self) -> None:
        assert exclude_literal(primitive("string"), const("dog")) == primitive("string")
        assert exclude_literal(primitive("number"), enum(1, 2)) == primitive("number")

    def test_partial_boolean_exclusion_is_noop(self) -> None:
        assert exclude_literal(primitive("boolean"), const(True)) == primitive("boolean")
        assert exclude_literal(primitive("boolean"), enum(False, "x")) == primitive("boolean")

    def test_boolean_wholly_covered(self) -> None:
        assert exclude_literal(primitive("boolean"), enum(True, False)) == NEVER

    def test_boolean_not_confused_with_integer(self) -> None:
        assert exclude_literal(primitive("boolean"), const(1)) == primitive("boolean")

    def test_null_domain(self) -> None:
        assert exclude_literal(primitive("null"), const(None)) == NEVER
        assert exclude_literal(primitive("null"), const("null")) == primitive("null")


@pytest.mark.parametrize(
    "source",
    [ANY, ArrayDescriptor(), TupleDescriptor(), ObjectDescriptor()],
    ids=lambda d: d.type,
)
@pytest.mark.parametrize("excluded", [const("dog"), enum(1, 2), primitive("string")])
def test_opaque_sources_unchanged(source, excluded) -> None:
    assert exclude_literal(source, excluded) == source
