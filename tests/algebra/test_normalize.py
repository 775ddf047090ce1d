"""Tests for the normalizing constructors."""

from schemalgebra.algebra.normalize import (
    compose_error,
    make_enum,
    make_exclusion,
    make_intersection,
    make_union,
    same_descriptor,
)
from schemalgebra.domain.descriptors import (
    ANY,
    NEVER,
    ErrorDescriptor,
    ErrorKind,
    ExclusionDescriptor,
    const,
    enum,
    error,
    exclusion,
    intersection,
    primitive,
    union,
)

BAD = error(ErrorKind.INVALID, "bad")


class TestSameDescriptor:
    def test_structural_equality(self) -> None:
        assert same_descriptor(union(const("a"), const("b")), union(const("a"), const("b")))

    def test_bool_and_int_distinct(self) -> None:
        assert not same_descriptor(const(True), const(1))

    def test_integral_float_same_as_int(self) -> None:
        assert same_descriptor(const(1), const(1.0))
        assert same_descriptor(enum("a", 2), enum("a", 2.0))
        assert not same_descriptor(const(1), const(1.5))

    def test_object_key_order_ignored(self) -> None:
        assert same_descriptor(const({"a": 1, "b": 2}), const({"b": 2.0, "a": 1}))


class TestMakeUnion:
    def test_empty_is_never(self) -> None:
        assert make_union([]) == NEVER

    def test_drops_never(self) -> None:
        assert make_union([NEVER, const("a"), NEVER]) == const("a")

    def test_any_collapses(self) -> None:
        assert make_union([const("a"), ANY]) == ANY
        assert make_union([union(const("a"), ANY)]) == ANY

    def test_flattens_and_dedupes(self) -> None:
        result = make_union([const("a"), union(const("b"), const("a")), const("c")])
        assert result == union(const("a"), const("b"), const("c"))

    def test_keeps_bool_and_int_apart(self) -> None:
        assert make_union([const(True), const(1)]) == union(const(True), const(1))

    def test_dedupes_equal_numbers(self) -> None:
        assert make_union([const(1), const(1.0)]) == const(1)

    def test_error_absorbs(self) -> None:
        result = make_union([const("a"), BAD])
        assert result == error(ErrorKind.INVALID, "union member: bad")


class TestMakeIntersection:
    def test_empty_is_any(self) -> None:
        assert make_intersection([]) == ANY

    def test_never_collapses(self) -> None:
        assert make_intersection([primitive("string"), NEVER]) == NEVER

    def test_drops_any_and_unwraps(self) -> None:
        assert make_intersection([ANY, primitive("string")]) == primitive("string")

    def test_flattens(self) -> None:
        nested = intersection(primitive("string"), enum("a", "b"))
        result = make_intersection([nested, primitive("string")])
        assert result == nested

    def test_error_absorbs(self) -> None:
        assert make_intersection([BAD]).reason == "intersection member: bad"


class TestMakeExclusion:
    def test_collapsing_operands(self) -> None:
        assert make_exclusion(NEVER, const("a")) == NEVER
        assert make_exclusion(primitive("string"), ANY) == NEVER
        assert make_exclusion(primitive("string"), NEVER) == primitive("string")
        assert make_exclusion(primitive("string"), primitive("string")) == NEVER

    def test_errors_compose(self) -> None:
        assert make_exclusion(BAD, const("a")).reason == "exclusion base: bad"
        assert make_exclusion(ANY, BAD).reason == "excluded descriptor: bad"

    def test_finite_base_filtered(self) -> None:
        assert make_exclusion(enum("a", "b", "c"), primitive("string")) == NEVER
        assert make_exclusion(enum("a", 1), primitive("string")) == const(1)
        source = const("a")
        assert make_exclusion(source, const("b")) is source

    def test_finite_base_against_error_member(self) -> None:
        result = make_exclusion(const("x"), union(const("a"), BAD))
        assert isinstance(result, ErrorDescriptor)
        assert result.reason == "excluded descriptor: bad"

    def test_wraps_infinite_base(self) -> None:
        result = make_exclusion(primitive("string"), const("dog"))
        assert isinstance(result, ExclusionDescriptor)
        assert result == exclusion(primitive("string"), const("dog"))


class TestMakeEnum:
    def test_shapes(self) -> None:
        assert make_enum([]) == NEVER
        assert make_enum(["a", "a"]) == const("a")
        assert make_enum(["a", "b", "a"]) == enum("a", "b")

    def test_json_aware_dedupe(self) -> None:
        assert make_enum([1, 1.0]) == const(1)
        assert make_enum([1, True]) == enum(1, True)


def test_compose_error_keeps_kind() -> None:
    cause = error(ErrorKind.DEPTH_EXCEEDED, "too deep")
    assert compose_error(cause, "outer") == error(ErrorKind.DEPTH_EXCEEDED, "outer: too deep")
