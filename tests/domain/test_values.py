"""Tests for JSON value kinds and JSON-aware equality."""

import pytest

from schemalgebra.domain.values import (
    ValueKind,
    contains_value,
    kind_of,
    kind_within,
    same_value,
)


class TestKindOf:
    @pytest.mark.parametrize(
        ("value", "kind"),
        [
            ("dog", ValueKind.STRING),
            (3, ValueKind.INTEGER),
            (3.0, ValueKind.INTEGER),
            (3.5, ValueKind.NUMBER),
            (True, ValueKind.BOOLEAN),
            (None, ValueKind.NULL),
            ([1], ValueKind.ARRAY),
            ({"a": 1}, ValueKind.OBJECT),
        ],
    )
    def test_kinds(self, value: object, kind: ValueKind) -> None:
        assert kind_of(value) == kind

    def test_bool_is_not_integer(self) -> None:
        assert kind_of(False) == ValueKind.BOOLEAN

    def test_rejects_non_json(self) -> None:
        with pytest.raises(TypeError):
            kind_of(object())


class TestKindWithin:
    def test_same_kind(self) -> None:
        assert kind_within("string", "string")

    def test_integer_within_number(self) -> None:
        assert kind_within(ValueKind.INTEGER, ValueKind.NUMBER)
        assert not kind_within(ValueKind.NUMBER, ValueKind.INTEGER)

    def test_unrelated_kinds(self) -> None:
        assert not kind_within("string", "number")
        assert not kind_within("boolean", "integer")


class TestSameValue:
    def test_bool_and_int_differ(self) -> None:
        assert not same_value(True, 1)
        assert not same_value(0, False)

    def test_int_and_float_equal(self) -> None:
        assert same_value(1, 1.0)

    def test_nested(self) -> None:
        assert same_value({"a": [1, "x"]}, {"a": [1.0, "x"]})
        assert not same_value({"a": [True]}, {"a": [1]})
        assert not same_value([1, 2], [1])
        assert not same_value({"a": 1}, {"b": 1})

    def test_contains_value(self) -> None:
        assert contains_value(("cat", 1), 1.0)
        assert not contains_value(("cat", 1), True)
