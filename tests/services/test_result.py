"""Tests for ServiceResult and ServiceError."""

import json

import pytest
from pydantic import ValidationError

from schemalgebra.domain.descriptors import ErrorKind, const, error
from schemalgebra.services.result import ErrorCode, ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="exclude", data={"tag": "never"})
        assert result.ok is True
        assert result.op == "exclude"
        assert result.data == {"tag": "never"}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_error_keeps_data(self) -> None:
        result = ServiceResult(
            ok=False,
            op="intersect",
            data={"tag": "error"},
            error=ServiceError(code="UNREPRESENTABLE", message="no rule"),
        )
        assert result.error is not None
        assert result.error.detail == {}
        assert result.data["tag"] == "error"

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="negate", data={"tag": "exclusion"})
        parsed = json.loads(result.model_dump_json(exclude_none=True))
        assert parsed == {"ok": True, "op": "negate", "data": {"tag": "exclusion"}, "warnings": []}

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="union")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]


class TestConstructors:
    def test_success(self) -> None:
        result = ServiceResult.success("exclude", tag="never", result={"type": "never"})
        assert result.ok
        assert result.data == {"tag": "never", "result": {"type": "never"}}

    def test_failure(self) -> None:
        result = ServiceResult.failure(
            "exclude",
            ErrorCode.INVALID_DESCRIPTOR,
            "Invalid source descriptor",
            detail={"role": "source"},
        )
        assert not result.ok
        assert result.data == {}
        assert result.error == ServiceError(
            code=ErrorCode.INVALID_DESCRIPTOR,
            message="Invalid source descriptor",
            detail={"role": "source"},
        )

    def test_unknown_code_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ServiceError(code="E001", message="nope")

    def test_code_for_error_kind(self) -> None:
        cause = error(ErrorKind.DEPTH_EXCEEDED, "deep")
        assert ErrorCode.for_error(cause) == ErrorCode.DEPTH_EXCEEDED


class TestDescriptor:
    def test_reloads_result(self) -> None:
        result = ServiceResult.success("negate", tag="const", result={"type": "const", "value": 1})
        assert result.descriptor == const(1)

    def test_none_without_result(self) -> None:
        assert ServiceResult.success("match", matches=True, value=1).descriptor is None
