"""ServiceResult and ServiceError — the envelope every service call returns.

INVARIANT: All service-layer methods return ServiceResult, never raise for
bad operands.  An ``error`` descriptor produced by the algebra is a failed
result that still carries the descriptor in ``data["result"]``, so callers
can tell "undetermined" apart from "empty" (``never``).
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field

from schemalgebra.domain.descriptors import Descriptor, ErrorDescriptor, load_descriptor


class ErrorCode(StrEnum):
    """Codes carried by :class:`ServiceError`.

    Besides ``INVALID_DESCRIPTOR`` (an operand failed validation), every
    :class:`~schemalgebra.domain.descriptors.ErrorKind` maps to the code of
    the same name in upper case.
    """

    INVALID_DESCRIPTOR = "INVALID_DESCRIPTOR"
    MISSING_TAG = "MISSING_TAG"
    INVALID = "INVALID"
    UNREPRESENTABLE = "UNREPRESENTABLE"
    DEPTH_EXCEEDED = "DEPTH_EXCEEDED"

    @classmethod
    def for_error(cls, descriptor: ErrorDescriptor) -> ErrorCode:
        return cls(str(descriptor.kind).upper())


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: ErrorCode
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type of every AlgebraService operation.

    Attributes:
        ok: Whether the operation produced a usable answer.
        op: Name of the operation (e.g. ``"exclude"``).
        data: ``{"tag", "result"}`` for descriptor-valued operations,
            ``{"matches", "value"}`` for ``match``.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (telemetry span tree).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def success(cls, op: str, **data: Any) -> ServiceResult:
        return cls(ok=True, op=op, data=data)

    @classmethod
    def failure(
        cls,
        op: str,
        code: ErrorCode,
        message: str,
        *,
        detail: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
    ) -> ServiceResult:
        return cls(
            ok=False,
            op=op,
            data=data or {},
            error=ServiceError(code=code, message=message, detail=detail or {}),
        )

    @property
    def descriptor(self) -> Descriptor | None:
        """The resulting descriptor, re-validated from ``data``; None for non-descriptor ops."""
        raw = self.data.get("result")
        return None if raw is None else load_descriptor(raw)
