"""AlgebraService — descriptor operations wrapped in the ServiceResult contract.

Operands arrive as JSON-shaped mappings (or Descriptor instances), are
validated strictly, and the algebra result is returned in ``data["result"]``.

An ``error`` descriptor result is reported as ``ok=False`` with the error
kind as code, but the descriptor itself is still included in ``data`` so
callers can tell "undetermined" apart from "empty" (``never``).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from schemalgebra.algebra import all_of, exclude, if_then_else, intersect, negate
from schemalgebra.algebra.normalize import make_union
from schemalgebra.config.settings import AlgebraSettings
from schemalgebra.domain.descriptors import (
    BaseDescriptor,
    Descriptor,
    ErrorDescriptor,
    dump_descriptor,
    load_descriptor,
)
from schemalgebra.domain.membership import UndecidableError, matches
from schemalgebra.services.result import ErrorCode, ServiceResult
from schemalgebra.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from typing import TypeAlias

    Operand: TypeAlias = Descriptor | Mapping[str, Any] | str


class OperandError(Exception):
    """An operand could not be loaded as a descriptor."""

    def __init__(self, role: str, exc: ValidationError) -> None:
        super().__init__(f"Invalid {role} descriptor")
        self.role = role
        self.messages = [
            f"{'.'.join(map(str, err['loc'])) or '<root>'}: {err['msg']}" for err in exc.errors()
        ]


class AlgebraService:
    """Entry point for algebra operations with settings applied.

    Usage::

        svc = AlgebraService(AlgebraSettings.from_cli())
        result = svc.exclude({"type": "enum", "values": ["cat", "dog"]},
                             {"type": "const", "value": "dog"})
        result.data["result"]  # {"type": "const", "value": "cat"}
    """

    def __init__(self, settings: AlgebraSettings | None = None) -> None:
        self._settings = settings or AlgebraSettings()

    @property
    def max_depth(self) -> int:
        return self._settings.algebra.max_depth

    @traced
    def exclude(self, source: Operand, excluded: Operand) -> ServiceResult:
        op = "exclude"
        try:
            with trace_span("load"):
                a = self._load(source, "source")
                b = self._load(excluded, "excluded")
        except OperandError as exc:
            return self._invalid(op, exc)
        with trace_span("exclude") as span:
            result = exclude(a, b, max_depth=self.max_depth)
            if span is not None:
                span.annotate("result", result.type)
        return self._descriptor_result(op, result)

    @traced
    def intersect(self, left: Operand, right: Operand) -> ServiceResult:
        op = "intersect"
        try:
            a = self._load(left, "left")
            b = self._load(right, "right")
        except OperandError as exc:
            return self._invalid(op, exc)
        return self._descriptor_result(op, intersect(a, b, max_depth=self.max_depth))

    @traced
    def union(self, *operands: Operand) -> ServiceResult:
        op = "union"
        try:
            members = [self._load(o, f"member {i}") for i, o in enumerate(operands)]
        except OperandError as exc:
            return self._invalid(op, exc)
        return self._descriptor_result(op, make_union(members))

    @traced
    def all_of(self, *operands: Operand) -> ServiceResult:
        op = "all_of"
        try:
            members = [self._load(o, f"member {i}") for i, o in enumerate(operands)]
        except OperandError as exc:
            return self._invalid(op, exc)
        return self._descriptor_result(op, all_of(*members, max_depth=self.max_depth))

    @traced
    def negate(self, operand: Operand) -> ServiceResult:
        op = "negate"
        try:
            descriptor = self._load(operand, "operand")
        except OperandError as exc:
            return self._invalid(op, exc)
        return self._descriptor_result(op, negate(descriptor))

    @traced
    def if_then_else(
        self,
        if_: Operand,
        then: Operand | None = None,
        else_: Operand | None = None,
        parent: Operand | None = None,
    ) -> ServiceResult:
        op = "if_then_else"
        try:
            cond = self._load(if_, "if")
            branches = {
                role: None if raw is None else self._load(raw, role)
                for role, raw in (("then", then), ("else", else_), ("parent", parent))
            }
        except OperandError as exc:
            return self._invalid(op, exc)
        result = if_then_else(
            cond,
            branches["then"],
            branches["else"],
            parent=branches["parent"],
            max_depth=self.max_depth,
        )
        return self._descriptor_result(op, result)

    @traced
    def match(self, operand: Operand, value: Any) -> ServiceResult:
        op = "match"
        try:
            descriptor = self._load(operand, "descriptor")
        except OperandError as exc:
            return self._invalid(op, exc)
        try:
            matched = matches(descriptor, value)
        except UndecidableError as exc:
            return ServiceResult.failure(op, ErrorCode.for_error(exc.descriptor), str(exc))
        return ServiceResult.success(op, matches=matched, value=value)

    # --- Helpers ---

    @staticmethod
    def _load(raw: Operand, role: str) -> Descriptor:
        if isinstance(raw, BaseDescriptor):
            return raw  # type: ignore[return-value]
        try:
            return load_descriptor(raw)
        except ValidationError as exc:
            raise OperandError(role, exc) from exc

    @staticmethod
    def _invalid(op: str, exc: OperandError) -> ServiceResult:
        return ServiceResult.failure(
            op,
            ErrorCode.INVALID_DESCRIPTOR,
            str(exc),
            detail={"role": exc.role, "errors": exc.messages},
        )

    @staticmethod
    def _descriptor_result(op: str, descriptor: Descriptor) -> ServiceResult:
        data = {"tag": descriptor.type, "result": dump_descriptor(descriptor)}
        if isinstance(descriptor, ErrorDescriptor):
            logger.debug("%s could not be determined: %s", op, descriptor.reason)
            return ServiceResult.failure(
                op, ErrorCode.for_error(descriptor), descriptor.reason, data=data
            )
        return ServiceResult.success(op, **data)
