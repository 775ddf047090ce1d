"""Click parameter type for JSON operands: inline JSON text or ``@path``."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import click


class JsonOperand(click.ParamType):
    """Parse ``'{"type": "any"}'`` or ``@schema.json`` into a JSON value."""

    name = "json"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> Any:
        if not isinstance(value, str):
            return value
        text = value
        if value.startswith("@"):
            path = Path(value[1:])
            try:
                text = path.read_text(encoding="utf-8")
            except OSError as exc:
                self.fail(f"Cannot read {path}: {exc.strerror}", param, ctx)
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            self.fail(f"Invalid JSON ({exc.msg} at line {exc.lineno}): {value!r}", param, ctx)


JSON_OPERAND = JsonOperand()
