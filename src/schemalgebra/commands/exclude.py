"""Command: set difference of two descriptors."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from schemalgebra.commands._base import AlgebraCommand
from schemalgebra.commands._operands import JSON_OPERAND

if TYPE_CHECKING:
    from schemalgebra.commands._context import AppContext


@click.command(
    cls=AlgebraCommand,
    examples="""\
  schemalgebra exclude '{"type": "enum", "values": ["cat", "dog"]}' '{"type": "const", "value": "dog"}'
  schemalgebra exclude @source.json @excluded.json
  schemalgebra --json exclude '{"type": "primitive", "kind": "integer"}' '{"type": "primitive", "kind": "number"}'""",
)
@click.argument("source", type=JSON_OPERAND)
@click.argument("excluded", type=JSON_OPERAND)
@click.pass_obj
def exclude(app: AppContext, source: Any, excluded: Any) -> None:
    """Values matched by SOURCE but not by EXCLUDED."""
    app.emit(app.service.exclude(source, excluded))
