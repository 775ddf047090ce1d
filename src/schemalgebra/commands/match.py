"""Command: check a concrete JSON value against a descriptor."""

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
  schemalgebra match '{"type": "primitive", "kind": "string"}' '"dog"'
  schemalgebra -q match @descriptor.json @value.json""",
)
@click.argument("descriptor", type=JSON_OPERAND)
@click.argument("value", type=JSON_OPERAND)
@click.pass_obj
def match(app: AppContext, descriptor: Any, value: Any) -> None:
    """Report whether VALUE lies in the value-space of DESCRIPTOR."""
    app.emit(app.service.match(descriptor, value))
