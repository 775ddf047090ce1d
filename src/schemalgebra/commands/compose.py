"""Commands: intersect, union, all-of, negate, and if/then/else composition."""

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
  schemalgebra intersect '{"type": "primitive", "kind": "number"}' '{"type": "enum", "values": [1, "a"]}'""",
)
@click.argument("left", type=JSON_OPERAND)
@click.argument("right", type=JSON_OPERAND)
@click.pass_obj
def intersect(app: AppContext, left: Any, right: Any) -> None:
    """Values matched by both LEFT and RIGHT."""
    app.emit(app.service.intersect(left, right))


@click.command(
    cls=AlgebraCommand,
    examples="""\
  schemalgebra union '{"type": "const", "value": "cat"}' '{"type": "const", "value": "dog"}'""",
)
@click.argument("members", type=JSON_OPERAND, nargs=-1, required=True)
@click.pass_obj
def union(app: AppContext, members: tuple[Any, ...]) -> None:
    """Values matched by any of MEMBERS (anyOf)."""
    app.emit(app.service.union(*members))


@click.command(
    "all-of",
    cls=AlgebraCommand,
    examples="""\
  schemalgebra all-of '{"type": "primitive", "kind": "string"}' '{"type": "enum", "values": ["a", 1]}'""",
)
@click.argument("members", type=JSON_OPERAND, nargs=-1, required=True)
@click.pass_obj
def all_of(app: AppContext, members: tuple[Any, ...]) -> None:
    """Values matched by every one of MEMBERS (allOf)."""
    app.emit(app.service.all_of(*members))


@click.command(
    cls=AlgebraCommand,
    examples="""\
  schemalgebra negate '{"type": "primitive", "kind": "null"}'""",
)
@click.argument("operand", type=JSON_OPERAND)
@click.pass_obj
def negate(app: AppContext, operand: Any) -> None:
    """Every value OPERAND does not match (not)."""
    app.emit(app.service.negate(operand))


@click.command(
    cls=AlgebraCommand,
    examples="""\
  schemalgebra cond '{"type": "const", "value": "dog"}' \\
      --parent '{"type": "enum", "values": ["cat", "dog"]}' \\
      --else '{"type": "primitive", "kind": "string"}'""",
)
@click.argument("if_", metavar="IF", type=JSON_OPERAND)
@click.option("--then", type=JSON_OPERAND, default=None, help="Schema for values matching IF.")
@click.option(
    "--else", "else_", type=JSON_OPERAND, default=None, help="Schema for the other values."
)
@click.option("--parent", type=JSON_OPERAND, default=None, help="Enclosing schema (default: any).")
@click.pass_obj
def cond(app: AppContext, if_: Any, then: Any, else_: Any, parent: Any) -> None:
    """if/then/else composition of IF with optional branches."""
    app.emit(app.service.if_then_else(if_, then, else_, parent))
