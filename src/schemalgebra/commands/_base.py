"""Shared Click command class for the algebra subcommands."""

from __future__ import annotations

from typing import Any

import click


class AlgebraCommand(click.Command):
    """Command with worked operand examples behind an eager ``--examples`` flag.

    Descriptor operands are long JSON strings, so the examples live outside
    ``--help``.
    """

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if not examples:
            return
        self.params.append(
            click.Option(
                ["--examples"],
                help="Print example invocations and exit.",
                is_flag=True,
                is_eager=True,
                expose_value=False,
                callback=self._print_examples,
            )
        )

    def _print_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if value and not ctx.resilient_parsing:
            click.echo(f"{ctx.command_path} examples:\n")
            click.echo(self.examples)
            ctx.exit()
