"""Subcommand modules for schemalgebra.

Provides register_commands() which uses deferred imports to keep
``schemalgebra --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from schemalgebra.commands.compose import all_of, cond, intersect, negate, union
    from schemalgebra.commands.exclude import exclude
    from schemalgebra.commands.match import match

    cli.add_command(exclude)
    cli.add_command(intersect)
    cli.add_command(union)
    cli.add_command(all_of)
    cli.add_command(negate)
    cli.add_command(cond)
    cli.add_command(match)
