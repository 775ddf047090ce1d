"""Rich styles for descriptor output and a Console that renders into a string.

Renderers build Rich ``Text`` into a buffered Console and hand back the
captured string, so the CLI decides where it goes (stdout or stderr).
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DEFAULT_WIDTH = 120

THEME = Theme(
    {
        "sa.ok": "bold green",
        "sa.error": "bold red",
        "sa.op": "bold cyan",
        "sa.key": "dim",
        "sa.tag": "bold blue",
        "sa.never": "magenta",
        "sa.descriptor": "bold",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Buffered Console using :data:`THEME`; *width* defaults to :data:`DEFAULT_WIDTH`."""
    return Console(
        file=StringIO(),
        width=width or DEFAULT_WIDTH,
        theme=THEME,
        no_color=no_color,
        highlight=False,
    )


def get_output(console: Console) -> str:
    buffer = console.file
    if not isinstance(buffer, StringIO):
        raise TypeError("console was not created by create_console()")
    return buffer.getvalue()
