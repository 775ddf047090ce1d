"""Output mode dispatch.

The CLI renders ServiceResult for humans (Rich text) or machines (--json).
The formatter picks the mode from :class:`OutputSettings`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from schemalgebra.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from schemalgebra.services.result import ServiceResult


class OutputSettings(BaseModel):
    """How a ServiceResult should be rendered."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    width: int = 120
    no_color: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display according to *settings*."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2, exclude_none=True)
    if settings.quiet:
        return render_quiet(result)
    return render_result(
        result,
        verbose=settings.verbose,
        width=settings.width,
        no_color=settings.no_color,
    )
