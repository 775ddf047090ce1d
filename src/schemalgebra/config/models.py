"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, schemalgebra.toml only contains
overrides.  No file is needed at all for the defaults.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from schemalgebra.algebra.frame import DEFAULT_MAX_DEPTH


class AlgebraConfig(BaseModel):
    """[algebra] section."""

    model_config = {"frozen": True}

    max_depth: int = Field(default=DEFAULT_MAX_DEPTH, ge=1)


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = Field(default=120, ge=40)
    no_color: bool = False


class SchemalgebraConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    algebra: AlgebraConfig = Field(default_factory=AlgebraConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
