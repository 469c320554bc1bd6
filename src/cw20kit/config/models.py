"""Sections of ``cw20kit.toml``.

The file is sparse: it holds overrides only, and an empty or missing
file means every default below applies.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ExportConfig(BaseModel):
    """``[export]``: where ``schema export`` writes and how it indents."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    output_dir: str = "schema"
    indent: int = Field(default=2, ge=0, le=8)
