"""Command group: JSON Schema for the message contract."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from cw20kit.commands._base import Cw20Group
from cw20kit.services.schema import SCHEMA_TARGETS

if TYPE_CHECKING:
    from cw20kit.commands._context import AppContext

_SCHEMA_EXAMPLES = (
    "cw20kit schema show execute",
    "cw20kit schema export",
    "cw20kit schema export --output ./schema",
)


@click.group(cls=Cw20Group, examples=_SCHEMA_EXAMPLES)
def schema() -> None:
    """Print or export JSON Schemas."""


@schema.command(
    examples=(
        "cw20kit schema show instantiate",
        "cw20kit -q schema show query > query_msg.json",
    ),
)
@click.argument("kind", type=click.Choice(sorted(SCHEMA_TARGETS)))
@click.pass_obj
def show(app: AppContext, kind: str) -> None:
    """Print the schema for one message family."""
    from cw20kit.services.schema import SchemaService

    app.emit(SchemaService(app.settings).show(kind))


@schema.command(
    examples=(
        "cw20kit schema export",
        "cw20kit schema export --output /tmp/schema",
    ),
)
@click.option(
    "-o",
    "--output",
    "output_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Target directory (default: [export] output_dir).",
)
@click.pass_obj
def export(app: AppContext, output_dir: Path | None) -> None:
    """Write every message and response schema to a directory."""
    from cw20kit.services.schema import SchemaService

    app.emit(SchemaService(app.settings).export(output_dir))
