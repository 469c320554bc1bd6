"""Command: validate a creation (instantiate) request."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

import click

from cw20kit.commands._base import Cw20Command

if TYPE_CHECKING:
    from cw20kit.commands._context import AppContext


@click.command(
    cls=Cw20Command,
    examples=(
        "cw20kit validate instantiate.json",
        "cw20kit --json validate instantiate.json",
        "cat instantiate.json | cw20kit validate -",
    ),
)
@click.argument("source", type=click.File("rb"))
@click.pass_obj
def validate(app: AppContext, source: IO[bytes]) -> None:
    """Check a creation request's name, symbol and decimals."""
    from cw20kit.services.messages import MessageService

    app.emit(MessageService(app.settings).validate_instantiate(app.read_input(source)))
