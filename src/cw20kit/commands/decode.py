"""Command group: decode wire messages into their typed variants."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

import click

from cw20kit.commands._base import Cw20Group

if TYPE_CHECKING:
    from cw20kit.commands._context import AppContext

_DECODE_EXAMPLES = (
    "cw20kit decode execute transfer.json",
    "cw20kit decode query balance.json",
    """echo '{"burn":{"amount":"10"}}' | cw20kit decode execute -""",
    "cw20kit decode migrate migrate.json",
)


@click.group(cls=Cw20Group, examples=_DECODE_EXAMPLES)
def decode() -> None:
    """Decode a command, query or migration message."""


@decode.command(
    examples=(
        "cw20kit decode execute transfer.json",
        """echo '{"add_minter":{"minter":"wasm1..."}}' | cw20kit decode execute -""",
    ),
)
@click.argument("source", type=click.File("rb"))
@click.pass_obj
def execute(app: AppContext, source: IO[bytes]) -> None:
    """Decode a command (execute message)."""
    from cw20kit.services.messages import MessageService

    app.emit(MessageService(app.settings).decode_execute(app.read_input(source)))


@decode.command(
    examples=(
        "cw20kit decode query balance.json",
        """echo '{"minters":{"limit":5}}' | cw20kit decode query -""",
    ),
)
@click.argument("source", type=click.File("rb"))
@click.pass_obj
def query(app: AppContext, source: IO[bytes]) -> None:
    """Decode a query and show the response it expects."""
    from cw20kit.services.messages import MessageService

    app.emit(MessageService(app.settings).decode_query(app.read_input(source)))


@decode.command(examples=("echo '{}' | cw20kit decode migrate -",))
@click.argument("source", type=click.File("rb"))
@click.pass_obj
def migrate(app: AppContext, source: IO[bytes]) -> None:
    """Decode a migration request."""
    from cw20kit.services.messages import MessageService

    app.emit(MessageService(app.settings).decode_migrate(app.read_input(source)))
