"""Subcommand modules for cw20kit.

Provides register_commands() which uses deferred imports to keep
``cw20kit --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from cw20kit.commands.decode import decode
    from cw20kit.commands.schema import schema

    cli.add_command(decode)
    cli.add_command(schema)

    # --- Standalone commands ---
    from cw20kit.commands.validate import validate

    cli.add_command(validate)
