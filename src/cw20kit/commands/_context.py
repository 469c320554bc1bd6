"""The object every subcommand receives through ``@click.pass_obj``."""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

import click

from cw20kit.config.logging import configure_logging
from cw20kit.output.formatters import format_result

if TYPE_CHECKING:
    from cw20kit.config.settings import Cw20Settings
    from cw20kit.services.result import ServiceResult


class AppContext:
    """Resolved settings plus the one place results leave the process."""

    def __init__(self, settings: Cw20Settings) -> None:
        self.settings = settings
        configure_logging(
            verbose=settings.verbose,
            quiet=settings.quiet,
            log_json=settings.log_json,
        )

    @staticmethod
    def read_input(source: IO[bytes]) -> bytes:
        """Read a whole message file (or stdin for ``-``)."""
        return source.read()

    def emit(self, result: ServiceResult) -> None:
        """Print *result* and exit 1 when it is a failure.

        Successes go to stdout. Failures go to stderr, and so do warnings
        in human mode; JSON output already carries them.
        """
        output = self.settings.output_settings()
        text = format_result(result, settings=output)
        if not result.ok:
            click.echo(text, err=True)
            raise SystemExit(1)

        click.echo(text)
        if not output.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
