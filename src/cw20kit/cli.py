"""``cw20kit`` entry point: global flags, then the decode/schema/validate commands."""

from __future__ import annotations

from pathlib import Path

import click

from cw20kit import __version__
from cw20kit.commands import register_commands
from cw20kit.commands._base import Cw20Group
from cw20kit.commands._context import AppContext
from cw20kit.config.logging import bind_command
from cw20kit.config.settings import Cw20Settings


@click.group(
    cls=Cw20Group,
    invoke_without_command=True,
    examples=(
        "cw20kit validate instantiate.json",
        "cw20kit --json decode query balance.json",
        "cw20kit -c ./ci/cw20kit.toml schema export",
    ),
)
@click.version_option(__version__, prog_name="cw20kit")
@click.option("--json", "json_output", is_flag=True, help="Emit results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the essential line.")
@click.option("-v", "--verbose", is_flag=True, help="Show details and stage timings.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Use this config file instead of searching for cw20kit.toml.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, **flags: bool) -> None:
    """Check and describe CW20 token messages."""
    ctx.obj = AppContext(Cw20Settings.from_cli(config_path=config_path, **flags))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
    else:
        bind_command(ctx.invoked_subcommand)


register_commands(cli)
