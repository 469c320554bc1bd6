"""Click classes that carry sample invocations behind ``--examples``.

``--help`` stays short; ``--examples`` prints the samples and exits.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import click


class ExamplesMixin:
    """Add an eager ``--examples`` flag when *examples* is non-empty."""

    params: list[click.Parameter]

    def __init__(self, *args: Any, examples: Sequence[str] = (), **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = tuple(examples)
        if self.examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._print_examples,
                    help="Show usage examples and exit.",
                )
            )

    def _print_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        for line in self.examples:
            click.echo(f"  {line}")
        ctx.exit(0)


class Cw20Command(ExamplesMixin, click.Command):
    pass


class Cw20Group(ExamplesMixin, click.Group):
    """Group whose subcommands and subgroups accept ``examples=`` too."""

    command_class = Cw20Command
    group_class = type
