"""Rich Console factory and theme for cw20kit output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract. In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

CW20_THEME = Theme(
    {
        "cw20.ok": "bold green",
        "cw20.error": "bold red",
        "cw20.warning": "bold yellow",
        "cw20.op": "bold cyan",
        "cw20.key": "dim",
        "cw20.tag": "bold blue",
        "cw20.amount": "magenta",
        "cw20.path": "dim",
    }
)

_AMOUNT_KEYS = frozenset({"total_supply", "cap", "amount", "balance"})


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=CW20_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_key(key: str) -> str:
    """Return the Rich style name for a data key."""
    if key in ("tag", "variant", "response"):
        return "cw20.tag"
    if key in _AMOUNT_KEYS:
        return "cw20.amount"
    if key.endswith("_dir") or key == "path":
        return "cw20.path"
    return ""
