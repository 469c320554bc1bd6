"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from cw20kit.output.console import create_console, get_output, style_for_key

if TYPE_CHECKING:
    from rich.console import Console

    from cw20kit.services.result import ServiceResult

Renderer = Callable[..., None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    data = result.data
    if "tag" in data:
        return str(data["tag"])
    if "files" in data:
        return "\n".join(data["files"])
    if "schema" in data:
        return json.dumps(data["schema"], separators=(",", ":"))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _compact(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def _status_line(console: Console, result: ServiceResult) -> None:
    line = Text("OK", style="cw20.ok")
    line.append(f"  {result.op}", style="cw20.op")
    console.print(line)


def _field(console: Console, key: str, value: Any) -> None:
    line = Text(f"  {key}: ", style="cw20.key")
    line.append(_compact(value), style=style_for_key(key))
    console.print(line)


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block; stage timings get one line per stage."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        if k == "timings":
            _render_timings(console, v)
        else:
            console.print(Text(f"    {k}: {_compact(v)}"))


def _render_timings(console: Console, timings: dict[str, Any]) -> None:
    total = timings.get("total_ms", 0.0)
    console.print(Text(f"    {total:>8.2f}ms  total", style="dim"))
    for name, ms in timings.get("stages", {}).items():
        line = Text("    ")
        line.append(f"{ms:>8.2f}ms", style="yellow" if ms > 100 else "dim")
        line.append(f"  {name}")
        console.print(line)



# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    line = Text("ERROR", style="cw20.error")
    line.append(f"  {result.op}", style="cw20.op")
    line.append(f" — {msg}")
    console.print(line)
    if err is None:
        return

    console.print(Text(f"  code: {err.code}", style="cw20.key"))
    for row in err.detail.get("errors", []):
        console.print(Text(f"  {row['loc'] or '<root>'}: {row['msg']}"))
    if verbose:
        for k, v in err.detail.items():
            if k != "errors":
                console.print(Text(f"    {k}: {_compact(v)}"))


# ── Message renderers ─────────────────────────────────────────────────


def _render_validate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a validated creation request."""
    _status_line(console, result)
    for key in ("name", "symbol", "decimals", "initial_balances", "total_supply", "minter", "cap"):
        value = result.data.get(key)
        if value is not None:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


def _render_decode(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a decoded command, query or migration request."""
    _status_line(console, result)
    for key in ("tag", "variant", "response", "page_limit"):
        if key in result.data:
            _field(console, key, result.data[key])
    for name, change in result.data.get("changes", {}).items():
        _field(console, f"changes.{name}", change)
    _field(console, "message", result.data.get("message", {}))
    if verbose:
        _render_meta(console, result)


# ── Schema renderers ──────────────────────────────────────────────────


def _render_schema_show(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    console.print(
        json.dumps(result.data["schema"], indent=2),
        markup=False,
        highlight=False,
        emoji=False,
        soft_wrap=True,
    )


def _render_schema_export(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    _status_line(console, result)
    _field(console, "output_dir", result.data["output_dir"])
    _field(console, "count", result.data["count"])
    if verbose:
        table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
        table.add_column("File", style="cw20.path", no_wrap=True)
        for filename in result.data.get("files", []):
            table.add_row(filename)
        console.print(table)
        _render_meta(console, result)


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Renderer] = {
    "validate_instantiate": _render_validate,
    "decode_execute": _render_decode,
    "decode_query": _render_decode,
    "decode_migrate": _render_decode,
    "schema_show": _render_schema_show,
    "schema_export": _render_schema_export,
}
