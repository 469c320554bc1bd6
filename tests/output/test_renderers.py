"""Tests for the op-specific Rich renderers."""

from __future__ import annotations

import json

from cw20kit.output.console import create_console, get_output, style_for_key
from cw20kit.output.renderers import render_quiet, render_result
from cw20kit.services.result import ServiceResult, failure


def _validated() -> ServiceResult:
    return ServiceResult(
        ok=True,
        op="validate_instantiate",
        data={
            "name": "Cash Token",
            "symbol": "CASH",
            "decimals": 6,
            "initial_balances": 1,
            "total_supply": "1000",
            "minter": None,
            "cap": None,
            "marketing": False,
        },
    )


class TestConsole:
    def test_buffered_output(self) -> None:
        console = create_console(no_color=True)
        console.print("hello")
        assert get_output(console) == "hello\n"

    def test_styles(self) -> None:
        assert style_for_key("tag") == "cw20.tag"
        assert style_for_key("total_supply") == "cw20.amount"
        assert style_for_key("output_dir") == "cw20.path"
        assert style_for_key("name") == ""


class TestRenderValidate:
    def test_fields(self) -> None:
        output = render_result(_validated())
        assert "validate_instantiate" in output
        assert "symbol: CASH" in output
        assert "total_supply: 1000" in output

    def test_absent_values_skipped(self) -> None:
        assert "minter" not in render_result(_validated())


class TestRenderDecode:
    def test_message_and_changes(self) -> None:
        result = ServiceResult(
            ok=True,
            op="decode_execute",
            data={
                "tag": "update_marketing",
                "variant": "UpdateMarketing",
                "message": {"update_marketing": {"project": ""}},
                "changes": {"project": "clear"},
            },
        )
        output = render_result(result)
        assert "tag: update_marketing" in output
        assert "changes.project: clear" in output
        assert '{"update_marketing":{"project":""}}' in output

    def test_page_limit(self) -> None:
        result = ServiceResult(
            ok=True,
            op="decode_query",
            data={"tag": "minters", "response": "MintersResponse", "page_limit": 10},
        )
        output = render_result(result)
        assert "response: MintersResponse" in output
        assert "page_limit: 10" in output


class TestRenderSchema:
    def test_show_prints_json(self) -> None:
        schema = {"$schema": "x", "title": "MigrateMsg", "type": "object"}
        result = ServiceResult(ok=True, op="schema_show", data={"kind": "migrate", "schema": schema})
        assert json.loads(render_result(result)) == schema

    def test_export_lists_files_when_verbose(self) -> None:
        result = ServiceResult(
            ok=True,
            op="schema_export",
            data={"output_dir": "/tmp/s", "files": ["query_msg.json"], "count": 1},
        )
        assert "query_msg.json" not in render_result(result)
        assert "query_msg.json" in render_result(result, verbose=True)


class TestRenderError:
    def test_rows(self) -> None:
        result = failure(
            "decode_query",
            "MALFORMED_MESSAGE",
            "Message does not match the expected shape (1 error(s))",
            errors=[{"loc": "balance.address", "msg": "Field required", "type": "missing"}],
        )
        output = render_result(result)
        assert "ERROR" in output
        assert "code: MALFORMED_MESSAGE" in output
        assert "balance.address: Field required" in output

    def test_verbose_shows_extra_detail(self) -> None:
        result = failure("schema_show", "UNKNOWN_SCHEMA", "Unknown", available=["query"])
        assert "available" not in render_result(result)
        assert "available" in render_result(result, verbose=True)


class TestRenderMeta:
    def test_stage_timings_when_verbose(self) -> None:
        result = _validated().model_copy(
            update={
                "meta": {
                    "timings": {
                        "total_ms": 1.5,
                        "stages": {"decode": 1.2, "acceptance_rules": 0.1},
                    }
                }
            }
        )
        output = render_result(result, verbose=True)
        assert "1.50ms  total" in output
        assert "1.20ms  decode" in output
        assert "acceptance_rules" in output
        assert "acceptance_rules" not in render_result(result)

    def test_other_meta_keys_compacted(self) -> None:
        result = _validated().model_copy(update={"meta": {"source": {"path": "a.json"}}})
        assert 'source: {"path":"a.json"}' in render_result(result, verbose=True)



class TestRenderQuiet:
    def test_files(self) -> None:
        result = ServiceResult(ok=True, op="schema_export", data={"files": ["a.json", "b.json"]})
        assert render_quiet(result) == "a.json\nb.json"

    def test_schema_compact(self) -> None:
        result = ServiceResult(ok=True, op="schema_show", data={"schema": {"a": 1}})
        assert render_quiet(result) == '{"a":1}'

    def test_fallback(self) -> None:
        assert render_quiet(_validated()) == "OK: validate_instantiate"
