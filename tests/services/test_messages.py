"""Tests for MessageService — decoding and creation-request validation."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from cw20kit.config.settings import Cw20Settings
from cw20kit.services.messages import MessageService


@pytest.fixture
def service(settings: Cw20Settings) -> MessageService:
    return MessageService(settings)


class TestValidateInstantiate:
    def test_valid_request(
        self, service: MessageService, instantiate_json: Callable[..., str]
    ) -> None:
        result = service.validate_instantiate(instantiate_json())
        assert result.ok
        assert result.op == "validate_instantiate"
        assert result.data == {
            "name": "Cash Token",
            "symbol": "CASH",
            "decimals": 6,
            "initial_balances": 1,
            "total_supply": "1000",
            "minter": "wasm1minter",
            "cap": "5000",
            "marketing": False,
        }
        assert result.warnings == []

    def test_accepts_bytes(
        self, service: MessageService, instantiate_json: Callable[..., str]
    ) -> None:
        assert service.validate_instantiate(instantiate_json().encode()).ok

    @pytest.mark.parametrize(
        "overrides,code,rule",
        [
            ({"name": "ab"}, "INVALID_NAME", "invalid_name"),
            ({"symbol": "CA$H"}, "INVALID_SYMBOL", "invalid_symbol"),
            ({"decimals": 19}, "INVALID_DECIMALS", "invalid_decimals"),
        ],
    )
    def test_rule_violations(
        self,
        service: MessageService,
        instantiate_json: Callable[..., str],
        overrides: dict[str, object],
        code: str,
        rule: str,
    ) -> None:
        result = service.validate_instantiate(instantiate_json(**overrides))
        assert not result.ok
        assert result.error is not None
        assert result.error.code == code
        assert result.error.detail == {"rule": rule}

    def test_symbol_message(
        self, service: MessageService, instantiate_json: Callable[..., str]
    ) -> None:
        result = service.validate_instantiate(instantiate_json(symbol="ÄBC"))
        assert result.error is not None
        assert result.error.message == (
            "Ticker symbol is not in expected format [a-zA-Z0-9\\-]{3,12}"
        )

    def test_invalid_json(self, service: MessageService) -> None:
        result = service.validate_instantiate("{")
        assert result.error is not None
        assert result.error.code == "INVALID_JSON"

    def test_malformed(self, service: MessageService) -> None:
        result = service.validate_instantiate('{"name":"Cash","symbol":"CSH"}')
        assert result.error is not None
        assert result.error.code == "MALFORMED_MESSAGE"
        locs = {row["loc"] for row in result.error.detail["errors"]}
        assert locs == {"decimals", "initial_balances"}
        assert result.error.message.endswith("(2 error(s))")

    def test_supply_over_cap_warns(
        self, service: MessageService, instantiate_json: Callable[..., str]
    ) -> None:
        result = service.validate_instantiate(
            instantiate_json(mint={"minter": "m", "cap": "10"})
        )
        assert result.ok
        assert result.warnings == ["Initial supply 1000 exceeds mint cap 10"]

    def test_duplicate_addresses_warn(
        self, service: MessageService, instantiate_json: Callable[..., str]
    ) -> None:
        balances = [
            {"address": "b", "amount": "1"},
            {"address": "a", "amount": "1"},
            {"address": "b", "amount": "1"},
            {"address": "a", "amount": "1"},
        ]
        result = service.validate_instantiate(instantiate_json(initial_balances=balances))
        assert result.warnings == ["Duplicate initial balance addresses: a, b"]

    def test_no_minter(
        self, service: MessageService, instantiate_json: Callable[..., str]
    ) -> None:
        result = service.validate_instantiate(instantiate_json(mint=None))
        assert result.data["minter"] is None
        assert result.data["cap"] is None


class TestDecodeExecute:
    def test_transfer(self, service: MessageService) -> None:
        result = service.decode_execute('{"transfer":{"recipient":"r","amount":"5"}}')
        assert result.ok
        assert result.data == {
            "tag": "transfer",
            "variant": "Transfer",
            "message": {"transfer": {"recipient": "r", "amount": "5"}},
        }

    def test_update_marketing_changes(self, service: MessageService) -> None:
        result = service.decode_execute('{"update_marketing":{"project":"","marketing":"m"}}')
        assert result.data["changes"] == {
            "project": "clear",
            "description": "unchanged",
            "marketing": "set",
        }

    def test_unknown_tag(self, service: MessageService) -> None:
        result = service.decode_execute('{"steal":{}}')
        assert result.error is not None
        assert result.error.code == "MALFORMED_MESSAGE"

    def test_not_json(self, service: MessageService) -> None:
        result = service.decode_execute(b"\x00\x01")
        assert result.error is not None
        assert result.error.code == "INVALID_JSON"


class TestDecodeQuery:
    def test_balance(self, service: MessageService) -> None:
        result = service.decode_query('{"balance":{"address":"a"}}')
        assert result.data["response"] == "BalanceResponse"
        assert "page_limit" not in result.data

    def test_paginated(self, service: MessageService) -> None:
        result = service.decode_query('{"all_accounts":{"limit":100}}')
        assert result.data["tag"] == "all_accounts"
        assert result.data["response"] == "AllAccountsResponse"
        assert result.data["page_limit"] == 30
        assert result.data["message"] == {"all_accounts": {"start_after": None, "limit": 100}}

    def test_bad_query(self, service: MessageService) -> None:
        assert not service.decode_query('{"balance":{}}').ok


class TestDecodeMigrate:
    def test_empty(self, service: MessageService) -> None:
        result = service.decode_migrate("{}")
        assert result.ok
        assert result.data == {"message": {}}

    def test_extra(self, service: MessageService) -> None:
        result = service.decode_migrate('{"x":1}')
        assert result.error is not None
        assert result.error.code == "MALFORMED_MESSAGE"


class TestStageTimings:
    def test_meta_absent_by_default(self, service: MessageService) -> None:
        assert service.decode_migrate("{}").meta is None

    def test_verbose_records_stages(
        self, project_root: Path, instantiate_json: Callable[..., str]
    ) -> None:
        verbose = MessageService(Cw20Settings.from_cli(project_root=project_root, verbose=True))
        result = verbose.validate_instantiate(instantiate_json())
        assert result.meta is not None
        timings = result.meta["timings"]
        assert list(timings["stages"]) == ["decode", "acceptance_rules"]
        assert timings["total_ms"] >= 0
        json.dumps(result.meta)

    def test_verbose_failure_still_timed(self, project_root: Path) -> None:
        verbose = MessageService(Cw20Settings.from_cli(project_root=project_root, verbose=True))
        result = verbose.decode_query("{")
        assert not result.ok
        assert result.meta is not None
        assert list(result.meta["timings"]["stages"]) == ["decode"]

