"""MessageService — decode and check wire messages.

Four read-only operations, one per message family:
- validate_instantiate: decode a creation request and apply the
  acceptance rules (name, symbol, decimals)
- decode_execute: decode one command into its variant
- decode_query: decode one query and report its response shape
- decode_migrate: decode the (empty) migration request
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Any

from pydantic import ValidationError

from cw20kit.domain.errors import ValidationFailure, ValidationRule
from cw20kit.domain.execute import UpdateMarketing, parse_execute_msg
from cw20kit.domain.instantiate import (
    InstantiateMsg,
    parse_instantiate_msg,
    parse_migrate_msg,
    validate_instantiate,
)
from cw20kit.domain.query import PaginatedQuery, parse_query_msg, response_for
from cw20kit.services.base import BaseService, decode_failure
from cw20kit.services.result import ErrorCode, ServiceResult, failure
from cw20kit.services.telemetry import stage, timed

logger = logging.getLogger(__name__)

_RULE_CODES: dict[ValidationRule, ErrorCode] = {
    ValidationRule.INVALID_NAME: ErrorCode.INVALID_NAME,
    ValidationRule.INVALID_SYMBOL: ErrorCode.INVALID_SYMBOL,
    ValidationRule.INVALID_DECIMALS: ErrorCode.INVALID_DECIMALS,
}


def _supply_warnings(msg: InstantiateMsg) -> list[str]:
    """Non-fatal findings about the initial distribution."""
    warnings: list[str] = []
    cap = msg.get_cap()
    supply = msg.total_supply()
    if cap is not None and supply > cap:
        warnings.append(f"Initial supply {supply} exceeds mint cap {cap}")
    counts = Counter(coin.address for coin in msg.initial_balances)
    duplicates = sorted(addr for addr, n in counts.items() if n > 1)
    if duplicates:
        warnings.append(f"Duplicate initial balance addresses: {', '.join(duplicates)}")
    return warnings


class MessageService(BaseService):
    """Decode messages and apply creation-request validation."""

    @timed
    def validate_instantiate(self, raw: str | bytes) -> ServiceResult:
        """Decode *raw* as a creation request and validate it."""
        op = "validate_instantiate"
        try:
            with stage("decode"):
                msg = parse_instantiate_msg(raw)
        except ValidationError as exc:
            return decode_failure(op, exc)

        with stage("acceptance_rules"):
            try:
                validate_instantiate(msg)
            except ValidationFailure as exc:
                logger.debug("Creation request rejected: %s", exc.rule)
                return failure(op, _RULE_CODES[exc.rule], exc.message, rule=str(exc.rule))

        cap = msg.get_cap()
        data: dict[str, Any] = {
            "name": msg.name,
            "symbol": msg.symbol,
            "decimals": msg.decimals,
            "initial_balances": len(msg.initial_balances),
            "total_supply": str(msg.total_supply()),
            "minter": msg.mint.minter if msg.mint is not None else None,
            "cap": str(cap) if cap is not None else None,
            "marketing": msg.marketing is not None,
        }
        return ServiceResult(ok=True, op=op, data=data, warnings=_supply_warnings(msg))

    @timed
    def decode_execute(self, raw: str | bytes) -> ServiceResult:
        """Decode *raw* as a command."""
        op = "decode_execute"
        try:
            with stage("decode"):
                msg = parse_execute_msg(raw)
        except ValidationError as exc:
            return decode_failure(op, exc)

        data: dict[str, Any] = {
            "tag": msg.tag,
            "variant": type(msg).__name__,
            "message": msg.model_dump(mode="json"),
        }
        if isinstance(msg, UpdateMarketing):
            data["changes"] = {name: str(change) for name, change in msg.changes().items()}
        return ServiceResult(ok=True, op=op, data=data)

    @timed
    def decode_query(self, raw: str | bytes) -> ServiceResult:
        """Decode *raw* as a query and name the response it expects."""
        op = "decode_query"
        try:
            with stage("decode"):
                query = parse_query_msg(raw)
        except ValidationError as exc:
            return decode_failure(op, exc)

        data: dict[str, Any] = {
            "tag": query.tag,
            "variant": type(query).__name__,
            "message": query.model_dump(mode="json"),
            "response": response_for(query).__name__,
        }
        if isinstance(query, PaginatedQuery):
            data["page_limit"] = query.page_limit()
        return ServiceResult(ok=True, op=op, data=data)

    @timed
    def decode_migrate(self, raw: str | bytes) -> ServiceResult:
        """Decode *raw* as a migration request (must be ``{}``)."""
        op = "decode_migrate"
        try:
            with stage("decode"):
                msg = parse_migrate_msg(raw)
        except ValidationError as exc:
            return decode_failure(op, exc)
        return ServiceResult(ok=True, op=op, data={"message": msg.model_dump(mode="json")})
