"""Creation request (instantiate) and its acceptance rules.

INVARIANT: validation is pure and total. Checks run in a fixed order
(name, symbol, decimals) and stop at the first failure, so a request
always fails with the same rule.

Name and symbol lengths are measured in UTF-8 bytes. The symbol check is
byte-wise: any non-ASCII character contributes bytes outside the allowed
set and is rejected without decoding.
"""

from __future__ import annotations

from pydantic import Field

from cw20kit.domain.errors import ValidationFailure, ValidationRule
from cw20kit.domain.logo import Logo
from cw20kit.domain.responses import MinterResponse
from cw20kit.domain.types import Uint128, WireModel

NAME_MIN_BYTES = 3
NAME_MAX_BYTES = 50
SYMBOL_MIN_BYTES = 3
SYMBOL_MAX_BYTES = 12
MAX_DECIMALS = 18

SYMBOL_BYTES = frozenset(b"0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz-")


def _utf8(text: str) -> bytes | None:
    """UTF-8 bytes of *text*, or None when it holds a lone surrogate."""
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError:
        return None


class Cw20Coin(WireModel):
    """An initial balance: *amount* tokens credited to *address*."""

    address: str
    amount: Uint128


class InstantiateMarketingInfo(WireModel):
    project: str | None = None
    description: str | None = None
    marketing: str | None = None
    logo: Logo | None = None


class InstantiateMsg(WireModel):
    """Everything needed to create a token."""

    name: str
    symbol: str
    decimals: int = Field(strict=True, ge=0, le=255)
    initial_balances: list[Cw20Coin]
    mint: MinterResponse | None = None
    marketing: InstantiateMarketingInfo | None = None

    def get_cap(self) -> int | None:
        """Hard cap on total supply, or None when unset or not mintable."""
        return self.mint.cap if self.mint is not None else None

    def total_supply(self) -> int:
        return sum(coin.amount for coin in self.initial_balances)

    def has_valid_name(self) -> bool:
        raw = _utf8(self.name)
        return raw is not None and NAME_MIN_BYTES <= len(raw) <= NAME_MAX_BYTES

    def has_valid_symbol(self) -> bool:
        raw = _utf8(self.symbol)
        if raw is None or not SYMBOL_MIN_BYTES <= len(raw) <= SYMBOL_MAX_BYTES:
            return False
        return all(byte in SYMBOL_BYTES for byte in raw)

    def has_valid_decimals(self) -> bool:
        return self.decimals <= MAX_DECIMALS


def validate_instantiate(msg: InstantiateMsg) -> None:
    """Raise :class:`ValidationFailure` for the first rule *msg* violates."""
    if not msg.has_valid_name():
        raise ValidationFailure(ValidationRule.INVALID_NAME)
    if not msg.has_valid_symbol():
        raise ValidationFailure(ValidationRule.INVALID_SYMBOL)
    if not msg.has_valid_decimals():
        raise ValidationFailure(ValidationRule.INVALID_DECIMALS)


def get_cap(msg: InstantiateMsg) -> int | None:
    """Module-level form of :meth:`InstantiateMsg.get_cap`."""
    return msg.get_cap()


class MigrateMsg(WireModel):
    """Migration request. Carries no data."""


def parse_instantiate_msg(raw: str | bytes) -> InstantiateMsg:
    return InstantiateMsg.model_validate_json(raw)


def parse_migrate_msg(raw: str | bytes) -> MigrateMsg:
    return MigrateMsg.model_validate_json(raw)
