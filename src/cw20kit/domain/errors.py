"""Creation-request validation failures."""

from __future__ import annotations

from enum import StrEnum


class ValidationRule(StrEnum):
    """The acceptance rule a creation request violated."""

    INVALID_NAME = "invalid_name"
    INVALID_SYMBOL = "invalid_symbol"
    INVALID_DECIMALS = "invalid_decimals"


RULE_MESSAGES: dict[ValidationRule, str] = {
    ValidationRule.INVALID_NAME: "Name is not in the expected format (3-50 UTF-8 bytes)",
    ValidationRule.INVALID_SYMBOL: (
        "Ticker symbol is not in expected format [a-zA-Z0-9\\-]{3,12}"
    ),
    ValidationRule.INVALID_DECIMALS: "Decimals must not exceed 18",
}


class ValidationFailure(ValueError):
    """A creation request broke one of the acceptance rules.

    Deterministic: the same request always fails the same way.
    """

    def __init__(self, rule: ValidationRule) -> None:
        self.rule = rule
        self.message = RULE_MESSAGES[rule]
        super().__init__(self.message)
