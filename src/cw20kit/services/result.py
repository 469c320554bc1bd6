"""ServiceResult and ServiceError — the universal service contract.

INVARIANT: All service-layer methods return ServiceResult. Expected
failures (bad input, rule violations, I/O) become ``ok=False`` results
with a stable :class:`ErrorCode`; they are never raised to the caller.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    """Stable error codes carried by ``ServiceError.code``."""

    INVALID_NAME = "INVALID_NAME"
    INVALID_SYMBOL = "INVALID_SYMBOL"
    INVALID_DECIMALS = "INVALID_DECIMALS"
    INVALID_JSON = "INVALID_JSON"
    MALFORMED_MESSAGE = "MALFORMED_MESSAGE"
    UNKNOWN_SCHEMA = "UNKNOWN_SCHEMA"
    WRITE_FAILED = "WRITE_FAILED"


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Universal return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"validate_instantiate"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (timing, counts, etc.).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None


def failure(
    op: str,
    code: ErrorCode | str,
    message: str,
    **detail: Any,
) -> ServiceResult:
    """Build an ``ok=False`` result for *op*."""
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=str(code), message=message, detail=detail),
    )
