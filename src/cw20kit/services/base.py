"""BaseService — shared foundation for cw20kit services.

Every service receives the resolved :class:`Cw20Settings` at construction
time. Services hold no other state, so one instance may serve any number
of calls.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from cw20kit.services.result import ErrorCode, ServiceResult, failure

if TYPE_CHECKING:
    from cw20kit.config.settings import Cw20Settings

logger = logging.getLogger(__name__)


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class MessageService(BaseService):
            def decode_execute(self, raw: str) -> ServiceResult:
                ...
    """

    def __init__(self, settings: Cw20Settings | None = None) -> None:
        if settings is None:
            from cw20kit.config.settings import Cw20Settings

            settings = Cw20Settings()
        self._settings = settings


def error_details(exc: ValidationError) -> list[dict[str, Any]]:
    """Flatten pydantic errors into ``{"loc", "msg", "type"}`` rows."""
    return [
        {
            "loc": ".".join(str(part) for part in err["loc"]),
            "msg": err["msg"],
            "type": err["type"],
        }
        for err in exc.errors(include_url=False)
    ]


def decode_failure(op: str, exc: ValidationError) -> ServiceResult:
    """Map a pydantic decode error to INVALID_JSON or MALFORMED_MESSAGE."""
    errors = error_details(exc)
    if any(err["type"] == "json_invalid" for err in errors):
        logger.debug("%s: input is not valid JSON", op)
        return failure(op, ErrorCode.INVALID_JSON, "Input is not valid JSON", errors=errors)
    logger.debug("%s: %d schema error(s)", op, len(errors))
    return failure(
        op,
        ErrorCode.MALFORMED_MESSAGE,
        f"Message does not match the expected shape ({len(errors)} error(s))",
        errors=errors,
    )
