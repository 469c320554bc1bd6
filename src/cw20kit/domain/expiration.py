"""Allowance expiration bounds.

An allowance can expire at a block height, at a block time (nanoseconds
since the Unix epoch), or never.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Discriminator, Field, Tag

from cw20kit.domain.tagged import TaggedMessage, external_tag
from cw20kit.domain.types import UINT64_MAX, Uint64


class AtHeight(TaggedMessage):
    """Expires once the chain reaches this block height."""

    tag = "at_height"
    newtype_field = "height"

    height: int = Field(strict=True, ge=0, le=UINT64_MAX)

    def is_expired(self, height: int, time_nanos: int) -> bool:
        return height >= self.height


class AtTime(TaggedMessage):
    """Expires once block time reaches this timestamp (nanoseconds)."""

    tag = "at_time"
    newtype_field = "time"

    time: Uint64

    def is_expired(self, height: int, time_nanos: int) -> bool:
        return time_nanos >= self.time


class Never(TaggedMessage):
    """Never expires."""

    tag = "never"

    def is_expired(self, height: int, time_nanos: int) -> bool:
        return False


Expiration = Annotated[
    Annotated[AtHeight, Tag(AtHeight.tag)]
    | Annotated[AtTime, Tag(AtTime.tag)]
    | Annotated[Never, Tag(Never.tag)],
    Discriminator(external_tag),
]
