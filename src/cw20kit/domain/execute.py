"""Mutating commands (execute messages).

A closed family of 14 variants. Each variant carries only the fields its
action needs; the union rejects unknown tags and multi-key objects.

Extension notes:
- ``mint``, ``update_minter``, ``add_minter``, ``remove_minter``: mintable.
- ``*_allowance``, ``*_from``: allowance.
- ``update_marketing``, ``upload_logo``: marketing.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import Discriminator, Tag, TypeAdapter

from cw20kit.domain.expiration import Expiration
from cw20kit.domain.logo import Logo
from cw20kit.domain.tagged import TaggedMessage, external_tag
from cw20kit.domain.types import Binary, Uint128


class Transfer(TaggedMessage):
    """Move tokens to another account without triggering actions."""

    tag = "transfer"

    recipient: str
    amount: Uint128


class Burn(TaggedMessage):
    """Destroy tokens forever."""

    tag = "burn"

    amount: Uint128


class Send(TaggedMessage):
    """Transfer tokens to a contract and trigger an action on it with *msg*."""

    tag = "send"

    contract: str
    amount: Uint128
    msg: Binary


class Mint(TaggedMessage):
    """Create new tokens for *recipient*, if the sender may mint."""

    tag = "mint"

    recipient: str
    amount: Uint128


class IncreaseAllowance(TaggedMessage):
    """Raise how much *spender* may draw from the sender's account.

    A non-null *expires* overwrites the current allowance expiration.
    """

    tag = "increase_allowance"

    spender: str
    amount: Uint128
    expires: Expiration | None = None


class DecreaseAllowance(TaggedMessage):
    """Lower how much *spender* may draw from the sender's account.

    A non-null *expires* overwrites the current allowance expiration.
    """

    tag = "decrease_allowance"

    spender: str
    amount: Uint128
    expires: Expiration | None = None


class TransferFrom(TaggedMessage):
    """Move tokens owner -> recipient using the sender's allowance."""

    tag = "transfer_from"

    owner: str
    recipient: str
    amount: Uint128


class BurnFrom(TaggedMessage):
    """Burn tokens from *owner* using the sender's allowance."""

    tag = "burn_from"

    owner: str
    amount: Uint128


class SendFrom(TaggedMessage):
    """Send tokens owner -> contract using the sender's allowance."""

    tag = "send_from"

    owner: str
    contract: str
    amount: Uint128
    msg: Binary


class FieldChange(StrEnum):
    """What a marketing update does to one stored field."""

    UNCHANGED = "unchanged"
    CLEAR = "clear"
    SET = "set"


MarketingField = Literal["project", "description", "marketing"]


class UpdateMarketing(TaggedMessage):
    """Update marketing metadata.

    null leaves a field unchanged; an empty string clears it.
    """

    tag = "update_marketing"

    project: str | None = None
    description: str | None = None
    marketing: str | None = None

    def change_for(self, field: MarketingField) -> FieldChange:
        value: str | None = getattr(self, field)
        if value is None:
            return FieldChange.UNCHANGED
        if value == "":
            return FieldChange.CLEAR
        return FieldChange.SET

    def changes(self) -> dict[str, FieldChange]:
        return {name: self.change_for(name) for name in ("project", "description", "marketing")}


class UploadLogo(TaggedMessage):
    """Upload a new URL, SVG or PNG logo (marketing role only)."""

    tag = "upload_logo"
    newtype_field = "logo"

    logo: Logo


class UpdateMinter(TaggedMessage):
    """Hand minting to a new address; null removes the minter forever."""

    tag = "update_minter"

    new_minter: str | None = None


class AddMinter(TaggedMessage):
    """Add an address to the minters list (current minter only)."""

    tag = "add_minter"

    minter: str


class RemoveMinter(TaggedMessage):
    """Remove an address from the minters list (current minter only)."""

    tag = "remove_minter"

    minter: str


ExecuteMsg = Annotated[
    Annotated[Transfer, Tag(Transfer.tag)]
    | Annotated[Burn, Tag(Burn.tag)]
    | Annotated[Send, Tag(Send.tag)]
    | Annotated[Mint, Tag(Mint.tag)]
    | Annotated[IncreaseAllowance, Tag(IncreaseAllowance.tag)]
    | Annotated[DecreaseAllowance, Tag(DecreaseAllowance.tag)]
    | Annotated[TransferFrom, Tag(TransferFrom.tag)]
    | Annotated[BurnFrom, Tag(BurnFrom.tag)]
    | Annotated[SendFrom, Tag(SendFrom.tag)]
    | Annotated[UpdateMarketing, Tag(UpdateMarketing.tag)]
    | Annotated[UploadLogo, Tag(UploadLogo.tag)]
    | Annotated[UpdateMinter, Tag(UpdateMinter.tag)]
    | Annotated[AddMinter, Tag(AddMinter.tag)]
    | Annotated[RemoveMinter, Tag(RemoveMinter.tag)],
    Discriminator(external_tag),
]

EXECUTE_VARIANTS: tuple[type[TaggedMessage], ...] = (
    Transfer,
    Burn,
    Send,
    Mint,
    IncreaseAllowance,
    DecreaseAllowance,
    TransferFrom,
    BurnFrom,
    SendFrom,
    UpdateMarketing,
    UploadLogo,
    UpdateMinter,
    AddMinter,
    RemoveMinter,
)

execute_adapter: TypeAdapter[ExecuteMsg] = TypeAdapter(ExecuteMsg)


def parse_execute_msg(raw: str | bytes) -> TaggedMessage:
    """Decode one JSON command into its variant model."""
    return execute_adapter.validate_json(raw)
