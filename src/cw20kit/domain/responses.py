"""Query response shapes.

All of these except :class:`MintersResponse` mirror the shared CW20
interface; ``MintersResponse`` belongs to the multi-minter extension.
"""

from __future__ import annotations

from pydantic import Field

from cw20kit.domain.expiration import Expiration, Never
from cw20kit.domain.logo import LogoInfo
from cw20kit.domain.types import Binary, Uint128, WireModel


class BalanceResponse(WireModel):
    balance: Uint128


class TokenInfoResponse(WireModel):
    name: str
    symbol: str
    decimals: int = Field(strict=True, ge=0, le=255)
    total_supply: Uint128


class MinterResponse(WireModel):
    """Mint authority and optional hard cap on total supply."""

    minter: str
    cap: Uint128 | None = None


class AllowanceResponse(WireModel):
    allowance: Uint128
    expires: Expiration = Field(default_factory=Never)


class AllowanceInfo(WireModel):
    spender: str
    allowance: Uint128
    expires: Expiration = Field(default_factory=Never)


class AllAllowancesResponse(WireModel):
    allowances: list[AllowanceInfo] = Field(default_factory=list)


class SpenderAllowanceInfo(WireModel):
    owner: str
    allowance: Uint128
    expires: Expiration = Field(default_factory=Never)


class AllSpenderAllowancesResponse(WireModel):
    allowances: list[SpenderAllowanceInfo] = Field(default_factory=list)


class AllAccountsResponse(WireModel):
    accounts: list[str] = Field(default_factory=list)


class MarketingInfoResponse(WireModel):
    """Display metadata: project URL, description, logo and marketing admin."""

    project: str | None = None
    description: str | None = None
    logo: LogoInfo | None = None
    marketing: str | None = None


class DownloadLogoResponse(WireModel):
    """Embedded logo data with its MIME type."""

    mime_type: str
    data: Binary


class MintersResponse(WireModel):
    """Every address currently allowed to mint, in list order."""

    minters: list[str] = Field(default_factory=list)
