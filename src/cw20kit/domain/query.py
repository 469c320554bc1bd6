"""Read-only queries and their response pairing.

Every query variant names exactly one response model through its
``response_model`` class constant. Paginated queries carry
``start_after`` (exclusive cursor) and ``limit`` (u32).
"""

from __future__ import annotations

from typing import Annotated, ClassVar

from pydantic import Discriminator, Field, Tag, TypeAdapter

from cw20kit.domain.responses import (
    AllAccountsResponse,
    AllAllowancesResponse,
    AllowanceResponse,
    AllSpenderAllowancesResponse,
    BalanceResponse,
    DownloadLogoResponse,
    MarketingInfoResponse,
    MinterResponse,
    MintersResponse,
    TokenInfoResponse,
)
from cw20kit.domain.tagged import TaggedMessage, external_tag
from cw20kit.domain.types import UINT32_MAX, WireModel

DEFAULT_LIMIT = 10
MAX_LIMIT = 30


class QueryVariant(TaggedMessage):
    """A query and the response shape it returns."""

    response_model: ClassVar[type[WireModel]]


class PaginatedQuery(QueryVariant):
    start_after: str | None = None
    limit: int | None = Field(default=None, strict=True, ge=0, le=UINT32_MAX)

    def page_limit(self) -> int:
        """Effective page size: *limit* (default 10) capped at 30."""
        limit = DEFAULT_LIMIT if self.limit is None else self.limit
        return min(limit, MAX_LIMIT)


class Balance(QueryVariant):
    """Current balance of *address*, 0 if unset."""

    tag = "balance"
    response_model = BalanceResponse

    address: str


class TokenInfo(QueryVariant):
    """Name, symbol, decimals and total supply."""

    tag = "token_info"
    response_model = TokenInfoResponse


class Minter(QueryVariant):
    """Who can mint and the hard cap on total supply."""

    tag = "minter"
    response_model = MinterResponse


class Allowance(QueryVariant):
    """How much *spender* can use from *owner*'s account, 0 if unset."""

    tag = "allowance"
    response_model = AllowanceResponse

    owner: str
    spender: str


class AllAllowances(PaginatedQuery):
    """Every allowance *owner* has approved."""

    tag = "all_allowances"
    response_model = AllAllowancesResponse

    owner: str


class AllSpenderAllowances(PaginatedQuery):
    """Every allowance *spender* has been granted."""

    tag = "all_spender_allowances"
    response_model = AllSpenderAllowancesResponse

    spender: str


class AllAccounts(PaginatedQuery):
    """Every account holding a balance."""

    tag = "all_accounts"
    response_model = AllAccountsResponse


class MarketingInfo(QueryVariant):
    """Display metadata: description, logo, project URL."""

    tag = "marketing_info"
    response_model = MarketingInfoResponse


class DownloadLogo(QueryVariant):
    """Embedded logo data. Fails upstream when no logo data is stored."""

    tag = "download_logo"
    response_model = DownloadLogoResponse


class Minters(PaginatedQuery):
    """Every address in the minters list."""

    tag = "minters"
    response_model = MintersResponse


QueryMsg = Annotated[
    Annotated[Balance, Tag(Balance.tag)]
    | Annotated[TokenInfo, Tag(TokenInfo.tag)]
    | Annotated[Minter, Tag(Minter.tag)]
    | Annotated[Allowance, Tag(Allowance.tag)]
    | Annotated[AllAllowances, Tag(AllAllowances.tag)]
    | Annotated[AllSpenderAllowances, Tag(AllSpenderAllowances.tag)]
    | Annotated[AllAccounts, Tag(AllAccounts.tag)]
    | Annotated[MarketingInfo, Tag(MarketingInfo.tag)]
    | Annotated[DownloadLogo, Tag(DownloadLogo.tag)]
    | Annotated[Minters, Tag(Minters.tag)],
    Discriminator(external_tag),
]

QUERY_VARIANTS: tuple[type[QueryVariant], ...] = (
    Balance,
    TokenInfo,
    Minter,
    Allowance,
    AllAllowances,
    AllSpenderAllowances,
    AllAccounts,
    MarketingInfo,
    DownloadLogo,
    Minters,
)

QUERY_RESPONSES: dict[str, type[WireModel]] = {
    variant.tag: variant.response_model for variant in QUERY_VARIANTS
}

query_adapter: TypeAdapter[QueryMsg] = TypeAdapter(QueryMsg)


def parse_query_msg(raw: str | bytes) -> QueryVariant:
    """Decode one JSON query into its variant model."""
    return query_adapter.validate_json(raw)


def response_for(query: QueryVariant) -> type[WireModel]:
    """Response model the engine must answer *query* with."""
    return QUERY_RESPONSES[query.tag]
