"""Token logo references.

A logo is either a URL or raster/vector data embedded in the token
itself. Queries report embedded logos only as the bare string
``"embedded"``; the data is fetched separately with ``download_logo``.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import Discriminator, Tag

from cw20kit.domain.tagged import TaggedMessage, external_tag
from cw20kit.domain.types import Binary


class UrlLogo(TaggedMessage):
    """A reference to an externally hosted logo."""

    tag = "url"
    newtype_field = "url"

    url: str


class EmbeddedSvg(TaggedMessage):
    """SVG document (XML text)."""

    tag = "svg"
    newtype_field = "data"

    data: Binary


class EmbeddedPng(TaggedMessage):
    """PNG image."""

    tag = "png"
    newtype_field = "data"

    data: Binary


EmbeddedImage = Annotated[
    Annotated[EmbeddedSvg, Tag(EmbeddedSvg.tag)] | Annotated[EmbeddedPng, Tag(EmbeddedPng.tag)],
    Discriminator(external_tag),
]


class EmbeddedLogo(TaggedMessage):
    """Logo data stored alongside the token."""

    tag = "embedded"
    newtype_field = "image"

    image: EmbeddedImage

    @property
    def mime_type(self) -> str:
        if isinstance(self.image, EmbeddedSvg):
            return "image/svg+xml"
        return "image/png"


Logo = Annotated[
    Annotated[UrlLogo, Tag(UrlLogo.tag)] | Annotated[EmbeddedLogo, Tag(EmbeddedLogo.tag)],
    Discriminator(external_tag),
]

# Query-side view of a logo: embedded data is never inlined.
LogoInfo = Literal["embedded"] | UrlLogo
