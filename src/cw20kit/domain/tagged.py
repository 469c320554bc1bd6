"""Externally tagged unions.

Every variant of a closed message family is encoded as a single-key
object ``{"<tag>": <body>}``. Variants are plain models declaring a
``tag`` class constant; unions over them are built with pydantic's
callable :class:`~pydantic.Discriminator` so an unknown or missing tag
fails validation instead of falling through to a best-effort match.

Newtype variants wrap exactly one value. They declare ``newtype_field``
and their body is that value itself (``{"upload_logo": {"url": ...}}``)
rather than an object keyed by the field name.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import GetJsonSchemaHandler, SerializerFunctionWrapHandler, model_serializer, model_validator
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import CoreSchema

from cw20kit.domain.types import WireModel


def external_tag(value: Any) -> str | None:
    """Return the discriminator of a wire mapping or a variant instance.

    A mapping must carry exactly one key; anything else has no tag.
    """
    if isinstance(value, dict):
        if len(value) != 1:
            return None
        return next(iter(value))
    return getattr(value, "tag", None)


class TaggedMessage(WireModel):
    """Base for one variant of an externally tagged union."""

    tag: ClassVar[str]
    newtype_field: ClassVar[str | None] = None

    @model_validator(mode="before")
    @classmethod
    def _unwrap_tag(cls, data: Any) -> Any:
        if isinstance(data, dict) and len(data) == 1 and cls.tag in data:
            data = data[cls.tag]
            if cls.newtype_field is not None:
                return {cls.newtype_field: data}
            return data
        if cls.newtype_field is None or isinstance(data, cls):
            return data
        if isinstance(data, dict) and set(data) == {cls.newtype_field}:
            return data
        return {cls.newtype_field: data}

    @model_serializer(mode="wrap")
    def _wrap_tag(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        body = handler(self)
        if self.newtype_field is not None:
            body = body[self.newtype_field]
        return {self.tag: body}

    @classmethod
    def __get_pydantic_json_schema__(
        cls, core_schema: CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        body = dict(handler.resolve_ref_schema(handler(core_schema)))
        title = body.pop("title", cls.__name__)
        description = body.pop("description", None)
        if cls.newtype_field is not None:
            body = body.get("properties", {}).get(cls.newtype_field, {})
        schema: JsonSchemaValue = {
            "title": title,
            "type": "object",
            "required": [cls.tag],
            "properties": {cls.tag: body},
            "additionalProperties": False,
        }
        if description:
            schema["description"] = description
        return schema
