"""Content negotiation between JSON and XML representations."""

import json
import re
import xml.etree.ElementTree as ET
from collections.abc import Sequence
from enum import Enum
from typing import Any
from uuid import UUID

from pydantic import BaseModel

from users_common.exceptions import NotAcceptableError

JSON_MEDIA_TYPE = "application/json"
XML_MEDIA_TYPE = "application/xml"
PLAIN_TEXT_MEDIA_TYPE = "text/plain"
ANY_MEDIA_TYPE = "*/*"

# Characters XML 1.0 does not allow in text content
_XML_ILLEGAL_CHARS = re.compile(r"[^\x09\x0A\x0D\x20-\uD7FF\uE000-\uFFFD\U00010000-\U0010FFFF]")


class MediaFormat(str, Enum):
    """Serialization formats the API can produce."""

    JSON = "json"
    XML = "xml"

    @property
    def content_type(self) -> str:
        media_type = JSON_MEDIA_TYPE if self is MediaFormat.JSON else XML_MEDIA_TYPE
        return f"{media_type}; charset=utf-8"


def select_format(accept: str | None) -> MediaFormat:
    """Pick a response format from a raw Accept header value.

    Checks run in fixed priority on plain substring containment: text/plain is
    refused outright, then JSON wins over XML. An empty header or a wildcard
    accepts anything and gets JSON.

    Raises:
        NotAcceptableError: If neither JSON nor XML is acceptable
    """
    accept = (accept or "").strip()

    if PLAIN_TEXT_MEDIA_TYPE in accept:
        raise NotAcceptableError(f"Unsupported Accept header: {accept}")
    if JSON_MEDIA_TYPE in accept:
        return MediaFormat.JSON
    if XML_MEDIA_TYPE in accept:
        return MediaFormat.XML
    if not accept or ANY_MEDIA_TYPE in accept:
        return MediaFormat.JSON

    raise NotAcceptableError(f"Unsupported Accept header: {accept}")


def to_xml(tag: str, value: Any) -> ET.Element:
    """Serialize a plain value tree into an XML element.

    Mappings become child elements per key, sequences repeat their items under
    the item's model name (or ``item``), None becomes an empty element.
    Characters XML 1.0 forbids are dropped from text.
    """
    element = ET.Element(tag)

    if isinstance(value, BaseModel):
        value = value.model_dump(by_alias=True, mode="json")

    if isinstance(value, dict):
        for key, child in value.items():
            element.append(to_xml(str(key), child))
    elif isinstance(value, (list, tuple)):
        for child in value:
            child_tag = type(child).__name__ if isinstance(child, BaseModel) else "item"
            element.append(to_xml(child_tag, child))
    elif isinstance(value, bool):
        element.text = "true" if value else "false"
    elif value is not None:
        element.text = _XML_ILLEGAL_CHARS.sub("", str(value))

    return element


def _xml_bytes(element: ET.Element) -> bytes:
    return ET.tostring(element, encoding="utf-8", xml_declaration=False)


class ContentNegotiator:
    """Render user payloads in the format a client accepts."""

    def select(self, accept: str | None) -> MediaFormat:
        return select_format(accept)

    def render_model(self, model: BaseModel, media_format: MediaFormat) -> bytes:
        """Render a single model, e.g. ``<UserDto>...</UserDto>`` in XML."""
        if media_format is MediaFormat.JSON:
            return model.model_dump_json(by_alias=True).encode("utf-8")
        return _xml_bytes(to_xml(type(model).__name__, model))

    def render_models(self, models: Sequence[BaseModel], item_name: str, media_format: MediaFormat) -> bytes:
        """Render a list of models, wrapped in ``ArrayOf<item_name>`` in XML."""
        if media_format is MediaFormat.JSON:
            payload = [model.model_dump(by_alias=True, mode="json") for model in models]
            return json.dumps(payload).encode("utf-8")
        return _xml_bytes(to_xml(f"ArrayOf{item_name}", list(models)))

    def render_id(self, user_id: UUID, media_format: MediaFormat) -> bytes:
        """Render the bare identifier returned on creation.

        XML deliberately uses a literal ``<guid>`` wrapper instead of the DTO.
        """
        if media_format is MediaFormat.JSON:
            return json.dumps(str(user_id)).encode("utf-8")
        return f"<guid>{user_id}</guid>".encode("utf-8")
