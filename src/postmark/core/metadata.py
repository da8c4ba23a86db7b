"""Extraction and validation of the post metadata block.

The block opens and closes with a line made of exactly four ``+`` characters
and holds one ``key: value`` record per line::

    ++++
    Title: My first post
    Author: John Doe
    Date: 2015/09/24 22:18
    Tags: go python markup
    ++++

Keys are case-insensitive. Everything before the opening delimiter is
discarded; everything after the closing delimiter belongs to the content.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timezone
import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .exceptions import (
    InvalidDateError,
    MetadataMalformedError,
    MetadataMissingError,
    UnsupportedMetadataPropertyError,
)


logger = logging.getLogger(__name__)

METADATA_DELIMITER = "++++"
DATE_FORMAT = "%Y/%m/%d %H:%M"
DEFAULT_POST_TYPE = "post"

# Wire key -> PostMeta field.
_PROPERTY_FIELDS = {
    "title": "title",
    "name": "name",
    "author": "author",
    "authorlink": "author_link",
    "date": "date",
    "tags": "tags",
    "type": "type",
    "protected": "protected",
}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PostMeta(BaseModel):
    """Validated metadata attached to a post."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    title: str = ""
    name: str = ""
    author: str = ""
    author_link: str = ""
    date: datetime = Field(default_factory=_utcnow)
    tags: tuple[str, ...] = ()
    type: str = DEFAULT_POST_TYPE
    protected: bool = False

    @field_validator("tags", mode="before")
    @classmethod
    def _split_tags(cls, value: Any) -> Any:
        if isinstance(value, str):
            return tuple(value.split())
        return value

    @field_validator("type", mode="before")
    @classmethod
    def _normalise_type(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower() or DEFAULT_POST_TYPE
        return value

    @field_validator("protected", mode="before")
    @classmethod
    def _coerce_protected(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower() == "true"
        return value


def parse_date(value: str, *, line: int | None = None) -> datetime:
    """Parse a ``YYYY/MM/DD HH:MM`` timestamp as a UTC datetime."""
    try:
        parsed = datetime.strptime(value, DATE_FORMAT)
    except ValueError as exc:
        raise InvalidDateError(value, line=line) from exc
    return parsed.replace(tzinfo=timezone.utc)


def parse_metadata_record(text: str, *, line: int | None = None) -> tuple[str, str]:
    """Split one ``key: value`` record into its lowercased key and value."""
    key, separator, remainder = text.partition(":")
    value = remainder.lstrip()
    if not separator or not value:
        raise MetadataMalformedError(text, line=line)
    return key.strip().lower(), value


def extract_metadata(lines: Sequence[str]) -> tuple[PostMeta, int]:
    """Consume the metadata block at the top of ``lines``.

    Returns the parsed metadata and the index of the first content line, so
    the remaining document is ``lines[offset:]``.
    """
    index = 0
    total = len(lines)

    while index < total and lines[index] != METADATA_DELIMITER:
        index += 1
    if index >= total:
        raise MetadataMissingError()

    opened_at = index + 1
    payload: dict[str, Any] = {}
    index += 1

    while index < total:
        text = lines[index]
        number = index + 1
        if text == METADATA_DELIMITER:
            meta = PostMeta.model_validate(payload)
            logger.debug(
                "Parsed metadata block (lines %d-%d): %s",
                opened_at,
                number,
                ", ".join(sorted(payload)) or "no fields",
            )
            return meta, index + 1

        index += 1
        if not text.strip():
            continue

        key, value = parse_metadata_record(text, line=number)
        field_name = _PROPERTY_FIELDS.get(key)
        if field_name is None:
            raise UnsupportedMetadataPropertyError(key, line=number)
        if field_name == "date":
            payload[field_name] = parse_date(value, line=number)
        else:
            payload[field_name] = value

    raise MetadataMissingError(line=opened_at)


__all__ = [
    "DATE_FORMAT",
    "DEFAULT_POST_TYPE",
    "METADATA_DELIMITER",
    "PostMeta",
    "extract_metadata",
    "parse_date",
    "parse_metadata_record",
]
