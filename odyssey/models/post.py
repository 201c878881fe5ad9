import re
from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from odyssey.core.constants import RESERVED_TAGS

# Firestore timestamps carry nanoseconds; datetime keeps microseconds
_FRACTION_RE = re.compile(r"(\.\d{6})\d+")


def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _as_string_set(value: Any) -> frozenset[str]:
    # Strings are iterable too, but a bare string is not a list of tags
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable) or isinstance(value, dict):
        return frozenset()
    return frozenset(item for item in value if isinstance(item, str))


def _as_timestamp(value: Any) -> datetime | None:
    if isinstance(value, datetime):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(float(value), tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(value, str) and value.strip():
        raw = value.strip()
        if raw.endswith("Z"):
            raw = raw[:-1] + "+00:00"
        raw = _FRACTION_RE.sub(r"\1", raw)
        try:
            return datetime.fromisoformat(raw)
        except ValueError:
            return None
    return None


class BlogPost(BaseModel):
    """
    A single post from the store, normalized for curation.

    Construction is the one place where raw store fields are cleaned up:
    missing or malformed strings become "", tags and likes become frozensets,
    and unreadable timestamps become None. Instances are frozen.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    title: str = ""
    description: str = ""
    image_url: str = Field(default="", validation_alias=AliasChoices("image_url", "imageUrl"))
    body: str = Field(default="", validation_alias=AliasChoices("body", "content"))
    published_at: datetime | None = Field(
        default=None, validation_alias=AliasChoices("published_at", "publishedAt", "date")
    )
    author: str = ""
    tags: frozenset[str] = frozenset()
    liked_by: frozenset[str] = Field(
        default=frozenset(), validation_alias=AliasChoices("liked_by", "likedBy", "likes")
    )

    @field_validator("title", "description", "image_url", "body", "author", mode="before")
    @classmethod
    def _normalize_text(cls, value: Any) -> str:
        return _as_text(value)

    @field_validator("tags", "liked_by", mode="before")
    @classmethod
    def _normalize_sets(cls, value: Any) -> frozenset[str]:
        return _as_string_set(value)

    @field_validator("published_at", mode="before")
    @classmethod
    def _normalize_timestamp(cls, value: Any) -> datetime | None:
        return _as_timestamp(value)

    @classmethod
    def from_document(cls, doc_id: str, fields: dict[str, Any]) -> "BlogPost":
        """Build a post from a store document id and its decoded fields."""
        return cls.model_validate({**fields, "id": doc_id})

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags

    @property
    def topical_tags(self) -> list[str]:
        """Tags meant for readers: everything except the routing tags."""
        return sorted(self.tags - RESERVED_TAGS)


class CuratedFeed(BaseModel):
    """The two home page sections produced by the curator."""

    model_config = ConfigDict(frozen=True)

    featured: tuple[BlogPost, ...] = ()
    latest: tuple[BlogPost, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.featured and not self.latest
