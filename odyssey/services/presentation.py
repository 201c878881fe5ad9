from collections.abc import Iterable
from datetime import datetime
from typing import Any

from odyssey.core.constants import BASE_KEYWORDS, PLACEHOLDER_IMAGE
from odyssey.models.post import BlogPost


def format_date(value: Any) -> str:
    """Render a publish timestamp as e.g. "March 5, 2024"."""
    if value is None:
        return "No date"
    if isinstance(value, datetime):
        return f"{value.strftime('%B')} {value.day}, {value.year}"
    return "Invalid date"


def image_or_placeholder(url: str) -> str:
    return url or PLACEHOLDER_IMAGE


def topical_tags(posts: Iterable[BlogPost]) -> list[str]:
    """Distinct reader-facing tags across ``posts``, in first-seen order."""
    seen: dict[str, None] = {}
    for post in posts:
        for tag in post.topical_tags:
            seen.setdefault(tag, None)
    return list(seen)


def meta_keywords(tags: list[str]) -> str:
    if not tags:
        return BASE_KEYWORDS
    return f"{BASE_KEYWORDS}, {', '.join(tags)}"
