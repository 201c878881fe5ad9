from collections.abc import Iterable, Sequence
from typing import NamedTuple

from odyssey.core.constants import FEATURED_LIMIT, FEATURED_TAG, LATEST_LIMIT, LATEST_TAG
from odyssey.models.post import BlogPost


class TagPartition(NamedTuple):
    """Posts carrying each routing tag, in pool order."""

    featured: list[BlogPost]
    latest: list[BlogPost]


def _ids(posts: Iterable[BlogPost]) -> set[str]:
    return {post.id for post in posts}


def partition(pool: Sequence[BlogPost]) -> TagPartition:
    """
    Split the pool by routing tag.

    A post tagged with both routing tags lands in both partitions.
    """
    tagged_featured = [post for post in pool if post.has_tag(FEATURED_TAG)]
    tagged_latest = [post for post in pool if post.has_tag(LATEST_TAG)]
    return TagPartition(featured=tagged_featured, latest=tagged_latest)


def select_featured(pool: Sequence[BlogPost], tagged: TagPartition) -> list[BlogPost]:
    """Editorial picks first, otherwise the most recent posts."""
    if tagged.featured:
        return list(tagged.featured[:FEATURED_LIMIT])
    return list(pool[:FEATURED_LIMIT])


def select_latest(pool: Sequence[BlogPost], tagged: TagPartition, featured: Sequence[BlogPost]) -> list[BlogPost]:
    """
    Primary latest selection.

    Uses the tagged posts as-is when any exist, even if there are fewer than
    LATEST_LIMIT of them; topping up is left to backfill(). Without tagged
    posts, falls back to the most recent posts that are not featured.
    """
    featured_ids = _ids(featured)
    source = tagged.latest if tagged.latest else pool
    return [post for post in source if post.id not in featured_ids][:LATEST_LIMIT]


def select_primary(pool: Sequence[BlogPost], tagged: TagPartition) -> tuple[list[BlogPost], list[BlogPost]]:
    """Run the featured and primary latest selections."""
    featured = select_featured(pool, tagged)
    return featured, select_latest(pool, tagged, featured)


def backfill(pool: Sequence[BlogPost], featured: Sequence[BlogPost], latest: Sequence[BlogPost]) -> list[BlogPost]:
    """
    Top up latest from the pool, in pool order, skipping anything already shown.

    Returns a new list; the inputs are left untouched.
    """
    filled = list(latest)
    if len(filled) >= LATEST_LIMIT:
        return filled

    seen = _ids(featured) | _ids(filled)
    for post in pool:
        if len(filled) >= LATEST_LIMIT:
            break
        if post.id in seen:
            continue
        filled.append(post)
        seen.add(post.id)
    return filled
