from collections.abc import Sequence

from odyssey.models.post import BlogPost, CuratedFeed
from odyssey.services.curation.stages import backfill, partition, select_primary


def curate(pool: Sequence[BlogPost]) -> CuratedFeed:
    """
    Pick the featured and latest home page sections from a newest-first pool.

    Stateless and side-effect free: the pool is never reordered or mutated,
    and the same pool always yields the same feed.
    """
    tagged = partition(pool)
    featured, latest = select_primary(pool, tagged)
    latest = backfill(pool, featured, latest)
    return CuratedFeed(featured=tuple(featured), latest=tuple(latest))
