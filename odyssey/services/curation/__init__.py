"""
Home page curation.

Splits a newest-first pool of posts into two disjoint sections:
up to three featured posts and up to four latest posts.
"""

from odyssey.services.curation.curator import curate
from odyssey.services.curation.stages import (
    TagPartition,
    backfill,
    partition,
    select_featured,
    select_latest,
    select_primary,
)

__all__ = [
    "curate",
    "partition",
    "select_primary",
    "select_featured",
    "select_latest",
    "backfill",
    "TagPartition",
]
