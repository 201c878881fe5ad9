"""
Core constants used across the application. Keep these simple and documented.
"""

# Home page slots
FEATURED_LIMIT: int = 3
LATEST_LIMIT: int = 4

# Routing tags: they pick a post for a home page section and are never shown as topics
FEATURED_TAG: str = "featured"
LATEST_TAG: str = "latest"
RESERVED_TAGS: frozenset[str] = frozenset({FEATURED_TAG, LATEST_TAG})

BASE_KEYWORDS: str = "anime, manga, japanese animation, anime blog"
PLACEHOLDER_IMAGE: str = "/static/placeholder.svg"

POOL_CACHE_KEY: str = "odyssey:pool:{collection}"
