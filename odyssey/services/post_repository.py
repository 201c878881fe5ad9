import functools
import json
from pathlib import Path
from typing import Any, Protocol

from loguru import logger
from pydantic import ValidationError

from odyssey.core.cache import RedisCache, cache
from odyssey.core.config import settings
from odyssey.core.constants import POOL_CACHE_KEY
from odyssey.core.exceptions import StoreConfigurationError, StoreUnavailableError
from odyssey.models.post import BlogPost
from odyssey.services.firestore import FirestoreClient, decode_document


class PostSource(Protocol):
    """Anything that can hand over the raw post documents, newest first."""

    name: str

    async def fetch_raw(self) -> list[dict[str, Any]]: ...

    async def close(self) -> None: ...


class FirestorePostSource:
    """Reads a Firestore collection ordered by ``date`` descending."""

    def __init__(self, client: FirestoreClient, collection: str):
        self.client = client
        self.collection = collection
        self.name = collection

    @classmethod
    def from_settings(cls) -> "FirestorePostSource":
        if not settings.FIRESTORE_PROJECT_ID:
            raise StoreConfigurationError("FIRESTORE_PROJECT_ID is not configured")
        client = FirestoreClient(
            project_id=settings.FIRESTORE_PROJECT_ID,
            database=settings.FIRESTORE_DATABASE,
            api_key=settings.FIRESTORE_API_KEY,
            timeout=settings.HTTP_TIMEOUT_SECONDS,
        )
        return cls(client, settings.POSTS_COLLECTION)

    async def fetch_raw(self) -> list[dict[str, Any]]:
        documents = await self.client.run_query(self.collection, order_by="date", descending=True)
        raw_posts = []
        for doc in documents:
            doc_id, fields = decode_document(doc)
            raw_posts.append({**fields, "id": doc_id})
        return raw_posts

    async def close(self) -> None:
        await self.client.close()


class StaticPostSource:
    """
    Serves a fixed list of raw posts.

    Used for local development (a JSON file of posts) and in tests.
    The list is expected to be newest first already.
    """

    def __init__(self, raw_posts: list[dict[str, Any]] | None = None, name: str = "static"):
        self._raw_posts = list(raw_posts or [])
        self.name = name

    @classmethod
    def from_file(cls, path: str | Path) -> "StaticPostSource":
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except OSError as e:
            raise StoreConfigurationError(f"Cannot read posts file {path}: {e}") from e
        except ValueError as e:
            raise StoreConfigurationError(f"{path} is not valid UTF-8 JSON: {e}") from e
        if not isinstance(data, list):
            raise StoreConfigurationError(f"{path} must contain a JSON list of posts")
        return cls(data, name=path.stem)

    async def fetch_raw(self) -> list[dict[str, Any]]:
        return list(self._raw_posts)

    async def close(self) -> None:
        return None


class PostRepository:
    """
    Supplies the curator with a normalized, newest-first pool of posts.

    Every raw document is normalized exactly once, here. Store failures never
    propagate: they are logged and turned into an empty pool so the home page
    falls back to its "no content yet" state.
    """

    def __init__(self, source: PostSource, cache_backend: RedisCache | None = None, cache_ttl: int = 0):
        self.source = source
        self.cache = cache_backend
        self.cache_ttl = cache_ttl

    @property
    def _cache_key(self) -> str:
        return POOL_CACHE_KEY.format(collection=self.source.name)

    @property
    def _cache_enabled(self) -> bool:
        return bool(self.cache is not None and self.cache.enabled and self.cache_ttl > 0)

    async def _load_raw(self) -> list[dict[str, Any]]:
        if self._cache_enabled:
            cached = await self.cache.get_json(self._cache_key)
            if isinstance(cached, list):
                logger.debug(f"Pool snapshot served from cache ({len(cached)} posts)")
                return cached

        raw_posts = await self.source.fetch_raw()

        if self._cache_enabled:
            await self.cache.set(self._cache_key, raw_posts, ttl=self.cache_ttl)
        return raw_posts

    @staticmethod
    def normalize(raw: dict[str, Any]) -> BlogPost | None:
        """Turn one raw document into a BlogPost, or None when it has no usable id."""
        doc_id = raw.get("id")
        if not isinstance(doc_id, str) or not doc_id.strip():
            logger.warning(f"Skipping post without a usable id: {raw.get('title')!r}")
            return None
        try:
            return BlogPost.from_document(doc_id, raw)
        except ValidationError as e:
            logger.warning(f"Skipping malformed post {doc_id}: {e}")
            return None

    async def fetch_pool(self) -> list[BlogPost]:
        try:
            raw_posts = await self._load_raw()
        except StoreUnavailableError as e:
            logger.error(f"Error fetching posts from '{self.source.name}': {e}")
            return []

        pool = []
        seen_ids: set[str] = set()
        for raw in raw_posts:
            if not isinstance(raw, dict):
                logger.warning(f"Skipping non-object post entry of type {type(raw).__name__}")
                continue
            post = self.normalize(raw)
            if post is None:
                continue
            # One record per id; the first (newest) copy wins
            if post.id in seen_ids:
                logger.warning(f"Skipping repeated post id {post.id}")
                continue
            seen_ids.add(post.id)
            pool.append(post)

        if not pool:
            logger.info(f"No posts found in '{self.source.name}'")
        else:
            logger.info(f"Total posts fetched: {len(pool)}")
        return pool

    async def close(self) -> None:
        await self.source.close()


def build_post_source() -> PostSource:
    """Pick the post source from settings: a local JSON file, Firestore, or nothing."""
    try:
        if settings.POSTS_FILE:
            logger.info(f"Serving posts from {settings.POSTS_FILE}")
            return StaticPostSource.from_file(settings.POSTS_FILE)
        return FirestorePostSource.from_settings()
    except StoreConfigurationError as e:
        logger.warning(f"{e}. The home page will show its empty state.")
        return StaticPostSource([], name=settings.POSTS_COLLECTION)


@functools.lru_cache(maxsize=1)
def get_post_repository() -> PostRepository:
    return PostRepository(build_post_source(), cache_backend=cache, cache_ttl=settings.POOL_CACHE_TTL_SECONDS)
