import functools

from loguru import logger

from odyssey.models.home import HomeFeedResponse, PostCard
from odyssey.services.curation import curate
from odyssey.services.post_repository import PostRepository, get_post_repository
from odyssey.services.presentation import topical_tags


class HomeFeedService:
    """
    Builds the home page feed: fetch the pool, curate it, shape the cards.
    """

    def __init__(self, repository: PostRepository):
        self.repository = repository

    async def get_home_feed(self) -> HomeFeedResponse:
        pool = await self.repository.fetch_pool()
        feed = curate(pool)
        logger.info(
            f"Home feed curated from {len(pool)} posts: {len(feed.featured)} featured, {len(feed.latest)} latest"
        )

        return HomeFeedResponse(
            featured=[PostCard.from_post(post) for post in feed.featured],
            latest=[PostCard.from_post(post) for post in feed.latest],
            keywords=topical_tags([*feed.featured, *feed.latest]),
        )

    async def close(self) -> None:
        await self.repository.close()


@functools.lru_cache(maxsize=1)
def get_home_feed_service() -> HomeFeedService:
    return HomeFeedService(get_post_repository())
