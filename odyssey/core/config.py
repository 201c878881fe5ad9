from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="allow",
    )

    PORT: int = 8000
    APP_ENV: Literal["development", "production"] = "production"

    SITE_NAME: str = "Anime Odyssey"
    SITE_TITLE: str = "Anime Odyssey - Dive Into The World of Anime"
    SITE_DESCRIPTION: str = (
        "Explore our collection of anime reviews, analysis, and news. "
        "Discover featured posts and latest articles about your favorite anime series."
    )
    SITE_TAGLINE: str = "A modern anime blog exploring the artistry, culture, and stories of Japanese animation."
    SITE_PUBLISHER: str = "Anime Odyssey Hub"

    # Post store (Firestore REST API). Leave the project id empty to serve an empty pool.
    FIRESTORE_PROJECT_ID: str | None = None
    FIRESTORE_DATABASE: str = "(default)"
    FIRESTORE_API_KEY: str | None = None
    POSTS_COLLECTION: str = "blogs"
    # Optional JSON file of posts (newest first) used instead of Firestore, handy for local development
    POSTS_FILE: str | None = None
    HTTP_TIMEOUT_SECONDS: float = 10.0

    REDIS_URL: str = ""
    REDIS_MAX_CONNECTIONS: int = 20
    POOL_CACHE_TTL_SECONDS: int = 0  # 0 = snapshot cache disabled


settings = Settings()

