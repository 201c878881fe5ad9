from datetime import datetime, timedelta, timezone

from odyssey.models.post import BlogPost

BASE_TIME = datetime(2024, 3, 20, 12, 0, tzinfo=timezone.utc)


def make_post(post_id: str, *tags: str, age_days: int = 0, **fields) -> BlogPost:
    data = {
        "id": post_id,
        "title": f"Post {post_id}",
        "tags": list(tags),
        "published_at": BASE_TIME - timedelta(days=age_days),
    }
    data.update(fields)
    return BlogPost.model_validate(data)


def make_pool(*ids: str) -> list[BlogPost]:
    """Untagged posts, newest first in the order given."""
    return [make_post(post_id, age_days=i) for i, post_id in enumerate(ids)]


def ids(posts) -> list[str]:
    return [post.id for post in posts]
