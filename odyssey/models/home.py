from pydantic import BaseModel, Field

from odyssey.models.post import BlogPost
from odyssey.services.presentation import format_date, image_or_placeholder


class PostCard(BaseModel):
    """What a home page card needs to render one post."""

    id: str
    title: str
    description: str
    image_url: str
    author: str
    date: str

    @classmethod
    def from_post(cls, post: BlogPost) -> "PostCard":
        return cls(
            id=post.id,
            title=post.title,
            description=post.description,
            image_url=image_or_placeholder(post.image_url),
            author=post.author,
            date=format_date(post.published_at),
        )


class HomeFeedResponse(BaseModel):
    featured: list[PostCard] = Field(default_factory=list)
    latest: list[PostCard] = Field(default_factory=list)
    keywords: list[str] = Field(default_factory=list, description="Topical tags shown across both sections")
