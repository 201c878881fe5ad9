from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from odyssey.models.home import PostCard
from odyssey.models.post import BlogPost, CuratedFeed


def test_missing_fields_default_to_empty():
    post = BlogPost.from_document("abc", {})

    assert post.id == "abc"
    assert post.title == ""
    assert post.description == ""
    assert post.image_url == ""
    assert post.body == ""
    assert post.author == ""
    assert post.published_at is None
    assert post.tags == frozenset()
    assert post.liked_by == frozenset()


def test_store_field_names_are_accepted():
    post = BlogPost.from_document(
        "abc",
        {
            "title": "Frieren review",
            "imageUrl": "https://img.example/frieren.png",
            "content": "<p>Body</p>",
            "date": "2024-03-05T10:30:00Z",
            "likes": ["u1", "u2", "u1"],
            "tags": ["review", "featured", "review"],
        },
    )

    assert post.image_url == "https://img.example/frieren.png"
    assert post.body == "<p>Body</p>"
    assert post.published_at == datetime(2024, 3, 5, 10, 30, tzinfo=timezone.utc)
    assert post.liked_by == frozenset({"u1", "u2"})
    assert post.tags == frozenset({"review", "featured"})


@pytest.mark.parametrize("raw_tags", [None, "featured", 42, {"featured": True}])
def test_malformed_tags_become_empty_set(raw_tags):
    post = BlogPost.from_document("abc", {"tags": raw_tags, "likes": raw_tags})

    assert post.tags == frozenset()
    assert post.liked_by == frozenset()


def test_non_string_tag_members_are_dropped():
    post = BlogPost.from_document("abc", {"tags": ["anime", 3, None, "latest"]})

    assert post.tags == frozenset({"anime", "latest"})


@pytest.mark.parametrize("raw_title", [None, 12, ["x"], {"a": 1}])
def test_malformed_strings_become_empty(raw_title):
    post = BlogPost.from_document("abc", {"title": raw_title, "author": raw_title})

    assert post.title == ""
    assert post.author == ""


@pytest.mark.parametrize(
    "raw_date, expected",
    [
        ("2024-03-05T10:30:00+00:00", datetime(2024, 3, 5, 10, 30, tzinfo=timezone.utc)),
        (0, datetime(1970, 1, 1, tzinfo=timezone.utc)),
        ("not a date", None),
        ("", None),
        (True, None),
        ({"seconds": 1}, None),
    ],
)
def test_published_at_parsing(raw_date, expected):
    post = BlogPost.from_document("abc", {"date": raw_date})

    assert post.published_at == expected


def test_document_id_wins_over_field_id():
    post = BlogPost.from_document("doc-id", {"id": "field-id"})

    assert post.id == "doc-id"


def test_posts_are_frozen():
    post = BlogPost.from_document("abc", {"title": "x"})

    with pytest.raises(ValidationError):
        post.title = "changed"


def test_topical_tags_exclude_routing_tags():
    post = BlogPost.from_document("abc", {"tags": ["shonen", "featured", "latest", "action"]})

    assert post.topical_tags == ["action", "shonen"]
    assert post.has_tag("featured")


def test_curated_feed_is_empty():
    post = BlogPost.from_document("abc", {})

    assert CuratedFeed().is_empty
    assert not CuratedFeed(latest=(post,)).is_empty


def test_post_card_uses_placeholder_and_display_date():
    post = BlogPost.from_document(
        "abc", {"title": "T", "author": "Mina", "date": "2024-03-05T10:30:00Z", "imageUrl": ""}
    )

    card = PostCard.from_post(post)

    assert card.image_url == "/static/placeholder.svg"
    assert card.date == "March 5, 2024"
    assert card.author == "Mina"


def test_nanosecond_timestamps_are_truncated():
    post = BlogPost.from_document("abc", {"date": "2024-03-05T10:30:00.123456789Z"})

    assert post.published_at == datetime(2024, 3, 5, 10, 30, 0, 123456, tzinfo=timezone.utc)
