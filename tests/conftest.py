import pytest

from odyssey.models.post import BlogPost
from tests.helpers import make_pool


@pytest.fixture
def ten_posts() -> list[BlogPost]:
    return make_pool(*"ABCDEFGHIJ")
