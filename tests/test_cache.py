from unittest.mock import AsyncMock

import pytest

from odyssey.core.cache import RedisCache


def test_cache_disabled_without_url():
    assert not RedisCache(url="").enabled
    assert RedisCache(url="redis://localhost:6379/0").enabled


@pytest.mark.asyncio
async def test_unconfigured_cache_behaves_like_a_miss():
    backend = RedisCache(url="")

    assert await backend.get("odyssey:pool:blogs") is None
    assert await backend.set("odyssey:pool:blogs", [{"id": "a"}], ttl=30) is False


@pytest.mark.asyncio
async def test_get_json_round_trips_through_client():
    client = AsyncMock()
    client.get = AsyncMock(return_value='[{"id": "a"}]')
    backend = RedisCache(url="redis://localhost:6379/0")
    backend._client = client

    assert await backend.get_json("key") == [{"id": "a"}]


@pytest.mark.asyncio
async def test_get_json_ignores_corrupt_entries():
    client = AsyncMock()
    client.get = AsyncMock(return_value="{not json")
    backend = RedisCache(url="redis://localhost:6379/0")
    backend._client = client

    assert await backend.get_json("key") is None


@pytest.mark.asyncio
async def test_set_uses_ttl():
    client = AsyncMock()
    backend = RedisCache(url="redis://localhost:6379/0")
    backend._client = client

    assert await backend.set("key", [{"id": "a"}], ttl=30) is True
    client.setex.assert_awaited_once_with("key", 30, '[{"id": "a"}]')
