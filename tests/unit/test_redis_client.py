"""RedisClient 单元测试（不连接真实 Redis）。"""

import json
from unittest.mock import AsyncMock

import pytest

from youtube_feed.core.infrastructure.redis import (
    RedisClient,
    RedisKeys,
    RedisUnavailableError,
)

pytestmark = pytest.mark.anyio


@pytest.fixture
def raw_client() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def client(raw_client) -> RedisClient:
    client = RedisClient(url="redis://localhost:6379/1")
    client._client = raw_client
    return client


class TestJson:
    async def test_get_json_decodes(self, client, raw_client):
        raw_client.get.return_value = '[{"username": "a", "channels": ["#x"]}]'

        value = await client.get_json(RedisKeys.NOTIFY_FOR)

        assert value == [{"username": "a", "channels": ["#x"]}]
        raw_client.get.assert_awaited_once_with("youtubeFeed.notifyFor")

    async def test_get_json_missing(self, client, raw_client):
        raw_client.get.return_value = None

        assert await client.get_json(RedisKeys.NOTIFY_FOR) is None

    async def test_get_json_corrupt_value_raises(self, client, raw_client):
        raw_client.get.return_value = "not json"

        with pytest.raises(json.JSONDecodeError):
            await client.get_json(RedisKeys.NOTIFY_FOR)

    async def test_set_json_keeps_unicode(self, client, raw_client):
        raw_client.set.return_value = True

        await client.set_json("k", [{"username": "频道", "channels": []}])

        raw_client.set.assert_awaited_once_with(
            "k", '[{"username": "频道", "channels": []}]', ex=None, nx=False
        )


class TestAvailability:
    async def test_ensure_available_yields_client(self, client, raw_client):
        raw_client.ping.return_value = True

        async with client.ensure_available() as available:
            assert available is client

    async def test_ensure_available_raises_and_closes(self, client, raw_client):
        raw_client.ping.side_effect = ConnectionError("refused")

        with pytest.raises(RedisUnavailableError):
            async with client.ensure_available(close_on_exit=True):
                pass

        raw_client.aclose.assert_awaited_once()
        assert client._client is None

    async def test_ensure_available_falsy_ping(self, client, raw_client):
        raw_client.ping.return_value = False

        with pytest.raises(RedisUnavailableError):
            async with client.ensure_available():
                pass

        raw_client.aclose.assert_not_awaited()
