"""KeyValueStore 实现。"""

import copy
from typing import Any

from youtube_feed.core.infrastructure.redis.client import RedisClient


class RedisKeyValueStore:
    """基于 Redis 的 KeyValueStore，值以 JSON 字符串保存。"""

    def __init__(self, client: RedisClient):
        self.client = client

    async def get(self, key: str) -> Any | None:
        return await self.client.get_json(key)

    async def set(self, key: str, value: Any) -> None:
        await self.client.set_json(key, value)


class InMemoryKeyValueStore:
    """进程内 KeyValueStore。

    读写都做深拷贝，调用方后续修改不会影响已保存的值。
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self.data: dict[str, Any] = copy.deepcopy(data) if data else {}

    async def get(self, key: str) -> Any | None:
        value = self.data.get(key)
        return copy.deepcopy(value)

    async def set(self, key: str, value: Any) -> None:
        self.data[key] = copy.deepcopy(value)
