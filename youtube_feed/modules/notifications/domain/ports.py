"""通知模块端口定义。"""

from typing import Any, Protocol


class KeyValueStore(Protocol):
    """订阅数据所在的键值存储端口。"""

    async def get(self, key: str) -> Any | None:
        """读取 key 对应的值，不存在时返回 None。"""
        ...

    async def set(self, key: str, value: Any) -> None:
        """写入 key，覆盖已有值。"""
        ...


class FeedTracker(Protocol):
    """按用户追踪最新视频的服务端口。"""

    async def fetch_latest(self, username: str) -> None:
        """开始追踪用户并拉取其最新视频。"""
        ...

    async def forget(self, username: str) -> None:
        """清除该用户的全部追踪数据。"""
        ...


class NullFeedTracker:
    """未配置 FeedTracker 时使用的空实现。"""

    async def fetch_latest(self, username: str) -> None:
        return None

    async def forget(self, username: str) -> None:
        return None
