"""订阅注册表。

按用户维护正在关注的频道列表，每次变更后整体写回存储，
并在用户首次出现 / 最后一个频道被移除时通知 FeedTracker。
"""

from __future__ import annotations

from loguru import logger

from youtube_feed.core.infrastructure.logging import BusinessEvents
from youtube_feed.core.infrastructure.redis.keys import RedisKeys
from youtube_feed.modules.notifications.domain.entities import Subscription
from youtube_feed.modules.notifications.domain.ports import (
    FeedTracker,
    KeyValueStore,
    NullFeedTracker,
)

NOTIFY_FOR_KEY = RedisKeys.NOTIFY_FOR


class NotificationRegistry:
    """按插入顺序保存 (username -> channels)，整体持久化在一个固定 key 下。

    通过 :meth:`load` 创建实例；``__init__`` 不做任何 I/O，初始状态为空。
    """

    def __init__(
        self,
        store: KeyValueStore,
        feed_tracker: FeedTracker | None = None,
    ):
        self.store = store
        self.feed_tracker: FeedTracker = feed_tracker or NullFeedTracker()
        self.notifications: list[Subscription] = []

    @classmethod
    async def load(
        cls,
        store: KeyValueStore,
        feed_tracker: FeedTracker | None = None,
    ) -> NotificationRegistry:
        """读取已保存的订阅；不存在时写入空列表作为基线。"""
        registry = cls(store, feed_tracker)
        stored = await store.get(NOTIFY_FOR_KEY)
        if stored is None:
            logger.info(f"No subscriptions stored under {NOTIFY_FOR_KEY}, initializing")
            await store.set(NOTIFY_FOR_KEY, registry.notifications)
            BusinessEvents.registry_initialized(key=NOTIFY_FOR_KEY)
        else:
            registry.notifications = stored
        return registry

    @property
    def usernames(self) -> list[str]:
        return [record["username"] for record in self.notifications]

    def _find(self, username: str) -> Subscription | None:
        for record in self.notifications:
            if record["username"] == username:
                return record
        return None

    async def _save(self) -> None:
        await self.store.set(NOTIFY_FOR_KEY, self.notifications)

    async def subscribe(self, username: str, channel: str) -> bool:
        """为频道订阅用户的新视频通知。

        已订阅时返回 False，不写存储也不触发拉取。
        """
        record = self._find(username)
        if record is None:
            self.notifications.append({"username": username, "channels": [channel]})
            await self._save()
            BusinessEvents.subscription_added(username=username, channel=channel)
            await self.feed_tracker.fetch_latest(username)
            BusinessEvents.user_tracked(username=username)
            return True

        if channel in record["channels"]:
            logger.debug(f"{channel} already subscribed to {username}")
            return False

        record["channels"].append(channel)
        await self._save()
        BusinessEvents.subscription_added(username=username, channel=channel)
        return True

    async def unsubscribe(self, username: str, channel: str) -> bool:
        """取消频道对用户的订阅。

        未订阅时返回 False；移除最后一个频道时同时删除整条记录。
        """
        record = self._find(username)
        if record is None or channel not in record["channels"]:
            logger.debug(f"{channel} is not subscribed to {username}")
            return False

        record["channels"].remove(channel)
        if not record["channels"]:
            self.notifications.remove(record)
            await self.feed_tracker.forget(username)
            BusinessEvents.user_forgotten(username=username)

        await self._save()
        BusinessEvents.subscription_removed(username=username, channel=channel)
        return True

    def is_subscribed(self, username: str, channel: str) -> bool:
        record = self._find(username)
        return record is not None and channel in record["channels"]

    def channels_for(self, username: str) -> list[str]:
        """返回用户当前关注的频道（副本，保持插入顺序）。"""
        record = self._find(username)
        return list(record["channels"]) if record is not None else []
