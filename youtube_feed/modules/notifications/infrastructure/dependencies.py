"""通知模块依赖装配。"""

from youtube_feed.core.infrastructure.redis.client import RedisClient, get_redis_client
from youtube_feed.modules.notifications.application.registry import (
    NotificationRegistry,
)
from youtube_feed.modules.notifications.domain.ports import FeedTracker, KeyValueStore
from youtube_feed.modules.notifications.infrastructure.stores import (
    RedisKeyValueStore,
)


def get_key_value_store(client: RedisClient | None = None) -> KeyValueStore:
    return RedisKeyValueStore(client or get_redis_client())


async def build_notification_registry(
    feed_tracker: FeedTracker | None = None,
    store: KeyValueStore | None = None,
    *,
    client: RedisClient | None = None,
    timeout: float = 5.0,
) -> NotificationRegistry:
    """加载订阅注册表。

    未传入 store 时使用 Redis，加载前先校验连通性；
    Redis 不可达时抛出 RedisUnavailableError。
    """
    if store is not None:
        return await NotificationRegistry.load(store, feed_tracker)

    redis = client or get_redis_client()
    async with redis.ensure_available(timeout=timeout):
        return await NotificationRegistry.load(get_key_value_store(redis), feed_tracker)
