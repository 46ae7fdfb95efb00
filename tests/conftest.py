"""
pytest 配置和共享 fixtures。

使用方法：
    # 运行所有测试
    uv run pytest

    # 运行带覆盖率
    uv run pytest --cov=youtube_feed --cov-report=html
"""

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from youtube_feed.core.config import Settings

# ============================================
# 配置 Fixtures
# ============================================


@pytest.fixture
def anyio_backend() -> str:
    """redis.asyncio 仅支持 asyncio 后端。"""
    return "asyncio"


@pytest.fixture
def test_settings() -> Settings:
    """测试环境配置。"""
    return Settings(
        ENVIRONMENT="local",
        LOG_LEVEL="DEBUG",
        REDIS_URL="redis://localhost:6379/1",  # 使用 DB 1 隔离测试
    )


# ============================================
# Redis Fixtures
# ============================================


@pytest.fixture
def mock_redis_client() -> MagicMock:
    """Mock Redis 客户端。"""
    from youtube_feed.core.infrastructure.redis.client import RedisClient

    client = MagicMock(spec=RedisClient)
    client.get = AsyncMock(return_value=None)
    client.set = AsyncMock(return_value=True)
    client.get_json = AsyncMock(return_value=None)
    client.set_json = AsyncMock(return_value=True)
    return client


# ============================================
# 订阅相关 Fixtures
# ============================================


@pytest.fixture
def initial_record() -> dict[str, Any]:
    """存储中已有的一条订阅记录。"""
    return {"username": "init-username", "channels": ["#init-channel"]}


@pytest.fixture
def store(initial_record) -> AsyncMock:
    """记录调用的 KeyValueStore，初始包含 initial_record。"""
    store = AsyncMock()
    store.get.return_value = [initial_record]
    return store


@pytest.fixture
def empty_store() -> AsyncMock:
    """没有任何已保存数据的 KeyValueStore。"""
    store = AsyncMock()
    store.get.return_value = None
    return store


@pytest.fixture
def feed_tracker() -> AsyncMock:
    """记录调用的 FeedTracker。"""
    tracker = AsyncMock()
    tracker.fetch_latest.return_value = None
    tracker.forget.return_value = None
    return tracker
