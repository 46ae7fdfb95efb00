"""Logging configuration with structlog integration.

提供两种日志记录方式：
1. loguru: 用于一般调试日志
2. structlog: 用于订阅变更等业务事件的结构化日志
"""

import sys
from typing import Any

import structlog
from loguru import logger

from youtube_feed.core.config import settings


def setup_logging() -> None:
    """Configure application logging with structlog and loguru."""
    _configure_structlog()
    _configure_loguru()

    logger.info(f"Logging configured with level: {settings.LOG_LEVEL}")


def _configure_structlog() -> None:
    """配置 structlog 处理器链。"""
    # 根据环境选择渲染器
    if settings.ENVIRONMENT == "local":
        renderer = structlog.dev.ConsoleRenderer(colors=True)
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.CallsiteParameterAdder(
                [
                    structlog.processors.CallsiteParameter.MODULE,
                    structlog.processors.CallsiteParameter.FUNC_NAME,
                    structlog.processors.CallsiteParameter.LINENO,
                ]
            ),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            _get_log_level_number(settings.LOG_LEVEL)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def _configure_loguru() -> None:
    """配置 loguru。"""
    logger.remove()

    logger.add(
        sys.stderr,
        level=settings.LOG_LEVEL,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    if settings.ENVIRONMENT != "local":
        logger.add(
            f"logs/{settings.PROJECT_NAME}_{{time:YYYY-MM-DD}}.log",
            rotation="00:00",
            retention="30 days",
            level="INFO",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        )


def _get_log_level_number(level: str) -> int:
    """将日志级别字符串转换为数字。"""
    levels = {
        "DEBUG": 10,
        "INFO": 20,
        "WARNING": 30,
        "ERROR": 40,
        "CRITICAL": 50,
    }
    return levels.get(level.upper(), 20)


# ============================================================================
# 业务事件日志记录器
# ============================================================================


class BusinessEvents:
    """业务事件日志助手类。

    Usage:
        from youtube_feed.core.infrastructure.logging import BusinessEvents

        BusinessEvents.subscription_added(username="alice", channel="#general")
        BusinessEvents.user_forgotten(username="alice")
    """

    _log = structlog.get_logger("business.events")

    @classmethod
    def registry_initialized(cls, key: str, **extra: Any) -> None:
        """记录首次写入空订阅列表。"""
        cls._log.info(
            "registry_initialized",
            event_type="registry",
            key=key,
            **extra,
        )

    @classmethod
    def subscription_added(
        cls,
        username: str,
        channel: str,
        **extra: Any,
    ) -> None:
        """记录新增订阅。"""
        cls._log.info(
            "subscription_added",
            event_type="subscription",
            username=username,
            channel=channel,
            **extra,
        )

    @classmethod
    def subscription_removed(
        cls,
        username: str,
        channel: str,
        **extra: Any,
    ) -> None:
        """记录取消订阅。"""
        cls._log.info(
            "subscription_removed",
            event_type="subscription",
            username=username,
            channel=channel,
            **extra,
        )

    @classmethod
    def user_tracked(cls, username: str, **extra: Any) -> None:
        """记录用户首次被追踪（触发拉取最新视频）。"""
        cls._log.info(
            "user_tracked",
            event_type="feed",
            username=username,
            **extra,
        )

    @classmethod
    def user_forgotten(cls, username: str, **extra: Any) -> None:
        """记录用户最后一个频道被移除。"""
        cls._log.info(
            "user_forgotten",
            event_type="feed",
            username=username,
            **extra,
        )
