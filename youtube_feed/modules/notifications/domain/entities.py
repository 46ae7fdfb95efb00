"""通知模块领域类型。"""

from typing import TypedDict


class Subscription(TypedDict):
    """单个用户的订阅记录。

    channels 保持插入顺序且不重复；channels 为空的记录不应存在。
    持久化时原样写入，即 ``{"username": ..., "channels": [...]}``。
    """

    username: str
    channels: list[str]
