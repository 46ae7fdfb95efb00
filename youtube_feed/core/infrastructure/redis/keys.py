"""Redis Key 命名规范。

订阅列表整体存放在一个固定 key 下，沿用 hubot brain 时代的命名，
以便已有数据无需迁移。
"""


class RedisKeys:
    """Redis Key 命名空间管理。"""

    # 全部订阅记录（JSON 数组）
    NOTIFY_FOR = "youtubeFeed.notifyFor"
