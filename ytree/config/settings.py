"""
配置模块
提供 ytree 的默认配置，业务项目可以继承并覆盖
"""

from enum import Enum
from typing import Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from ytree.exceptions import InvalidTraversalOrderError


# 祖先链 / 子树遍历的默认最大深度
DEFAULT_MAX_DEPTH = 10000


class TraversalOrder(str, Enum):
    """遍历顺序"""

    DEPTH_FIRST = "depth_first"
    BREADTH_FIRST = "breadth_first"
    POST_ORDER = "post_order"

    @classmethod
    def parse(cls, value: Union[str, "TraversalOrder", None]) -> "TraversalOrder":
        """解析遍历顺序，接受枚举、枚举值和常见别名

        别名不区分大小写，"-" 与 "_" 等价，如 "pre-order"、"BFS"。

        Raises:
            InvalidTraversalOrderError: 无法识别的顺序
        """
        if value is None:
            return cls.DEPTH_FIRST
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower().replace("-", "_")
            order = _ORDER_ALIASES.get(key)
            if order is not None:
                return order
        raise InvalidTraversalOrderError(value)


_ORDER_ALIASES = {
    "depth_first": TraversalOrder.DEPTH_FIRST,
    "pre_order": TraversalOrder.DEPTH_FIRST,
    "preorder": TraversalOrder.DEPTH_FIRST,
    "dfs": TraversalOrder.DEPTH_FIRST,
    "breadth_first": TraversalOrder.BREADTH_FIRST,
    "level_order": TraversalOrder.BREADTH_FIRST,
    "bfs": TraversalOrder.BREADTH_FIRST,
    "post_order": TraversalOrder.POST_ORDER,
    "postorder": TraversalOrder.POST_ORDER,
}

OrderType = Union[str, TraversalOrder, None]

TRAVERSAL_ORDERS = tuple(order.value for order in TraversalOrder)


class TreeSettings(BaseSettings):
    """树形遍历配置

    使用示例:
        from ytree.config import TreeSettings
        from ytree.tree import Forest

        forest = Forest(store, settings=TreeSettings(max_depth=64))

    环境变量:
        YTREE_TREE_MAX_DEPTH=64
        YTREE_TREE_DEFAULT_ORDER=breadth_first   # 也接受别名，如 bfs、pre-order
    """
    max_depth: int = Field(
        default=DEFAULT_MAX_DEPTH,
        ge=1,
        description="遍历的最大深度，超过视为存储数据成环",
    )
    default_order: str = Field(
        default="depth_first",
        description="未指定遍历顺序时使用的顺序：depth_first / breadth_first / post_order",
    )

    @field_validator("default_order")
    @classmethod
    def _check_default_order(cls, value: str) -> str:
        try:
            return TraversalOrder.parse(value).value
        except InvalidTraversalOrderError as e:
            raise ValueError(f"{e.message}，可选: {', '.join(TRAVERSAL_ORDERS)}") from e

    class Config:
        env_prefix = "YTREE_TREE_"


class LoggingSettings(BaseSettings):
    """日志配置

    使用示例:
        from ytree.config import LoggingSettings
        from ytree.log import setup_root_logger

        setup_root_logger(config=LoggingSettings(level="DEBUG"))
    """
    level: str = Field(default="INFO", description="日志级别")
    file_path: str = Field(default="", description="日志文件路径，为空则不写文件")
    enable_console: bool = Field(default=True, description="是否启用控制台输出")
    log_format: str = Field(default="", description="日志格式，为空则使用默认格式")

    class Config:
        env_prefix = "YTREE_LOG_"


class AppSettings(BaseSettings):
    """应用基础配置

    将各子配置类聚合为嵌套结构。

    配置优先级（从高到低）:
        环境变量 > YAML 配置文件 > 代码中的默认值

    YAML 配置示例 (config/settings.yaml):
        tree:
          max_depth: 128
          default_order: breadth_first
        logging:
          level: "DEBUG"
    """
    tree: TreeSettings = Field(default_factory=TreeSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
