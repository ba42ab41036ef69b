"""配置模块

- TreeSettings: 遍历深度上限、默认遍历顺序
- TraversalOrder: 遍历顺序枚举及别名解析
- LoggingSettings: 日志配置
- AppSettings: 聚合配置，支持 YAML + 环境变量
- ConfigLoader / load_yaml_config: YAML 配置加载

快速开始:
    from ytree.config import AppSettings, load_yaml_config

    settings = load_yaml_config("config/settings.yaml", AppSettings)
    forest = Forest(store, settings=settings.tree)
"""

from .settings import (
    AppSettings,
    TreeSettings,
    LoggingSettings,
    DEFAULT_MAX_DEPTH,
    TRAVERSAL_ORDERS,
    TraversalOrder,
    OrderType,
)

from .loader import (
    ConfigLoader,
    load_yaml_config,
)

__all__ = [
    "AppSettings",
    "TreeSettings",
    "LoggingSettings",
    "DEFAULT_MAX_DEPTH",
    "TRAVERSAL_ORDERS",
    "TraversalOrder",
    "OrderType",
    "ConfigLoader",
    "load_yaml_config",
]
