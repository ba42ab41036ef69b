"""日志模块

使用示例:
    from ytree.log import get_logger, setup_root_logger

    # 在应用启动时配置一次
    setup_root_logger(level="DEBUG", log_file="logs/tree.log")

    # 模块内获取日志器
    logger = get_logger()
"""

from .logger import (
    setup_logger,
    setup_root_logger,
    create_formatter,
    MicrosecondFormatter,
    DEFAULT_LOG_FORMAT,
    logger,
    get_logger,
)

__all__ = [
    "setup_logger",
    "setup_root_logger",
    "create_formatter",
    "MicrosecondFormatter",
    "DEFAULT_LOG_FORMAT",
    "logger",
    "get_logger",
]
