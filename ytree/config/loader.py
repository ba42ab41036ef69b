"""配置加载器模块

提供从 YAML 文件加载配置的功能。

使用示例:
    from ytree.config import ConfigLoader, AppSettings, load_yaml_config

    config = ConfigLoader.load("config/settings.yaml")
    settings = load_yaml_config("config/settings.yaml", AppSettings)
"""

import os
from typing import Any, Dict, Optional, Type, TypeVar

import yaml


T = TypeVar("T")


class ConfigLoader:
    """配置加载器

    从 YAML 文件加载配置，按绝对路径缓存。
    """

    _cache: Dict[str, Dict[str, Any]] = {}

    @staticmethod
    def _resolve(config_path: str, base_dir: Optional[str] = None) -> str:
        if os.path.isabs(config_path):
            return config_path
        if base_dir:
            return os.path.join(base_dir, config_path)
        return os.path.abspath(config_path)

    @classmethod
    def load(
        cls,
        config_path: str,
        base_dir: Optional[str] = None,
        use_cache: bool = True
    ) -> Dict[str, Any]:
        """加载配置文件

        Args:
            config_path: 配置文件路径（相对或绝对路径）
            base_dir: 基础目录，用于解析相对路径
            use_cache: 是否使用缓存

        Returns:
            配置字典

        Raises:
            FileNotFoundError: 配置文件不存在
            yaml.YAMLError: YAML 解析错误
        """
        abs_path = cls._resolve(config_path, base_dir)

        if use_cache and abs_path in cls._cache:
            return cls._cache[abs_path]

        if not os.path.exists(abs_path):
            raise FileNotFoundError(f"配置文件不存在: {abs_path}")

        with open(abs_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}

        if use_cache:
            cls._cache[abs_path] = config

        return config

    @classmethod
    def reload(cls, config_path: str, base_dir: Optional[str] = None) -> Dict[str, Any]:
        """重新加载配置文件（忽略缓存）"""
        cls._cache.pop(cls._resolve(config_path, base_dir), None)
        return cls.load(config_path, base_dir, use_cache=True)

    @classmethod
    def clear_cache(cls):
        """清除所有配置缓存"""
        cls._cache.clear()


def load_yaml_config(
    config_path: str,
    settings_class: Type[T],
    base_dir: Optional[str] = None,
    **overrides
) -> T:
    """加载 YAML 配置并创建 Pydantic Settings 实例

    Args:
        config_path: 配置文件路径
        settings_class: Pydantic Settings 类
        base_dir: 基础目录
        **overrides: 覆盖配置的参数

    Returns:
        Settings 实例
    """
    config = dict(ConfigLoader.load(config_path, base_dir))
    config.update(overrides)
    return settings_class(**config)
