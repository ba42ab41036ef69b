"""ORM 扩展模块

- TreeNodeMixin: 为 SQLAlchemy 模型提供树形查询与移动方法
"""

from .tree_mixin import TreeNodeMixin

__all__ = ["TreeNodeMixin"]
