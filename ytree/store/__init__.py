"""节点存储模块

- NodeStore: 存储协议，核心遍历逻辑只依赖此协议
- MemoryNodeStore: 内存实现
- SQLAlchemyNodeStore: 基于 ORM 模型父节点外键列的实现
"""

from .base import NodeId, NodeStore
from .memory import MemoryNodeStore
from .sqlalchemy_store import SQLAlchemyNodeStore

__all__ = [
    "NodeId",
    "NodeStore",
    "MemoryNodeStore",
    "SQLAlchemyNodeStore",
]
