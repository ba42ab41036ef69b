"""ytree - 单父节点森林的查询与环校验

快速开始:
    from ytree import Forest, MemoryNodeStore, CycleError

    store = MemoryNodeStore.from_parent_map({"R": None, "A": "R", "B": "A", "C": "R"})
    forest = Forest(store)

    forest.ancestors("B")                   # ["A", "R"]
    forest.descendants("R", "post_order")   # ["B", "A", "C"]

    try:
        forest.set_parent("R", "B")
    except CycleError:
        pass

模块:
    ytree.tree        核心遍历、关系判断与校验
    ytree.store       节点存储协议及内存 / SQLAlchemy 实现
    ytree.orm         SQLAlchemy 模型 Mixin
    ytree.config      配置
    ytree.log         日志
    ytree.exceptions  异常及 FastAPI 异常处理器
"""

from .exceptions import (
    ErrorCode,
    TreeException,
    CycleError,
    CycleDetected,
    InvalidTraversalOrderError,
    StoreError,
    NodeNotFoundError,
)
from .config import TreeSettings
from .store import NodeStore, MemoryNodeStore, SQLAlchemyNodeStore
from .tree import Forest, TraversalOrder

__version__ = "0.1.0"

__all__ = [
    "Forest",
    "TraversalOrder",
    "TreeSettings",
    "NodeStore",
    "MemoryNodeStore",
    "SQLAlchemyNodeStore",
    "ErrorCode",
    "TreeException",
    "CycleError",
    "CycleDetected",
    "InvalidTraversalOrderError",
    "StoreError",
    "NodeNotFoundError",
]
