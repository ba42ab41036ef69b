"""内存节点存储

使用字典保存父节点关系，并维护子节点索引，适用于测试、缓存数据或
一次性从数据库/接口加载的扁平数据。

使用示例:
    from ytree.store import MemoryNodeStore
    from ytree.tree import Forest

    store = MemoryNodeStore.from_rows([
        {"id": 1, "parent_id": None, "name": "根节点"},
        {"id": 2, "parent_id": 1, "name": "子节点1"},
        {"id": 3, "parent_id": 1, "name": "子节点2"},
    ])
    forest = Forest(store)
    forest.descendants(1)  # [2, 3]
"""

import threading
from contextlib import contextmanager
from collections import deque
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from ytree.exceptions import CycleError, NodeNotFoundError, StoreError
from ytree.log import get_logger
from .base import NodeId

logger = get_logger()


class MemoryNodeStore:
    """内存节点存储

    子节点顺序为加入（或移动到该父节点下）的先后顺序。
    自身的读写由一把可重入锁保护；需要把“校验 + 写入”作为整体串行化时，
    调用方可以持有 lock()。
    """

    def __init__(self):
        self._parents: Dict[NodeId, Optional[NodeId]] = {}
        self._children: Dict[NodeId, List[NodeId]] = {}
        self._lock = threading.RLock()

    # ==================== 构建 ====================

    @classmethod
    def from_rows(
        cls,
        rows: Iterable[Mapping[str, Any]],
        id_field: str = "id",
        parent_field: str = "parent_id",
        root_parent_value: Any = None,
    ) -> "MemoryNodeStore":
        """从扁平的行数据构建存储

        行的先后顺序不限，子节点顺序按行在列表中的顺序。

        Args:
            rows: 扁平的节点列表，每个节点是一个字典
            id_field: ID 字段名
            parent_field: 父节点 ID 字段名
            root_parent_value: 根节点的父节点值（通常是 None，也可以是 0）

        Raises:
            StoreError: ID 重复
            NodeNotFoundError: 引用了不存在的父节点
            CycleError: 行数据中的父子关系成环
        """
        pairs = []
        for row in rows:
            parent_id = row.get(parent_field)
            if parent_id == root_parent_value:
                parent_id = None
            pairs.append((row[id_field], parent_id))
        return cls.from_pairs(pairs)

    @classmethod
    def from_parent_map(cls, parent_map: Mapping[NodeId, Optional[NodeId]]) -> "MemoryNodeStore":
        """从 {节点: 父节点} 映射构建存储"""
        return cls.from_pairs(parent_map.items())

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[NodeId, Optional[NodeId]]]) -> "MemoryNodeStore":
        """从 (节点, 父节点) 序列构建存储"""
        store = cls()
        pairs = list(pairs)

        for node_id, _ in pairs:
            if node_id in store._parents:
                raise StoreError(f"节点 ID 重复: {node_id!r}", node_id=node_id)
            store._parents[node_id] = None
            store._children[node_id] = []

        for node_id, parent_id in pairs:
            if parent_id is None:
                continue
            if parent_id not in store._parents:
                raise NodeNotFoundError(parent_id)
            store._parents[node_id] = parent_id
            store._children[parent_id].append(node_id)

        store._check_acyclic()
        logger.debug(f"MemoryNodeStore built with {len(store._parents)} nodes")
        return store

    def _check_acyclic(self):
        """从所有根节点出发无法到达的节点必然位于环上"""
        reachable = set()
        queue = deque(self.get_roots())
        while queue:
            node_id = queue.popleft()
            reachable.add(node_id)
            queue.extend(self._children[node_id])

        for node_id, parent_id in self._parents.items():
            if node_id not in reachable:
                raise CycleError(node_id, parent_id)

    # ==================== 读取 ====================

    def get_parent(self, node_id: NodeId) -> Optional[NodeId]:
        with self._lock:
            return self._parents.get(node_id)

    def get_children(self, node_id: NodeId) -> Tuple[NodeId, ...]:
        with self._lock:
            return tuple(self._children.get(node_id, ()))

    def get_roots(self) -> Tuple[NodeId, ...]:
        with self._lock:
            return tuple(n for n, p in self._parents.items() if p is None)

    def nodes(self) -> Tuple[NodeId, ...]:
        """所有节点 ID，按加入顺序"""
        with self._lock:
            return tuple(self._parents)

    def __contains__(self, node_id: NodeId) -> bool:
        with self._lock:
            return node_id in self._parents

    def __len__(self) -> int:
        with self._lock:
            return len(self._parents)

    def __iter__(self) -> Iterator[NodeId]:
        return iter(self.nodes())

    # ==================== 写入 ====================

    @contextmanager
    def lock(self):
        """持有存储锁，用于把校验和写入串行化"""
        with self._lock:
            yield self

    def add(self, node_id: NodeId, parent_id: Optional[NodeId] = None) -> NodeId:
        """新增节点

        新节点没有子节点，挂到任意已存在的父节点下都不会成环。

        Raises:
            StoreError: 节点已存在
            NodeNotFoundError: 父节点不存在
        """
        with self._lock:
            if node_id in self._parents:
                raise StoreError(f"节点已存在: {node_id!r}", node_id=node_id)
            if parent_id is not None and parent_id not in self._parents:
                raise NodeNotFoundError(parent_id)

            self._parents[node_id] = parent_id
            self._children[node_id] = []
            if parent_id is not None:
                self._children[parent_id].append(node_id)
        return node_id

    def set_parent(self, node_id: NodeId, parent_id: Optional[NodeId]) -> None:
        """写入父节点（不做环校验，请通过 Forest.set_parent 调用）

        节点被追加到新父节点子节点列表的末尾。

        Raises:
            NodeNotFoundError: 节点或父节点不存在
        """
        with self._lock:
            if node_id not in self._parents:
                raise NodeNotFoundError(node_id)
            if parent_id is not None and parent_id not in self._parents:
                raise NodeNotFoundError(parent_id)

            old_parent_id = self._parents[node_id]
            if old_parent_id == parent_id:
                return
            if old_parent_id is not None:
                self._children[old_parent_id].remove(node_id)
            if parent_id is not None:
                self._children[parent_id].append(node_id)
            self._parents[node_id] = parent_id

    def remove(self, node_id: NodeId, orphan_children: bool = False) -> None:
        """删除节点

        Args:
            node_id: 要删除的节点
            orphan_children: 为 True 时直接子节点变为根节点；
                为 False 时节点仍有子节点则拒绝删除

        Raises:
            NodeNotFoundError: 节点不存在
            StoreError: 节点仍有子节点且 orphan_children 为 False
        """
        with self._lock:
            if node_id not in self._parents:
                raise NodeNotFoundError(node_id)

            children = self._children[node_id]
            if children and not orphan_children:
                raise StoreError(
                    f"节点 {node_id!r} 仍有 {len(children)} 个子节点，不能删除",
                    node_id=node_id,
                )

            for child_id in children:
                self._parents[child_id] = None

            parent_id = self._parents.pop(node_id)
            del self._children[node_id]
            if parent_id is not None:
                self._children[parent_id].remove(node_id)


__all__ = ["MemoryNodeStore"]
