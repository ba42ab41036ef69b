"""祖先链遍历

沿父节点关系逐级向上查询，得到从最近祖先到根节点的有序序列。
每次调用都会重新读取存储，不做缓存。
"""

from typing import Iterator, List

from ytree.config import DEFAULT_MAX_DEPTH
from ytree.exceptions import CycleDetected
from ytree.log import get_logger
from ytree.store import NodeId, NodeStore

logger = get_logger()


def iter_ancestors(
    store: NodeStore,
    node_id: NodeId,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> Iterator[NodeId]:
    """惰性地产生祖先节点，最近的祖先在前，根节点在最后

    Args:
        store: 节点存储
        node_id: 起始节点（不包含在结果中）
        max_depth: 最多向上查询的层数

    Raises:
        CycleDetected: 重复访问到同一节点，或超过 max_depth 仍未到达根节点
    """
    seen = {node_id}
    parent_id = store.get_parent(node_id)
    hops = 0

    while parent_id is not None:
        hops += 1
        if parent_id in seen:
            logger.error(f"Cycle detected in ancestor chain of {node_id!r} at {parent_id!r}")
            raise CycleDetected(node_id)
        if hops > max_depth:
            logger.error(f"Ancestor chain of {node_id!r} exceeds max depth {max_depth}")
            raise CycleDetected(node_id, max_depth)

        seen.add(parent_id)
        yield parent_id
        parent_id = store.get_parent(parent_id)


def ancestors(store: NodeStore, node_id: NodeId, max_depth: int = DEFAULT_MAX_DEPTH) -> List[NodeId]:
    """祖先列表，最近的祖先在前；根节点返回空列表"""
    return list(iter_ancestors(store, node_id, max_depth))


def supertrees(store: NodeStore, node_id: NodeId, max_depth: int = DEFAULT_MAX_DEPTH) -> List[NodeId]:
    """节点自身加上祖先列表：[node, parent, ..., root]"""
    return [node_id] + ancestors(store, node_id, max_depth)


def path(store: NodeStore, node_id: NodeId, max_depth: int = DEFAULT_MAX_DEPTH) -> List[NodeId]:
    """从根节点到节点自身的路径：[root, ..., parent, node]"""
    return supertrees(store, node_id, max_depth)[::-1]


def parent_path(store: NodeStore, node_id: NodeId, max_depth: int = DEFAULT_MAX_DEPTH) -> List[NodeId]:
    """从根节点到父节点的路径；根节点返回空列表"""
    return ancestors(store, node_id, max_depth)[::-1]


def root(store: NodeStore, node_id: NodeId, max_depth: int = DEFAULT_MAX_DEPTH) -> NodeId:
    """节点所在树的根节点；根节点返回自身"""
    current = node_id
    for current in iter_ancestors(store, node_id, max_depth):
        pass
    return current


def depth(store: NodeStore, node_id: NodeId, max_depth: int = DEFAULT_MAX_DEPTH) -> int:
    """到根节点的跳数，根节点为 0"""
    return sum(1 for _ in iter_ancestors(store, node_id, max_depth))


__all__ = [
    "iter_ancestors",
    "ancestors",
    "supertrees",
    "path",
    "parent_path",
    "root",
    "depth",
]
