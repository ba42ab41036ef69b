"""子孙节点遍历

支持三种遍历顺序：
    - depth_first:   深度优先前序，先输出节点再依次输出每个子树
    - breadth_first: 广度优先，逐层输出，同层保持存储给出的兄弟顺序
    - post_order:    后序，先输出所有子树，最后输出节点本身

以 R -> A -> B, R -> C 为例，R 的子孙分别为:
    depth_first   [A, B, C]
    breadth_first [A, C, B]
    post_order    [B, A, C]

所有遍历都用显式栈/队列实现，不受 Python 递归深度限制。
"""

from collections import deque
from typing import Iterator, List, Optional

from ytree.config import DEFAULT_MAX_DEPTH, OrderType, TraversalOrder
from ytree.exceptions import CycleDetected
from ytree.log import get_logger
from ytree.store import NodeId, NodeStore

logger = get_logger()

_EXHAUSTED = object()


def _visit(node_id: NodeId, child_id: NodeId, level: int, seen: set, max_depth: int):
    """登记一次访问，重复访问或层数越界说明子节点关系成环"""
    if child_id in seen:
        logger.error(f"Cycle detected below {node_id!r}: {child_id!r} reached twice")
        raise CycleDetected(node_id)
    if level > max_depth:
        logger.error(f"Subtree of {node_id!r} exceeds max depth {max_depth}")
        raise CycleDetected(node_id, max_depth)
    seen.add(child_id)


def _iter_depth_first(store: NodeStore, node_id: NodeId, max_depth: int) -> Iterator[NodeId]:
    seen = {node_id}
    stack = [iter(store.get_children(node_id))]
    while stack:
        child_id = next(stack[-1], _EXHAUSTED)
        if child_id is _EXHAUSTED:
            stack.pop()
            continue
        _visit(node_id, child_id, len(stack), seen, max_depth)
        yield child_id
        stack.append(iter(store.get_children(child_id)))


def _iter_breadth_first(store: NodeStore, node_id: NodeId, max_depth: int) -> Iterator[NodeId]:
    seen = {node_id}
    queue = deque((child_id, 1) for child_id in store.get_children(node_id))
    while queue:
        child_id, level = queue.popleft()
        _visit(node_id, child_id, level, seen, max_depth)
        yield child_id
        queue.extend((grandchild_id, level + 1) for grandchild_id in store.get_children(child_id))


def _iter_post_order(store: NodeStore, node_id: NodeId, max_depth: int) -> Iterator[NodeId]:
    seen = {node_id}
    # (节点, 子节点迭代器)，节点在其子节点全部输出后出栈并输出
    stack = [(node_id, iter(store.get_children(node_id)))]
    while stack:
        current_id, children = stack[-1]
        child_id = next(children, _EXHAUSTED)
        if child_id is _EXHAUSTED:
            stack.pop()
            if stack:
                yield current_id
            continue
        _visit(node_id, child_id, len(stack), seen, max_depth)
        stack.append((child_id, iter(store.get_children(child_id))))


_TRAVERSERS = {
    TraversalOrder.DEPTH_FIRST: _iter_depth_first,
    TraversalOrder.BREADTH_FIRST: _iter_breadth_first,
    TraversalOrder.POST_ORDER: _iter_post_order,
}


def iter_descendants(
    store: NodeStore,
    node_id: NodeId,
    order: OrderType = TraversalOrder.DEPTH_FIRST,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> Iterator[NodeId]:
    """惰性地产生子孙节点（不包含节点自身）

    Args:
        store: 节点存储
        node_id: 子树根节点
        order: 遍历顺序，默认深度优先前序
        max_depth: 最大遍历层数

    Raises:
        InvalidTraversalOrderError: 未知的遍历顺序
        CycleDetected: 子节点关系成环或层数超过 max_depth
    """
    traverser = _TRAVERSERS[TraversalOrder.parse(order)]
    return traverser(store, node_id, max_depth)


def descendants(
    store: NodeStore,
    node_id: NodeId,
    order: OrderType = TraversalOrder.DEPTH_FIRST,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> List[NodeId]:
    """子孙节点列表（不包含节点自身）"""
    return list(iter_descendants(store, node_id, order, max_depth))


def subtrees(
    store: NodeStore,
    node_id: NodeId,
    order: OrderType = TraversalOrder.DEPTH_FIRST,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> List[NodeId]:
    """节点自身加上子孙节点，无论哪种顺序节点自身都在第一位"""
    return [node_id] + descendants(store, node_id, order, max_depth)


def children(store: NodeStore, node_id: NodeId) -> List[NodeId]:
    """直接子节点列表"""
    return list(store.get_children(node_id))


def siblings(store: NodeStore, node_id: NodeId) -> List[NodeId]:
    """兄弟节点（同一父节点的其他子节点，不包含自己）

    根节点没有兄弟节点。
    """
    parent_id: Optional[NodeId] = store.get_parent(node_id)
    if parent_id is None:
        return []
    return [child_id for child_id in store.get_children(parent_id) if child_id != node_id]


__all__ = [
    "TraversalOrder",
    "OrderType",
    "iter_descendants",
    "descendants",
    "subtrees",
    "children",
    "siblings",
]
