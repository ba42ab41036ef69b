"""父节点变更校验

在写入父节点之前判断变更是否会破坏森林结构（自指或成环）。

只需要沿新父节点的祖先链向上查找：只有当要移动的节点出现在这条链上时
（即新父节点是它的子孙），变更才会形成环。复杂度为新父节点的深度。
"""

from typing import Optional

from ytree.config import DEFAULT_MAX_DEPTH
from ytree.exceptions import CycleError
from ytree.log import get_logger
from ytree.store import NodeId, NodeStore
from .ancestry import iter_ancestors

logger = get_logger()


def validate_parent(
    store: NodeStore,
    node_id: NodeId,
    parent_id: Optional[NodeId],
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> None:
    """校验把 node_id 的父节点设为 parent_id 是否合法

    纯校验，不写入存储。parent_id 为 None（变为根节点）总是合法。

    Raises:
        CycleError: 自指，或 parent_id 是 node_id 的子孙
        CycleDetected: 新父节点的祖先链本身已经成环
    """
    if parent_id is None:
        return

    if parent_id == node_id:
        logger.warning(f"Rejected self-parent assignment for {node_id!r}")
        raise CycleError(node_id, parent_id)

    for ancestor_id in iter_ancestors(store, parent_id, max_depth):
        if ancestor_id == node_id:
            logger.warning(f"Rejected moving {node_id!r} under its descendant {parent_id!r}")
            raise CycleError(node_id, parent_id)

    logger.debug(f"Parent {parent_id!r} accepted for {node_id!r}")


def can_set_parent(
    store: NodeStore,
    node_id: NodeId,
    parent_id: Optional[NodeId],
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> bool:
    """与 validate_parent 相同的判断，以布尔值返回结果

    使用示例:
        if can_set_parent(store, 1, 5):
            store.set_parent(1, 5)
    """
    try:
        validate_parent(store, node_id, parent_id, max_depth)
    except CycleError:
        return False
    return True


def reparent(
    store: NodeStore,
    node_id: NodeId,
    parent_id: Optional[NodeId],
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> None:
    """校验通过后写入父节点

    Raises:
        CycleError: 变更会形成环，存储不会被修改
        StoreError: 存储写入失败，原样抛出
    """
    validate_parent(store, node_id, parent_id, max_depth)
    store.set_parent(node_id, parent_id)
    logger.info(f"Node {node_id!r} moved under {parent_id!r}")


__all__ = [
    "validate_parent",
    "can_set_parent",
    "reparent",
]
