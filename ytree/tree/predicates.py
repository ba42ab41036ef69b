"""节点关系判断

所有判断都由父节点关系推导而来，不保存任何状态。
祖先/子孙判断只沿祖先链向上扫描，找到目标即停止，不会展开整棵子树。

    is_ancestor_of / is_descendant_of   严格偏序，a == b 时为 False
    is_supertree_of / is_subtree_of     上述关系的自反闭包，a == b 时为 True

存储无法区分“节点不存在”和“根节点”（父节点都是 None），
因此不存在的节点按单节点的树处理：is_root(x)、is_root_of(x, x)、
is_supertree_of(x, x)、is_subtree_of(x, x) 为 True，其余判断为 False。
"""

from typing import Optional

from ytree.config import DEFAULT_MAX_DEPTH
from ytree.store import NodeId, NodeStore
from .ancestry import iter_ancestors, root


def is_ancestor_of(store: NodeStore, a: NodeId, b: NodeId, max_depth: int = DEFAULT_MAX_DEPTH) -> bool:
    """a 是否为 b 的祖先"""
    if a is None or a == b:
        return False
    return any(ancestor_id == a for ancestor_id in iter_ancestors(store, b, max_depth))


def is_descendant_of(store: NodeStore, a: NodeId, b: NodeId, max_depth: int = DEFAULT_MAX_DEPTH) -> bool:
    """a 是否为 b 的子孙"""
    return is_ancestor_of(store, b, a, max_depth)


def is_supertree_of(store: NodeStore, a: NodeId, b: NodeId, max_depth: int = DEFAULT_MAX_DEPTH) -> bool:
    """a 是否为 b 本身或 b 的祖先（a == b 时不查询存储，节点不存在也为 True）"""
    return a == b or is_ancestor_of(store, a, b, max_depth)


def is_subtree_of(store: NodeStore, a: NodeId, b: NodeId, max_depth: int = DEFAULT_MAX_DEPTH) -> bool:
    """a 是否为 b 本身或 b 的子孙（a == b 时不查询存储，节点不存在也为 True）"""
    return a == b or is_ancestor_of(store, b, a, max_depth)


def is_child_of(store: NodeStore, a: NodeId, b: NodeId) -> bool:
    """a 的父节点是否为 b"""
    return b is not None and store.get_parent(a) == b


def is_parent_of(store: NodeStore, a: NodeId, b: NodeId) -> bool:
    """a 是否为 b 的父节点"""
    return a is not None and store.get_parent(b) == a


def is_root_of(store: NodeStore, a: NodeId, b: NodeId, max_depth: int = DEFAULT_MAX_DEPTH) -> bool:
    """a 是否为 b 所在树的根节点

    b 是根节点时 a == b 成立；b 不存在时 root(b) == b，is_root_of(b, b) 同样为 True。
    """
    return a == root(store, b, max_depth)


def is_sibling_of(store: NodeStore, a: NodeId, b: NodeId) -> bool:
    """a 与 b 是否为同一父节点下的不同节点"""
    if a == b:
        return False
    parent_id: Optional[NodeId] = store.get_parent(a)
    return parent_id is not None and store.get_parent(b) == parent_id


def is_root(store: NodeStore, node_id: NodeId) -> bool:
    """是否没有父节点（不存在的节点也返回 True）"""
    return store.get_parent(node_id) is None


def is_child(store: NodeStore, node_id: NodeId) -> bool:
    """是否有父节点"""
    return store.get_parent(node_id) is not None


def is_parent(store: NodeStore, node_id: NodeId) -> bool:
    """是否有子节点"""
    for _ in store.get_children(node_id):
        return True
    return False


def is_leaf(store: NodeStore, node_id: NodeId) -> bool:
    """是否为叶子节点（无子节点）"""
    return not is_parent(store, node_id)


__all__ = [
    "is_ancestor_of",
    "is_descendant_of",
    "is_supertree_of",
    "is_subtree_of",
    "is_child_of",
    "is_parent_of",
    "is_root_of",
    "is_sibling_of",
    "is_root",
    "is_child",
    "is_parent",
    "is_leaf",
]
