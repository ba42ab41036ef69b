"""森林门面

把节点存储和配置绑定在一起，对外提供完整的查询、判断与移动接口。
Forest 本身不保存任何节点数据，每次调用都直接读取存储。

使用示例:
    from ytree.store import MemoryNodeStore
    from ytree.tree import Forest

    store = MemoryNodeStore.from_parent_map({"R": None, "A": "R", "B": "A", "C": "R"})
    forest = Forest(store)

    forest.ancestors("B")                       # ["A", "R"]
    forest.path("B")                            # ["R", "A", "B"]
    forest.descendants("R")                     # ["A", "B", "C"]
    forest.descendants("R", "breadth_first")    # ["A", "C", "B"]
    forest.descendants("R", "post_order")       # ["B", "A", "C"]
    forest.is_ancestor_of("R", "B")             # True
    forest.set_parent("R", "B")                 # CycleError
"""

from typing import Any, Callable, Dict, Iterator, List, Optional

from ytree.config import TreeSettings
from ytree.store import NodeId, NodeStore
from . import ancestry as _ancestry
from . import predicates as _predicates
from . import traversal as _traversal
from . import tree_utils as _tree_utils
from . import validator as _validator
from .traversal import OrderType, TraversalOrder


class Forest:
    """森林查询接口

    Args:
        store: 节点存储
        settings: 遍历配置，默认从环境变量读取 TreeSettings
        max_depth: 覆盖 settings.max_depth
        default_order: 覆盖 settings.default_order
    """

    def __init__(
        self,
        store: NodeStore,
        settings: Optional[TreeSettings] = None,
        max_depth: Optional[int] = None,
        default_order: OrderType = None,
    ):
        settings = settings or TreeSettings()
        self.store = store
        self.max_depth = max_depth if max_depth is not None else settings.max_depth
        self.default_order = TraversalOrder.parse(default_order or settings.default_order)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(store={self.store!r}, "
            f"max_depth={self.max_depth}, default_order={self.default_order.value!r})"
        )

    def _order(self, order: OrderType) -> TraversalOrder:
        return self.default_order if order is None else TraversalOrder.parse(order)

    # ==================== 直接关系 ====================

    def parent(self, node_id: NodeId) -> Optional[NodeId]:
        return self.store.get_parent(node_id)

    def children(self, node_id: NodeId) -> List[NodeId]:
        return _traversal.children(self.store, node_id)

    def siblings(self, node_id: NodeId) -> List[NodeId]:
        return _traversal.siblings(self.store, node_id)

    def roots(self) -> List[NodeId]:
        return list(self.store.get_roots())

    # ==================== 祖先方向 ====================

    def iter_ancestors(self, node_id: NodeId) -> Iterator[NodeId]:
        return _ancestry.iter_ancestors(self.store, node_id, self.max_depth)

    def ancestors(self, node_id: NodeId) -> List[NodeId]:
        """祖先列表，最近的祖先在前"""
        return _ancestry.ancestors(self.store, node_id, self.max_depth)

    def supertrees(self, node_id: NodeId) -> List[NodeId]:
        return _ancestry.supertrees(self.store, node_id, self.max_depth)

    def path(self, node_id: NodeId) -> List[NodeId]:
        """根节点到节点自身"""
        return _ancestry.path(self.store, node_id, self.max_depth)

    def parent_path(self, node_id: NodeId) -> List[NodeId]:
        return _ancestry.parent_path(self.store, node_id, self.max_depth)

    def root(self, node_id: NodeId) -> NodeId:
        return _ancestry.root(self.store, node_id, self.max_depth)

    def depth(self, node_id: NodeId) -> int:
        return _ancestry.depth(self.store, node_id, self.max_depth)

    # ==================== 子孙方向 ====================

    def iter_descendants(self, node_id: NodeId, order: OrderType = None) -> Iterator[NodeId]:
        return _traversal.iter_descendants(self.store, node_id, self._order(order), self.max_depth)

    def descendants(self, node_id: NodeId, order: OrderType = None) -> List[NodeId]:
        """子孙节点列表，order 为空时使用默认顺序"""
        return _traversal.descendants(self.store, node_id, self._order(order), self.max_depth)

    def subtrees(self, node_id: NodeId, order: OrderType = None) -> List[NodeId]:
        """节点自身在前，其后为子孙节点"""
        return _traversal.subtrees(self.store, node_id, self._order(order), self.max_depth)

    def height(self, node_id: NodeId) -> int:
        return _tree_utils.height(self.store, node_id, self.max_depth)

    def arrange(
        self,
        node_id: Optional[NodeId] = None,
        node_factory: Optional[Callable[[NodeId], Dict[str, Any]]] = None,
        **kwargs,
    ) -> List[Dict[str, Any]]:
        """嵌套字典结构，参数同 tree_utils.arrange"""
        return _tree_utils.arrange(
            self.store, node_id, node_factory=node_factory, max_depth=self.max_depth, **kwargs
        )

    # ==================== 关系判断 ====================

    def is_ancestor_of(self, a: NodeId, b: NodeId) -> bool:
        return _predicates.is_ancestor_of(self.store, a, b, self.max_depth)

    def is_descendant_of(self, a: NodeId, b: NodeId) -> bool:
        return _predicates.is_descendant_of(self.store, a, b, self.max_depth)

    def is_supertree_of(self, a: NodeId, b: NodeId) -> bool:
        return _predicates.is_supertree_of(self.store, a, b, self.max_depth)

    def is_subtree_of(self, a: NodeId, b: NodeId) -> bool:
        return _predicates.is_subtree_of(self.store, a, b, self.max_depth)

    def is_child_of(self, a: NodeId, b: NodeId) -> bool:
        return _predicates.is_child_of(self.store, a, b)

    def is_parent_of(self, a: NodeId, b: NodeId) -> bool:
        return _predicates.is_parent_of(self.store, a, b)

    def is_root_of(self, a: NodeId, b: NodeId) -> bool:
        return _predicates.is_root_of(self.store, a, b, self.max_depth)

    def is_sibling_of(self, a: NodeId, b: NodeId) -> bool:
        return _predicates.is_sibling_of(self.store, a, b)

    def is_root(self, node_id: NodeId) -> bool:
        return _predicates.is_root(self.store, node_id)

    def is_child(self, node_id: NodeId) -> bool:
        return _predicates.is_child(self.store, node_id)

    def is_parent(self, node_id: NodeId) -> bool:
        return _predicates.is_parent(self.store, node_id)

    def is_leaf(self, node_id: NodeId) -> bool:
        return _predicates.is_leaf(self.store, node_id)

    # ==================== 移动节点 ====================

    def validate_reparent(self, node_id: NodeId, parent_id: Optional[NodeId]) -> None:
        """校验移动是否合法，不合法时抛出 CycleError"""
        _validator.validate_parent(self.store, node_id, parent_id, self.max_depth)

    def can_reparent(self, node_id: NodeId, parent_id: Optional[NodeId]) -> bool:
        return _validator.can_set_parent(self.store, node_id, parent_id, self.max_depth)

    def set_parent(self, node_id: NodeId, parent_id: Optional[NodeId]) -> None:
        """校验通过后把 node_id 移动到 parent_id 下（None 表示变为根节点）

        Raises:
            CycleError: 移动会形成环，存储保持不变
            StoreError: 存储写入失败
        """
        _validator.reparent(self.store, node_id, parent_id, self.max_depth)

    move_to = set_parent


__all__ = ["Forest"]
