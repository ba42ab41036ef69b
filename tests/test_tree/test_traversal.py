"""子孙遍历测试

测试三种遍历顺序、subtrees、children / siblings 以及遍历顺序解析。
"""

import pytest

from ytree.exceptions import CycleDetected, InvalidTraversalOrderError
from ytree.store import MemoryNodeStore
from ytree.tree import (
    TraversalOrder,
    children,
    descendants,
    iter_descendants,
    siblings,
    subtrees,
)


@pytest.fixture
def wide_store():
    """两层以上、兄弟较多的树

        1
        ├── 2
        │   ├── 4
        │   │   └── 8
        │   └── 5
        └── 3
            ├── 6
            └── 7
    """
    return MemoryNodeStore.from_parent_map({
        1: None, 2: 1, 3: 1, 4: 2, 5: 2, 6: 3, 7: 3, 8: 4,
    })


class TestTraversalOrders:
    """R -> A -> B, R -> C"""

    def test_depth_first(self, store):
        assert descendants(store, "R", TraversalOrder.DEPTH_FIRST) == ["A", "B", "C"]

    def test_breadth_first(self, store):
        assert descendants(store, "R", TraversalOrder.BREADTH_FIRST) == ["A", "C", "B"]

    def test_post_order(self, store):
        assert descendants(store, "R", TraversalOrder.POST_ORDER) == ["B", "A", "C"]

    def test_default_is_depth_first(self, store):
        assert descendants(store, "R") == ["A", "B", "C"]

    def test_wide_tree(self, wide_store):
        assert descendants(wide_store, 1, "depth_first") == [2, 4, 8, 5, 3, 6, 7]
        assert descendants(wide_store, 1, "breadth_first") == [2, 3, 4, 5, 6, 7, 8]
        assert descendants(wide_store, 1, "post_order") == [8, 4, 5, 2, 6, 7, 3]

    def test_inner_node(self, wide_store):
        assert descendants(wide_store, 2, "post_order") == [8, 4, 5]
        assert descendants(wide_store, 3, "breadth_first") == [6, 7]

    @pytest.mark.parametrize("order", list(TraversalOrder))
    def test_leaf_and_absent_node(self, store, order):
        assert descendants(store, "B", order) == []
        assert descendants(store, "missing", order) == []

    @pytest.mark.parametrize("order", list(TraversalOrder))
    def test_same_members_in_every_order(self, wide_store, order):
        assert sorted(descendants(wide_store, 1, order)) == [2, 3, 4, 5, 6, 7, 8]


class TestOrderingProperties:
    """祖先/子孙在各顺序中的相对位置"""

    def _pairs(self, wide_store):
        from ytree.tree import ancestors
        for node_id in range(2, 9):
            for ancestor_id in ancestors(wide_store, node_id):
                if ancestor_id != 1:
                    yield ancestor_id, node_id

    def test_pre_orders_place_ancestors_first(self, wide_store):
        for order in (TraversalOrder.DEPTH_FIRST, TraversalOrder.BREADTH_FIRST):
            result = descendants(wide_store, 1, order)
            for ancestor_id, node_id in self._pairs(wide_store):
                assert result.index(ancestor_id) < result.index(node_id)

    def test_post_order_places_descendants_first(self, wide_store):
        result = descendants(wide_store, 1, TraversalOrder.POST_ORDER)
        for ancestor_id, node_id in self._pairs(wide_store):
            assert result.index(node_id) < result.index(ancestor_id)


class TestSubtrees:
    """subtrees 总是以节点自身开头"""

    @pytest.mark.parametrize("order", list(TraversalOrder))
    def test_node_first(self, store, order):
        result = subtrees(store, "R", order)
        assert result[0] == "R"
        assert result[1:] == descendants(store, "R", order)

    def test_leaf_subtree(self, store):
        assert subtrees(store, "B") == ["B"]


class TestChildrenAndSiblings:
    """直接子节点与兄弟节点"""

    def test_children_in_store_order(self, store):
        assert children(store, "R") == ["A", "C"]
        assert children(store, "B") == []

    def test_siblings(self, store):
        assert siblings(store, "A") == ["C"]
        assert siblings(store, "B") == []

    def test_root_has_no_siblings(self, store):
        assert siblings(store, "R") == []


class TestTraversalOrderParse:
    """遍历顺序解析"""

    @pytest.mark.parametrize("value, expected", [
        (None, TraversalOrder.DEPTH_FIRST),
        ("depth_first", TraversalOrder.DEPTH_FIRST),
        ("pre-order", TraversalOrder.DEPTH_FIRST),
        ("DFS", TraversalOrder.DEPTH_FIRST),
        ("breadth-first", TraversalOrder.BREADTH_FIRST),
        ("bfs", TraversalOrder.BREADTH_FIRST),
        ("postorder", TraversalOrder.POST_ORDER),
        (TraversalOrder.POST_ORDER, TraversalOrder.POST_ORDER),
    ])
    def test_aliases(self, value, expected):
        assert TraversalOrder.parse(value) is expected

    def test_unknown_order(self, store):
        with pytest.raises(InvalidTraversalOrderError) as exc_info:
            descendants(store, "R", "zigzag")
        assert exc_info.value.order == "zigzag"

    def test_unknown_order_raises_before_iteration(self, store):
        with pytest.raises(InvalidTraversalOrderError):
            iter_descendants(store, "R", 42)


class TestCorruptedChildren:
    """子节点关系成环时报错"""

    @pytest.mark.parametrize("order", list(TraversalOrder))
    def test_cycle_below_node(self, raw_store_factory, order):
        raw = raw_store_factory({"S": None, "A": "S", "B": "A"})
        # 子节点索引与父节点不一致：B 的子节点又指回 A
        raw.get_children = lambda node_id: {"S": ["A"], "A": ["B"], "B": ["A"]}.get(node_id, [])
        with pytest.raises(CycleDetected):
            descendants(raw, "S", order)

    @pytest.mark.parametrize("order", list(TraversalOrder))
    def test_max_depth_bound(self, order):
        chain = MemoryNodeStore.from_parent_map({i: (i - 1 if i else None) for i in range(6)})

        assert len(descendants(chain, 0, order, max_depth=5)) == 5
        with pytest.raises(CycleDetected):
            descendants(chain, 0, order, max_depth=4)
