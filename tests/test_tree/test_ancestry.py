"""祖先链遍历测试

测试 ancestors / supertrees / path / parent_path / root / depth，
以及存储数据成环时的防御。
"""

import pytest

from ytree.exceptions import CycleDetected
from ytree.tree import (
    ancestors,
    depth,
    iter_ancestors,
    parent_path,
    path,
    root,
    supertrees,
)


class TestAncestorWalk:
    """基本祖先查询"""

    def test_ancestors_closest_first(self, store):
        assert ancestors(store, "B") == ["A", "R"]
        assert ancestors(store, "C") == ["R"]

    def test_root_has_no_ancestors(self, store):
        assert ancestors(store, "R") == []
        assert parent_path(store, "R") == []

    def test_supertrees_include_node(self, store):
        assert supertrees(store, "B") == ["B", "A", "R"]
        assert supertrees(store, "R") == ["R"]

    def test_path_root_first(self, store):
        assert path(store, "B") == ["R", "A", "B"]
        assert parent_path(store, "B") == ["R", "A"]

    def test_root(self, store):
        assert root(store, "B") == "R"
        assert root(store, "Y") == "X"
        assert root(store, "R") == "R"

    def test_depth(self, store):
        assert depth(store, "R") == 0
        assert depth(store, "A") == 1
        assert depth(store, "B") == 2

    def test_absent_node(self, store):
        """不存在的节点视为没有父节点"""
        assert ancestors(store, "missing") == []
        assert path(store, "missing") == ["missing"]
        assert root(store, "missing") == "missing"


class TestAncestorProperties:
    """对所有节点都成立的性质"""

    @pytest.mark.parametrize("node_id", ["R", "A", "B", "C", "X", "Y"])
    def test_properties_hold(self, store, node_id):
        chain = ancestors(store, node_id)
        assert len(chain) == depth(store, node_id)
        assert path(store, node_id) == list(reversed(supertrees(store, node_id)))
        assert parent_path(store, node_id) == list(reversed(chain))
        assert root(store, node_id) == supertrees(store, node_id)[-1]
        assert root(store, root(store, node_id)) == root(store, node_id)


class TestLazyWalk:
    """惰性遍历"""

    def test_iter_ancestors_is_lazy(self, raw_store_factory):
        raw = raw_store_factory({"R": None, "A": "R", "B": "A", "C": "B"})
        walker = iter_ancestors(raw, "C")

        assert raw.parent_lookups == 0
        assert next(walker) == "B"
        assert raw.parent_lookups == 1

    def test_rewalk_reflects_store_changes(self, raw_store_factory):
        raw = raw_store_factory({"R": None, "A": "R", "B": "A"})
        assert ancestors(raw, "B") == ["A", "R"]

        raw.set_parent("B", "R")
        assert ancestors(raw, "B") == ["R"]


class TestCorruptedStore:
    """存储被绕过校验写成环时，遍历报错而不是死循环"""

    def test_self_loop(self, raw_store_factory):
        raw = raw_store_factory({"A": "A"})
        with pytest.raises(CycleDetected) as exc_info:
            ancestors(raw, "A")
        assert exc_info.value.node_id == "A"

    def test_cycle_above_start_node(self, raw_store_factory):
        raw = raw_store_factory({"S": "A", "A": "B", "B": "C", "C": "A"})
        with pytest.raises(CycleDetected):
            ancestors(raw, "S")

    def test_root_of_cycle_raises(self, raw_store_factory):
        raw = raw_store_factory({"A": "B", "B": "A"})
        with pytest.raises(CycleDetected):
            root(raw, "A")

    def test_max_depth_bound(self, raw_store_factory):
        chain = {0: None}
        chain.update({i: i - 1 for i in range(1, 11)})
        raw = raw_store_factory(chain)

        assert len(ancestors(raw, 10, max_depth=10)) == 10
        with pytest.raises(CycleDetected) as exc_info:
            ancestors(raw, 10, max_depth=9)
        assert exc_info.value.max_depth == 9
