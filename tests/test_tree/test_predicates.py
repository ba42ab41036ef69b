"""节点关系判断测试"""

import itertools

import pytest

from ytree.tree import (
    is_ancestor_of,
    is_child,
    is_child_of,
    is_descendant_of,
    is_leaf,
    is_parent,
    is_parent_of,
    is_root,
    is_root_of,
    is_sibling_of,
    is_subtree_of,
    is_supertree_of,
)

NODES = ["R", "A", "B", "C", "X", "Y"]


class TestAncestorDescendant:
    """严格偏序"""

    def test_scenario(self, store):
        assert is_ancestor_of(store, "R", "B") is True
        assert is_descendant_of(store, "R", "B") is False
        assert is_descendant_of(store, "B", "R") is True
        assert is_ancestor_of(store, "A", "C") is False

    def test_different_trees_not_comparable(self, store):
        assert is_ancestor_of(store, "R", "Y") is False
        assert is_descendant_of(store, "Y", "R") is False

    @pytest.mark.parametrize("node_id", NODES)
    def test_irreflexive(self, store, node_id):
        assert is_ancestor_of(store, node_id, node_id) is False
        assert is_descendant_of(store, node_id, node_id) is False

    def test_descendant_is_converse_of_ancestor(self, store):
        for a, b in itertools.permutations(NODES, 2):
            assert is_descendant_of(store, a, b) == is_ancestor_of(store, b, a)

    def test_absent_nodes(self, store):
        assert is_ancestor_of(store, "missing", "B") is False
        assert is_ancestor_of(store, "R", "missing") is False
        assert is_ancestor_of(store, None, "B") is False

    def test_absent_node_is_single_node_tree(self, store):
        # 不存在的节点父节点为 None，与根节点无法区分
        assert is_supertree_of(store, "missing", "missing") is True
        assert is_subtree_of(store, "missing", "missing") is True
        assert is_root_of(store, "missing", "missing") is True
        assert is_root_of(store, "R", "missing") is False
        assert is_supertree_of(store, "R", "missing") is False
        assert is_subtree_of(store, "missing", "R") is False
        assert is_sibling_of(store, "missing", "R") is False

    def test_short_circuits(self, raw_store_factory):
        chain = {0: None}
        chain.update({i: i - 1 for i in range(1, 50)})
        raw = raw_store_factory(chain)

        assert is_ancestor_of(raw, 48, 49) is True
        assert raw.parent_lookups == 1


class TestSubtreeSupertree:
    """自反闭包"""

    @pytest.mark.parametrize("node_id", NODES)
    def test_reflexive(self, store, node_id):
        assert is_subtree_of(store, node_id, node_id) is True
        assert is_supertree_of(store, node_id, node_id) is True

    def test_closure_of_strict_order(self, store):
        for a, b in itertools.permutations(NODES, 2):
            assert is_supertree_of(store, a, b) == is_ancestor_of(store, a, b)
            assert is_subtree_of(store, a, b) == is_descendant_of(store, a, b)

    def test_examples(self, store):
        assert is_subtree_of(store, "B", "R") is True
        assert is_supertree_of(store, "R", "B") is True
        assert is_subtree_of(store, "R", "B") is False


class TestDirectRelations:
    """父子、根、兄弟"""

    def test_child_of_and_parent_of(self, store):
        assert is_child_of(store, "A", "R") is True
        assert is_child_of(store, "B", "R") is False
        assert is_parent_of(store, "R", "A") is True
        assert is_parent_of(store, "R", "B") is False

    def test_root_is_not_child_of_none(self, store):
        assert is_child_of(store, "R", None) is False
        assert is_parent_of(store, None, "R") is False

    def test_root_of(self, store):
        assert is_root_of(store, "R", "B") is True
        assert is_root_of(store, "R", "R") is True
        assert is_root_of(store, "A", "B") is False
        assert is_root_of(store, "A", "A") is False
        assert is_root_of(store, "X", "B") is False

    def test_sibling_of(self, store):
        assert is_sibling_of(store, "A", "C") is True
        assert is_sibling_of(store, "A", "A") is False
        assert is_sibling_of(store, "A", "B") is False
        assert is_sibling_of(store, "R", "X") is False
        assert is_sibling_of(store, "missing", "other") is False


class TestNodeState:
    """单节点状态"""

    def test_scenario(self, store):
        assert is_root(store, "R") is True
        assert is_parent(store, "A") is True

    def test_states(self, store):
        assert is_root(store, "A") is False
        assert is_child(store, "A") is True
        assert is_child(store, "R") is False
        assert is_parent(store, "B") is False
        assert is_leaf(store, "B") is True
        assert is_leaf(store, "R") is False

    def test_absent_node(self, store):
        assert is_root(store, "missing") is True
        assert is_child(store, "missing") is False
        assert is_parent(store, "missing") is False
