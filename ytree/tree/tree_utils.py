"""树形结构工具函数

在节点存储之上构建嵌套结构、展平嵌套结构以及计算子树高度。

使用示例:
    from ytree.tree import arrange, flatten_tree

    tree = arrange(store)
    # [{"id": 1, "children": [{"id": 2, "children": []}, ...]}, ...]

    flat = flatten_tree(tree, level_field="level")
    # [{"id": 1, "level": 1}, {"id": 2, "level": 2}, ...]
"""

from typing import Any, Callable, Dict, List, Optional

from ytree.config import DEFAULT_MAX_DEPTH
from ytree.exceptions import CycleDetected
from ytree.store import NodeId, NodeStore


def arrange(
    store: NodeStore,
    node_id: Optional[NodeId] = None,
    id_field: str = "id",
    children_field: str = "children",
    node_factory: Optional[Callable[[NodeId], Dict[str, Any]]] = None,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> List[Dict[str, Any]]:
    """把存储中的树构建为嵌套字典结构

    Args:
        store: 节点存储
        node_id: 子树根节点，None 表示所有根节点的整片森林
        id_field: 输出中的 ID 字段名
        children_field: 输出中的子节点列表字段名
        node_factory: 根据节点 ID 生成附加字段的函数（如从数据库加载名称）
        max_depth: 最大遍历层数

    Returns:
        嵌套的树形结构列表，同级顺序与存储一致

    使用示例:
        arrange(store, 1, node_factory=lambda nid: {"name": names[nid]})
        # [{"id": 1, "name": "A", "children": [{"id": 2, "name": "A-1", "children": []}]}]
    """
    def make_item(nid: NodeId) -> Dict[str, Any]:
        item = dict(node_factory(nid)) if node_factory else {}
        item[id_field] = nid
        item[children_field] = []
        return item

    root_ids = [node_id] if node_id is not None else list(store.get_roots())
    result: List[Dict[str, Any]] = []

    for root_id in root_ids:
        root_item = make_item(root_id)
        seen = {root_id}
        # 逐层展开，子节点 ID 与父节点条目成对传递
        level = [(root_id, root_item)]
        depth = 0
        while level:
            depth += 1
            next_level = []
            for parent_id, parent_item in level:
                for child_id in store.get_children(parent_id):
                    if child_id in seen:
                        raise CycleDetected(root_id)
                    if depth > max_depth:
                        raise CycleDetected(root_id, max_depth)
                    seen.add(child_id)
                    child_item = make_item(child_id)
                    parent_item[children_field].append(child_item)
                    next_level.append((child_id, child_item))
            level = next_level
        result.append(root_item)

    return result


def flatten_tree(
    tree: List[Dict[str, Any]],
    children_field: str = "children",
    include_children_field: bool = False,
    level_field: Optional[str] = None,
    _current_level: int = 1,
) -> List[Dict[str, Any]]:
    """将嵌套树结构按深度优先前序展平为列表

    Args:
        tree: 嵌套的树形结构列表
        children_field: 子节点列表字段名
        include_children_field: 是否在结果中保留 children 字段
        level_field: 如果指定，将层级（根为 1）写入该字段
    """
    result: List[Dict[str, Any]] = []

    for node in tree:
        node_copy = dict(node)
        children = node_copy.pop(children_field, [])
        if include_children_field:
            node_copy[children_field] = children
        if level_field:
            node_copy[level_field] = _current_level

        result.append(node_copy)

        if children:
            result.extend(flatten_tree(
                children,
                children_field=children_field,
                include_children_field=include_children_field,
                level_field=level_field,
                _current_level=_current_level + 1,
            ))

    return result


def height(store: NodeStore, node_id: NodeId, max_depth: int = DEFAULT_MAX_DEPTH) -> int:
    """以节点为根的子树高度（只有节点自身时为 1）

    Raises:
        CycleDetected: 层数超过 max_depth
    """
    levels = 0
    level = [node_id]
    while level:
        levels += 1
        if levels > max_depth + 1:
            raise CycleDetected(node_id, max_depth)
        level = [child_id for parent_id in level for child_id in store.get_children(parent_id)]
    return levels


__all__ = [
    "arrange",
    "flatten_tree",
    "height",
]
