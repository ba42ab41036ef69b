"""树形结构核心模块

基于单一父节点关系的森林查询：
- 校验器: 父节点变更前的环检测
- 祖先遍历: ancestors / supertrees / path / parent_path / root
- 子孙遍历: 深度优先前序、广度优先、后序三种顺序
- 关系判断: is_ancestor_of / is_subtree_of / is_root ...
- Forest: 绑定存储与配置的门面类

使用示例:
    from ytree.store import MemoryNodeStore
    from ytree.tree import Forest, TraversalOrder

    forest = Forest(MemoryNodeStore.from_parent_map({1: None, 2: 1, 3: 2}))
    forest.path(3)                                        # [1, 2, 3]
    forest.descendants(1, TraversalOrder.POST_ORDER)      # [3, 2]
"""

from .ancestry import (
    iter_ancestors,
    ancestors,
    supertrees,
    path,
    parent_path,
    root,
    depth,
)
from .traversal import (
    TraversalOrder,
    iter_descendants,
    descendants,
    subtrees,
    children,
    siblings,
)
from .predicates import (
    is_ancestor_of,
    is_descendant_of,
    is_supertree_of,
    is_subtree_of,
    is_child_of,
    is_parent_of,
    is_root_of,
    is_sibling_of,
    is_root,
    is_child,
    is_parent,
    is_leaf,
)
from .validator import (
    validate_parent,
    can_set_parent,
    reparent,
)
from .tree_utils import (
    arrange,
    flatten_tree,
    height,
)
from .forest import Forest

__all__ = [
    "Forest",
    "TraversalOrder",

    # 祖先方向
    "iter_ancestors",
    "ancestors",
    "supertrees",
    "path",
    "parent_path",
    "root",
    "depth",

    # 子孙方向
    "iter_descendants",
    "descendants",
    "subtrees",
    "children",
    "siblings",

    # 关系判断
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

    # 校验
    "validate_parent",
    "can_set_parent",
    "reparent",

    # 工具函数
    "arrange",
    "flatten_tree",
    "height",
]
