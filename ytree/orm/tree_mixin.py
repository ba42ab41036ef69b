"""树形结构 Mixin

为带有可空父节点外键列的 SQLAlchemy 模型提供树形查询与移动方法。
模型只需要保存 parent_id，祖先/子孙均通过逐级查询父子关系得到，
移动节点时只更新自身一行，并在写入前做环检测。

使用示例:
    from sqlalchemy import ForeignKey, Integer, String
    from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
    from ytree.orm import TreeNodeMixin

    class Base(DeclarativeBase):
        pass

    class Category(Base, TreeNodeMixin):
        __tablename__ = "category"
        __tree_sort_field__ = "sort_order"

        id: Mapped[int] = mapped_column(Integer, primary_key=True)
        parent_id: Mapped[int] = mapped_column(
            Integer, ForeignKey("category.id"), nullable=True, index=True
        )
        sort_order: Mapped[int] = mapped_column(Integer, default=0)
        name: Mapped[str] = mapped_column(String(100))

    category = session.get(Category, 3)
    category.get_ancestors()                 # 最近的祖先在前
    category.get_descendants("post_order")   # 后序子孙
    category.move_to(other.id)               # 形成环时抛出 CycleError
"""

from typing import Any, List, Optional, Sequence

from sqlalchemy.orm import Session, object_session

from ytree.config import TreeSettings
from ytree.exceptions import StoreError
from ytree.store import NodeId, SQLAlchemyNodeStore
from ytree.tree import Forest
from ytree.tree.traversal import OrderType


class TreeNodeMixin:
    """树形结构 Mixin

    字段要求（使用者需定义）:
        - id: 主键
        - parent_id: 父节点ID（可空，建议加索引）

    可配置属性（子类可覆盖）:
        - __tree_id_field__: 主键字段名，默认 "id"
        - __tree_parent_field__: 父节点字段名，默认 "parent_id"
        - __tree_sort_field__: 同级排序字段名，默认 None（按主键排序）
        - __tree_settings__: TreeSettings 实例，默认从环境变量读取
    """

    __tree_id_field__: str = "id"
    __tree_parent_field__: str = "parent_id"
    __tree_sort_field__: Optional[str] = None
    __tree_settings__: Optional[TreeSettings] = None

    # ==================== 存储与门面 ====================

    @classmethod
    def tree_store(cls, session: Session) -> SQLAlchemyNodeStore:
        """当前模型对应的节点存储"""
        return SQLAlchemyNodeStore(
            session,
            cls,
            id_field=cls.__tree_id_field__,
            parent_field=cls.__tree_parent_field__,
            sort_field=cls.__tree_sort_field__,
        )

    @classmethod
    def tree_forest(cls, session: Session) -> Forest:
        """当前模型对应的 Forest"""
        return Forest(cls.tree_store(session), settings=cls.__tree_settings__)

    def _session(self) -> Session:
        session = object_session(self)
        if session is None:
            raise StoreError(f"{self.__class__.__name__} 实例未绑定数据库会话")
        return session

    def _forest(self) -> Forest:
        return self.__class__.tree_forest(self._session())

    @property
    def tree_id(self) -> NodeId:
        return getattr(self, self.__tree_id_field__)

    @classmethod
    def _node_id(cls, node: Any) -> NodeId:
        """接受模型实例或节点 ID"""
        if isinstance(node, TreeNodeMixin):
            return node.tree_id
        return node

    @classmethod
    def load_nodes(cls, session: Session, node_ids: Sequence[NodeId]) -> List:
        """按给定 ID 顺序加载模型实例"""
        if not node_ids:
            return []
        id_column = getattr(cls, cls.__tree_id_field__)
        nodes = session.query(cls).filter(id_column.in_(list(node_ids))).all()
        by_id = {getattr(n, cls.__tree_id_field__): n for n in nodes}
        return [by_id[node_id] for node_id in node_ids if node_id in by_id]

    def _load(self, node_ids: Sequence[NodeId]) -> List:
        return self.__class__.load_nodes(self._session(), node_ids)

    # ==================== 节点查询方法 ====================

    def get_parent(self):
        """父节点对象，根节点返回 None"""
        parent_id = getattr(self, self.__tree_parent_field__)
        if parent_id is None:
            return None
        return self._session().get(self.__class__, parent_id)

    def get_children(self) -> List:
        """直接子节点，按排序字段排序"""
        return self._load(self._forest().children(self.tree_id))

    def get_siblings(self) -> List:
        """兄弟节点（不包含自己），根节点返回空列表"""
        return self._load(self._forest().siblings(self.tree_id))

    def get_ancestors(self) -> List:
        """祖先节点，最近的祖先在前"""
        return self._load(self._forest().ancestors(self.tree_id))

    def get_path(self) -> List:
        """从根节点到当前节点"""
        return self._load(self._forest().path(self.tree_id))

    def get_root(self):
        """根节点对象，根节点返回自身"""
        root_id = self._forest().root(self.tree_id)
        if root_id == self.tree_id:
            return self
        return self._session().get(self.__class__, root_id)

    def get_descendants(self, order: OrderType = None) -> List:
        """所有子孙节点，默认深度优先前序"""
        return self._load(self._forest().descendants(self.tree_id, order))

    def get_subtree(self, order: OrderType = None) -> List:
        """当前节点加所有子孙节点，当前节点在第一位"""
        return self._load(self._forest().subtrees(self.tree_id, order))

    def get_depth(self) -> int:
        """到根节点的层数，根节点为 0"""
        return self._forest().depth(self.tree_id)

    # ==================== 节点状态判断 ====================

    def is_root(self) -> bool:
        """判断是否为根节点"""
        return getattr(self, self.__tree_parent_field__) is None

    def is_leaf(self) -> bool:
        """判断是否为叶子节点（无子节点）"""
        return self._forest().is_leaf(self.tree_id)

    def is_ancestor_of(self, node) -> bool:
        """判断当前节点是否为指定节点（实例或 ID）的祖先"""
        return self._forest().is_ancestor_of(self.tree_id, self._node_id(node))

    def is_descendant_of(self, node) -> bool:
        """判断当前节点是否为指定节点（实例或 ID）的子孙"""
        return self._forest().is_descendant_of(self.tree_id, self._node_id(node))

    # ==================== 节点操作方法 ====================

    def move_to(self, new_parent) -> None:
        """移动节点到新的父节点下

        只更新当前节点的父节点字段并 flush，事务由调用方提交。

        Args:
            new_parent: 新父节点（实例或 ID），None 表示移动到根级别

        Raises:
            CycleError: 新父节点是自身或自身的子孙
            NodeNotFoundError: 新父节点不存在
        """
        self._forest().set_parent(self.tree_id, self._node_id(new_parent))

    # ==================== 类方法 ====================

    @classmethod
    def get_roots(cls, session: Session) -> List:
        """所有根节点"""
        return cls.load_nodes(session, cls.tree_store(session).get_roots())


__all__ = ["TreeNodeMixin"]
