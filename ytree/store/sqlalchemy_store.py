"""SQLAlchemy 节点存储

把一个带有可空父节点外键列（默认 parent_id）的 ORM 模型适配为节点存储。

使用示例:
    class Category(Base):
        __tablename__ = "category"

        id = mapped_column(Integer, primary_key=True)
        parent_id = mapped_column(Integer, ForeignKey("category.id"), nullable=True, index=True)
        sort_order = mapped_column(Integer, default=0)
        name = mapped_column(String(100))

    store = SQLAlchemyNodeStore(session, Category, sort_field="sort_order")
    forest = Forest(store)
    forest.ancestors(5)

注意:
    - 父节点列需要建索引，子节点查询依赖它
    - set_parent 只 flush 不 commit，事务边界由调用方控制
    - 并发移动节点时请在同一事务内完成校验与写入，并使用行锁或串行化隔离级别
"""

from typing import Any, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ytree.exceptions import NodeNotFoundError, StoreError
from ytree.log import get_logger
from .base import NodeId

logger = get_logger()


class SQLAlchemyNodeStore:
    """基于 SQLAlchemy Session 的节点存储

    Args:
        session: SQLAlchemy 会话
        model: ORM 模型类
        id_field: 主键字段名
        parent_field: 父节点字段名
        sort_field: 同级排序字段名；未指定时读取模型的 __tree_sort_field__，
            仍没有则按主键排序
    """

    def __init__(
        self,
        session: Session,
        model: Any,
        id_field: str = "id",
        parent_field: str = "parent_id",
        sort_field: Optional[str] = None,
    ):
        self.session = session
        self.model = model
        self.id_column = getattr(model, id_field)
        self.parent_column = getattr(model, parent_field)
        self.parent_field = parent_field

        sort_field = sort_field or getattr(model, "__tree_sort_field__", None)
        sort_column = getattr(model, sort_field, None) if sort_field else None
        if sort_column is None:
            self._order_by = (self.id_column,)
        else:
            self._order_by = (sort_column, self.id_column)

    def get_parent(self, node_id: NodeId) -> Optional[NodeId]:
        try:
            return self.session.query(self.parent_column).filter(
                self.id_column == node_id
            ).scalar()
        except SQLAlchemyError as e:
            raise StoreError(f"查询父节点失败: {node_id!r}", node_id=node_id) from e

    def get_children(self, node_id: NodeId) -> List[NodeId]:
        if node_id is None:
            return []
        try:
            rows = self.session.query(self.id_column).filter(
                self.parent_column == node_id
            ).order_by(*self._order_by).all()
        except SQLAlchemyError as e:
            raise StoreError(f"查询子节点失败: {node_id!r}", node_id=node_id) from e
        return [row[0] for row in rows]

    def get_roots(self) -> List[NodeId]:
        try:
            rows = self.session.query(self.id_column).filter(
                self.parent_column.is_(None)
            ).order_by(*self._order_by).all()
        except SQLAlchemyError as e:
            raise StoreError("查询根节点失败") from e
        return [row[0] for row in rows]

    def set_parent(self, node_id: NodeId, parent_id: Optional[NodeId]) -> None:
        """写入父节点并 flush（不做环校验，请通过 Forest.set_parent 调用）

        Raises:
            NodeNotFoundError: 节点或父节点不存在
            StoreError: 数据库错误
        """
        try:
            node = self.session.get(self.model, node_id)
            if node is None:
                raise NodeNotFoundError(node_id)
            if parent_id is not None and self.session.get(self.model, parent_id) is None:
                raise NodeNotFoundError(parent_id)

            setattr(node, self.parent_field, parent_id)
            self.session.flush()
        except SQLAlchemyError as e:
            raise StoreError(
                f"写入父节点失败: {node_id!r} -> {parent_id!r}",
                node_id=node_id,
                parent_id=parent_id,
            ) from e

        logger.debug(f"{self.model.__name__} {node_id!r} parent set to {parent_id!r}")


__all__ = ["SQLAlchemyNodeStore"]
