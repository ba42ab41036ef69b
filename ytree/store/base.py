"""节点存储协议

核心遍历逻辑只依赖此协议，不关心节点数据实际存放在哪里。
任何实现了以下方法的对象都可以作为节点存储使用。
"""

from typing import Any, Hashable, Optional, Protocol, Sequence, runtime_checkable

# 节点标识：任意可哈希值（int / str / UUID ...）
NodeId = Hashable


@runtime_checkable
class NodeStore(Protocol):
    """节点存储协议

    约定:
        - get_parent: 返回父节点 ID，根节点或不存在的节点返回 None
        - get_children: 返回直接子节点 ID，顺序即同级遍历顺序；不存在的节点返回空序列
        - set_parent: 写入父节点，只应在校验通过后调用；失败时抛出 StoreError
        - get_roots: 返回所有根节点 ID

    存储需要自行保证并发写入父节点时的串行化（锁或事务），
    否则两个并发的移动操作可能共同形成环。
    """

    def get_parent(self, node_id: NodeId) -> Optional[NodeId]: ...

    def get_children(self, node_id: NodeId) -> Sequence[NodeId]: ...

    def set_parent(self, node_id: NodeId, parent_id: Optional[NodeId]) -> Any: ...

    def get_roots(self) -> Sequence[NodeId]: ...


__all__ = ["NodeId", "NodeStore"]
