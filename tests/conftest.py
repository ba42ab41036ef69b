"""
Pytest 公共配置和 Fixtures

提供测试所需的公共资源：
- 示例森林（内存存储）
- 可直接写入任意父子关系的原始存储（用于模拟被破坏的数据）
- 内存数据库连接
"""

from typing import Dict, Generator, List, Optional

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from ytree.config import TreeSettings
from ytree.store import MemoryNodeStore
from ytree.tree import Forest


class RawParentStore:
    """只保存 {节点: 父节点} 的最小存储实现

    子节点通过全表扫描得到，写入不做任何校验，
    可以构造出成环的数据来验证遍历的防御逻辑。
    """

    def __init__(self, parents: Dict):
        self.parents = dict(parents)
        self.parent_lookups = 0

    def get_parent(self, node_id) -> Optional[object]:
        self.parent_lookups += 1
        return self.parents.get(node_id)

    def get_children(self, node_id) -> List:
        return [n for n, p in self.parents.items() if p == node_id and node_id is not None]

    def set_parent(self, node_id, parent_id):
        self.parents[node_id] = parent_id

    def get_roots(self) -> List:
        return [n for n, p in self.parents.items() if p is None]


# ==================== 森林 Fixtures ====================

@pytest.fixture
def sample_parents() -> Dict:
    """示例森林

        R            X
        ├── A        └── Y
        │   └── B
        └── C
    """
    return {"R": None, "A": "R", "B": "A", "C": "R", "X": None, "Y": "X"}


@pytest.fixture
def store(sample_parents) -> MemoryNodeStore:
    return MemoryNodeStore.from_parent_map(sample_parents)


@pytest.fixture
def forest(store) -> Forest:
    return Forest(store, settings=TreeSettings())


@pytest.fixture
def raw_store_factory():
    """创建 RawParentStore 的工厂"""
    return RawParentStore


# ==================== 数据库 Fixtures ====================

@pytest.fixture
def memory_engine():
    """创建内存数据库引擎

    使用 StaticPool 和 check_same_thread=False，保证所有操作使用同一个连接。
    """
    engine = create_engine(
        "sqlite:///:memory:",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(memory_engine) -> Generator[Session, None, None]:
    """创建数据库会话"""
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=memory_engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
