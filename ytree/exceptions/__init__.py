"""异常处理模块

提供树形结构异常类以及可选的 FastAPI 异常处理器。

使用示例:
    from ytree.exceptions import CycleError, register_exception_handlers

    app = FastAPI()
    register_exception_handlers(app)

    @router.put("/categories/{node_id}/parent")
    def move(node_id: int, parent_id: int):
        forest.set_parent(node_id, parent_id)  # CycleError -> 409
"""

from .exceptions import (
    ErrorCode,
    ErrorCodeType,
    TreeException,
    CycleError,
    CycleDetected,
    InvalidTraversalOrderError,
    StoreError,
    NodeNotFoundError,
)

from .handlers import (
    register_exception_handlers,
    tree_exception_handler,
)

__all__ = [
    "ErrorCode",
    "ErrorCodeType",
    "TreeException",
    "CycleError",
    "CycleDetected",
    "InvalidTraversalOrderError",
    "StoreError",
    "NodeNotFoundError",
    "register_exception_handlers",
    "tree_exception_handler",
]
