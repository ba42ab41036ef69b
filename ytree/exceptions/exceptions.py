"""树形结构异常类定义

定义 ytree 使用的异常类体系。

异常层级:
    TreeException                  基类
    ├── CycleError                 父节点变更会形成环（409）
    ├── CycleDetected              遍历时发现存储中已存在环（500）
    ├── InvalidTraversalOrderError 未知的遍历顺序（422）
    └── StoreError                 节点存储错误（503）
        └── NodeNotFoundError      节点不存在（404）
"""

import copy
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from fastapi import status


class ErrorCode(str, Enum):
    """错误代码枚举

    继承自 str，可以直接作为字符串使用。

    使用示例:
        from ytree.exceptions import ErrorCode, CycleError

        try:
            forest.set_parent(node_id, new_parent_id)
        except CycleError as e:
            assert e.code == ErrorCode.CIRCULAR_REFERENCE
    """

    # ==================== 通用错误 ====================
    TREE_ERROR = "TREE_ERROR"

    # ==================== 环相关 ====================
    CIRCULAR_REFERENCE = "CIRCULAR_REFERENCE"
    CYCLE_DETECTED = "CYCLE_DETECTED"

    # ==================== 参数相关 (422) ====================
    INVALID_TRAVERSAL_ORDER = "INVALID_TRAVERSAL_ORDER"

    # ==================== 存储相关 ====================
    STORE_ERROR = "STORE_ERROR"
    NODE_NOT_FOUND = "NODE_NOT_FOUND"


# 类型别名，支持枚举和字符串
ErrorCodeType = Union[str, ErrorCode]


class TreeException(Exception):
    """树形结构异常基类

    属性:
        message: 错误消息
        code: 错误代码（ErrorCode 枚举或字符串）
        status_code: HTTP 状态码（宿主应用注册异常处理器时使用）
        details: 详细错误信息列表
        extra: 额外的上下文信息
    """

    def __init__(
        self,
        message: str,
        code: ErrorCodeType = ErrorCode.TREE_ERROR,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        details: Optional[List[str]] = None,
        **extra: Any
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or []
        self.extra = extra
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典格式

        Returns:
            包含异常信息的字典
        """
        return {
            "message": self.message,
            "code": self.code,
            "status_code": self.status_code,
            "details": copy.deepcopy(self.details),
            "extra": copy.deepcopy(self.extra)
        }

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code!r}, "
            f"status_code={self.status_code})"
        )


class CycleError(TreeException):
    """父节点变更会形成环

    由校验器在提交父节点变更之前抛出：
    - 节点把自己设为父节点
    - 新父节点是该节点的子孙

    使用示例:
        try:
            forest.set_parent(root_id, grandchild_id)
        except CycleError as e:
            print(e.node_id, e.parent_id)
    """

    def __init__(
        self,
        node_id: Any,
        parent_id: Any,
        message: Optional[str] = None,
        code: ErrorCodeType = ErrorCode.CIRCULAR_REFERENCE,
        **extra: Any
    ):
        if message is None:
            if node_id == parent_id:
                message = f"节点不能成为自己的父节点: {node_id!r}"
            else:
                message = f"不能将节点 {node_id!r} 移动到其子孙节点 {parent_id!r} 下"
        self.node_id = node_id
        self.parent_id = parent_id
        super().__init__(
            message=message,
            code=code,
            status_code=status.HTTP_409_CONFLICT,
            node_id=node_id,
            parent_id=parent_id,
            **extra
        )


class CycleDetected(TreeException):
    """遍历过程中发现存储数据已经成环

    正常情况下所有写操作都经过校验器，不会出现此异常；
    出现时说明底层存储被绕过校验修改过。
    """

    def __init__(
        self,
        node_id: Any,
        max_depth: Optional[int] = None,
        message: Optional[str] = None,
        code: ErrorCodeType = ErrorCode.CYCLE_DETECTED,
        **extra: Any
    ):
        if message is None:
            if max_depth is None:
                message = f"从节点 {node_id!r} 出发的遍历重复访问了同一节点，存储数据存在环"
            else:
                message = f"从节点 {node_id!r} 出发的遍历超过最大深度 {max_depth}，存储数据可能存在环"
        self.node_id = node_id
        self.max_depth = max_depth
        super().__init__(
            message=message,
            code=code,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            node_id=node_id,
            max_depth=max_depth,
            **extra
        )


class InvalidTraversalOrderError(TreeException):
    """未知的遍历顺序"""

    def __init__(
        self,
        order: Any,
        message: Optional[str] = None,
        code: ErrorCodeType = ErrorCode.INVALID_TRAVERSAL_ORDER,
        **extra: Any
    ):
        self.order = order
        super().__init__(
            message=message or f"未知的遍历顺序: {order!r}",
            code=code,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            order=str(order),
            **extra
        )


class StoreError(TreeException):
    """节点存储错误

    由存储适配器抛出，核心逻辑原样向上传递，不做重试。
    """

    def __init__(
        self,
        message: str = "节点存储操作失败",
        code: ErrorCodeType = ErrorCode.STORE_ERROR,
        status_code: int = status.HTTP_503_SERVICE_UNAVAILABLE,
        details: Optional[List[str]] = None,
        **extra: Any
    ):
        super().__init__(
            message=message,
            code=code,
            status_code=status_code,
            details=details,
            **extra
        )


class NodeNotFoundError(StoreError):
    """节点不存在"""

    def __init__(
        self,
        node_id: Any,
        message: Optional[str] = None,
        code: ErrorCodeType = ErrorCode.NODE_NOT_FOUND,
        **extra: Any
    ):
        self.node_id = node_id
        super().__init__(
            message=message or f"节点不存在: {node_id!r}",
            code=code,
            status_code=status.HTTP_404_NOT_FOUND,
            node_id=node_id,
            **extra
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
]
