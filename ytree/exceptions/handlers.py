"""FastAPI 异常处理器

宿主应用把树形结构暴露为 HTTP 接口时，注册此处的处理器即可把
TreeException 转换为统一的 JSON 错误响应。
"""

from fastapi import Request
from fastapi.responses import JSONResponse

from ytree.log import get_logger
from .exceptions import TreeException

logger = get_logger()

ERROR_STATUS = "error"


async def tree_exception_handler(
    request: Request,
    exc: TreeException
) -> JSONResponse:
    """树形结构异常处理器

    Args:
        request: FastAPI 请求对象
        exc: 异常实例

    Returns:
        JSON 响应
    """
    logger.warning(
        f"Tree exception occurred: {exc.code} - {exc.message}",
        extra={
            "path": request.url.path,
            "method": request.method,
            "error_code": exc.code,
            "status_code": exc.status_code,
        }
    )

    content = {
        "status": ERROR_STATUS,
        "message": exc.message,
        "msg_details": exc.details,
        "data": {}
    }

    if exc.code:
        content["code"] = exc.code.value if hasattr(exc.code, "value") else exc.code

    return JSONResponse(status_code=exc.status_code, content=content)


def register_exception_handlers(app) -> None:
    """注册树形结构异常处理器到 FastAPI 应用

    使用示例:
        from fastapi import FastAPI
        from ytree.exceptions import register_exception_handlers

        app = FastAPI()
        register_exception_handlers(app)

    Args:
        app: FastAPI 应用实例
    """
    app.add_exception_handler(TreeException, tree_exception_handler)
    logger.info("Tree exception handlers registered successfully")


__all__ = [
    "tree_exception_handler",
    "register_exception_handlers",
]
