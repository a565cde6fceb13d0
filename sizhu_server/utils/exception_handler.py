#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
统一异常处理

排盘异常（BaziError 及其子类）转换为标准错误响应：
{"success": false, "error": ..., "error_type": ...}
"""

import asyncio
import functools
import logging
from typing import Callable, Tuple, Type

from fastapi import HTTPException
from fastapi.responses import JSONResponse

from sizhu_core.exceptions import BaziError
from sizhu_server.config.env_config import is_production

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str, error_type: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": message,
            "error_type": error_type
        }
    )


def api_error_handler(
    func: Callable = None,
    *,
    catch: Tuple[Type[Exception], ...] = (Exception,),
    default_error: str = "服务器内部错误",
    log_errors: bool = True
):
    """
    API 错误处理装饰器

    使用示例：
    ```python
    @router.post("/bazi/calculate")
    @api_error_handler
    async def calculate(request: BaziCalculateRequest):
        ...
    ```
    """
    def handle(fn_name: str, e: Exception) -> JSONResponse:
        if isinstance(e, BaziError):
            if log_errors:
                logger.warning(f"业务异常 [{fn_name}]: {e.message}")
            return error_response(e.code, e.message, e.error_type)

        if log_errors:
            logger.error(f"API 错误 [{fn_name}]: {e}", exc_info=True)
        error_msg = default_error if is_production() else str(e)
        return error_response(500, error_msg, "internal_error")

    def decorator(fn):
        @functools.wraps(fn)
        async def async_wrapper(*args, **kwargs):
            try:
                return await fn(*args, **kwargs)
            except HTTPException:
                # FastAPI 的 HTTPException 直接抛出
                raise
            except BaziError as e:
                return handle(fn.__name__, e)
            except catch as e:
                return handle(fn.__name__, e)

        @functools.wraps(fn)
        def sync_wrapper(*args, **kwargs):
            try:
                return fn(*args, **kwargs)
            except HTTPException:
                raise
            except BaziError as e:
                return handle(fn.__name__, e)
            except catch as e:
                return handle(fn.__name__, e)

        if asyncio.iscoroutinefunction(fn):
            return async_wrapper
        return sync_wrapper

    # 支持 @api_error_handler 和 @api_error_handler(...) 两种用法
    if func is not None:
        return decorator(func)
    return decorator
