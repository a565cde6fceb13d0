#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
计算线程池

排盘和八字反推都是同步 CPU 计算（lunar_python），放到共享线程池里跑，
接口协程只负责等待结果。线程数取 SIZHU_SEARCH_WORKERS。
"""

import asyncio
import functools
import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Optional

from sizhu_server.config.env_config import get_env_config

logger = logging.getLogger(__name__)

_executor: Optional[ThreadPoolExecutor] = None
_executor_lock = threading.Lock()


def get_executor() -> ThreadPoolExecutor:
    """返回进程内共享的计算线程池，首次调用时创建"""
    global _executor

    if _executor is None:
        with _executor_lock:
            if _executor is None:
                workers = get_env_config().search_workers
                _executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="sizhu_compute")
                logger.info(f"计算线程池已启动 (workers={workers})")

    return _executor


async def run_in_executor(func: Callable, *args, **kwargs) -> Any:
    """在计算线程池中执行 func(*args, **kwargs) 并等待结果，异常原样抛出"""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(get_executor(), functools.partial(func, *args, **kwargs))


def shutdown_executor() -> None:
    """等待进行中的计算结束后关闭线程池（应用退出时调用）"""
    global _executor
    with _executor_lock:
        if _executor is not None:
            _executor.shutdown(wait=True)
            _executor = None
            logger.info("计算线程池已关闭")
