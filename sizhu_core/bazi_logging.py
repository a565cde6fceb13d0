#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
sizhu_core 日志工具

各模块用 logging.getLogger(__name__)，记录交给根 logger（由入口的 basicConfig 决定格式和级别），
包 logger "sizhu_core" 本身不挂 handler。
safe_log 走单独的 "sizhu_core.safe_log"，自带不怕断管的 handler，不再向上传递，每条只输出一次。
"""

import logging

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
SAFE_LOGGER_NAME = "sizhu_core.safe_log"


class SafeStreamHandler(logging.StreamHandler):
    """输出端已关闭（Broken pipe）时静默丢弃日志，不影响排盘结果"""
    def emit(self, record):
        try:
            super().emit(record)
        except (BrokenPipeError, OSError):
            pass


logger = logging.getLogger(SAFE_LOGGER_NAME)
if not logger.handlers:
    _handler = SafeStreamHandler()
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_handler)
    logger.propagate = False


def safe_log(level: str, message: str) -> None:
    """按级别名输出日志，未知级别按 info 处理"""
    log_method = getattr(logger, level) if level in ('debug', 'info', 'warning', 'error') else logger.info
    try:
        log_method(message)
    except (BrokenPipeError, OSError):
        pass
