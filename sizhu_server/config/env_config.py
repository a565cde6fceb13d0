#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
统一环境配置管理

提供统一的环境判断和排盘相关配置，核心计算模块不直接读环境变量，由服务层传入。
"""

import os
from typing import Literal, Optional

from sizhu_core.data.constants import (
    DEFAULT_SEARCH_END_YEAR,
    DEFAULT_SEARCH_MAX_SPAN,
    DEFAULT_SEARCH_START_YEAR,
    DEFAULT_SECT,
    REFERENCE_LONGITUDE,
)

# 环境类型定义
Environment = Literal["local", "staging", "production"]


class EnvConfig:
    """
    统一环境配置管理器

    提供统一的环境判断和配置读取接口
    """

    def __init__(self):
        """初始化环境配置"""
        self._detect_environment()

    def _detect_environment(self):
        """检测当前环境"""
        # 优先读取 ENV，其次 APP_ENV，默认 local
        env_value = os.getenv("ENV", os.getenv("APP_ENV", "local")).lower()

        if env_value in ["staging", "stage"]:
            self._env = "staging"
        elif env_value in ["prod", "production"]:
            self._env = "production"
        else:
            # local / dev / development / 未知环境
            self._env = "local"

    @property
    def env(self) -> Environment:
        """获取当前环境"""
        return self._env

    @property
    def is_local_dev(self) -> bool:
        """是否为本地开发环境"""
        return self._env == "local"

    @property
    def is_production(self) -> bool:
        """是否为生产环境"""
        return self._env == "production"

    def get_int_config(self, key: str, default: int = 0) -> int:
        value = os.getenv(key, str(default))
        try:
            return int(value)
        except ValueError:
            return default

    def get_float_config(self, key: str, default: float = 0.0) -> float:
        value = os.getenv(key, str(default))
        try:
            return float(value)
        except ValueError:
            return default

    # ------------------------------------------------------------------
    # 排盘配置
    # ------------------------------------------------------------------

    @property
    def search_start_year(self) -> int:
        """八字反推起始年份"""
        return self.get_int_config("SIZHU_SEARCH_START_YEAR", DEFAULT_SEARCH_START_YEAR)

    @property
    def search_end_year(self) -> int:
        """八字反推结束年份"""
        return self.get_int_config("SIZHU_SEARCH_END_YEAR", DEFAULT_SEARCH_END_YEAR)

    @property
    def reference_longitude(self) -> float:
        """真太阳时基准经线"""
        return self.get_float_config("SIZHU_REFERENCE_LONGITUDE", REFERENCE_LONGITUDE)

    @property
    def default_sect(self) -> int:
        """默认早晚子时流派"""
        return self.get_int_config("SIZHU_DEFAULT_SECT", DEFAULT_SECT)

    @property
    def search_max_span(self) -> int:
        """单次反推最多跨越的年数"""
        return max(1, self.get_int_config("SIZHU_SEARCH_MAX_SPAN", DEFAULT_SEARCH_MAX_SPAN))

    @property
    def search_threads(self) -> int:
        """单次反推的分段线程数，lunar_python 受 GIL 限制，默认 1 即顺序查找"""
        return max(1, self.get_int_config("SIZHU_SEARCH_THREADS", 1))

    @property
    def search_workers(self) -> int:
        """
        接口计算线程池大小（同时处理的排盘、反推请求数）

        - 本地开发：CPU核心数 * 2，最大16
        - 生产环境：CPU核心数 * 2，最大100
        """
        cpu_count = os.cpu_count() or 4
        limit = 16 if self.is_local_dev else 100
        return max(1, self.get_int_config("SIZHU_SEARCH_WORKERS", min(cpu_count * 2, limit)))


# 全局单例实例
_env_config: Optional[EnvConfig] = None


def get_env_config() -> EnvConfig:
    """获取环境配置实例（全局单例）"""
    global _env_config
    if _env_config is None:
        _env_config = EnvConfig()
    return _env_config


def reset_env_config() -> None:
    """丢弃缓存的配置，下次调用时重新读取环境变量"""
    global _env_config
    _env_config = None


# 便捷函数
def is_production() -> bool:
    """是否为生产环境（便捷函数）"""
    return get_env_config().is_production

