# -*- coding: utf-8 -*-
"""服务配置"""

from .env_config import EnvConfig, get_env_config, is_production

__all__ = ['EnvConfig', 'get_env_config', 'is_production']
