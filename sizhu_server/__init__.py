# -*- coding: utf-8 -*-
"""
四柱排盘服务层

FastAPI 接口、环境配置、输入处理和命令行工具。
"""
