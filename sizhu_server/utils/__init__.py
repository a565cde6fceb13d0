# -*- coding: utf-8 -*-
"""服务层工具"""
