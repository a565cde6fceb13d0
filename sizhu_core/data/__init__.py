# -*- coding: utf-8 -*-
"""排盘基础数据"""
