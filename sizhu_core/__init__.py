# -*- coding: utf-8 -*-
"""
四柱排盘核心

只包含纯计算：排盘、大运流年、八字反推。历法换算通过 ICalendarOracle 注入。
"""

__version__ = "1.0.0"
