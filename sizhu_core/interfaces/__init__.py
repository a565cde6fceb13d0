# -*- coding: utf-8 -*-
"""
接口抽象层
定义历法换算接口，实现依赖倒置原则
"""

from .calendar_oracle import ICalendarOracle, RawPillar, RawChart, RawLiuNian, RawDaYun, RawYun

__all__ = [
    'ICalendarOracle',
    'RawPillar',
    'RawChart',
    'RawLiuNian',
    'RawDaYun',
    'RawYun',
]
