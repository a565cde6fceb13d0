# -*- coding: utf-8 -*-
"""
排盘计算器

- BaziCoreCalculator: 四柱排盘、手工盘、大运流年
- FortuneCalculator: 大运流年
- BaziToSolarConverter: 八字反推公历
- LunarConverter: 基于 lunar_python 的历法换算
"""

from .LunarConverter import LunarConverter
from .fortune_calculator import FortuneCalculator
from .bazi_core_calculator import BaziCoreCalculator
from .bazi_to_solar import BaziToSolarConverter

__all__ = [
    'LunarConverter',
    'FortuneCalculator',
    'BaziCoreCalculator',
    'BaziToSolarConverter',
]
