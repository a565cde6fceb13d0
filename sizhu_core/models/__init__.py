# -*- coding: utf-8 -*-
"""排盘数据模型"""

from .chart import (
    BirthMoment,
    HiddenStem,
    Pillar,
    Commander,
    BaziChart,
    AnnualPillar,
    FortuneCycle,
    BaziResult,
    MatchedDate,
)

__all__ = [
    'BirthMoment',
    'HiddenStem',
    'Pillar',
    'Commander',
    'BaziChart',
    'AnnualPillar',
    'FortuneCycle',
    'BaziResult',
    'MatchedDate',
]
