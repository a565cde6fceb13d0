#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
真太阳时

真太阳时 = 北京时间 + (经度 - 120) * 4 分钟（每度差 4 分钟，不含均时差）
"""

from datetime import datetime, timedelta
from typing import Optional

from sizhu_core.data.constants import CITY_LONGITUDES, REFERENCE_LONGITUDE
from sizhu_core.exceptions import ValidationError


def calculate_true_solar_time(local_time: datetime, longitude: Optional[float],
                              reference_longitude: float = REFERENCE_LONGITUDE) -> datetime:
    """
    计算真太阳时

    Args:
        local_time: 标准时间（基准经线的钟表时间）
        longitude: 出生地经度，None 表示不校正
        reference_longitude: 基准经线，默认东经 120 度

    Returns:
        校正后的时间
    """
    if longitude is None or longitude == reference_longitude:
        return local_time
    if not -180.0 <= longitude <= 180.0:
        raise ValidationError(f"经度超出范围: {longitude}", field='longitude')

    time_diff_minutes = (longitude - reference_longitude) * 4
    return local_time + timedelta(minutes=time_diff_minutes)


def resolve_longitude(city: Optional[str] = None, longitude: Optional[float] = None) -> Optional[float]:
    """
    经度优先，其次按城市查表

    Returns:
        经度；都没有时返回 None
    """
    if longitude is not None:
        return longitude
    if not city:
        return None
    if city not in CITY_LONGITUDES:
        raise ValidationError(f"不支持的城市: {city}", field='city')
    return CITY_LONGITUDES[city]


__all__ = ['calculate_true_solar_time', 'resolve_longitude']
