#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
输入校验

所有校验都在调用历法之前完成，失败抛 ValidationError（带字段名）。
"""

import calendar
from typing import Mapping, Optional, Sequence, Tuple

from sizhu_core.data.constants import SECT_MERGED_RAT, SECT_SPLIT_RAT
from sizhu_core.data.stems_branches import is_valid_pillar
from sizhu_core.exceptions import ValidationError
from sizhu_core.models.chart import BirthMoment

PILLAR_FIELDS: Tuple[str, str, str, str] = ('year', 'month', 'day', 'hour')


def validate_moment(moment: BirthMoment) -> BirthMoment:
    """校验公历年月日时分"""
    if not 1 <= moment.year <= 9999:
        raise ValidationError(f"年份超出范围: {moment.year}", field='year')
    if not 1 <= moment.month <= 12:
        raise ValidationError(f"月份必须在 1-12 之间: {moment.month}", field='month')
    days = calendar.monthrange(moment.year, moment.month)[1]
    if not 1 <= moment.day <= days:
        raise ValidationError(f"{moment.year}年{moment.month}月没有{moment.day}日", field='day')
    if not 0 <= moment.hour <= 23:
        raise ValidationError(f"小时必须在 0-23 之间: {moment.hour}", field='hour')
    if not 0 <= moment.minute <= 59:
        raise ValidationError(f"分钟必须在 0-59 之间: {moment.minute}", field='minute')
    return moment


def validate_sect(sect: int) -> int:
    """早晚子时流派只能是 1 或 2"""
    if sect not in (SECT_MERGED_RAT, SECT_SPLIT_RAT):
        raise ValidationError(f"早晚子时流派必须为 1 或 2: {sect}", field='sect')
    return sect


def validate_gender(gender: str) -> str:
    if gender not in ('male', 'female'):
        raise ValidationError('性别必须为 male 或 female', field='gender')
    return gender


def validate_pillar(ganzhi: str, field: str) -> str:
    """单柱：两个字，且天干地支阴阳相同"""
    if not ganzhi or len(ganzhi) != 2:
        raise ValidationError(f"{field} 柱必须是两个字的干支: {ganzhi!r}", field=field)
    if not is_valid_pillar(ganzhi[0], ganzhi[1]):
        raise ValidationError(f"{field} 柱不是有效的六十甲子: {ganzhi}", field=field)
    return ganzhi


def validate_pattern(pattern) -> Tuple[str, str, str, str]:
    """
    四柱完整且合法

    Args:
        pattern: 四个干支的序列，或含 year/month/day/hour 的映射

    Returns:
        (年柱, 月柱, 日柱, 时柱)
    """
    if isinstance(pattern, Mapping):
        values = [pattern.get(field, '') for field in PILLAR_FIELDS]
    elif isinstance(pattern, Sequence) and not isinstance(pattern, str):
        values = list(pattern)
    else:
        raise ValidationError('四柱格式错误', field='pattern')

    if len(values) != 4:
        raise ValidationError('四柱必须完整（年、月、日、时）', field='pattern')

    return tuple(validate_pillar(value, field) for value, field in zip(values, PILLAR_FIELDS))


def validate_year_window(start_year: int, end_year: int, max_span: Optional[int] = None) -> Tuple[int, int]:
    """校验反推年份窗口，max_span 为窗口最多包含的年数，None 表示不限"""
    if start_year > end_year:
        raise ValidationError(f"起始年份不能晚于结束年份: {start_year} > {end_year}", field='start_year')
    if start_year < 1:
        raise ValidationError(f"起始年份超出范围: {start_year}", field='start_year')
    if max_span is not None and end_year - start_year + 1 > max_span:
        raise ValidationError(
            f"年份范围过大: {start_year}-{end_year}，最多 {max_span} 年", field='end_year'
        )
    return start_year, end_year


__all__ = [
    'PILLAR_FIELDS',
    'validate_moment',
    'validate_sect',
    'validate_gender',
    'validate_pillar',
    'validate_pattern',
    'validate_year_window',
]
