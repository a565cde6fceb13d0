#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
八字输入处理工具类 - 统一处理农历转换和出生地经度
"""

import logging
import re
from datetime import datetime
from typing import Optional, Tuple

from sizhu_core.calculators.LunarConverter import LunarConverter
from sizhu_core.calculators.true_solar_time import resolve_longitude
from sizhu_core.exceptions import ValidationError
from sizhu_core.interfaces.calendar_oracle import ICalendarOracle
from sizhu_core.models.chart import BirthMoment
from sizhu_core.validators import validate_moment

logger = logging.getLogger(__name__)

_DATE_PATTERN = re.compile(r'^(\d{1,4})-(\d{1,2})-(\d{1,2})$')


class BaziInputProcessor:
    """八字输入处理工具类"""

    @staticmethod
    def parse_date(date_str: str) -> Tuple[int, int, int]:
        """解析 YYYY-MM-DD（农历日期也用这个格式，不校验公历天数）"""
        match = _DATE_PATTERN.match((date_str or '').strip())
        if not match:
            raise ValidationError(f"日期格式错误，应为 YYYY-MM-DD: {date_str!r}", field='date')
        return int(match.group(1)), int(match.group(2)), int(match.group(3))

    @staticmethod
    def parse_time(time_str: str) -> Tuple[int, int]:
        """解析 HH:MM"""
        try:
            parsed = datetime.strptime((time_str or '').strip(), '%H:%M')
        except ValueError:
            raise ValidationError(f"时间格式错误，应为 HH:MM: {time_str!r}", field='time')
        return parsed.hour, parsed.minute

    @staticmethod
    def process_input(
        date_str: str,
        time_str: str,
        calendar_type: Optional[str] = "solar",
        city: Optional[str] = None,
        longitude: Optional[float] = None,
        is_leap_month: bool = False,
        oracle: Optional[ICalendarOracle] = None
    ) -> Tuple[BirthMoment, Optional[float], dict]:
        """
        处理八字输入（农历转换 + 出生地经度）

        真太阳时校正由排盘核心按返回的经度完成。

        Args:
            date_str: 日期字符串 YYYY-MM-DD（阳历或农历）
            time_str: 时间字符串 HH:MM
            calendar_type: 历法类型（solar/lunar），默认 solar
            city: 出生城市（查表得经度）
            longitude: 经度（优先于城市）
            is_leap_month: 农历输入时是否为闰月
            oracle: 历法实现，默认 LunarConverter

        Returns:
            (公历出生时刻, 经度, 转换信息)
        """
        calendar_type = calendar_type or "solar"
        if calendar_type not in ("solar", "lunar"):
            raise ValidationError('历法类型必须为 solar 或 lunar', field='calendar_type')

        conversion_info = {
            'original_date': date_str,
            'original_time': time_str,
            'calendar_type': calendar_type,
            'city': city,
            'longitude': longitude,
            'converted': False,
        }

        year, month, day = BaziInputProcessor.parse_date(date_str)
        hour, minute = BaziInputProcessor.parse_time(time_str)

        # 步骤1：农历输入先转公历
        if calendar_type == "lunar":
            if not 1 <= month <= 12:
                raise ValidationError(f"农历月份必须在 1-12 之间: {month}", field='month')
            if not 1 <= day <= 30:
                raise ValidationError(f"农历日期必须在 1-30 之间: {day}", field='day')
            oracle = oracle or LunarConverter()
            year, month, day = oracle.lunar_to_solar(year, month, day, is_leap_month)
            conversion_info['converted'] = True
            conversion_info['lunar_to_solar'] = f"{year:04d}-{month:02d}-{day:02d}"
            logger.debug(f"农历 {date_str}{'(闰)' if is_leap_month else ''} -> 公历 {conversion_info['lunar_to_solar']}")

        moment = validate_moment(BirthMoment(year=year, month=month, day=day, hour=hour, minute=minute))

        # 步骤2：出生地经度（经度优先，其次城市）
        resolved_longitude = resolve_longitude(city, longitude)
        conversion_info['resolved_longitude'] = resolved_longitude

        return moment, resolved_longitude, conversion_info
