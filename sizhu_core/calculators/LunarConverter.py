#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
基于 lunar_python 的历法换算实现

所有 lunar_python 抛出的异常统一包装为 OracleError（保留原始异常链），不在本地重试。
"""

import logging
from typing import Tuple

from lunar_python import Lunar, Solar
from lunar_python.util import SolarUtil

from sizhu_core.exceptions import OracleError
from sizhu_core.interfaces.calendar_oracle import (
    ICalendarOracle,
    RawChart,
    RawDaYun,
    RawLiuNian,
    RawPillar,
    RawYun,
)

logger = logging.getLogger(__name__)

# EightChar 方法名前缀
_PILLAR_PREFIX = {
    'year': 'Year',
    'month': 'Month',
    'day': 'Day',
    'hour': 'Time',
}


class LunarConverter(ICalendarOracle):
    """农历转换工具类 - 统一的公历/农历/干支换算入口"""

    @staticmethod
    def _solar(year: int, month: int, day: int, hour: int = 0, minute: int = 0):
        try:
            return Solar.fromYmdHms(year, month, day, hour, minute, 0)
        except Exception as exc:
            logger.warning(f"公历换算失败: {year}-{month}-{day} {hour}:{minute} ({exc})")
            raise OracleError() from exc

    @staticmethod
    def _eight_char(solar, sect: int):
        try:
            eight_char = solar.getLunar().getEightChar()
            eight_char.setSect(sect)
            return eight_char
        except Exception as exc:
            logger.warning(f"八字换算失败: {solar.toYmdHms()} ({exc})")
            raise OracleError() from exc

    @staticmethod
    def _raw_pillar(eight_char, position: str) -> RawPillar:
        prefix = _PILLAR_PREFIX[position]
        return RawPillar(
            ganzhi=getattr(eight_char, f"get{prefix}")(),
            ten_god=getattr(eight_char, f"get{prefix}ShiShenGan")(),
            hidden_stems=tuple(getattr(eight_char, f"get{prefix}HideGan")()),
            hidden_ten_gods=tuple(getattr(eight_char, f"get{prefix}ShiShenZhi")()),
            nayin=getattr(eight_char, f"get{prefix}NaYin")(),
            life_stage=getattr(eight_char, f"get{prefix}DiShi")(),
        )

    def eight_char(self, year: int, month: int, day: int, hour: int, minute: int, sect: int) -> RawChart:
        solar = self._solar(year, month, day, hour, minute)
        eight_char = self._eight_char(solar, sect)
        try:
            lunar = solar.getLunar()
            prev_jie = lunar.getPrevJie()
            days_since_jie = abs(int(solar.subtract(prev_jie.getSolar())))
            lunar_date_str = (
                f"农历{lunar.getYearInGanZhi()}年{lunar.getMonthInChinese()}月"
                f"{lunar.getDayInChinese()}, {lunar.getTimeZhi()}时"
            )
            return RawChart(
                year=self._raw_pillar(eight_char, 'year'),
                month=self._raw_pillar(eight_char, 'month'),
                day=self._raw_pillar(eight_char, 'day'),
                hour=self._raw_pillar(eight_char, 'hour'),
                day_kong_wang=eight_char.getDayXunKong(),
                prev_jie_name=prev_jie.getName(),
                days_since_jie=days_since_jie,
                lunar_date_str=lunar_date_str,
            )
        except OracleError:
            raise
        except Exception as exc:
            logger.warning(f"八字详情换算失败: {solar.toYmdHms()} ({exc})")
            raise OracleError() from exc

    def pillars(self, year: int, month: int, day: int, hour: int, minute: int, sect: int) -> Tuple[str, str, str, str]:
        eight_char = self._eight_char(self._solar(year, month, day, hour, minute), sect)
        return (eight_char.getYear(), eight_char.getMonth(), eight_char.getDay(), eight_char.getTime())

    def yun(self, year: int, month: int, day: int, hour: int, minute: int, sect: int,
            gender: str, count: int) -> RawYun:
        """
        起运与大运

        lunar_python 的第 0 步大运是起运前（没有干支），这里去掉，只返回 count 步正式大运。
        """
        eight_char = self._eight_char(self._solar(year, month, day, hour, minute), sect)
        try:
            yun = eight_char.getYun(1 if gender == 'male' else 0)
            dayun_list = []
            for dayun in yun.getDaYun(count + 1)[1:]:
                liunian = tuple(
                    RawLiuNian(year=item.getYear(), ganzhi=item.getGanZhi())
                    for item in dayun.getLiuNian()
                )
                dayun_list.append(RawDaYun(
                    index=dayun.getIndex(),
                    start_age=dayun.getStartAge(),
                    start_year=dayun.getStartYear(),
                    end_year=dayun.getEndYear(),
                    ganzhi=dayun.getGanZhi(),
                    liunian=liunian,
                ))
            return RawYun(
                start_years=yun.getStartYear(),
                start_months=yun.getStartMonth(),
                start_days=yun.getStartDay(),
                dayun=tuple(dayun_list),
            )
        except Exception as exc:
            logger.warning(f"大运换算失败: {year}-{month}-{day} {hour}:{minute} ({exc})")
            raise OracleError() from exc

    def year_pillar(self, year: int, month: int, day: int) -> str:
        solar = self._solar(year, month, day, 12, 0)
        try:
            return solar.getLunar().getYearInGanZhiExact()
        except Exception as exc:
            raise OracleError() from exc

    def year_month_pillars(self, year: int, month: int, day: int) -> Tuple[str, str]:
        solar = self._solar(year, month, day, 12, 0)
        try:
            lunar = solar.getLunar()
            return lunar.getYearInGanZhiExact(), lunar.getMonthInGanZhiExact()
        except Exception as exc:
            raise OracleError() from exc

    def lunar_to_solar(self, year: int, month: int, day: int, is_leap_month: bool = False) -> Tuple[int, int, int]:
        """农历转公历，闰月在 lunar_python 里用负数月份表示"""
        try:
            lunar = Lunar.fromYmd(year, -month if is_leap_month else month, day)
            solar = lunar.getSolar()
        except Exception as exc:
            logger.warning(f"农历转阳历失败: {year}-{'闰' if is_leap_month else ''}{month}-{day} ({exc})")
            raise OracleError(f"农历转阳历失败: {exc}") from exc
        return solar.getYear(), solar.getMonth(), solar.getDay()

    def days_in_month(self, year: int, month: int) -> int:
        return SolarUtil.getDaysOfMonth(year, month)


__all__ = ['LunarConverter']
