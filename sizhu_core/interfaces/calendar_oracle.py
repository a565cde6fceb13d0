#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
历法换算接口

排盘核心只通过这个接口拿到干支、节气、大运等原始数据，
具体实现可以是 lunar_python，也可以是任何自研的历法库。
"""

from abc import ABC, abstractmethod
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class RawPillar(BaseModel):
    """历法返回的一柱原始数据"""
    model_config = ConfigDict(frozen=True)

    ganzhi: str
    ten_god: str = Field('', description="天干十神，日柱为 日主")
    hidden_stems: Tuple[str, ...] = ()
    hidden_ten_gods: Tuple[str, ...] = ()
    nayin: str = ''
    life_stage: str = Field('', description="星运（历法库自带，可能为空）")


class RawChart(BaseModel):
    """历法返回的四柱原始数据"""
    model_config = ConfigDict(frozen=True)

    year: RawPillar
    month: RawPillar
    day: RawPillar
    hour: RawPillar
    day_kong_wang: str = ''
    prev_jie_name: str = ''
    days_since_jie: int = 0
    lunar_date_str: str = ''


class RawLiuNian(BaseModel):
    """历法返回的流年"""
    model_config = ConfigDict(frozen=True)

    year: int
    ganzhi: str


class RawDaYun(BaseModel):
    """历法返回的一步大运"""
    model_config = ConfigDict(frozen=True)

    index: int
    start_age: int
    start_year: int
    end_year: int
    ganzhi: str
    liunian: Tuple[RawLiuNian, ...] = ()


class RawYun(BaseModel):
    """起运信息与大运列表（不含起运前那一段）"""
    model_config = ConfigDict(frozen=True)

    start_years: int = 0
    start_months: int = 0
    start_days: int = 0
    dayun: Tuple[RawDaYun, ...] = ()


class ICalendarOracle(ABC):
    """历法换算接口"""

    @abstractmethod
    def eight_char(self, year: int, month: int, day: int, hour: int, minute: int, sect: int) -> RawChart:
        """公历时刻 -> 四柱及藏干、十神、纳音、星运、空亡、节气"""

    @abstractmethod
    def pillars(self, year: int, month: int, day: int, hour: int, minute: int, sect: int) -> Tuple[str, str, str, str]:
        """公历时刻 -> 四柱干支（只取干支，反推时用）"""

    @abstractmethod
    def yun(self, year: int, month: int, day: int, hour: int, minute: int, sect: int,
            gender: str, count: int) -> RawYun:
        """起运与大运（每步带流年），gender 为 male/female"""

    @abstractmethod
    def year_pillar(self, year: int, month: int, day: int) -> str:
        """某日的年柱（以立春换年）"""

    @abstractmethod
    def year_month_pillars(self, year: int, month: int, day: int) -> Tuple[str, str]:
        """某日的年柱、月柱（以节换月）"""

    @abstractmethod
    def lunar_to_solar(self, year: int, month: int, day: int, is_leap_month: bool = False) -> Tuple[int, int, int]:
        """农历日期 -> 公历 (年, 月, 日)"""

    @abstractmethod
    def days_in_month(self, year: int, month: int) -> int:
        """公历某月天数"""

    def annual_ganzhi(self, year: int, sample_month: int = 6, sample_day: int = 1) -> str:
        """流年干支：取年中某日，避开立春前后"""
        return self.year_pillar(year, sample_month, sample_day)


__all__ = [
    'ICalendarOracle',
    'RawPillar',
    'RawChart',
    'RawLiuNian',
    'RawDaYun',
    'RawYun',
]
