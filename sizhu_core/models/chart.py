#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
排盘结果数据模型

所有模型均为不可变值对象（frozen），新结果一律新建，不在原对象上修改。
"""

from datetime import datetime
from typing import Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class BirthMoment(BaseModel):
    """公历时刻（未校正真太阳时）"""
    model_config = ConfigDict(frozen=True)

    year: int = Field(..., description="年")
    month: int = Field(..., description="月")
    day: int = Field(..., description="日")
    hour: int = Field(0, description="时")
    minute: int = Field(0, description="分")

    def to_datetime(self) -> datetime:
        return datetime(self.year, self.month, self.day, self.hour, self.minute)


class HiddenStem(BaseModel):
    """地支藏干"""
    model_config = ConfigDict(frozen=True)

    stem: str = Field(..., description="藏干")
    ten_god: str = Field('', description="藏干十神（副星）")
    element: str = Field('', description="五行")


class Pillar(BaseModel):
    """一柱"""
    model_config = ConfigDict(frozen=True)

    stem: str = Field(..., description="天干")
    branch: str = Field(..., description="地支")
    stem_ten_god: str = Field('', description="天干十神（主星），日柱为日主")
    stem_element: str = Field('', description="天干五行")
    branch_element: str = Field('', description="地支五行")
    hidden_stems: Tuple[HiddenStem, ...] = Field((), description="藏干")
    nayin: str = Field('', description="纳音")
    life_stage: str = Field('', description="星运（日干在本柱地支的十二长生）")
    self_sitting: str = Field('', description="自坐（本柱天干在本柱地支的十二长生）")
    shen_sha: Tuple[str, ...] = Field((), description="神煞")
    kong_wang: bool = Field(False, description="是否落日柱空亡")

    @property
    def ganzhi(self) -> str:
        return f"{self.stem}{self.branch}"


class Commander(BaseModel):
    """人元司令"""
    model_config = ConfigDict(frozen=True)

    stem: str = Field('', description="当令天干")
    element: str = Field('', description="当令天干五行")
    label: str = Field('', description="显示文字，如 甲木用事")


class BaziChart(BaseModel):
    """四柱命盘"""
    model_config = ConfigDict(frozen=True)

    type: Literal['calculated', 'manual'] = 'calculated'
    year: Pillar
    month: Pillar
    day: Pillar
    hour: Pillar
    day_kong_wang: str = Field('', description="日柱空亡，如 戌亥")
    commander: Optional[Commander] = Field(None, description="人元司令（手工盘没有）")
    solar_term_name: str = Field('', description="出生前最近的节")
    days_since_solar_term: int = Field(0, description="交节后天数")
    solar_date_str: str = ''
    lunar_date_str: str = ''
    solar_term_str: str = ''
    adjusted_datetime: Optional[datetime] = Field(None, description="真太阳时校正后的时间")
    sect: int = Field(2, description="早晚子时流派")

    @property
    def pillars(self) -> Tuple[Pillar, Pillar, Pillar, Pillar]:
        return (self.year, self.month, self.day, self.hour)

    @property
    def ganzhi(self) -> str:
        return ' '.join(p.ganzhi for p in self.pillars)


class AnnualPillar(BaseModel):
    """流年"""
    model_config = ConfigDict(frozen=True)

    year: int
    ganzhi: str


class FortuneCycle(BaseModel):
    """大运"""
    model_config = ConfigDict(frozen=True)

    index: int = Field(..., description="第几步大运（1..8）")
    start_age: int = Field(..., description="起运虚岁")
    start_year: int = Field(..., description="起运年份")
    stem: str
    branch: str
    stem_element: str = ''
    branch_element: str = ''
    ten_god: str = Field('', description="大运天干相对日干的十神")
    life_stage: str = Field('', description="日干在大运地支的十二长生")
    nayin: str = ''
    liunian: Tuple[AnnualPillar, ...] = Field((), description="本步大运内的 10 个流年")

    @property
    def ganzhi(self) -> str:
        return f"{self.stem}{self.branch}"


class BaziResult(BaseModel):
    """命盘 + 大运流年"""
    model_config = ConfigDict(frozen=True)

    chart: BaziChart
    gender: Literal['male', 'female'] = 'male'
    dayun: Tuple[FortuneCycle, ...] = ()
    yun_qian: Tuple[AnnualPillar, ...] = Field((), description="起运前的流年")
    start_luck_text: str = ''


class MatchedDate(BaseModel):
    """八字反推得到的公历时刻"""
    model_config = ConfigDict(frozen=True)

    year: int
    month: int
    day: int
    hour: int
    ganzhi: str = Field(..., description="四柱，如 甲子 丙寅 戊辰 壬子")

    def sort_key(self) -> Tuple[int, int, int, int]:
        return (self.year, self.month, self.day, self.hour)


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
