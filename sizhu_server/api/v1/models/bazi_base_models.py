#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
八字请求/响应模型
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from sizhu_core.data.stems_branches import is_valid_pillar


class BaziResponse(BaseModel):
    """统一响应格式"""
    success: bool
    data: Optional[Any] = None
    message: Optional[str] = None


class BaziCalculateRequest(BaseModel):
    """排盘请求"""
    date: str = Field(..., description="出生日期，格式：YYYY-MM-DD（calendar_type=lunar 时为农历年月日）", examples=["1987-01-07"])
    time: str = Field(..., description="出生时间，格式：HH:MM", examples=["09:55"])
    gender: str = Field(..., description="性别：male(男) 或 female(女)", examples=["male"])
    calendar_type: Optional[str] = Field("solar", description="历法类型：solar(阳历) 或 lunar(农历)")
    city: Optional[str] = Field(None, description="出生城市（用于真太阳时）", examples=["北京"])
    longitude: Optional[float] = Field(None, description="出生地经度（优先于城市）", examples=[116.4])
    is_leap_month: bool = Field(False, description="农历闰月")
    sect: Optional[int] = Field(None, description="早晚子时：1=23点算次日，2=23点算当日；默认取配置")

    @field_validator('date')
    @classmethod
    def validate_date(cls, v):
        """只检查非空，格式在 BaziInputProcessor 中校验（农历日期不能按公历校验）"""
        if not v:
            raise ValueError('日期不能为空')
        return v

    @field_validator('time')
    @classmethod
    def validate_time(cls, v):
        """验证时间格式"""
        try:
            datetime.strptime(v, '%H:%M')
        except ValueError:
            raise ValueError('时间格式错误，应为 HH:MM')
        return v

    @field_validator('gender')
    @classmethod
    def validate_gender(cls, v):
        """验证性别"""
        if v not in ['male', 'female']:
            raise ValueError('性别必须为 male 或 female')
        return v

    @field_validator('calendar_type')
    @classmethod
    def validate_calendar_type(cls, v):
        """验证历法类型"""
        if v and v not in ['solar', 'lunar']:
            raise ValueError('历法类型必须为 solar 或 lunar')
        return v or "solar"

    @field_validator('sect')
    @classmethod
    def validate_sect(cls, v):
        if v is not None and v not in (1, 2):
            raise ValueError('早晚子时流派必须为 1 或 2')
        return v


class PillarsRequest(BaseModel):
    """四柱干支"""
    year: str = Field(..., description="年柱", examples=["丙寅"])
    month: str = Field(..., description="月柱", examples=["辛丑"])
    day: str = Field(..., description="日柱", examples=["丙辰"])
    hour: str = Field(..., description="时柱", examples=["癸巳"])

    @field_validator('year', 'month', 'day', 'hour')
    @classmethod
    def validate_pillar(cls, v):
        """干支必须是六十甲子之一"""
        v = (v or '').strip()
        if len(v) != 2 or not is_valid_pillar(v[0], v[1]):
            raise ValueError(f'无效的干支: {v}')
        return v

    def to_pattern(self):
        return [self.year, self.month, self.day, self.hour]


class ReverseSearchRequest(PillarsRequest):
    """八字反推请求"""
    start_year: Optional[int] = Field(None, description="起始年份（含），默认取配置")
    end_year: Optional[int] = Field(None, description="结束年份（含），默认取配置")
    sect: Optional[int] = Field(None, description="早晚子时流派，默认取配置")

    @field_validator('sect')
    @classmethod
    def validate_sect(cls, v):
        if v is not None and v not in (1, 2):
            raise ValueError('早晚子时流派必须为 1 或 2')
        return v
