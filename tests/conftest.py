#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pytest 全局配置

提供：
- 应用和客户端 fixtures
- 确定性的内存历法（FakeOracle），单元测试不依赖真实历法
- 示例数据 fixtures
"""

from collections import Counter
from datetime import date, timedelta
from typing import Any, Dict

import pytest

from sizhu_core.data.stems_branches import SIXTY_JIAZI
from sizhu_core.interfaces.calendar_oracle import (
    ICalendarOracle,
    RawChart,
    RawDaYun,
    RawLiuNian,
    RawPillar,
    RawYun,
)


# ==================== 内存历法 ====================

class FakeOracle(ICalendarOracle):
    """
    简化历法：公历年即干支年，公历月即干支月，日柱按儒略日数循环，
    23 点时柱取次日日干起算（与真实历法一致），sect=1 时 23 点日柱算次日。

    calls 记录每个方法的调用次数。
    """

    def __init__(self, raw_chart: RawChart = None, raw_yun: RawYun = None):
        self.raw_chart = raw_chart
        self.raw_yun = raw_yun
        self.calls = Counter()

    @staticmethod
    def year_gz(year: int) -> str:
        return SIXTY_JIAZI[(year - 4) % 60]

    @staticmethod
    def month_gz(year: int, month: int) -> str:
        return SIXTY_JIAZI[((year - 4) * 12 + month + 1) % 60]

    @staticmethod
    def day_index(value: date) -> int:
        return (value.toordinal() + 14) % 60

    def _pillars(self, year, month, day, hour, sect):
        civil = date(year, month, day)
        day_date = civil + timedelta(days=1) if (sect == 1 and hour == 23) else civil
        hour_day = civil + timedelta(days=1) if hour == 23 else civil
        branch_index = ((hour + 1) // 2) % 12
        hour_gz = SIXTY_JIAZI[(self.day_index(hour_day) * 12 + branch_index) % 60]
        return (
            self.year_gz(year),
            self.month_gz(year, month),
            SIXTY_JIAZI[self.day_index(day_date)],
            hour_gz,
        )

    def eight_char(self, year, month, day, hour, minute, sect):
        self.calls['eight_char'] += 1
        if self.raw_chart is not None:
            return self.raw_chart
        year_gz, month_gz, day_gz, hour_gz = self._pillars(year, month, day, hour, sect)
        return RawChart(
            year=RawPillar(ganzhi=year_gz),
            month=RawPillar(ganzhi=month_gz),
            day=RawPillar(ganzhi=day_gz),
            hour=RawPillar(ganzhi=hour_gz),
            prev_jie_name='',
            days_since_jie=day - 1,
        )

    def pillars(self, year, month, day, hour, minute, sect):
        self.calls['pillars'] += 1
        return self._pillars(year, month, day, hour, sect)

    def yun(self, year, month, day, hour, minute, sect, gender, count):
        self.calls['yun'] += 1
        if self.raw_yun is not None:
            return self.raw_yun
        return RawYun(start_years=3, start_months=2, start_days=1,
                      dayun=tuple(make_raw_dayun(year + 3, count)))

    def year_pillar(self, year, month, day):
        self.calls['year_pillar'] += 1
        return self.year_gz(year)

    def year_month_pillars(self, year, month, day):
        self.calls['year_month_pillars'] += 1
        return self.year_gz(year), self.month_gz(year, month)

    def lunar_to_solar(self, year, month, day, is_leap_month=False):
        self.calls['lunar_to_solar'] += 1
        return year, month, day

    def days_in_month(self, year, month):
        next_month = date(year + (month == 12), month % 12 + 1, 1)
        return (next_month - timedelta(days=1)).day


def make_raw_dayun(first_start_year: int, count: int = 8, liunian_count: int = 10,
                   first_ganzhi_index: int = 1):
    """生成 count 步连续大运，每步 liunian_count 个流年"""
    dayun = []
    for offset in range(count):
        start_year = first_start_year + offset * 10
        dayun.append(RawDaYun(
            index=offset + 1,
            start_age=start_year - first_start_year + 4,
            start_year=start_year,
            end_year=start_year + 9,
            ganzhi=SIXTY_JIAZI[(first_ganzhi_index + offset) % 60],
            liunian=tuple(
                RawLiuNian(year=year, ganzhi=FakeOracle.year_gz(year))
                for year in range(start_year, start_year + liunian_count)
            ),
        ))
    return dayun


@pytest.fixture(scope="function")
def fake_oracle() -> FakeOracle:
    """内存历法（每个测试独立计数）"""
    return FakeOracle()


@pytest.fixture(scope="session")
def fake_oracle_class():
    """FakeOracle 类（需要自定义原始数据时使用）"""
    return FakeOracle


@pytest.fixture(scope="session")
def raw_dayun_factory():
    """大运原始数据生成函数"""
    return make_raw_dayun


@pytest.fixture(scope="session")
def lunar_oracle():
    """基于 lunar_python 的真实历法"""
    from sizhu_core.calculators.LunarConverter import LunarConverter
    return LunarConverter()


# ==================== 应用和客户端 Fixtures ====================

@pytest.fixture(scope="session")
def app():
    """
    创建 FastAPI 应用实例（整个测试会话共享）
    """
    from sizhu_server.main import app
    return app


@pytest.fixture(scope="session")
def client(app):
    """
    创建测试客户端（整个测试会话共享）
    """
    from fastapi.testclient import TestClient
    with TestClient(app) as test_client:
        yield test_client


# ==================== 数据 Fixtures ====================

@pytest.fixture(scope="function")
def sample_bazi_request() -> Dict[str, Any]:
    """
    示例排盘请求：1987-01-07 09:55，四柱 丙寅 辛丑 丙辰 癸巳
    """
    return {
        "date": "1987-01-07",
        "time": "09:55",
        "gender": "male"
    }


@pytest.fixture(scope="function")
def sample_pillars() -> Dict[str, str]:
    """示例四柱（对应 1987-01-07 09 时）"""
    return {
        "year": "丙寅",
        "month": "辛丑",
        "day": "丙辰",
        "hour": "癸巳"
    }


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: 单元测试")
    config.addinivalue_line("markers", "api: 接口测试")
    config.addinivalue_line("markers", "slow: 依赖真实历法、耗时较长的测试")
