#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
大运流年计算器

起运岁数、起运年份由历法给出（按出生到前后节的距离推算），
这里只负责：
- 大运的十神、星运、纳音、五行
- 每步大运展开 10 个流年
- 起运前的流年（出生年 ~ 第一步大运起运年之前）
"""

import logging
from typing import Sequence, Tuple

from sizhu_core.calculators.bazi_core import get_ten_god
from sizhu_core.config.star_fortune_config import StarFortuneCalculator
from sizhu_core.data.constants import DAYUN_COUNT, LIUNIAN_PER_DAYUN, NAYIN_MAP
from sizhu_core.data.stems_branches import BRANCH_ELEMENTS, STEM_ELEMENTS, split_ganzhi
from sizhu_core.exceptions import ContractViolation
from sizhu_core.interfaces.calendar_oracle import ICalendarOracle, RawDaYun
from sizhu_core.models.chart import AnnualPillar, FortuneCycle

logger = logging.getLogger(__name__)


class FortuneCalculator:
    """大运流年计算器"""

    def __init__(self, oracle: ICalendarOracle):
        self.oracle = oracle
        self.star_fortune = StarFortuneCalculator()

    def build_cycles(self, day_stem: str, raw_dayun: Sequence[RawDaYun],
                     birth_year: int) -> Tuple[Tuple[FortuneCycle, ...], Tuple[AnnualPillar, ...]]:
        """
        组装大运与起运前流年

        Args:
            day_stem: 日干
            raw_dayun: 历法返回的大运（已按性别、年干阴阳确定顺逆）
            birth_year: 出生年份（真太阳时校正后的公历年）

        Returns:
            (8 步大运, 起运前流年)

        Raises:
            ContractViolation: 大运不是 8 步、流年不是 10 年或起运年份不递增
        """
        self._check_contract(raw_dayun)

        cycles = tuple(self._build_cycle(day_stem, item) for item in raw_dayun)
        yun_qian = self.pre_cycle_years(birth_year, cycles[0].start_year)
        logger.debug(f"大运 {[cycle.ganzhi for cycle in cycles]}, 起运前流年 {len(yun_qian)} 年")
        return cycles, yun_qian

    def pre_cycle_years(self, birth_year: int, first_start_year: int) -> Tuple[AnnualPillar, ...]:
        """出生年到第一步大运起运年之前的流年（取年中日期，避开立春）"""
        return tuple(
            AnnualPillar(year=year, ganzhi=self.oracle.annual_ganzhi(year))
            for year in range(birth_year, first_start_year)
        )

    def _build_cycle(self, day_stem: str, raw: RawDaYun) -> FortuneCycle:
        stem, branch = split_ganzhi(raw.ganzhi)
        liunian = tuple(
            AnnualPillar(year=item.year, ganzhi=item.ganzhi)
            for item in raw.liunian[:LIUNIAN_PER_DAYUN]
        )
        return FortuneCycle(
            index=raw.index,
            start_age=raw.start_age,
            start_year=raw.start_year,
            stem=stem,
            branch=branch,
            stem_element=STEM_ELEMENTS.get(stem, ''),
            branch_element=BRANCH_ELEMENTS.get(branch, ''),
            ten_god=get_ten_god(day_stem, stem),
            life_stage=self.star_fortune.get_stem_fortune(day_stem, branch),
            nayin=NAYIN_MAP.get((stem, branch), ''),
            liunian=liunian,
        )

    @staticmethod
    def _check_contract(raw_dayun: Sequence[RawDaYun]) -> None:
        if len(raw_dayun) != DAYUN_COUNT:
            raise ContractViolation(f"大运数量应为 {DAYUN_COUNT}，实际 {len(raw_dayun)}")

        previous_start = None
        for item in raw_dayun:
            if len(item.liunian) != LIUNIAN_PER_DAYUN:
                raise ContractViolation(
                    f"第 {item.index} 步大运 {item.ganzhi} 流年数量应为 {LIUNIAN_PER_DAYUN}，实际 {len(item.liunian)}"
                )
            if previous_start is not None and item.start_year <= previous_start:
                raise ContractViolation(f"大运起运年份不递增: {previous_start} -> {item.start_year}")
            previous_start = item.start_year

    @staticmethod
    def start_luck_text(years: int, months: int, days: int) -> str:
        """起运描述，如 约3年4个月5日后上运"""
        return f"约{years}年{months}个月{days}日后上运"


__all__ = ['FortuneCalculator']
