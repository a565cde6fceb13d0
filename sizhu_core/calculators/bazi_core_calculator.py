#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
四柱排盘核心计算器

流程：
1. 校验公历时刻（在调用历法之前）
2. 真太阳时校正
3. 历法换算得到四柱原始数据
4. 每柱补充藏干十神、星运、自坐、神煞、空亡
5. 按月支与交节天数取人元司令

另支持不经过历法、直接由四柱干支组成的手工盘。
"""

import logging
from typing import Optional, Tuple

from sizhu_core.bazi_logging import safe_log
from sizhu_core.calculators.bazi_core import get_branch_ten_gods, get_ten_god
from sizhu_core.calculators.LunarConverter import LunarConverter
from sizhu_core.calculators.fortune_calculator import FortuneCalculator
from sizhu_core.calculators.true_solar_time import calculate_true_solar_time
from sizhu_core.config.commander_config import CommanderResolver
from sizhu_core.config.deities_config import DeitiesCalculator, KONGWANG_DEITY
from sizhu_core.config.star_fortune_config import StarFortuneCalculator
from sizhu_core.data.constants import (
    DAY_MASTER_LABEL,
    DAYUN_COUNT,
    DEFAULT_SECT,
    JIEQI_TO_MONTH_BRANCH,
    NAYIN_MAP,
    REFERENCE_LONGITUDE,
)
from sizhu_core.data.stems_branches import BRANCH_ELEMENTS, HIDDEN_STEMS, STEM_ELEMENTS, split_ganzhi
from sizhu_core.interfaces.calendar_oracle import ICalendarOracle, RawPillar
from sizhu_core.models.chart import BaziChart, BaziResult, BirthMoment, HiddenStem, Pillar
from sizhu_core.validators import validate_gender, validate_moment, validate_pattern, validate_sect

logger = logging.getLogger(__name__)

PILLAR_POSITIONS: Tuple[str, str, str, str] = ('year', 'month', 'day', 'hour')


class BaziCoreCalculator:
    """八字排盘计算器"""

    def __init__(self, oracle: Optional[ICalendarOracle] = None,
                 reference_longitude: float = REFERENCE_LONGITUDE):
        self.oracle = oracle or LunarConverter()
        self.reference_longitude = reference_longitude
        self.star_fortune = StarFortuneCalculator()
        self.deities = DeitiesCalculator()
        self.commander_resolver = CommanderResolver()

    # ------------------------------------------------------------------
    # 排盘
    # ------------------------------------------------------------------

    def assemble(self, moment: BirthMoment, longitude: Optional[float] = None,
                 sect: int = DEFAULT_SECT) -> BaziChart:
        """
        排四柱命盘

        Args:
            moment: 公历出生时刻（钟表时间）
            longitude: 出生地经度，None 表示不做真太阳时校正
            sect: 早晚子时流派，1=23点算次日，2=23点算当日

        Returns:
            BaziChart: 命盘（type=calculated）
        """
        validate_moment(moment)
        validate_sect(sect)

        adjusted = calculate_true_solar_time(moment.to_datetime(), longitude, self.reference_longitude)
        if adjusted != moment.to_datetime():
            logger.debug(f"真太阳时校正: {moment.to_datetime()} -> {adjusted} (经度 {longitude})")

        raw = self.oracle.eight_char(adjusted.year, adjusted.month, adjusted.day,
                                     adjusted.hour, adjusted.minute, sect)

        day_stem, day_branch = split_ganzhi(raw.day.ganzhi)
        _, year_branch = split_ganzhi(raw.year.ganzhi)
        _, month_branch = split_ganzhi(raw.month.ganzhi)
        kong_wang = raw.day_kong_wang or self.star_fortune.get_kongwang(raw.day.ganzhi)

        pillars = {}
        for position in PILLAR_POSITIONS:
            raw_pillar: RawPillar = getattr(raw, position)
            stem, branch = split_ganzhi(raw_pillar.ganzhi)
            pillars[position] = self._build_pillar(
                stem, branch, position, day_stem, year_branch, day_branch, kong_wang, raw_pillar
            )

        expected_branch = JIEQI_TO_MONTH_BRANCH.get(raw.prev_jie_name)
        if expected_branch and expected_branch != month_branch:
            logger.warning(f"节气与月令不一致: {raw.prev_jie_name} -> {expected_branch}, 月柱 {raw.month.ganzhi}")

        commander = self.commander_resolver.resolve(month_branch, raw.days_since_jie)

        return BaziChart(
            type='calculated',
            year=pillars['year'],
            month=pillars['month'],
            day=pillars['day'],
            hour=pillars['hour'],
            day_kong_wang=kong_wang,
            commander=commander,
            solar_term_name=raw.prev_jie_name,
            days_since_solar_term=raw.days_since_jie,
            solar_date_str=f"阳历{adjusted.year}年{adjusted.month}月{adjusted.day}日 {adjusted.hour}时{adjusted.minute}分",
            lunar_date_str=raw.lunar_date_str,
            solar_term_str=f"出生于{raw.prev_jie_name}后第{raw.days_since_jie}日" if raw.prev_jie_name else '',
            adjusted_datetime=adjusted,
            sect=sect,
        )

    def assemble_manual(self, pattern) -> BaziChart:
        """
        由四柱干支直接组成命盘（不调用历法）

        Args:
            pattern: 四个干支，如 ['甲子', '丙寅', '戊辰', '壬子']，或含 year/month/day/hour 的字典

        Returns:
            BaziChart: 命盘（type=manual），没有日期、人元司令
        """
        ganzhi_list = validate_pattern(pattern)
        day_stem, day_branch = split_ganzhi(ganzhi_list[2])
        _, year_branch = split_ganzhi(ganzhi_list[0])
        kong_wang = self.star_fortune.get_kongwang(ganzhi_list[2])

        pillars = {}
        for position, ganzhi in zip(PILLAR_POSITIONS, ganzhi_list):
            stem, branch = split_ganzhi(ganzhi)
            pillars[position] = self._build_pillar(
                stem, branch, position, day_stem, year_branch, day_branch, kong_wang
            )

        return BaziChart(
            type='manual',
            year=pillars['year'],
            month=pillars['month'],
            day=pillars['day'],
            hour=pillars['hour'],
            day_kong_wang=kong_wang,
        )

    def calculate_full(self, moment: BirthMoment, gender: str, longitude: Optional[float] = None,
                       sect: int = DEFAULT_SECT) -> BaziResult:
        """
        排盘并计算大运、流年

        Args:
            moment: 公历出生时刻
            gender: male / female
            longitude: 出生地经度
            sect: 早晚子时流派

        Returns:
            BaziResult
        """
        validate_gender(gender)
        chart = self.assemble(moment, longitude, sect)
        adjusted = chart.adjusted_datetime

        raw_yun = self.oracle.yun(adjusted.year, adjusted.month, adjusted.day,
                                  adjusted.hour, adjusted.minute, sect, gender, DAYUN_COUNT)

        builder = FortuneCalculator(self.oracle)
        dayun, yun_qian = builder.build_cycles(chart.day.stem, raw_yun.dayun, adjusted.year)

        safe_log('info', f"排盘完成: {chart.ganzhi} ({gender}), 起运 {dayun[0].start_year}")

        return BaziResult(
            chart=chart,
            gender=gender,
            dayun=dayun,
            yun_qian=yun_qian,
            start_luck_text=FortuneCalculator.start_luck_text(
                raw_yun.start_years, raw_yun.start_months, raw_yun.start_days
            ),
        )

    # ------------------------------------------------------------------
    # 单柱
    # ------------------------------------------------------------------

    def _build_pillar(self, stem: str, branch: str, position: str, day_stem: str,
                      year_branch: str, day_branch: str, kong_wang: str,
                      raw: Optional[RawPillar] = None) -> Pillar:
        """补充一柱的藏干、十神、纳音、星运、神煞、空亡"""
        if position == 'day':
            stem_ten_god = DAY_MASTER_LABEL
        else:
            stem_ten_god = get_ten_god(day_stem, stem)

        hidden_stems = self._hidden_stems(day_stem, branch, raw)

        life_stage = self.star_fortune.get_stem_fortune(day_stem, branch)
        if raw is not None and raw.life_stage and raw.life_stage != life_stage:
            logger.warning(
                f"星运与历法不一致: {position} {stem}{branch} 本地={life_stage} 历法={raw.life_stage}"
            )

        nayin = NAYIN_MAP.get((stem, branch), '')
        if raw is not None and raw.nayin:
            nayin = raw.nayin

        is_kong_wang = bool(branch) and branch in kong_wang
        shen_sha = self.deities.calculate_deities(branch, year_branch, day_branch, day_stem)
        if is_kong_wang:
            shen_sha.append(KONGWANG_DEITY)

        return Pillar(
            stem=stem,
            branch=branch,
            stem_ten_god=stem_ten_god,
            stem_element=STEM_ELEMENTS.get(stem, ''),
            branch_element=BRANCH_ELEMENTS.get(branch, ''),
            hidden_stems=hidden_stems,
            nayin=nayin,
            life_stage=life_stage,
            self_sitting=self.star_fortune.get_stem_fortune(stem, branch),
            shen_sha=tuple(shen_sha),
            kong_wang=is_kong_wang,
        )

    @staticmethod
    def _hidden_stems(day_stem: str, branch: str, raw: Optional[RawPillar]) -> Tuple[HiddenStem, ...]:
        """藏干及其十神：历法给了就用历法的，否则查本地藏干表"""
        if raw is not None and raw.hidden_stems:
            stems = list(raw.hidden_stems)
            ten_gods = list(raw.hidden_ten_gods)
        else:
            stems = HIDDEN_STEMS.get(branch, [])
            ten_gods = get_branch_ten_gods(day_stem, branch)

        # 历法缺的十神逐个补算
        ten_gods += [get_ten_god(day_stem, hidden) for hidden in stems[len(ten_gods):]]
        return tuple(
            HiddenStem(stem=hidden, ten_god=ten_god, element=STEM_ELEMENTS.get(hidden, ''))
            for hidden, ten_god in zip(stems, ten_gods)
        )


__all__ = ['BaziCoreCalculator', 'PILLAR_POSITIONS']
