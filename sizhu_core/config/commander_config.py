#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
人元司令分野

每个月令按交节后的天数分三段，由不同的天干当令。表中天数照录，
申月只有 27 天（己七、壬三、庚十七），不要补成 30。
"""

import logging
from typing import Dict, List, Tuple

from sizhu_core.data.stems_branches import STEM_ELEMENTS
from sizhu_core.models.chart import Commander

logger = logging.getLogger(__name__)

# 月支 -> [(天干, 当令天数), ...]
COMMANDER_RULES: Dict[str, List[Tuple[str, int]]] = {
    '寅': [('戊', 7), ('丙', 7), ('甲', 16)],
    '卯': [('甲', 10), ('癸', 3), ('乙', 17)],
    '辰': [('乙', 9), ('癸', 3), ('戊', 18)],
    '巳': [('戊', 5), ('庚', 9), ('丙', 16)],
    '午': [('丙', 10), ('己', 9), ('丁', 11)],
    '未': [('丁', 9), ('乙', 3), ('己', 18)],
    '申': [('己', 7), ('壬', 3), ('庚', 17)],
    '酉': [('庚', 10), ('丁', 3), ('辛', 17)],
    '戌': [('辛', 9), ('丁', 3), ('戊', 18)],
    '亥': [('戊', 7), ('甲', 5), ('壬', 18)],
    '子': [('壬', 10), ('辛', 3), ('癸', 17)],
    '丑': [('癸', 9), ('辛', 3), ('己', 18)],
}


def commander_span(month_branch: str) -> int:
    """月令的当令总天数"""
    return sum(days for _, days in COMMANDER_RULES.get(month_branch, []))


class CommanderResolver:
    """人元司令计算器"""

    def resolve(self, month_branch: str, days_elapsed: int) -> Commander:
        """
        根据月支与交节后天数取当令天干

        Args:
            month_branch: 月支
            days_elapsed: 交节后已过天数（交节当天为 0）

        Returns:
            Commander: 当令天干与五行；月支不在表内时返回空的 Commander
        """
        rules = COMMANDER_RULES.get(month_branch)
        if not rules:
            logger.warning(f"人元司令查询越界: month_branch={month_branch!r}")
            return Commander()

        day_number = max(days_elapsed, 0) + 1
        stem = rules[-1][0]
        running_total = 0
        for rule_stem, days in rules:
            running_total += days
            if running_total >= day_number:
                stem = rule_stem
                break
        else:
            logger.debug(f"交节天数超出司令表范围: {month_branch} {days_elapsed}，取本气 {stem}")

        element = STEM_ELEMENTS[stem]
        return Commander(stem=stem, element=element, label=f"{stem}{element}用事")


__all__ = ['CommanderResolver', 'COMMANDER_RULES', 'commander_span']
