#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
十二长生（星运/自坐）与空亡

十二长生：每个天干有固定的长生地支，阳干顺行、阴干逆行，
按地支距长生位的步数取 长生、沐浴、冠带、临官、帝旺、衰、病、死、墓、绝、胎、养。

空亡：日柱所在旬（十个干支）中没有轮到的两个地支。
"""

import logging
from typing import Dict, Tuple

from sizhu_core.data.constants import LIFE_STAGE_NAMES
from sizhu_core.data.stems_branches import EARTHLY_BRANCHES, jiazi_index

logger = logging.getLogger(__name__)

# 天干 -> (长生地支, 是否顺行)
CHANG_SHENG_START: Dict[str, Tuple[str, bool]] = {
    '甲': ('亥', True),
    '乙': ('午', False),
    '丙': ('寅', True),
    '丁': ('酉', False),
    '戊': ('寅', True),
    '己': ('酉', False),
    '庚': ('巳', True),
    '辛': ('子', False),
    '壬': ('申', True),
    '癸': ('卯', False),
}


class StarFortuneCalculator:
    """十二长生、空亡计算器"""

    def get_stem_fortune(self, stem: str, branch: str) -> str:
        """
        天干在地支的十二长生状态

        Args:
            stem: 天干（星运传日干，自坐传本柱天干）
            branch: 地支

        Returns:
            str: 十二长生名称；天干或地支不在表内时记录警告并返回空串
        """
        start = CHANG_SHENG_START.get(stem)
        if start is None or branch not in EARTHLY_BRANCHES:
            logger.warning(f"十二长生查询越界: stem={stem!r}, branch={branch!r}")
            return ''

        start_branch, forward = start
        start_index = EARTHLY_BRANCHES.index(start_branch)
        target_index = EARTHLY_BRANCHES.index(branch)

        if forward:
            offset = target_index - start_index
        else:
            offset = start_index - target_index

        return LIFE_STAGE_NAMES[offset % 12]

    def get_kongwang(self, pillar_ganzhi: str) -> str:
        """
        计算一柱所在旬的空亡地支

        Args:
            pillar_ganzhi: 干支，如 '甲子'

        Returns:
            str: 两个空亡地支，如 '戌亥'；无效干支记录警告并返回空串
        """
        if len(pillar_ganzhi) != 2:
            logger.warning(f"空亡查询越界: {pillar_ganzhi!r}")
            return ''

        index = jiazi_index(pillar_ganzhi[0], pillar_ganzhi[1])
        if index < 0:
            logger.warning(f"空亡查询越界: {pillar_ganzhi!r}")
            return ''

        # 旬首（甲X）的地支序号，旬内用掉 10 个地支，剩下两个为空亡
        xun_start_branch = (index - index % 10) % 12
        return (
            EARTHLY_BRANCHES[(xun_start_branch + 10) % 12]
            + EARTHLY_BRANCHES[(xun_start_branch + 11) % 12]
        )


def get_life_stage(stem: str, branch: str) -> str:
    """十二长生快捷函数"""
    return StarFortuneCalculator().get_stem_fortune(stem, branch)


__all__ = ['StarFortuneCalculator', 'CHANG_SHENG_START', 'get_life_stage']
