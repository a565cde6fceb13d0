#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
十神计算模块

同我为比劫，我生为食伤，我克为财，克我为官杀，生我为印；
阴阳相同取偏（比肩、食神、偏财、七杀、偏印），阴阳不同取正。
"""

from typing import List

from sizhu_core.data.stems_branches import STEM_ELEMENTS, STEM_YINYANG, HIDDEN_STEMS
from sizhu_core.data.constants import TEN_GOD_NAMES

from .element_relations import get_element_relation

# (关系, 阴阳相同) -> 十神
_TEN_GOD_BY_RELATION = {
    ('same', True): TEN_GOD_NAMES['bijian'],
    ('same', False): TEN_GOD_NAMES['jiecai'],
    ('me_producing', True): TEN_GOD_NAMES['shishen'],
    ('me_producing', False): TEN_GOD_NAMES['shangguan'],
    ('me_controlling', True): TEN_GOD_NAMES['piancai'],
    ('me_controlling', False): TEN_GOD_NAMES['zhengcai'],
    ('controlling_me', True): TEN_GOD_NAMES['qisha'],
    ('controlling_me', False): TEN_GOD_NAMES['zhengguan'],
    ('producing_me', True): TEN_GOD_NAMES['pianyin'],
    ('producing_me', False): TEN_GOD_NAMES['zhengyin'],
}


def get_ten_god(day_stem: str, target_stem: str) -> str:
    """
    计算目标天干相对日干的十神

    Args:
        day_stem: 日干
        target_stem: 目标天干

    Returns:
        str: 十神名称，输入不在十天干内时返回空串
    """
    day_element = STEM_ELEMENTS.get(day_stem, '')
    target_element = STEM_ELEMENTS.get(target_stem, '')
    if not day_element or not target_element:
        return ''

    relation_type = get_element_relation(day_element, target_element)
    is_same_yinyang = STEM_YINYANG[day_stem] == STEM_YINYANG[target_stem]
    return _TEN_GOD_BY_RELATION.get((relation_type, is_same_yinyang), '')


def get_branch_ten_gods(day_stem: str, branch: str) -> List[str]:
    """计算地支藏干的十神（副星），顺序与藏干一致"""
    return [get_ten_god(day_stem, hidden_stem) for hidden_stem in HIDDEN_STEMS.get(branch, [])]
