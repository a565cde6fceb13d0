#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
五行生克关系模块

五行按相生顺序排列（木→火→土→金→水→木），
目标五行在序列中相对日主的偏移量即决定生克关系：
0 同我，1 我生，2 我克，3 克我，4 生我。
"""

from typing import List, Literal

RelationType = Literal['same', 'me_producing', 'me_controlling', 'producing_me', 'controlling_me', 'unknown']

ELEMENT_CYCLE: List[str] = ['木', '火', '土', '金', '水']

_RELATION_BY_OFFSET: List[RelationType] = [
    'same', 'me_producing', 'me_controlling', 'controlling_me', 'producing_me'
]


def get_element_relation(day_element: str, target_element: str) -> RelationType:
    """
    判断目标五行相对日主五行的生克关系

    任一五行不在木火土金水之内时返回 'unknown'。
    """
    if day_element not in ELEMENT_CYCLE or target_element not in ELEMENT_CYCLE:
        return 'unknown'
    offset = (ELEMENT_CYCLE.index(target_element) - ELEMENT_CYCLE.index(day_element)) % 5
    return _RELATION_BY_OFFSET[offset]
