#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
天干地支基础数据

- 十天干、十二地支及其五行、阴阳
- 地支藏干（本气在前）
- 六十甲子（只有阴阳相同的干支才能组合）
"""

from typing import Dict, List, Tuple

HEAVENLY_STEMS: List[str] = ['甲', '乙', '丙', '丁', '戊', '己', '庚', '辛', '壬', '癸']

EARTHLY_BRANCHES: List[str] = ['子', '丑', '寅', '卯', '辰', '巳', '午', '未', '申', '酉', '戌', '亥']

STEM_ELEMENTS: Dict[str, str] = {
    '甲': '木', '乙': '木',
    '丙': '火', '丁': '火',
    '戊': '土', '己': '土',
    '庚': '金', '辛': '金',
    '壬': '水', '癸': '水',
}

BRANCH_ELEMENTS: Dict[str, str] = {
    '寅': '木', '卯': '木',
    '巳': '火', '午': '火',
    '辰': '土', '戌': '土', '丑': '土', '未': '土',
    '申': '金', '酉': '金',
    '亥': '水', '子': '水',
}

# 序号为偶数（从0起）为阳
STEM_YINYANG: Dict[str, str] = {
    stem: ('阳' if index % 2 == 0 else '阴') for index, stem in enumerate(HEAVENLY_STEMS)
}

BRANCH_YINYANG: Dict[str, str] = {
    branch: ('阳' if index % 2 == 0 else '阴') for index, branch in enumerate(EARTHLY_BRANCHES)
}

# 地支藏干：本气、中气、余气
HIDDEN_STEMS: Dict[str, List[str]] = {
    '子': ['癸'],
    '丑': ['己', '癸', '辛'],
    '寅': ['甲', '丙', '戊'],
    '卯': ['乙'],
    '辰': ['戊', '乙', '癸'],
    '巳': ['丙', '庚', '戊'],
    '午': ['丁', '己'],
    '未': ['己', '丁', '乙'],
    '申': ['庚', '壬', '戊'],
    '酉': ['辛'],
    '戌': ['戊', '辛', '丁'],
    '亥': ['壬', '甲'],
}

# 六十甲子，按周期顺序
SIXTY_JIAZI: List[str] = [
    f"{HEAVENLY_STEMS[i % 10]}{EARTHLY_BRANCHES[i % 12]}" for i in range(60)
]


def is_valid_pillar(stem: str, branch: str) -> bool:
    """干支是否能组成一柱（天干、地支阴阳相同）"""
    if stem not in STEM_YINYANG or branch not in BRANCH_YINYANG:
        return False
    return STEM_YINYANG[stem] == BRANCH_YINYANG[branch]


def split_ganzhi(ganzhi: str) -> Tuple[str, str]:
    """'甲子' -> ('甲', '子')，格式不对时返回空串"""
    if not ganzhi or len(ganzhi) != 2:
        return '', ''
    return ganzhi[0], ganzhi[1]


def jiazi_index(stem: str, branch: str) -> int:
    """干支在六十甲子中的序号，无效组合返回 -1"""
    ganzhi = f"{stem}{branch}"
    if ganzhi not in SIXTY_JIAZI:
        return -1
    return SIXTY_JIAZI.index(ganzhi)


__all__ = [
    'HEAVENLY_STEMS',
    'EARTHLY_BRANCHES',
    'STEM_ELEMENTS',
    'BRANCH_ELEMENTS',
    'STEM_YINYANG',
    'BRANCH_YINYANG',
    'HIDDEN_STEMS',
    'SIXTY_JIAZI',
    'is_valid_pillar',
    'split_ganzhi',
    'jiazi_index',
]
