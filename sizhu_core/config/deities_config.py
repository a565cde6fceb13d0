#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
神煞计算

两类规则：
- 三合局查法：以年支、日支所在三合局查目标地支（驿马、咸池）
- 日干查法：以日干查目标地支（天乙、文昌、禄神、羊刃）

各规则互相独立，结果只取决于 (目标地支, 年支, 日支, 日干)。
"""

from typing import Dict, FrozenSet, List, Tuple

# 三合局
SANHE_GROUPS: Tuple[FrozenSet[str], ...] = (
    frozenset('申子辰'),
    frozenset('寅午戌'),
    frozenset('亥卯未'),
    frozenset('巳酉丑'),
)

# 三合局 -> 目标地支
YIMA_TARGETS: Dict[FrozenSet[str], str] = {
    SANHE_GROUPS[0]: '寅',
    SANHE_GROUPS[1]: '申',
    SANHE_GROUPS[2]: '巳',
    SANHE_GROUPS[3]: '亥',
}

TAOHUA_TARGETS: Dict[FrozenSet[str], str] = {
    SANHE_GROUPS[0]: '酉',
    SANHE_GROUPS[1]: '卯',
    SANHE_GROUPS[2]: '子',
    SANHE_GROUPS[3]: '午',
}

# 日干 -> 目标地支
TIANYI_MAP: Dict[str, Tuple[str, ...]] = {
    '甲': ('丑', '未'), '戊': ('丑', '未'), '庚': ('丑', '未'),
    '乙': ('子', '申'), '己': ('子', '申'),
    '丙': ('亥', '酉'), '丁': ('亥', '酉'),
    '壬': ('巳', '卯'), '癸': ('巳', '卯'),
    '辛': ('午', '寅'),
}

WENCHANG_MAP: Dict[str, Tuple[str, ...]] = {
    '甲': ('巳',), '乙': ('午',), '丙': ('申',), '戊': ('申',), '丁': ('酉',),
    '己': ('酉',), '庚': ('亥',), '辛': ('子',), '壬': ('寅',), '癸': ('卯',),
}

LU_MAP: Dict[str, Tuple[str, ...]] = {
    '甲': ('寅',), '乙': ('卯',), '丙': ('巳',), '戊': ('巳',), '丁': ('午',),
    '己': ('午',), '庚': ('申',), '辛': ('酉',), '壬': ('亥',), '癸': ('子',),
}

YANGREN_MAP: Dict[str, Tuple[str, ...]] = {
    '甲': ('卯',), '乙': ('辰',), '丙': ('午',), '戊': ('午',), '丁': ('未',),
    '己': ('未',), '庚': ('酉',), '辛': ('戌',), '壬': ('子',), '癸': ('丑',),
}

# 规则顺序即输出顺序
GROUP_RULES: Tuple[Tuple[str, Dict[FrozenSet[str], str]], ...] = (
    ('驿马', YIMA_TARGETS),
    ('咸池', TAOHUA_TARGETS),
)

STEM_RULES: Tuple[Tuple[str, Dict[str, Tuple[str, ...]]], ...] = (
    ('天乙', TIANYI_MAP),
    ('文昌', WENCHANG_MAP),
    ('禄神', LU_MAP),
    ('羊刃', YANGREN_MAP),
)

KONGWANG_DEITY = '空亡'


class DeitiesCalculator:
    """神煞计算器"""

    @staticmethod
    def _group_target(reference_branch: str, targets: Dict[FrozenSet[str], str]) -> str:
        for group, target in targets.items():
            if reference_branch in group:
                return target
        return ''

    def calculate_deities(self, target_branch: str, year_branch: str, day_branch: str, day_stem: str) -> List[str]:
        """
        计算一个地支上的神煞

        Args:
            target_branch: 被查的地支
            year_branch: 年支
            day_branch: 日支
            day_stem: 日干

        Returns:
            List[str]: 神煞名称（按规则顺序，无重复），可能为空
        """
        deities: List[str] = []
        if not target_branch:
            return deities

        for name, targets in GROUP_RULES:
            references = (year_branch, day_branch)
            if any(self._group_target(ref, targets) == target_branch for ref in references):
                deities.append(name)

        for name, stem_map in STEM_RULES:
            if target_branch in stem_map.get(day_stem, ()):
                deities.append(name)

        return deities


__all__ = ['DeitiesCalculator', 'KONGWANG_DEITY', 'SANHE_GROUPS']
