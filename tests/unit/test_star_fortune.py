#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""十二长生与空亡单元测试"""

import logging

import pytest

from sizhu_core.config.star_fortune_config import StarFortuneCalculator, get_life_stage
from sizhu_core.data.constants import LIFE_STAGE_NAMES
from sizhu_core.data.stems_branches import EARTHLY_BRANCHES, HEAVENLY_STEMS


@pytest.fixture
def calculator():
    return StarFortuneCalculator()


class TestLifeStage:
    def test_closed_over_all_stem_branch_pairs(self, calculator):
        """10 天干 × 12 地支都返回 12 个名称之一"""
        for stem in HEAVENLY_STEMS:
            stages = [calculator.get_stem_fortune(stem, branch) for branch in EARTHLY_BRANCHES]
            assert all(stage in LIFE_STAGE_NAMES for stage in stages)
            # 每个天干在 12 个地支上恰好走完一轮
            assert sorted(stages) == sorted(LIFE_STAGE_NAMES)

    def test_yang_wood_emerges_at_hai(self):
        assert get_life_stage('甲', '亥') == '长生'
        assert get_life_stage('甲', '子') == '沐浴'
        assert get_life_stage('甲', '卯') == '帝旺'

    def test_yin_wood_emerges_at_wu_backward(self):
        assert get_life_stage('乙', '午') == '长生'
        assert get_life_stage('乙', '巳') == '沐浴'
        assert get_life_stage('乙', '寅') == '帝旺'

    @pytest.mark.parametrize("stem,branch,expected", [
        ('丙', '寅', '长生'),
        ('丙', '辰', '冠带'),
        ('丙', '巳', '临官'),
        ('戊', '寅', '长生'),
        ('庚', '巳', '长生'),
        ('辛', '子', '长生'),
        ('壬', '申', '长生'),
        ('癸', '卯', '长生'),
        ('丁', '酉', '长生'),
        ('己', '酉', '长生'),
    ])
    def test_starting_branches(self, stem, branch, expected):
        assert get_life_stage(stem, branch) == expected

    def test_lookup_miss_returns_empty_and_logs(self, calculator, caplog):
        with caplog.at_level(logging.WARNING):
            assert calculator.get_stem_fortune('X', '子') == ''
            assert calculator.get_stem_fortune('甲', '') == ''
        assert '十二长生查询越界' in caplog.text


class TestKongWang:
    @pytest.mark.parametrize("ganzhi,expected", [
        ('甲子', '戌亥'),
        ('癸酉', '戌亥'),
        ('甲戌', '申酉'),
        ('丙辰', '子丑'),
        ('癸亥', '子丑'),
    ])
    def test_xun_kong(self, calculator, ganzhi, expected):
        assert calculator.get_kongwang(ganzhi) == expected

    def test_invalid_pillar(self, calculator):
        assert calculator.get_kongwang('甲丑') == ''
        assert calculator.get_kongwang('甲') == ''
