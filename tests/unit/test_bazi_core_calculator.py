#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""BaziCoreCalculator 排盘单元测试"""

import logging
from datetime import datetime

import pytest

from sizhu_core.calculators.bazi_core_calculator import BaziCoreCalculator
from sizhu_core.exceptions import OracleError, ValidationError
from sizhu_core.interfaces.calendar_oracle import RawChart, RawPillar
from sizhu_core.models.chart import BirthMoment

CASES = [
    {"moment": (1987, 1, 7, 9, 55), "ganzhi": "丙寅 辛丑 丙辰 癸巳"},
    {"moment": (1984, 3, 8, 9, 15), "day": "辛丑"},
    {"moment": (2008, 9, 8, 16, 3), "day": "辛亥"},
]


def _raw_chart(**overrides) -> RawChart:
    values = dict(
        year=RawPillar(ganzhi='丙寅'),
        month=RawPillar(ganzhi='辛丑'),
        day=RawPillar(ganzhi='丙辰', life_stage='冠带'),
        hour=RawPillar(ganzhi='癸巳'),
        day_kong_wang='子丑',
        prev_jie_name='小寒',
        days_since_jie=1,
        lunar_date_str='农历丙寅年腊月初八, 巳时',
    )
    values.update(overrides)
    return RawChart(**values)


class TestAssembleWithFakeOracle:
    def test_pillars_and_day_master(self, fake_oracle_class):
        calculator = BaziCoreCalculator(fake_oracle_class(raw_chart=_raw_chart()))
        chart = calculator.assemble(BirthMoment(year=1987, month=1, day=7, hour=9, minute=55))

        assert chart.type == 'calculated'
        assert chart.ganzhi == '丙寅 辛丑 丙辰 癸巳'
        assert chart.day.stem_ten_god == '日主'
        assert chart.year.stem_ten_god == '比肩'
        assert chart.month.stem_ten_god == '正财'
        assert chart.hour.stem_ten_god == '正官'

    def test_hidden_stems_from_local_table(self, fake_oracle_class):
        calculator = BaziCoreCalculator(fake_oracle_class(raw_chart=_raw_chart()))
        chart = calculator.assemble(BirthMoment(year=1987, month=1, day=7, hour=9, minute=55))

        hidden = [(h.stem, h.ten_god, h.element) for h in chart.day.hidden_stems]
        assert hidden == [('戊', '食神', '土'), ('乙', '正印', '木'), ('癸', '正官', '水')]

    def test_hidden_stems_missing_ten_gods_filled_in(self, fake_oracle_class):
        raw_hour = RawPillar(ganzhi='癸巳', hidden_stems=('丙', '戊', '庚'), hidden_ten_gods=('比肩',))
        calculator = BaziCoreCalculator(fake_oracle_class(raw_chart=_raw_chart(hour=raw_hour)))
        chart = calculator.assemble(BirthMoment(year=1987, month=1, day=7, hour=9, minute=55))

        hidden = [(h.stem, h.ten_god) for h in chart.hour.hidden_stems]
        assert hidden == [('丙', '比肩'), ('戊', '食神'), ('庚', '偏财')]

    def test_life_stage_self_sitting_and_elements(self, fake_oracle_class):
        calculator = BaziCoreCalculator(fake_oracle_class(raw_chart=_raw_chart()))
        chart = calculator.assemble(BirthMoment(year=1987, month=1, day=7, hour=9, minute=55))

        assert chart.year.life_stage == '长生'
        assert chart.day.life_stage == '冠带'
        assert chart.hour.life_stage == '临官'
        assert chart.month.self_sitting == '养'
        assert chart.day.stem_element == '火'
        assert chart.day.branch_element == '土'
        assert chart.day.nayin == '沙中土'

    def test_stars_and_void(self, fake_oracle_class):
        calculator = BaziCoreCalculator(fake_oracle_class(raw_chart=_raw_chart()))
        chart = calculator.assemble(BirthMoment(year=1987, month=1, day=7, hour=9, minute=55))

        assert chart.day_kong_wang == '子丑'
        assert chart.month.kong_wang is True
        assert chart.month.shen_sha[-1] == '空亡'
        assert chart.year.kong_wang is False
        assert '驿马' in chart.year.shen_sha
        assert chart.hour.shen_sha == ('禄神',)

    def test_commander_and_display_strings(self, fake_oracle_class):
        calculator = BaziCoreCalculator(fake_oracle_class(raw_chart=_raw_chart()))
        chart = calculator.assemble(BirthMoment(year=1987, month=1, day=7, hour=9, minute=55))

        assert chart.commander.label == '癸水用事'
        assert chart.solar_term_str == '出生于小寒后第1日'
        assert chart.solar_date_str == '阳历1987年1月7日 9时55分'
        assert chart.lunar_date_str == '农历丙寅年腊月初八, 巳时'

    def test_life_stage_mismatch_logged_generic_wins(self, fake_oracle_class, caplog):
        raw = _raw_chart(day=RawPillar(ganzhi='丙辰', life_stage='帝旺'))
        calculator = BaziCoreCalculator(fake_oracle_class(raw_chart=raw))
        with caplog.at_level(logging.WARNING):
            chart = calculator.assemble(BirthMoment(year=1987, month=1, day=7, hour=9, minute=55))
        assert chart.day.life_stage == '冠带'
        assert '星运与历法不一致' in caplog.text

    def test_true_solar_time_shifts_oracle_input(self, fake_oracle):
        calculator = BaziCoreCalculator(fake_oracle)
        chart = calculator.assemble(BirthMoment(year=2001, month=3, day=10, hour=0, minute=30), longitude=105.0)
        assert chart.adjusted_datetime == datetime(2001, 3, 9, 23, 30)
        assert chart.solar_date_str == '阳历2001年3月9日 23时30分'

    def test_invalid_moment_rejected_before_oracle(self, fake_oracle):
        calculator = BaziCoreCalculator(fake_oracle)
        with pytest.raises(ValidationError) as exc_info:
            calculator.assemble(BirthMoment(year=2001, month=2, day=30))
        assert exc_info.value.field == 'day'
        assert fake_oracle.calls['eight_char'] == 0

    def test_invalid_sect_rejected(self, fake_oracle):
        with pytest.raises(ValidationError):
            BaziCoreCalculator(fake_oracle).assemble(BirthMoment(year=2001, month=1, day=1), sect=0)

    def test_oracle_error_propagates(self, fake_oracle_class):
        class FailingOracle(fake_oracle_class):
            def eight_char(self, *args, **kwargs):
                raise OracleError()

        with pytest.raises(OracleError) as exc_info:
            BaziCoreCalculator(FailingOracle()).assemble(BirthMoment(year=2001, month=1, day=1))
        assert exc_info.value.message == "unable to compute calendar for this date"


class TestAssembleManual:
    def test_manual_chart(self):
        chart = BaziCoreCalculator().assemble_manual(['丙寅', '辛丑', '丙辰', '癸巳'])

        assert chart.type == 'manual'
        assert chart.commander is None
        assert chart.adjusted_datetime is None
        assert chart.day_kong_wang == '子丑'
        assert chart.month.kong_wang is True
        assert [h.ten_god for h in chart.day.hidden_stems] == ['食神', '正印', '正官']
        assert chart.hour.nayin == '长流水'
        assert chart.day.stem_ten_god == '日主'

    def test_manual_from_dict(self, sample_pillars):
        chart = BaziCoreCalculator().assemble_manual(sample_pillars)
        assert chart.ganzhi == '丙寅 辛丑 丙辰 癸巳'

    def test_manual_rejects_invalid_pillar(self):
        with pytest.raises(ValidationError) as exc_info:
            BaziCoreCalculator().assemble_manual(['丙寅', '辛丑', '丙辰', '癸午'])
        assert exc_info.value.field == 'hour'


class TestCalculateFull:
    def test_with_fake_oracle(self, fake_oracle):
        result = BaziCoreCalculator(fake_oracle).calculate_full(
            BirthMoment(year=2001, month=3, day=10, hour=9), 'female'
        )
        assert result.gender == 'female'
        assert len(result.dayun) == 8
        assert result.dayun[0].start_year == 2004
        assert [p.year for p in result.yun_qian] == [2001, 2002, 2003]
        assert result.start_luck_text == '约3年2个月1日后上运'

    def test_invalid_gender(self, fake_oracle):
        with pytest.raises(ValidationError) as exc_info:
            BaziCoreCalculator(fake_oracle).calculate_full(BirthMoment(year=2001, month=3, day=10), 'x')
        assert exc_info.value.field == 'gender'


@pytest.mark.slow
class TestWithLunarPython:
    @pytest.mark.parametrize("case", CASES, ids=[str(c["moment"]) for c in CASES])
    def test_known_charts(self, lunar_oracle, case):
        year, month, day, hour, minute = case["moment"]
        chart = BaziCoreCalculator(lunar_oracle).assemble(
            BirthMoment(year=year, month=month, day=day, hour=hour, minute=minute)
        )
        if "ganzhi" in case:
            assert chart.ganzhi == case["ganzhi"]
        if "day" in case:
            assert chart.day.ganzhi == case["day"]

    def test_details(self, lunar_oracle):
        chart = BaziCoreCalculator(lunar_oracle).assemble(
            BirthMoment(year=1987, month=1, day=7, hour=9, minute=55)
        )
        assert chart.day_kong_wang == '子丑'
        assert chart.solar_term_name == '小寒'
        assert chart.commander.stem == '癸'
        assert chart.solar_term_str.startswith('出生于小寒后第')
        assert chart.lunar_date_str.startswith('农历丙寅年')
        assert [h.stem for h in chart.day.hidden_stems] == ['戊', '乙', '癸']

    def test_sect_changes_only_day_and_hour(self, lunar_oracle):
        calculator = BaziCoreCalculator(lunar_oracle)
        moment = BirthMoment(year=2000, month=6, day=15, hour=23, minute=30)
        merged = calculator.assemble(moment, sect=1)
        split = calculator.assemble(moment, sect=2)
        assert merged.year.ganzhi == split.year.ganzhi
        assert merged.month.ganzhi == split.month.ganzhi
        assert merged.day.ganzhi != split.day.ganzhi
        assert merged.hour.branch == split.hour.branch == '子'

    def test_full_result_invariants(self, lunar_oracle):
        result = BaziCoreCalculator(lunar_oracle).calculate_full(
            BirthMoment(year=1987, month=1, day=7, hour=9, minute=55), 'male'
        )
        assert len(result.dayun) == 8
        assert all(len(cycle.liunian) == 10 for cycle in result.dayun)
        start_years = [cycle.start_year for cycle in result.dayun]
        assert start_years == sorted(set(start_years))
        assert len(result.yun_qian) == max(result.dayun[0].start_year - 1987, 0)
        assert result.start_luck_text.endswith('后上运')
