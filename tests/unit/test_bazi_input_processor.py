#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""BaziInputProcessor 与真太阳时单元测试"""

from datetime import datetime

import pytest

from sizhu_core.calculators.true_solar_time import calculate_true_solar_time, resolve_longitude
from sizhu_core.data.constants import CITY_LONGITUDES, NO_LOCATION_CITY
from sizhu_core.exceptions import ValidationError
from sizhu_core.models.chart import BirthMoment
from sizhu_server.utils.bazi_input_processor import BaziInputProcessor


class TestTrueSolarTime:
    def test_west_of_reference(self):
        result = calculate_true_solar_time(datetime(1987, 1, 7, 9, 55), 105.0)
        assert result == datetime(1987, 1, 7, 8, 55)

    def test_east_of_reference(self):
        result = calculate_true_solar_time(datetime(1987, 1, 7, 9, 55), 135.0)
        assert result == datetime(1987, 1, 7, 10, 55)

    def test_no_longitude(self):
        moment = datetime(1987, 1, 7, 9, 55)
        assert calculate_true_solar_time(moment, None) == moment
        assert calculate_true_solar_time(moment, 120.0) == moment

    def test_custom_reference(self):
        result = calculate_true_solar_time(datetime(2000, 1, 1, 0, 10), 112.5, reference_longitude=115.0)
        assert result == datetime(2000, 1, 1, 0, 0)

    def test_invalid_longitude(self):
        with pytest.raises(ValidationError) as exc_info:
            calculate_true_solar_time(datetime(2000, 1, 1), 200.0)
        assert exc_info.value.field == 'longitude'


class TestResolveLongitude:
    def test_longitude_wins_over_city(self):
        assert resolve_longitude('北京', 100.0) == 100.0

    def test_city_lookup(self):
        assert resolve_longitude('北京') == CITY_LONGITUDES['北京']
        assert resolve_longitude(NO_LOCATION_CITY) == 120.0

    def test_nothing(self):
        assert resolve_longitude() is None

    def test_unknown_city(self):
        with pytest.raises(ValidationError) as exc_info:
            resolve_longitude('不存在的城市')
        assert exc_info.value.field == 'city'


class TestProcessInput:
    def test_solar_input(self, fake_oracle):
        moment, longitude, info = BaziInputProcessor.process_input(
            "1987-01-07", "09:55", "solar", oracle=fake_oracle
        )
        assert moment == BirthMoment(year=1987, month=1, day=7, hour=9, minute=55)
        assert longitude is None
        assert info['converted'] is False
        assert fake_oracle.calls['lunar_to_solar'] == 0

    def test_city_longitude(self, fake_oracle):
        _, longitude, info = BaziInputProcessor.process_input(
            "1987-01-07", "09:55", city="成都", oracle=fake_oracle
        )
        assert longitude == CITY_LONGITUDES['成都']
        assert info['resolved_longitude'] == longitude

    def test_lunar_input_goes_through_oracle(self, fake_oracle):
        moment, _, info = BaziInputProcessor.process_input(
            "1986-12-08", "09:55", "lunar", is_leap_month=True, oracle=fake_oracle
        )
        assert fake_oracle.calls['lunar_to_solar'] == 1
        assert info['converted'] is True
        assert moment.year == 1986

    @pytest.mark.parametrize("date_str,time_str,field", [
        ("1987/01/07", "09:55", "date"),
        ("1987-02-30", "09:55", "day"),
        ("1987-13-01", "09:55", "month"),
        ("1987-01-07", "25:00", "time"),
        ("1987-01-07", "", "time"),
    ])
    def test_invalid_input(self, fake_oracle, date_str, time_str, field):
        with pytest.raises(ValidationError) as exc_info:
            BaziInputProcessor.process_input(date_str, time_str, oracle=fake_oracle)
        assert exc_info.value.field == field

    def test_invalid_calendar_type(self, fake_oracle):
        with pytest.raises(ValidationError) as exc_info:
            BaziInputProcessor.process_input("1987-01-07", "09:55", "julian", oracle=fake_oracle)
        assert exc_info.value.field == 'calendar_type'

    def test_invalid_lunar_day(self, fake_oracle):
        with pytest.raises(ValidationError):
            BaziInputProcessor.process_input("1987-01-31", "09:55", "lunar", oracle=fake_oracle)
        assert fake_oracle.calls['lunar_to_solar'] == 0


@pytest.mark.slow
class TestLunarConversion:
    def test_first_day_of_2023(self, lunar_oracle):
        moment, _, _ = BaziInputProcessor.process_input("2023-01-01", "12:00", "lunar", oracle=lunar_oracle)
        assert (moment.year, moment.month, moment.day) == (2023, 1, 22)

    def test_leap_month(self, lunar_oracle):
        moment, _, _ = BaziInputProcessor.process_input(
            "2023-02-01", "12:00", "lunar", is_leap_month=True, oracle=lunar_oracle
        )
        assert (moment.year, moment.month, moment.day) == (2023, 3, 22)

    def test_missing_leap_month_is_oracle_error(self, lunar_oracle):
        from sizhu_core.exceptions import OracleError
        with pytest.raises(OracleError):
            BaziInputProcessor.process_input("2023-05-01", "12:00", "lunar", is_leap_month=True, oracle=lunar_oracle)
