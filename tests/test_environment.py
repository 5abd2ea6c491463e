from datetime import datetime, timedelta

import pytest

from fleetsim.config import EnvironmentConfig
from fleetsim.environment import ambient_temperature, day_of_year, is_working_hours, seasonal_factor


class TestWorkingHours:
    def test_saturday_morning_is_off(self):
        assert is_working_hours(datetime(2025, 1, 11, 10, 0)) is False

    def test_wednesday_morning_is_on(self):
        assert is_working_hours(datetime(2025, 1, 8, 10, 0)) is True

    @pytest.mark.parametrize(
        "hour, expected",
        [(7, False), (8, True), (17, True), (18, False), (23, False)],
    )
    def test_window_is_half_open(self, hour, expected):
        assert is_working_hours(datetime(2025, 1, 8, hour, 30)) is expected

    def test_custom_shift(self):
        cfg = EnvironmentConfig(work_start_hour=0, work_end_hour=24, work_days=(5, 6))
        assert is_working_hours(datetime(2025, 1, 11, 3, 0), cfg) is True
        assert is_working_hours(datetime(2025, 1, 8, 12, 0), cfg) is False


class TestSeason:
    def test_day_of_year_is_zero_based(self):
        assert day_of_year(datetime(2025, 1, 1)) == 0
        assert day_of_year(datetime(2025, 12, 31)) == 364

    def test_zero_on_new_year(self):
        assert seasonal_factor(datetime(2025, 1, 1, 12, 0)) == pytest.approx(0.0, abs=1e-12)

    def test_bounded_by_amplitude(self):
        start = datetime(2025, 1, 1)
        values = [seasonal_factor(start + timedelta(days=d)) for d in range(365)]
        assert max(values) <= 0.1 + 1e-12
        assert min(values) >= -0.1 - 1e-12
        # пик около четверти года, впадина около трёх четвертей
        assert max(values) == pytest.approx(0.1, abs=1e-3)
        assert min(values) == pytest.approx(-0.1, abs=1e-3)

    def test_same_day_same_factor(self):
        a = seasonal_factor(datetime(2025, 4, 2, 0, 0))
        b = seasonal_factor(datetime(2025, 4, 2, 23, 59))
        assert a == b

    def test_ambient_follows_season(self):
        cfg = EnvironmentConfig()
        spring = datetime(2025, 4, 2)
        expected = cfg.ambient_base_C + seasonal_factor(spring, cfg) * cfg.ambient_seasonal_gain_C
        assert ambient_temperature(spring, cfg) == pytest.approx(expected)
        assert ambient_temperature(datetime(2025, 1, 1)) == pytest.approx(22.0)


class TestSeasonPeriod:
    @pytest.mark.parametrize(
        "day",
        [datetime(2025, 1, 1), datetime(2025, 3, 10, 6), datetime(2025, 7, 20, 23), datetime(2025, 11, 2)],
    )
    def test_repeats_after_365_days(self, day):
        assert seasonal_factor(day + timedelta(days=365)) == pytest.approx(seasonal_factor(day), abs=1e-12)

    def test_half_period_flips_sign(self):
        day = datetime(2025, 2, 15)
        a = seasonal_factor(day)
        b = seasonal_factor(day + timedelta(days=182))
        assert a > 0.0 > b
