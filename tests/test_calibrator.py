"""Tests for y -> time and x -> weekday calibration."""

import pytest

from layout_engine.calibrator import AxisCalibrator, DayAxis, TimeAxis
from layout_engine.models import DayHeader, TimeLabel, Weekday


@pytest.fixture
def calibrator(config):
    return AxisCalibrator(config)


def label(time, y):
    return TimeLabel(time=time, y=y, text=time)


def header(day, x):
    return DayHeader(day=day, x=x, text=day.value)


class TestTimeAxis:

    def test_no_labels_uses_default_time(self, calibrator):
        axis = calibrator.build_y_to_time_map([])
        assert axis.time_at(0) == "09:00"
        assert axis.time_at(1000) == "09:00"

    def test_single_label_is_constant(self, calibrator):
        axis = calibrator.build_y_to_time_map([label("14:00", 300)])
        assert axis.slope == 0
        assert axis.time_at(10) == "14:00"

    def test_exact_fit_through_evenly_spaced_labels(self, calibrator):
        labels = [label("09:00", 60), label("10:00", 110), label("11:00", 160), label("12:00", 210)]
        axis = calibrator.build_y_to_time_map(labels)
        assert axis.slope == pytest.approx(1.2)
        assert axis.time_at(60) == "09:00"
        assert axis.time_at(135) == "10:30"

    def test_least_squares_absorbs_jitter(self, calibrator):
        labels = [label("09:00", 61), label("10:00", 109), label("11:00", 161), label("12:00", 209)]
        axis = calibrator.build_y_to_time_map(labels)
        assert axis.minutes_at(135) == pytest.approx(630, abs=1)

    def test_zero_variance_falls_back_to_mean(self, calibrator):
        axis = calibrator.build_y_to_time_map([label("09:00", 100), label("10:00", 100)])
        assert axis.slope == 0
        assert axis.time_at(0) == "09:30"

    def test_monotonic_in_y(self, calibrator):
        labels = [label("08:00", 40), label("09:30", 170), label("10:00", 205), label("13:00", 480)]
        axis = calibrator.build_y_to_time_map(labels)
        samples = [axis.time_at(y) for y in range(-200, 900, 7)]
        assert samples == sorted(samples)

    def test_extrapolation_is_clamped_to_the_day(self):
        axis = TimeAxis(slope=1.0, intercept=0.0)
        assert axis.time_at(-50) == "00:00"
        assert axis.time_at(5000) == "23:59"

    def test_minutes_are_floored(self):
        assert TimeAxis(slope=0.0, intercept=599.9).time_at(0) == "09:59"


class TestDayAxis:

    @pytest.fixture
    def axis(self, calibrator):
        return calibrator.build_x_to_day_map([
            header(Weekday.MONDAY, 100),
            header(Weekday.TUESDAY, 300),
            header(Weekday.WEDNESDAY, 500),
        ])

    def test_nearest_header(self, axis):
        assert axis.day_at(105) == Weekday.MONDAY
        assert axis.day_at(390) == Weekday.TUESDAY

    def test_far_outside_is_none(self, axis):
        assert axis.day_at(900) is None

    def test_tolerance_band_edge(self, axis):
        # half-gap 100, times 1.5
        assert axis.day_at(650) == Weekday.WEDNESDAY
        assert axis.day_at(651) is None
        assert axis.day_at(-50) == Weekday.MONDAY
        assert axis.day_at(-51) is None

    def test_equal_distance_prefers_left_header(self, axis):
        assert axis.day_at(200) == Weekday.MONDAY

    def test_duplicate_day_keeps_left_most_header(self, calibrator):
        axis = calibrator.build_x_to_day_map([
            header(Weekday.MONDAY, 500),
            header(Weekday.TUESDAY, 300),
            header(Weekday.MONDAY, 100),
        ])
        assert [h.x for h in axis.headers] == [100, 300]
        assert axis.day_at(110) == Weekday.MONDAY
        assert axis.day_at(500) is None

    def test_single_header_accepts_any_x(self, calibrator):
        axis = calibrator.build_x_to_day_map([header(Weekday.FRIDAY, 250)])
        assert axis.day_at(-1000) == Weekday.FRIDAY
        assert axis.day_at(5000) == Weekday.FRIDAY

    def test_no_headers(self):
        assert DayAxis(headers=()).day_at(10) is None

    def test_tolerance_factor_comes_from_config(self, config):
        config.day_tolerance_factor = 1.0
        axis = AxisCalibrator(config).build_x_to_day_map([
            header(Weekday.MONDAY, 100),
            header(Weekday.TUESDAY, 300),
        ])
        assert axis.day_at(0) == Weekday.MONDAY
        assert axis.day_at(-1) is None
