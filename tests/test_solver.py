import pytest

from praytimes.astronomy import julian_date
from praytimes.solver import hour_angle, midday, solve_for_angle, solve_for_asr

JDAY = julian_date(2024, 3, 20)


def test_midday_follows_equation_of_time():
    # J2000 epoch: equation of time is about -3.3 minutes
    assert midday(0.5, julian_date(2000, 1, 1) - 0.5) == pytest.approx(12.055, abs=0.005)


def test_morning_and_evening_are_symmetric_about_noon():
    rise = solve_for_angle(180 - 0.833, 0.5, JDAY, 41.0)
    set_ = solve_for_angle(0.833, 0.5, JDAY, 41.0)
    assert rise < midday(0.5, JDAY) < set_
    assert rise + set_ == pytest.approx(2 * midday(0.5, JDAY))


def test_equinox_day_at_equator_is_about_twelve_hours():
    rise = solve_for_angle(180 - 0.833, 0.5, JDAY, 0.0)
    set_ = solve_for_angle(0.833, 0.5, JDAY, 0.0)
    assert set_ - rise == pytest.approx(12.1, abs=0.1)


def test_hour_angle_unsolvable_returns_none():
    # 70N in June never gets 18 degrees below the horizon
    assert hour_angle(18, 23.0, 70.0) is None
    assert hour_angle(180 - 18, 23.0, 70.0) is None


def test_hour_angle_clamped_to_closest_approach():
    assert hour_angle(18, 23.0, 70.0, clamp=True) == pytest.approx(12.0)
    # polar night: sun never rises, closest approach is noon
    assert hour_angle(0.833, -23.0, 75.0, clamp=True) == pytest.approx(0.0)


def test_solver_reports_unsolvable_event():
    jday = julian_date(2024, 6, 21)
    assert solve_for_angle(18, 0.75, jday, 65.0) is None
    clamped = solve_for_angle(18, 0.75, jday, 65.0, clamp=True)
    assert clamped == pytest.approx(midday(0.75, jday) + 12.0)


def test_asr_between_noon_and_sunset():
    noon = midday(13 / 24, JDAY)
    standard = solve_for_asr(1, 13 / 24, JDAY, 41.0)
    hanafi = solve_for_asr(2, 13 / 24, JDAY, 41.0)
    sunset = solve_for_angle(0.833, 18 / 24, JDAY, 41.0)
    assert noon < standard < hanafi < sunset


def test_asr_standard_shadow_length():
    # on the equator at equinox the noon shadow is nil, so Asr is when the
    # sun is 45 degrees high: three hours after noon
    noon = midday(13 / 24, JDAY)
    assert solve_for_asr(1, 13 / 24, JDAY, 0.0) - noon == pytest.approx(3.0, abs=0.05)
