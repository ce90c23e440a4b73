import math

import pytest

from praytimes.trig import (
    darccos,
    darccot,
    darcsin,
    darctan,
    darctan2,
    dcos,
    dsin,
    dtan,
    normalize_angle_360,
    normalize_hour_24,
)


@pytest.mark.parametrize(
    "value, expected",
    [(0, 0), (360, 0), (720.5, 0.5), (-30, 330), (-390, 330), (359.25, 359.25)],
)
def test_normalize_angle_360(value, expected):
    assert normalize_angle_360(value) == pytest.approx(expected)


@pytest.mark.parametrize(
    "value, expected",
    [(0, 0), (24, 0), (25.5, 1.5), (-0.5, 23.5), (-48.25, 23.75), (13.0, 13.0)],
)
def test_normalize_hour_24(value, expected):
    assert normalize_hour_24(value) == pytest.approx(expected)


def test_tiny_negative_values_stay_in_range():
    assert 0 <= normalize_hour_24(-1e-20) < 24
    assert 0 <= normalize_angle_360(-1e-20) < 360


def test_degree_helpers():
    assert dsin(30) == pytest.approx(0.5)
    assert dcos(60) == pytest.approx(0.5)
    assert dtan(45) == pytest.approx(1.0)
    assert darcsin(0.5) == pytest.approx(30)
    assert darccos(0.5) == pytest.approx(60)
    assert darctan(1) == pytest.approx(45)
    assert darctan2(-1, -1) == pytest.approx(-135)


def test_darccot():
    assert darccot(1) == pytest.approx(45)
    assert darccot(0) == pytest.approx(90)
    assert darccot(math.sqrt(3)) == pytest.approx(30)
