"""
Julian day and approximate solar coordinates (USNO low-precision formulas).

Reference: http://aa.usno.navy.mil/faq/docs/SunApprox.html
Accurate to about a minute of time for dates within a few centuries of J2000.
"""

import math
from typing import NamedTuple

from praytimes.trig import (
    darcsin,
    darctan2,
    dcos,
    dsin,
    normalize_angle_360,
    normalize_hour_24,
)

J2000 = 2451545.0


class SunPosition(NamedTuple):
    declination: float  # degrees
    equation_of_time: float  # hours, apparent minus mean solar time


def julian_date(year: int, month: int, day: int) -> float:
    """Julian day number of a Gregorian calendar date.

    Unlike the astronomical convention this does not subtract 0.5; the
    calculator shifts the value by longitude before solving.
    """
    if month <= 2:
        year -= 1
        month += 12
    A = math.floor(year / 100)
    B = 2 - A + math.floor(A / 4)
    jd = math.floor(365.25 * (year + 4716)) + math.floor(30.6001 * (month + 1)) + day + B - 1524
    return float(jd)


def sun_position(jd: float) -> SunPosition:
    """Solar declination (degrees) and equation of time (hours) at Julian day ``jd``."""
    D = jd - J2000
    g = normalize_angle_360(357.529 + 0.98560028 * D)  # mean anomaly
    q = normalize_angle_360(280.459 + 0.98564736 * D)  # mean longitude
    L = normalize_angle_360(q + 1.915 * dsin(g) + 0.020 * dsin(2 * g))
    e = 23.439 - 0.00000036 * D

    decl = darcsin(dsin(e) * dsin(L))

    # Right ascension (same quadrant as L)
    RA_hours = normalize_hour_24(darctan2(dcos(e) * dsin(L), dcos(L)) / 15.0)
    EqT = q / 15.0 - RA_hours

    return SunPosition(decl, EqT)


def sun_declination(jd: float) -> float:
    return sun_position(jd).declination


def equation_of_time(jd: float) -> float:
    return sun_position(jd).equation_of_time
