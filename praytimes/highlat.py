"""
Fajr, Maghrib and Isha for higher latitudes.

Where the sun does not get deep enough below the horizon (or gets there too
late in a short summer night) the twilight times are pinned to a portion of
the night, measured from sunrise for Fajr and from sunset for Maghrib/Isha.
"""

import logging

from praytimes.conventions import AngleRule, ConventionAngles
from praytimes.models import HighLatMethod, RawEventTimes
from praytimes.trig import normalize_hour_24

log = logging.getLogger(__name__)


def time_diff(time1: float, time2: float) -> float:
    """Hours from ``time1`` forward to ``time2``, wrapping past midnight."""
    return normalize_hour_24(time2 - time1)


def night_portion(method: HighLatMethod, angle: float) -> float:
    if method == HighLatMethod.ANGLE_BASED:
        return angle / 60.0
    if method == HighLatMethod.NIGHT_MIDDLE:
        return 0.5
    if method == HighLatMethod.ONE_SEVENTH:
        return 1.0 / 7.0
    return 0.0


def night_length(times: RawEventTimes) -> float:
    """
    Hours from sunset to sunrise.
    When the sun neither rises nor sets, sunrise and sunset hold clamped
    values near solar midnight (polar day) or solar noon (polar night);
    the night is then 0 or 24 hours rather than their wrapped difference.
    """
    if {"sunrise", "sunset"} <= times.unsolved:
        gap = time_diff(times["sunrise"], times["dhuhr"])
        polar_day = 6.0 < gap < 18.0
        return 0.0 if polar_day else 24.0
    return time_diff(times["sunset"], times["sunrise"])


def _replace(times: RawEventTimes, name: str, value: float) -> None:
    log.debug("high latitude: %s %.4f -> %.4f", name, times[name], value)
    times[name] = value
    times.unsolved.discard(name)


def adjust_high_latitudes(
    times: RawEventTimes,
    angles: ConventionAngles,
    method: HighLatMethod,
) -> RawEventTimes:
    """Replace unsolved or too-distant Fajr/Maghrib/Isha in place. Returns ``times``."""
    if method == HighLatMethod.NONE:
        return times

    sunrise = times["sunrise"]
    sunset = times["sunset"]
    night = night_length(times)

    fajr_diff = night_portion(method, angles.fajr_angle) * night
    if "fajr" in times.unsolved or time_diff(times["fajr"], sunrise) > fajr_diff:
        _replace(times, "fajr", sunrise - fajr_diff)

    if isinstance(angles.maghrib, AngleRule):
        maghrib_diff = night_portion(method, angles.maghrib.degrees) * night
        if "maghrib" in times.unsolved or time_diff(sunset, times["maghrib"]) > maghrib_diff:
            _replace(times, "maghrib", sunset + maghrib_diff)

    if isinstance(angles.isha, AngleRule):
        isha_diff = night_portion(method, angles.isha.degrees) * night
        if "isha" in times.unsolved or time_diff(sunset, times["isha"]) > isha_diff:
            _replace(times, "isha", sunset + isha_diff)

    return times
