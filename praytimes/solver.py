"""
Clock time (local apparent solar hours) at which the sun reaches a given
altitude, or at which the Asr shadow condition holds.

Angles follow the calculator's encoding: an angle ``a <= 90`` is an evening
event with the sun ``a`` degrees below the horizon; ``180 - a`` is the
matching morning event. Asr angles are negative (sun above the horizon).
"""

from praytimes.astronomy import equation_of_time, sun_declination
from praytimes.trig import darccos, darccot, dcos, dsin, dtan, normalize_hour_24


def midday(portion: float, jday: float) -> float:
    """Solar noon (Dhuhr) in hours, with the equation of time taken at ``jday + portion``."""
    return normalize_hour_24(12.0 - equation_of_time(jday + portion))


def hour_angle(
    angle: float,
    decl_deg: float,
    lat_deg: float,
    clamp: bool = False,
) -> float | None:
    """
    Hour angle (hours from noon) when the sun is at ``angle`` in the encoding above.
    Returns None if the sun never reaches that angle (polar day/night),
    unless ``clamp`` is set, in which case the closest approach is returned.
    """
    numerator = -dsin(angle) - dsin(decl_deg) * dsin(lat_deg)
    denominator = dcos(decl_deg) * dcos(lat_deg)
    if denominator == 0:
        # exactly at a pole every hour angle gives the same altitude
        if not clamp:
            return None
        cos_omega = -1.0 if numerator < 0 else 1.0
    else:
        cos_omega = numerator / denominator
    if cos_omega < -1 or cos_omega > 1:
        if not clamp:
            return None
        cos_omega = max(-1.0, min(1.0, cos_omega))
    return darccos(cos_omega) / 15.0


def solve_for_angle(
    angle: float,
    portion: float,
    jday: float,
    latitude: float,
    clamp: bool = False,
) -> float | None:
    """Time of the event at ``angle``, before noon if ``angle > 90``, after noon otherwise."""
    decl = sun_declination(jday + portion)
    noon = midday(portion, jday)
    offset = hour_angle(angle, decl, latitude, clamp=clamp)
    if offset is None:
        return None
    if angle > 90:
        return noon - offset
    return noon + offset


def solve_for_asr(
    factor: float,
    portion: float,
    jday: float,
    latitude: float,
    clamp: bool = False,
) -> float | None:
    """Asr time for shadow ``factor`` (1 standard, 2 Hanafi)."""
    decl = sun_declination(jday + portion)
    angle = -darccot(factor + dtan(abs(latitude - decl)))
    return solve_for_angle(angle, portion, jday, latitude, clamp=clamp)
