"""
Prayer times calculation using astronomical formulas (USNO) and the
PrayTimes.org method: raw solar events, timezone adjustment, high-latitude
correction, convention minute rules, user tuning and minute rounding.
"""

import logging
import math
from dataclasses import replace
from datetime import date, datetime, tzinfo
from types import MappingProxyType
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from praytimes.astronomy import julian_date
from praytimes.conventions import (
    AngleRule,
    Convention,
    ConventionAngles,
    MinutesRule,
    get_convention,
)
from praytimes.exceptions import ConfigurationError
from praytimes.highlat import adjust_high_latitudes, time_diff
from praytimes.models import (
    DEFAULT_IMSAK_MINUTES,
    TIME_NAMES,
    AsrFactor,
    CalculationConfig,
    HighLatMethod,
    HoursMinutes,
    Location,
    PrayerTimes,
    RawEventTimes,
)
from praytimes.solver import midday, solve_for_angle, solve_for_asr
from praytimes.trig import normalize_hour_24

log = logging.getLogger(__name__)

# Sunrise/sunset use 0.833° below the horizon (refraction + solar radius)
SUNRISE_SUNSET_ANGLE = 0.833

# Approximate local times (hours) each event is first solved around
DEFAULT_TIMES = MappingProxyType(
    {
        "imsak": 5,
        "fajr": 5,
        "sunrise": 6,
        "dhuhr": 12,
        "asr": 13,
        "sunset": 18,
        "maghrib": 18,
        "isha": 18,
        "midnight": 18,
    }
)

DEFAULT_LOCATION = Location(-33.7640187, 150.8202351, "Australia/Sydney")
DEFAULT_CONFIG = CalculationConfig(
    convention=Convention.JAFARI,
    asr_factor=AsrFactor.STANDARD,
    high_lat_method=HighLatMethod.ANGLE_BASED,
)


def _resolve_timezone(tz: str | tzinfo) -> tzinfo:
    if isinstance(tz, tzinfo):
        return tz
    try:
        return ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError, TypeError) as exc:
        raise ConfigurationError(f"Unknown timezone: {tz!r}") from exc


def timezone_offset(tz: str | tzinfo, on: date) -> float:
    """Hours east of UTC in effect at local midnight of ``on`` (DST aware)."""
    zone = _resolve_timezone(tz)
    offset = datetime(on.year, on.month, on.day, tzinfo=zone).utcoffset()
    if offset is None:
        raise ConfigurationError(f"Timezone {tz!r} has no UTC offset")
    return offset.total_seconds() / 3600.0


def _is_finite(value) -> bool:
    try:
        return math.isfinite(value)
    except TypeError:
        return False


def _validated(config: CalculationConfig) -> CalculationConfig:
    """Fail fast on bad settings; returns the config with normalized fields."""
    get_convention(config.convention)
    try:
        asr_ok = config.asr_factor > 0
    except TypeError:
        asr_ok = False
    if not asr_ok:
        raise ConfigurationError(f"Asr factor must be positive, got {config.asr_factor!r}")
    try:
        method = HighLatMethod(config.high_lat_method)
    except ValueError:
        raise ConfigurationError(f"Unknown high latitude method: {config.high_lat_method!r}") from None
    offsets = tuple(config.offsets)
    if len(offsets) != len(TIME_NAMES):
        raise ConfigurationError(f"Expected {len(TIME_NAMES)} tuning offsets, got {len(offsets)}")
    minutes = {"dhuhr_minutes": config.dhuhr_minutes, "imsak_minutes": config.imsak_minutes}
    minutes.update(zip((f"{name} offset" for name in TIME_NAMES), offsets))
    for label, value in minutes.items():
        if not _is_finite(value):
            raise ConfigurationError(f"{label} must be a finite number of minutes, got {value!r}")
    return replace(config, high_lat_method=method, offsets=offsets)


def compute_raw_times(config: CalculationConfig, location: Location, on: date) -> RawEventTimes:
    """
    Solve every event in local apparent solar time.
    Events the sun never reaches are listed in ``unsolved`` and hold the
    clamped solution (the sun's closest approach to the angle).
    """
    angles = get_convention(config.convention)
    jday = julian_date(on.year, on.month, on.day) - location.lng / (15.0 * 24.0)
    lat = location.lat
    portion = {name: hours / 24.0 for name, hours in DEFAULT_TIMES.items()}
    raw = RawEventTimes(dict.fromkeys(TIME_NAMES, 0.0))

    def solve(name, solver, angle):
        value = solver(angle, portion[name], jday, lat)
        if value is None:
            raw.unsolved.add(name)
            value = solver(angle, portion[name], jday, lat, clamp=True)
        raw[name] = value

    solve("fajr", solve_for_angle, 180 - angles.fajr_angle)
    solve("sunrise", solve_for_angle, 180 - SUNRISE_SUNSET_ANGLE)
    raw["dhuhr"] = midday(portion["dhuhr"], jday)
    solve("asr", solve_for_asr, config.asr_factor)
    solve("sunset", solve_for_angle, SUNRISE_SUNSET_ANGLE)

    # minute-based events are placeholders until adjust_times
    if isinstance(angles.maghrib, AngleRule):
        solve("maghrib", solve_for_angle, angles.maghrib.degrees)
    else:
        raw["maghrib"] = raw["sunset"]
    if isinstance(angles.isha, AngleRule):
        solve("isha", solve_for_angle, angles.isha.degrees)
    else:
        raw["isha"] = raw["maghrib"]

    raw["imsak"] = raw["fajr"]
    raw["midnight"] = raw["isha"]

    log.debug("jday=%.5f lat=%.4f raw=%s unsolved=%s", jday, lat, raw.times, sorted(raw.unsolved))
    return raw


def tune_times(raw: RawEventTimes, offsets) -> RawEventTimes:
    for name, minutes in zip(TIME_NAMES, offsets):
        raw[name] += minutes / 60.0
    return raw


def adjust_times(
    raw: RawEventTimes,
    angles: ConventionAngles,
    config: CalculationConfig,
    tz_offset: float,
    longitude: float,
) -> RawEventTimes:
    """Convert to zone time and apply corrections, minute rules and tuning, in place."""
    shift = tz_offset - longitude / 15.0
    for name in TIME_NAMES:
        raw[name] += shift

    adjust_high_latitudes(raw, angles, config.high_lat_method)

    raw["imsak"] = raw["fajr"] - config.imsak_minutes / 60.0
    raw["dhuhr"] += config.dhuhr_minutes / 60.0

    if isinstance(angles.maghrib, MinutesRule):
        raw["maghrib"] = raw["sunset"] + angles.maghrib.minutes / 60.0
    if isinstance(angles.isha, MinutesRule):
        raw["isha"] = raw["maghrib"] + angles.isha.minutes / 60.0

    if angles.midnight_from_fajr:
        raw["midnight"] = raw["sunset"] + time_diff(raw["sunset"], raw["fajr"]) / 2.0
    else:
        raw["midnight"] = raw["sunset"] + time_diff(raw["sunset"], raw["sunrise"]) / 2.0

    return tune_times(raw, config.offsets)


def to_hours_minutes(h: float) -> HoursMinutes:
    """Round fractional hours to the nearest minute on a 24h clock."""
    h = normalize_hour_24(h + 0.5 / 60.0)
    hour = int(math.floor(h))
    minute = min(int(math.floor((h - hour) * 60.0)), 59)
    return HoursMinutes(hour, minute)


def compute_times(config: CalculationConfig, location: Location, on: date) -> PrayerTimes:
    """
    Prayer times for one day at ``location``.
    Raises ConfigurationError for an unknown convention, timezone, Asr factor,
    high latitude method, a wrong number of tuning offsets, or non-finite minutes.
    """
    config = _validated(config)
    angles = get_convention(config.convention)
    tz_offset = timezone_offset(location.timezone, on)
    log.debug("%s tz=%s offset=%+.2fh", on.isoformat(), location.timezone, tz_offset)

    raw = compute_raw_times(config, location, on)
    adjust_times(raw, angles, config, tz_offset, location.lng)

    if raw.unsolved:
        # Left as the closest-approach time; pick a high latitude method to avoid this
        log.warning(
            "%s not reached at lat=%.4f on %s; using closest approach (high_lat_method=%s)",
            ", ".join(sorted(raw.unsolved)),
            location.lat,
            on.isoformat(),
            config.high_lat_method.name,
        )

    return PrayerTimes(**{name: to_hours_minutes(raw[name]) for name in TIME_NAMES})


def compute_custom(
    convention: Convention | int | str | ConventionAngles,
    dhuhr_minutes: float,
    asr_factor: float,
    high_lat_method: HighLatMethod | int,
    latitude: float,
    longitude: float,
    on: date,
    timezone: str | tzinfo,
    offsets=None,
    imsak_minutes: float = DEFAULT_IMSAK_MINUTES,
) -> PrayerTimes:
    """
    Prayer times for a custom configuration.
    offsets: nine tuning minutes in TIME_NAMES order (imsak ... midnight).
    """
    if offsets is None:
        offsets = (0,) * len(TIME_NAMES)
    config = CalculationConfig(
        convention=convention,
        asr_factor=asr_factor,
        dhuhr_minutes=dhuhr_minutes,
        imsak_minutes=imsak_minutes,
        high_lat_method=high_lat_method,
        offsets=tuple(offsets),
    )
    return compute_times(config, Location(latitude, longitude, timezone), on)


def compute_default(on: date | None = None) -> PrayerTimes:
    """Reference configuration: Jafari, standard Asr, angle-based, western Sydney."""
    if on is None:
        on = date.today()
    return compute_times(DEFAULT_CONFIG, DEFAULT_LOCATION, on)
