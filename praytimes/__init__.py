"""Islamic prayer times from solar position, for any location and calculation convention."""

from praytimes.conventions import (
    CONVENTIONS,
    AngleRule,
    Convention,
    ConventionAngles,
    MinutesRule,
    get_convention,
)
from praytimes.exceptions import ConfigurationError, PrayTimesError
from praytimes.models import (
    TIME_NAMES,
    AsrFactor,
    CalculationConfig,
    HighLatMethod,
    HoursMinutes,
    Location,
    PrayerTimes,
)
from praytimes.prayer_times import (
    compute_custom,
    compute_default,
    compute_times,
    timezone_offset,
)

__all__ = [
    "CONVENTIONS",
    "TIME_NAMES",
    "AngleRule",
    "AsrFactor",
    "CalculationConfig",
    "ConfigurationError",
    "Convention",
    "ConventionAngles",
    "HighLatMethod",
    "HoursMinutes",
    "Location",
    "MinutesRule",
    "PrayTimesError",
    "PrayerTimes",
    "compute_custom",
    "compute_default",
    "compute_times",
    "get_convention",
    "timezone_offset",
]
