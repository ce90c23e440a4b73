"""Data model definitions: calculation inputs, the working buffer and the final result."""

from dataclasses import dataclass, field
from datetime import time, tzinfo
from enum import IntEnum

from praytimes.conventions import Convention, ConventionAngles

TIME_NAMES = (
    "imsak",
    "fajr",
    "sunrise",
    "dhuhr",
    "asr",
    "sunset",
    "maghrib",
    "isha",
    "midnight",
)

DEFAULT_IMSAK_MINUTES = 10


class HighLatMethod(IntEnum):
    NONE = 0
    NIGHT_MIDDLE = 1
    ONE_SEVENTH = 2
    ANGLE_BASED = 3


class AsrFactor(IntEnum):
    STANDARD = 1  # Shafi'i, Maliki, Ja'fari, Hanbali
    HANAFI = 2


@dataclass(frozen=True)
class Location:
    lat: float  # Latitude (decimal degrees, north positive)
    lng: float  # Longitude (decimal degrees, east positive)
    timezone: str | tzinfo  # IANA identifier ("Australia/Sydney") or tzinfo


@dataclass(frozen=True)
class CalculationConfig:
    convention: Convention | int | str | ConventionAngles = Convention.MWL
    asr_factor: float = AsrFactor.STANDARD
    dhuhr_minutes: float = 0
    imsak_minutes: float = DEFAULT_IMSAK_MINUTES
    high_lat_method: HighLatMethod = HighLatMethod.NONE
    offsets: tuple[float, ...] = (0,) * len(TIME_NAMES)  # Tuning minutes, TIME_NAMES order


@dataclass
class RawEventTimes:
    """Working buffer of fractional hours for a single calculation."""

    times: dict[str, float]
    unsolved: set[str] = field(default_factory=set)  # Events the sun never reaches

    def __getitem__(self, name: str) -> float:
        return self.times[name]

    def __setitem__(self, name: str, value: float) -> None:
        self.times[name] = value


@dataclass(frozen=True)
class HoursMinutes:
    hours: int
    minutes: int

    def as_time(self) -> time:
        return time(self.hours, self.minutes)

    def __str__(self) -> str:
        return f"{self.hours:02d}:{self.minutes:02d}"


@dataclass(frozen=True)
class PrayerTimes:
    imsak: HoursMinutes
    fajr: HoursMinutes
    sunrise: HoursMinutes
    dhuhr: HoursMinutes
    asr: HoursMinutes
    sunset: HoursMinutes
    maghrib: HoursMinutes
    isha: HoursMinutes
    midnight: HoursMinutes

    def as_dict(self) -> dict[str, HoursMinutes]:
        return {name: getattr(self, name) for name in TIME_NAMES}
