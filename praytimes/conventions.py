"""
Calculation conventions: the twilight angles each authority uses for Fajr,
Maghrib and Isha.

Maghrib and Isha are either angle based or a fixed number of minutes after
their reference event (Sunset for Maghrib, Maghrib for Isha).
"""

from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType

from praytimes.exceptions import ConfigurationError


class Convention(IntEnum):
    JAFARI = 0  # Shia Ithna Ashari, Leva Institute, Qum
    KARACHI = 1  # University of Islamic Sciences, Karachi
    ISNA = 2  # Islamic Society of North America
    MWL = 3  # Muslim World League
    MAKKAH = 4  # Umm al-Qura University, Makkah
    EGYPT = 5  # Egyptian General Authority of Survey
    TEHRAN = 6  # Institute of Geophysics, University of Tehran
    CUSTOM = 7


@dataclass(frozen=True)
class AngleRule:
    """Event occurs when the sun is ``degrees`` below the horizon."""

    degrees: float


@dataclass(frozen=True)
class MinutesRule:
    """Event occurs ``minutes`` after its reference event."""

    minutes: float


Rule = AngleRule | MinutesRule


@dataclass(frozen=True)
class ConventionAngles:
    fajr_angle: float  # degrees below horizon
    maghrib: Rule  # minutes are counted from Sunset
    isha: Rule  # minutes are counted from Maghrib
    midnight_from_fajr: bool = False  # Sunset to Fajr instead of Sunset to Sunrise


CONVENTIONS = MappingProxyType(
    {
        Convention.JAFARI: ConventionAngles(16, AngleRule(4), AngleRule(14), midnight_from_fajr=True),
        Convention.KARACHI: ConventionAngles(18, MinutesRule(0), AngleRule(18)),
        Convention.ISNA: ConventionAngles(15, MinutesRule(0), AngleRule(15)),
        Convention.MWL: ConventionAngles(18, MinutesRule(0), AngleRule(17)),
        Convention.MAKKAH: ConventionAngles(18.5, MinutesRule(0), MinutesRule(90)),
        Convention.EGYPT: ConventionAngles(19.5, MinutesRule(0), AngleRule(17.5)),
        Convention.TEHRAN: ConventionAngles(17.7, AngleRule(4.5), AngleRule(14)),
        Convention.CUSTOM: ConventionAngles(18, MinutesRule(0), AngleRule(17)),
    }
)


def get_convention(convention: "Convention | int | str | ConventionAngles") -> ConventionAngles:
    """
    Look up the angles for a convention.
    Accepts a Convention, its integer value, its name (any case) or a
    ready-made ConventionAngles, which is returned unchanged.
    Raises ConfigurationError for anything else.
    """
    if isinstance(convention, ConventionAngles):
        return convention
    if isinstance(convention, str):
        try:
            convention = Convention[convention.strip().upper()]
        except KeyError:
            raise ConfigurationError(f"Unknown convention: {convention!r}") from None
    # bool is an int subclass but never a meaningful convention
    if isinstance(convention, bool) or not isinstance(convention, int):
        raise ConfigurationError(f"Unknown convention: {convention!r}")
    try:
        return CONVENTIONS[Convention(convention)]
    except ValueError:
        raise ConfigurationError(f"Unknown convention: {convention!r}") from None
