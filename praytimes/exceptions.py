"""Exceptions raised by the prayer time calculator."""


class PrayTimesError(Exception):
    """Base class for all praytimes errors."""


class ConfigurationError(PrayTimesError, ValueError):
    """Invalid calculation settings: unknown convention, timezone, Asr factor or offsets."""
