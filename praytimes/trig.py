"""Degree-based trigonometry and range reduction for angles and clock hours."""

import math


def deg2rad(d: float) -> float:
    return d * math.pi / 180.0


def rad2deg(r: float) -> float:
    return r * 180.0 / math.pi


def normalize_angle_360(degrees: float) -> float:
    """Normalize angle to [0, 360)."""
    d = degrees % 360.0
    # tiny negative inputs round up to exactly 360.0
    return d if d < 360.0 else 0.0


def normalize_hour_24(hours: float) -> float:
    """Normalize hour to [0, 24)."""
    h = hours % 24.0
    return h if h < 24.0 else 0.0


def dsin(d: float) -> float:
    return math.sin(deg2rad(d))


def dcos(d: float) -> float:
    return math.cos(deg2rad(d))


def dtan(d: float) -> float:
    return math.tan(deg2rad(d))


def darcsin(x: float) -> float:
    return rad2deg(math.asin(x))


def darccos(x: float) -> float:
    """Arc cosine in degrees. Caller guarantees -1 <= x <= 1."""
    return rad2deg(math.acos(x))


def darctan(x: float) -> float:
    return rad2deg(math.atan(x))


def darctan2(y: float, x: float) -> float:
    return rad2deg(math.atan2(y, x))


def darccot(x: float) -> float:
    return rad2deg(math.atan2(1.0, x))
