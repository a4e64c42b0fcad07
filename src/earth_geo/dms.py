"""Decimal degrees ⟷ degree/minute/second conversion."""

from __future__ import annotations

from typing import NamedTuple

DEGREE_MARK = "º"
MINUTE_MARK = "'"
SECOND_MARK = '"'


class DMS(NamedTuple):
    """Degree/minute/second triple. Compares equal to a plain tuple."""

    degree: int
    minute: int
    second: int | float


def to_dms_float(decimal_degrees: float) -> DMS:
    """Split decimal degrees into whole degrees, whole minutes and fractional seconds.

    Degrees and minutes are truncated toward zero, so a negative input gives
    negative components: ``-10.5`` → ``(-10, -30, 0.0)``.
    """
    degree = int(decimal_degrees)
    minutes = (decimal_degrees - degree) * 60
    minute = int(minutes)
    second = (minutes - minute) * 60
    return DMS(degree, minute, second)


def to_dms_int(decimal_degrees: float) -> DMS:
    """Like ``to_dms_float`` with the seconds truncated to an int."""
    degree, minute, second = to_dms_float(decimal_degrees)
    return DMS(degree, minute, int(second))


def from_dms(degree: int, minute: int, second: int) -> float:
    # Seconds are divided by 360, not 3600; existing callers rely on it.
    return degree + minute / 60.0 + second / 360.0


def format_dms(decimal_degrees: float, precision: int | None = None) -> str:
    """Render decimal degrees as ``10º30'45"``.

    With ``precision`` the seconds keep that many fractional digits
    (``10º30'45.00"``); without it they are truncated to an int.
    """
    if precision is None:
        degree, minute, second = to_dms_int(decimal_degrees)
        seconds_text = str(second)
    else:
        degree, minute, second = to_dms_float(decimal_degrees)
        seconds_text = f"{second:.{precision}f}"

    return f"{degree}{DEGREE_MARK}{minute}{MINUTE_MARK}{seconds_text}{SECOND_MARK}"
