"""Conversions between sexagesimal notation, days and radians."""

from dataclasses import dataclass

from pal.constants import D2PI, DAS2R, DS2R, dint, dnint

_DAYSEC = 86400.0


class SexagesimalRangeError(ValueError):
    """A sexagesimal field is out of range.

    ``status`` is 1 for the degrees or hours field, 2 for minutes and
    3 for seconds.  The converted value is still computed and is
    available as ``value``.
    """

    def __init__(self, message: str, status: int, value: float):
        super().__init__(message)
        self.status = status
        self.value = value


@dataclass(frozen=True)
class SexagesimalParts:
    """Sign and fields of a value in sexagesimal form.

    ``units`` holds hours or degrees; ``fraction`` holds the fractional
    seconds as an integer in units of 10**-ndp seconds.
    """

    sign: str
    units: int
    minutes: int
    seconds: int
    fraction: int


def _check(units: int, unit_max: int, minutes: int, seconds: float, value: float) -> float:
    if units < 0 or units > unit_max:
        raise SexagesimalRangeError(
            f"{units} is outside 0-{unit_max}", 1, value
        )
    if minutes < 0 or minutes > 59:
        raise SexagesimalRangeError(f"minutes {minutes} outside 0-59", 2, value)
    if seconds < 0.0 or seconds >= 60.0:
        raise SexagesimalRangeError(f"seconds {seconds} outside 0-59.999...", 3, value)
    return value


def _total_seconds(units: int, minutes: int, seconds: float) -> float:
    return 60.0 * (60.0 * float(abs(units)) + float(abs(minutes))) + abs(seconds)


def daf2r(ideg: int, iamin: int, asec: float) -> float:
    """Degrees, arcminutes, arcseconds to radians (sign handled by the caller)."""
    rad = _total_seconds(ideg, iamin, asec) * DAS2R
    return _check(ideg, 359, iamin, asec, rad)


def dtf2d(ihour: int, imin: int, sec: float) -> float:
    """Hours, minutes, seconds to days (sign handled by the caller)."""
    days = _total_seconds(ihour, imin, sec) / _DAYSEC
    return _check(ihour, 23, imin, sec, days)


def dtf2r(ihour: int, imin: int, sec: float) -> float:
    """Hours, minutes, seconds to radians (sign handled by the caller)."""
    rad = _total_seconds(ihour, imin, sec) * DS2R
    return _check(ihour, 23, imin, sec, rad)


def dd2tf(ndp: int, days: float) -> SexagesimalParts:
    """Interval in days to hours, minutes, seconds and fraction.

    ``ndp`` is the number of decimal places of seconds; a negative
    value rounds to 10s, 1m, 10m, 1h and so on.
    """
    sign = "+" if days >= 0.0 else "-"
    a = _DAYSEC * abs(days)

    if ndp < 0:
        nrs = 1
        for n in range(1, -ndp + 1):
            nrs *= 6 if n in (2, 4) else 10
        rs = float(nrs)
        a = rs * dnint(a / rs)

    rs = float(10 ** max(ndp, 0))
    rm = rs * 60.0
    rh = rm * 60.0

    a = dnint(rs * a)
    ah = dint(a / rh)
    a -= ah * rh
    am = dint(a / rm)
    a -= am * rm
    as_ = dint(a / rs)
    af = a - as_ * rs

    return SexagesimalParts(sign, int(ah), int(am), int(as_), int(af))


def dr2tf(ndp: int, angle: float) -> SexagesimalParts:
    """Angle in radians to hours, minutes, seconds and fraction."""
    return dd2tf(ndp, angle / D2PI)


def dr2af(ndp: int, angle: float) -> SexagesimalParts:
    """Angle in radians to degrees, arcminutes, arcseconds and fraction."""
    return dd2tf(ndp, angle * (15.0 / D2PI))