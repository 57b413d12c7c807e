"""Calendar dates, Modified Julian Dates and Besselian/Julian epochs."""

import sys
from typing import Optional, Tuple

from pal.constants import MJD0, dnint

_DJ00 = 2451545.0
"""Reference epoch J2000.0 as a Julian Date."""

_DJY = 365.25
"""Days per Julian year."""

_DTY = 365.242198781
"""Days per tropical year."""

_IYMIN = -4799
_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

_DJMIN = -68569.5
_DJMAX = 1e9

_DBL_EPSILON = sys.float_info.epsilon


class CalendarError(ValueError):
    """A calendar date or Julian Date outside the accepted range.

    ``status`` is -1 for a bad year (or a Julian Date out of range),
    -2 for a bad month and -3 for a bad day.  For a bad day the
    Modified Julian Date is still computed and is available as ``mjd``.
    """

    def __init__(self, message: str, status: int, mjd: Optional[float] = None):
        super().__init__(message)
        self.status = status
        self.mjd = mjd


def _is_leap(iy: int) -> bool:
    return iy % 4 == 0 and (iy % 100 != 0 or iy % 400 == 0)


def cldj(iy: int, im: int, id: int) -> float:
    """Gregorian calendar date to Modified Julian Date at 0 hours.

    Raises CalendarError for a year before -4799, a month outside
    1-12, or a day outside the month.
    """
    if iy < _IYMIN:
        raise CalendarError(f"year {iy} is before {_IYMIN}", -1)
    if im < 1 or im > 12:
        raise CalendarError(f"month {im} is outside 1-12", -2)

    ly = 1 if im == 2 and _is_leap(iy) else 0
    bad_day = id < 1 or id > _MONTH_DAYS[im - 1] + ly

    my = -1 if im <= 2 else 0
    iypmy = iy + my
    mjd = float(
        (1461 * (iypmy + 4800)) // 4
        + (367 * (im - 2 - 12 * my)) // 12
        - (3 * ((iypmy + 4900) // 100)) // 4
        + id
        - 2432076
    )
    if bad_day:
        raise CalendarError(f"day {id} is not in month {im} of {iy}", -3, mjd)
    return mjd


def _jd2cal(dj1: float, dj2: float) -> Tuple[int, int, int, float]:
    dj = dj1 + dj2
    if dj < _DJMIN or dj > _DJMAX:
        raise CalendarError(f"Julian Date {dj} is out of range", -1)

    d = dnint(dj1)
    f1 = dj1 - d
    jd = int(d)
    d = dnint(dj2)
    f2 = dj2 - d
    jd += int(d)

    # Compensated summation of f1 + f2 + 0.5.
    s = 0.5
    cs = 0.0
    for x in (f1, f2):
        t = s + x
        cs += (s - t) + x if abs(s) >= abs(x) else (x - t) + s
        s = t
        if s >= 1.0:
            jd += 1
            s -= 1.0
    f = s + cs
    cs = f - s

    if f < 0.0:
        f = s + 1.0
        cs += (1.0 - f) + s
        s = f
        f = s + cs
        cs = f - s
        jd -= 1

    if (f - 1.0) >= -_DBL_EPSILON / 4.0:
        t = s - 1.0
        cs += (s - t) - 1.0
        s = t
        f = s + cs
        if -_DBL_EPSILON / 2.0 < f:
            jd += 1
            f = max(f, 0.0)

    l = jd + 68569
    n = (4 * l) // 146097
    l -= (146097 * n + 3) // 4
    i = (4000 * (l + 1)) // 1461001
    l -= (1461 * i) // 4 - 31
    k = (80 * l) // 2447
    day = l - (2447 * k) // 80
    l = k // 11
    month = k + 2 - 12 * l
    year = 100 * (n - 49) + i + l
    return year, month, day, f


def djcl(djm: float) -> Tuple[int, int, int, float]:
    """Modified Julian Date to (year, month, day, fraction of day).

    Raises CalendarError if the date is outside the supported range.
    """
    return _jd2cal(MJD0, djm)


def epb(date: float) -> float:
    """Modified Julian Date to Besselian epoch."""
    d1900 = 36524.68648
    return 1900.0 + ((MJD0 - _DJ00) + (date + d1900)) / _DTY


def epb2d(epb: float) -> float:
    """Besselian epoch to Modified Julian Date."""
    return 15019.81352 + (epb - 1900.0) * _DTY


def epj(date: float) -> float:
    """Modified Julian Date to Julian epoch."""
    return 2000.0 + ((MJD0 - _DJ00) + date) / _DJY


def epj2d(epj: float) -> float:
    """Julian epoch to Modified Julian Date."""
    return 51544.5 + (epj - 2000.0) * _DJY