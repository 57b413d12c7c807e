"""Numerical constants and small rounding helpers shared across the package."""

import math

DPI = 3.1415926535897932384626433832795028841971693993751
"""Pi."""

D2PI = 6.2831853071795864769252867665590057683943387987502
"""Two pi."""

DPIBY2 = 1.5707963267948966192313216916397514420985846996876
"""Pi/2: 90 degrees in radians."""

DD2R = 0.017453292519943295769236907684886127134428718885417
"""Degrees to radians."""

DR2AS = 2.0626480624709635515647335733077861319665970087963e5
"""Radians to arcseconds."""

DAS2R = 4.8481368110953599358991410235794797595635330237270e-6
"""Arcseconds to radians."""

DR2D = 57.295779513082320876798154814105170332405472466564
"""Radians to degrees."""

DH2R = 0.26179938779914943653855361527329190701643078328126
"""Hours to radians."""

DR2H = 3.8197186342054880584532103209403446888270314977709
"""Radians to hours."""

DR2S = 1.3750987083139757010431557155385240879777313391975e4
"""Radians to seconds of time."""

DS2R = 7.272205216643039903848712e-5
"""Seconds of time to radians."""

MJD0 = 2400000.5
"""Offset between Julian Date and Modified Julian Date."""

CR = 499.004782
"""Light time for 1 AU (seconds)."""

SPD = 86400.0
"""Seconds per day."""

VF = 21.095
"""Km per second to AU per tropical century."""

PMF = 100.0 * 60.0 * 60.0 * 360.0 / D2PI
"""Radians per year to arcseconds per century."""

SR = 7.2921150e-5
"""Mean sidereal rate of the Earth (radians per second)."""

GCON = 0.01720209895
"""Gaussian gravitational constant (exact)."""


def dint(a: float) -> float:
    """Truncate towards zero, returning a float."""
    return float(math.ceil(a)) if a < 0.0 else float(math.floor(a))


def dnint(a: float) -> float:
    """Round to the nearest whole number, halves away from zero."""
    return float(math.ceil(a - 0.5)) if a < 0.0 else float(math.floor(a + 0.5))


def dsign(a: float, b: float) -> float:
    """Magnitude of ``a`` with the sign of ``b`` (negative zero counts as positive)."""
    return -abs(a) if b < 0.0 else abs(a)