"""Spherical and vector geometry on the celestial sphere."""

import math
from typing import Sequence, Tuple

from pal.constants import D2PI

Vector = Tuple[float, float, float]
Matrix = Tuple[Vector, Vector, Vector]


def dcs2c(a: float, b: float) -> Vector:
    """Spherical coordinates (radians) to a Cartesian unit vector."""
    cb = math.cos(b)
    return (math.cos(a) * cb, math.sin(a) * cb, math.sin(b))


def dcc2s(v: Sequence[float]) -> Tuple[float, float]:
    """Cartesian vector to spherical coordinates (longitude, latitude)."""
    x, y, z = v
    d2 = x * x + y * y
    a = 0.0 if d2 == 0.0 else math.atan2(y, x)
    b = 0.0 if z == 0.0 else math.atan2(z, math.sqrt(d2))
    return a, b


def dvdv(va: Sequence[float], vb: Sequence[float]) -> float:
    """Scalar product of two 3-vectors."""
    return sum(p * q for p, q in zip(va, vb))


def dvxv(va: Sequence[float], vb: Sequence[float]) -> Vector:
    """Vector product of two 3-vectors."""
    xa, ya, za = va
    xb, yb, zb = vb
    return (ya * zb - za * yb, za * xb - xa * zb, xa * yb - ya * xb)


def _modulus(v: Sequence[float]) -> float:
    return math.sqrt(dvdv(v, v))


def dvn(v: Sequence[float]) -> Tuple[Vector, float]:
    """Normalise a 3-vector, returning the unit vector and the modulus.

    A zero vector gives a zero unit vector and a zero modulus.
    """
    vm = _modulus(v)
    if vm == 0.0:
        return (0.0, 0.0, 0.0), 0.0
    x, y, z = v
    return (x / vm, y / vm, z / vm), vm


def dmxv(dm: Sequence[Sequence[float]], va: Sequence[float]) -> Vector:
    """Forward transformation: matrix times vector."""
    r0, r1, r2 = (dvdv(row, va) for row in dm)
    return (r0, r1, r2)


def _transpose(m: Sequence[Sequence[float]]) -> Matrix:
    c0, c1, c2 = (tuple(col) for col in zip(*m))
    return (c0, c1, c2)


def dimxv(dm: Sequence[Sequence[float]], va: Sequence[float]) -> Vector:
    """Backward transformation: transpose of the matrix times vector."""
    return dmxv(_transpose(dm), va)


def dmxm(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """Product of two 3x3 matrices, ``a`` times ``b``."""
    cols = _transpose(b)
    r0, r1, r2 = (tuple(dvdv(row, col) for col in cols) for row in a)
    return (r0, r1, r2)


def dav2m(axvec: Sequence[float]) -> Matrix:
    """Rotation matrix corresponding to an axial vector (radians)."""
    x, y, z = axvec
    phi = math.sqrt(x * x + y * y + z * z)
    s = math.sin(phi)
    c = math.cos(phi)
    f = 1.0 - c
    if phi > 0.0:
        x /= phi
        y /= phi
        z /= phi
    return (
        (x * x * f + c, x * y * f + z * s, x * z * f - y * s),
        (y * x * f - z * s, y * y * f + c, y * z * f + x * s),
        (z * x * f + y * s, z * y * f - x * s, z * z * f + c),
    )


def dm2av(rmat: Sequence[Sequence[float]]) -> Vector:
    """Axial vector (radians) corresponding to a rotation matrix."""
    x = rmat[1][2] - rmat[2][1]
    y = rmat[2][0] - rmat[0][2]
    z = rmat[0][1] - rmat[1][0]
    s2 = math.sqrt(x * x + y * y + z * z)
    if s2 <= 0.0:
        return (0.0, 0.0, 0.0)
    c2 = rmat[0][0] + rmat[1][1] + rmat[2][2] - 1.0
    f = math.atan2(s2, c2) / s2
    return (x * f, y * f, z * f)


def dranrm(angle: float) -> float:
    """Normalise an angle into the range 0 to 2 pi."""
    w = math.fmod(angle, D2PI)
    if w < 0.0:
        w += D2PI
    return w


def dsepv(v1: Sequence[float], v2: Sequence[float]) -> float:
    """Angle in radians between two vectors; always non-negative."""
    ss = _modulus(dvxv(v1, v2))
    cs = dvdv(v1, v2)
    if ss == 0.0 and cs == 0.0:
        return 0.0
    return math.atan2(ss, cs)


def dsep(a1: float, b1: float, a2: float, b2: float) -> float:
    """Angle in radians between two points given in spherical coordinates."""
    return dsepv(dcs2c(a1, b1), dcs2c(a2, b2))


def dbear(a1: float, b1: float, a2: float, b2: float) -> float:
    """Bearing of point 2 as seen from point 1, in the range +/- pi.

    Due east gives +pi/2; coincident points give zero.
    """
    dl = a2 - a1
    y = math.sin(dl) * math.cos(b2)
    x = math.sin(b2) * math.cos(b1) - math.cos(b2) * math.sin(b1) * math.cos(dl)
    if x == 0.0 and y == 0.0:
        return 0.0
    return math.atan2(y, x)


def dpav(v1: Sequence[float], v2: Sequence[float]) -> float:
    """Position angle of direction ``v2`` with respect to direction ``v1``."""
    au, am = dvn(v1)
    bm = _modulus(v2)
    if am == 0.0 or bm == 0.0:
        st, ct = 0.0, 1.0
    else:
        xa, ya, za = v1
        eta = (-xa * za, -ya * za, xa * xa + ya * ya)
        xi = dvxv(eta, au)
        a2b = tuple(q - p for p, q in zip(v1, v2))
        st = dvdv(a2b, xi)
        ct = dvdv(a2b, eta)
        if st == 0.0 and ct == 0.0:
            ct = 1.0
    return math.atan2(st, ct)


def pa(ha: float, dec: float, phi: float) -> float:
    """Parallactic angle from hour angle, declination and latitude (radians)."""
    cp = math.cos(phi)
    sqsz = cp * math.sin(ha)
    cqsz = math.sin(phi) * math.cos(dec) - cp * math.sin(dec) * math.cos(ha)
    if sqsz == 0.0 and cqsz == 0.0:
        cqsz = 1.0
    return math.atan2(sqsz, cqsz)