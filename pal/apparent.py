"""Quick mean-to-apparent place transformations."""

import math
from dataclasses import dataclass
from typing import Sequence, Tuple, Union

from pal.constants import DAS2R
from pal.sphere import Matrix, Vector, dcc2s, dcs2c, dmxv, dranrm, dvdv, dvn

_VF = 0.210945028
"""Km/s to AU/year."""

_IDENTITY: Matrix = ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))
_ZERO: Vector = (0.0, 0.0, 0.0)


@dataclass(frozen=True)
class MeanToApparentParams:
    """Star-independent mean-to-apparent parameters.

    ``pm_interval`` is the time interval for proper motion (Julian years),
    ``earth_position`` the barycentric position of the Earth (AU),
    ``earth_helio_direction`` the heliocentric direction of the Earth
    (unit vector), ``deflection`` the Sun's Schwarzschild radius over the
    Sun-Earth distance, ``earth_velocity`` the barycentric Earth velocity
    in units of c, ``lorentz`` is sqrt(1-v^2) and ``npb`` the
    precession/nutation matrix.
    """

    pm_interval: float = 0.0
    earth_position: Vector = _ZERO
    earth_helio_direction: Vector = _ZERO
    deflection: float = 0.0
    earth_velocity: Vector = _ZERO
    lorentz: float = 1.0
    npb: Matrix = _IDENTITY

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> "MeanToApparentParams":
        """Build from the flat 21-element parameter layout."""
        v = tuple(float(x) for x in values)
        if len(v) != 21:
            raise ValueError(f"expected 21 parameters, got {len(v)}")
        return cls(
            pm_interval=v[0],
            earth_position=(v[1], v[2], v[3]),
            earth_helio_direction=(v[4], v[5], v[6]),
            deflection=v[7],
            earth_velocity=(v[8], v[9], v[10]),
            lorentz=v[11],
            npb=((v[12], v[13], v[14]), (v[15], v[16], v[17]), (v[18], v[19], v[20])),
        )


ParamsLike = Union[MeanToApparentParams, Sequence[float]]


def _as_params(amprms: ParamsLike) -> MeanToApparentParams:
    if isinstance(amprms, MeanToApparentParams):
        return amprms
    return MeanToApparentParams.from_sequence(amprms)


def _deflect(pn: Sequence[float], params: MeanToApparentParams) -> Vector:
    ehn = params.earth_helio_direction
    pde = dvdv(pn, ehn)
    w = params.deflection / max(pde + 1.0, 1.0e-5)
    x, y, z = (p + w * (e - pde * p) for p, e in zip(pn, ehn))
    return (x, y, z)


def _aberrate_and_rotate(
    p1: Sequence[float], dot_source: Sequence[float], params: MeanToApparentParams
) -> Tuple[float, float]:
    abv = params.earth_velocity
    ab1 = params.lorentz
    w = 1.0 + dvdv(dot_source, abv) / (ab1 + 1.0)
    p2 = tuple(ab1 * p + w * v for p, v in zip(p1, abv))
    ra, da = dcc2s(dmxv(params.npb, p2))
    return dranrm(ra), da


def mapqk(
    rm: float,
    dm: float,
    pr: float,
    pd: float,
    px: float,
    rv: float,
    amprms: ParamsLike,
) -> Tuple[float, float]:
    """Mean place to geocentric apparent place, with proper motion and parallax.

    ``pr`` and ``pd`` are proper motions (radians per Julian year, RA as
    dRA/dt), ``px`` the parallax (arcsec) and ``rv`` the radial velocity
    (km/s, receding positive).  Returns apparent (RA, Dec) in radians.
    """
    params = _as_params(amprms)
    pmt = params.pm_interval
    eb = params.earth_position

    q = dcs2c(rm, dm)

    pxr = px * DAS2R
    w = _VF * rv * pxr
    em = (
        -pr * q[1] - pd * math.cos(rm) * math.sin(dm) + w * q[0],
        pr * q[0] - pd * math.sin(rm) * math.sin(dm) + w * q[1],
        pd * math.cos(dm) + w * q[2],
    )

    p = tuple(qi + pmt * ei - pxr * bi for qi, ei, bi in zip(q, em, eb))
    pn, _ = dvn(p)

    p1 = _deflect(pn, params)
    return _aberrate_and_rotate(p1, p, params)


def mapqkz(rm: float, dm: float, amprms: ParamsLike) -> Tuple[float, float]:
    """Mean place to geocentric apparent place, assuming zero parallax and proper motion."""
    params = _as_params(amprms)
    p = dcs2c(rm, dm)
    p1 = _deflect(p, params)
    return _aberrate_and_rotate(p1, p1, params)