import math

import pytest

from pal.apparent import MeanToApparentParams, mapqk, mapqkz
from pal.sphere import dcs2c, dranrm, dsepv


def _flat(params_list):
    return list(params_list)


def _rotation_z(theta):
    c, s = math.cos(theta), math.sin(theta)
    return ((c, s, 0.0), (-s, c, 0.0), (0.0, 0.0, 1.0))


def _realistic():
    v = 1.0e-4
    return MeanToApparentParams(
        pm_interval=12.5,
        earth_position=(0.3, -0.8, 0.4),
        earth_helio_direction=(0.6, 0.0, 0.8),
        deflection=2.0e-8,
        earth_velocity=(0.0, v, 0.0),
        lorentz=math.sqrt(1.0 - v * v),
        npb=_rotation_z(0.01),
    )


def test_from_sequence_layout():
    values = [float(i) for i in range(21)]
    params = MeanToApparentParams.from_sequence(values)
    assert params.pm_interval == 0.0
    assert params.earth_position == (1.0, 2.0, 3.0)
    assert params.earth_helio_direction == (4.0, 5.0, 6.0)
    assert params.deflection == 7.0
    assert params.earth_velocity == (8.0, 9.0, 10.0)
    assert params.lorentz == 11.0
    assert params.npb == ((12.0, 13.0, 14.0), (15.0, 16.0, 17.0), (18.0, 19.0, 20.0))


@pytest.mark.parametrize("length", [0, 20, 22])
def test_from_sequence_wrong_length(length):
    with pytest.raises(ValueError):
        MeanToApparentParams.from_sequence([0.0] * length)


@pytest.mark.parametrize("rm,dm", [(0.5, 0.3), (-1.2, -0.7), (7.0, 1.2)])
def test_trivial_parameters_are_identity(rm, dm):
    params = MeanToApparentParams()
    ra, da = mapqkz(rm, dm, params)
    assert ra == pytest.approx(dranrm(rm), abs=1e-12)
    assert da == pytest.approx(dm, abs=1e-12)
    ra2, da2 = mapqk(rm, dm, 0.0, 0.0, 0.0, 0.0, params)
    assert ra2 == pytest.approx(dranrm(rm), abs=1e-12)
    assert da2 == pytest.approx(dm, abs=1e-12)


def test_rotation_matrix_shifts_ra():
    theta = 0.25
    params = MeanToApparentParams(npb=_rotation_z(theta))
    ra, da = mapqkz(1.0, 0.2, params)
    assert ra == pytest.approx(1.0 - theta, abs=1e-12)
    assert da == pytest.approx(0.2, abs=1e-12)


def test_sequence_and_params_agree():
    params = _realistic()
    flat = (
        [params.pm_interval, *params.earth_position, *params.earth_helio_direction,
         params.deflection, *params.earth_velocity, params.lorentz]
        + [x for row in params.npb for x in row]
    )
    assert mapqkz(2.0, -0.4, flat) == mapqkz(2.0, -0.4, params)
    assert mapqk(2.0, -0.4, 1e-7, 2e-7, 0.1, 20.0, flat) == mapqk(
        2.0, -0.4, 1e-7, 2e-7, 0.1, 20.0, params
    )


def test_mapqk_without_motion_matches_mapqkz():
    params = _realistic()
    ra1, da1 = mapqk(2.0, -0.4, 0.0, 0.0, 0.0, 0.0, params)
    ra2, da2 = mapqkz(2.0, -0.4, params)
    assert ra1 == pytest.approx(ra2, abs=1e-10)
    assert da1 == pytest.approx(da2, abs=1e-10)


def test_radial_velocity_needs_parallax():
    params = _realistic()
    base = mapqk(0.7, 0.1, 1e-6, 1e-6, 0.0, 0.0, params)
    moving = mapqk(0.7, 0.1, 1e-6, 1e-6, 0.0, 500.0, params)
    assert moving == base


def test_proper_motion_in_ra_on_equator():
    params = MeanToApparentParams(pm_interval=10.0)
    pr = 1.0e-7
    ra, da = mapqk(1.0, 0.0, pr, 0.0, 0.0, 0.0, params)
    assert ra == pytest.approx(1.0 + pr * 10.0, abs=1e-12)
    assert da == pytest.approx(0.0, abs=1e-12)


def test_proper_motion_in_dec():
    params = MeanToApparentParams(pm_interval=10.0)
    pd = 1.0e-7
    ra, da = mapqk(1.0, 0.3, 0.0, pd, 0.0, 0.0, params)
    assert ra == pytest.approx(1.0, abs=1e-12)
    assert da == pytest.approx(0.3 + pd * 10.0, abs=1e-12)


def test_aberration_shifts_towards_apex():
    v = 1.0e-4
    params = MeanToApparentParams(
        earth_velocity=(v, 0.0, 0.0), lorentz=math.sqrt(1.0 - v * v)
    )
    ra, da = mapqkz(math.pi / 2, 0.0, params)
    assert ra == pytest.approx(math.pi / 2 - v, abs=1e-8)
    assert da == pytest.approx(0.0, abs=1e-12)


def test_light_deflection_moves_star_away_from_sun():
    ehn = (1.0, 0.0, 0.0)
    sun = (-1.0, 0.0, 0.0)
    params = MeanToApparentParams(earth_helio_direction=ehn, deflection=1.0e-6)
    rm, dm = 2.5, 0.2
    ra, da = mapqkz(rm, dm, params)
    before = dsepv(dcs2c(rm, dm), sun)
    after = dsepv(dcs2c(ra, da), sun)
    assert after > before


def test_parallax_shifts_away_from_earth_position():
    params = MeanToApparentParams(earth_position=(1.0, 0.0, 0.0))
    ra, da = mapqk(math.pi / 2, 0.0, 0.0, 0.0, 1.0, 0.0, params)
    assert ra > math.pi / 2
    assert da == pytest.approx(0.0, abs=1e-12)


def test_ra_is_normalised():
    params = _realistic()
    for rm in (-3.0, 0.0, 6.5, 12.0):
        ra, _ = mapqkz(rm, 0.1, params)
        assert 0.0 <= ra < 2.0 * math.pi