import math

import pytest

from pal.stationdata import Observatory, station_table


def _by_ident(ident):
    return next(s for s in station_table() if s.ident == ident)


def _dms(d, m, s):
    return math.radians(d + m / 60.0 + s / 3600.0)


def test_first_and_last_entries():
    table = station_table()
    assert table[0].ident == "AAT"
    assert table[0].name == "Anglo-Australian 3.9m Telescope"
    assert table[-1].ident == "NOEMA"


def test_table_size():
    assert len(station_table()) == 87


def test_identifiers_unique_and_short():
    idents = [s.ident for s in station_table()]
    assert len(set(idents)) == len(idents)
    assert all(len(i) <= 10 and " " not in i for i in idents)


def test_names_fit_forty_characters():
    assert all(0 < len(s.name) <= 40 for s in station_table())


def test_coordinates_in_range():
    for s in station_table():
        assert -math.pi <= s.w <= math.pi
        assert -math.pi / 2 <= s.p <= math.pi / 2
        assert s.h > 0.0


def test_jcmt_west_and_north_positive():
    jcmt = _by_ident("JCMT")
    assert jcmt.name == "JCMT 15 metre"
    assert jcmt.h == 4124.75
    assert jcmt.w == pytest.approx(_dms(155, 28, 37.30), abs=1e-12)
    assert jcmt.p == pytest.approx(_dms(19, 49, 22.22), abs=1e-12)


def test_aat_east_and_south_negative():
    aat = _by_ident("AAT")
    assert aat.h == 1164.0
    assert aat.w == pytest.approx(-_dms(149, 3, 57.91), abs=1e-12)
    assert aat.p == pytest.approx(-_dms(31, 16, 37.34), abs=1e-12)


def test_duplicate_site_coordinates():
    kpno = _by_ident("KPNO90")
    steward = _by_ident("STEWARD90")
    assert (kpno.w, kpno.p, kpno.h) == (steward.w, steward.p, steward.h)
    assert kpno.name != steward.name


def test_observatory_is_frozen():
    station = station_table()[0]
    with pytest.raises(AttributeError):
        station.h = 0.0  # type: ignore[misc]
    assert station.h == 1164.0
    assert station_table()[0].h == 1164.0


def test_observatory_equality():
    a = Observatory("X", "Test", 0.1, 0.2, 3.0)
    b = Observatory("X", "Test", 0.1, 0.2, 3.0)
    assert a == b