import pytest

from pal.dates import CalendarError, cldj, djcl, epb, epb2d, epj, epj2d


def test_cldj_j2000_day():
    assert cldj(2000, 1, 1) == 51544.0


def test_cldj_mjd_origin():
    assert cldj(1858, 11, 17) == 0.0


def test_cldj_consecutive_days_differ_by_one():
    assert cldj(2012, 3, 1) - cldj(2012, 2, 29) == 1.0
    assert cldj(2013, 1, 1) - cldj(2012, 12, 31) == 1.0


def test_cldj_bad_year():
    with pytest.raises(CalendarError) as info:
        cldj(-4800, 1, 1)
    assert info.value.status == -1


@pytest.mark.parametrize("month", [0, 13])
def test_cldj_bad_month(month):
    with pytest.raises(CalendarError) as info:
        cldj(2000, month, 1)
    assert info.value.status == -2


def test_cldj_bad_day_still_gives_mjd():
    with pytest.raises(CalendarError) as info:
        cldj(1900, 2, 29)
    assert info.value.status == -3
    assert info.value.mjd == cldj(1900, 3, 1)


def test_cldj_leap_day_2000_is_valid():
    assert cldj(2000, 2, 29) + 1.0 == cldj(2000, 3, 1)


@pytest.mark.parametrize(
    "date",
    [(2000, 1, 1), (1858, 11, 17), (1999, 12, 31), (2024, 2, 29), (1600, 3, 1)],
)
def test_djcl_round_trip(date):
    iy, im, id_, fd = djcl(cldj(*date))
    assert (iy, im, id_) == date
    assert fd == 0.0


def test_djcl_fraction():
    mjd = cldj(2010, 6, 15) + 0.25
    iy, im, id_, fd = djcl(mjd)
    assert (iy, im, id_) == (2010, 6, 15)
    assert fd == pytest.approx(0.25, abs=1e-12)


@pytest.mark.parametrize("mjd", [-2500000.0, 2e9])
def test_djcl_out_of_range(mjd):
    with pytest.raises(CalendarError) as info:
        djcl(mjd)
    assert info.value.status == -1


def test_epj_j2000():
    assert epj(51544.5) == pytest.approx(2000.0, abs=1e-12)
    assert epj2d(2000.0) == 51544.5


def test_epb2d_b1900():
    assert epb2d(1900.0) == pytest.approx(15019.81352, abs=1e-9)


@pytest.mark.parametrize("epoch", [1850.0, 1950.0, 2000.0, 2100.5])
def test_epb_round_trip(epoch):
    assert epb(epb2d(epoch)) == pytest.approx(epoch, abs=1e-9)


@pytest.mark.parametrize("epoch", [1850.0, 1950.0, 2000.0, 2100.5])
def test_epj_round_trip(epoch):
    assert epj(epj2d(epoch)) == pytest.approx(epoch, abs=1e-9)


def test_epj_one_year_is_julian_year():
    assert epj2d(2001.0) - epj2d(2000.0) == pytest.approx(365.25, abs=1e-9)