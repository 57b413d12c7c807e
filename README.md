# pal

Positional-astronomy routines in pure Python, with no dependencies
outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `pal.constants`: angle and time conversion constants (`DPI`, `D2PI`,
  `DAS2R`, `DS2R`, `MJD0`, `SPD` and others) and the helpers `dint`
  (truncate towards zero), `dnint` (round halves away from zero) and
  `dsign` (magnitude of one value with the sign of another).
- `pal.sphere`: vectors and spherical geometry. `dcs2c` and `dcc2s`
  convert between spherical coordinates and Cartesian vectors; `dvdv`,
  `dvxv` and `dvn` give scalar and vector products and normalisation;
  `dmxv`, `dimxv` and `dmxm` apply and multiply 3x3 matrices; `dav2m`
  and `dm2av` convert between axial vectors and rotation matrices.
  `dranrm` normalises an angle into 0 to 2 pi, `dsep` and `dsepv` give
  angular separations, `dbear` and `dpav` give bearings, and `pa` gives
  the parallactic angle.
- `pal.dates`: `cldj` converts a Gregorian date to a Modified Julian
  Date and `djcl` converts back to (year, month, day, fraction). `epb`,
  `epb2d`, `epj` and `epj2d` convert between MJD and Besselian or Julian
  epochs. Bad calendar input raises `CalendarError`, whose `status`
  tells which field was wrong; for a bad day the MJD is still available
  as `mjd`.
- `pal.sexagesimal`: `daf2r`, `dtf2d` and `dtf2r` convert degrees or
  hours, minutes and seconds to radians or days. `dd2tf`, `dr2af` and
  `dr2tf` go the other way and return a `SexagesimalParts` (sign, units,
  minutes, seconds, fraction). Fields out of range raise
  `SexagesimalRangeError`, which still carries the converted `value`.
- `pal.intin`: `intin(string, nstrt)` reads a free-format integer
  starting at a 1-based position and returns an `IntinResult` holding
  the `value`, the next start position `nstrt` and an `IntinFlag`
  (`NEGATIVE`, `POSITIVE`, `NULL` or `ERROR`).
- `pal.apparent`: `mapqk` (with proper motion and parallax) and
  `mapqkz` (without) convert a mean place to a geocentric apparent
  place. The star-independent parameters are given as a
  `MeanToApparentParams` or as a flat sequence of 21 numbers, which
  `MeanToApparentParams.from_sequence` also accepts.
- `pal.plate`: `invf` inverts a six-coefficient linear plate model and
  raises `ValueError` if it is singular. `pcd` applies pincushion or
  barrel distortion to a tangent-plane point.
- `pal.stationdata`: the `Observatory` record (`ident`, `name`, `w`,
  `p`, `h`) and `station_table()`, the fixed list of stations.
- `pal.observatories`: `obs(n, c)` looks up a station by number
  (counting from 1) or, with `n` equal to 0, by identifier compared
  without regard to case. `stations()` lists them all. An unknown
  station raises `UnknownObservatoryError`.

## Example

```python
from pal.observatories import obs
from pal.sphere import dsep, pa

jcmt = obs(0, "JCMT")
print(jcmt.name, jcmt.h)

print(dsep(0.0, 0.0, 0.1, 0.2))
print(pa(-1.567, 1.5123, 0.987))
```

Longitudes returned by `obs` (`Observatory.w`) are west-positive,
which is the astronomical convention. Change their sign where an
east-positive longitude is wanted.

## What is not included

The package does not compute the star-independent parameters for
`mapqk` and `mapqkz` from a date: there is no Earth ephemeris,
precession or nutation model here, so those parameters must be
supplied by the caller. There are no refraction, observed-place,
planetary or orbital-element routines, and no command-line program.