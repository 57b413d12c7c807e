"""Look up parameters of selected ground-based observing stations."""

from typing import Optional, Tuple

from pal.stationdata import Observatory, station_table


class UnknownObservatoryError(LookupError):
    """No observing station matches the number or identifier given."""


def stations() -> Tuple[Observatory, ...]:
    """All known observing stations; station number ``n`` is element ``n - 1``."""
    return station_table()


def obs(n: int, c: Optional[str] = None) -> Observatory:
    """Parameters of an observing station.

    If ``n`` is positive it selects the station by number (counting from
    1) and ``c`` is ignored.  If ``n`` is zero the station is chosen by
    its identifier ``c``, compared case-insensitively.  The longitude in
    the result is west-positive.

    Raises UnknownObservatoryError if nothing matches.
    """
    table = station_table()

    if n > 0:
        if n <= len(table):
            return table[n - 1]
        raise UnknownObservatoryError(
            f"station number {n} is outside 1-{len(table)}"
        )

    if n < 0:
        raise UnknownObservatoryError(f"station number {n} is not valid")

    if c is None:
        raise UnknownObservatoryError("no station identifier given")

    wanted = c.casefold()
    match = next((tel for tel in table if tel.ident.casefold() == wanted), None)
    if match is None:
        raise UnknownObservatoryError(f"unknown observing station {c!r}")
    return match