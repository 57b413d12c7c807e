"""Table of selected ground-based observing stations."""

from dataclasses import dataclass
from typing import Tuple

from pal.constants import DAS2R


@dataclass(frozen=True)
class Observatory:
    """An observing station.

    ``w`` is the longitude (radians, west positive), ``p`` the geodetic
    latitude (radians, north positive) and ``h`` the height above sea
    level (metres).
    """

    ident: str
    name: str
    w: float
    p: float
    h: float


def _west(deg: int, amin: int, asec: float) -> float:
    return DAS2R * ((60.0 * (60.0 * float(deg) + float(amin))) + float(asec))


def _east(deg: int, amin: int, asec: float) -> float:
    return -1.0 * _west(deg, amin, asec)


_north = _west
_south = _east


_STATIONS: Tuple[Observatory, ...] = (
    Observatory("AAT", "Anglo-Australian 3.9m Telescope",
                _east(149, 3, 57.91), _south(31, 16, 37.34), 1164.0),
    Observatory("LPO4.2", "William Herschel 4.2m Telescope",
                _west(17, 52, 53.9), _north(28, 45, 38.1), 2332.0),
    Observatory("LPO2.5", "Isaac Newton 2.5m Telescope",
                _west(17, 52, 39.5), _north(28, 45, 43.2), 2336.0),
    Observatory("LPO1", "Jacobus Kapteyn 1m Telescope",
                _west(17, 52, 41.2), _north(28, 45, 39.9), 2364.0),
    Observatory("LICK120", "Lick 120 inch",
                _west(121, 38, 13.689), _north(37, 20, 34.931), 1286.0),
    Observatory("MMT", "MMT 6.5m, Mt Hopkins",
                _west(110, 53, 4.4), _north(31, 41, 19.6), 2608.0),
    Observatory("DAO72", "DAO Victoria BC 1.85 metre",
                _west(123, 25, 1.18), _north(48, 31, 11.9), 238.0),
    Observatory("DUPONT", "Du Pont 2.5m Telescope, Las Campanas",
                _west(70, 42, 9.0), _south(29, 0, 11.0), 2280.0),
    Observatory("MTHOP1.5", "Mt Hopkins 1.5 metre",
                _west(110, 52, 39.00), _north(31, 40, 51.4), 2344.0),
    Observatory("STROMLO74", "Mount Stromlo 74 inch",
                _east(149, 0, 27.59), _south(35, 19, 14.3), 767.0),
    Observatory("ANU2.3", "Siding Spring 2.3 metre",
                _east(149, 3, 40.3), _south(31, 16, 24.1), 1149.0),
    Observatory("GBVA140", "Greenbank 140 foot",
                _west(79, 50, 9.61), _north(38, 26, 15.4), 881.0),
    Observatory("TOLOLO4M", "Cerro Tololo 4 metre",
                _west(70, 48, 53.6), _south(30, 9, 57.8), 2235.0),
    Observatory("TOLOLO1.5M", "Cerro Tololo 1.5 metre",
                _west(70, 48, 54.5), _south(30, 9, 56.3), 2225.0),
    Observatory("TIDBINBLA", "Tidbinbilla 64 metre",
                _east(148, 58, 48.20), _south(35, 24, 14.3), 670.0),
    Observatory("BLOEMF", "Bloemfontein 1.52 metre",
                _east(26, 24, 18.0), _south(29, 2, 18.0), 1387.0),
    Observatory("BOSQALEGRE", "Bosque Alegre 1.54 metre",
                _west(64, 32, 48.0), _south(31, 35, 53.0), 1250.0),
    Observatory("FLAGSTF61", "USNO 61 inch astrograph, Flagstaff",
                _west(111, 44, 23.6), _north(35, 11, 2.5), 2316.0),
    Observatory("LOWELL72", "Perkins 72 inch, Lowell",
                _west(111, 32, 9.3), _north(35, 5, 48.6), 2198.0),
    Observatory("HARVARD", "Harvard College Observatory 1.55m",
                _west(71, 33, 29.32), _north(42, 30, 19.0), 185.0),
    Observatory("OKAYAMA", "Okayama 1.88 metre",
                _east(133, 35, 47.29), _north(34, 34, 26.1), 372.0),
    Observatory("KPNO158", "Kitt Peak 158 inch",
                _west(111, 35, 57.61), _north(31, 57, 50.3), 2120.0),
    Observatory("KPNO90", "Kitt Peak 90 inch",
                _west(111, 35, 58.24), _north(31, 57, 46.9), 2071.0),
    Observatory("KPNO84", "Kitt Peak 84 inch",
                _west(111, 35, 51.56), _north(31, 57, 29.2), 2096.0),
    Observatory("KPNO36FT", "Kitt Peak 36 foot",
                _west(111, 36, 51.12), _north(31, 57, 12.1), 1939.0),
    Observatory("KOTTAMIA", "Kottamia 74 inch",
                _east(31, 49, 30.0), _north(29, 55, 54.0), 476.0),
    Observatory("ESO3.6", "ESO 3.6 metre",
                _west(70, 43, 36.0), _south(29, 15, 36.0), 2428.0),
    Observatory("MAUNAK88", "Mauna Kea 88 inch",
                _west(155, 28, 9.96), _north(19, 49, 22.77), 4213.6),
    Observatory("UKIRT", "UK Infra Red Telescope",
                _west(155, 28, 13.18), _north(19, 49, 20.75), 4198.5),
    Observatory("QUEBEC1.6", "Quebec 1.6 metre",
                _west(71, 9, 9.7), _north(45, 27, 20.6), 1114.0),
    Observatory("MTEKAR", "Mt Ekar 1.82 metre",
                _east(11, 34, 15.0), _north(45, 50, 48.0), 1365.0),
    Observatory("MTLEMMON60", "Mt Lemmon 60 inch",
                _west(110, 42, 16.9), _north(32, 26, 33.9), 2790.0),
    Observatory("MCDONLD2.7", "McDonald 2.7 metre",
                _west(104, 1, 17.60), _north(30, 40, 17.7), 2075.0),
    Observatory("MCDONLD2.1", "McDonald 2.1 metre",
                _west(104, 1, 20.10), _north(30, 40, 17.7), 2075.0),
    Observatory("PALOMAR200", "Palomar 200 inch",
                _west(116, 51, 50.0), _north(33, 21, 22.0), 1706.0),
    Observatory("PALOMAR60", "Palomar 60 inch",
                _west(116, 51, 31.0), _north(33, 20, 56.0), 1706.0),
    Observatory("DUNLAP74", "David Dunlap 74 inch",
                _west(79, 25, 20.0), _north(43, 51, 46.0), 244.0),
    Observatory("HPROV1.93", "Haute Provence 1.93 metre",
                _east(5, 42, 46.75), _north(43, 55, 53.3), 665.0),
    Observatory("HPROV1.52", "Haute Provence 1.52 metre",
                _east(5, 42, 43.82), _north(43, 56, 0.2), 667.0),
    Observatory("SANPM83", "San Pedro Martir 83 inch",
                _west(115, 27, 47.0), _north(31, 2, 38.0), 2830.0),
    Observatory("SAAO74", "Sutherland 74 inch",
                _east(20, 48, 44.3), _south(32, 22, 43.4), 1771.0),
    Observatory("TAUTNBG", "Tautenburg 2 metre",
                _east(11, 42, 45.0), _north(50, 58, 51.0), 331.0),
    Observatory("CATALINA61", "Catalina 61 inch",
                _west(110, 43, 55.1), _north(32, 25, 0.7), 2510.0),
    Observatory("STEWARD90", "Steward 90 inch",
                _west(111, 35, 58.24), _north(31, 57, 46.9), 2071.0),
    Observatory("USSR6", "USSR 6 metre",
                _east(41, 26, 30.0), _north(43, 39, 12.0), 2100.0),
    Observatory("ARECIBO", "Arecibo 1000 foot",
                _west(66, 45, 11.1), _north(18, 20, 36.6), 496.0),
    Observatory("CAMB5KM", "Cambridge 5km",
                _east(0, 2, 37.23), _north(52, 10, 12.2), 17.0),
    Observatory("CAMB1MILE", "Cambridge 1 mile",
                _east(0, 2, 21.64), _north(52, 9, 47.3), 17.0),
    Observatory("EFFELSBERG", "Effelsberg 100 metre",
                _east(6, 53, 1.5), _north(50, 31, 28.6), 366.0),
    Observatory("(R.I.P.)", "Greenbank 300 foot",
                _west(79, 50, 56.36), _north(38, 25, 46.3), 894.0),
    Observatory("JODRELL1", "Jodrell Bank 250 foot",
                _west(2, 18, 25.0), _north(53, 14, 10.5), 78.0),
    Observatory("PARKES", "Parkes 64 metre",
                _east(148, 15, 44.3591), _south(32, 59, 59.8657), 391.79),
    Observatory("VLA", "Very Large Array",
                _west(107, 37, 3.82), _north(34, 4, 43.5), 2124.0),
    Observatory("SUGARGROVE", "Sugar Grove 150 foot",
                _west(79, 16, 23.0), _north(38, 31, 14.0), 705.0),
    Observatory("USSR600", "USSR 600 foot",
                _east(41, 35, 25.5), _north(43, 49, 32.0), 973.0),
    Observatory("NOBEYAMA", "Nobeyama 45 metre",
                _east(138, 29, 12.0), _north(35, 56, 19.0), 1350.0),
    Observatory("JCMT", "JCMT 15 metre",
                _west(155, 28, 37.30), _north(19, 49, 22.22), 4124.75),
    Observatory("ESONTT", "ESO 3.5 metre NTT",
                _west(70, 43, 7.0), _south(29, 15, 30.0), 2377.0),
    Observatory("ST.ANDREWS", "St Andrews",
                _west(2, 48, 52.5), _north(56, 20, 12.0), 30.0),
    Observatory("APO3.5", "Apache Point 3.5m",
                _west(105, 49, 11.56), _north(32, 46, 48.96), 2809.0),
    Observatory("KECK1", "Keck 10m Telescope #1",
                _west(155, 28, 28.99), _north(19, 49, 33.41), 4160.0),
    Observatory("TAUTSCHM", "Tautenberg 1.34 metre Schmidt",
                _east(11, 42, 45.0), _north(50, 58, 51.0), 331.0),
    Observatory("PALOMAR48", "Palomar 48-inch Schmidt",
                _west(116, 51, 32.0), _north(33, 21, 26.0), 1706.0),
    Observatory("UKST", "UK 1.2 metre Schmidt, Siding Spring",
                _east(149, 4, 12.8), _south(31, 16, 27.8), 1145.0),
    Observatory("KISO", "Kiso 1.05 metre Schmidt, Japan",
                _east(137, 37, 42.2), _north(35, 47, 38.7), 1130.0),
    Observatory("ESOSCHM", "ESO 1 metre Schmidt, La Silla",
                _west(70, 43, 46.5), _south(29, 15, 25.8), 2347.0),
    Observatory("ATCA", "Australia Telescope Compact Array",
                _east(149, 33, 0.500), _south(30, 18, 46.385), 236.9),
    Observatory("MOPRA", "ATNF Mopra Observatory",
                _east(149, 5, 58.732), _south(31, 16, 4.451), 850.0),
    Observatory("SUBARU", "Subaru 8m telescope",
                _west(155, 28, 33.67), _north(19, 49, 31.81), 4163.0),
    Observatory("CFHT", "Canada-France-Hawaii 3.6m Telescope",
                _west(155, 28, 7.95), _north(19, 49, 30.91), 4204.1),
    Observatory("KECK2", "Keck 10m Telescope #2",
                _west(155, 28, 27.24), _north(19, 49, 35.62), 4159.6),
    Observatory("GEMININ", "Gemini North 8-m telescope",
                _west(155, 28, 8.57), _north(19, 49, 25.69), 4213.4),
    Observatory("FCRAO", "Five College Radio Astronomy Obs",
                _west(72, 20, 42.0), _north(42, 23, 30.0), 314.0),
    Observatory("IRTF", "NASA IR Telescope Facility, Mauna Kea",
                _west(155, 28, 19.20), _north(19, 49, 34.39), 4168.1),
    Observatory("CSO", "Caltech Sub-mm Observatory, Mauna Kea",
                _west(155, 28, 31.79), _north(19, 49, 20.78), 4080.0),
    Observatory("VLT1", "ESO VLT, Paranal, Chile: UT1",
                _west(70, 24, 11.642), _south(24, 37, 33.117), 2635.43),
    Observatory("VLT2", "ESO VLT, Paranal, Chile: UT2",
                _west(70, 24, 10.855), _south(24, 37, 31.465), 2635.43),
    Observatory("VLT3", "ESO VLT, Paranal, Chile: UT3",
                _west(70, 24, 9.896), _south(24, 37, 30.300), 2635.43),
    Observatory("VLT4", "ESO VLT, Paranal, Chile: UT4",
                _west(70, 24, 8.000), _south(24, 37, 31.000), 2635.43),
    Observatory("GEMINIS", "Gemini South 8-m telescope",
                _west(70, 44, 11.5), _south(30, 14, 26.7), 2738.0),
    Observatory("KOSMA3M", "KOSMA 3m telescope, Gornergrat",
                _east(7, 47, 3.48), _north(45, 58, 59.772), 3141.0),
    Observatory("MAGELLAN1", "Magellan 1, 6.5m, Las Campanas",
                _west(70, 41, 31.9), _south(29, 0, 51.7), 2408.0),
    Observatory("MAGELLAN2", "Magellan 2, 6.5m, Las Campanas",
                _west(70, 41, 33.5), _south(29, 0, 50.3), 2408.0),
    Observatory("APEX", "APEX 12m telescope, Llano de Chajnantor",
                _west(67, 45, 33.0), _south(23, 0, 20.8), 5105.0),
    Observatory("NANTEN2", "NANTEN2 4m telescope, Pampa la Bola",
                _west(67, 42, 8.0), _south(22, 57, 47.0), 4865.0),
    Observatory("IRAM30M", "IRAM 30m telescope, Pico Veleta",
                _west(3, 23, 55.51), _north(37, 4, 6.29), 2850.0),
    Observatory("NOEMA", "NOEMA interferometer, Plateau de Bure",
                _east(5, 54, 28.5), _north(44, 38, 2.0), 2550.0),
)


def station_table() -> Tuple[Observatory, ...]:
    """All known observing stations, in their fixed numbering order."""
    return _STATIONS