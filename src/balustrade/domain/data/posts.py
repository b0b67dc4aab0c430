"""PS1 spacing tables for post systems (Resolute and Vortex).

Both tables are generated from compact schedules. Resolute posts use a base
edge distance of 500mm which clamp rules may reduce; Vortex posts sit between
panels and carry no edge distance.
"""

from __future__ import annotations

from ._build import RowTuple, build_rows

RESOLUTE_EDGE_MM = 500
RESOLUTE_THICKNESSES = (10.0, 11.2, 12.0, 13.2, 13.52, 15.0, 17.2, 17.52)
# (hmin, hmax, internal)
RESOLUTE_BANDS = (
    (1000, 1400, 1650),
    (1400, 1600, 1500),
    (1600, 1800, 1150),
    (1800, 2000, 950),
)
_ZONES = ("L", "M", "H", "VH", "EH")
_SYSTEMS = ("balustrade", "pool")


def _resolute_entries() -> tuple[RowTuple, ...]:
    return tuple(
        (system, thickness, hmin, hmax, zone, internal, RESOLUTE_EDGE_MM)
        for system in _SYSTEMS
        for thickness in RESOLUTE_THICKNESSES
        for hmin, hmax, internal in RESOLUTE_BANDS
        for zone in _ZONES
    )


RESOLUTE_ROWS = build_rows(_resolute_entries())

_BALUSTRADE_HEIGHTS = (1000, 1100, 1200, 1300)
_POOL_HEIGHTS = (1200, 1250, 1300)

# (system, paired thicknesses, zones, ((height, internal), ...))
VORTEX_SCHEDULE = (
    # 8mm toughened / 11.2mm laminated
    ("balustrade", (8.0, 11.2), ("L", "M"), tuple(zip(_BALUSTRADE_HEIGHTS, (1500, 1400, 1300, 1200)))),
    ("balustrade", (8.0, 11.2), ("H",), tuple(zip(_BALUSTRADE_HEIGHTS, (1400, 1300, 1200, 1100)))),
    ("balustrade", (8.0, 11.2), ("VH",), tuple(zip(_BALUSTRADE_HEIGHTS, (1300, 1200, 1100, 1000)))),
    ("balustrade", (8.0, 11.2), ("EH",), ((1000, 1000), (1100, 900), (1200, 800))),
    # 10mm toughened / 13.2mm laminated
    ("balustrade", (10.0, 13.2), ("L", "M"), tuple(zip(_BALUSTRADE_HEIGHTS, (1700, 1600, 1500, 1400)))),
    ("balustrade", (10.0, 13.2), ("H",), tuple(zip(_BALUSTRADE_HEIGHTS, (1600, 1500, 1400, 1300)))),
    ("balustrade", (10.0, 13.2), ("VH",), tuple(zip(_BALUSTRADE_HEIGHTS, (1500, 1400, 1300, 1200)))),
    ("balustrade", (10.0, 13.2), ("EH",), ((1000, 1200), (1100, 1100), (1200, 1000))),
    # 12mm toughened / 13.52mm laminated
    ("balustrade", (12.0, 13.52), ("L", "M"), tuple(zip(_BALUSTRADE_HEIGHTS, (1900, 1800, 1700, 1600)))),
    ("balustrade", (12.0, 13.52), ("H",), tuple(zip(_BALUSTRADE_HEIGHTS, (1800, 1700, 1600, 1500)))),
    ("balustrade", (12.0, 13.52), ("VH",), tuple(zip(_BALUSTRADE_HEIGHTS, (1700, 1600, 1500, 1400)))),
    ("balustrade", (12.0, 13.52), ("EH",), ((1100, 1400), (1200, 1300), (1300, 1200))),
    # 15mm toughened / 17.52mm laminated, VH and EH only
    ("balustrade", (15.0, 17.52), ("VH",), ((1100, 1600), (1200, 1500), (1300, 1400))),
    ("balustrade", (15.0, 17.52), ("EH",), ((1100, 1500), (1200, 1400), (1300, 1300), (1400, 1100), (1500, 1000))),
    # Pool fence
    ("pool", (10.0, 13.2), ("L", "M"), tuple(zip(_POOL_HEIGHTS, (1500, 1450, 1400)))),
    ("pool", (10.0, 13.2), ("H",), tuple(zip(_POOL_HEIGHTS, (1400, 1350, 1300)))),
    ("pool", (10.0, 13.2), ("VH",), tuple(zip(_POOL_HEIGHTS, (1300, 1250, 1200)))),
    ("pool", (10.0, 13.2), ("EH",), tuple(zip(_POOL_HEIGHTS, (1000, 950, 900)))),
    ("pool", (12.0, 13.52), ("L", "M"), tuple(zip(_POOL_HEIGHTS, (1600, 1550, 1500)))),
    ("pool", (12.0, 13.52), ("H",), tuple(zip(_POOL_HEIGHTS, (1500, 1450, 1400)))),
    ("pool", (12.0, 13.52), ("VH",), tuple(zip(_POOL_HEIGHTS, (1400, 1350, 1300)))),
    ("pool", (12.0, 13.52), ("EH",), tuple(zip(_POOL_HEIGHTS, (1200, 1150, 1100)))),
)


def _vortex_entries() -> tuple[RowTuple, ...]:
    return tuple(
        (system, thickness, height, height, zone, internal, 0)
        for system, thicknesses, zones, heights in VORTEX_SCHEDULE
        for zone in zones
        for height, internal in heights
        for thickness in thicknesses
    )


VORTEX_ROWS = build_rows(_vortex_entries())
