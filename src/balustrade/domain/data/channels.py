"""PS1 tables for continuous glass channels.

Smart Lock top and side fix share one table. An internal value of 400 marks a
permitted combination and 999 a disallowed one; edge values are the channel
overhang.
"""

from __future__ import annotations

from ._build import build_rows

_EDGE_BALUSTRADE = 250
_EDGE_POOL = 500
_OK = 400

SMARTLOCK_ROWS = build_rows((
    # Balustrade: 12 mm
    ("balustrade", 12.0, 1000, 1350, "L", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 12.0, 1000, 1350, "M", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 12.0, 1000, 1350, "H", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 12.0, 1000, 1200, "VH", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 12.0, 1000, 1100, "EH", _OK, _EDGE_BALUSTRADE),
    # Balustrade: 13.52 mm (same as 12 except VH up to 1250)
    ("balustrade", 13.52, 1000, 1350, "L", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 13.52, 1000, 1350, "M", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 13.52, 1000, 1350, "H", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 13.52, 1000, 1250, "VH", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 13.52, 1000, 1100, "EH", _OK, _EDGE_BALUSTRADE),
    # Balustrade: 15 mm
    ("balustrade", 15.0, 1000, 1600, "L", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 15.0, 1000, 1600, "M", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 15.0, 1000, 1600, "H", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 15.0, 1000, 1400, "VH", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 15.0, 1150, 1300, "EH", _OK, _EDGE_BALUSTRADE),
    # Balustrade: 17.52 mm (same as 15)
    ("balustrade", 17.52, 1000, 1600, "L", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 17.52, 1000, 1600, "M", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 17.52, 1000, 1600, "H", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 17.52, 1000, 1400, "VH", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 17.52, 1150, 1300, "EH", _OK, _EDGE_BALUSTRADE),
    # Pool: 12 mm (EH not permitted)
    ("pool", 12.0, 1200, 1250, "L", _OK, _EDGE_POOL),
    ("pool", 12.0, 1200, 1250, "M", _OK, _EDGE_POOL),
    ("pool", 12.0, 1200, 1250, "H", _OK, _EDGE_POOL),
    ("pool", 12.0, 1200, 1250, "VH", _OK, _EDGE_POOL),
    # No EH row for 12 mm pool (disallowed)
    # Pool: 15 mm
    ("pool", 15.0, 1200, 1250, "L", _OK, _EDGE_POOL),
    ("pool", 15.0, 1200, 1250, "M", _OK, _EDGE_POOL),
    ("pool", 15.0, 1200, 1250, "H", _OK, _EDGE_POOL),
    ("pool", 15.0, 1200, 1250, "VH", _OK, _EDGE_POOL),
    ("pool", 15.0, 1200, 1250, "EH", _OK, _EDGE_POOL),
))

LUGANO_ROWS = build_rows((
    # Balustrade: all thicknesses allowed up to 1100 mm in all zones
    ("balustrade", 12.0, 1000, 1100, "L", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 12.0, 1000, 1100, "M", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 12.0, 1000, 1100, "H", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 12.0, 1000, 1100, "VH", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 12.0, 1000, 1100, "EH", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 13.52, 1000, 1100, "L", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 13.52, 1000, 1100, "M", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 13.52, 1000, 1100, "H", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 13.52, 1000, 1100, "VH", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 13.52, 1000, 1100, "EH", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 15.0, 1000, 1100, "L", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 15.0, 1000, 1100, "M", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 15.0, 1000, 1100, "H", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 15.0, 1000, 1100, "VH", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 15.0, 1000, 1100, "EH", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 17.52, 1000, 1100, "L", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 17.52, 1000, 1100, "M", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 17.52, 1000, 1100, "H", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 17.52, 1000, 1100, "VH", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 17.52, 1000, 1100, "EH", _OK, _EDGE_BALUSTRADE),
    # Pool limits (12/15/17.52) - L: 1200-1300, M/H: 1200-1250, VH/EH: 1200
    ("pool", 12.0, 1200, 1300, "L", _OK, _EDGE_POOL),
    ("pool", 12.0, 1200, 1250, "M", _OK, _EDGE_POOL),
    ("pool", 12.0, 1200, 1250, "H", _OK, _EDGE_POOL),
    ("pool", 12.0, 1200, 1200, "VH", _OK, _EDGE_POOL),
    ("pool", 12.0, 1200, 1200, "EH", _OK, _EDGE_POOL),
    ("pool", 15.0, 1200, 1300, "L", _OK, _EDGE_POOL),
    ("pool", 15.0, 1200, 1250, "M", _OK, _EDGE_POOL),
    ("pool", 15.0, 1200, 1250, "H", _OK, _EDGE_POOL),
    ("pool", 15.0, 1200, 1200, "VH", _OK, _EDGE_POOL),
    ("pool", 15.0, 1200, 1200, "EH", _OK, _EDGE_POOL),
    ("pool", 17.52, 1200, 1300, "L", _OK, _EDGE_POOL),
    ("pool", 17.52, 1200, 1250, "M", _OK, _EDGE_POOL),
    ("pool", 17.52, 1200, 1250, "H", _OK, _EDGE_POOL),
    ("pool", 17.52, 1200, 1200, "VH", _OK, _EDGE_POOL),
    ("pool", 17.52, 1200, 1200, "EH", _OK, _EDGE_POOL),
))

VISTA_ROWS = build_rows((
    # Balustrade 12 mm: L/M 1000-1250, H 1000-1150, VH/EH 1000-1100
    ("balustrade", 12.0, 1000, 1250, "L", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 12.0, 1000, 1250, "M", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 12.0, 1000, 1150, "H", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 12.0, 1000, 1100, "VH", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 12.0, 1000, 1100, "EH", _OK, _EDGE_BALUSTRADE),
    # Balustrade 13.52 mm: L/M/H 1000-1300, VH 1000-1250, EH 1000-1100
    ("balustrade", 13.52, 1000, 1300, "L", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 13.52, 1000, 1300, "M", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 13.52, 1000, 1300, "H", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 13.52, 1000, 1250, "VH", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 13.52, 1000, 1100, "EH", _OK, _EDGE_BALUSTRADE),
    # Balustrade 15/17.52 mm: L/M/H/VH 1000-1400, EH 1150-1300
    ("balustrade", 15.0, 1000, 1400, "L", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 15.0, 1000, 1400, "M", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 15.0, 1000, 1400, "H", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 15.0, 1000, 1400, "VH", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 15.0, 1150, 1300, "EH", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 17.52, 1000, 1400, "L", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 17.52, 1000, 1400, "M", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 17.52, 1000, 1400, "H", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 17.52, 1000, 1400, "VH", _OK, _EDGE_BALUSTRADE),
    ("balustrade", 17.52, 1150, 1300, "EH", _OK, _EDGE_BALUSTRADE),
    # Pool 12 mm: L/M 1200-1350; H 1200-1250; VH 1200; EH not permitted
    ("pool", 12.0, 1200, 1350, "L", _OK, _EDGE_POOL),
    ("pool", 12.0, 1200, 1350, "M", _OK, _EDGE_POOL),
    ("pool", 12.0, 1200, 1250, "H", _OK, _EDGE_POOL),
    ("pool", 12.0, 1200, 1200, "VH", _OK, _EDGE_POOL),
    # 12 mm EH: none
    # Pool 15 mm: L/M 1200-1500; H 1200-1400; VH/EH 1200-1300
    ("pool", 15.0, 1200, 1500, "L", _OK, _EDGE_POOL),
    ("pool", 15.0, 1200, 1500, "M", _OK, _EDGE_POOL),
    ("pool", 15.0, 1200, 1400, "H", _OK, _EDGE_POOL),
    ("pool", 15.0, 1200, 1300, "VH", _OK, _EDGE_POOL),
    ("pool", 15.0, 1200, 1300, "EH", _OK, _EDGE_POOL),
))
