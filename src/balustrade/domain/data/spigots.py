"""PS1 spacing tables for base-fixed spigots.

Rows are (system, thickness, hmin, hmax, zone, internal, edge). Height bands
may overlap; lookups take the first containing row in table order.
"""

from __future__ import annotations

from ._build import build_rows

SP10_ROWS = build_rows((
    ("balustrade", 12.0, 1000, 1150, "L", 850, 200),
    ("balustrade", 12.0, 1150, 1200, "L", 700, 200),
    ("balustrade", 12.0, 1000, 1150, "M", 850, 200),
    ("balustrade", 12.0, 1150, 1200, "M", 700, 200),
    ("balustrade", 12.0, 1000, 1100, "H", 750, 200),
    ("balustrade", 12.0, 1100, 1200, "H", 600, 200),
    ("balustrade", 12.0, 1000, 1050, "VH", 750, 200),
    ("balustrade", 12.0, 1050, 1100, "VH", 600, 150),
    ("balustrade", 12.0, 1000, 1050, "EH", 600, 150),
    ("balustrade", 13.52, 1000, 1150, "L", 850, 200),
    ("balustrade", 13.52, 1150, 1200, "L", 700, 200),
    ("balustrade", 13.52, 1000, 1150, "M", 850, 200),
    ("balustrade", 13.52, 1150, 1200, "M", 700, 200),
    ("balustrade", 13.52, 1000, 1100, "H", 750, 200),
    ("balustrade", 13.52, 1100, 1200, "H", 600, 200),
    ("balustrade", 13.52, 1000, 1050, "VH", 750, 200),
    ("balustrade", 13.52, 1050, 1100, "VH", 600, 150),
    ("balustrade", 13.52, 1000, 1050, "EH", 600, 150),
    ("pool", 12.0, 1200, 1200, "L", 800, 300),
    ("pool", 12.0, 1200, 1200, "M", 800, 300),
    ("pool", 12.0, 1200, 1200, "H", 700, 300),
    ("pool", 12.0, 1200, 1200, "VH", 600, 200),
))

SP12_ROWS = build_rows((
    ("balustrade", 12.0, 1000, 1150, "L", 800, 250),
    ("balustrade", 12.0, 1150, 1200, "L", 750, 250),
    ("balustrade", 12.0, 1000, 1150, "M", 800, 250),
    ("balustrade", 12.0, 1150, 1200, "M", 750, 250),
    ("balustrade", 12.0, 1000, 1150, "H", 800, 250),
    ("balustrade", 12.0, 1150, 1200, "H", 750, 250),
    ("balustrade", 12.0, 1000, 1100, "VH", 800, 250),
    ("balustrade", 12.0, 1050, 1150, "VH", 750, 250),
    ("balustrade", 12.0, 1000, 1050, "EH", 800, 250),
    ("balustrade", 12.0, 1050, 1100, "EH", 750, 250),
    ("balustrade", 13.52, 1000, 1150, "L", 800, 250),
    ("balustrade", 13.52, 1150, 1200, "L", 750, 250),
    ("balustrade", 13.52, 1000, 1150, "M", 800, 250),
    ("balustrade", 13.52, 1150, 1200, "M", 750, 250),
    ("balustrade", 13.52, 1000, 1150, "H", 800, 250),
    ("balustrade", 13.52, 1150, 1200, "H", 750, 250),
    ("balustrade", 13.52, 1000, 1100, "VH", 800, 250),
    ("balustrade", 13.52, 1050, 1150, "VH", 750, 250),
    ("balustrade", 13.52, 1000, 1050, "EH", 800, 250),
    ("balustrade", 13.52, 1050, 1100, "EH", 750, 250),
    ("balustrade", 15.0, 1000, 1250, "L", 800, 250),
    ("balustrade", 15.0, 1250, 1300, "L", 750, 250),
    ("balustrade", 15.0, 1000, 1250, "M", 800, 250),
    ("balustrade", 15.0, 1250, 1300, "M", 750, 250),
    ("balustrade", 15.0, 1000, 1250, "H", 800, 250),
    ("balustrade", 15.0, 1250, 1300, "H", 750, 250),
    ("balustrade", 15.0, 1000, 1200, "VH", 800, 250),
    ("balustrade", 15.0, 1200, 1250, "VH", 750, 250),
    ("balustrade", 15.0, 1000, 1150, "EH", 800, 250),
    ("balustrade", 15.0, 1150, 1200, "EH", 750, 250),
    ("balustrade", 17.52, 1000, 1250, "L", 800, 250),
    ("balustrade", 17.52, 1250, 1300, "L", 750, 250),
    ("balustrade", 17.52, 1000, 1250, "M", 800, 250),
    ("balustrade", 17.52, 1250, 1300, "M", 750, 250),
    ("balustrade", 17.52, 1000, 1250, "H", 800, 250),
    ("balustrade", 17.52, 1250, 1300, "H", 750, 250),
    ("balustrade", 17.52, 1000, 1200, "VH", 800, 250),
    ("balustrade", 17.52, 1200, 1250, "VH", 750, 250),
    ("balustrade", 17.52, 1000, 1150, "EH", 800, 250),
    ("balustrade", 17.52, 1150, 1200, "EH", 750, 250),
    ("pool", 12.0, 1200, 1300, "L", 1000, 500),
    ("pool", 12.0, 1200, 1300, "M", 1000, 500),
    ("pool", 12.0, 1200, 1250, "H", 1000, 500),
    ("pool", 12.0, 1200, 1250, "VH", 800, 350),
    ("pool", 15.0, 1200, 1300, "L", 1000, 500),
    ("pool", 15.0, 1200, 1300, "M", 1000, 500),
    ("pool", 15.0, 1200, 1300, "H", 1000, 500),
    ("pool", 15.0, 1200, 1300, "VH", 800, 350),
    ("pool", 15.0, 1200, 1250, "EH", 700, 300),
    ("pool", 15.0, 1250, 1300, "EH", 600, 300),
))

SP13_ROWS = build_rows((
    ("balustrade", 12.0, 1000, 1050, "EH", 750, 200),
    ("balustrade", 12.0, 1000, 1100, "H", 800, 200),
    ("balustrade", 12.0, 1100, 1150, "H", 750, 200),
    ("balustrade", 12.0, 1000, 1150, "L", 800, 200),
    ("balustrade", 12.0, 1150, 1200, "L", 750, 200),
    ("balustrade", 12.0, 1000, 1150, "M", 800, 200),
    ("balustrade", 12.0, 1150, 1200, "M", 750, 200),
    ("balustrade", 12.0, 1000, 1050, "VH", 800, 200),
    ("balustrade", 12.0, 1050, 1100, "VH", 750, 200),
    ("balustrade", 13.52, 1000, 1050, "EH", 750, 200),
    ("balustrade", 13.52, 1000, 1100, "H", 800, 200),
    ("balustrade", 13.52, 1100, 1150, "H", 750, 200),
    ("balustrade", 13.52, 1000, 1150, "L", 800, 200),
    ("balustrade", 13.52, 1150, 1200, "L", 750, 200),
    ("balustrade", 13.52, 1000, 1150, "M", 800, 200),
    ("balustrade", 13.52, 1150, 1200, "M", 750, 200),
    ("balustrade", 13.52, 1000, 1050, "VH", 800, 200),
    ("balustrade", 13.52, 1050, 1100, "VH", 750, 200),
    ("balustrade", 15.0, 1000, 1100, "EH", 800, 200),
    ("balustrade", 15.0, 1100, 1200, "EH", 750, 200),
    ("balustrade", 15.0, 1000, 1200, "H", 800, 200),
    ("balustrade", 15.0, 1200, 1300, "H", 750, 200),
    ("balustrade", 15.0, 1000, 1200, "L", 800, 200),
    ("balustrade", 15.0, 1200, 1300, "L", 750, 200),
    ("balustrade", 15.0, 1000, 1200, "M", 800, 200),
    ("balustrade", 15.0, 1200, 1300, "M", 750, 200),
    ("balustrade", 15.0, 1000, 1150, "VH", 800, 200),
    ("balustrade", 15.0, 1150, 1250, "VH", 750, 200),
    ("balustrade", 17.52, 1000, 1100, "EH", 800, 200),
    ("balustrade", 17.52, 1100, 1200, "EH", 750, 200),
    ("balustrade", 17.52, 1000, 1200, "H", 800, 200),
    ("balustrade", 17.52, 1200, 1300, "H", 750, 200),
    ("balustrade", 17.52, 1000, 1200, "L", 800, 200),
    ("balustrade", 17.52, 1200, 1300, "L", 750, 200),
    ("balustrade", 17.52, 1000, 1200, "M", 800, 200),
    ("balustrade", 17.52, 1200, 1300, "M", 750, 200),
    ("balustrade", 17.52, 1000, 1150, "VH", 800, 200),
    ("balustrade", 17.52, 1150, 1250, "VH", 750, 200),
    ("pool", 12.0, 1200, 1250, "H", 750, 375),
    ("pool", 12.0, 1200, 1250, "L", 900, 400),
    ("pool", 12.0, 1200, 1250, "M", 900, 375),
    ("pool", 12.0, 1200, 1250, "VH", 600, 300),
    ("pool", 15.0, 1200, 1300, "EH", 600, 300),
    ("pool", 15.0, 1200, 1250, "H", 900, 400),
    ("pool", 15.0, 1250, 1300, "H", 800, 400),
    ("pool", 15.0, 1200, 1300, "L", 900, 400),
    ("pool", 15.0, 1200, 1300, "M", 900, 400),
    ("pool", 15.0, 1200, 1300, "VH", 750, 375),
))

SP14_ROWS = build_rows((
    ("balustrade", 12.0, 1000, 1150, "L", 800, 250),
    ("balustrade", 12.0, 1150, 1200, "L", 720, 250),
    ("balustrade", 12.0, 1000, 1150, "M", 800, 250),
    ("balustrade", 12.0, 1150, 1200, "M", 720, 250),
    ("balustrade", 12.0, 1000, 1100, "H", 800, 250),
    ("balustrade", 12.0, 1100, 1200, "H", 720, 250),
    ("balustrade", 12.0, 1000, 1050, "VH", 800, 250),
    ("balustrade", 12.0, 1050, 1100, "VH", 720, 250),
    ("balustrade", 12.0, 1000, 1050, "EH", 720, 250),
    ("balustrade", 13.52, 1000, 1150, "L", 800, 250),
    ("balustrade", 13.52, 1150, 1200, "L", 720, 250),
    ("balustrade", 13.52, 1000, 1150, "M", 800, 250),
    ("balustrade", 13.52, 1150, 1200, "M", 720, 250),
    ("balustrade", 13.52, 1000, 1100, "H", 800, 250),
    ("balustrade", 13.52, 1100, 1200, "H", 720, 250),
    ("balustrade", 13.52, 1000, 1050, "VH", 800, 250),
    ("balustrade", 13.52, 1050, 1100, "VH", 720, 250),
    ("balustrade", 13.52, 1000, 1050, "EH", 720, 250),
    ("balustrade", 15.0, 1000, 1200, "L", 800, 250),
    ("balustrade", 15.0, 1200, 1300, "L", 720, 250),
    ("balustrade", 15.0, 1000, 1200, "M", 800, 250),
    ("balustrade", 15.0, 1200, 1300, "M", 720, 250),
    ("balustrade", 15.0, 1000, 1200, "H", 800, 250),
    ("balustrade", 15.0, 1200, 1300, "H", 720, 250),
    ("balustrade", 15.0, 1000, 1150, "VH", 800, 250),
    ("balustrade", 15.0, 1150, 1250, "VH", 720, 250),
    ("balustrade", 15.0, 1000, 1100, "EH", 800, 250),
    ("balustrade", 15.0, 1100, 1200, "EH", 720, 250),
    ("balustrade", 17.52, 1000, 1200, "L", 800, 250),
    ("balustrade", 17.52, 1200, 1300, "L", 720, 250),
    ("balustrade", 17.52, 1000, 1200, "M", 800, 250),
    ("balustrade", 17.52, 1200, 1300, "M", 720, 250),
    ("balustrade", 17.52, 1000, 1200, "H", 800, 250),
    ("balustrade", 17.52, 1200, 1300, "H", 720, 250),
    ("balustrade", 17.52, 1000, 1150, "VH", 800, 250),
    ("balustrade", 17.52, 1150, 1250, "VH", 720, 250),
    ("balustrade", 17.52, 1000, 1100, "EH", 800, 250),
    ("balustrade", 17.52, 1100, 1200, "EH", 720, 250),
    ("pool", 12.0, 1200, 1200, "L", 1200, 500),
    ("pool", 12.0, 1200, 1200, "M", 1200, 500),
    ("pool", 12.0, 1200, 1200, "H", 1000, 500),
    ("pool", 12.0, 1200, 1200, "VH", 750, 375),
    ("pool", 15.0, 1200, 1300, "L", 1000, 500),
    ("pool", 15.0, 1200, 1300, "M", 1000, 500),
    ("pool", 15.0, 1200, 1300, "H", 750, 375),
    ("pool", 15.0, 1200, 1300, "VH", 600, 300),
    ("pool", 15.0, 1200, 1200, "EH", 600, 300),
))

SP15_ROWS = build_rows((
    ("balustrade", 12.0, 1000, 1150, "L", 800, 250),
    ("balustrade", 12.0, 1150, 1200, "L", 750, 250),
    ("balustrade", 12.0, 1000, 1150, "M", 800, 250),
    ("balustrade", 12.0, 1150, 1200, "M", 750, 250),
    ("balustrade", 12.0, 1000, 1150, "H", 800, 250),
    ("balustrade", 12.0, 1150, 1200, "H", 750, 250),
    ("balustrade", 12.0, 1000, 1100, "VH", 800, 250),
    ("balustrade", 12.0, 1050, 1150, "VH", 750, 250),
    ("balustrade", 12.0, 1000, 1050, "EH", 800, 200),
    ("balustrade", 12.0, 1050, 1100, "EH", 750, 200),
    ("balustrade", 13.52, 1000, 1150, "L", 800, 250),
    ("balustrade", 13.52, 1150, 1200, "L", 750, 250),
    ("balustrade", 13.52, 1000, 1150, "M", 800, 250),
    ("balustrade", 13.52, 1150, 1200, "M", 750, 250),
    ("balustrade", 13.52, 1000, 1150, "H", 800, 250),
    ("balustrade", 13.52, 1150, 1200, "H", 750, 250),
    ("balustrade", 13.52, 1000, 1100, "VH", 800, 250),
    ("balustrade", 13.52, 1050, 1150, "VH", 750, 250),
    ("balustrade", 13.52, 1000, 1050, "EH", 800, 200),
    ("balustrade", 13.52, 1050, 1100, "EH", 750, 200),
    ("balustrade", 15.0, 1000, 1250, "L", 800, 250),
    ("balustrade", 15.0, 1250, 1300, "L", 750, 250),
    ("balustrade", 15.0, 1000, 1250, "M", 800, 250),
    ("balustrade", 15.0, 1250, 1300, "M", 750, 250),
    ("balustrade", 15.0, 1000, 1250, "H", 800, 250),
    ("balustrade", 15.0, 1250, 1300, "H", 750, 250),
    ("balustrade", 15.0, 1000, 1200, "VH", 800, 250),
    ("balustrade", 15.0, 1200, 1250, "VH", 750, 250),
    ("balustrade", 15.0, 1000, 1150, "EH", 800, 200),
    ("balustrade", 15.0, 1150, 1200, "EH", 750, 200),
    ("balustrade", 17.52, 1000, 1250, "L", 800, 250),
    ("balustrade", 17.52, 1250, 1300, "L", 750, 250),
    ("balustrade", 17.52, 1000, 1250, "M", 800, 250),
    ("balustrade", 17.52, 1250, 1300, "M", 750, 250),
    ("balustrade", 17.52, 1000, 1250, "H", 800, 250),
    ("balustrade", 17.52, 1250, 1300, "H", 750, 250),
    ("balustrade", 17.52, 1000, 1200, "VH", 800, 250),
    ("balustrade", 17.52, 1200, 1250, "VH", 750, 250),
    ("balustrade", 17.52, 1000, 1150, "EH", 800, 200),
    ("balustrade", 17.52, 1150, 1200, "EH", 750, 200),
    ("pool", 12.0, 1200, 1300, "L", 1000, 500),
    ("pool", 12.0, 1200, 1300, "M", 1000, 500),
    ("pool", 12.0, 1200, 1250, "H", 1000, 500),
    ("pool", 12.0, 1200, 1250, "VH", 800, 375),
    ("pool", 15.0, 1200, 1300, "L", 1000, 500),
    ("pool", 15.0, 1200, 1300, "M", 1000, 500),
    ("pool", 15.0, 1200, 1300, "H", 1000, 500),
    ("pool", 15.0, 1200, 1300, "VH", 800, 375),
    ("pool", 15.0, 1200, 1250, "EH", 700, 300),
    ("pool", 15.0, 1250, 1300, "EH", 600, 300),
))

RMP160_ROWS = build_rows((
    ("balustrade", 12.0, 1000, 1150, "L", 850, 200),
    ("balustrade", 12.0, 1150, 1200, "L", 700, 200),
    ("balustrade", 12.0, 1000, 1150, "M", 850, 200),
    ("balustrade", 12.0, 1150, 1200, "M", 700, 200),
    ("balustrade", 12.0, 1000, 1100, "H", 750, 200),
    ("balustrade", 12.0, 1100, 1200, "H", 600, 200),
    ("balustrade", 12.0, 1000, 1050, "VH", 750, 200),
    ("balustrade", 12.0, 1050, 1100, "VH", 600, 150),
    ("balustrade", 13.52, 1000, 1150, "L", 850, 200),
    ("balustrade", 13.52, 1150, 1200, "L", 700, 200),
    ("balustrade", 13.52, 1000, 1150, "M", 850, 200),
    ("balustrade", 13.52, 1150, 1200, "M", 700, 200),
    ("balustrade", 13.52, 1000, 1100, "H", 750, 200),
    ("balustrade", 13.52, 1100, 1200, "H", 600, 200),
    ("balustrade", 13.52, 1000, 1050, "VH", 750, 200),
    ("balustrade", 13.52, 1050, 1100, "VH", 600, 150),
    ("pool", 12.0, 1200, 1200, "L", 800, 300),
    ("pool", 12.0, 1200, 1200, "M", 800, 300),
    ("pool", 12.0, 1200, 1200, "H", 700, 300),
    ("pool", 12.0, 1200, 1200, "VH", 600, 200),
))

SMP160_ROWS = build_rows((
    ("balustrade", 12.0, 1000, 1150, "L", 850, 200),
    ("balustrade", 12.0, 1150, 1200, "L", 700, 200),
    ("balustrade", 12.0, 1000, 1150, "M", 850, 200),
    ("balustrade", 12.0, 1150, 1200, "M", 700, 200),
    ("balustrade", 12.0, 1000, 1100, "H", 750, 200),
    ("balustrade", 12.0, 1100, 1200, "H", 600, 200),
    ("balustrade", 12.0, 1000, 1050, "VH", 750, 200),
    ("balustrade", 12.0, 1050, 1100, "VH", 600, 150),
    ("balustrade", 13.52, 1000, 1150, "L", 850, 200),
    ("balustrade", 13.52, 1150, 1200, "L", 700, 200),
    ("balustrade", 13.52, 1000, 1150, "M", 850, 200),
    ("balustrade", 13.52, 1150, 1200, "M", 700, 200),
    ("balustrade", 13.52, 1000, 1100, "H", 750, 200),
    ("balustrade", 13.52, 1100, 1200, "H", 600, 200),
    ("balustrade", 13.52, 1000, 1050, "VH", 750, 200),
    ("balustrade", 13.52, 1050, 1100, "VH", 600, 150),
    ("pool", 12.0, 1200, 1200, "L", 800, 300),
    ("pool", 12.0, 1200, 1200, "M", 800, 300),
    ("pool", 12.0, 1200, 1200, "H", 700, 300),
    ("pool", 12.0, 1200, 1200, "VH", 600, 200),
))
