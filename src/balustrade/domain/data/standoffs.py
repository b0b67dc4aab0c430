"""PS1 spacing tables for standoff (face-fixed) discs and clamps.

SD75 is offered in the catalog but has no certified table. Pool rows with an
internal spacing of 999 are not permitted.
"""

from __future__ import annotations

from ._build import build_rows

SD50_ROWS = build_rows((
    # Balustrade 12
    ("balustrade", 12.0, 950, 950, "L", 425, 200),
    ("balustrade", 12.0, 950, 950, "M", 425, 200),
    ("balustrade", 12.0, 950, 950, "H", 425, 200),
    ("balustrade", 12.0, 950, 950, "VH", 425, 200),
    ("balustrade", 12.0, 950, 950, "EH", 425, 200),
    ("balustrade", 12.0, 1000, 1000, "L", 425, 200),
    ("balustrade", 12.0, 1000, 1000, "M", 425, 200),
    ("balustrade", 12.0, 1000, 1000, "H", 425, 200),
    ("balustrade", 12.0, 1000, 1000, "VH", 425, 200),
    ("balustrade", 12.0, 1000, 1000, "EH", 425, 200),
    ("balustrade", 12.0, 1050, 1150, "L", 400, 200),
    ("balustrade", 12.0, 1050, 1150, "M", 400, 200),
    ("balustrade", 12.0, 1050, 1150, "H", 400, 200),
    ("balustrade", 12.0, 1050, 1150, "VH", 400, 200),
    ("balustrade", 12.0, 1050, 1150, "EH", 400, 200),
    # Balustrade 13.52
    ("balustrade", 13.52, 950, 950, "L", 425, 200),
    ("balustrade", 13.52, 950, 950, "M", 425, 200),
    ("balustrade", 13.52, 950, 950, "H", 425, 200),
    ("balustrade", 13.52, 950, 950, "VH", 425, 200),
    ("balustrade", 13.52, 950, 950, "EH", 425, 200),
    ("balustrade", 13.52, 1000, 1000, "L", 425, 200),
    ("balustrade", 13.52, 1000, 1000, "M", 425, 200),
    ("balustrade", 13.52, 1000, 1000, "H", 425, 200),
    ("balustrade", 13.52, 1000, 1000, "VH", 425, 200),
    ("balustrade", 13.52, 1000, 1000, "EH", 425, 200),
    ("balustrade", 13.52, 1050, 1150, "L", 400, 200),
    ("balustrade", 13.52, 1050, 1150, "M", 400, 200),
    ("balustrade", 13.52, 1050, 1150, "H", 400, 200),
    ("balustrade", 13.52, 1050, 1150, "VH", 400, 200),
    ("balustrade", 13.52, 1050, 1150, "EH", 400, 200),
    # Balustrade 15
    ("balustrade", 15.0, 950, 950, "L", 475, 200),
    ("balustrade", 15.0, 950, 950, "M", 475, 200),
    ("balustrade", 15.0, 950, 950, "H", 475, 200),
    ("balustrade", 15.0, 950, 950, "VH", 475, 200),
    ("balustrade", 15.0, 950, 950, "EH", 475, 200),
    ("balustrade", 15.0, 1000, 1050, "L", 425, 200),
    ("balustrade", 15.0, 1000, 1050, "M", 425, 200),
    ("balustrade", 15.0, 1000, 1050, "H", 425, 200),
    ("balustrade", 15.0, 1000, 1050, "VH", 425, 200),
    ("balustrade", 15.0, 1000, 1050, "EH", 425, 200),
    ("balustrade", 15.0, 1100, 1250, "L", 400, 200),
    ("balustrade", 15.0, 1100, 1250, "M", 400, 200),
    ("balustrade", 15.0, 1100, 1250, "H", 400, 200),
    ("balustrade", 15.0, 1100, 1250, "VH", 400, 200),
    ("balustrade", 15.0, 1100, 1250, "EH", 400, 200),
    # Balustrade 17.52
    ("balustrade", 17.52, 950, 950, "L", 475, 200),
    ("balustrade", 17.52, 950, 950, "M", 475, 200),
    ("balustrade", 17.52, 950, 950, "H", 475, 200),
    ("balustrade", 17.52, 950, 950, "VH", 475, 200),
    ("balustrade", 17.52, 950, 950, "EH", 475, 200),
    ("balustrade", 17.52, 1000, 1050, "L", 425, 200),
    ("balustrade", 17.52, 1000, 1050, "M", 425, 200),
    ("balustrade", 17.52, 1000, 1050, "H", 425, 200),
    ("balustrade", 17.52, 1000, 1050, "VH", 425, 200),
    ("balustrade", 17.52, 1000, 1050, "EH", 425, 200),
    ("balustrade", 17.52, 1100, 1250, "L", 400, 200),
    ("balustrade", 17.52, 1100, 1250, "M", 400, 200),
    ("balustrade", 17.52, 1100, 1250, "H", 400, 200),
    ("balustrade", 17.52, 1100, 1250, "VH", 400, 200),
    ("balustrade", 17.52, 1100, 1250, "EH", 400, 200),
    # Pool
    ("pool", 12.0, 1200, 1250, "L", 400, 200),
    ("pool", 12.0, 1200, 1250, "M", 400, 200),
    ("pool", 12.0, 1200, 1250, "H", 400, 200),
    ("pool", 12.0, 1200, 1250, "VH", 999, 200),
    ("pool", 12.0, 1200, 1250, "EH", 999, 200),
    ("pool", 15.0, 1200, 1250, "L", 400, 200),
    ("pool", 15.0, 1200, 1250, "M", 400, 200),
    ("pool", 15.0, 1200, 1250, "H", 400, 200),
    ("pool", 15.0, 1200, 1250, "VH", 400, 200),
    ("pool", 15.0, 1200, 1250, "EH", 999, 200),
    ("pool", 17.52, 1200, 1250, "L", 400, 200),
    ("pool", 17.52, 1200, 1250, "M", 400, 200),
    ("pool", 17.52, 1200, 1250, "H", 400, 200),
    ("pool", 17.52, 1200, 1250, "VH", 400, 200),
    ("pool", 17.52, 1200, 1250, "EH", 400, 200),
))

PF150_ROWS = build_rows((
    # Balustrade 12, 1000-1150
    ("balustrade", 12.0, 1000, 1150, "L", 500, 200),
    ("balustrade", 12.0, 1000, 1150, "M", 450, 200),
    ("balustrade", 12.0, 1000, 1150, "H", 425, 200),
    ("balustrade", 12.0, 1000, 1150, "VH", 400, 200),
    ("balustrade", 12.0, 1000, 1150, "EH", 400, 200),
    # Balustrade 13.52, 1000-1150
    ("balustrade", 13.52, 1000, 1150, "L", 500, 200),
    ("balustrade", 13.52, 1000, 1150, "M", 450, 200),
    ("balustrade", 13.52, 1000, 1150, "H", 425, 200),
    ("balustrade", 13.52, 1000, 1150, "VH", 400, 200),
    ("balustrade", 13.52, 1000, 1150, "EH", 400, 200),
    # Balustrade 15, 1000-1250
    ("balustrade", 15.0, 1000, 1250, "L", 500, 200),
    ("balustrade", 15.0, 1000, 1250, "M", 450, 200),
    ("balustrade", 15.0, 1000, 1250, "H", 425, 200),
    ("balustrade", 15.0, 1000, 1250, "VH", 400, 200),
    ("balustrade", 15.0, 1000, 1250, "EH", 400, 200),
    # Balustrade 17.52, 1000-1250
    ("balustrade", 17.52, 1000, 1250, "L", 500, 200),
    ("balustrade", 17.52, 1000, 1250, "M", 450, 200),
    ("balustrade", 17.52, 1000, 1250, "H", 425, 200),
    ("balustrade", 17.52, 1000, 1250, "VH", 400, 200),
    ("balustrade", 17.52, 1000, 1250, "EH", 400, 200),
    # Pool 12, 1200-1250 (L/M/H only)
    ("pool", 12.0, 1200, 1250, "L", 400, 200),
    ("pool", 12.0, 1200, 1250, "M", 400, 200),
    ("pool", 12.0, 1200, 1250, "H", 400, 200),
    ("pool", 12.0, 1200, 1250, "VH", 999, 200),
    ("pool", 12.0, 1200, 1250, "EH", 999, 200),
    # Pool 15, 1200-1250 (up to VH)
    ("pool", 15.0, 1200, 1250, "L", 400, 200),
    ("pool", 15.0, 1200, 1250, "M", 400, 200),
    ("pool", 15.0, 1200, 1250, "H", 400, 200),
    ("pool", 15.0, 1200, 1250, "VH", 400, 200),
    ("pool", 15.0, 1200, 1250, "EH", 999, 200),
    # Pool 17.52, 1200-1250 (up to EH)
    ("pool", 17.52, 1200, 1250, "L", 400, 200),
    ("pool", 17.52, 1200, 1250, "M", 400, 200),
    ("pool", 17.52, 1200, 1250, "H", 400, 200),
    ("pool", 17.52, 1200, 1250, "VH", 400, 200),
    ("pool", 17.52, 1200, 1250, "EH", 400, 200),
))

SD100_ROWS = build_rows((
    # Balustrade 12, 1000-1150
    ("balustrade", 12.0, 1000, 1000, "L", 425, 200),
    ("balustrade", 12.0, 1000, 1000, "M", 425, 200),
    ("balustrade", 12.0, 1000, 1000, "H", 425, 200),
    ("balustrade", 12.0, 1000, 1000, "VH", 425, 200),
    ("balustrade", 12.0, 1000, 1000, "EH", 425, 200),
    ("balustrade", 12.0, 1050, 1150, "L", 400, 200),
    ("balustrade", 12.0, 1050, 1150, "M", 400, 200),
    ("balustrade", 12.0, 1050, 1150, "H", 400, 200),
    ("balustrade", 12.0, 1050, 1150, "VH", 400, 200),
    ("balustrade", 12.0, 1050, 1150, "EH", 400, 200),
    # Balustrade 13.52, 1000-1150
    ("balustrade", 13.52, 1000, 1000, "L", 425, 200),
    ("balustrade", 13.52, 1000, 1000, "M", 425, 200),
    ("balustrade", 13.52, 1000, 1000, "H", 425, 200),
    ("balustrade", 13.52, 1000, 1000, "VH", 425, 200),
    ("balustrade", 13.52, 1000, 1000, "EH", 425, 200),
    ("balustrade", 13.52, 1050, 1150, "L", 400, 200),
    ("balustrade", 13.52, 1050, 1150, "M", 400, 200),
    ("balustrade", 13.52, 1050, 1150, "H", 400, 200),
    ("balustrade", 13.52, 1050, 1150, "VH", 400, 200),
    ("balustrade", 13.52, 1050, 1150, "EH", 400, 200),
    # Balustrade 15, 1000-1250
    ("balustrade", 15.0, 1000, 1050, "L", 425, 200),
    ("balustrade", 15.0, 1000, 1050, "M", 425, 200),
    ("balustrade", 15.0, 1000, 1050, "H", 425, 200),
    ("balustrade", 15.0, 1000, 1050, "VH", 425, 200),
    ("balustrade", 15.0, 1000, 1050, "EH", 425, 200),
    ("balustrade", 15.0, 1100, 1250, "L", 400, 200),
    ("balustrade", 15.0, 1100, 1250, "M", 400, 200),
    ("balustrade", 15.0, 1100, 1250, "H", 400, 200),
    ("balustrade", 15.0, 1100, 1250, "VH", 400, 200),
    ("balustrade", 15.0, 1100, 1250, "EH", 400, 200),
    # Balustrade 17.52, 1000-1250
    ("balustrade", 17.52, 1000, 1050, "L", 425, 200),
    ("balustrade", 17.52, 1000, 1050, "M", 425, 200),
    ("balustrade", 17.52, 1000, 1050, "H", 425, 200),
    ("balustrade", 17.52, 1000, 1050, "VH", 425, 200),
    ("balustrade", 17.52, 1000, 1050, "EH", 425, 200),
    ("balustrade", 17.52, 1100, 1250, "L", 400, 200),
    ("balustrade", 17.52, 1100, 1250, "M", 400, 200),
    ("balustrade", 17.52, 1100, 1250, "H", 400, 200),
    ("balustrade", 17.52, 1100, 1250, "VH", 400, 200),
    ("balustrade", 17.52, 1100, 1250, "EH", 400, 200),
    # Pool 12, 1200-1350 (L/M/H only)
    ("pool", 12.0, 1200, 1350, "L", 400, 200),
    ("pool", 12.0, 1200, 1350, "M", 400, 200),
    ("pool", 12.0, 1200, 1350, "H", 400, 200),
    ("pool", 12.0, 1200, 1350, "VH", 999, 200),
    ("pool", 12.0, 1200, 1350, "EH", 999, 200),
    # Pool 15, 1200-1350 (up to VH)
    ("pool", 15.0, 1200, 1350, "L", 400, 200),
    ("pool", 15.0, 1200, 1350, "M", 400, 200),
    ("pool", 15.0, 1200, 1350, "H", 400, 200),
    ("pool", 15.0, 1200, 1350, "VH", 400, 200),
    ("pool", 15.0, 1200, 1350, "EH", 999, 200),
    # Pool 17.52, 1200-1350 (up to EH)
    ("pool", 17.52, 1200, 1350, "L", 400, 200),
    ("pool", 17.52, 1200, 1350, "M", 400, 200),
    ("pool", 17.52, 1200, 1350, "H", 400, 200),
    ("pool", 17.52, 1200, 1350, "VH", 400, 200),
    ("pool", 17.52, 1200, 1350, "EH", 400, 200),
))

PRADIS_ROWS = build_rows((
    # Balustrade 12, 1000-1200
    ("balustrade", 12.0, 1000, 1200, "L", 600, 200),
    ("balustrade", 12.0, 1000, 1200, "M", 600, 200),
    ("balustrade", 12.0, 1000, 1200, "H", 600, 200),
    ("balustrade", 12.0, 1000, 1200, "VH", 450, 200),
    ("balustrade", 12.0, 1000, 1200, "EH", 400, 200),
    # Balustrade 13.52, 1000-1200
    ("balustrade", 13.52, 1000, 1200, "L", 600, 200),
    ("balustrade", 13.52, 1000, 1200, "M", 600, 200),
    ("balustrade", 13.52, 1000, 1200, "H", 600, 200),
    ("balustrade", 13.52, 1000, 1200, "VH", 400, 200),
    ("balustrade", 13.52, 1000, 1200, "EH", 400, 200),
    # Balustrade 15, 1000-1200
    ("balustrade", 15.0, 1000, 1200, "L", 600, 200),
    ("balustrade", 15.0, 1000, 1200, "M", 600, 200),
    ("balustrade", 15.0, 1000, 1200, "H", 600, 200),
    ("balustrade", 15.0, 1000, 1200, "VH", 400, 200),
    ("balustrade", 15.0, 1000, 1200, "EH", 300, 200),
    # Balustrade 17.52, 1000-1200
    ("balustrade", 17.52, 1000, 1200, "L", 600, 200),
    ("balustrade", 17.52, 1000, 1200, "M", 600, 200),
    ("balustrade", 17.52, 1000, 1200, "H", 600, 200),
    ("balustrade", 17.52, 1000, 1200, "VH", 400, 200),
    ("balustrade", 17.52, 1000, 1200, "EH", 300, 200),
    # Pool 12, 1200-1250 (up to H)
    ("pool", 12.0, 1200, 1250, "L", 400, 200),
    ("pool", 12.0, 1200, 1250, "M", 400, 200),
    ("pool", 12.0, 1200, 1250, "H", 400, 200),
    ("pool", 12.0, 1200, 1250, "VH", 999, 200),
    ("pool", 12.0, 1200, 1250, "EH", 999, 200),
    # Pool 15, 1200-1250 (up to VH)
    ("pool", 15.0, 1200, 1250, "L", 400, 200),
    ("pool", 15.0, 1200, 1250, "M", 400, 200),
    ("pool", 15.0, 1200, 1250, "H", 400, 200),
    ("pool", 15.0, 1200, 1250, "VH", 400, 200),
    ("pool", 15.0, 1200, 1250, "EH", 999, 200),
    # Pool 17.52, 1200-1250 (up to EH)
    ("pool", 17.52, 1200, 1250, "L", 400, 200),
    ("pool", 17.52, 1200, 1250, "M", 400, 200),
    ("pool", 17.52, 1200, 1250, "H", 400, 200),
    ("pool", 17.52, 1200, 1250, "VH", 400, 200),
    ("pool", 17.52, 1200, 1250, "EH", 400, 200),
))
