"""Reference data: PS1 spacing tables and the calculator catalog.

All tables are module-level tuples of frozen SpacingRow objects, built once
at import and never mutated.
"""

from .catalog import (
    CATALOG,
    CalculatorSpec,
    Option,
    detect_calc_key,
    get_calculator,
)
from .channels import LUGANO_ROWS, SMARTLOCK_ROWS, VISTA_ROWS
from .posts import RESOLUTE_ROWS, VORTEX_ROWS
from .spigots import (
    RMP160_ROWS,
    SMP160_ROWS,
    SP10_ROWS,
    SP12_ROWS,
    SP13_ROWS,
    SP14_ROWS,
    SP15_ROWS,
)
from .standoffs import PF150_ROWS, PRADIS_ROWS, SD50_ROWS, SD100_ROWS

__all__ = [
    "CATALOG",
    "CalculatorSpec",
    "LUGANO_ROWS",
    "Option",
    "PF150_ROWS",
    "PRADIS_ROWS",
    "RESOLUTE_ROWS",
    "RMP160_ROWS",
    "SD100_ROWS",
    "SD50_ROWS",
    "SMARTLOCK_ROWS",
    "SMP160_ROWS",
    "SP10_ROWS",
    "SP12_ROWS",
    "SP13_ROWS",
    "SP14_ROWS",
    "SP15_ROWS",
    "VISTA_ROWS",
    "VORTEX_ROWS",
    "detect_calc_key",
    "get_calculator",
]
