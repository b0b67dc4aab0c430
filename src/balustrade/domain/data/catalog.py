"""Calculator catalog: the option sets each hardware calculator offers.

The catalog is advisory. Configuration validation warns about values outside
these sets, while spacing lookups rely only on the PS1 tables.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..value_objects import HardwareFamily


@dataclass(frozen=True)
class Option:
    """A selectable value with its display label."""

    value: str
    label: str


@dataclass(frozen=True)
class CalculatorSpec:
    """Options offered by one hardware calculator.

    Attributes:
        calc_key: Calculator identifier, e.g. "sp12".
        family: Hardware family the calculator belongs to.
        fence_types: Offered fence types with height range labels.
        wind_zones: Offered wind zone codes.
        glass_heights: Offered glass heights in mm.
        glass_thicknesses: Offered glass thicknesses in mm.
        handrails: Offered handrail codes.
        finishes: Offered finish names (free text, normalized for ordering).
        fixing_types: Offered fixing descriptions.
        head_options: Disc head or clamp variants, where the system has them.
    """

    calc_key: str
    family: HardwareFamily
    fence_types: tuple[Option, ...]
    wind_zones: tuple[str, ...]
    glass_heights: tuple[int, ...]
    glass_thicknesses: tuple[float, ...]
    handrails: tuple[Option, ...]
    finishes: tuple[str, ...]
    fixing_types: tuple[str, ...]
    head_options: tuple[Option, ...] = ()

    @property
    def fence_type_values(self) -> tuple[str, ...]:
        return tuple(option.value for option in self.fence_types)

    @property
    def handrail_values(self) -> tuple[str, ...]:
        return tuple(option.value for option in self.handrails)

    @property
    def head_values(self) -> tuple[str, ...]:
        return tuple(option.value for option in self.head_options)


ALL_ZONES = ("L", "M", "H", "VH", "EH")
STANDARD_FIXINGS = ("Concrete", "Steel", "Timber (Coach Screw)", "Timber (Bolt Through)")
STANDARD_THICKNESSES = (12.0, 13.52, 15.0, 17.52)
POINT_FIXED_HANDRAILS = (
    Option("S25", "S25"),
    Option("AH40", "AH40"),
    Option("S40", "S40"),
    Option("R40", "R40"),
)

SD50_HEADS = (
    Option("SD50-SH", "Screw Head"),
    Option("SD50-FH", "Flat Head"),
    Option("SD50-BH", "Bevelled Head"),
    Option("ASD50-SH", "Adjustable Screw Head"),
)
PF150_HEADS = (
    Option("PF150", "Standard Clamp"),
    Option("PF150R", "Concealed Clamp"),
    Option("PF150S", "Square Clamp"),
)


def _heights(start: int, stop: int, step: int = 50) -> tuple[int, ...]:
    return tuple(range(start, stop + step, step))


def _fence(balustrade: str, pool: str | None = None) -> tuple[Option, ...]:
    options = [Option("balustrade", f"Balustrade ({balustrade})")]
    if pool is not None:
        options.append(Option("pool", f"Pool Fence ({pool})"))
    return tuple(options)


def _spigot(
    calc_key: str,
    finishes: tuple[str, ...],
    heights: tuple[int, ...],
    thicknesses: tuple[float, ...],
    fence: tuple[Option, ...],
) -> CalculatorSpec:
    return CalculatorSpec(
        calc_key=calc_key,
        family=HardwareFamily.SPIGOTS,
        fence_types=fence,
        wind_zones=ALL_ZONES,
        glass_heights=heights,
        glass_thicknesses=thicknesses,
        handrails=POINT_FIXED_HANDRAILS,
        finishes=finishes,
        fixing_types=STANDARD_FIXINGS,
    )


def _channel(calc_key: str, heights: tuple[int, ...]) -> CalculatorSpec:
    return CalculatorSpec(
        calc_key=calc_key,
        family=HardwareFamily.CHANNEL,
        fence_types=_fence(f"{heights[0]}-{heights[-1]}", "1200-1300"),
        wind_zones=ALL_ZONES,
        glass_heights=heights,
        glass_thicknesses=STANDARD_THICKNESSES,
        handrails=POINT_FIXED_HANDRAILS,
        finishes=("mill", "Black", "Powdercoat"),
        fixing_types=STANDARD_FIXINGS,
    )


def _standoff(
    calc_key: str,
    heights: tuple[int, ...],
    finishes: tuple[str, ...] = ("SSS", "Black"),
    fixings: tuple[str, ...] = STANDARD_FIXINGS,
    heads: tuple[Option, ...] = (),
    pool: str | None = None,
) -> CalculatorSpec:
    return CalculatorSpec(
        calc_key=calc_key,
        family=HardwareFamily.STANDOFFS,
        fence_types=_fence(f"{heights[0]}-{heights[-1]}", pool),
        wind_zones=ALL_ZONES,
        glass_heights=heights,
        glass_thicknesses=STANDARD_THICKNESSES,
        handrails=POINT_FIXED_HANDRAILS,
        finishes=finishes,
        fixing_types=fixings,
        head_options=heads,
    )


_SP_FULL = ("SSS", "Black", "Powdercoat")

CATALOG: dict[str, CalculatorSpec] = {
    spec.calc_key: spec
    for spec in (
        _spigot("sp10", ("SSS", "PSS", "Black"), _heights(1000, 1200), (12.0, 13.52), _fence("1000-1200", "1200")),
        _spigot("sp12", _SP_FULL, _heights(1000, 1300), STANDARD_THICKNESSES, _fence("1000-1300", "1200-1300")),
        _spigot("sp13", _SP_FULL, _heights(1000, 1300), STANDARD_THICKNESSES, _fence("1000-1300", "1200-1300")),
        _spigot("sp14", _SP_FULL, _heights(1000, 1300), STANDARD_THICKNESSES, _fence("1000-1300", "1200-1300")),
        _spigot("sp15", _SP_FULL, _heights(1000, 1300), STANDARD_THICKNESSES, _fence("1000-1300", "1200-1300")),
        _spigot("rmp160", ("SSS", "Black"), _heights(1000, 1200), (12.0, 13.52), _fence("1000-1200", "1200")),
        _spigot("smp160", ("SSS", "Black"), _heights(1000, 1200), (12.0, 13.52), _fence("1000-1200", "1200")),
        _standoff("sd50", _heights(950, 1200), heads=SD50_HEADS),
        _standoff(
            "pf150",
            _heights(1000, 1300),
            fixings=(
                "Concrete (Single Fix)",
                "Concrete (Double Fix)",
                "Steel (Single Fix)",
                "Steel (Double Fix)",
                "Timber Bolt Through (Single Fix)",
                "Timber Bolt Through (Double Fix)",
                "Timber Coach Screw (Single Fix)",
                "Timber Coach Screw (Double Fix)",
            ),
            heads=PF150_HEADS,
        ),
        _standoff("sd75", _heights(1000, 1200)),
        _standoff("sd100", _heights(1000, 1200)),
        _standoff(
            "pradis",
            _heights(1000, 1250),
            finishes=("SA", "Black", "Powdercoat"),
            fixings=("Concrete", "Steel", "Timber Lag/Coach Screw", "Timber Through Bolt"),
            pool="1200-1250",
        ),
        _channel("smartlock_top", _heights(900, 1250)),
        _channel("smartlock_side", _heights(900, 1250)),
        _channel("lugano", _heights(1000, 1200)),
        _channel("vista", _heights(1000, 1250)),
        CalculatorSpec(
            calc_key="resolute",
            family=HardwareFamily.POSTS,
            fence_types=_fence("1000-2000", "1200-1300"),
            wind_zones=ALL_ZONES,
            glass_heights=_heights(1000, 2000, 100),
            glass_thicknesses=(10.0, 11.2, 12.0, 13.2, 13.52, 15.0, 17.2, 17.52),
            handrails=(
                Option("ST50H", "ST50H"),
                Option("RT50H", "RT50H"),
                Option("S40", "S40"),
                Option("AH40", "AH40"),
                Option("R40", "R40"),
            ),
            finishes=("Mill", "Powdercoat"),
            fixing_types=STANDARD_FIXINGS,
        ),
        CalculatorSpec(
            calc_key="vortex",
            family=HardwareFamily.POSTS,
            fence_types=_fence("1000-1500", "1200-1300"),
            wind_zones=ALL_ZONES,
            glass_heights=(1000, 1100, 1200, 1250, 1300, 1400, 1500),
            glass_thicknesses=(8.0, 10.0, 11.2, 12.0, 13.2, 13.52, 15.0, 17.52),
            handrails=(Option("VXSHR", "Square Handrail"), Option("VXRHR", "Rounded Handrail")),
            finishes=("Powdercoat", "Silver", "Black", "Mill"),
            fixing_types=STANDARD_FIXINGS,
        ),
    )
}

# Product-name fragments that identify a calculator within a family
_DETECTION_RULES: dict[HardwareFamily, tuple[tuple[tuple[str, ...], str], ...]] = {
    HardwareFamily.SPIGOTS: tuple(
        ((key,), key) for key in ("sp10", "sp12", "sp13", "sp14", "sp15", "rmp160", "smp160")
    ),
    HardwareFamily.STANDOFFS: tuple(((key,), key) for key in ("sd50", "pf150", "sd75", "sd100", "pradis")),
    HardwareFamily.CHANNEL: (
        (("smart-side",), "smartlock_side"),
        (("smart-top",), "smartlock_top"),
        (("lugano",), "lugano"),
        (("vista",), "vista"),
    ),
    HardwareFamily.POSTS: ((("resolute",), "resolute"), (("vortex",), "vortex")),
}


def get_calculator(calc_key: str) -> CalculatorSpec:
    """Get the catalog entry for a calculator.

    Raises:
        KeyError: If the calculator is not in the catalog.
    """
    key = calc_key.strip().lower()
    if key not in CATALOG:
        available = ", ".join(sorted(CATALOG))
        raise KeyError(f"Unknown calculator: '{calc_key}'. Available: {available}")
    return CATALOG[key]


def detect_calc_key(product_name: str | None, family: HardwareFamily | str | None) -> str | None:
    """Detect the calculator for a product name within a hardware family.

    Returns None when the name does not identify a known calculator.
    """
    if not product_name or not family:
        return None
    lower = product_name.lower()
    for fragments, calc_key in _DETECTION_RULES.get(HardwareFamily(family), ()):
        if all(fragment in lower for fragment in fragments):
            return calc_key
    return None
