"""Compliance lookup: resolve certified fixing spacing from PS1 tables.

Each calculator key maps to a SpacingStrategy holding its table, whether the
lookup may fall back to the nearest height band, and an optional clamp rule
applied after a row is selected.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .. import data
from ..value_objects import (
    HardwareFamily,
    ResolvedSpacing,
    SpacingRow,
    StructuralSystem,
    WindZone,
)

logger = logging.getLogger(__name__)

__all__ = [
    "SpacingStrategy",
    "SPACING_STRATEGIES",
    "find_row",
    "get_strategy",
    "resolve_spacing",
]

# (internal, edge, system, zone, fixing_type) -> (internal, edge)
ClampRule = Callable[[float, float, StructuralSystem, WindZone, Optional[str]], tuple[float, float]]


@dataclass(frozen=True)
class SpacingStrategy:
    """Family-specific lookup behaviour for one calculator.

    Attributes:
        family: Hardware family of the calculator.
        rows: The PS1 table, empty when the calculator has no certified data.
        allow_fallback: Fall back to the nearest height band when no band
            contains the height.
        clamp: Post-selection clamp rule, if any.
    """

    family: HardwareFamily
    rows: tuple[SpacingRow, ...]
    allow_fallback: bool = True
    clamp: ClampRule | None = None


def _is_timber(fixing_type: str | None) -> bool:
    return bool(fixing_type) and "timber" in fixing_type.lower()


def _clamp_timber_or_extreme(
    internal: float,
    edge: float,
    system: StructuralSystem,
    zone: WindZone,
    fixing_type: str | None,
) -> tuple[float, float]:
    """PF150 and SD100: 300mm internal in EH zones or into timber."""
    if system is StructuralSystem.BALUSTRADE and (zone is WindZone.EH or _is_timber(fixing_type)):
        internal = min(internal, 300.0)
    return internal, edge


def _clamp_pradis(
    internal: float,
    edge: float,
    system: StructuralSystem,
    zone: WindZone,
    fixing_type: str | None,
) -> tuple[float, float]:
    """Pradis into timber with lag/coach screws."""
    if fixing_type == "Timber Lag/Coach Screw":
        return min(internal, 300.0), 150.0
    return internal, edge


_RESOLUTE_ZONE_EDGE_LIMITS = {WindZone.H: 350.0, WindZone.VH: 300.0, WindZone.EH: 300.0}
_RESOLUTE_FIXING_EDGE_LIMITS = {"Timber (Coach Screw)": 300.0, "Timber (Bolt Through)": 350.0}


def _clamp_resolute(
    internal: float,
    edge: float,
    system: StructuralSystem,
    zone: WindZone,
    fixing_type: str | None,
) -> tuple[float, float]:
    """Resolute balustrades: edge distance reduced by zone and fixing."""
    if system is not StructuralSystem.BALUSTRADE:
        return internal, edge
    if zone in _RESOLUTE_ZONE_EDGE_LIMITS:
        edge = min(edge, _RESOLUTE_ZONE_EDGE_LIMITS[zone])
    if fixing_type in _RESOLUTE_FIXING_EDGE_LIMITS:
        edge = min(edge, _RESOLUTE_FIXING_EDGE_LIMITS[fixing_type])
    return internal, edge


SPACING_STRATEGIES: dict[str, SpacingStrategy] = {
    "sp10": SpacingStrategy(HardwareFamily.SPIGOTS, data.SP10_ROWS),
    "sp12": SpacingStrategy(HardwareFamily.SPIGOTS, data.SP12_ROWS),
    "sp13": SpacingStrategy(HardwareFamily.SPIGOTS, data.SP13_ROWS),
    "sp14": SpacingStrategy(HardwareFamily.SPIGOTS, data.SP14_ROWS),
    "sp15": SpacingStrategy(HardwareFamily.SPIGOTS, data.SP15_ROWS),
    "rmp160": SpacingStrategy(HardwareFamily.SPIGOTS, data.RMP160_ROWS),
    "smp160": SpacingStrategy(HardwareFamily.SPIGOTS, data.SMP160_ROWS),
    "sd50": SpacingStrategy(HardwareFamily.STANDOFFS, data.SD50_ROWS),
    "pf150": SpacingStrategy(HardwareFamily.STANDOFFS, data.PF150_ROWS, clamp=_clamp_timber_or_extreme),
    "sd75": SpacingStrategy(HardwareFamily.STANDOFFS, ()),
    "sd100": SpacingStrategy(HardwareFamily.STANDOFFS, data.SD100_ROWS, clamp=_clamp_timber_or_extreme),
    "pradis": SpacingStrategy(HardwareFamily.STANDOFFS, data.PRADIS_ROWS, clamp=_clamp_pradis),
    "smartlock_top": SpacingStrategy(HardwareFamily.CHANNEL, data.SMARTLOCK_ROWS, allow_fallback=False),
    "smartlock_side": SpacingStrategy(HardwareFamily.CHANNEL, data.SMARTLOCK_ROWS, allow_fallback=False),
    "lugano": SpacingStrategy(HardwareFamily.CHANNEL, data.LUGANO_ROWS, allow_fallback=False),
    "vista": SpacingStrategy(HardwareFamily.CHANNEL, data.VISTA_ROWS, allow_fallback=False),
    "resolute": SpacingStrategy(HardwareFamily.POSTS, data.RESOLUTE_ROWS, clamp=_clamp_resolute),
    "vortex": SpacingStrategy(HardwareFamily.POSTS, data.VORTEX_ROWS),
}


def get_strategy(calc_key: str) -> SpacingStrategy:
    """Get the lookup strategy for a calculator key.

    Raises:
        KeyError: If no strategy is registered for the key.
    """
    key = calc_key.strip().lower()
    if key not in SPACING_STRATEGIES:
        available = ", ".join(sorted(SPACING_STRATEGIES))
        raise KeyError(f"Unknown calculator: '{calc_key}'. Available: {available}")
    return SPACING_STRATEGIES[key]


def find_row(
    rows: tuple[SpacingRow, ...],
    structural_system: StructuralSystem,
    thickness_mm: float,
    height_mm: float,
    zone: WindZone,
    allow_fallback: bool = True,
) -> tuple[SpacingRow, bool] | None:
    """Select a table row for the given key and height.

    The first row (in table order) whose height band contains the height
    wins. Otherwise, when fallback is allowed, the row whose band midpoint is
    nearest the height is chosen, ties going to the earlier row.

    Returns:
        (row, exact_band) or None when no row matches the key.
    """
    candidates = [row for row in rows if row.matches(structural_system, thickness_mm, zone)]
    for row in candidates:
        if row.contains_height(height_mm):
            return row, True
    if not candidates or not allow_fallback:
        return None
    # min() keeps the first of equal distances
    nearest = min(candidates, key=lambda row: abs(row.midpoint_mm - height_mm))
    return nearest, False


def resolve_spacing(
    calc_key: str,
    structural_system: StructuralSystem | str,
    thickness_mm: float,
    height_mm: float,
    zone: WindZone | str,
    fixing_type: str | None = None,
) -> ResolvedSpacing | None:
    """Resolve certified spacing for a calculator.

    Args:
        calc_key: Calculator key, e.g. "sp12".
        structural_system: Balustrade or pool.
        thickness_mm: Glass thickness.
        height_mm: Glass height.
        zone: Wind zone code (case-insensitive).
        fixing_type: Fixing description, used by clamp rules.

    Returns:
        The resolved spacing, or None when no certified data exists for the
        combination.

    Raises:
        KeyError: If the calculator key is unknown.
        ValueError: If the zone or structural system is not recognised.
    """
    strategy = get_strategy(calc_key)
    system = StructuralSystem(structural_system)
    wind_zone = WindZone.parse(zone)

    found = find_row(
        strategy.rows,
        system,
        thickness_mm,
        height_mm,
        wind_zone,
        allow_fallback=strategy.allow_fallback,
    )
    if found is None:
        logger.debug(
            f"No PS1 row for {calc_key} {system.value} {thickness_mm}mm "
            f"{height_mm}mm zone {wind_zone.value}"
        )
        return None

    row, exact_band = found
    internal, edge = row.internal_spacing_mm, row.edge_spacing_mm
    if strategy.clamp is not None:
        internal, edge = strategy.clamp(internal, edge, system, wind_zone, fixing_type)

    if not exact_band:
        logger.debug(
            f"Height {height_mm}mm outside PS1 bands for {calc_key}; "
            f"using nearest band {row.height_min_mm:g}-{row.height_max_mm:g}mm"
        )

    return ResolvedSpacing(
        calc_key=calc_key.strip().lower(),
        row=row,
        internal_spacing_mm=internal,
        edge_spacing_mm=edge,
        exact_band=exact_band,
    )
