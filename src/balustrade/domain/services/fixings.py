"""Fixing-point counting and panel aggregation."""

from __future__ import annotations

import math
from typing import Iterable

from ..value_objects import (
    HardwareFamily,
    PanelAggregate,
    PanelGroup,
    ResolvedSpacing,
    SpigotsPerPanel,
)
from .gate_geometry import spigots_for_panel

__all__ = [
    "DOUBLE_DISC_CALCULATORS",
    "FIXING_LABELS",
    "POST_SINGLE_MAX_WIDTH_MM",
    "aggregate_panels",
    "fixings_for_panel",
    "spigot_positions",
]

FIXING_LABELS = {
    HardwareFamily.SPIGOTS: "spigot",
    HardwareFamily.STANDOFFS: "standoff",
    HardwareFamily.POSTS: "post",
    HardwareFamily.CHANNEL: "channel",
}

# Panels up to this width take a single post
POST_SINGLE_MAX_WIDTH_MM = 600.0

# Calculators mounting two discs at every fixing position
DOUBLE_DISC_CALCULATORS = frozenset({"sd50"})

# Auto mode draws at most this many fixings per panel
_AUTO_POSITION_LIMIT = 4

# Families with discrete fixings along each panel
_POINT_FIXED_FAMILIES = frozenset({HardwareFamily.SPIGOTS, HardwareFamily.STANDOFFS})


def fixings_for_panel(
    width_mm: float,
    family: HardwareFamily,
    spacing: ResolvedSpacing | None,
    spigots_per_panel: SpigotsPerPanel = SpigotsPerPanel.AUTO,
) -> int | None:
    """Fixing points for one panel, or None for continuous channel.

    A forced spigots-per-panel mode only applies to spigot systems.
    """
    if family is HardwareFamily.CHANNEL:
        return None
    if family is HardwareFamily.POSTS:
        return 1 if width_mm <= POST_SINGLE_MAX_WIDTH_MM else 2
    if family is HardwareFamily.SPIGOTS and spigots_per_panel.forced is not None:
        return spigots_per_panel.forced
    if spacing is None:
        return None
    return spigots_for_panel(width_mm, spacing)


def aggregate_panels(
    panel_widths_mm: Iterable[float],
    family: HardwareFamily,
    spacing: ResolvedSpacing | None,
    spigots_per_panel: SpigotsPerPanel = SpigotsPerPanel.AUTO,
    calc_key: str | None = None,
) -> PanelAggregate:
    """Group panels by width (two decimals) and total their fixing points.

    Groups are ordered widest first. Spigot and standoff groups carry the
    fixing offsets from the panel's left edge. Calculators in
    DOUBLE_DISC_CALCULATORS count two discs per fixing position in the total.
    """
    groups: dict[str, list] = {}
    total_panels = 0
    for width in panel_widths_mm:
        total_panels += 1
        key = f"{width:.2f}"
        if key not in groups:
            groups[key] = [0, width, fixings_for_panel(width, family, spacing, spigots_per_panel)]
        groups[key][0] += 1

    position_mode = spigots_per_panel if family is HardwareFamily.SPIGOTS else SpigotsPerPanel.AUTO
    with_positions = spacing is not None and family in _POINT_FIXED_FAMILIES

    ordered = sorted(groups.values(), key=lambda group: group[1], reverse=True)
    panel_groups = tuple(
        PanelGroup(
            count=count,
            width_mm=width,
            fixings_each=each,
            positions_mm=tuple(spigot_positions(width, spacing, position_mode)) if with_positions else (),
        )
        for count, width, each in ordered
    )

    total_fixings = sum(group.count * (group.fixings_each or 0) for group in panel_groups)
    if calc_key in DOUBLE_DISC_CALCULATORS:
        total_fixings *= 2

    return PanelAggregate(
        groups=panel_groups,
        total_fixings=total_fixings,
        total_panels=total_panels,
        fixing_label=FIXING_LABELS[family],
    )


def spigot_positions(
    width_mm: float,
    spacing: ResolvedSpacing,
    mode: SpigotsPerPanel = SpigotsPerPanel.AUTO,
) -> list[float]:
    """Offsets of each fixing from the left edge of a panel.

    Fixings are spread evenly between the two edge distances. Auto mode uses
    the spacing formula, limited to four positions.
    """
    needed = spigots_for_panel(width_mm, spacing)
    if mode.forced is not None:
        needed = mode.forced
    else:
        needed = min(needed, _AUTO_POSITION_LIMIT)

    edge = spacing.edge_spacing_mm
    span = width_mm - 2 * edge
    step = span / (needed - 1) if needed > 1 else span
    return [edge + step * i for i in range(needed)]
