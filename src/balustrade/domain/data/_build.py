"""Helpers for declaring spacing tables."""

from __future__ import annotations

from ..value_objects import SpacingRow, StructuralSystem, WindZone

RowTuple = tuple[str, float, float, float, str, float, float]


def build_rows(entries: tuple[RowTuple, ...]) -> tuple[SpacingRow, ...]:
    """Build an immutable table from (system, thickness, hmin, hmax, zone, internal, edge) tuples."""
    return tuple(
        SpacingRow(
            structural_system=StructuralSystem(system),
            thickness_mm=float(thickness),
            height_min_mm=float(hmin),
            height_max_mm=float(hmax),
            zone=WindZone(zone),
            internal_spacing_mm=float(internal),
            edge_spacing_mm=float(edge),
        )
        for system, thickness, hmin, hmax, zone, internal, edge in entries
    )
