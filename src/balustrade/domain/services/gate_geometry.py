"""Gate geometry: gate placement, hinge/latch classification and fixing counts.

A gate sits at a panel boundary b in [0, panel_count]. Boundary 0 is the left
end of the side and panel_count the right end. The gate footprint (hinge gap,
leaf, latch gap) takes the place of the ordinary gap at that boundary.
"""

from __future__ import annotations

import math
from dataclasses import replace
from typing import Iterable

from ..value_objects import (
    MAX_GATE_LEAF_WIDTH_MM,
    MIN_GATE_LEAF_WIDTH_MM,
    GateHardwareTally,
    GateOffsets,
    GateSegment,
    GateSpec,
    PanelLayout,
    ResolvedSpacing,
    SegmentKind,
)

__all__ = [
    "HINGE_GAP_GLASS_MM",
    "HINGE_GAP_WALL_MM",
    "LATCH_GAP_GLASS_MM",
    "LATCH_GAP_WALL_MM",
    "apply_gate",
    "classify_gate",
    "clamp_leaf_width",
    "flip_gate",
    "move_gate",
    "reclamp_gate",
    "resize_gate",
    "spigots_for_panel",
    "tally_gate_hardware",
]

HINGE_GAP_GLASS_MM = 5.0
HINGE_GAP_WALL_MM = 7.0
LATCH_GAP_GLASS_MM = 10.0
LATCH_GAP_WALL_MM = 7.5


def spigots_for_panel(width_mm: float, spacing: ResolvedSpacing) -> int:
    """Fixing points a panel needs: max(2, ceil((w - 2*edge) / internal) + 1)."""
    needed = math.ceil((width_mm - 2 * spacing.edge_spacing_mm) / spacing.internal_spacing_mm) + 1
    return max(2, needed)


def clamp_leaf_width(leaf_width_mm: float) -> float:
    return min(MAX_GATE_LEAF_WIDTH_MM, max(MIN_GATE_LEAF_WIDTH_MM, leaf_width_mm))


def _clamp_boundary(index: int, panel_count: int) -> int:
    return min(panel_count, max(0, index))


def reclamp_gate(spec: GateSpec, panel_count: int) -> GateSpec:
    """Bring a gate back within range after the panel count changed."""
    return replace(
        spec,
        panel_boundary_index=_clamp_boundary(spec.panel_boundary_index, panel_count),
        leaf_width_mm=clamp_leaf_width(spec.leaf_width_mm),
    )


def move_gate(spec: GateSpec, delta: int, panel_count: int) -> GateSpec:
    """Shift the gate by delta boundaries, staying within the side."""
    return replace(spec, panel_boundary_index=_clamp_boundary(spec.panel_boundary_index + delta, panel_count))


def flip_gate(spec: GateSpec) -> GateSpec:
    """Swap hinge and latch sides without moving the gate."""
    return replace(spec, hinge_on_left=not spec.hinge_on_left)


def resize_gate(spec: GateSpec, leaf_width_mm: float) -> GateSpec:
    return replace(spec, leaf_width_mm=clamp_leaf_width(leaf_width_mm))


def classify_gate(spec: GateSpec, panel_count: int) -> tuple[bool, bool]:
    """Classify hinge and latch fixings as glass (True) or wall (False).

    A side of the gate fixes to glass when a panel exists on that side of
    the boundary.

    Returns:
        (hinge_to_glass, latch_to_glass)
    """
    boundary = _clamp_boundary(spec.panel_boundary_index, panel_count)
    has_left = boundary > 0
    has_right = boundary < panel_count
    if spec.hinge_on_left:
        return has_left, has_right
    return has_right, has_left


def apply_gate(layout: PanelLayout, gate_spec: GateSpec) -> tuple[GateSpec, GateOffsets]:
    """Place a gate on a side and derive its segment offsets.

    Args:
        layout: The solved layout of the side.
        gate_spec: Requested gate placement.

    Returns:
        The re-clamped gate spec and the derived offsets. Segments run left
        to right; their cumulative length may exceed the side run because
        the gate footprint replaces one ordinary gap.
    """
    spec = reclamp_gate(gate_spec, layout.panel_count)
    boundary = spec.panel_boundary_index
    hinge_to_glass, latch_to_glass = classify_gate(spec, layout.panel_count)

    hinge_gap = HINGE_GAP_GLASS_MM if hinge_to_glass else HINGE_GAP_WALL_MM
    latch_gap = LATCH_GAP_GLASS_MM if latch_to_glass else LATCH_GAP_WALL_MM
    hinge_piece = (SegmentKind.HINGE_GAP, hinge_gap)
    latch_piece = (SegmentKind.LATCH_GAP, latch_gap)
    leaf_piece = (SegmentKind.GATE_LEAF, spec.leaf_width_mm)
    if spec.hinge_on_left:
        gate_pieces = (hinge_piece, leaf_piece, latch_piece)
    else:
        gate_pieces = (latch_piece, leaf_piece, hinge_piece)

    segments: list[GateSegment] = []
    cursor = 0.0
    gate_start = 0.0

    def emit(kind: SegmentKind, width: float, panel_index: int | None = None) -> None:
        nonlocal cursor
        segments.append(GateSegment(kind=kind, start_mm=cursor, width_mm=width, panel_index=panel_index))
        cursor += width

    def emit_boundary(index: int) -> None:
        nonlocal gate_start
        if index == boundary:
            gate_start = cursor
            for kind, width in gate_pieces:
                emit(kind, width)
        else:
            emit(SegmentKind.GAP, layout.gap_mm)

    emit_boundary(0)
    for index, width in enumerate(layout.panel_widths_mm):
        emit(SegmentKind.PANEL, width, panel_index=index)
        emit_boundary(index + 1)

    offsets = GateOffsets(
        segments=tuple(segments),
        hinge_to_glass=hinge_to_glass,
        latch_to_glass=latch_to_glass,
        omit_leading_gap=boundary == 0,
        gate_start_mm=gate_start,
        footprint_mm=hinge_gap + spec.leaf_width_mm + latch_gap,
    )
    return spec, offsets


def tally_gate_hardware(gates: Iterable[tuple[GateSpec | None, int]]) -> GateHardwareTally:
    """Count hinge and latch fixings for every enabled gate.

    Args:
        gates: (gate spec, panel count of its side) pairs; None or disabled
            specs are skipped.
    """
    total = hinge_glass = hinge_wall = latch_glass = latch_wall = 0
    for spec, panel_count in gates:
        if spec is None or not spec.enabled:
            continue
        total += 1
        hinge_to_glass, latch_to_glass = classify_gate(spec, panel_count)
        if hinge_to_glass:
            hinge_glass += 1
        else:
            hinge_wall += 1
        if latch_to_glass:
            latch_glass += 1
        else:
            latch_wall += 1
    return GateHardwareTally(
        total_gates=total,
        hinge_glass=hinge_glass,
        hinge_wall=hinge_wall,
        latch_glass=latch_glass,
        latch_wall=latch_wall,
    )
