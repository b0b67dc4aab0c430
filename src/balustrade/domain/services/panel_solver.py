"""Panel solver: equal-width panels with a uniform gap along one side.

The solver prefers the fewest panels. For each candidate count it walks panel
widths downward from the widest that fits, and accepts the first width whose
resulting gap lies within the configured gap bounds.
"""

from __future__ import annotations

import logging
import math

from ..value_objects import MIN_PANEL_WIDTH_MM, PanelLayout, ResolvedSpacing
from .gate_geometry import spigots_for_panel

logger = logging.getLogger(__name__)

__all__ = [
    "PANEL_COUNT_CEILING",
    "fixing_constrained_width",
    "solve_panel_layout",
]

# Panel counts are searched below this value
PANEL_COUNT_CEILING = 600


def fixing_constrained_width(spacing: ResolvedSpacing, max_fixings_per_panel: int) -> float:
    """Widest panel that needs no more than the given number of fixings."""
    return spacing.edge_spacing_mm * 2 + (max_fixings_per_panel - 1) * spacing.internal_spacing_mm


def solve_panel_layout(
    run_mm: float,
    gap_min_mm: float,
    gap_max_mm: float,
    max_panel_width_mm: float,
    panel_step_mm: float | None,
    spacing: ResolvedSpacing | None = None,
    max_fixings_per_panel: int | None = None,
    min_panel_width_mm: float = MIN_PANEL_WIDTH_MM,
) -> PanelLayout | None:
    """Find the first feasible equal-width layout for a run.

    Args:
        run_mm: Side length to fill.
        gap_min_mm: Smallest allowed gap.
        gap_max_mm: Largest allowed gap.
        max_panel_width_mm: Widest panel allowed.
        panel_step_mm: Width increment; 0 or None searches in 1mm steps.
        spacing: Resolved spacing, required for the fixing cap.
        max_fixings_per_panel: Optional cap on fixings per panel.
        min_panel_width_mm: Narrowest panel the search will try.

    Returns:
        A PanelLayout with identical widths, or None when no count below the
        ceiling yields a gap within bounds.

    Raises:
        ValueError: If the run or max width is not positive, or the gap
            bounds are inverted or negative.
    """
    if run_mm <= 0:
        raise ValueError("Run length must be positive")
    if max_panel_width_mm <= 0:
        raise ValueError("Max panel width must be positive")
    if gap_min_mm < 0:
        raise ValueError("Minimum gap must be non-negative")
    if gap_min_mm > gap_max_mm:
        raise ValueError("Minimum gap cannot exceed maximum gap")

    step = panel_step_mm or 1
    capped = bool(max_fixings_per_panel) and spacing is not None

    effective_max = max_panel_width_mm
    if capped:
        effective_max = min(max_panel_width_mm, fixing_constrained_width(spacing, max_fixings_per_panel))

    count = math.ceil(run_mm / effective_max)
    while count < PANEL_COUNT_CEILING:
        width = min(effective_max, math.floor(run_mm / count / step) * step)
        while width >= min_panel_width_mm:
            if capped and spigots_for_panel(width, spacing) > max_fixings_per_panel:
                width = fixing_constrained_width(spacing, max_fixings_per_panel)
                if width < min_panel_width_mm:
                    break

            gap = (run_mm - width * count) / (count + 1)
            if gap_min_mm <= gap <= gap_max_mm:
                logger.debug(f"Solved {run_mm}mm run: {count} x {width}mm panels, gap {gap:.2f}mm")
                return PanelLayout(
                    panel_widths_mm=tuple([float(width)] * count),
                    gap_mm=gap,
                    adjusted_length_mm=run_mm,
                )
            width -= step
        count += 1

    logger.debug(f"No layout for {run_mm}mm run within gap {gap_min_mm}-{gap_max_mm}mm")
    return None
