"""Unit tests for fixing counts and panel aggregation."""

import pytest

from balustrade.domain.services.fixings import aggregate_panels, fixings_for_panel, spigot_positions
from balustrade.domain.value_objects import (
    HardwareFamily,
    ResolvedSpacing,
    SpacingRow,
    SpigotsPerPanel,
    StructuralSystem,
    WindZone,
)


@pytest.fixture
def spacing() -> ResolvedSpacing:
    """800mm internal, 250mm edge."""
    row = SpacingRow(StructuralSystem.BALUSTRADE, 12.0, 1000.0, 1100.0, WindZone.VH, 800.0, 250.0)
    return ResolvedSpacing(calc_key="sp12", row=row, internal_spacing_mm=800.0, edge_spacing_mm=250.0)


class TestFixingsForPanel:
    """Tests for per-panel fixing counts by family."""

    def test_channel_has_no_point_fixings(self, spacing: ResolvedSpacing) -> None:
        assert fixings_for_panel(1480, HardwareFamily.CHANNEL, spacing) is None

    def test_posts_by_width(self, spacing: ResolvedSpacing) -> None:
        """Panels up to 600mm take one post, wider panels two."""
        assert fixings_for_panel(600, HardwareFamily.POSTS, spacing) == 1
        assert fixings_for_panel(601, HardwareFamily.POSTS, spacing) == 2

    def test_forced_count(self, spacing: ResolvedSpacing) -> None:
        """A forced mode overrides the spacing formula."""
        assert fixings_for_panel(1480, HardwareFamily.SPIGOTS, spacing, SpigotsPerPanel.TWO) == 2

    def test_forced_count_ignored_for_standoffs(self, spacing: ResolvedSpacing) -> None:
        """Standoffs always follow the spacing formula."""
        assert fixings_for_panel(1480, HardwareFamily.STANDOFFS, spacing, SpigotsPerPanel.TWO) == 3

    def test_auto_count(self, spacing: ResolvedSpacing) -> None:
        assert fixings_for_panel(1480, HardwareFamily.SPIGOTS, spacing) == 3

    def test_auto_without_spacing(self) -> None:
        assert fixings_for_panel(1480, HardwareFamily.SPIGOTS, None) is None


class TestAggregatePanels:
    """Tests for grouping panels and totalling fixings."""

    def test_groups_widest_first(self, spacing: ResolvedSpacing) -> None:
        """Panels are grouped by width and ordered widest first."""
        aggregate = aggregate_panels([980, 1480, 980, 1480], HardwareFamily.SPIGOTS, spacing)

        assert [(g.count, g.width_mm, g.fixings_each) for g in aggregate.groups] == [
            (2, 1480, 3),
            (2, 980, 2),
        ]
        assert aggregate.total_panels == 4
        assert aggregate.total_fixings == 10
        assert aggregate.summary == "2 × @1480.00 mm (3 spigots each)\n2 × @980.00 mm (2 spigots each)"

    def test_double_disc_calculator(self, spacing: ResolvedSpacing) -> None:
        """SD50 counts two discs at every fixing position."""
        aggregate = aggregate_panels(
            [1480, 1480], HardwareFamily.STANDOFFS, spacing, calc_key="sd50"
        )

        assert aggregate.total_fixings == 12
        assert aggregate.fixing_label == "standoff"

    def test_single_post_label(self, spacing: ResolvedSpacing) -> None:
        """A single fixing uses the singular noun."""
        aggregate = aggregate_panels([500], HardwareFamily.POSTS, spacing)

        assert aggregate.summary == "1 × @500.00 mm (1 post each)"

    def test_channel_summary(self, spacing: ResolvedSpacing) -> None:
        """Channel groups have no fixing counts."""
        aggregate = aggregate_panels([1480, 1480], HardwareFamily.CHANNEL, spacing)

        assert aggregate.summary == "2 × @1480.00 mm"
        assert aggregate.total_fixings == 0
        assert aggregate.fixing_label == "channel"

    def test_empty(self, spacing: ResolvedSpacing) -> None:
        aggregate = aggregate_panels([], HardwareFamily.SPIGOTS, spacing)

        assert aggregate.total_panels == 0
        assert aggregate.summary == ""

    def test_groups_carry_positions(self, spacing: ResolvedSpacing) -> None:
        aggregate = aggregate_panels([1480], HardwareFamily.SPIGOTS, spacing, SpigotsPerPanel.TWO)

        assert aggregate.groups[0].positions_mm == pytest.approx((250, 1230))

    def test_standoff_positions_ignore_forced_mode(self, spacing: ResolvedSpacing) -> None:
        aggregate = aggregate_panels([1480], HardwareFamily.STANDOFFS, spacing, SpigotsPerPanel.TWO)

        assert aggregate.groups[0].fixings_each == 3
        assert aggregate.groups[0].positions_mm == pytest.approx((250, 740, 1230))

    def test_posts_have_no_positions(self, spacing: ResolvedSpacing) -> None:
        aggregate = aggregate_panels([1480], HardwareFamily.POSTS, spacing)

        assert aggregate.groups[0].positions_mm == ()


class TestSpigotPositions:
    """Tests for fixing offsets within a panel."""

    def test_auto_positions(self, spacing: ResolvedSpacing) -> None:
        """Fixings are spread evenly between the edge distances."""
        assert spigot_positions(1480, spacing) == pytest.approx([250, 740, 1230])

    def test_forced_positions(self, spacing: ResolvedSpacing) -> None:
        assert spigot_positions(1480, spacing, SpigotsPerPanel.TWO) == pytest.approx([250, 1230])

    def test_auto_limit(self, spacing: ResolvedSpacing) -> None:
        """Auto mode draws at most four positions."""
        positions = spigot_positions(4000, spacing)

        assert len(positions) == 4
        assert positions[0] == 250
        assert positions[-1] == pytest.approx(3750)
