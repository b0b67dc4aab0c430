"""Integration tests for CalculateLayoutCommand.

These tests verify the full pipeline from input to order list:
- Compliance lookup feeding the panel solver
- Forced fixings capping panel width
- Gate placement, leaf clamping and gate hardware lines
- Error reporting for unknown, missing and non-engineered combinations
- Channel and post families
- Multi-side shapes
- Injected engines
"""

import pytest

from balustrade.application.commands import CalculateLayoutCommand
from balustrade.application.dtos import CalculationInput
from balustrade.domain import GateSpec, solve_panel_layout


def _codes(result) -> dict[str, float]:
    return {item.code: item.quantity for item in result.order_items}


class TestBasicCalculation:
    """Tests for a single-side spigot run."""

    def test_sp12_inline_run(self, calculate_command: CalculateLayoutCommand, sp12_input: CalculationInput) -> None:
        result = calculate_command.execute(sp12_input)

        assert result.is_valid
        assert result.all_panels_mm == [1480.0, 1480.0]
        assert result.total_fixings == 6
        assert result.fixing_label == "spigot"
        assert result.panels_summary == "2 × @1480.00 mm (3 spigots each)"
        assert _codes(result) == {"SP12-SS": 6}
        assert result.notes == []

    def test_spacing_recorded(self, calculate_command: CalculateLayoutCommand, sp12_input: CalculationInput) -> None:
        result = calculate_command.execute(sp12_input)

        assert result.spacing is not None
        assert result.spacing.internal_spacing_mm == 800
        assert result.spacing.edge_spacing_mm == 250

    def test_forced_two_spigots_narrows_panels(self, calculate_command: CalculateLayoutCommand) -> None:
        """With two spigots forced, panels cannot exceed 2 * 250 + 800 = 1300mm."""
        calculation_input = CalculationInput(
            calc_key="sp12",
            side_lengths_mm=[3000.0],
            glass_thickness_mm=12.0,
            glass_height_mm=1100.0,
            wind_zone="VH",
            spigots_per_panel="2",
        )
        result = calculate_command.execute(calculation_input)

        assert result.is_valid
        assert result.all_panels_mm == [980.0, 980.0, 980.0]
        assert result.side_layouts[0].gap_mm == pytest.approx(15.0)
        assert result.total_fixings == 6

    def test_height_outside_bands_adds_note(self, calculate_command: CalculateLayoutCommand) -> None:
        calculation_input = CalculationInput(
            calc_key="sp12",
            side_lengths_mm=[3000.0],
            glass_thickness_mm=12.0,
            glass_height_mm=1250.0,
            wind_zone="VH",
        )
        result = calculate_command.execute(calculation_input)

        assert result.is_valid
        assert any("outside the certified bands" in note and "1050-1150mm" in note for note in result.notes)
        assert result.spacing.internal_spacing_mm == 750

    def test_clamped_spacing_adds_note(self, calculate_command: CalculateLayoutCommand) -> None:
        calculation_input = CalculationInput(
            calc_key="pf150",
            side_lengths_mm=[3000.0],
            glass_thickness_mm=12.0,
            glass_height_mm=1100.0,
            wind_zone="EH",
        )
        result = calculate_command.execute(calculation_input)

        assert result.is_valid
        assert result.spacing.clamped
        assert result.spacing.internal_spacing_mm == 300
        assert any(note.startswith("Spacing reduced") for note in result.notes)

    def test_double_disc_note(self, calculate_command: CalculateLayoutCommand) -> None:
        """SD50 fits two discs at each of the four positions on a 1480mm panel."""
        calculation_input = CalculationInput(
            calc_key="sd50",
            side_lengths_mm=[3000.0],
            glass_thickness_mm=12.0,
            glass_height_mm=1000.0,
            wind_zone="L",
        )
        result = calculate_command.execute(calculation_input)

        assert result.is_valid
        assert result.total_fixings == 16
        assert result.fixing_label == "standoff"
        assert any("Two discs" in note for note in result.notes)

    def test_forced_mode_ignored_for_standoffs(self, calculate_command: CalculateLayoutCommand) -> None:
        """Spigots-per-panel does not narrow or re-count standoff layouts."""
        calculation_input = CalculationInput(
            calc_key="sd50",
            side_lengths_mm=[3000.0],
            glass_thickness_mm=12.0,
            glass_height_mm=1000.0,
            wind_zone="L",
            spigots_per_panel="2",
        )
        result = calculate_command.execute(calculation_input)

        assert result.is_valid
        assert result.all_panels_mm == [1480.0, 1480.0]
        assert result.total_fixings == 16

    def test_panel_groups_recorded(self, calculate_command: CalculateLayoutCommand, sp12_input: CalculationInput) -> None:
        result = calculate_command.execute(sp12_input)

        assert len(result.panel_groups) == 1
        assert result.panel_groups[0].positions_mm == pytest.approx((250, 740, 1230))


class TestGates:
    """Tests for gate placement within a calculation."""

    def test_gate_at_left_end(self, calculate_command: CalculateLayoutCommand, sp12_input: CalculationInput) -> None:
        sp12_input.side_gates = [GateSpec()]
        result = calculate_command.execute(sp12_input)

        assert result.is_valid
        assert result.total_gates == 1
        assert result.side_gate_offsets[0] is not None
        assert not result.side_gate_offsets[0].hinge_to_glass
        assert result.side_gate_offsets[0].latch_to_glass
        assert "Gate on side 1 extends the side to 3893.7mm (run 3000mm)" in result.notes

        codes = _codes(result)
        assert codes["SP12-SS"] == 6
        assert codes["ASC90"] == 1
        assert codes["PL180GG"] == 1

    def test_gate_does_not_change_panels(
        self, calculate_command: CalculateLayoutCommand, sp12_input: CalculationInput
    ) -> None:
        sp12_input.side_gates = [GateSpec()]
        result = calculate_command.execute(sp12_input)

        assert result.all_panels_mm == [1480.0, 1480.0]

    def test_leaf_override_is_clamped(
        self, calculate_command: CalculateLayoutCommand, sp12_input: CalculationInput
    ) -> None:
        sp12_input.side_gates = [GateSpec(leaf_width_mm=700.0)]
        sp12_input.gate_leaf_width_mm = 1200.0
        result = calculate_command.execute(sp12_input)

        assert result.gate_leaf_width_mm == 1000.0
        assert result.side_gates[0].leaf_width_mm == 1000.0

    def test_disabled_gate_ignored(self, calculate_command: CalculateLayoutCommand, sp12_input: CalculationInput) -> None:
        sp12_input.side_gates = [GateSpec(enabled=False)]
        result = calculate_command.execute(sp12_input)

        assert result.is_valid
        assert result.total_gates == 0
        assert result.side_gate_offsets == [None]
        assert _codes(result) == {"SP12-SS": 6}

    def test_default_leaf_width(self, calculate_command: CalculateLayoutCommand, sp12_input: CalculationInput) -> None:
        result = calculate_command.execute(sp12_input)

        assert result.gate_leaf_width_mm == 890.0


class TestCalculationErrors:
    """Tests for error reporting."""

    def test_unknown_calculator(self, calculate_command: CalculateLayoutCommand) -> None:
        result = calculate_command.execute(CalculationInput(calc_key="sp99", side_lengths_mm=[3000.0]))

        assert not result.is_valid
        assert any("Unknown calculator" in error for error in result.errors)

    def test_no_compliance_data(self, calculate_command: CalculateLayoutCommand) -> None:
        calculation_input = CalculationInput(
            calc_key="sd75",
            side_lengths_mm=[3000.0],
            glass_thickness_mm=12.0,
            glass_height_mm=1100.0,
            wind_zone="L",
        )
        result = calculate_command.execute(calculation_input)

        assert not result.is_valid
        assert result.errors[0].startswith("No compliance data for sd75")
        assert result.order_items == []

    def test_not_engineered(self, calculate_command: CalculateLayoutCommand) -> None:
        calculation_input = CalculationInput(
            calc_key="sd50",
            side_lengths_mm=[3000.0],
            fence_type="pool",
            glass_thickness_mm=12.0,
            glass_height_mm=1200.0,
            wind_zone="VH",
        )
        result = calculate_command.execute(calculation_input)

        assert not result.is_valid
        assert result.errors[0].startswith("Combination not engineered")
        assert result.spacing is not None
        assert not result.spacing.is_permitted

    def test_infeasible_side(self, calculate_command: CalculateLayoutCommand, sp12_input: CalculationInput) -> None:
        sp12_input.side_lengths_mm = [100.0]
        result = calculate_command.execute(sp12_input)

        assert not result.is_valid
        assert result.errors == ["Layout not achievable for side 1 (100mm) with gaps 10-30mm"]

    def test_invalid_input_short_circuits(self, calculate_command: CalculateLayoutCommand) -> None:
        result = calculate_command.execute(
            CalculationInput(calc_key="sp12", side_lengths_mm=[3000.0], wind_zone="XX")
        )

        assert not result.is_valid
        assert result.spacing is None


class TestFamilies:
    """Tests for channel and post systems."""

    def test_channel_orders_kits(self, calculate_command: CalculateLayoutCommand) -> None:
        calculation_input = CalculationInput(
            calc_key="smartlock_top",
            side_lengths_mm=[3000.0],
            glass_thickness_mm=12.0,
            glass_height_mm=1100.0,
            wind_zone="VH",
        )
        result = calculate_command.execute(calculation_input)

        assert result.is_valid
        assert result.fixing_label == "channel"
        assert result.total_fixings == 0
        assert _codes(result) == {"SLTF-KIT-SS": 1}

    def test_vortex_posts(self, calculate_command: CalculateLayoutCommand) -> None:
        calculation_input = CalculationInput(
            calc_key="vortex",
            side_lengths_mm=[3000.0],
            glass_thickness_mm=12.0,
            glass_height_mm=1100.0,
            wind_zone="VH",
        )
        result = calculate_command.execute(calculation_input)

        assert result.is_valid
        assert result.fixing_label == "post"
        assert result.total_fixings == 4
        assert _codes(result)["VORTEX-SS"] == 4

    def test_resolute_posts(self, calculate_command: CalculateLayoutCommand) -> None:
        calculation_input = CalculationInput(
            calc_key="resolute",
            side_lengths_mm=[3000.0],
            glass_thickness_mm=12.0,
            glass_height_mm=1100.0,
            wind_zone="L",
        )
        result = calculate_command.execute(calculation_input)

        assert result.is_valid
        assert result.spacing.internal_spacing_mm == 1650
        assert result.total_fixings == 4


class TestShapes:
    """Tests for multi-side runs."""

    def test_corner_run(self, calculate_command: CalculateLayoutCommand) -> None:
        calculation_input = CalculationInput(
            calc_key="sp12",
            side_lengths_mm=[3000.0, 2000.0],
            shape="corner",
            glass_thickness_mm=12.0,
            glass_height_mm=1100.0,
            wind_zone="VH",
        )
        result = calculate_command.execute(calculation_input)

        assert result.is_valid
        assert result.total_run_mm == 5000.0
        assert result.all_panels_mm == [1480.0, 1480.0, 980.0, 980.0]
        assert result.total_fixings == 10

    def test_zero_length_side_skipped(self, calculate_command: CalculateLayoutCommand) -> None:
        calculation_input = CalculationInput(
            calc_key="sp12",
            side_lengths_mm=[3000.0, 0.0, 2000.0],
            shape="custom",
            glass_thickness_mm=12.0,
            glass_height_mm=1100.0,
            wind_zone="VH",
        )
        result = calculate_command.execute(calculation_input)

        assert result.is_valid
        assert result.side_layouts[1] is None
        assert result.total_panels == 4

    def test_shape_side_count_mismatch(self, calculate_command: CalculateLayoutCommand, sp12_input: CalculationInput) -> None:
        sp12_input.shape = "corner"
        result = calculate_command.execute(sp12_input)

        assert not result.is_valid
        assert "Shape 'corner' requires 2 side length(s)" in result.errors


class TestInjectedEngines:
    """Tests for swapping engines through the constructor."""

    def test_custom_resolver(self, sp12_input: CalculationInput) -> None:
        command = CalculateLayoutCommand(spacing_resolver=lambda *args: None)
        result = command.execute(sp12_input)

        assert not result.is_valid
        assert result.errors[0].startswith("No compliance data")

    def test_custom_solver_receives_cap(self, sp12_input: CalculationInput) -> None:
        calls = []

        def recording_solver(*args, **kwargs):
            calls.append(kwargs)
            return solve_panel_layout(*args, **kwargs)

        sp12_input.max_fixings_per_panel = 2
        result = CalculateLayoutCommand(panel_solver=recording_solver).execute(sp12_input)

        assert result.is_valid
        assert len(calls) == 1
        assert calls[0]["max_fixings_per_panel"] == 2
        assert result.all_panels_mm == [980.0, 980.0, 980.0]

    def test_custom_order_builder(self, sp12_input: CalculationInput) -> None:
        command = CalculateLayoutCommand(order_list_builder=lambda calc_key, calculation_input, result: [])
        result = command.execute(sp12_input)

        assert result.is_valid
        assert result.order_items == []
