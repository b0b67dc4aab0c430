"""Unit tests for the project-to-input adapter."""

from typing import Any

from balustrade.application.config import (
    BalustradeConfiguration,
    GateConfig,
    config_to_gate_spec,
    config_to_input,
    config_to_side_gates,
)
from balustrade.domain.value_objects import GateSpec


def make_config(**layout_overrides: Any) -> BalustradeConfiguration:
    layout: dict[str, Any] = {
        "calc_key": "SP12",
        "shape": "corner",
        "side_lengths_mm": [3000, 2000],
        "glass_thickness_mm": 12,
        "glass_height_mm": 1100,
        "wind_zone": "vh",
    }
    layout.update(layout_overrides)
    return BalustradeConfiguration(
        schema_version="1.1",
        layout=layout,
        solver={"gap_min_mm": 8, "gap_max_mm": 12, "max_panel_width_mm": 1200, "max_fixings_per_panel": 3},
    )


class TestConfigToGateSpec:
    """Tests for gate conversion."""

    def test_default_leaf_width(self) -> None:
        assert config_to_gate_spec(GateConfig(side=0)) == GateSpec()

    def test_fields_carried(self) -> None:
        spec = config_to_gate_spec(GateConfig(side=1, boundary=2, hinge_on_left=False, leaf_width_mm=950, enabled=False))

        assert spec == GateSpec(enabled=False, panel_boundary_index=2, hinge_on_left=False, leaf_width_mm=950)


class TestConfigToSideGates:
    """Tests for laying gates out per side."""

    def test_one_slot_per_side(self) -> None:
        gates = config_to_side_gates(make_config(gates=[{"side": 1, "boundary": 1}]))

        assert gates == [None, GateSpec(panel_boundary_index=1)]

    def test_no_gates(self) -> None:
        assert config_to_side_gates(make_config()) == [None, None]


class TestConfigToInput:
    """Tests for the full conversion."""

    def test_layout_fields(self) -> None:
        calculation_input = config_to_input(
            make_config(fixing_type="Concrete", finish="SSS", handrail="S40", spigots_per_panel=2)
        )

        assert calculation_input.calc_key == "sp12"
        assert calculation_input.shape == "corner"
        assert calculation_input.side_lengths_mm == [3000, 2000]
        assert calculation_input.wind_zone == "VH"
        assert calculation_input.fixing_type == "Concrete"
        assert calculation_input.finish == "SSS"
        assert calculation_input.handrail == "S40"
        assert calculation_input.spigots_per_panel == "2"

    def test_solver_fields(self) -> None:
        calculation_input = config_to_input(make_config())

        assert calculation_input.gap_min_mm == 8
        assert calculation_input.gap_max_mm == 12
        assert calculation_input.max_panel_width_mm == 1200
        assert calculation_input.panel_step_mm == 10
        assert calculation_input.max_fixings_per_panel == 3

    def test_input_is_valid(self) -> None:
        """Converted projects pass input validation."""
        assert config_to_input(make_config(gate_leaf_width_mm=900)).validate() == []
