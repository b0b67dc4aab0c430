"""Unit tests for the order list builder.

These tests verify:
- Primary fixing lines and fixing kits for point-fixed systems
- Handrail, joiner, wall attachment and powdercoat lines
- Gate hinge and latch lines
- Channel kits
- Line merging, descriptions and free-text normalization
"""

import pytest

from balustrade.application.dtos import CalculationInput, CalculationResult
from balustrade.domain.services.order_list import (
    OrderContext,
    build_channel_order,
    build_order_list,
    build_point_fixed_order,
    describe,
    normalize_finish,
    normalize_fixing,
    normalize_handrail,
    push_item,
)
from balustrade.domain.value_objects import (
    FinishCode,
    GateHardwareTally,
    GateSpec,
    HardwareFamily,
    OrderItem,
    PanelLayout,
    Shape,
    StructuralSystem,
)


def codes(items: list[OrderItem]) -> list[str]:
    return [item.code for item in items]


def quantities(items: list[OrderItem]) -> dict[str, float]:
    return {item.code: item.quantity for item in items}


@pytest.fixture
def sp12_result() -> CalculationResult:
    """Two 1480mm panels on a 3000mm side with six spigots."""
    layout = PanelLayout(panel_widths_mm=(1480.0, 1480.0), gap_mm=40 / 3, adjusted_length_mm=3000.0)
    return CalculationResult(
        calc_key="sp12",
        total_run_mm=3000.0,
        side_runs_mm=[3000.0],
        side_layouts=[layout],
        all_panels_mm=[1480.0, 1480.0],
        total_fixings=6,
        side_gates=[None],
    )


class TestBuildOrderList:
    """Tests for the order list entry point."""

    def test_spigots_with_concrete_kit(self, sp12_result: CalculationResult) -> None:
        """SP12 in satin stainless into concrete with six spigots."""
        calculation_input = CalculationInput(
            calc_key="sp12", side_lengths_mm=[3000.0], finish="SSS", fixing_type="Concrete"
        )

        items = build_order_list("sp12", calculation_input, sp12_result)

        assert items == [
            OrderItem("SP12-SS", "SP12 Side Fix Post", 6),
            OrderItem("SP12FK-1", "SP12 Concrete Fixing Kit", 6),
        ]
        assert len(set(codes(items))) == len(items)

    def test_no_fixing_no_kit(self, sp12_result: CalculationResult) -> None:
        """Unrecognised fixings add no kit line."""
        calculation_input = CalculationInput(calc_key="sp12", side_lengths_mm=[3000.0], fixing_type="Glue")

        assert codes(build_order_list("sp12", calculation_input, sp12_result)) == ["SP12-SS"]

    def test_powdercoat_handrail(self, sp12_result: CalculationResult) -> None:
        """Powdercoat orders stainless parts plus coating surcharges."""
        calculation_input = CalculationInput(
            calc_key="sp12", side_lengths_mm=[3000.0], finish="Powdercoat", handrail="S40"
        )

        items = quantities(build_order_list("sp12", calculation_input, sp12_result))

        assert items == {
            "SP12-SS": 6,
            "S40-SS": 1,
            "S40GR1": 3,
            "S40J180-SS": 1,
            "S40WAL-SS": 1,
            "S40WAR-SS": 1,
            "PC-BRACKET": 3,
            "PC-PERM": 3.0,
        }

    def test_handrail_none_string(self, sp12_result: CalculationResult) -> None:
        """A handrail of "none" adds no handrail lines."""
        calculation_input = CalculationInput(calc_key="sp12", side_lengths_mm=[3000.0], handrail="none")

        assert codes(build_order_list("sp12", calculation_input, sp12_result)) == ["SP12-SS"]

    def test_handrail_code_case_insensitive(self, sp12_result: CalculationResult) -> None:
        """A lower-case handrail code orders the same lines as the upper-case one."""
        lower = CalculationInput(calc_key="sp12", side_lengths_mm=[3000.0], handrail=" s40 ")
        upper = CalculationInput(calc_key="sp12", side_lengths_mm=[3000.0], handrail="S40")

        items = build_order_list("sp12", lower, sp12_result)

        assert items == build_order_list("sp12", upper, sp12_result)
        assert {"S40-SS", "S40GR1", "S40WAL-SS", "S40WAR-SS"} <= set(codes(items))

    def test_gate_lines(self, sp12_result: CalculationResult) -> None:
        """A gate at the left end takes a wall hinge and a glass latch."""
        sp12_result.side_gates = [GateSpec(panel_boundary_index=0)]
        calculation_input = CalculationInput(calc_key="sp12", side_lengths_mm=[3000.0])

        items = quantities(build_order_list("sp12", calculation_input, sp12_result))

        assert items["ASC90"] == 1
        assert items["PL180GG"] == 1
        assert "ASC180" not in items
        assert "PL090WG" not in items

    def test_unknown_calculator(self, sp12_result: CalculationResult) -> None:
        """Unknown calculators yield an empty list."""
        calculation_input = CalculationInput(calc_key="nope", side_lengths_mm=[3000.0])

        assert build_order_list("nope", calculation_input, sp12_result) == []

    def test_zero_fixings(self) -> None:
        """Point-fixed systems with no fixings order nothing."""
        calculation_input = CalculationInput(calc_key="sp12", side_lengths_mm=[3000.0])

        assert build_order_list("sp12", calculation_input, CalculationResult(calc_key="sp12")) == []


class TestPointFixedOrder:
    """Tests driven directly from an OrderContext."""

    def test_ah40_black_corner_with_gate(self) -> None:
        """AH40 uses its own joiners, wall brackets and endcaps."""
        ctx = OrderContext(
            calc_key="sp12",
            family=HardwareFamily.SPIGOTS,
            finish=FinishCode.BK,
            handrail="AH40",
            shape=Shape.CORNER,
            total_fixings=8,
            total_run_mm=6000,
            gates=GateHardwareTally(total_gates=1, hinge_wall=1, latch_glass=1),
        )

        items = build_point_fixed_order(ctx)

        assert codes(items) == [
            "SP12-BK",
            "AH40-BK",
            "AHGR1",
            "AHJ180",
            "AHJ90",
            "AHWB-BK",
            "AHEC-BK",
            "ASC90",
            "PL180GG",
        ]
        assert quantities(items)["AH40-BK"] == 2
        assert quantities(items)["AHGR1"] == 6
        assert quantities(items)["AHWB-BK"] == 2
        assert quantities(items)["AHEC-BK"] == 2

    def test_enclosed_pool_has_no_wall_ends(self) -> None:
        """Enclosed pool fences skip wall attachments and corner joiners."""
        ctx = OrderContext(
            calc_key="sp12",
            family=HardwareFamily.SPIGOTS,
            handrail="R40",
            shape=Shape.ENCLOSED,
            structural_system=StructuralSystem.POOL,
            total_fixings=20,
            total_run_mm=12000,
        )

        result = codes(build_point_fixed_order(ctx))

        assert "R40WA-SS" not in result
        assert "R40J90-SS" not in result
        assert "R40J180-SS" in result

    def test_disc_head_replaces_prefix(self) -> None:
        """Standoff disc heads become the primary code."""
        ctx = OrderContext(
            calc_key="sd50",
            family=HardwareFamily.STANDOFFS,
            disc_head="SD50-SH",
            fixing_type="Concrete",
            total_fixings=16,
        )

        items = build_point_fixed_order(ctx)

        assert items[0] == OrderItem("SD50-SH-SS", "SD50-SH Screw Head", 16)
        assert items[1] == OrderItem("SD50FK-1", "SD50 Concrete Fixing Kit", 16)


class TestChannelOrder:
    """Tests for channel kit ordering."""

    def test_kits_cover_run(self) -> None:
        """Channel is ordered in 3m kits."""
        ctx = OrderContext(calc_key="smartlock_top", family=HardwareFamily.CHANNEL, total_run_mm=6500)

        assert build_channel_order(ctx) == [
            OrderItem("SLTF-KIT-SS", "Smart Lock Top Fix Channel Kit (3m)", 3)
        ]

    def test_mill_finish_has_no_suffix(self) -> None:
        ctx = OrderContext(
            calc_key="lugano", family=HardwareFamily.CHANNEL, finish=FinishCode.MILL, total_run_mm=2000
        )

        assert codes(build_channel_order(ctx)) == ["LUGANO-KIT"]

    def test_no_run(self) -> None:
        ctx = OrderContext(calc_key="vista", family=HardwareFamily.CHANNEL)

        assert build_channel_order(ctx) == []


class TestPushItem:
    """Tests for line merging."""

    def test_merges_same_code(self) -> None:
        """Repeated codes add to one line."""
        items: list[OrderItem] = []
        push_item(items, "ASC90", 1)
        push_item(items, "ASC90", 2)

        assert items == [OrderItem("ASC90", "Wall-to-Glass Gate Hinge (ASC90)", 3)]

    @pytest.mark.parametrize("quantity", [0, -1, float("nan"), float("inf"), "abc"])
    def test_drops_invalid_quantities(self, quantity: object) -> None:
        items: list[OrderItem] = []
        push_item(items, "ASC90", quantity)  # type: ignore[arg-type]

        assert items == []

    def test_drops_empty_code(self) -> None:
        items: list[OrderItem] = []
        push_item(items, "", 1)

        assert items == []

    def test_rounds_to_two_decimals(self) -> None:
        items: list[OrderItem] = []
        push_item(items, "PC-PERM", 1.234)

        assert items[0].quantity == 1.23

    def test_explicit_description(self) -> None:
        items: list[OrderItem] = []
        push_item(items, "CUSTOM", 1, description="Custom part")

        assert items[0].description == "Custom part"


class TestDescribe:
    """Tests for product code descriptions."""

    @pytest.mark.parametrize(
        "code, expected",
        [
            ("SP12-SS", "SP12 Side Fix Post"),
            ("S40-BK", "S40 Square Handrail (40x40mm)"),
            ("SD50FK-1", "SD50 Concrete Fixing Kit"),
            ("SD100-SS", "SD100 Glass Standoff"),
            ("VORTEX-SS", "VORTEX Glass Post"),
            ("PF150R-BK", "PF150R Concealed Clamp"),
            ("XYZ", "XYZ"),
        ],
    )
    def test_describe(self, code: str, expected: str) -> None:
        assert describe(code) == expected


class TestNormalization:
    """Tests for free-text finish and fixing normalization."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            (None, FinishCode.SS),
            ("SSS", FinishCode.SS),
            ("Satin Stainless", FinishCode.SS),
            ("Polished Stainless", FinishCode.PS),
            ("Black", FinishCode.BK),
            ("powder-coat", FinishCode.PC),
            ("mill", FinishCode.MILL),
            ("Gold", FinishCode.SS),
        ],
    )
    def test_normalize_finish(self, raw: str | None, expected: FinishCode) -> None:
        assert normalize_finish(raw) == expected

    @pytest.mark.parametrize(
        "raw, expected",
        [
            (None, None),
            ("Concrete (Single Fix)", "Concrete"),
            ("Steel", "Steel"),
            ("Timber Lag/Coach Screw", "Timber (Coach Screw)"),
            ("Timber Through Bolt", "Timber (Bolt Through)"),
            ("Glue", None),
        ],
    )
    def test_normalize_fixing(self, raw: str | None, expected: str | None) -> None:
        assert normalize_fixing(raw) == expected

    @pytest.mark.parametrize(
        "raw, expected",
        [
            (None, None),
            ("", None),
            ("None", None),
            (" s40 ", "S40"),
            ("ah40", "AH40"),
        ],
    )
    def test_normalize_handrail(self, raw: str | None, expected: str | None) -> None:
        assert normalize_handrail(raw) == expected
