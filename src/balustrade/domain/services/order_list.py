"""Order list builder: derive coded hardware lines from a solved layout.

Builders are registered per hardware family. Point-fixed systems (spigots,
standoffs and posts) share one builder parameterized by the calculator's code
prefix; channel systems are ordered as kits. Every builder feeds push_item,
which merges lines by code so each code appears once.

Combinations without a mapped code are omitted rather than raising.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable

from ..value_objects import (
    FinishCode,
    GateHardwareTally,
    GateSpec,
    HardwareFamily,
    OrderItem,
    PanelLayout,
    Shape,
    StructuralSystem,
)
from ..data import CATALOG
from .compliance import SPACING_STRATEGIES, get_strategy
from .gate_geometry import tally_gate_hardware

logger = logging.getLogger(__name__)

__all__ = [
    "BASE_DESCRIPTIONS",
    "CHANNEL_KITS",
    "ChannelKit",
    "OrderContext",
    "build_order_list",
    "describe",
    "normalize_finish",
    "normalize_fixing",
    "normalize_handrail",
    "order_builder",
    "push_item",
]

RAIL_LENGTH_MM = 5800
GASKET_PITCH_MM = 1000

FINISH_CODE_MAP: dict[str, FinishCode] = {
    "SSS": FinishCode.SS,
    "SS": FinishCode.SS,
    "SATINSTAINLESS": FinishCode.SS,
    "PSS": FinishCode.PS,
    "PS": FinishCode.PS,
    "POLISHEDSTAINLESS": FinishCode.PS,
    "BLACK": FinishCode.BK,
    "BK": FinishCode.BK,
    "POWDERCOAT": FinishCode.PC,
    "PC": FinishCode.PC,
    "MILL": FinishCode.MILL,
}

CONCRETE = "Concrete"
STEEL = "Steel"
TIMBER_COACH_SCREW = "Timber (Coach Screw)"
TIMBER_BOLT_THROUGH = "Timber (Bolt Through)"

# Fixing kit number per canonical fixing, e.g. SP12FK-1
FIXING_KIT_NUMBERS = {
    CONCRETE: 1,
    STEEL: 2,
    TIMBER_COACH_SCREW: 3,
    TIMBER_BOLT_THROUGH: 4,
}

HANDRAIL_GASKETS = {
    "S25": "S25GR",
    "S40": "S40GR1",
    "AH40": "AHGR1",
    "R40": "R40GR1",
}

# Handrail -> (left, right) attachment pair, or a single code ordered in twos
WALL_ATTACHMENT_PAIRS = {
    "S25": ("S25WAL", "S25WAR"),
    "S40": ("S40WAL", "S40WAR"),
}
WALL_ATTACHMENT_SINGLES = {
    "R40": "R40WA",
    "AH40": "AHWB",
}
ROUND_AND_SQUARE_RAILS = frozenset({"S25", "S40", "R40"})

GATE_HINGE_GLASS = "ASC180"
GATE_HINGE_WALL = "ASC90"
GATE_LATCH_GLASS = "PL180GG"
GATE_LATCH_WALL = "PL090WG"

BASE_DESCRIPTIONS: dict[str, str] = {
    "SP12": "SP12 Side Fix Post",
    "SP12FK-1": "SP12 Concrete Fixing Kit",
    "SP12FK-2": "SP12 Steel Fixing Kit",
    "SP12FK-3": "SP12 Timber Fixing Kit (Coach Screw)",
    "SP12FK-4": "SP12 Timber Fixing Kit (Through Bolt)",
    "S25": "S25 Square Handrail (25x25mm)",
    "S40": "S40 Square Handrail (40x40mm)",
    "R40": "R40 Round Handrail (40mm dia)",
    "AH40": "AH40 Aluminium Handrail",
    "S25GR": "S25 Handrail Gasket",
    "S40GR1": "S40 Handrail Gasket",
    "AHGR1": "AH40 Handrail Gasket",
    "R40GR1": "R40 Handrail Gasket",
    "S25J180": "S25 Straight Joiner (180°)",
    "S40J180": "S40 Straight Joiner (180°)",
    "R40J180": "R40 Straight Joiner (180°)",
    "S25J90": "S25 90° Corner Joiner",
    "S40J90": "S40 90° Corner Joiner",
    "R40J90": "R40 90° Corner Joiner",
    "AHJ180": "AH40 Straight Joiner (180°)",
    "AHJ90": "AH40 90° Corner Joiner",
    "S25WAL": "S25 Wall Attachment Left",
    "S25WAR": "S25 Wall Attachment Right",
    "S40WAL": "S40 Wall Attachment Left",
    "S40WAR": "S40 Wall Attachment Right",
    "R40WA": "R40 Wall Attachment",
    "AHWB": "AH40 Wall Bracket",
    "S25EC": "S25 Handrail Endcap",
    "S40EC": "S40 Handrail Endcap",
    "R40EC": "R40 Handrail Endcap",
    "AHEC": "AH40 Handrail Endcap",
    "PC-BRACKET": "Powdercoat - Brackets & Joiners",
    "PC-PERM": "Powdercoat - Handrail (per m)",
    "PC-ENDCAP": "Powdercoat - Handrail Endcaps",
    "ASC180": "Glass-to-Glass Gate Hinge (ASC180)",
    "ASC90": "Wall-to-Glass Gate Hinge (ASC90)",
    "PL180GG": "Glass-to-Glass Gate Latch (PL180GG)",
    "PL090WG": "Glass-to-Wall Gate Latch (PL090WG)",
}

_FINISH_SUFFIX_PATTERN = re.compile(r"-(SS|PS|BK|MILL)$", re.IGNORECASE)

_PRIMARY_NOUNS = {
    HardwareFamily.SPIGOTS: "Glass Spigot",
    HardwareFamily.STANDOFFS: "Glass Standoff",
    HardwareFamily.POSTS: "Glass Post",
}

_FIXING_KIT_DESCRIPTIONS = {
    1: "{prefix} Concrete Fixing Kit",
    2: "{prefix} Steel Fixing Kit",
    3: "{prefix} Timber Fixing Kit (Coach Screw)",
    4: "{prefix} Timber Fixing Kit (Through Bolt)",
}


@dataclass(frozen=True)
class ChannelKit:
    """A channel product ordered as fixed-length kits."""

    code: str
    description: str
    kit_length_mm: float


CHANNEL_KITS: dict[str, ChannelKit] = {
    "smartlock_top": ChannelKit("SLTF-KIT", "Smart Lock Top Fix Channel Kit (3m)", 3000),
    "smartlock_side": ChannelKit("SLSF-KIT", "Smart Lock Side Fix Channel Kit (3m)", 3000),
    "lugano": ChannelKit("LUGANO-KIT", "Lugano Channel Kit (3m)", 3000),
    "vista": ChannelKit("VISTA-KIT", "Vista Channel Kit (3m)", 3000),
}


@dataclass(frozen=True)
class OrderContext:
    """Everything an order builder reads, gathered from a calculation.

    Attributes:
        calc_key: Calculator key, e.g. "sp12".
        family: Hardware family of the calculator.
        finish: Normalized finish code.
        fixing_type: Canonical fixing, or None when unrecognised.
        handrail: Handrail code, or None.
        shape: Plan shape of the run.
        structural_system: Balustrade or pool.
        disc_head: Selected disc head or clamp code, if any.
        total_fixings: Total fixing points from panel aggregation.
        total_run_mm: Total of all side lengths.
        adjusted_run_mm: Total of solved layout lengths.
        gates: Gate tally across all sides.
    """

    calc_key: str
    family: HardwareFamily
    finish: FinishCode = FinishCode.SS
    fixing_type: str | None = None
    handrail: str | None = None
    shape: Shape = Shape.INLINE
    structural_system: StructuralSystem = StructuralSystem.BALUSTRADE
    disc_head: str | None = None
    total_fixings: float = 0
    total_run_mm: float = 0
    adjusted_run_mm: float = 0
    gates: GateHardwareTally = field(default_factory=GateHardwareTally)

    @property
    def effective_run_mm(self) -> float:
        return self.adjusted_run_mm if self.adjusted_run_mm > 0 else self.total_run_mm

    @property
    def is_powdercoat(self) -> bool:
        return self.finish is FinishCode.PC

    @property
    def includes_wall_attachments(self) -> bool:
        """Enclosed pool fences have no wall ends."""
        return not (self.shape is Shape.ENCLOSED and self.structural_system is not StructuralSystem.BALUSTRADE)

    @property
    def corner_count(self) -> int:
        if self.shape is Shape.ENCLOSED and self.structural_system is not StructuralSystem.BALUSTRADE:
            return 0
        return self.shape.corner_count


OrderBuilder = Callable[[OrderContext], "list[OrderItem]"]

_BUILDERS: dict[HardwareFamily, OrderBuilder] = {}


def order_builder(*families: HardwareFamily) -> Callable[[OrderBuilder], OrderBuilder]:
    """Decorator registering an order builder for one or more families."""

    def decorator(func: OrderBuilder) -> OrderBuilder:
        for family in families:
            if family in _BUILDERS:
                logger.warning(f"Overwriting order builder for family '{family.value}'")
            _BUILDERS[family] = func
        return func

    return decorator


def normalize_finish(raw: str | None) -> FinishCode:
    """Map free-text finish names to a finish code, defaulting to satin stainless."""
    if not raw:
        return FinishCode.SS
    key = re.sub(r"\s+", "", raw).replace("-", "").upper()
    return FINISH_CODE_MAP.get(key, FinishCode.SS)


def normalize_fixing(raw: str | None) -> str | None:
    """Map free-text fixing descriptions to a canonical fixing."""
    if not raw:
        return None
    lower = raw.lower()
    if "concrete" in lower:
        return CONCRETE
    if "steel" in lower:
        return STEEL
    if "coach" in lower or "lag" in lower:
        return TIMBER_COACH_SCREW
    if "bolt" in lower:
        return TIMBER_BOLT_THROUGH
    return None


def normalize_handrail(raw: str | None) -> str | None:
    """Upper-case a handrail code; blank or "none" means no handrail."""
    if not raw:
        return None
    code = raw.strip().upper()
    if not code or code == "NONE":
        return None
    return code


def _primary_description(base: str) -> str | None:
    key = base.lower()
    if key in SPACING_STRATEGIES and SPACING_STRATEGIES[key].family in _PRIMARY_NOUNS:
        return f"{base} {_PRIMARY_NOUNS[SPACING_STRATEGIES[key].family]}"
    for spec in CATALOG.values():
        for head in spec.head_options:
            if head.value == base:
                return f"{base} {head.label}"
    return None


def _generated_description(base: str) -> str | None:
    for number, template in _FIXING_KIT_DESCRIPTIONS.items():
        suffix = f"FK-{number}"
        if base.endswith(suffix) and len(base) > len(suffix):
            return template.format(prefix=base[: -len(suffix)])
    for kit in CHANNEL_KITS.values():
        if base == kit.code:
            return kit.description
    return None


def describe(code: str) -> str:
    """Human-readable description for a product code.

    A trailing finish suffix is ignored. Unknown codes describe themselves.
    """
    base = _FINISH_SUFFIX_PATTERN.sub("", code)
    if base in BASE_DESCRIPTIONS:
        return BASE_DESCRIPTIONS[base]
    return _generated_description(base) or _primary_description(base) or base


def push_item(items: list[OrderItem], code: str, quantity: float, description: str | None = None) -> None:
    """Add a line, merging with an existing line of the same code.

    Quantities are rounded to two decimals; empty codes and non-positive or
    non-finite quantities are dropped.
    """
    try:
        qty = float(quantity)
    except (TypeError, ValueError):
        return
    if not code or not math.isfinite(qty) or qty <= 0:
        return
    rounded = round(qty, 2)
    for index, existing in enumerate(items):
        if existing.code == code:
            items[index] = OrderItem(
                code=code,
                description=existing.description,
                quantity=round(existing.quantity + rounded, 2),
            )
            return
    items.append(OrderItem(code=code, description=description or describe(code), quantity=rounded))


def _rail_suffix(handrail: str, finish: FinishCode) -> str:
    if handrail == "AH40":
        if finish is FinishCode.BK:
            return "-BK"
        if finish is FinishCode.PC:
            return "-MILL"
        return "-SS"
    if finish is FinishCode.PC:
        return "-SS"
    return f"-{finish.value}"


def _joiner_suffix(handrail: str, finish: FinishCode) -> str:
    if handrail == "AH40":
        return ""
    if finish is FinishCode.PC:
        return "-SS"
    return f"-{finish.value}"


def _wall_suffix(handrail: str, finish: FinishCode) -> str:
    if handrail == "AH40":
        return "-BK" if finish is FinishCode.BK else "-SS"
    if finish is FinishCode.PC:
        return "-SS"
    return f"-{finish.value}"


def _endcap_code(handrail: str, finish: FinishCode) -> str | None:
    if handrail == "AH40":
        return "AHEC-BK" if finish is FinishCode.BK else "AHEC-SS"
    if handrail in ROUND_AND_SQUARE_RAILS:
        suffix = "-SS" if finish is FinishCode.PC else f"-{finish.value}"
        return f"{handrail}EC{suffix}"
    return None


def _joiner_code(handrail: str, angle: int, finish: FinishCode) -> str:
    if handrail == "AH40":
        return f"AHJ{angle}"
    return f"{handrail}J{angle}{_joiner_suffix(handrail, finish)}"


def _primary_code(ctx: OrderContext) -> str:
    prefix = (ctx.disc_head or ctx.calc_key).upper()
    suffix = FinishCode.SS.value if ctx.is_powdercoat else ctx.finish.value
    return f"{prefix}-{suffix}"


def _add_handrail_lines(items: list[OrderItem], ctx: OrderContext) -> None:
    handrail = ctx.handrail
    finish = ctx.finish
    run = ctx.effective_run_mm

    rail_qty = max(0, math.ceil(run / RAIL_LENGTH_MM))
    gasket_qty = max(0, math.ceil(run / GASKET_PITCH_MM))
    handrail_meters = max(0.0, round(run / 1000, 1))

    push_item(items, f"{handrail}{_rail_suffix(handrail, finish)}", rail_qty)
    if handrail in HANDRAIL_GASKETS:
        push_item(items, HANDRAIL_GASKETS[handrail], gasket_qty)

    joiner_qty = max(0, math.ceil(rail_qty / 2))
    push_item(items, _joiner_code(handrail, 180, finish), joiner_qty)

    corners = ctx.corner_count
    push_item(items, _joiner_code(handrail, 90, finish), corners)

    wall_brackets = 0
    if ctx.includes_wall_attachments:
        suffix = _wall_suffix(handrail, finish)
        if handrail in WALL_ATTACHMENT_PAIRS:
            left, right = WALL_ATTACHMENT_PAIRS[handrail]
            push_item(items, f"{left}{suffix}", 1)
            push_item(items, f"{right}{suffix}", 1)
            wall_brackets = 2
        elif handrail in WALL_ATTACHMENT_SINGLES:
            push_item(items, f"{WALL_ATTACHMENT_SINGLES[handrail]}{suffix}", 2)
            wall_brackets = 2

    gate_count = ctx.gates.total_gates
    if gate_count > 0:
        endcap = _endcap_code(handrail, finish)
        if endcap:
            push_item(items, endcap, gate_count * 2)
        if ctx.is_powdercoat:
            push_item(items, "PC-ENDCAP", gate_count * 2)

    if ctx.is_powdercoat:
        bracket_qty = wall_brackets
        if handrail != "AH40":
            bracket_qty += joiner_qty + corners
        push_item(items, "PC-BRACKET", bracket_qty)
        push_item(items, "PC-PERM", handrail_meters)


def _add_gate_lines(items: list[OrderItem], gates: GateHardwareTally) -> None:
    push_item(items, GATE_HINGE_GLASS, gates.hinge_glass)
    push_item(items, GATE_HINGE_WALL, gates.hinge_wall)
    push_item(items, GATE_LATCH_GLASS, gates.latch_glass)
    push_item(items, GATE_LATCH_WALL, gates.latch_wall)


@order_builder(HardwareFamily.SPIGOTS, HardwareFamily.STANDOFFS, HardwareFamily.POSTS)
def build_point_fixed_order(ctx: OrderContext) -> list[OrderItem]:
    """Order lines for spigot, standoff and post systems."""
    items: list[OrderItem] = []
    if ctx.total_fixings <= 0:
        return items

    push_item(items, _primary_code(ctx), ctx.total_fixings)

    if ctx.fixing_type in FIXING_KIT_NUMBERS:
        kit_prefix = ctx.calc_key.upper()
        push_item(items, f"{kit_prefix}FK-{FIXING_KIT_NUMBERS[ctx.fixing_type]}", ctx.total_fixings)

    if ctx.handrail and ctx.handrail.lower() != "none":
        _add_handrail_lines(items, ctx)

    _add_gate_lines(items, ctx.gates)
    return items


@order_builder(HardwareFamily.CHANNEL)
def build_channel_order(ctx: OrderContext) -> list[OrderItem]:
    """Order lines for continuous channel systems."""
    items: list[OrderItem] = []
    kit = CHANNEL_KITS.get(ctx.calc_key)
    run = ctx.effective_run_mm
    if kit is None or run <= 0:
        return items

    kit_qty = max(1, math.ceil(run / kit.kit_length_mm))
    suffix = "" if ctx.finish in (FinishCode.MILL, FinishCode.PC) else f"-{ctx.finish.value}"
    push_item(items, f"{kit.code}{suffix}", kit_qty, description=kit.description)

    _add_gate_lines(items, ctx.gates)
    return items


def _attr(source: Any, name: str, default: Any = None) -> Any:
    value = getattr(source, name, default)
    return default if value is None else value


def _side_gates(result: Any) -> Iterable[tuple[GateSpec | None, int]]:
    layouts: list[PanelLayout | None] = list(_attr(result, "side_layouts", []))
    gates: list[GateSpec | None] = list(_attr(result, "side_gates", []))
    for index, gate in enumerate(gates):
        layout = layouts[index] if index < len(layouts) else None
        yield gate, layout.panel_count if layout is not None else 0


def context_from_calculation(calc_key: str, calculation_input: Any, calculation_result: Any) -> OrderContext:
    """Collect builder inputs from a calculation input and result pair."""
    key = calc_key.strip().lower()
    layouts = [layout for layout in _attr(calculation_result, "side_layouts", []) if layout is not None]
    shape_value = _attr(calculation_input, "shape", Shape.INLINE)
    return OrderContext(
        calc_key=key,
        family=get_strategy(key).family,
        finish=normalize_finish(_attr(calculation_input, "finish")),
        fixing_type=normalize_fixing(_attr(calculation_input, "fixing_type")),
        handrail=normalize_handrail(_attr(calculation_input, "handrail")),
        shape=Shape(shape_value),
        structural_system=StructuralSystem.from_fence_type(_attr(calculation_input, "fence_type")),
        disc_head=_attr(calculation_input, "disc_head"),
        total_fixings=_attr(calculation_result, "total_fixings", 0),
        total_run_mm=_attr(calculation_result, "total_run_mm", 0),
        adjusted_run_mm=sum(layout.adjusted_length_mm for layout in layouts),
        gates=tally_gate_hardware(_side_gates(calculation_result)),
    )


def build_order_list(calc_key: str, calculation_input: Any, calculation_result: Any) -> list[OrderItem]:
    """Build the aggregated order list for a calculation.

    Args:
        calc_key: Calculator key, e.g. "sp12".
        calculation_input: Object exposing finish, fixing_type, handrail,
            shape, fence_type and disc_head.
        calculation_result: Object exposing total_fixings, total_run_mm,
            side_layouts and side_gates.

    Returns:
        Order items with unique codes, in emission order. Unknown calculators
        yield an empty list.
    """
    try:
        ctx = context_from_calculation(calc_key, calculation_input, calculation_result)
    except KeyError:
        logger.debug(f"No order builder for calculator '{calc_key}'")
        return []

    builder = _BUILDERS.get(ctx.family)
    if builder is None:
        return []
    items = builder(ctx)
    logger.debug(f"Built {len(items)} order lines for {ctx.calc_key}")
    return items
