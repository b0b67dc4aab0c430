"""Layout calculation endpoints."""

from fastapi import APIRouter

from balustrade.application.config import config_to_input, load_config_from_dict
from balustrade.application.dtos import CalculationInput, CalculationResult
from balustrade.domain.data import CATALOG
from balustrade.domain.value_objects import DEFAULT_GATE_LEAF_WIDTH_MM, GateSpec
from balustrade.infrastructure.exporters import result_to_dict
from balustrade.web.dependencies import CalculateCommandDep
from balustrade.web.exceptions import CalculationFailedError, UnknownCalcKeyError
from balustrade.web.schemas.requests import CalculateRequest, ConfigRequest
from balustrade.web.schemas.responses import CalculationResponse

router = APIRouter(prefix="/calculate", tags=["calculate"])


def request_to_input(request: CalculateRequest) -> CalculationInput:
    """Convert a calculate request to a CalculationInput.

    Raises:
        UnknownCalcKeyError: If the calculator is not in the catalog.
        CalculationFailedError: If a gate refers to a side that does not exist.
    """
    calc_key = request.calc_key.strip().lower()
    if calc_key not in CATALOG:
        raise UnknownCalcKeyError(request.calc_key, sorted(CATALOG))

    side_gates: list[GateSpec | None] = [None] * len(request.side_lengths_mm)
    for gate in request.gates:
        if gate.side >= len(side_gates):
            raise CalculationFailedError([f"Gate side {gate.side} is out of range"])
        side_gates[gate.side] = GateSpec(
            enabled=gate.enabled,
            panel_boundary_index=gate.boundary,
            hinge_on_left=gate.hinge_on_left,
            leaf_width_mm=gate.leaf_width_mm if gate.leaf_width_mm is not None else DEFAULT_GATE_LEAF_WIDTH_MM,
        )

    return CalculationInput(
        calc_key=calc_key,
        side_lengths_mm=list(request.side_lengths_mm),
        shape=request.shape,
        fence_type=request.fence_type,
        glass_thickness_mm=request.glass_thickness_mm,
        glass_height_mm=request.glass_height_mm,
        wind_zone=request.wind_zone,
        fixing_type=request.fixing_type,
        finish=request.finish,
        handrail=request.handrail,
        disc_head=request.disc_head,
        spigots_per_panel=request.spigots_per_panel,
        side_gates=side_gates,
        gate_leaf_width_mm=request.gate_leaf_width_mm,
        gap_min_mm=request.gap_min_mm,
        gap_max_mm=request.gap_max_mm,
        max_panel_width_mm=request.max_panel_width_mm,
        panel_step_mm=request.panel_step_mm,
        min_panel_width_mm=request.min_panel_width_mm,
        max_fixings_per_panel=request.max_fixings_per_panel,
    )


def run_calculation(command: CalculateCommandDep, calculation_input: CalculationInput) -> CalculationResult:
    """Execute the command, raising CalculationFailedError on errors."""
    result = command.execute(calculation_input)
    if not result.is_valid:
        raise CalculationFailedError(result.errors)
    return result


@router.post("", response_model=CalculationResponse)
async def calculate_layout(
    request: CalculateRequest,
    command: CalculateCommandDep,
) -> CalculationResponse:
    """Calculate a compliant panel layout and its order list.

    Raises:
        UnknownCalcKeyError: If the calculator is unknown (404).
        CalculationFailedError: If the input is invalid, no certified spacing
            exists, or a side cannot be laid out (422).
    """
    result = run_calculation(command, request_to_input(request))
    return CalculationResponse.model_validate(result_to_dict(result))


@router.post("/from-config", response_model=CalculationResponse)
async def calculate_from_config(
    request: ConfigRequest,
    command: CalculateCommandDep,
) -> CalculationResponse:
    """Calculate a layout from a full project configuration.

    Raises:
        ConfigError: If the configuration fails schema validation (422).
        CalculationFailedError: If the calculation returns errors (422).
    """
    config = load_config_from_dict(request.config)
    result = run_calculation(command, config_to_input(config))
    return CalculationResponse.model_validate(result_to_dict(result))
