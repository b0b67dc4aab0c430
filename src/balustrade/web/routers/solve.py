"""Single-run panel solver endpoint."""

from fastapi import APIRouter, HTTPException

from balustrade.domain import solve_panel_layout
from balustrade.infrastructure.exporters.layout import layout_to_dict
from balustrade.web.exceptions import CalculationFailedError
from balustrade.web.schemas.common import PanelLayoutSchema
from balustrade.web.schemas.requests import SolveRequest

router = APIRouter(prefix="/solve", tags=["solve"])


@router.post("", response_model=PanelLayoutSchema)
async def solve_run(request: SolveRequest) -> PanelLayoutSchema:
    """Solve equal-width panels and a uniform gap for one run."""
    try:
        layout = solve_panel_layout(
            request.run_mm,
            request.gap_min_mm,
            request.gap_max_mm,
            request.max_panel_width_mm,
            request.panel_step_mm,
            min_panel_width_mm=request.min_panel_width_mm,
        )
    except ValueError as e:
        raise HTTPException(
            status_code=422,
            detail={"error": str(e), "error_type": "invalid_input"},
        ) from e

    if layout is None:
        raise CalculationFailedError(
            [
                f"Layout not achievable for {request.run_mm:g}mm with gaps "
                f"{request.gap_min_mm:g}-{request.gap_max_mm:g}mm"
            ]
        )
    return PanelLayoutSchema.model_validate(layout_to_dict(layout))
