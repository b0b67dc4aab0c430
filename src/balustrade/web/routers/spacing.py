"""Certified spacing lookup endpoint."""

from fastapi import APIRouter, HTTPException

from balustrade.domain import StructuralSystem, resolve_spacing
from balustrade.domain.services import SPACING_STRATEGIES
from balustrade.infrastructure.exporters.layout import spacing_to_dict
from balustrade.web.exceptions import CalculationFailedError, UnknownCalcKeyError
from balustrade.web.schemas.common import SpacingSchema
from balustrade.web.schemas.requests import SpacingRequest

router = APIRouter(prefix="/spacing", tags=["spacing"])


@router.post("", response_model=SpacingSchema)
async def lookup_spacing(request: SpacingRequest) -> SpacingSchema:
    """Resolve certified internal and edge spacing.

    Raises:
        UnknownCalcKeyError: If the calculator is unknown (404).
        CalculationFailedError: If no certified spacing exists or the
            combination is not engineered (422).
    """
    calc_key = request.calc_key.strip().lower()
    if calc_key not in SPACING_STRATEGIES:
        raise UnknownCalcKeyError(request.calc_key, sorted(SPACING_STRATEGIES))

    system = StructuralSystem.from_fence_type(request.fence_type)
    try:
        spacing = resolve_spacing(
            calc_key,
            system,
            request.glass_thickness_mm,
            request.glass_height_mm,
            request.wind_zone,
            request.fixing_type,
        )
    except ValueError as e:
        raise HTTPException(
            status_code=422,
            detail={"error": str(e), "error_type": "invalid_input"},
        ) from e

    description = (
        f"{calc_key} {system.value}, {request.glass_thickness_mm:g}mm glass, "
        f"{request.glass_height_mm:g}mm high, zone {request.wind_zone.upper()}"
    )
    if spacing is None:
        raise CalculationFailedError([f"No compliance data for {description}"])
    if not spacing.is_permitted:
        raise CalculationFailedError([f"Combination not engineered: {description}"])

    return SpacingSchema.model_validate(spacing_to_dict(spacing))
