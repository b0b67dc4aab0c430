"""Calculator catalog endpoints."""

from fastapi import APIRouter

from balustrade.domain.data import CATALOG, CalculatorSpec
from balustrade.web.exceptions import UnknownCalcKeyError
from balustrade.web.schemas.responses import (
    CalculatorSchema,
    CalculatorSummarySchema,
    CatalogListSchema,
    OptionSchema,
)

router = APIRouter(prefix="/catalog", tags=["catalog"])


def _options(options) -> list[OptionSchema]:
    return [OptionSchema(value=option.value, label=option.label) for option in options]


def _calculator_to_schema(spec: CalculatorSpec) -> CalculatorSchema:
    return CalculatorSchema(
        calc_key=spec.calc_key,
        family=spec.family.value,
        fence_types=_options(spec.fence_types),
        wind_zones=list(spec.wind_zones),
        glass_heights=list(spec.glass_heights),
        glass_thicknesses=list(spec.glass_thicknesses),
        handrails=_options(spec.handrails),
        finishes=list(spec.finishes),
        fixing_types=list(spec.fixing_types),
        head_options=_options(spec.head_options),
    )


@router.get("", response_model=CatalogListSchema)
async def list_calculators() -> CatalogListSchema:
    """List available calculators with their hardware family."""
    return CatalogListSchema(
        calculators=[
            CalculatorSummarySchema(calc_key=key, family=spec.family.value)
            for key, spec in sorted(CATALOG.items())
        ]
    )


@router.get("/{calc_key}", response_model=CalculatorSchema)
async def get_calculator_options(calc_key: str) -> CalculatorSchema:
    """Get the options one calculator offers.

    Raises:
        UnknownCalcKeyError: If the calculator is not in the catalog (404).
    """
    spec = CATALOG.get(calc_key.strip().lower())
    if spec is None:
        raise UnknownCalcKeyError(calc_key, sorted(CATALOG))
    return _calculator_to_schema(spec)
