"""Export format endpoints."""

from fastapi import APIRouter
from fastapi.responses import Response

from balustrade.infrastructure.exporters import ExporterRegistry
from balustrade.web.dependencies import CalculateCommandDep
from balustrade.web.exceptions import UnsupportedFormatError
from balustrade.web.routers.calculate import request_to_input, run_calculation
from balustrade.web.schemas.requests import CalculateRequest
from balustrade.web.schemas.responses import ExportFormatsSchema

router = APIRouter(prefix="/export", tags=["export"])

MEDIA_TYPES = {
    "csv": "text/csv",
    "json": "application/json",
    "txt": "text/plain",
}


@router.get("/formats", response_model=ExportFormatsSchema)
async def list_export_formats() -> ExportFormatsSchema:
    """List all available export formats."""
    return ExportFormatsSchema(formats=ExporterRegistry.available_formats())


@router.post("/{format_name}")
async def export_layout(
    format_name: str,
    request: CalculateRequest,
    command: CalculateCommandDep,
) -> Response:
    """Calculate a layout and return it in the requested export format.

    Raises:
        UnsupportedFormatError: If no exporter is registered for the format (400).
        CalculationFailedError: If the calculation returns errors (422).
    """
    if not ExporterRegistry.is_registered(format_name):
        raise UnsupportedFormatError(format_name, ExporterRegistry.available_formats())

    result = run_calculation(command, request_to_input(request))
    exporter = ExporterRegistry.get(format_name)()
    filename = f"balustrade_{format_name}.{exporter.file_extension}"
    return Response(
        content=exporter.export_string(result),
        media_type=MEDIA_TYPES.get(exporter.file_extension, "text/plain"),
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
