"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from balustrade.application.config import ConfigError
from balustrade.infrastructure.exporters import ExportError


class CalculationFailedError(Exception):
    """Raised when a calculation returns errors."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Calculation failed: {errors}")


class UnknownCalcKeyError(Exception):
    """Raised when a calculator key is not in the catalog."""

    def __init__(self, calc_key: str, available: list[str]) -> None:
        self.calc_key = calc_key
        self.available = available
        super().__init__(f"Unknown calculator: {calc_key}")


class UnsupportedFormatError(Exception):
    """Raised when requested export format is not supported."""

    def __init__(self, format_name: str, available: list[str]) -> None:
        self.format_name = format_name
        self.available = available
        super().__init__(f"Unsupported format: {format_name}. Available: {', '.join(available)}")


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(CalculationFailedError)
    async def calculation_failed_handler(request: Request, exc: CalculationFailedError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Calculation failed",
                "error_type": "calculation",
                "details": [{"message": e} for e in exc.errors],
            },
        )

    @app.exception_handler(UnknownCalcKeyError)
    async def unknown_calc_key_handler(request: Request, exc: UnknownCalcKeyError) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": str(exc),
                "error_type": "not_found",
                "details": {"calc_key": exc.calc_key, "available": exc.available},
            },
        )

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Invalid project configuration",
                "error_type": exc.error_type,
                "details": [
                    {"path": d.get("path"), "message": d.get("message")} for d in exc.details
                ],
            },
        )

    @app.exception_handler(ExportError)
    async def export_error_handler(request: Request, exc: ExportError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={
                "error": str(exc),
                "error_type": "export",
                "details": None,
            },
        )

    @app.exception_handler(UnsupportedFormatError)
    async def unsupported_format_handler(request: Request, exc: UnsupportedFormatError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={
                "error": str(exc),
                "error_type": "unsupported_format",
                "details": {"format": exc.format_name, "available": exc.available},
            },
        )
