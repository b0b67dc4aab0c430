"""Base exporter framework with Protocol, Registry, and Manager."""

from __future__ import annotations

import logging
from abc import abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from balustrade.application.dtos import CalculationResult


logger = logging.getLogger(__name__)


class ExportError(Exception):
    """Raised when a calculation result cannot be exported."""


@runtime_checkable
class Exporter(Protocol):
    """Protocol for all exporters.

    Exporters convert a CalculationResult to a specific format.

    Attributes:
        format_name: Registered name of the export format (e.g., "order-csv").
        file_extension: File extension without leading dot (e.g., "csv").
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    @abstractmethod
    def export(self, result: CalculationResult, path: Path) -> None:
        """Write the rendered result to a file."""
        ...

    @abstractmethod
    def export_string(self, result: CalculationResult) -> str:
        """Render the calculation result in this format."""
        ...


class TextExporter:
    """Base class for exporters whose output is text.

    Subclasses implement export_string; export writes it as UTF-8.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    def export(self, result: CalculationResult, path: Path) -> None:
        path.write_text(self.export_string(result), encoding="utf-8")
        logger.info(f"Exported {self.format_name} to {path}")

    def export_string(self, result: CalculationResult) -> str:
        raise NotImplementedError(f"Format '{self.format_name}' does not implement export_string")


class ExporterRegistry:
    """Registry for exporter classes.

    Exporters register themselves using the @ExporterRegistry.register
    decorator.

    Example:
        @ExporterRegistry.register("order-csv")
        class OrderCsvExporter:
            format_name = "order-csv"
            file_extension = "csv"
            ...
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str):
        """Decorator to register an exporter class under a format name."""

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            if format_name in cls._exporters:
                logger.warning(f"Overwriting existing exporter for format '{format_name}'")
            cls._exporters[format_name] = exporter_class
            logger.debug(f"Registered exporter '{format_name}': {exporter_class.__name__}")
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Get an exporter class by format name.

        Raises:
            KeyError: If no exporter is registered for the format.
        """
        if format_name not in cls._exporters:
            available = ", ".join(sorted(cls._exporters.keys()))
            raise KeyError(
                f"No exporter registered for format '{format_name}'. "
                f"Available formats: {available or 'none'}"
            )
        return cls._exporters[format_name]

    @classmethod
    def available_formats(cls) -> list[str]:
        return sorted(cls._exporters.keys())

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters

    @classmethod
    def clear(cls) -> None:
        """Clear all registered exporters (for tests)."""
        cls._exporters.clear()


class ExportManager:
    """Exports a calculation result to one or more formats.

    Files are named {project_name}_{format}.{ext} inside output_dir.

    Attributes:
        output_dir: Directory where exported files will be saved.
    """

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)

    def export_all(
        self,
        formats: list[str],
        result: CalculationResult,
        project_name: str = "balustrade",
    ) -> dict[str, Path]:
        """Export a calculation result to several formats.

        Args:
            formats: Format names to export (e.g., ["order-csv", "layout-json"]).
            result: The calculation result to export.
            project_name: Base name for output files.

        Returns:
            Dictionary mapping format names to output file paths.

        Raises:
            ExportError: If the calculation failed.
            KeyError: If any format is not registered.
            OSError: If file operations fail.
        """
        if not result.is_valid:
            raise ExportError(f"Cannot export a failed calculation: {'; '.join(result.errors)}")

        # Resolve every exporter before writing so an unknown format writes nothing
        exporters = {name: ExporterRegistry.get(name)() for name in formats}

        self.output_dir.mkdir(parents=True, exist_ok=True)
        results: dict[str, Path] = {}
        for format_name, exporter in exporters.items():
            filepath = self.output_dir / f"{project_name}_{format_name}.{exporter.file_extension}"
            logger.info(f"Exporting to {format_name}: {filepath}")
            exporter.export(result, filepath)
            results[format_name] = filepath

        return results

    def export_single(
        self,
        format_name: str,
        result: CalculationResult,
        project_name: str = "balustrade",
    ) -> Path:
        """Export a calculation result to a single format."""
        return self.export_all([format_name], result, project_name)[format_name]
