"""Project file loader with error reporting.

Project files are JSON documents validated against BalustradeConfiguration.
File system errors, JSON syntax errors and schema violations are all raised
as ConfigError, tagged with an error_type so callers can report them
consistently.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from balustrade.application.config.schema import BalustradeConfiguration

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Exception raised when a project file cannot be loaded.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, permission_denied,
            file_read_error, json_parse, validation)
        path: Path to the project file (if applicable)
        details: Additional error details (line/column for JSON, per-field
            validation errors)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Examples:
        >>> _format_json_path(("layout", "calc_key"))
        'layout.calc_key'
        >>> _format_json_path(("layout", "gates", 0, "side"))
        'layout.gates[0].side'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _extract_validation_errors(error: PydanticValidationError) -> list[dict[str, Any]]:
    """Flatten a Pydantic ValidationError into path/message/value/error_type dicts."""
    return [
        {
            "path": _format_json_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]


def _format_validation_error_message(details: list[dict[str, Any]]) -> str:
    lines = ["Configuration validation failed:"]
    for detail in details:
        value = detail.get("value")
        if value is not None and not isinstance(value, (dict, list)):
            lines.append(f"  - {detail['path']}: {detail['message']} (got: {value!r})")
        else:
            lines.append(f"  - {detail['path']}: {detail['message']}")
    return "\n".join(lines)


def _validate(data: Any, path: Path | None = None) -> BalustradeConfiguration:
    try:
        config = BalustradeConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        logger.debug(f"Project validation failed with {len(details)} error(s)")
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            path=path,
            details=details,
        )
    logger.debug(f"Loaded project for calculator {config.layout.calc_key}")
    return config


def load_config_from_string(content: str, path: Path | None = None) -> BalustradeConfiguration:
    """Parse and validate a project from JSON text.

    Args:
        content: JSON document
        path: Originating file, used in error messages

    Raises:
        ConfigError: With error_type "json_parse" or "validation".
    """
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        source = f"config file: {path}" if path is not None else "configuration"
        raise ConfigError(
            message=f"Invalid JSON in {source} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )
    return _validate(data, path)


def load_config(path: Path) -> BalustradeConfiguration:
    """Load and validate a balustrade project from a JSON file.

    Args:
        path: Path to the JSON project file

    Returns:
        A validated BalustradeConfiguration instance

    Raises:
        ConfigError: If the file cannot be loaded or validated.
            The error_type attribute indicates the specific error category:
            - "file_not_found": File does not exist
            - "permission_denied": File cannot be read
            - "file_read_error": Other I/O failure
            - "json_parse": Invalid JSON syntax
            - "validation": Schema validation failed

    Example:
        >>> from pathlib import Path
        >>> try:
        ...     config = load_config(Path("deck.json"))
        ... except ConfigError as e:
        ...     print(f"Error: {e}")
    """
    path = Path(path)
    if not path.exists():
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Error reading config file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    return load_config_from_string(content, path)


def load_config_from_dict(data: dict[str, Any]) -> BalustradeConfiguration:
    """Validate a project supplied as a dictionary (API requests, tests).

    Raises:
        ConfigError: If the data fails validation.
    """
    return _validate(data)
