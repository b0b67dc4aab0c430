"""Project file schema, loading and validation.

This package provides JSON-based project loading and validation for
balustrade layouts. It includes Pydantic models for schema validation, a
loader with structured error reporting, and catalog and compliance checks.

Public API:
    - BalustradeConfiguration: Root configuration model
    - LayoutConfig: Run geometry and hardware options
    - GateConfig: Gate placement on one side
    - SolverConfig: Panel solver bounds
    - OutputConfig: Output format configuration model
    - load_config: Load a project from a JSON file
    - load_config_from_dict: Load a project from a dictionary
    - load_config_from_string: Load a project from JSON text
    - ConfigError: Exception for configuration errors
    - ValidationResult: Container for validation results
    - ValidationError: Blocking validation error
    - ValidationWarning: Non-blocking validation warning
    - validate_config: Perform full project validation
    - config_to_input: Convert a project to a CalculationInput

Example:
    >>> from pathlib import Path
    >>> from balustrade.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("deck.json"))
    ...     print(f"Calculator: {config.layout.calc_key}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from balustrade.application.config.adapter import (
    config_to_gate_spec,
    config_to_input,
    config_to_side_gates,
)
from balustrade.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
    load_config_from_string,
)
from balustrade.application.config.schema import (
    SUPPORTED_VERSIONS,
    BalustradeConfiguration,
    GateConfig,
    LayoutConfig,
    OutputConfig,
    SolverConfig,
)
from balustrade.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    check_catalog_advisories,
    check_compliance,
    check_gate_advisories,
    validate_config,
)

__all__ = [
    # Schema models
    "BalustradeConfiguration",
    "GateConfig",
    "LayoutConfig",
    "OutputConfig",
    "SolverConfig",
    "SUPPORTED_VERSIONS",
    # Loader
    "ConfigError",
    "load_config",
    "load_config_from_dict",
    "load_config_from_string",
    # Validation
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "check_catalog_advisories",
    "check_compliance",
    "check_gate_advisories",
    "validate_config",
    # Adapter
    "config_to_gate_spec",
    "config_to_input",
    "config_to_side_gates",
]
