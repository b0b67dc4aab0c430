"""Validation structures and catalog advisory checks.

This module provides validation result structures and domain-specific checks
for balustrade projects: catalog advisories (values a calculator does not
offer) and compliance checks (combinations with no certified spacing).
"""

from dataclasses import dataclass, field
from typing import Any

from balustrade.application.config.schema import BalustradeConfiguration
from balustrade.domain.data import get_calculator
from balustrade.domain.services import resolve_spacing
from balustrade.domain.services.order_list import normalize_finish
from balustrade.domain.value_objects import (
    DEFAULT_GATE_LEAF_WIDTH_MM,
    THICKNESS_TOLERANCE_MM,
    HardwareFamily,
    StructuralSystem,
)

# Gates wider than this share of a side are flagged
MAX_GATE_SHARE_OF_SIDE = 0.8


@dataclass
class ValidationError:
    """Represents a blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "layout.glass_height_mm")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """Represents a non-blocking validation warning.

    Warnings flag values the selected calculator does not list. The project
    can still be calculated.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings.

    Attributes:
        errors: List of blocking validation errors
        warnings: List of non-blocking validation warnings
    """

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(self, path: str, message: str, value: Any = None) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(self, path: str, message: str, suggestion: str | None = None) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(ValidationWarning(path=path, message=message, suggestion=suggestion))
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another ValidationResult into this one."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def _offered(value: str, options: tuple[str, ...]) -> bool:
    lowered = value.strip().lower()
    return any(lowered == option.lower() for option in options)


def check_catalog_advisories(config: BalustradeConfiguration) -> ValidationResult:
    """Warn about layout values the selected calculator does not offer.

    Advisories checked:
    - Fence type, wind zone, glass height and thickness
    - Handrail, finish, fixing type and disc head options
    """
    result = ValidationResult()
    layout = config.layout
    spec = get_calculator(layout.calc_key)
    label = layout.calc_key.upper()

    system = StructuralSystem.from_fence_type(layout.fence_type)
    if system.value not in spec.fence_type_values:
        result.add_warning(
            path="layout.fence_type",
            message=f"{label} is not offered as a {system.value} fence",
            suggestion=f"Use one of: {', '.join(spec.fence_type_values)}",
        )

    if layout.wind_zone.value not in spec.wind_zones:
        result.add_warning(
            path="layout.wind_zone",
            message=f"{label} does not list wind zone {layout.wind_zone.value}",
        )

    if layout.glass_height_mm not in spec.glass_heights:
        result.add_warning(
            path="layout.glass_height_mm",
            message=f"Glass height {layout.glass_height_mm:g}mm is not a listed height for {label}",
            suggestion=(
                f"Listed heights run from {spec.glass_heights[0]}mm to {spec.glass_heights[-1]}mm"
            ),
        )

    if not any(
        abs(layout.glass_thickness_mm - thickness) <= THICKNESS_TOLERANCE_MM
        for thickness in spec.glass_thicknesses
    ):
        result.add_warning(
            path="layout.glass_thickness_mm",
            message=f"Glass thickness {layout.glass_thickness_mm:g}mm is not offered for {label}",
            suggestion=f"Use one of: {', '.join(f'{t:g}' for t in spec.glass_thicknesses)}",
        )

    if layout.handrail and layout.handrail.lower() != "none":
        if spec.family is HardwareFamily.CHANNEL:
            result.add_warning(
                path="layout.handrail",
                message=f"Handrail {layout.handrail} is not ordered with channel systems",
            )
        elif not _offered(layout.handrail, spec.handrail_values):
            result.add_warning(
                path="layout.handrail",
                message=f"Handrail {layout.handrail} is not offered for {label}",
                suggestion=f"Use one of: {', '.join(spec.handrail_values)}",
            )

    if layout.finish and not _offered(layout.finish, spec.finishes):
        result.add_warning(
            path="layout.finish",
            message=(
                f"Finish '{layout.finish}' is not offered for {label}; "
                f"it will be ordered as {normalize_finish(layout.finish).value}"
            ),
            suggestion=f"Use one of: {', '.join(spec.finishes)}",
        )

    if layout.fixing_type and not _offered(layout.fixing_type, spec.fixing_types):
        result.add_warning(
            path="layout.fixing_type",
            message=f"Fixing '{layout.fixing_type}' is not offered for {label}",
            suggestion=f"Use one of: {', '.join(spec.fixing_types)}",
        )

    if layout.disc_head:
        if not spec.head_options:
            result.add_warning(
                path="layout.disc_head",
                message=f"{label} has no head options; disc_head is ignored",
            )
        elif not _offered(layout.disc_head, spec.head_values):
            result.add_warning(
                path="layout.disc_head",
                message=f"Head '{layout.disc_head}' is not offered for {label}",
                suggestion=f"Use one of: {', '.join(spec.head_values)}",
            )

    return result


def check_compliance(config: BalustradeConfiguration) -> ValidationResult:
    """Check that certified spacing exists for the layout."""
    result = ValidationResult()
    layout = config.layout
    spacing = resolve_spacing(
        layout.calc_key,
        StructuralSystem.from_fence_type(layout.fence_type),
        layout.glass_thickness_mm,
        layout.glass_height_mm,
        layout.wind_zone,
        layout.fixing_type,
    )
    if spacing is None:
        result.add_error(
            path="layout",
            message=(
                f"No compliance data for {layout.calc_key} at {layout.glass_thickness_mm:g}mm glass, "
                f"{layout.glass_height_mm:g}mm high, zone {layout.wind_zone.value}"
            ),
        )
    elif not spacing.is_permitted:
        result.add_error(
            path="layout.wind_zone",
            message=f"Combination not engineered for zone {layout.wind_zone.value}",
            value=layout.wind_zone.value,
        )
    elif not spacing.exact_band:
        result.add_warning(
            path="layout.glass_height_mm",
            message=(
                f"Height {layout.glass_height_mm:g}mm is outside the certified bands; "
                f"nearest band {spacing.row.height_min_mm:g}-{spacing.row.height_max_mm:g}mm will be used"
            ),
        )
    return result


def check_gate_advisories(config: BalustradeConfiguration) -> ValidationResult:
    """Warn about gates that are wide relative to their side."""
    result = ValidationResult()
    layout = config.layout
    for i, gate in enumerate(layout.gates):
        if not gate.enabled:
            continue
        run = layout.side_lengths_mm[gate.side]
        if run <= 0:
            result.add_error(
                path=f"layout.gates[{i}].side",
                message=f"Gate is on side {gate.side}, which has no length",
                value=gate.side,
            )
            continue
        width = layout.gate_leaf_width_mm or gate.leaf_width_mm or DEFAULT_GATE_LEAF_WIDTH_MM
        if width > run * MAX_GATE_SHARE_OF_SIDE:
            result.add_warning(
                path=f"layout.gates[{i}]",
                message=f"Gate leaf {width:g}mm takes up most of side {gate.side} ({run:g}mm)",
                suggestion="Check the side length or reduce the leaf width",
            )
    return result


def validate_config(config: BalustradeConfiguration) -> ValidationResult:
    """Perform full validation of a balustrade project.

    Structural validation is handled by Pydantic when the project is loaded;
    this adds compliance errors and catalog and gate advisories.

    Args:
        config: A BalustradeConfiguration instance (already validated by Pydantic)

    Returns:
        ValidationResult containing any errors or warnings
    """
    result = ValidationResult()
    result.merge(check_compliance(config))
    result.merge(check_catalog_advisories(config))
    result.merge(check_gate_advisories(config))
    return result
