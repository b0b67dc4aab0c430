"""Pytest configuration and shared fixtures for balustrade tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from balustrade.application.commands import CalculateLayoutCommand
    from balustrade.application.dtos import CalculationInput


# =============================================================================
# pytest-httpx fixture integration
# =============================================================================

# pytest-httpx provides the httpx_mock fixture automatically once installed


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: tests exercising several layers together")
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared fixtures for command creation
# =============================================================================


@pytest.fixture
def calculate_command() -> "CalculateLayoutCommand":
    """Create a CalculateLayoutCommand wired to the default engines."""
    from balustrade.application.commands import CalculateLayoutCommand

    return CalculateLayoutCommand()


@pytest.fixture
def sp12_input() -> "CalculationInput":
    """SP12 balustrade, 12mm glass, 1100mm high, zone VH, one 3000mm side.

    Resolves to 800mm internal and 250mm edge spacing, and lays out as two
    1480mm panels with the default solver bounds.
    """
    from balustrade.application.dtos import CalculationInput

    return CalculationInput(
        calc_key="sp12",
        side_lengths_mm=[3000.0],
        glass_thickness_mm=12.0,
        glass_height_mm=1100.0,
        wind_zone="VH",
    )
