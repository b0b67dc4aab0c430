"""FastAPI dependency injection for balustrade services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from balustrade.application.commands import CalculateLayoutCommand


@lru_cache(maxsize=1)
def get_calculate_command() -> CalculateLayoutCommand:
    """Get cached CalculateLayoutCommand instance."""
    return CalculateLayoutCommand()


# Type aliases for cleaner endpoint signatures
CalculateCommandDep = Annotated[CalculateLayoutCommand, Depends(get_calculate_command)]
