"""CLI command implementations for the balustrade application.

This package contains subcommands for the balustrade CLI:
- validate: Validate a project file
"""

from balustrade.cli.commands.validate import validate_command

__all__ = ["validate_command"]
