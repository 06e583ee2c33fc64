"""CLI command implementations for the interiors application.

This package contains subcommands for the interiors CLI, including:
- validate: Validate a quotation file
- catalog: Browse the option catalog
- templates: Create quotation files from bundled samples
"""

from interiors.cli.commands.catalog import catalog_app
from interiors.cli.commands.templates import templates_app
from interiors.cli.commands.validate import validate_command

__all__ = ["catalog_app", "templates_app", "validate_command"]
