"""Validate command for checking quotation files.

Checks a quotation file for JSON and schema errors, then checks every item
against the catalog: dimensions in range, known option keys, and each
workflow step gate satisfied.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from interiors.application.config import (
    ConfigError,
    ValidationResult,
    load_catalog,
    load_config,
    validate_config,
)
from interiors.cli.commands.errors import display_config_error


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the quotation file to validate"),
    ],
) -> None:
    """Validate a quotation file.

    Exit codes:
        0 - File is valid with no warnings
        1 - File has errors (items cannot be priced)
        2 - File is valid but has warnings

    Example:
        interiors validate living-room.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
        catalog = load_catalog(config.catalog)
    except ConfigError as e:
        display_config_error(e)
        typer.echo()
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)

    result = validate_config(config, catalog)
    _display_validation_result(result)
    raise typer.Exit(code=result.exit_code)


def _display_validation_result(result: ValidationResult) -> None:
    if result.errors:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  {error.path}: {error.message}", err=True)
            if error.value is not None:
                typer.echo(f"    Value: {error.value!r}", err=True)
        typer.echo()

    if result.warnings:
        typer.echo("Warnings:")
        for warning in result.warnings:
            typer.echo(f"  {warning.path}: {warning.message}")
            if warning.suggestion:
                typer.echo(f"    Suggestion: {warning.suggestion}")
        typer.echo()

    if result.errors:
        typer.echo(
            f"Validation failed: {len(result.errors)} error(s), {len(result.warnings)} warning(s)",
            err=True,
        )
    elif result.warnings:
        typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
    else:
        typer.echo("Validation passed. Quotation file is valid.")
