"""Catalog commands for browsing the option tables."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from interiors.application.config import ConfigError, load_catalog
from interiors.cli.commands.errors import display_config_error
from interiors.domain import Catalog, FurnitureType

catalog_app = typer.Typer(
    name="catalog",
    help="Browse furniture types, components, hardware and materials.",
)

CatalogOption = Annotated[
    Path | None,
    typer.Option("--catalog", help="Alternate catalog file (default: bundled catalog)"),
]


def _load(path: Path | None) -> Catalog:
    try:
        return load_catalog(path)
    except ConfigError as e:
        display_config_error(e)
        raise typer.Exit(code=1)


@catalog_app.command(name="list")
def list_types(catalog_file: CatalogOption = None) -> None:
    """List furniture types with their option counts.

    Example:
        interiors catalog list
    """
    catalog = _load(catalog_file)
    typer.echo("Furniture types:")
    typer.echo()
    for furniture_type in FurnitureType:
        components = len(catalog.components_for(furniture_type))
        hardware = len(catalog.hardware_for(furniture_type))
        typer.echo(
            f"  {furniture_type.value:<12} {furniture_type.label:<16} "
            f"{components} components, {hardware} hardware items"
        )
    typer.echo()
    typer.echo("Use 'interiors catalog show <type>' to see the options for a type.")


@catalog_app.command(name="show")
def show_type(
    furniture_type: Annotated[
        str,
        typer.Argument(help="Furniture type, e.g. wardrobe or tv_unit"),
    ],
    catalog_file: CatalogOption = None,
) -> None:
    """Show the components, hardware and materials for a furniture type.

    Example:
        interiors catalog show kitchen
    """
    try:
        resolved = FurnitureType(furniture_type)
    except ValueError:
        valid = ", ".join(t.value for t in FurnitureType)
        typer.echo(f"Error: Unknown furniture type '{furniture_type}' (valid: {valid})", err=True)
        raise typer.Exit(code=1)

    catalog = _load(catalog_file)
    typer.echo(resolved.label.upper())
    typer.echo("=" * 60)

    typer.echo("Components:")
    for option in catalog.components_for(resolved):
        if option.is_toggle:
            detail = "on" if option.default else "off"
            typer.echo(f"  {option.key:<20} {option.label:<22} toggle (default {detail})")
        else:
            typer.echo(
                f"  {option.key:<20} {option.label:<22} 0-{option.max} (default {option.default})"
            )
    typer.echo()

    typer.echo("Hardware:")
    for item in catalog.hardware_for(resolved):
        typer.echo(
            f"  {item.key:<20} {item.label:<22} {item.unit_price:>6}/{item.unit:<6} max {item.max}"
        )
    typer.echo()

    materials = catalog.materials()
    typer.echo("Materials (per sq ft):")
    for material in materials.primary:
        typer.echo(f"  {material.key:<20} {material.label:<22} {material.price_per_area:>6}")
    typer.echo("Laminations (added per sq ft):")
    for lamination in materials.lamination:
        typer.echo(f"  {lamination.key:<20} {lamination.label:<22} +{lamination.price_delta}")
