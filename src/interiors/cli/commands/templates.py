"""Templates commands for listing and initializing sample quotation files."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from interiors.application.templates import TemplateManager

templates_app = typer.Typer(
    name="templates",
    help="Create quotation files from bundled samples.",
)


@templates_app.command(name="list")
def list_templates() -> None:
    """List all available quotation templates.

    Example:
        interiors templates list
    """
    templates = TemplateManager().list_templates()

    typer.echo("Available templates:")
    typer.echo()
    max_name_width = max(len(name) for name, _ in templates) if templates else 0
    for name, description in templates:
        typer.echo(f"  {name:<{max_name_width}}  - {description}")
    typer.echo()
    typer.echo("Use 'interiors templates init <name>' to create a quotation file from a template.")


@templates_app.command(name="init")
def init_template(
    name: Annotated[
        str,
        typer.Argument(help="Name of the template to initialize"),
    ],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file path (default: <name>.json)"),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite existing file"),
    ] = False,
) -> None:
    """Initialize a new quotation file from a template.

    Examples:
        interiors templates init wardrobe
        interiors templates init kitchen --output my-kitchen.json
    """
    manager = TemplateManager()
    if output is None:
        output = Path(f"{name}.json")

    if not manager.template_exists(name):
        available = ", ".join(n for n, _ in manager.list_templates())
        typer.echo(f"Error: Unknown template '{name}'", err=True)
        typer.echo(f"Available templates: {available}", err=True)
        raise typer.Exit(code=1)

    if output.exists() and not force:
        typer.echo(f"Error: File already exists: {output}", err=True)
        typer.echo("Use --force to overwrite.", err=True)
        raise typer.Exit(code=1)

    manager.init_template(name, output)
    typer.echo(f"Created {output} from template '{name}'")
    typer.echo()
    typer.echo("Next steps:")
    typer.echo(f"  1. Edit {output} to describe your furniture")
    typer.echo(f"  2. Run: interiors quote {output}")
