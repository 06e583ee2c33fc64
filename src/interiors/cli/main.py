"""Typer CLI for furniture quotations."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Annotated

import httpx
import typer

from interiors.application import BuildQuotationCommand, QuotationOutput
from interiors.application.config import (
    ConfigError,
    QuotationConfiguration,
    load_config,
    merge_config_with_cli,
)
from interiors.application.factory import get_factory
from interiors.cli.commands import catalog_app, templates_app, validate_command
from interiors.cli.commands.errors import display_config_error
from interiors.domain import QuotationError
from interiors.infrastructure import CollaboratorError, format_amount

DEFAULT_API_URL = "http://localhost:5000"

app = typer.Typer(
    name="interiors",
    help="Configure furniture items and price them into quotations.",
)

app.command(name="validate")(validate_command)
app.add_typer(catalog_app, name="catalog")
app.add_typer(templates_app, name="templates")


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log workflow and pricing details"),
    ] = False,
) -> None:
    """Configure furniture items and price them into quotations."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _load(
    config_file: Path,
    *,
    tax_rate: float | None = None,
    project_id: str | None = None,
    labor_rate: float | None = None,
) -> QuotationConfiguration:
    try:
        config = load_config(config_file)
        return merge_config_with_cli(
            config, tax_rate=tax_rate, project_id=project_id, labor_rate=labor_rate
        )
    except ConfigError as e:
        display_config_error(e)
        raise typer.Exit(code=1)


def _build(command: BuildQuotationCommand, config: QuotationConfiguration) -> QuotationOutput:
    try:
        return asyncio.run(command.execute_config(config))
    except (QuotationError, CollaboratorError, httpx.HTTPError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


@app.command()
def quote(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the quotation file"),
    ],
    tax_rate: Annotated[
        float | None,
        typer.Option("--tax-rate", help="Tax rate as a fraction (default: 0.18)"),
    ] = None,
    project_id: Annotated[
        str | None,
        typer.Option("--project-id", help="Project the quotation belongs to"),
    ] = None,
    labor_rate: Annotated[
        float | None,
        typer.Option("--labor-rate", help="Labor rate per sq ft for every furniture type"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, json"),
    ] = "text",
    details: Annotated[
        bool,
        typer.Option("--details", help="Print a breakdown of every item (text format)"),
    ] = False,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the quotation to a file instead of stdout"),
    ] = None,
    pricing_url: Annotated[
        str | None,
        typer.Option("--pricing-url", help="Price items with a remote pricing service"),
    ] = None,
    token: Annotated[
        str | None,
        typer.Option("--token", envvar="INTERIORS_TOKEN", help="Bearer token for remote services"),
    ] = None,
) -> None:
    """Price the items of a quotation file.

    Prints the item table, subtotal, GST and grand total. Items that cannot be
    priced are reported on stderr and the command exits with code 1.

    Examples:
        interiors quote wardrobe.json
        interiors quote kitchen.json --tax-rate 0.12 --format json -o quote.json
    """
    if output_format not in ("text", "json"):
        typer.echo(f"Error: Unknown format '{output_format}' (expected text or json)", err=True)
        raise typer.Exit(code=1)

    config = _load(config_file, tax_rate=tax_rate, project_id=project_id, labor_rate=labor_rate)
    factory = get_factory()
    try:
        calculator = (
            factory.create_remote_calculator(pricing_url, token) if pricing_url else None
        )
        command = factory.create_build_quotation_command(config, calculator)
    except ConfigError as e:
        display_config_error(e)
        raise typer.Exit(code=1)

    output = _build(command, config)

    if output_format == "json":
        rendered = factory.get_json_exporter().export(output)
    else:
        formatter = factory.get_quotation_formatter()
        rendered = formatter.format(output.quotation)
        if details and not output.quotation.is_empty:
            rendered += "\n\n" + "\n\n".join(
                formatter.format_item(item) for item in output.quotation.items
            )

    if output_file is not None:
        output_file.write_text(rendered + "\n", encoding="utf-8")
        typer.echo(f"Quotation written to {output_file}")
    else:
        typer.echo(rendered)

    for error in output.errors:
        typer.echo(f"Error: {error}", err=True)
    if not output.is_valid:
        raise typer.Exit(code=1)


@app.command()
def submit(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the quotation file"),
    ],
    project_id: Annotated[
        str | None,
        typer.Option("--project", "-p", help="Project to save the items to (default: project_id in the file)"),
    ] = None,
    api_url: Annotated[
        str,
        typer.Option("--api-url", help="Project storage service URL"),
    ] = DEFAULT_API_URL,
    token: Annotated[
        str | None,
        typer.Option("--token", envvar="INTERIORS_TOKEN", help="Bearer token for the service"),
    ] = None,
    pdf: Annotated[
        Path | None,
        typer.Option("--pdf", help="Also render the quotation PDF to this file"),
    ] = None,
) -> None:
    """Price a quotation file and save its items to a project.

    Nothing is saved unless every item can be priced.

    Example:
        interiors submit kitchen.json --project 1718000000000 --pdf kitchen.pdf
    """
    config = _load(config_file, project_id=project_id)
    if not config.project_id:
        typer.echo("Error: No project given (use --project or set project_id)", err=True)
        raise typer.Exit(code=1)

    factory = get_factory()
    try:
        command = factory.create_build_quotation_command(config)
    except ConfigError as e:
        display_config_error(e)
        raise typer.Exit(code=1)

    output = _build(command, config)
    if not output.is_valid:
        for error in output.errors:
            typer.echo(f"Error: {error}", err=True)
        typer.echo("Nothing was submitted.", err=True)
        raise typer.Exit(code=1)

    repository = factory.create_project_repository(api_url, token)
    quotation = output.quotation

    async def _submit() -> bytes | None:
        await repository.save_furniture(config.project_id, quotation.items)
        await repository.update_project(
            config.project_id, {"totalAmount": round(quotation.grand_total, 2)}
        )
        return await repository.render_pdf(config.project_id) if pdf else None

    try:
        document = asyncio.run(_submit())
    except (CollaboratorError, httpx.HTTPError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(
        f"Saved {len(quotation.items)} item(s) to project {config.project_id} "
        f"(grand total {format_amount(quotation.grand_total)})"
    )
    if pdf is not None and document is not None:
        pdf.write_bytes(document)
        typer.echo(f"PDF written to {pdf}")


@app.command()
def whoami(
    api_url: Annotated[
        str,
        typer.Option("--api-url", help="Identity service URL"),
    ] = DEFAULT_API_URL,
    token: Annotated[
        str | None,
        typer.Option("--token", envvar="INTERIORS_TOKEN", help="Bearer token for the service"),
    ] = None,
) -> None:
    """Show the signed-in user."""
    provider = get_factory().create_identity_provider(api_url, token)
    try:
        user = asyncio.run(provider.current_user())
    except (CollaboratorError, httpx.HTTPError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"{user.name} <{user.email}> ({user.role.value})")


if __name__ == "__main__":
    app()
