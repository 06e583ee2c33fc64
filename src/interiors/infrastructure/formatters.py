"""Output formatters and exporters for quotations."""

from __future__ import annotations

import json
from typing import Any

from interiors.application.dtos import QuotationOutput
from interiors.domain.catalog import Catalog
from interiors.domain.entities import FurnitureItem, Quotation

CURRENCY_SYMBOL = "₹"


def format_amount(amount: float) -> str:
    """Format a currency amount, e.g. 48678.4 -> '₹48,678.40'."""
    return f"{CURRENCY_SYMBOL}{amount:,.2f}"


class QuotationFormatter:
    """Formats a quotation as a plain-text table for the terminal.

    With a catalog the material column shows display labels; without one it
    shows the stored keys.
    """

    def __init__(self, catalog: Catalog | None = None) -> None:
        self._catalog = catalog

    def format(self, quotation: Quotation) -> str:
        if quotation.is_empty:
            return "No items in quotation."

        width = 96
        lines = ["QUOTATION"]
        if quotation.project_id:
            lines.append(f"Project: {quotation.project_id}")
        lines.extend(
            [
                "=" * width,
                f"{'#':<3} {'Item':<16} {'Size (ft)':<14} {'Material':<16} "
                f"{'Material':>10} {'Hardware':>10} {'Labor':>10} {'Total':>12}",
                "-" * width,
            ]
        )
        for number, item in enumerate(quotation.items, start=1):
            d = item.dimensions
            size = f"{d.x:g} x {d.y:g} x {d.z:g}"
            costs = item.costs
            lines.append(
                f"{number:<3} {item.furniture_type.label:<16} {size:<14} "
                f"{self._material_label(item):<16} {costs.material_cost:>10,} "
                f"{costs.hardware_cost:>10,} {costs.labor_cost:>10,} {costs.total:>12,}"
            )
        lines.append("-" * width)
        lines.append(f"{'Subtotal':<20} {format_amount(quotation.subtotal):>20}")
        lines.append(
            f"{f'GST ({quotation.tax_rate * 100:g}%)':<20} {format_amount(quotation.tax):>20}"
        )
        lines.append(f"{'Grand total':<20} {format_amount(quotation.grand_total):>20}")
        lines.append("")
        lines.append(f"Valid until {quotation.valid_until:%d %b %Y}")
        return "\n".join(lines)

    def format_item(self, item: FurnitureItem) -> str:
        """Detailed breakdown of a single item."""
        d = item.dimensions
        lines = [
            f"{item.furniture_type.label}" + (f" ({item.id})" if item.id else ""),
            f"  Dimensions: {d.x:g} x {d.y:g} x {d.z:g} ft "
            f"(skirting {d.skirting_height:g} in, door {d.door_thickness:g} in, "
            f"back {d.back_thickness:g} in)",
            f"  Material: {self._material_label(item)}",
        ]
        for lamination, label in (
            (item.materials.inner_lamination, "Inner lamination"),
            (item.materials.outer_lamination, "Outer lamination"),
        ):
            if lamination:
                lines.append(f"  {label}: {self._lamination_label(lamination)}")
        if item.selected_components:
            parts = ", ".join(f"{key} x{qty}" for key, qty in item.selected_components.items())
            lines.append(f"  Components: {parts}")
        if item.selected_hardware:
            parts = ", ".join(f"{key} x{qty}" for key, qty in item.selected_hardware.items())
            lines.append(f"  Hardware: {parts}")
        lines.append(
            f"  Cost: material {format_amount(item.costs.material_cost)}, "
            f"hardware {format_amount(item.costs.hardware_cost)}, "
            f"labor {format_amount(item.costs.labor_cost)}, "
            f"total {format_amount(item.costs.total)}"
        )
        return "\n".join(lines)

    def _material_label(self, item: FurnitureItem) -> str:
        key = item.materials.primary
        material = self._catalog.primary_material(key) if self._catalog else None
        return material.label if material else key

    def _lamination_label(self, key: str) -> str:
        lamination = self._catalog.lamination(key) if self._catalog else None
        return lamination.label if lamination else key


def item_to_dict(item: FurnitureItem) -> dict[str, Any]:
    d = item.dimensions
    return {
        "id": item.id,
        "type": item.furniture_type.value,
        "dimensions": {
            "x": d.x,
            "y": d.y,
            "z": d.z,
            "skirting_height": d.skirting_height,
            "door_thickness": d.door_thickness,
            "back_thickness": d.back_thickness,
        },
        "components": item.selected_components,
        "materials": {
            "primary": item.materials.primary,
            "inner_lamination": item.materials.inner_lamination,
            "outer_lamination": item.materials.outer_lamination,
        },
        "hardware": item.selected_hardware,
        "costs": {
            "material_cost": item.costs.material_cost,
            "hardware_cost": item.costs.hardware_cost,
            "labor_cost": item.costs.labor_cost,
            "total": item.costs.total,
        },
    }


def quotation_to_dict(quotation: Quotation) -> dict[str, Any]:
    return {
        "project_id": quotation.project_id,
        "generated_at": quotation.generated_at.isoformat(),
        "valid_until": quotation.valid_until.isoformat(),
        "tax_rate": quotation.tax_rate,
        "items": [item_to_dict(item) for item in quotation.items],
        "subtotal": quotation.subtotal,
        "tax": round(quotation.tax, 2),
        "grand_total": round(quotation.grand_total, 2),
    }


class JsonExporter:
    """Exports quotation build results as JSON."""

    def export(self, output: QuotationOutput) -> str:
        """Export a quotation build as a JSON string.

        Items that could not be priced are listed under "errors".
        """
        data = quotation_to_dict(output.quotation)
        if not output.is_valid:
            data["errors"] = list(output.errors)
        return json.dumps(data, indent=2, ensure_ascii=False)
