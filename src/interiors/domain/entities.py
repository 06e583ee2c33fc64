"""Domain entities: configured furniture, quotations and project records."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from .value_objects import CostBreakdown, Dimensions, FurnitureType, MaterialSelection

#: Number of days a generated quotation stays valid.
QUOTATION_VALIDITY_DAYS = 30


@dataclass(frozen=True)
class FurnitureConfiguration:
    """Everything chosen for one furniture item, before pricing.

    Any part may still be missing; cost calculators reject incomplete
    configurations.
    """

    furniture_type: FurnitureType
    dimensions: Dimensions | None = None
    components: Mapping[str, int] | None = None
    materials: MaterialSelection | None = None
    hardware: Mapping[str, int] | None = None

    def missing_parts(self) -> list[str]:
        """Names of the parts that prevent this configuration from being priced."""
        missing: list[str] = []
        if self.dimensions is None:
            missing.append("dimensions")
        if self.components is None:
            missing.append("components")
        if self.materials is None or not self.materials.is_complete:
            missing.append("materials.primary")
        if self.hardware is None:
            missing.append("hardware")
        return missing

    @property
    def is_complete(self) -> bool:
        return not self.missing_parts()


@dataclass(frozen=True)
class FurnitureItem:
    """A fully configured and priced furniture item.

    Items are immutable; the identifier is assigned when the item is added to
    a quotation (see with_id()).
    """

    furniture_type: FurnitureType
    dimensions: Dimensions
    components: Mapping[str, int]
    materials: MaterialSelection
    hardware: Mapping[str, int]
    costs: CostBreakdown
    id: str | None = None

    def __post_init__(self) -> None:
        # Copy and freeze so a stored item cannot change under its quotation
        object.__setattr__(self, "components", MappingProxyType(dict(self.components)))
        object.__setattr__(self, "hardware", MappingProxyType(dict(self.hardware)))

    def with_id(self, item_id: str) -> FurnitureItem:
        """Return a copy of this item carrying the given identifier."""
        return replace(self, id=item_id)

    @property
    def selected_components(self) -> dict[str, int]:
        """Components with a quantity above zero."""
        return {key: qty for key, qty in self.components.items() if qty > 0}

    @property
    def selected_hardware(self) -> dict[str, int]:
        """Hardware with a quantity above zero."""
        return {key: qty for key, qty in self.hardware.items() if qty > 0}


@dataclass(frozen=True)
class Quotation:
    """Priced snapshot of a list of furniture items.

    Attributes:
        items: Items in the order they were added.
        subtotal: Sum of item totals.
        tax: subtotal x tax_rate.
        grand_total: subtotal + tax.
        tax_rate: Rate used for tax, as a fraction (0.18 = 18%).
        project_id: Project the quotation belongs to, if known.
        generated_at: When the snapshot was taken.
    """

    items: tuple[FurnitureItem, ...]
    subtotal: int
    tax: float
    grand_total: float
    tax_rate: float
    project_id: str | None = None
    generated_at: datetime = field(default_factory=datetime.now)

    @property
    def valid_until(self) -> datetime:
        return self.generated_at + timedelta(days=QUOTATION_VALIDITY_DAYS)

    @property
    def is_empty(self) -> bool:
        return not self.items


class UserRole(str, Enum):
    ADMIN = "admin"
    EMPLOYEE = "employee"


class ProjectStatus(str, Enum):
    DRAFT = "draft"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


@dataclass(frozen=True)
class User:
    """Signed-in user as reported by the identity service."""

    id: str
    name: str
    email: str
    role: UserRole = UserRole.EMPLOYEE
    created_at: str | None = None


@dataclass(frozen=True)
class Client:
    """Customer a project is quoted for."""

    name: str
    email: str
    phone: str
    address: str
    id: str | None = None


@dataclass(frozen=True)
class Project:
    """Project record held by the storage service."""

    id: str
    title: str
    description: str
    client: Client
    status: ProjectStatus = ProjectStatus.DRAFT
    total_amount: float = 0
    created_at: str | None = None
    updated_at: str | None = None


__all__ = [
    "QUOTATION_VALIDITY_DAYS",
    "Client",
    "FurnitureConfiguration",
    "FurnitureItem",
    "Project",
    "ProjectStatus",
    "Quotation",
    "User",
    "UserRole",
]
