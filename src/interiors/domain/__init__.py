"""Domain layer - core business logic."""

from .catalog import (
    Catalog,
    CatalogData,
    ComponentOption,
    DimensionDefaults,
    HardwareOption,
    Lamination,
    MaterialCatalog,
    PrimaryMaterial,
)
from .entities import (
    Client,
    FurnitureConfiguration,
    FurnitureItem,
    Project,
    ProjectStatus,
    Quotation,
    User,
    UserRole,
)
from .errors import (
    IncompleteConfigurationError,
    IndexOutOfRangeError,
    InvalidDimensionsError,
    QuotationError,
    UnknownOptionKeyError,
    WorkflowBusyError,
    WorkflowStateError,
)
from .services import (
    AreaRateCostCalculator,
    ComponentSelector,
    ConfigurationWorkflow,
    DimensionValidator,
    FlatRateCostCalculator,
    HardwareSelector,
    LaborRates,
    MaterialSelector,
    QuotationAggregator,
    WorkflowStep,
)
from .value_objects import (
    CostBreakdown,
    Dimensions,
    FurnitureType,
    MaterialSelection,
    OptionKind,
)

__all__ = [
    "AreaRateCostCalculator",
    "Catalog",
    "CatalogData",
    "Client",
    "ComponentOption",
    "ComponentSelector",
    "ConfigurationWorkflow",
    "CostBreakdown",
    "DimensionDefaults",
    "DimensionValidator",
    "Dimensions",
    "FlatRateCostCalculator",
    "FurnitureConfiguration",
    "FurnitureItem",
    "FurnitureType",
    "HardwareOption",
    "HardwareSelector",
    "IncompleteConfigurationError",
    "IndexOutOfRangeError",
    "InvalidDimensionsError",
    "LaborRates",
    "Lamination",
    "MaterialCatalog",
    "MaterialSelection",
    "MaterialSelector",
    "OptionKind",
    "PrimaryMaterial",
    "Project",
    "ProjectStatus",
    "Quotation",
    "QuotationAggregator",
    "QuotationError",
    "UnknownOptionKeyError",
    "User",
    "UserRole",
    "WorkflowBusyError",
    "WorkflowStateError",
    "WorkflowStep",
]
