"""Domain services for furniture configuration and quotation.

This package provides:
- DimensionValidator: permissive parsing and validation of dimensions
- ComponentSelector / HardwareSelector / MaterialSelector: catalog-bounded choices
- AreaRateCostCalculator / FlatRateCostCalculator: cost strategies
- ConfigurationWorkflow: the step-gated item wizard
- QuotationAggregator: item list with subtotal, tax and grand total
"""

from .cost_calculator import (
    DEFAULT_LABOR_RATES,
    AreaRateCostCalculator,
    FlatRateCostCalculator,
    LaborRates,
    require_complete,
)
from .dimension_validator import DIMENSION_FIELDS, DimensionValidator
from .quotation import DEFAULT_TAX_RATE, QuotationAggregator
from .selectors import (
    ComponentSelector,
    HardwareSelector,
    MaterialSelector,
    OptionSelector,
)
from .workflow import ConfigurationWorkflow, WorkflowEvent, WorkflowStep, transition

__all__ = [
    "DEFAULT_LABOR_RATES",
    "DEFAULT_TAX_RATE",
    "DIMENSION_FIELDS",
    "AreaRateCostCalculator",
    "ComponentSelector",
    "ConfigurationWorkflow",
    "DimensionValidator",
    "FlatRateCostCalculator",
    "HardwareSelector",
    "LaborRates",
    "MaterialSelector",
    "OptionSelector",
    "QuotationAggregator",
    "WorkflowEvent",
    "WorkflowStep",
    "require_complete",
    "transition",
]
