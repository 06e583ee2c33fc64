"""Domain exceptions for furniture configuration and quotation.

Every exception raised by the domain layer derives from QuotationError, so
callers can catch the whole family at once. Each one also derives from the
built-in exception it specialises (ValueError, LookupError, IndexError), and
carries the offending field, key or index as attributes so the outer layers
can build an actionable message.
"""

from __future__ import annotations


class QuotationError(Exception):
    """Base class for all furniture configuration and quotation errors."""


class InvalidDimensionsError(QuotationError, ValueError):
    """Raised when one or more dimension fields are out of range.

    Attributes:
        fields: Names of the failing fields, in input order (e.g. ("x", "z")).
    """

    def __init__(self, fields: tuple[str, ...] | list[str]) -> None:
        self.fields = tuple(fields)
        super().__init__(
            f"Invalid dimensions: {', '.join(self.fields)} "
            "(width, height and depth must be positive; thicknesses cannot be negative)"
        )


class UnknownOptionKeyError(QuotationError, LookupError):
    """Raised when a selection references a key absent from the catalog.

    Attributes:
        key: The unknown option key.
        furniture_type: The furniture type whose catalog was searched.
    """

    def __init__(self, key: str, furniture_type: str) -> None:
        self.key = key
        self.furniture_type = furniture_type
        super().__init__(f"Unknown option '{key}' for furniture type '{furniture_type}'")

    def __str__(self) -> str:
        return self.args[0]


class IncompleteConfigurationError(QuotationError, ValueError):
    """Raised when pricing is attempted before every step is satisfied.

    Attributes:
        missing: Names of the missing parts (dimensions, components,
            materials.primary, hardware).
    """

    def __init__(self, missing: tuple[str, ...] | list[str]) -> None:
        self.missing = tuple(missing)
        super().__init__(f"Incomplete configuration: missing {', '.join(self.missing)}")


class IndexOutOfRangeError(QuotationError, IndexError):
    """Raised when an item position does not exist in a quotation.

    Attributes:
        index: The requested position.
        size: Number of items at the time of the request.
    """

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"Item index {index} out of range (quotation has {size} items)")


class WorkflowBusyError(QuotationError):
    """Raised when a workflow receives input while an item is being priced."""

    def __init__(self) -> None:
        super().__init__("Workflow is calculating an item; wait for it to finish")


class WorkflowStateError(QuotationError):
    """Raised when an operation is not available in the current workflow step."""


__all__ = [
    "IncompleteConfigurationError",
    "IndexOutOfRangeError",
    "InvalidDimensionsError",
    "QuotationError",
    "UnknownOptionKeyError",
    "WorkflowBusyError",
    "WorkflowStateError",
]
