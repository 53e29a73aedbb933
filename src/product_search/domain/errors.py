"""Domain error classes.

Protocol-agnostic errors that represent catalog and search failures.
These errors are translated to HTTP responses by the entrypoint layer.

Only catalog construction can fail hard. Empty catalogs, blank search terms
and undefined ratios are ordinary results, not errors.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Contains error information that can be translated to any transport.
    """

    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message
            **context: Additional context for the error (e.g., field names, values)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Business rule validation error.

    Examples:
        - negative product price
        - rating outside 0.0-5.0
        - non-positive scalability size

    Protocol mappings:
        - REST: 422 Unprocessable Entity
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: List of field-specific errors, each with 'field' and 'message'
                   Example: [{"field": "price", "message": "Must be >= 0"}]
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class ProductValidationError(ValidationError):
    """Raised when a product violates an attribute invariant."""

    pass


class ConflictError(DomainError):
    """Business constraint conflict.

    Protocol mappings:
        - REST: 409 Conflict
    """

    error_code: str = "CONFLICT"


class DuplicateIdError(ConflictError):
    """Two products in one catalog share an id.

    Raised only while building a catalog, never during a search.
    """

    error_code: str = "DUPLICATE_ID"

    def __init__(self, product_id: int, **context: Any) -> None:
        self.product_id = product_id
        super().__init__(
            f"Product id {product_id} appears more than once in the catalog",
            product_id=product_id,
            **context,
        )
