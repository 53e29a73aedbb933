"""REST API error response models.

Documents the structured error body every handler in exception_handlers returns.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Field-level error detail."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "sizes",
                "message": "Must be a positive integer, got 0",
                "code": None,
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Simple error:
            {"detail": "Product id 1001 appears more than once in the catalog",
             "code": "DUPLICATE_ID"}

        Validation error:
            {"detail": "Invalid request parameters",
             "code": "VALIDATION_ERROR",
             "errors": [{"field": "product_id", "message": "...", "code": "int_parsing"}]}
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "An unexpected error occurred", "code": "INTERNAL_ERROR"},
                {
                    "detail": "Invalid request parameters",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "product_id",
                            "message": "Input should be a valid integer",
                            "code": "int_parsing",
                        }
                    ],
                },
            ]
        }
    )


ERROR_RESPONSES: dict[int | str, dict] = {
    422: {"model": ErrorResponse, "description": "Validation error"},
    500: {"model": ErrorResponse, "description": "Internal error"},
}
