"""REST API response envelope.

Every endpoint under /api wraps its payload in the same shape:

    success: {"data": <payload>, "success": true}
    failure: {"data": null, "success": false, "error": "<message>"}

Validation failures additionally carry a list of field-level errors.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class ErrorDetail(BaseModel):
    """Individual error detail for field-level errors."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "minPrice",
                "message": "Must be a valid decimal number",
                "code": "INVALID_DECIMAL",
            }
        }
    )


class ApiResponse(BaseModel, Generic[T]):
    """Successful response envelope."""

    data: T
    success: bool = True


class ApiErrorResponse(BaseModel):
    """Failure envelope returned by the exception handlers."""

    data: None = None
    success: bool = False
    error: str
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"data": None, "success": False, "error": "Product not found"},
                {
                    "data": None,
                    "success": False,
                    "error": "Validation failed",
                    "errors": [
                        {
                            "field": "minPrice",
                            "message": "Must be a valid decimal number",
                            "code": "INVALID_DECIMAL",
                        }
                    ],
                },
            ]
        }
    )


def error_content(message: str, errors: list[dict[str, Any]] | None = None) -> dict[str, Any]:
    """Build the JSON body of a failure envelope."""
    content: dict[str, Any] = {"data": None, "success": False, "error": message}
    if errors:
        content["errors"] = errors
    return content
