"""Core schema definitions for standardized API responses.

Every endpoint answers with the same envelope so the mobile client can
branch on ``success`` before looking at the payload.
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Standard API response envelope.

    Example success response:
        {
            "success": true,
            "data": [ ... ],
            "message": null,
            "count": 2
        }

    Example error response:
        {
            "success": false,
            "data": null,
            "message": "No se encontró un usuario con ID 7",
            "count": null,
            "error": {
                "code": "NOT_FOUND",
                "message": "No se encontró un usuario con ID 7",
                "details": { "resource": "user" }
            }
        }
    """

    success: bool = True
    data: T | None = None
    message: str | None = None
    count: int | None = None
    error: dict[str, Any] | None = None


class DeletedCount(BaseModel):
    """Payload of bulk delete endpoints."""

    deleted: int = Field(..., ge=0, description="Number of rows removed")


class ErrorDetail(BaseModel):
    """Error detail structure."""

    code: str = Field(..., description="Error code for programmatic handling")
    message: str = Field(..., description="Human-readable error message")
    details: dict[str, Any] | None = Field(None, description="Additional error context")


class ErrorResponse(BaseModel):
    """Standard error response format."""

    success: bool = False
    data: None = None
    message: str
    count: None = None
    error: ErrorDetail


ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Datos inválidos"},
    404: {"model": ErrorResponse, "description": "Recurso no encontrado"},
    409: {"model": ErrorResponse, "description": "Conflicto con un registro existente"},
    500: {"model": ErrorResponse, "description": "Error interno del servidor"},
}


def success_response(
    data: T,
    message: str | None = None,
    count: int | None = None,
) -> ApiResponse[T]:
    """Create a successful API response.

    Args:
        data: The response data.
        message: Optional human-readable confirmation.
        count: Optional number of items, set for list payloads.

    Returns:
        ApiResponse with success=True.
    """
    return ApiResponse(success=True, data=data, message=message, count=count)


def list_response(data: list[T], message: str | None = None) -> ApiResponse[list[T]]:
    """Create a successful list response with ``count`` filled in."""
    return ApiResponse(success=True, data=data, message=message, count=len(data))


def message_response(message: str) -> ApiResponse[None]:
    """Create a successful response that only carries a confirmation message."""
    return ApiResponse(success=True, message=message)
