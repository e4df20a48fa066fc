"""Pydantic schemas for API error responses."""

from pydantic import BaseModel, Field


class ErrorResponseSchema(BaseModel):
    """Standard error response format for all API errors."""
    error: str = Field(
        ...,
        description="Error code",
        examples=["CARD_NOT_FOUND"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
        examples=["No card found with id 1"],
    )
    request_id: str | None = Field(
        None,
        description="Request ID for tracing",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "error": "CARD_NOT_FOUND",
                    "message": "No card found with id 1",
                    "request_id": "abc123",
                }
            ]
        }
    }


class RouteNotFoundSchema(BaseModel):
    """Response for requests that match no route."""
    message: str = Field(
        "Route not found",
        description="Fixed not-found message",
    )
    path: str = Field(
        ...,
        description="The requested path, including any query string",
        examples=["/nonexistent"],
    )
