"""Pydantic schemas for API request/response validation."""

from .card import (
    AddCardRequestSchema,
    UpdateCardRequestSchema,
    CardSchema,
    CardCreatedResponseSchema,
    CardUpdatedResponseSchema,
)
from .error import ErrorResponseSchema, RouteNotFoundSchema

__all__ = [
    "AddCardRequestSchema",
    "UpdateCardRequestSchema",
    "CardSchema",
    "CardCreatedResponseSchema",
    "CardUpdatedResponseSchema",
    "ErrorResponseSchema",
    "RouteNotFoundSchema",
]
