"""Data Transfer Objects for application layer."""

from .card import (
    CardResponse,
    CreateCardCommand,
    UpdateCardCommand,
)

__all__ = [
    "CardResponse",
    "CreateCardCommand",
    "UpdateCardCommand",
]
