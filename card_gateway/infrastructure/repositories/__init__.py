"""Repository implementations."""

from .card_repository import SqlCardRepository

__all__ = [
    "SqlCardRepository",
]
