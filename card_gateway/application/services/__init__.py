"""Application Services - Use case orchestration."""

from .card_service import CardService

__all__ = [
    "CardService",
]
