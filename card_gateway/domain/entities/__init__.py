"""Domain Entities - Core business objects."""

from .card import Card

__all__ = [
    "Card",
]
