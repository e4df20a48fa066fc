"""Domain Interfaces - Abstract contracts for infrastructure."""

from .repositories import CardRepository

__all__ = [
    "CardRepository",
]
