"""Domain Exceptions - Request violations and store errors."""

from .base import DomainException
from .card import (
    CardNotFoundException,
    CardStoreException,
    InvalidCardRequestException,
)

__all__ = [
    "DomainException",
    "CardNotFoundException",
    "CardStoreException",
    "InvalidCardRequestException",
]
