"""Database infrastructure - connection pool, table definition and identifier safety."""

from .connection import DatabaseSessionManager
from .identifiers import (
    DEFAULT_CARDS_TABLE,
    UnsafeIdentifierError,
    is_safe_identifier,
    resolve_identifier,
    sanitize_identifier,
)
from .models import build_cards_table

__all__ = [
    "DatabaseSessionManager",
    "DEFAULT_CARDS_TABLE",
    "UnsafeIdentifierError",
    "is_safe_identifier",
    "resolve_identifier",
    "sanitize_identifier",
    "build_cards_table",
]
