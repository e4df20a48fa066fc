"""SQL identifier safety for configurable table and schema names.

Only identifiers made entirely of ASCII word characters (letters,
digits, underscore) are ever composed into SQL text. Values are never
handled here; they are always passed as bound parameters.
"""

import re
from typing import Optional

import structlog

logger = structlog.get_logger(__name__)

IDENTIFIER_PATTERN = re.compile(r"\w+", re.ASCII)

DEFAULT_CARDS_TABLE = "cards"


class UnsafeIdentifierError(ValueError):
    """Raised when a configured identifier fails the word-character check."""

    def __init__(self, setting: str, value: str):
        super().__init__(
            f"{setting}={value!r} is not a safe SQL identifier "
            "(only letters, digits and underscore are allowed)"
        )
        self.setting = setting
        self.value = value


def is_safe_identifier(name: Optional[str]) -> bool:
    """Return True if ``name`` consists solely of ASCII word characters."""
    if not name:
        return False
    return IDENTIFIER_PATTERN.fullmatch(name) is not None


def sanitize_identifier(name: Optional[str], default: Optional[str]) -> Optional[str]:
    """
    Return ``name`` if it is a safe identifier, otherwise ``default``.

    Args:
        name: Identifier taken from configuration
        default: Fallback returned for missing or unsafe names

    Returns:
        A name that is safe to compose into SQL text, or ``default``
    """
    return name if is_safe_identifier(name) else default


def resolve_identifier(
    setting: str,
    name: Optional[str],
    default: Optional[str],
    strict: bool = True,
) -> Optional[str]:
    """
    Resolve a configured identifier at startup.

    Missing names resolve to ``default``. Unsafe names raise
    ``UnsafeIdentifierError`` in strict mode; otherwise they fall
    back to ``default`` with a warning.
    """
    if not name:
        return default

    safe = sanitize_identifier(name, default)
    if safe != name:
        if strict:
            raise UnsafeIdentifierError(setting, name)
        logger.warning(
            "unsafe_identifier_replaced",
            setting=setting,
            fallback=default,
        )
    return safe
