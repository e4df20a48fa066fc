"""Card-related domain exceptions."""

from .base import DomainException


class InvalidCardRequestException(DomainException):
    """Raised when a card request is missing a required field."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="INVALID_CARD_REQUEST",
        )


class CardNotFoundException(DomainException):
    """Raised when an update or delete affected no rows."""

    def __init__(self, card_id: int | str):
        super().__init__(
            message=f"No card found with id {card_id}",
            code="CARD_NOT_FOUND",
        )
        self.card_id = card_id


class CardStoreException(DomainException):
    """Raised when the card store fails to execute an operation."""

    def __init__(self, operation: str, message: str):
        super().__init__(
            message=message,
            code="CARD_STORE_ERROR",
        )
        self.operation = operation
