"""Card service - validates card requests and maps store outcomes."""

from contextlib import contextmanager
from typing import Generator, List, Optional

import structlog
from sqlalchemy.exc import SQLAlchemyError

from card_gateway.application.dto import (
    CardResponse,
    CreateCardCommand,
    UpdateCardCommand,
)
from card_gateway.application.dto.card import ID_REQUIRED
from card_gateway.core.metrics import record_card_operation, track_store_latency
from card_gateway.domain.exceptions import (
    CardNotFoundException,
    CardStoreException,
    InvalidCardRequestException,
)
from card_gateway.domain.interfaces import CardRepository

logger = structlog.get_logger(__name__)


class CardService:
    """
    Application service for card use cases.

    Requests are validated before the repository is touched. Store
    failures are logged with the failing operation and re-raised as
    ``CardStoreException`` carrying a generic message.
    """

    def __init__(self, card_repository: CardRepository):
        self._card_repo = card_repository

    async def list_cards(self) -> List[CardResponse]:
        """
        Retrieve every card.

        Raises:
            CardStoreException: If the store query fails
        """
        with self._store_operation("allcards", "Server error for allcards"):
            cards = await self._card_repo.list_all()

        logger.info("cards_listed", count=len(cards))
        record_card_operation("allcards", "success")

        return [CardResponse.from_entity(card) for card in cards]

    async def create_card(self, command: CreateCardCommand) -> CardResponse:
        """
        Create a card from a validated command.

        Raises:
            InvalidCardRequestException: If a required field is missing
            CardStoreException: If the insert fails
        """
        self._validate("addcard", command.validate())

        with self._store_operation(
            "addcard",
            f"Server error - could not add card {command.card_name}",
        ):
            card = await self._card_repo.create(command.card_name, command.card_pic)

        logger.info("card_created", card_id=card.id, card_name=card.card_name)
        record_card_operation("addcard", "success")

        return CardResponse.from_entity(card)

    async def update_card(self, command: UpdateCardCommand) -> CardResponse:
        """
        Replace the name and picture of an existing card.

        Raises:
            InvalidCardRequestException: If the id or a content field is missing
            CardNotFoundException: If no row matched the id
            CardStoreException: If the update fails
        """
        self._validate("updatecard", command.validate())

        with self._store_operation(
            "updatecard",
            "Server error - could not update card",
        ):
            affected = await self._card_repo.update(
                command.id,
                command.card_name,
                command.card_pic,
            )

        if affected == 0:
            self._not_found("updatecard", command.id)

        logger.info("card_updated", card_id=command.id)
        record_card_operation("updatecard", "success")

        return CardResponse(
            id=command.id,
            card_name=command.card_name,
            card_pic=command.card_pic,
        )

    async def delete_card(self, card_id: Optional[int]) -> None:
        """
        Delete a card by id.

        Raises:
            InvalidCardRequestException: If no id was supplied
            CardNotFoundException: If no row matched the id
            CardStoreException: If the delete fails
        """
        if card_id is None:
            self._validate("deletecard", [ID_REQUIRED])

        with self._store_operation(
            "deletecard",
            "Server error - could not delete card",
        ):
            affected = await self._card_repo.delete(card_id)

        if affected == 0:
            self._not_found("deletecard", card_id)

        logger.info("card_deleted", card_id=card_id)
        record_card_operation("deletecard", "success")

    def _validate(self, operation: str, errors: List[str]) -> None:
        if errors:
            record_card_operation(operation, "invalid")
            raise InvalidCardRequestException("; ".join(errors))

    def _not_found(self, operation: str, card_id) -> None:
        logger.warning("card_not_found", operation=operation, card_id=card_id)
        record_card_operation(operation, "not_found")
        raise CardNotFoundException(card_id)

    @contextmanager
    def _store_operation(
        self,
        operation: str,
        failure_message: str,
    ) -> Generator[None, None, None]:
        """Time a store call and translate store errors."""
        try:
            with track_store_latency(operation):
                yield
        except SQLAlchemyError as exc:
            logger.error(
                "card_store_error",
                operation=operation,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            record_card_operation(operation, "error")
            raise CardStoreException(operation, failure_message) from exc
