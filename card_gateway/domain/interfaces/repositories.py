"""Repository interfaces for data persistence."""

from abc import ABC, abstractmethod
from typing import List

from card_gateway.domain.entities import Card


class CardRepository(ABC):
    """
    Abstract repository for Card persistence.

    Mutating operations report the number of rows affected so callers
    can tell a missing card apart from a successful change.
    """

    @abstractmethod
    async def list_all(self) -> List[Card]:
        """
        Retrieve every card in the store.

        Returns:
            All cards, in whatever order the store returns them
        """
        ...

    @abstractmethod
    async def create(self, card_name: str, card_pic: str) -> Card:
        """
        Insert a new card.

        Args:
            card_name: Name of the card
            card_pic: Picture reference of the card

        Returns:
            The stored card with its store-assigned id
        """
        ...

    @abstractmethod
    async def update(self, card_id: int, card_name: str, card_pic: str) -> int:
        """
        Overwrite both mutable fields of a card.

        Args:
            card_id: Identifier of the card to update
            card_name: New card name
            card_pic: New picture reference

        Returns:
            Number of rows affected
        """
        ...

    @abstractmethod
    async def delete(self, card_id: int) -> int:
        """
        Remove a card.

        Args:
            card_id: Identifier of the card to delete

        Returns:
            Number of rows affected
        """
        ...
