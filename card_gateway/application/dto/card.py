"""Data transfer objects for card operations."""

from dataclasses import dataclass
from typing import List, Optional

CONTENT_FIELDS_REQUIRED = "card_name and card_pic are required"
ID_REQUIRED = "id is required"


@dataclass(frozen=True)
class CreateCardCommand:
    """Input data for creating a card."""
    card_name: Optional[str]
    card_pic: Optional[str]

    def validate(self) -> List[str]:
        errors = []

        if not self.card_name or not self.card_pic:
            errors.append(CONTENT_FIELDS_REQUIRED)

        return errors


@dataclass(frozen=True)
class UpdateCardCommand:
    """Input data for replacing both fields of an existing card."""
    id: Optional[int]
    card_name: Optional[str]
    card_pic: Optional[str]

    def validate(self) -> List[str]:
        # id is checked first; content fields only once an id is present
        if not self.id:
            return [ID_REQUIRED]

        if not self.card_name or not self.card_pic:
            return [CONTENT_FIELDS_REQUIRED]

        return []


@dataclass(frozen=True)
class CardResponse:
    """Response data for a single card."""

    id: int
    card_name: str
    card_pic: str

    @classmethod
    def from_entity(cls, card) -> "CardResponse":
        return cls(
            id=card.id,
            card_name=card.card_name,
            card_pic=card.card_pic,
        )
