"""Card domain entity."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Card:
    """
    A card stored in the configured card table.

    ``id`` is assigned by the store on insert and is ``None`` until then.
    """

    card_name: str
    card_pic: str
    id: Optional[int] = None
