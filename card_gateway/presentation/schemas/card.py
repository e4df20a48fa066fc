"""Card-related Pydantic schemas."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _falsy_as_missing(value: Any) -> Any:
    # 0, "" and false count as absent before numbers are turned into text
    return value if value else None


class AddCardRequestSchema(BaseModel):
    """
    Schema for POST /addcard request body.

    Fields are optional at the schema level so that a missing field is
    reported by the service as a validation error rather than a 422.
    Numbers are accepted and stored as text.
    """

    model_config = ConfigDict(
        coerce_numbers_to_str=True,
        json_schema_extra={
            "examples": [
                {
                    "card_name": "Ace",
                    "card_pic": "ace.png",
                }
            ]
        }
    )
    card_name: Optional[str] = Field(
        None,
        description="Name of the card (required, non-empty)",
        examples=["Ace"],
    )
    card_pic: Optional[str] = Field(
        None,
        description="Picture URI or image reference (required, non-empty)",
        examples=["ace.png"],
    )

    check_presence = field_validator("card_name", "card_pic", mode="before")(
        _falsy_as_missing
    )


class UpdateCardRequestSchema(BaseModel):
    """Schema for PUT /updatecard request body."""

    model_config = ConfigDict(
        coerce_numbers_to_str=True,
        json_schema_extra={
            "examples": [
                {
                    "id": 1,
                    "card_name": "Ace2",
                    "card_pic": "ace2.png",
                }
            ]
        }
    )
    id: Optional[int] = Field(
        None,
        description="Identifier of the card to update (required)",
        examples=[1],
    )
    card_name: Optional[str] = Field(
        None,
        description="New card name (required, non-empty)",
        examples=["Ace2"],
    )
    card_pic: Optional[str] = Field(
        None,
        description="New picture reference (required, non-empty)",
        examples=["ace2.png"],
    )

    check_presence = field_validator("card_name", "card_pic", mode="before")(
        _falsy_as_missing
    )


class CardSchema(BaseModel):
    """Schema for a stored card."""

    id: int = Field(
        ...,
        description="Store-assigned card identifier",
        examples=[1],
    )
    card_name: str = Field(
        ...,
        description="Name of the card",
        examples=["Ace"],
    )
    card_pic: str = Field(
        ...,
        description="Picture URI or image reference",
        examples=["ace.png"],
    )


class CardCreatedResponseSchema(CardSchema):
    """Schema for POST /addcard response body."""

    message: str = Field(
        ...,
        description="Confirmation message",
        examples=["Card Ace added successfully"],
    )


class CardUpdatedResponseSchema(BaseModel):
    """Schema for PUT /updatecard response body."""

    message: str = Field(
        "Card updated",
        description="Confirmation message",
    )
    id: int = Field(
        ...,
        description="Identifier of the updated card",
    )
    card_name: str = Field(
        ...,
        description="Card name after the update",
    )
    card_pic: str = Field(
        ...,
        description="Picture reference after the update",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "message": "Card updated",
                    "id": 1,
                    "card_name": "Ace2",
                    "card_pic": "ace2.png",
                }
            ]
        }
    )
