"""Card API endpoints."""

from typing import Annotated, List, Optional

from fastapi import APIRouter, Body, Depends, Path, Response

from card_gateway.application.dto import CreateCardCommand, UpdateCardCommand
from card_gateway.application.services import CardService
from card_gateway.core.dependencies import get_card_service
from card_gateway.presentation.schemas import (
    AddCardRequestSchema,
    UpdateCardRequestSchema,
    CardSchema,
    CardCreatedResponseSchema,
    CardUpdatedResponseSchema,
    ErrorResponseSchema,
)

# Each route is also served with a trailing slash; the app does not redirect.
card_router = APIRouter(
    responses={
        500: {"model": ErrorResponseSchema, "description": "Card store error"},
    },
)


@card_router.get("/allcards/", response_model=List[CardSchema], include_in_schema=False)
@card_router.get(
    "/allcards",
    response_model=List[CardSchema],
    summary="List Cards",
    description="Return every card in the configured table.",
)
async def list_cards(
    card_service: Annotated[CardService, Depends(get_card_service)],
) -> List[CardSchema]:
    cards = await card_service.list_cards()

    return [
        CardSchema(id=card.id, card_name=card.card_name, card_pic=card.card_pic)
        for card in cards
    ]


@card_router.post(
    "/addcard/",
    response_model=CardCreatedResponseSchema,
    status_code=201,
    include_in_schema=False,
)
@card_router.post(
    "/addcard",
    response_model=CardCreatedResponseSchema,
    status_code=201,
    summary="Create Card",
    description="Insert a new card. The store assigns its id.",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Missing card_name or card_pic"},
    },
)
async def add_card(
    card_service: Annotated[CardService, Depends(get_card_service)],
    request: Annotated[Optional[AddCardRequestSchema], Body()] = None,
) -> CardCreatedResponseSchema:
    request = request or AddCardRequestSchema()
    command = CreateCardCommand(
        card_name=request.card_name,
        card_pic=request.card_pic,
    )

    card = await card_service.create_card(command)

    return CardCreatedResponseSchema(
        id=card.id,
        card_name=card.card_name,
        card_pic=card.card_pic,
        message=f"Card {card.card_name} added successfully",
    )


@card_router.put("/updatecard/", response_model=CardUpdatedResponseSchema, include_in_schema=False)
@card_router.put(
    "/updatecard",
    response_model=CardUpdatedResponseSchema,
    summary="Update Card",
    description="""
    Replace both card_name and card_pic of the card with the given id.

    Partial updates are not supported; both fields are required.
    """,
    responses={
        400: {"model": ErrorResponseSchema, "description": "Missing id or content field"},
        404: {"model": ErrorResponseSchema, "description": "Card not found"},
    },
)
async def update_card(
    card_service: Annotated[CardService, Depends(get_card_service)],
    request: Annotated[Optional[UpdateCardRequestSchema], Body()] = None,
) -> CardUpdatedResponseSchema:
    request = request or UpdateCardRequestSchema()
    command = UpdateCardCommand(
        id=request.id,
        card_name=request.card_name,
        card_pic=request.card_pic,
    )

    card = await card_service.update_card(command)

    return CardUpdatedResponseSchema(
        message="Card updated",
        id=card.id,
        card_name=card.card_name,
        card_pic=card.card_pic,
    )


@card_router.delete(
    "/deletecard/{card_id}/",
    status_code=204,
    response_class=Response,
    include_in_schema=False,
)
@card_router.delete(
    "/deletecard/{card_id}",
    status_code=204,
    response_class=Response,
    summary="Delete Card",
    description="Delete the card with the given id. Returns an empty body.",
    responses={
        204: {"description": "Card deleted"},
        400: {"model": ErrorResponseSchema, "description": "Invalid id"},
        404: {"model": ErrorResponseSchema, "description": "Card not found"},
    },
)
async def delete_card(
    card_id: Annotated[int, Path(description="Identifier of the card to delete")],
    card_service: Annotated[CardService, Depends(get_card_service)],
) -> Response:
    await card_service.delete_card(card_id)

    return Response(status_code=204)
