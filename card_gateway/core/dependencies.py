"""Dependency injection for FastAPI."""

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy import Table

from card_gateway.application.services import CardService
from card_gateway.infrastructure.database import DatabaseSessionManager
from card_gateway.infrastructure.repositories import SqlCardRepository


# Resources created by the application lifespan
def get_db_manager(request: Request) -> DatabaseSessionManager:
    """Get the connection pool manager created at startup."""
    return request.app.state.db


def get_cards_table(request: Request) -> Table:
    """Get the card table definition resolved at startup."""
    return request.app.state.cards_table


# Repository dependencies
async def get_card_repository(
    db: Annotated[DatabaseSessionManager, Depends(get_db_manager)],
    table: Annotated[Table, Depends(get_cards_table)],
) -> SqlCardRepository:
    """Get a CardRepository instance."""
    return SqlCardRepository(db, table)


# Service dependencies
async def get_card_service(
    card_repo: Annotated[SqlCardRepository, Depends(get_card_repository)],
) -> CardService:
    """Get a CardService instance."""
    return CardService(card_repository=card_repo)
