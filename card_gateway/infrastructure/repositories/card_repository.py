"""SQL implementation of CardRepository."""

from typing import List

from sqlalchemy import Table, delete, insert, select, update

from card_gateway.domain.entities import Card
from card_gateway.domain.interfaces import CardRepository
from card_gateway.infrastructure.database import DatabaseSessionManager


class SqlCardRepository(CardRepository):
    """
    Relational implementation of the Card repository.

    Statements are built with SQLAlchemy Core against the configured
    card table, so every value travels as a bound parameter. Each call
    runs in its own session and commits a single statement.
    """

    def __init__(self, db: DatabaseSessionManager, table: Table):
        self._db = db
        self._table = table

    async def list_all(self) -> List[Card]:
        stmt = select(
            self._table.c.id,
            self._table.c.card_name,
            self._table.c.card_pic,
        )
        async with self._db.session() as session:
            result = await session.execute(stmt)
            rows = result.mappings().all()

        return [self._to_entity(row) for row in rows]

    async def create(self, card_name: str, card_pic: str) -> Card:
        stmt = insert(self._table).values(card_name=card_name, card_pic=card_pic)
        async with self._db.session() as session:
            result = await session.execute(stmt)
            card_id = result.inserted_primary_key[0]

        return Card(id=card_id, card_name=card_name, card_pic=card_pic)

    async def update(self, card_id: int, card_name: str, card_pic: str) -> int:
        stmt = (
            update(self._table)
            .where(self._table.c.id == card_id)
            .values(card_name=card_name, card_pic=card_pic)
        )
        async with self._db.session() as session:
            result = await session.execute(stmt)
            affected = result.rowcount

        return affected

    async def delete(self, card_id: int) -> int:
        stmt = delete(self._table).where(self._table.c.id == card_id)
        async with self._db.session() as session:
            result = await session.execute(stmt)
            affected = result.rowcount

        return affected

    def _to_entity(self, row) -> Card:
        return Card(
            id=row["id"],
            card_name=row["card_name"],
            card_pic=row["card_pic"],
        )
