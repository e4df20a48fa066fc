"""SQLAlchemy table definition for the card table."""

from typing import Optional

from sqlalchemy import Column, Integer, MetaData, String, Table

from .identifiers import DEFAULT_CARDS_TABLE, sanitize_identifier


def build_cards_table(
    name: str = DEFAULT_CARDS_TABLE,
    schema: Optional[str] = None,
    metadata: Optional[MetaData] = None,
) -> Table:
    """
    Build the card table definition for a configured table name.

    The table and schema names pass through ``sanitize_identifier``
    before they reach the statement compiler, so an unsafe name can
    never end up in SQL text.
    """
    return Table(
        sanitize_identifier(name, DEFAULT_CARDS_TABLE),
        metadata if metadata is not None else MetaData(),
        Column("id", Integer, primary_key=True, autoincrement=True),
        Column("card_name", String(255), nullable=False),
        Column("card_pic", String(1024), nullable=False),
        schema=sanitize_identifier(schema, None),
    )
