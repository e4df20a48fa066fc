"""
Integration tests for store failure handling.

The client used here talks to a database without the card table, so
every statement fails inside the store. These tests verify:
1. Each operation answers 500 with its own generic message
2. No driver detail leaks into the response
3. Validation still answers 400 because the store is never reached
"""

import pytest
from httpx import AsyncClient


class TestStoreErrors:
    """Store errors surface as 500 without internal detail."""

    @pytest.mark.asyncio
    async def test_list_failure(self, client_with_missing_table: AsyncClient):
        response = await client_with_missing_table.get("/allcards")

        assert response.status_code == 500
        data = response.json()
        assert data["message"] == "Server error for allcards"
        assert data["error"] == "CARD_STORE_ERROR"

    @pytest.mark.asyncio
    async def test_create_failure_names_the_card(
        self,
        client_with_missing_table: AsyncClient,
        ace_card: dict,
    ):
        response = await client_with_missing_table.post("/addcard", json=ace_card)

        assert response.status_code == 500
        assert response.json()["message"] == "Server error - could not add card Ace"

    @pytest.mark.asyncio
    async def test_update_failure(self, client_with_missing_table: AsyncClient):
        response = await client_with_missing_table.put("/updatecard", json={
            "id": 1,
            "card_name": "Ace",
            "card_pic": "ace.png",
        })

        assert response.status_code == 500
        assert response.json()["message"] == "Server error - could not update card"

    @pytest.mark.asyncio
    async def test_delete_failure(self, client_with_missing_table: AsyncClient):
        response = await client_with_missing_table.delete("/deletecard/1")

        assert response.status_code == 500
        assert response.json()["message"] == "Server error - could not delete card"

    @pytest.mark.asyncio
    async def test_driver_detail_is_not_leaked(
        self,
        client_with_missing_table: AsyncClient,
    ):
        response = await client_with_missing_table.get("/allcards")

        assert "no such table" not in response.text.lower()
        assert "select" not in response.text.lower()


class TestValidationBeforeStore:
    """Validation errors are reported even when the store is broken."""

    @pytest.mark.asyncio
    async def test_create_validation(self, client_with_missing_table: AsyncClient):
        response = await client_with_missing_table.post("/addcard", json={"card_pic": "x"})

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_update_validation(self, client_with_missing_table: AsyncClient):
        missing_id = await client_with_missing_table.put("/updatecard", json={
            "card_name": "Ace",
            "card_pic": "ace.png",
        })
        missing_pic = await client_with_missing_table.put("/updatecard", json={
            "id": 1,
            "card_name": "Ace",
        })

        assert missing_id.status_code == 400
        assert missing_pic.status_code == 400
