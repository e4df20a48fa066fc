"""
Integration tests for metrics tracking.

These tests verify:
1. Metrics endpoint returns valid Prometheus format
2. Card operations are counted by outcome
3. HTTP requests are labelled by route template
"""

import pytest
from httpx import AsyncClient

from card_gateway.core.metrics import REGISTRY

card_operations_total = "card_gateway_card_operations_total"
http_requests_total = "card_gateway_http_requests_total"


def counter_value(name: str, **labels) -> float:
    """Current counter value, 0 when the label set was never observed."""
    return REGISTRY.get_sample_value(name, labels) or 0.0


class TestMetricsEndpoint:
    """Tests for GET /metrics endpoint."""

    @pytest.mark.asyncio
    async def test_metrics_endpoint_returns_prometheus_format(
        self,
        client: AsyncClient,
    ):
        response = await client.get("/metrics")

        assert response.status_code == 200

        content_type = response.headers.get("content-type", "")
        assert "text/plain" in content_type or "text/openmetrics" in content_type

        content = response.text
        assert "card_gateway_card_operations_total" in content
        assert "card_gateway_store_latency_seconds" in content
        assert "card_gateway_http_requests_total" in content


class TestCardOperationMetrics:
    """Card operations are counted per outcome."""

    @pytest.mark.asyncio
    async def test_successful_create_is_counted(
        self,
        client: AsyncClient,
        ace_card: dict,
    ):
        before = counter_value(card_operations_total, operation="addcard", outcome="success")

        await client.post("/addcard", json=ace_card)

        after = counter_value(card_operations_total, operation="addcard", outcome="success")
        assert after == before + 1

    @pytest.mark.asyncio
    async def test_invalid_create_is_counted(self, client: AsyncClient):
        before = counter_value(card_operations_total, operation="addcard", outcome="invalid")

        await client.post("/addcard", json={})

        after = counter_value(card_operations_total, operation="addcard", outcome="invalid")
        assert after == before + 1

    @pytest.mark.asyncio
    async def test_not_found_delete_is_counted(self, client: AsyncClient):
        before = counter_value(card_operations_total, operation="deletecard", outcome="not_found")

        await client.delete("/deletecard/12345")

        after = counter_value(card_operations_total, operation="deletecard", outcome="not_found")
        assert after == before + 1

    @pytest.mark.asyncio
    async def test_store_error_is_counted(
        self,
        client_with_missing_table: AsyncClient,
    ):
        before = counter_value(card_operations_total, operation="allcards", outcome="error")

        await client_with_missing_table.get("/allcards")

        after = counter_value(card_operations_total, operation="allcards", outcome="error")
        assert after == before + 1


class TestHttpMetrics:
    """HTTP requests are labelled by route template."""

    @pytest.mark.asyncio
    async def test_path_parameters_use_route_template(
        self,
        client: AsyncClient,
    ):
        labels = {"method": "DELETE", "endpoint": "/deletecard/{card_id}", "status": "404"}
        before = counter_value(http_requests_total, **labels)

        await client.delete("/deletecard/987")

        assert counter_value(http_requests_total, **labels) == before + 1

    @pytest.mark.asyncio
    async def test_unmatched_routes_share_one_label(self, client: AsyncClient):
        labels = {"method": "GET", "endpoint": "unmatched", "status": "404"}
        before = counter_value(http_requests_total, **labels)

        await client.get("/does-not-exist-1")
        await client.get("/does-not-exist-2")

        assert counter_value(http_requests_total, **labels) == before + 2

    @pytest.mark.asyncio
    async def test_wrong_method_is_labelled_unmatched(self, client: AsyncClient):
        unmatched = {"method": "GET", "endpoint": "unmatched", "status": "404"}
        template = {"method": "GET", "endpoint": "/addcard", "status": "404"}
        before_unmatched = counter_value(http_requests_total, **unmatched)
        before_template = counter_value(http_requests_total, **template)

        await client.get("/addcard")

        assert counter_value(http_requests_total, **unmatched) == before_unmatched + 1
        assert counter_value(http_requests_total, **template) == before_template
