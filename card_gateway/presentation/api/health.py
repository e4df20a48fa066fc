"""Health check endpoint for liveness probing."""

from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

health_router = APIRouter()


class HealthResponse(BaseModel):
    status: str = "ok"
    time: str


def _utc_timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@health_router.get("/health/", response_model=HealthResponse, include_in_schema=False)
@health_router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Returns 200 with the current time. Never touches the store.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", time=_utc_timestamp())
