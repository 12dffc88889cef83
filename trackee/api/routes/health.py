# trackee/api/routes/health.py
from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel, Field

from trackee.core.config import get_settings


router = APIRouter(tags=["Health"])


class HealthResponse(BaseModel):
    """
    Response schema for the health check endpoint.
    """

    status: str = Field(
        ...,
        description="Overall health status of the dashboard service.",
        examples=["ok"],
    )
    app_name: str = Field(
        ...,
        description="Human-friendly name of the running application.",
        examples=["Trackee Dashboard"],
    )
    environment: str = Field(
        ...,
        description="Current deployment environment (local/dev/stage/prod).",
        examples=["local"],
    )
    timestamp_utc: datetime = Field(
        ...,
        description="Server-side timestamp (UTC) at which this health check was generated.",
        examples=["2026-01-01T10:30:00Z"],
    )


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check for the dashboard service",
    description=(
        "Lightweight endpoint to verify that the dashboard service is up.\n\n"
        "Does not contact the attendance backend."
    ),
)
async def health_check() -> HealthResponse:
    settings = get_settings()
    return HealthResponse(
        status="ok",
        app_name=settings.APP_NAME,
        environment=settings.APP_ENV,
        timestamp_utc=datetime.now(tz=timezone.utc),
    )
