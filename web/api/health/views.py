"""Health API views."""

from datetime import datetime, timezone

from app.container import container
from web.api.universities.schemas import DatasetStatusResponse

from .schemas import HealthResponse, PingResponse, ReadinessResponse

SERVICE_NAME = "uni-match-api"
SERVICE_VERSION = "1.0.0"


def ping() -> PingResponse:
    return PingResponse(ok=True, ts=datetime.now(timezone.utc))


def check_health() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        service=SERVICE_NAME,
        version=SERVICE_VERSION,
    )


def check_readiness() -> ReadinessResponse:
    """Ready once the dataset has been loaded at least once."""
    status = container.universities.status()
    return ReadinessResponse(
        status="ready" if status.count else "cold",
        timestamp=datetime.now(timezone.utc),
        dataset=DatasetStatusResponse(**status.to_dict()),
    )
