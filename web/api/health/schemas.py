"""Health API response schemas."""

from datetime import datetime

from pydantic import BaseModel

from web.api.universities.schemas import DatasetStatusResponse


class PingResponse(BaseModel):
    """Liveness probe."""

    ok: bool
    ts: datetime


class HealthResponse(BaseModel):
    """Service health."""

    status: str
    timestamp: datetime
    service: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness with dataset cache state."""

    status: str
    timestamp: datetime
    dataset: DatasetStatusResponse
