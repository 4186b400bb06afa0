"""Universities API response schemas."""

from datetime import datetime

from pydantic import BaseModel


class UniversityItem(BaseModel):
    """University record."""

    id: int
    name: str
    country: str
    domain: str


class UniversitiesResponse(BaseModel):
    """Universities list response."""

    source: str | None
    universities: list[UniversityItem]


class SearchItem(BaseModel):
    """Search result in the public dataset shape."""

    web_page: str
    country: str
    domain: str
    name: str


class DatasetStatusResponse(BaseModel):
    """Dataset cache status."""

    source: str | None
    path: str | None
    count: int
    cached_at: datetime | None
    ttl: int
    expires_at: datetime | None
    generation: int


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str


class UpdateResponse(BaseModel):
    """Dataset reload outcome."""

    status: str
    message: str
