"""University domain entities - dataset records and cache snapshots."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from app.models.common import BaseEntity


class DatasetSource(str, Enum):
    """Where a dataset generation was loaded from."""

    FILE = "file"
    REMOTE = "remote"


@dataclass
class University(BaseEntity):
    """Institution record.

    `id` is positional and only meaningful within `generation`; persist the
    domain instead.
    """

    id: int
    name: str
    country: str
    domain: str
    generation: int = 0

    @property
    def web_page(self) -> str:
        return f"http://{self.domain}/"


@dataclass(frozen=True)
class DatasetSnapshot:
    """One fully loaded dataset generation."""

    records: list[University] = field(repr=False)
    loaded_at: datetime
    source: DatasetSource
    path: str | None
    generation: int


@dataclass
class DatasetStatus(BaseEntity):
    """Read-only cache introspection."""

    source: str | None
    path: str | None
    count: int
    cached_at: datetime | None
    ttl: int
    expires_at: datetime | None
    generation: int
