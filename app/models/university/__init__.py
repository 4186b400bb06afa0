"""University domain models."""

from app.models.university.entities import (
    DatasetSnapshot,
    DatasetSource,
    DatasetStatus,
    University,
)

__all__ = [
    "University",
    "DatasetSource",
    "DatasetSnapshot",
    "DatasetStatus",
]
