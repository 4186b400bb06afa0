"""Common repositories - shared cache storage."""

from app.repositories.common.cache import DatasetCache

__all__ = [
    "DatasetCache",
]
