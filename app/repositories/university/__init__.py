"""University repositories."""

from app.repositories.university.dataset import DatasetRepository, default_candidates, parse_records, to_schema

__all__ = [
    "DatasetRepository",
    "default_candidates",
    "parse_records",
    "to_schema",
]
