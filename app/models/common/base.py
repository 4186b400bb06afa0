"""Base entity class for all domain entities."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class BaseEntity:
    """Base class for all entities."""

    def to_dict(self, exclude: tuple[str, ...] = ()) -> dict[str, Any]:
        """Convert entity to dictionary, dropping `exclude` fields."""
        data = asdict(self)
        for name in exclude:
            data.pop(name, None)
        return data
