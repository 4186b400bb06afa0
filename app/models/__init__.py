"""Models package - DDL and entities for all domains."""

from app.models.common import BaseEntity
from app.models.university import (
    DatasetSnapshot,
    DatasetSource,
    DatasetStatus,
    University,
)
from app.models.user import USER_DDL, User

ALL_DDL = [
    USER_DDL,
]

__all__ = [
    # Common
    "BaseEntity",
    # University
    "University",
    "DatasetSource",
    "DatasetSnapshot",
    "DatasetStatus",
    # User
    "USER_DDL",
    "User",
    # All DDL
    "ALL_DDL",
]
