"""Repositories package - data access layer."""

from app.repositories.base import BaseRepository
from app.repositories.common import DatasetCache
from app.repositories.db import close_db, connect, get_db, init_tables
from app.repositories.university import DatasetRepository
from app.repositories.user import UserRepository

__all__ = [
    # DB
    "get_db",
    "close_db",
    "connect",
    "init_tables",
    # Base
    "BaseRepository",
    # Common
    "DatasetCache",
    # University
    "DatasetRepository",
    # User
    "UserRepository",
]
