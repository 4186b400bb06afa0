"""Hipolabs universities API client package."""

from hipolabs_client.base import BaseClient, set_api_config
from hipolabs_client.universities import UniversitiesClient, UniversitySchema

__all__ = [
    # Base
    "BaseClient",
    "set_api_config",
    # Clients
    "UniversitiesClient",
    # Schemas
    "UniversitySchema",
]
