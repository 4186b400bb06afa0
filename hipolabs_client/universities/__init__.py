"""Universities API client."""

from hipolabs_client.universities.client import UniversitiesClient
from hipolabs_client.universities.schemas import UniversitySchema

__all__ = [
    "UniversitiesClient",
    "UniversitySchema",
]
