"""Dependency Injection container - initialized at app startup."""

from collections.abc import Callable
from pathlib import Path

import duckdb

from app.repositories.common import DatasetCache
from app.repositories.university import DatasetRepository
from app.repositories.user import UserRepository
from app.services.university import UniversityService
from app.services.user import UserService
from hipolabs_client import UniversitiesClient, set_api_config
from settings import (
    DATASET_CACHE_TTL,
    HIPOLABS_BASE_URL,
    HIPOLABS_TIMEOUT,
    REMOTE_FALLBACK,
    UNIVERSITIES_JSON_PATH,
)


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(
        self,
        *,
        dataset_path: str | None = UNIVERSITIES_JSON_PATH,
        candidates: list[Path] | None = None,
        remote_fallback: bool = REMOTE_FALLBACK,
        cache_ttl: int = DATASET_CACHE_TTL,
        client_factory: Callable[[], UniversitiesClient] = UniversitiesClient,
        db_conn: duckdb.DuckDBPyConnection | None = None,
    ) -> None:
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return

        set_api_config(HIPOLABS_BASE_URL, HIPOLABS_TIMEOUT)

        # The one dataset cache, shared by reference
        self.dataset_cache = DatasetCache(ttl=cache_ttl)

        # Repositories (singletons)
        self._dataset_repo = DatasetRepository(
            cache=self.dataset_cache,
            path=dataset_path,
            candidates=candidates,
            remote_fallback=remote_fallback,
            client_factory=client_factory,
        )
        self._user_repo = UserRepository(conn=db_conn)

        # Services (with injected repos)
        self.universities = UniversityService(dataset_repo=self._dataset_repo)
        self.users = UserService(
            user_repo=self._user_repo,
            university_service=self.universities,
        )

        self._initialized = True

    def reset(self) -> None:
        """Forget all instances so `init` can build them again."""
        self.__dict__.clear()
        self._initialized = False


# Global container instance
container = Container()
