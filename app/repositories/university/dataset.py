"""Dataset repository - loads, normalizes and caches the universities dataset."""

import json
from collections.abc import Callable
from datetime import datetime, timezone
from pathlib import Path

import httpx
from loguru import logger
from pydantic import ValidationError

from app.errors import DatasetError, DatasetMalformed, DatasetUnavailable
from app.models.university import DatasetSnapshot, DatasetSource, DatasetStatus, University
from app.repositories.common import DatasetCache
from hipolabs_client import UniversitiesClient, UniversitySchema
from settings import DATASET_ID_BASE, PROJECT_ROOT

DATASET_FILENAME = "world_universities.json"


def default_candidates() -> list[Path]:
    """Fallback dataset locations covering the usual deployment layouts."""
    cwd = Path.cwd()
    return [
        cwd / DATASET_FILENAME,
        PROJECT_ROOT / DATASET_FILENAME,
        cwd / "data" / DATASET_FILENAME,
        cwd / "backend" / DATASET_FILENAME,
        cwd.parent / "frontend" / "public" / DATASET_FILENAME,
    ]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def to_schema(item: object) -> UniversitySchema | None:
    """Raw entry as a schema, None when it is not a usable object."""
    if not isinstance(item, dict):
        return None
    try:
        return UniversitySchema.model_validate(item)
    except ValidationError:
        return None


def parse_records(raw: object, id_base: int = DATASET_ID_BASE) -> list[University]:
    """Map raw dataset entries to records, first occurrence per domain wins."""
    if not isinstance(raw, list):
        raise DatasetMalformed(f"Expected a JSON array of universities, got {type(raw).__name__}")

    seen: set[str] = set()
    records: list[University] = []
    dropped = 0
    for item in raw:
        entry = to_schema(item)
        domain = entry.primary_domain if entry else None
        if domain is None:
            dropped += 1
            continue
        if domain in seen:
            continue
        seen.add(domain)
        records.append(
            University(
                id=id_base + len(records),
                name=entry.name or "",
                country=entry.country or "",
                domain=domain,
            )
        )

    logger.debug(
        "Parsed {} entries: {} records, {} without domain, {} duplicates",
        len(raw),
        len(records),
        dropped,
        len(raw) - len(records) - dropped,
    )
    return records


class DatasetRepository:
    """Universities dataset with file/remote source resolution and TTL caching."""

    def __init__(
        self,
        cache: DatasetCache,
        path: str | None = None,
        candidates: list[Path] | None = None,
        remote_fallback: bool = False,
        client_factory: Callable[[], UniversitiesClient] = UniversitiesClient,
        id_base: int = DATASET_ID_BASE,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._cache = cache
        self._path = path
        self._candidates = candidates if candidates is not None else default_candidates()
        self._remote_fallback = remote_fallback
        self._client_factory = client_factory
        self._id_base = id_base
        self._clock = clock
        logger.debug("DatasetRepository initialized (path={}, remote_fallback={})", path, remote_fallback)

    def resolve_path(self) -> Path | None:
        """First existing dataset file: configured path, then the candidates."""
        if self._path:
            configured = Path(self._path)
            if not configured.is_absolute():
                configured = Path.cwd() / configured
            if configured.exists():
                return configured
            logger.warning("Configured dataset path not found: {}", configured)

        for candidate in self._candidates:
            if candidate.exists():
                return candidate
        return None

    async def load(self) -> list[University]:
        """Current records, reloading when the cache is empty or expired."""
        snapshot = self._cache.get(self._clock())
        if snapshot is not None:
            return snapshot.records
        snapshot = await self._reload()
        return snapshot.records

    def clear_cache(self) -> None:
        self._cache.clear()

    def source(self) -> DatasetSource | None:
        snapshot = self._cache.snapshot
        return snapshot.source if snapshot else None

    def status(self) -> DatasetStatus:
        """Cache introspection; never triggers a load."""
        snapshot = self._cache.snapshot
        if snapshot is None:
            return DatasetStatus(
                source=None,
                path=None,
                count=0,
                cached_at=None,
                ttl=self._cache.ttl,
                expires_at=None,
                generation=0,
            )
        return DatasetStatus(
            source=snapshot.source.value,
            path=snapshot.path,
            count=len(snapshot.records),
            cached_at=snapshot.loaded_at,
            ttl=self._cache.ttl,
            expires_at=self._cache.expires_at(),
            generation=snapshot.generation,
        )

    async def _reload(self) -> DatasetSnapshot:
        path = self.resolve_path()

        if path is not None:
            try:
                records = self._read_file(path)
            except DatasetError as e:
                if not self._remote_fallback:
                    raise
                logger.warning("Local dataset unusable ({}), attempting remote fallback", e.message)
            else:
                return self._cache.store(records, self._clock(), DatasetSource.FILE, str(path))
        elif self._remote_fallback:
            logger.warning("No local dataset file found, attempting remote fallback")
        else:
            raise DatasetUnavailable("No universities dataset file found and remote fallback is disabled")

        records = await self._fetch_remote()
        return self._cache.store(records, self._clock(), DatasetSource.REMOTE, None)

    def _read_file(self, path: Path) -> list[University]:
        try:
            content = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise DatasetMalformed(f"Dataset file {path} is not valid UTF-8: {e}") from e
        except OSError as e:
            raise DatasetUnavailable(f"Cannot read dataset file {path}: {e}") from e

        try:
            raw = json.loads(content)
        except json.JSONDecodeError as e:
            raise DatasetMalformed(f"Invalid JSON in dataset file {path}: {e}") from e

        logger.info("Loading universities dataset from {}", path)
        return parse_records(raw, self._id_base)

    async def _fetch_remote(self) -> list[University]:
        try:
            async with self._client_factory() as client:
                raw = await client.search()
        except httpx.HTTPError as e:
            raise DatasetUnavailable(f"Remote dataset fetch failed: {e}") from e
        except ValueError as e:
            raise DatasetMalformed(f"Remote dataset is not valid JSON: {e}") from e

        logger.info("Loaded universities dataset from remote")
        return parse_records(raw, self._id_base)
