"""University lookup service."""

from dataclasses import dataclass

from loguru import logger

from app.errors import DatasetError
from app.models.common import BaseEntity
from app.models.university import DatasetSource, DatasetStatus, University
from app.repositories.university import DatasetRepository
from helpers import domains


@dataclass
class RefreshResult(BaseEntity):
    """Outcome of a forced dataset reload."""

    status: str
    message: str

    @property
    def ok(self) -> bool:
        return self.status == "ok"


def _paginate(items: list, limit: int | None, offset: int) -> list:
    offset = max(offset or 0, 0)
    if limit is None:
        return items[offset:]
    return items[offset : offset + limit]


class UniversityService:
    """Universities browsing and email domain resolution."""

    def __init__(self, dataset_repo: DatasetRepository):
        self._dataset = dataset_repo

    async def find_all(self, limit: int | None = None, offset: int = 0) -> list[University]:
        records = await self._dataset.load()
        return _paginate(records, limit, offset)

    async def find_by_domain_or_email(self, value: str) -> University | None:
        """Resolve an email address, or a bare domain, to its university."""
        value = (value or "").strip()
        if not value:
            return None
        email = value if "@" in value else f"@{value}"
        records = await self._dataset.load()
        university, rule = domains.match_with_rule(email, records)
        if university is None:
            logger.debug("No university for {}", value)
        else:
            logger.debug("{} matched {} ({} rule)", value, university.domain, rule)
        return university

    async def find_by_domain(self, domain: str) -> University | None:
        """Exact domain lookup in the current generation."""
        records = await self._dataset.load()
        return domains.exact_match(domain.lower(), domains.index_by_domain(records))

    async def search(
        self,
        name: str | None = None,
        country: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[University]:
        """Name substring and exact country filter (both case-insensitive), then slice."""
        results = await self._dataset.load()
        if name:
            needle = name.lower()
            results = [u for u in results if needle in u.name.lower()]
        if country:
            wanted = country.lower()
            results = [u for u in results if u.country.lower() == wanted]
        return _paginate(results, limit, offset)

    async def refresh(self) -> RefreshResult:
        """Drop the cache and reload from the sources."""
        self._dataset.clear_cache()
        try:
            records = await self._dataset.load()
        except DatasetError as e:
            logger.error("Dataset reload failed: {}", e.message)
            self._dataset.clear_cache()
            return RefreshResult(status="error", message="Failed to reload dataset; check JSON path and format")

        source = self._dataset.source()
        origin = "local JSON" if source is DatasetSource.FILE else "remote source"
        return RefreshResult(status="ok", message=f"Dataset reloaded from {origin} ({len(records)} universities)")

    def clear_cache(self) -> None:
        self._dataset.clear_cache()

    def status(self) -> DatasetStatus:
        return self._dataset.status()

    def source(self) -> DatasetSource | None:
        return self._dataset.source()
