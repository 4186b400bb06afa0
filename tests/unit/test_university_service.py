"""Tests for the university lookup service."""

from pathlib import Path

import pytest
from conftest import write_dataset

from app.services.university import UniversityService


@pytest.fixture
def service(dataset_repo):
    return UniversityService(dataset_repo=dataset_repo)


class TestSearch:
    @pytest.mark.asyncio
    async def test_name_substring(self, service):
        results = await service.search(name="manchester")
        assert [u.domain for u in results] == ["manchester.ac.uk"]

    @pytest.mark.asyncio
    async def test_country_exact_case_insensitive(self, service):
        results = await service.search(country="FRANCE")
        assert [u.domain for u in results] == ["sorbonne-universite.fr", "u-paris.fr"]

    @pytest.mark.asyncio
    async def test_country_not_trimmed(self, service):
        results = await service.search(country="france ")
        assert [u.domain for u in results] == ["tsc.fr"]

    @pytest.mark.asyncio
    async def test_name_and_country(self, service):
        results = await service.search(name="paris", country="france")
        assert [u.domain for u in results] == ["u-paris.fr"]

    @pytest.mark.asyncio
    async def test_no_filters_returns_all(self, service):
        assert len(await service.search()) == 5


class TestPagination:
    @pytest.mark.asyncio
    async def test_limit_and_offset(self, dataset_file, dataset_repo):
        write_dataset(
            Path(dataset_file),
            [{"name": f"College {i}", "country": "Testland", "domains": [f"c{i}.edu"]} for i in range(3)],
        )
        service = UniversityService(dataset_repo=dataset_repo)
        results = await service.search(country="testland", limit=1, offset=1)
        assert [u.domain for u in results] == ["c1.edu"]

    @pytest.mark.asyncio
    async def test_find_all_limit(self, service):
        results = await service.find_all(limit=2)
        assert [u.domain for u in results] == ["manchester.ac.uk", "sorbonne-universite.fr"]

    @pytest.mark.asyncio
    async def test_offset_past_end(self, service):
        assert await service.find_all(offset=50) == []


class TestLookup:
    @pytest.mark.asyncio
    async def test_bare_domain(self, service):
        university = await service.find_by_domain_or_email("manchester.ac.uk")
        assert university.name == "University of Manchester"

    @pytest.mark.asyncio
    async def test_email(self, service):
        university = await service.find_by_domain_or_email("student@cs.manchester.ac.uk")
        assert university.domain == "manchester.ac.uk"

    @pytest.mark.asyncio
    async def test_no_match(self, service):
        assert await service.find_by_domain_or_email("person@nomatch.tld") is None
        assert await service.find_by_domain_or_email("  ") is None

    @pytest.mark.asyncio
    async def test_find_by_domain_is_exact(self, service):
        assert (await service.find_by_domain("Example.edu")).domain == "example.edu"
        assert await service.find_by_domain("cs.example.edu") is None


class TestRefresh:
    @pytest.mark.asyncio
    async def test_reload_ok(self, service):
        await service.find_all()
        result = await service.refresh()
        assert result.ok
        assert "local JSON" in result.message
        assert service.status().generation == 2

    @pytest.mark.asyncio
    async def test_reload_failure_reported(self, service, dataset_file):
        await service.find_all()
        Path(dataset_file).unlink()
        result = await service.refresh()
        assert result.status == "error"
        assert service.status().count == 0

    @pytest.mark.asyncio
    async def test_clear_cache(self, service):
        await service.find_all()
        service.clear_cache()
        assert service.status().count == 0
        assert service.source() is None
