"""Dataset sync - download the remote dataset into the local JSON file."""

import asyncio
import json
from collections.abc import Callable
from pathlib import Path

from loguru import logger

from etl.validation import validate_dataset
from hipolabs_client import UniversitiesClient


async def _download(client_factory: Callable[[], UniversitiesClient]) -> list[dict]:
    async with client_factory() as client:
        return await client.search()


def sync_dataset(target: Path, client_factory: Callable[[], UniversitiesClient] = UniversitiesClient) -> dict:
    """Fetch the full dataset, validate it, and replace `target` atomically."""
    logger.info("Downloading universities dataset...")
    raw = asyncio.run(_download(client_factory))

    result = validate_dataset(raw)
    if not result["valid"]:
        raise ValueError(f"Downloaded dataset rejected: {result['issues']}")

    target.parent.mkdir(parents=True, exist_ok=True)
    tmp = target.with_suffix(target.suffix + ".tmp")
    tmp.write_text(json.dumps(raw, ensure_ascii=False, indent=2), encoding="utf-8")
    tmp.replace(target)

    logger.info("Wrote {} entries to {}", len(raw), target)
    return result
