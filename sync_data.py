#!/usr/bin/env python3
"""
Download the universities dataset and validate dataset files.

Usage:
    python sync_data.py                    # Download into the configured path
    python sync_data.py data/unis.json     # Download into a specific file
    python sync_data.py --validate         # Validate the file the API would load
    python sync_data.py --validate FILE    # Validate a specific file
"""

import sys
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

from app.repositories.common import DatasetCache
from app.repositories.university import DatasetRepository
from etl import sync_dataset, validate_file
from hipolabs_client import set_api_config
from settings import HIPOLABS_BASE_URL, HIPOLABS_TIMEOUT, UNIVERSITIES_JSON_PATH
from settings.logging import setup_logging

logger = setup_logging(level="INFO", to_file=False)


def default_target() -> Path:
    """File the API would load, or ./world_universities.json."""
    repo = DatasetRepository(cache=DatasetCache(), path=UNIVERSITIES_JSON_PATH)
    found = repo.resolve_path()
    if found is not None:
        return found
    if UNIVERSITIES_JSON_PATH:
        return Path(UNIVERSITIES_JSON_PATH)
    return Path.cwd() / "world_universities.json"


def run_validation(path: Path) -> bool:
    """Print a validation report for a dataset file."""
    result = validate_file(path)
    stats = result["stats"]

    print("\n" + "=" * 60)
    print("DATASET VALIDATION REPORT")
    print("=" * 60)
    print(f"\nFile: {path}")
    if stats:
        print(f"  Entries: {stats['entries']:,}")
        print(f"  Usable records: {stats['records']:,}")
        print(f"  Missing domain: {stats['missing_domain']:,}")
        print(f"  Duplicate domains: {stats['duplicate_domains']:,}")
    for issue in result["issues"]:
        print(f"  ⚠️  {issue}")

    print("\n" + "=" * 60)
    print("✅ Dataset usable" if result["valid"] else "❌ Dataset unusable")
    print("=" * 60 + "\n")
    return result["valid"]


def main(argv: list[str]) -> int:
    args = [a for a in argv if not a.startswith("--")]
    target = Path(args[0]) if args else default_target()

    if "--validate" in argv:
        return 0 if run_validation(target) else 1

    set_api_config(HIPOLABS_BASE_URL, HIPOLABS_TIMEOUT)
    try:
        result = sync_dataset(target)
    except Exception as e:
        logger.error("Sync failed: {}", e)
        return 1

    logger.info("Sync complete: {}", result["stats"])
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
