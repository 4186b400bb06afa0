"""Dataset validation functions."""

import json
from pathlib import Path

from app.errors import DatasetMalformed
from app.repositories.university import parse_records, to_schema


def validate_dataset(raw: object) -> dict:
    """Validate a raw dataset (decoded JSON) for loading."""
    issues = []
    stats = {}

    try:
        records = parse_records(raw)
    except DatasetMalformed as e:
        return {"valid": False, "stats": stats, "issues": [e.message]}

    stats["entries"] = len(raw)
    stats["records"] = len(records)

    missing = 0
    for item in raw:
        entry = to_schema(item)
        if entry is None or entry.primary_domain is None:
            missing += 1
    stats["missing_domain"] = missing
    stats["duplicate_domains"] = len(raw) - len(records) - missing

    if not records:
        issues.append("No usable records")
    if missing:
        issues.append(f"{missing} entries have no usable domain (ignored on load)")

    return {
        "valid": len(records) > 0,
        "stats": stats,
        "issues": issues,
    }


def validate_file(path: Path) -> dict:
    """Validate a dataset file."""
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as e:
        return {"valid": False, "stats": {}, "issues": [f"Not valid UTF-8: {e}"]}
    except OSError as e:
        return {"valid": False, "stats": {}, "issues": [f"Cannot read {path}: {e}"]}
    except json.JSONDecodeError as e:
        return {"valid": False, "stats": {}, "issues": [f"Invalid JSON: {e}"]}

    result = validate_dataset(raw)
    result["path"] = str(path)
    return result
