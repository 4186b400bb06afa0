"""ETL package - dataset download and validation."""

from etl.sync import sync_dataset
from etl.validation import validate_dataset, validate_file

__all__ = [
    "sync_dataset",
    "validate_dataset",
    "validate_file",
]
