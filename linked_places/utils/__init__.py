"""Utility modules for the Linked Places transformer."""

from linked_places.utils.io import atomic_write_json, read_csv_records, parse_csv_text
from linked_places.utils.logging import setup_logging

__all__ = [
    # I/O
    "read_csv_records",
    "parse_csv_text",
    "atomic_write_json",
    # Logging
    "setup_logging",
]
