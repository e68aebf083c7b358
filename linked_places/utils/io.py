"""
File input/output for the transformer.

Reading is all-or-nothing: the whole CSV is parsed into memory before any
record is transformed. Writing goes through a temp file in the destination
directory so a failed run never leaves a truncated document behind.
"""

import csv
import io
import json
from pathlib import Path
from typing import Any

from loguru import logger

from linked_places.exceptions import CsvParseError, InputReadError, OutputWriteError


def parse_csv_text(text: str, source: Path | None = None) -> list[dict[str, str]]:
    """
    Parse CSV text with a header row into a list of row dicts.

    Short rows are padded with empty strings and surplus cells are dropped,
    so every row carries exactly the header's columns.

    Args:
        text: Full CSV document
        source: Path the text came from (used in error messages only)

    Returns:
        Rows in input order
    """
    reader = csv.DictReader(io.StringIO(text, newline=""), restval="")

    try:
        fieldnames = reader.fieldnames
        if not fieldnames or not any(name.strip() for name in fieldnames):
            raise CsvParseError(source, "no header row found")

        rows = []
        for row in reader:
            row.pop(None, None)
            rows.append(row)
    except csv.Error as e:
        raise CsvParseError(source, f"line {reader.line_num}: {e}") from e

    return rows


def read_csv_records(path: Path) -> list[dict[str, str]]:
    """
    Read and parse a UTF-8 CSV file.

    Args:
        path: Input CSV path

    Returns:
        Rows in input order

    Raises:
        InputReadError: The file is missing, unreadable or not UTF-8
        CsvParseError: No header row could be identified
    """
    path = Path(path)

    try:
        text = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(path, str(e)) from e

    rows = parse_csv_text(text, source=path)
    logger.info(f"Read {len(rows):,} records from {path}")
    return rows


def atomic_write_json(dest_path: Path, data: Any, indent: int | None = 2) -> Path:
    """
    Write JSON data atomically - only replaces target file on success.

    1. Writes to temp file in same directory
    2. Validates JSON is readable
    3. Renames temp to final (atomic on same filesystem)

    Args:
        dest_path: Final destination path
        data: Data to serialize as JSON
        indent: JSON indent (None for compact)

    Returns:
        Path to written file

    Raises:
        OutputWriteError: The document could not be written; any previous
            file at dest_path is left untouched
    """
    dest_path = Path(dest_path)
    temp_path = dest_path.with_suffix(dest_path.suffix + ".tmp")

    try:
        dest_path.parent.mkdir(parents=True, exist_ok=True)

        with open(temp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=indent, allow_nan=False)
            f.write("\n")

        with open(temp_path, encoding="utf-8") as f:
            json.load(f)

        temp_path.replace(dest_path)
        return dest_path

    except (OSError, TypeError, ValueError) as e:
        if temp_path.exists():
            temp_path.unlink()
        raise OutputWriteError(dest_path, str(e)) from e
