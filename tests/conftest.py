# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for Linked Places transformer tests."""

import csv
import io
import os
from pathlib import Path

import pytest

# Set test environment variables before importing the package
os.environ.setdefault("DISABLE_LOGGING", "1")


@pytest.fixture
def pleiades():
    """The Pleiades dataset config."""
    from linked_places.config import DATASETS
    return DATASETS["pleiades"]


@pytest.fixture
def heritage_at_risk():
    """The Heritage at Risk dataset config."""
    from linked_places.config import DATASETS
    return DATASETS["heritage_at_risk"]


@pytest.fixture
def forum_row() -> dict:
    """A located Pleiades row."""
    return {
        "id": "123",
        "title": "Forum Romanum",
        "description": "The main public square\nof ancient Rome. ",
        "authors": "R. Talbert",
        "created": "1990-01-01",
        "modified": "2012-06-30",
        "locationPrecision": "precise",
        "reprLong": "12.485",
        "reprLat": "41.892",
        "featureTypes": "forum, urban,",
        "timePeriods": "Roman",
        "minDate": "-30",
        "maxDate": "640",
    }


@pytest.fixture
def unlocated_row(forum_row: dict) -> dict:
    """The same row with an unlocated precision flag."""
    return {**forum_row, "id": "456", "locationPrecision": "unlocated"}


@pytest.fixture
def write_csv(tmp_path: Path):
    """Write rows to a CSV file in tmp_path and return its path."""
    def _write(rows: list[dict], name: str = "places.csv") -> Path:
        fieldnames = []
        for row in rows:
            for key in row:
                if key not in fieldnames:
                    fieldnames.append(key)

        buffer = io.StringIO()
        writer = csv.DictWriter(buffer, fieldnames=fieldnames, restval="")
        writer.writeheader()
        writer.writerows(rows)

        path = tmp_path / name
        path.write_text(buffer.getvalue(), encoding="utf-8")
        return path

    return _write
