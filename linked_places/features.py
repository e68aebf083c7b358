"""
Feature assembly for Linked Places records.

A CSV row becomes a GeoJSON Feature in three steps:

1. passes_gate() decides whether the row is plotted at all
2. build_base_record() derives @id, properties and descriptions
3. build_feature() layers the place name, the Point geometry and the
   optional enrichments (depictions, types, links) on top, in that order
"""

import math
from typing import Any, Optional

from linked_places.config import UNLOCATED, DatasetConfig
from linked_places.enrichers import ENRICHERS
from linked_places.normalizers import clean_description, format_date, split_list, year_added


def _cell(row: dict, column: Optional[str]) -> str:
    if not column:
        return ""
    return (row.get(column) or "").strip()


def passes_gate(row: dict, dataset: DatasetConfig) -> bool:
    """
    Locatedness check.

    A row is dropped when its location precision is exactly "unlocated".
    Otherwise it only needs a place name OR a longitude, not both.
    """
    if _cell(row, dataset.precision_column) == UNLOCATED:
        return False
    return bool(_cell(row, dataset.place_column) or _cell(row, dataset.lon_column))


def drop_reason(row: dict, dataset: DatasetConfig) -> Optional[str]:
    """Why a row is left off the map, or None if it is plotted."""
    if _cell(row, dataset.precision_column) == UNLOCATED:
        return "unlocated"
    if not passes_gate(row, dataset):
        return "no place name or longitude"

    missing = [c for c in (dataset.lon_column, dataset.lat_column) if not _cell(row, c)]
    if missing:
        return f"missing {', '.join(missing)}"
    return None


def get_geometry(lon: str, lat: str) -> dict:
    """Build a GeoJSON Point. Coordinates are not range-checked."""
    coordinates = [float(lon), float(lat)]
    if not all(math.isfinite(c) for c in coordinates):
        raise ValueError(f"non-finite coordinates: {lon!r}, {lat!r}")
    return {
        "type": "Point",
        "coordinates": coordinates,
    }


def build_properties(row: dict, dataset: DatasetConfig) -> dict[str, Any]:
    """
    Display properties for a row.

    Dates are reformatted to DD/MM/YYYY, place types split into a list,
    everything else passes through. Empty values are left out.
    """
    formatted_date = format_date(row.get(dataset.created_column))

    properties = {
        "title": _cell(row, dataset.place_column),
        "formattedDate": formatted_date,
        "modifiedDate": format_date(row.get(dataset.modified_column)),
        "yearAdded": year_added(formatted_date),
    }
    for column in dataset.passthrough:
        properties[column] = _cell(row, column)

    if dataset.feature_types_column:
        properties["placeTypes"] = split_list(row.get(dataset.feature_types_column))

    # Raw authority ids, alongside the links built from them
    for rule in dataset.links:
        properties[rule.column] = _cell(row, rule.column)

    return {key: value for key, value in properties.items() if value}


def build_description(row: dict, dataset: DatasetConfig) -> str:
    """Trimmed description followed by the dataset's annotations."""
    parts = [clean_description(row.get(dataset.description_column))]

    for column, label in dataset.annotations:
        value = _cell(row, column)
        if value:
            parts.append(f"{label}: {value}.")

    return " ".join(part for part in parts if part)


def build_base_record(row: dict, dataset: DatasetConfig) -> dict[str, Any]:
    """The feature without geometry or enrichments."""
    return {
        "@id": (dataset.base_url + _cell(row, dataset.id_column)).strip(),
        "type": "Feature",
        "properties": build_properties(row, dataset),
        "descriptions": [{"value": build_description(row, dataset)}],
    }


def build_feature(row: dict, dataset: DatasetConfig) -> Optional[dict[str, Any]]:
    """
    Assemble a Feature from a CSV row, or None if the row is not plotted.

    Rows that pass the locatedness gate but lack a coordinate are not
    plotted either.

    Raises:
        ValueError: The coordinates are present but not finite numbers
    """
    if drop_reason(row, dataset):
        return None

    feature = build_base_record(row, dataset)
    feature["properties"]["place"] = _cell(row, dataset.place_column)
    feature["geometry"] = get_geometry(
        _cell(row, dataset.lon_column),
        _cell(row, dataset.lat_column),
    )

    for _name, enricher in ENRICHERS:
        patch = enricher(row, dataset)
        if patch:
            feature.update(patch)

    return feature
