"""seeAlso links to external authorities."""

from typing import Optional

from linked_places.config import DatasetConfig


def get_links(row: dict, dataset: DatasetConfig) -> Optional[dict]:
    """Build one seeAlso link per populated authority column, in table order."""
    links = []

    for rule in dataset.links:
        value = (row.get(rule.column) or "").strip()
        if not value:
            continue
        links.append({
            "identifier": rule.url_prefix + value,
            "type": "seeAlso",
            "label": rule.label_prefix + value,
        })

    return {"links": links} if links else None
