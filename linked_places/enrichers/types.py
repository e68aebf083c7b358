"""Place types synthesised from (authority id, local label) column pairs."""

from typing import Optional

from linked_places.config import DatasetConfig


def get_types(row: dict, dataset: DatasetConfig) -> Optional[dict]:
    """
    Build the types patch.

    A pair contributes only when both its id and label cells are non-empty.
    No complete pair means no patch at all, not an empty list.
    """
    types = []

    for rule in dataset.types:
        type_id = (row.get(rule.id_column) or "").strip()
        label = (row.get(rule.label_column) or "").strip()
        if type_id and label:
            types.append({
                "identifier": rule.url_prefix + type_id,
                "label": rule.label_prefix + label,
            })

    return {"types": types} if types else None
