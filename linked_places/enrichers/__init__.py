"""
Optional feature enrichments.

Each enricher takes a CSV row and its dataset config and returns either a
patch dict to merge into the feature or None when the row has nothing to
contribute. ENRICHERS fixes the order patches are applied in.
"""

from linked_places.enrichers.depictions import commons_file_path, get_depictions
from linked_places.enrichers.links import get_links
from linked_places.enrichers.types import get_types

# Applied after the geometry, later patches override earlier keys
ENRICHERS = (
    ("depictions", get_depictions),
    ("types", get_types),
    ("links", get_links),
)

__all__ = [
    "ENRICHERS",
    "commons_file_path",
    "get_depictions",
    "get_types",
    "get_links",
]
