"""
Wikimedia Commons depictions.

Commons stores files under MD5 hash-based directories: the first hex digit,
then the first two, of the MD5 of the underscore-normalised filename.
"""

import hashlib
import re
import urllib.parse
from typing import Optional

from linked_places.config import DEPICTION_LABEL, DEPICTION_WIDTH, DatasetConfig

COMMONS_UPLOAD_URL = "https://upload.wikimedia.org/wikipedia/commons/"


def commons_file_path(filename: str, width: int | None = None) -> str:
    """
    Resolve a Commons file name to its upload URL.

    Args:
        filename: File name, with or without a "File:" prefix
        width: Thumbnail width in pixels (None for the original file)

    Returns:
        Upload URL, or an empty string for an empty name
    """
    filename = re.sub(r"^(?:File|Image):", "", filename.strip(), flags=re.IGNORECASE)
    filename = urllib.parse.unquote(filename).replace(" ", "_")
    if not filename:
        return ""

    md5 = hashlib.md5(filename.encode("utf-8")).hexdigest()
    hash_path = f"{md5[0]}/{md5[0:2]}"
    # Same reserved set as JavaScript's encodeURIComponent
    encoded = urllib.parse.quote(filename, safe="()!*'~")

    if not width:
        return f"{COMMONS_UPLOAD_URL}{hash_path}/{encoded}"

    thumb = f"{width}px-{encoded}"
    extension = filename.rsplit(".", 1)[-1].lower()
    if extension == "svg":
        thumb += ".png"
    elif extension in ("tif", "tiff"):
        thumb = f"lossy-page1-{thumb}.jpg"

    return f"{COMMONS_UPLOAD_URL}thumb/{hash_path}/{encoded}/{thumb}"


def get_depictions(row: dict, dataset: DatasetConfig) -> Optional[dict]:
    """Build the depictions patch from the row's Commons image column."""
    image = (row.get(dataset.image_column) or "").strip()
    if not image:
        return None

    url = commons_file_path(image, DEPICTION_WIDTH)
    return {
        "depictions": [{
            "@id": url,
            "thumbnail": url,
            "label": DEPICTION_LABEL,
        }]
    }
