"""Text cleanup for CSV cell values."""

import re


def clean_description(description: str | None) -> str:
    """Trim a description and drop embedded line breaks."""
    if not description:
        return ""
    return re.sub(r"[\r\n]+", "", description.strip())


def split_list(value: str | None, sep: str = ",") -> list[str]:
    """Split a delimited cell into trimmed, non-empty items."""
    if not value:
        return []
    return [item.strip() for item in value.split(sep) if item.strip()]
