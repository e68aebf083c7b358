"""
Date parsing and normalization utilities.
"""

import re
from datetime import datetime
from typing import Optional

ISO_FORMAT = "%Y-%m-%d"
DISPLAY_FORMAT = "%d/%m/%Y"

# strptime accepts unpadded fields, display dates are always DD/MM/YYYY
_DISPLAY_RE = re.compile(r"^\d{2}/\d{2}/\d{4}$")


def format_date(value: Optional[str]) -> Optional[str]:
    """
    Convert an ISO date (YYYY-MM-DD) to DD/MM/YYYY.

    Trailing time components ("2010-09-23T12:00:00Z") are ignored. Empty or
    unparseable values return None.
    """
    if not value:
        return None
    value = value.strip()[:10]
    try:
        d = datetime.strptime(value, ISO_FORMAT)
    except ValueError:
        return None
    # strftime("%Y") does not zero-pad years below 1000 on every platform
    return f"{d.day:02d}/{d.month:02d}/{d.year:04d}"


def year_added(formatted: Optional[str]) -> Optional[str]:
    """Extract the four-digit year from a DD/MM/YYYY date, or None if invalid."""
    if not formatted or not _DISPLAY_RE.match(formatted):
        return None
    try:
        datetime.strptime(formatted, DISPLAY_FORMAT)
    except ValueError:
        return None
    return formatted[-4:]
