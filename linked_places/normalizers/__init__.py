"""
Data normalization utilities.

These modules convert raw CSV text values into the display formats used in
feature properties.
"""

from .dates import DISPLAY_FORMAT, ISO_FORMAT, format_date, year_added
from .text import clean_description, split_list

__all__ = [
    'DISPLAY_FORMAT',
    'ISO_FORMAT',
    'format_date',
    'year_added',
    'clean_description',
    'split_list',
]
