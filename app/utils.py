# app/utils.py

import re
import unicodedata

from .constants import (
    EXPORT_DATETIME_FORMAT,
    SHEET_TITLE_MAX_LENGTH,
    TRUNCATION_MARKER,
)


def truncate_title(title, limit=SHEET_TITLE_MAX_LENGTH, marker=TRUNCATION_MARKER):
    """
    Truncates a title so that it fits in `limit` visible characters,
    including the truncation marker.

    Args:
        title: The title to shorten. None is treated as an empty string.
        limit (int): Maximum length of the result.
        marker (str): Appended when the title had to be cut.

    Returns:
        str: The title itself when short enough, otherwise a cut title ending in `marker`.
    """
    title = '' if title is None else str(title)
    if len(title) <= limit:
        return title
    keep = max(limit - len(marker), 0)
    return (title[:keep] + marker)[:limit]


def format_timestamp(value, fmt=EXPORT_DATETIME_FORMAT):
    """Formats a datetime for export cells; None becomes an empty string."""
    if value is None:
        return ''
    return value.strftime(fmt)


def slugify(value, separator='-'):
    """
    Returns an ASCII, lower-case slug for use in file names.
    e.g. 'Q3 Sales: Overview' -> 'q3-sales-overview'
    """
    value = unicodedata.normalize('NFKD', str(value or '')).encode('ascii', 'ignore').decode('ascii')
    value = re.sub(r'[^\w\s-]', '', value).strip().lower()
    return re.sub(r'[-\s_]+', separator, value).strip(separator)


def humanize_key(key):
    """'date_from' -> 'Date From'"""
    return str(key).replace('_', ' ').title()
