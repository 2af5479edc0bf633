"""Human-readable rendering of the filters an export was computed with."""
from ...constants import SUMMARY_COLUMN_COUNT
from ...utils import humanize_key


class FilterAnnotator:
    HEADER_SEPARATOR = ' | '
    SUMMARY_MARKER = 'Applied Filters:'

    @staticmethod
    def is_set(value):
        return value is not None and value != ''

    @staticmethod
    def format_value(value):
        if isinstance(value, (list, tuple, set)):
            return ', '.join(str(v) for v in value)
        return value

    @classmethod
    def items(cls, filters):
        """(label, value) pairs for every filter that has a value, in input order."""
        return [
            (humanize_key(key), cls.format_value(value))
            for key, value in (filters or {}).items()
            if cls.is_set(value)
        ]

    @classmethod
    def render(cls, filters):
        return [f"{label}: {value}" for label, value in cls.items(filters)]

    @classmethod
    def render_for_header(cls, filters):
        """All filters in one cell, e.g. 'Status: active | Region: us, eu'."""
        return cls.HEADER_SEPARATOR.join(cls.render(filters))

    @classmethod
    def render_for_summary(cls, filters, width=SUMMARY_COLUMN_COUNT):
        """Blank separator row, marker row, then one (label, value) row per filter."""
        items = cls.items(filters)
        if not items:
            return []
        padding = [''] * max(width - 2, 0)
        rows = [
            [''] * width,
            [cls.SUMMARY_MARKER] + [''] * (width - 1),
        ]
        rows.extend([label, value] + padding for label, value in items)
        return rows
