from collections.abc import Mapping
from datetime import datetime

from ...constants import (
    ExportProfile,
    FILTERS_APPLIED_PREFIX,
    SUMMARY_COLUMN_COUNT,
    SUMMARY_SHEET_TITLE,
    UNKNOWN_OWNER,
)
from ...utils import format_timestamp
from .base import SheetBuilder
from .filters import FilterAnnotator
from .formatter import WidgetTypeFormatter
from .results import WidgetExportEntry


SUMMARY_HEADINGS = ['Field', 'Value', '', '', '']
WIDGET_SUMMARY_HEADINGS = ['Widget Name', 'Type', 'Data Points', 'Status', 'Notes']


def read(obj, name, default=None):
    """Attribute or key access, so models and plain dicts both work as inputs."""
    if isinstance(obj, Mapping):
        value = obj.get(name, default)
    else:
        value = getattr(obj, name, default)
    return default if value is None else value


def _blank_row(label=''):
    return [label] + [''] * (SUMMARY_COLUMN_COUNT - 1)


class ExportComposer:
    """
    Builds export sheets from already-resolved widget results.

    export_widget() produces the single sheet of a standalone widget export.
    export_dashboard() produces the summary sheet followed by one detail sheet
    per widget that resolved to data.

    Nothing here catches exceptions: a failing formatter aborts the export.
    """
    def __init__(self, formatter=None, sheet_builder=None, clock=None):
        self.formatter = formatter or WidgetTypeFormatter()
        self.sheet_builder = sheet_builder or SheetBuilder()
        self.clock = clock or datetime.now

    def export_widget(self, widget, payload, filters=None):
        title = read(widget, 'title', '')
        headings, rows = self.formatter.format(
            read(widget, 'type'), payload, ExportProfile.DETAILED, title=title
        )
        filter_header = FilterAnnotator.render_for_header(filters)
        if filter_header:
            rows = [[''] * len(headings)] + rows
            headings = [FILTERS_APPLIED_PREFIX + filter_header] + headings
        return self.sheet_builder.build(title, headings, rows)

    def export_dashboard(self, dashboard, widget_results, filters=None):
        """
        Args:
            dashboard: Object or mapping with name, owner_name and created_at.
            widget_results: Ordered mapping of widget id -> WidgetExportEntry.
            filters (dict): The filters the results were computed with.

        Returns:
            list: Sheets, summary first, then detail sheets in input order.
        """
        entries = [self._as_entry(entry) for entry in widget_results.values()]
        sheets = [self.build_summary_sheet(dashboard, entries, filters)]
        for entry in entries:
            sheet = self.build_widget_sheet(entry)
            if sheet is not None:
                sheets.append(sheet)
        return sheets

    def build_summary_sheet(self, dashboard, entries, filters=None):
        rows = [[
            read(dashboard, 'name', ''),
            read(dashboard, 'owner_name', UNKNOWN_OWNER),
            format_timestamp(read(dashboard, 'created_at')),
            format_timestamp(self.clock()),
            len(entries),
        ]]
        rows.extend(FilterAnnotator.render_for_summary(filters, width=SUMMARY_COLUMN_COUNT))

        rows.append(_blank_row())
        rows.append(_blank_row('Widget Summary:'))
        rows.append(list(WIDGET_SUMMARY_HEADINGS))
        for entry in entries:
            result = entry.result
            rows.append([
                read(entry.widget, 'title', ''),
                read(entry.widget, 'type', ''),
                entry.data_points,
                'Error' if result.is_error else 'Success',
                result.message if result.is_error else '',
            ])
        return self.sheet_builder.build(SUMMARY_SHEET_TITLE, SUMMARY_HEADINGS, rows)

    def build_widget_sheet(self, entry):
        """Detail sheet for one widget, or None if it failed or has nothing to show."""
        result = entry.result
        if result.is_error or not result.payload:
            return None
        title = read(entry.widget, 'title', '')
        headings, rows = self.formatter.format(
            read(entry.widget, 'type'), result.payload, ExportProfile.SUMMARY, title=title
        )
        if not rows:
            return None
        return self.sheet_builder.build(title, headings, rows)

    @staticmethod
    def _as_entry(entry):
        if isinstance(entry, WidgetExportEntry):
            return entry
        return WidgetExportEntry(entry['widget'], entry['result'])
