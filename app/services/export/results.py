"""
Resolved widget results handed to the export composer.

A widget either resolved to a payload (WidgetSuccess) or failed upstream
(WidgetFailure). Failures are data: they show up in the summary sheet's
status column instead of aborting the export.
"""


class WidgetSuccess:
    is_error = False
    message = ''

    def __init__(self, payload, summary=None):
        self.payload = payload if payload is not None else {}
        self.summary = summary or {}

    def __repr__(self):
        return f'<WidgetSuccess summary={self.summary!r}>'


class WidgetFailure:
    is_error = True

    def __init__(self, message):
        self.message = str(message) if message is not None else ''
        self.payload = {}
        self.summary = {}

    def __repr__(self):
        return f'<WidgetFailure {self.message!r}>'


class WidgetExportEntry:
    """Pairs a widget (anything with title/type) with its resolved result."""
    def __init__(self, widget, result):
        self.widget = widget
        self.result = result

    @property
    def data_points(self):
        summary = self.result.summary
        for key in ('data_points', 'total_records'):
            if summary.get(key) is not None:
                return summary[key]
        return 0
