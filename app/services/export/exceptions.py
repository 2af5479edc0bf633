"""Errors raised by the export package."""


class ExportError(Exception):
    """Base class for export failures that should abort the whole export."""


class UnsupportedExportFormat(ExportError):
    def __init__(self, fmt, supported=None):
        self.format = fmt
        self.supported = list(supported or [])
        message = f"Unsupported export format: {fmt}"
        if self.supported:
            message += f" (expected one of: {', '.join(self.supported)})"
        super().__init__(message)


class WidgetDataError(ExportError):
    """Raised by the widget data resolver when a payload cannot be produced."""
