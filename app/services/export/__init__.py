"""
Export package for dashboard and widget data.

Resolved widget payloads are turned into tabular sheets (summary sheet plus
one sheet per widget) and serialized to XLSX or CSV.

Main entry points:
    DashboardExportService.export_dashboard(dashboard, fmt, filters)
    DashboardExportService.export_widget(widget, filters)
    ExportComposer.export_dashboard(dashboard, widget_results, filters)
"""

from .base import Sheet, SheetBuilder
from .composer import ExportComposer
from .exceptions import ExportError, UnsupportedExportFormat, WidgetDataError
from .filters import FilterAnnotator
from .formatter import WidgetTypeFormatter
from .results import WidgetExportEntry, WidgetFailure, WidgetSuccess
from .service import DashboardExportService, ExportFile

__all__ = [
    'DashboardExportService',
    'ExportComposer',
    'ExportError',
    'ExportFile',
    'FilterAnnotator',
    'Sheet',
    'SheetBuilder',
    'UnsupportedExportFormat',
    'WidgetDataError',
    'WidgetExportEntry',
    'WidgetFailure',
    'WidgetSuccess',
    'WidgetTypeFormatter',
]
