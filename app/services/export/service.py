import os
import time
from datetime import datetime

from flask import current_app

from ...constants import EXPORT_FILENAME_TIMESTAMP_FORMAT
from ...utils import slugify
from .composer import ExportComposer
from .context import DashboardExportContext
from .data_service import WidgetDataService
from .exceptions import UnsupportedExportFormat
from .writer import ExportWriter


class ExportFile:
    """A generated export ready to be sent or stored."""
    def __init__(self, filename, mimetype, stream):
        self.filename = filename
        self.mimetype = mimetype
        self.stream = stream

    def __repr__(self):
        return f'<ExportFile {self.filename} ({self.mimetype})>'


class DashboardExportService:
    """Primary service to generate dashboard and widget exports."""
    FORMATS = {
        'xlsx': {
            'name': 'Excel',
            'description': 'Workbook with a summary sheet and one sheet per widget',
            'mime_type': ExportWriter.XLSX_MIMETYPE,
        },
        'csv': {
            'name': 'CSV',
            'description': 'Comma-separated values with raw data',
            'mime_type': ExportWriter.CSV_MIMETYPE,
        },
    }
    DASHBOARD_DIR = 'dashboards'
    WIDGET_DIR = 'widgets'

    def __init__(self, data_service=None, composer=None, clock=None):
        self.clock = clock or datetime.now
        self.data_service = data_service or WidgetDataService
        self.composer = composer or ExportComposer(clock=self.clock)

    @classmethod
    def get_available_formats(cls):
        return {key: dict(value) for key, value in cls.FORMATS.items()}

    def export_dashboard(self, dashboard, fmt='xlsx', filters=None):
        """
        Resolves every active widget of `dashboard` and renders the export bundle.

        Returns:
            ExportFile
        """
        fmt = self._check_format(fmt)
        context = DashboardExportContext(dashboard, filters, self.data_service)
        sheets = self.composer.export_dashboard(dashboard, context.widget_results, context.filters)

        current_app.logger.info(
            f"Exported dashboard {dashboard.id} as {fmt}: {len(context.widgets)} widgets, "
            f"{context.failed_count} failed, {len(sheets)} sheets"
        )
        export_file = self._render(sheets, fmt, self.generate_filename(dashboard.name, fmt))
        self.store(export_file, self.DASHBOARD_DIR)
        return export_file

    def export_widget(self, widget, filters=None):
        """
        Single-widget CSV export. Resolver errors propagate to the caller,
        there is no summary sheet to report them in.
        """
        filters = filters or {}
        payload = self.data_service.get_widget_data(widget, filters)
        sheet = self.composer.export_widget(widget, payload, filters)

        export_file = self._render([sheet], 'csv', self.generate_filename(widget.title, 'csv'))
        self.store(export_file, self.WIDGET_DIR)
        return export_file

    def generate_filename(self, name, extension):
        slug = slugify(name) or 'export'
        timestamp = self.clock().strftime(EXPORT_FILENAME_TIMESTAMP_FORMAT)
        return f"{slug}_{timestamp}.{extension}"

    def store(self, export_file, kind):
        """Keeps a copy under EXPORT_FOLDER/<kind>/ when EXPORT_STORE_FILES is on."""
        if not current_app.config.get('EXPORT_STORE_FILES'):
            return None
        folder = os.path.join(current_app.config['EXPORT_FOLDER'], kind)
        os.makedirs(folder, exist_ok=True)
        path = os.path.join(folder, export_file.filename)
        with open(path, 'wb') as fh:
            fh.write(export_file.stream.getvalue())
        export_file.stream.seek(0)
        current_app.logger.debug(f"Stored export at {path}")
        return path

    @classmethod
    def cleanup_old_exports(cls, export_folder, days_old=7, now=None):
        """
        Deletes stored exports last modified more than `days_old` days ago.

        Returns:
            int: Number of files deleted.
        """
        cutoff = (now if now is not None else time.time()) - days_old * 86400
        deleted = 0
        for kind in (cls.DASHBOARD_DIR, cls.WIDGET_DIR):
            folder = os.path.join(export_folder, kind)
            if not os.path.isdir(folder):
                continue
            for root, _dirs, files in os.walk(folder):
                for name in files:
                    path = os.path.join(root, name)
                    if os.path.getmtime(path) < cutoff:
                        os.remove(path)
                        deleted += 1
        return deleted

    def _check_format(self, fmt):
        fmt = (fmt or '').lower()
        if fmt not in self.FORMATS:
            raise UnsupportedExportFormat(fmt, self.FORMATS)
        return fmt

    @staticmethod
    def _render(sheets, fmt, filename):
        if fmt == 'xlsx':
            return ExportFile(filename, ExportWriter.XLSX_MIMETYPE, ExportWriter.to_xlsx(sheets))
        return ExportFile(filename, ExportWriter.CSV_MIMETYPE, ExportWriter.to_csv(sheets))
