import logging

from ...constants import WidgetType
from .data_service import WidgetDataService
from .formatter import as_mapping, as_sequence
from .results import WidgetExportEntry, WidgetFailure, WidgetSuccess

logger = logging.getLogger(__name__)


def _distinct_count(points, key):
    values = set()
    for point in points:
        if isinstance(point, dict):
            value = point.get(key)
            # Lists and mappings are counted by their repr so they stay hashable
            values.add(value if isinstance(value, (str, int, float, bool, type(None))) else repr(value))
    return len(values)


def generate_widget_summary(widget_type, data):
    """
    Counts shown in the summary sheet's 'Data Points' column, plus a few
    type-specific extras.

    Tables report total_records only, so the summary falls back to it.
    Counts agree with the rows the formatter produces for the same payload.
    """
    data = as_mapping(data)
    summary = {'total_records': 0}

    if widget_type == WidgetType.KPI:
        summary['value'] = data.get('value', 0)
        summary['change'] = data.get('change', 0)

    elif widget_type == WidgetType.TABLE:
        summary['total_records'] = len(as_sequence(data.get('rows')))
        summary['columns'] = len(as_sequence(data.get('columns')))

    elif widget_type in (WidgetType.PIE_CHART, WidgetType.BAR_CHART, WidgetType.LINE_CHART):
        points = as_sequence(data.get('data'))
        summary['data_points'] = len(points)
        summary['categories'] = _distinct_count(points, 'category')

    elif widget_type == WidgetType.HEATMAP:
        points = as_sequence(data.get('data'))
        summary['data_points'] = len(points)
        summary['x_axis_values'] = _distinct_count(points, 'x')
        summary['y_axis_values'] = _distinct_count(points, 'y')

    return summary


class DashboardExportContext:
    """Centralizes widget loading and data resolution for a dashboard export."""
    def __init__(self, dashboard, filters=None, data_service=None):
        self.dashboard = dashboard
        self.filters = filters or {}
        self.data_service = data_service or WidgetDataService
        self._widgets = None
        self._widget_results = None

    @property
    def widgets(self):
        if self._widgets is None:
            self._widgets = self.dashboard.active_widgets()
        return self._widgets

    @property
    def widget_results(self):
        """Ordered mapping of widget id -> WidgetExportEntry."""
        if self._widget_results is None:
            self._widget_results = {}
            for widget in self.widgets:
                self._widget_results[widget.id] = WidgetExportEntry(widget, self.resolve(widget))
        return self._widget_results

    def resolve(self, widget):
        """Resolves one widget; any resolver or summary error is kept as a WidgetFailure."""
        try:
            data = self.data_service.get_widget_data(widget, self.filters)
            summary = generate_widget_summary(widget.type, data)
        except Exception as e:
            logger.warning("Widget %s (%s) failed to resolve: %s", widget.id, widget.title, e)
            return WidgetFailure(str(e))
        return WidgetSuccess(data, summary)

    @property
    def failed_count(self):
        return sum(1 for entry in self.widget_results.values() if entry.result.is_error)
