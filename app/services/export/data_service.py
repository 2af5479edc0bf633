import copy
import logging

from ...constants import WidgetType
from .exceptions import WidgetDataError

logger = logging.getLogger(__name__)


class WidgetDataService:
    """
    Resolves the data payload a widget displays.

    Widgets point at their data through `data_source`. The only source kind
    handled here is a static payload stored with the widget:

        {"type": "static", "payload": {...}}
    """
    STATIC = 'static'

    @staticmethod
    def get_chart_data(widget_type, configuration=None, data_source=None, filters=None):
        """
        Args:
            widget_type (str): Widget.type
            configuration (dict): Widget.configuration, currently unused by static sources.
            data_source (dict): Widget.data_source
            filters (dict): Active dashboard filters.

        Returns:
            dict: The widget payload.

        Raises:
            WidgetDataError: unsupported widget type or data source.
        """
        if widget_type not in WidgetType.ALL:
            raise WidgetDataError(f"Unsupported chart type: {widget_type}")

        data_source = data_source or {}
        source_type = data_source.get('type')
        if source_type != WidgetDataService.STATIC:
            raise WidgetDataError(f"Unsupported data source: {source_type or 'none'}")

        payload = data_source.get('payload')
        if payload is None:
            return {}
        if not isinstance(payload, dict):
            raise WidgetDataError(f"Static payload for {widget_type} must be an object")

        logger.debug("Resolved static payload for %s widget (filters=%s)", widget_type, filters or {})
        return copy.deepcopy(payload)

    @staticmethod
    def get_widget_data(widget, filters=None):
        return WidgetDataService.get_chart_data(
            widget.type,
            widget.configuration or {},
            widget.data_source or {},
            filters or {}
        )
