"""Widget model: one typed unit of dashboard content."""
import copy

from ..constants import WidgetType
from .base import db


class Widget(db.Model):
    __tablename__ = 'widgets'

    id = db.Column(db.Integer, primary_key=True)
    dashboard_id = db.Column(db.Integer, db.ForeignKey('dashboards.id', ondelete='CASCADE'),
                             nullable=False, index=True)
    title = db.Column(db.String(255), nullable=False)
    type = db.Column(db.String(50), nullable=False)
    configuration = db.Column(db.JSON, nullable=True)
    position = db.Column(db.JSON, nullable=True)
    data_source = db.Column(db.JSON, nullable=True)
    is_active = db.Column(db.Boolean, default=True, nullable=False)
    order_index = db.Column(db.Integer, default=0, nullable=False)

    dashboard = db.relationship('Dashboard', back_populates='widgets')

    DEFAULT_CONFIGURATIONS = {
        WidgetType.KPI: {
            'metric': None,
            'format': 'number',
            'color': '#007bff',
            'show_trend': True
        },
        WidgetType.TABLE: {
            'columns': [],
            'sortable': True,
            'paginated': True,
            'page_size': 10
        },
        WidgetType.PIE_CHART: {
            'data_field': None,
            'label_field': None,
            'colors': ['#007bff', '#28a745', '#ffc107', '#dc3545']
        },
        WidgetType.BAR_CHART: {
            'x_axis': None,
            'y_axis': None,
            'orientation': 'vertical',
            'color': '#007bff'
        },
        WidgetType.LINE_CHART: {
            'x_axis': None,
            'y_axis': None,
            'line_color': '#007bff',
            'show_points': True
        },
        WidgetType.HEATMAP: {
            'x_axis': None,
            'y_axis': None,
            'value_field': None,
            'color_scale': ['#f8f9fa', '#007bff']
        },
    }

    def __repr__(self):
        return f'<Widget {self.id}: {self.type} {self.title!r}>'

    @staticmethod
    def get_types():
        return list(WidgetType.ALL)

    @classmethod
    def get_default_configuration(cls, widget_type):
        return copy.deepcopy(cls.DEFAULT_CONFIGURATIONS.get(widget_type, {}))

    @staticmethod
    def get_default_position():
        return {'x': 0, 'y': 0, 'width': 4, 'height': 3}

    def is_valid_type(self):
        return self.type in WidgetType.ALL

    def to_dict(self):
        return {
            'id': self.id,
            'dashboard_id': self.dashboard_id,
            'title': self.title,
            'type': self.type,
            'configuration': self.configuration or {},
            'position': self.position or self.get_default_position(),
            'is_active': self.is_active,
            'order_index': self.order_index,
        }
