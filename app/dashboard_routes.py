# app/dashboard_routes.py

from flask import Blueprint, jsonify, request, send_file, current_app

from . import db
from .models import Dashboard, Widget
from .services.export import DashboardExportService, ExportError, UnsupportedExportFormat

dashboards_bp = Blueprint('dashboards_bp', __name__)


def _request_filters():
    """Filters come from the JSON body ({"filters": {...}}) or, failing that, the query string."""
    data = request.get_json(silent=True) or {}
    filters = data.get('filters')
    if isinstance(filters, dict):
        return filters
    return {key: value for key, value in request.args.items() if key != 'format'}


def _send(export_file):
    return send_file(
        export_file.stream,
        mimetype=export_file.mimetype,
        as_attachment=True,
        download_name=export_file.filename
    )


@dashboards_bp.route('/dashboards/export-formats', methods=['GET'])
def export_formats():
    return jsonify(success=True, data=DashboardExportService.get_available_formats())


@dashboards_bp.route('/dashboards/<int:dashboard_id>/export', methods=['POST'])
@dashboards_bp.route('/dashboards/<int:dashboard_id>/export/<fmt>', methods=['POST'])
def export_dashboard(dashboard_id, fmt=None):
    dashboard = db.session.get(Dashboard, dashboard_id)
    if not dashboard or not dashboard.is_active:
        return jsonify(success=False, message="Dashboard not found."), 404

    fmt = fmt or current_app.config.get('EXPORT_DEFAULT_FORMAT', 'xlsx')
    try:
        export_file = DashboardExportService().export_dashboard(dashboard, fmt, _request_filters())
    except UnsupportedExportFormat as e:
        return jsonify(success=False, message=str(e)), 400
    except Exception as e:
        current_app.logger.error(f"Error exporting dashboard {dashboard_id}: {e}")
        return jsonify(success=False, message=f"Failed to export dashboard: {e}"), 500

    return _send(export_file)


@dashboards_bp.route('/widgets/<int:widget_id>/export', methods=['POST'])
def export_widget(widget_id):
    widget = db.session.get(Widget, widget_id)
    if not widget or not widget.is_active:
        return jsonify(success=False, message="Widget not found."), 404

    try:
        export_file = DashboardExportService().export_widget(widget, _request_filters())
    except ExportError as e:
        current_app.logger.warning(f"Widget {widget_id} could not be exported: {e}")
        return jsonify(success=False, message=str(e)), 422
    except Exception as e:
        current_app.logger.error(f"Error exporting widget {widget_id}: {e}")
        return jsonify(success=False, message=f"Failed to export widget: {e}"), 500

    return _send(export_file)
