"""Tests for the dashboard / widget export endpoints."""
import csv
import io

import openpyxl


def test_export_formats(client):
    response = client.get('/dashboards/export-formats')
    assert response.status_code == 200
    payload = response.get_json()
    assert payload['success'] is True
    assert set(payload['data']) == {'xlsx', 'csv'}
    assert payload['data']['csv']['mime_type'] == 'text/csv'


def test_export_dashboard_xlsx(client, sample_dashboard):
    dashboard_id, _ = sample_dashboard
    response = client.post(f'/dashboards/{dashboard_id}/export/xlsx', json={'filters': {'status': 'active'}})

    assert response.status_code == 200
    assert response.mimetype == 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
    assert 'quarterly-sales_' in response.headers['Content-Disposition']

    wb = openpyxl.load_workbook(io.BytesIO(response.data))
    assert wb.sheetnames == ['Dashboard Summary', 'Revenue', 'Top Customers']

    summary = [[c.value for c in row] for row in wb['Dashboard Summary'].iter_rows()]
    assert summary[0][0] == 'Field'
    assert summary[1][:2] == ['Quarterly Sales', 'Ada Lovelace']
    assert summary[1][2] == '2025-09-18 10:25:42'
    assert summary[1][4] == 3

    statuses = {row[0]: (row[3], row[4]) for row in summary if row[3] in ('Success', 'Error')}
    assert statuses['Revenue'][0] == 'Success'
    assert statuses['Top Customers'][0] == 'Success'
    assert statuses['Sales by Region'] == ('Error', 'Unsupported data source: warehouse')
    assert 'Old Chart' not in statuses

    customers = [[c.value for c in row] for row in wb['Top Customers'].iter_rows()]
    assert customers == [['Name', 'Orders'], ['Acme', 12], ['Globex', 7]]


def test_export_dashboard_defaults_to_configured_format(client, sample_dashboard):
    dashboard_id, _ = sample_dashboard
    response = client.post(f'/dashboards/{dashboard_id}/export')
    assert response.status_code == 200
    assert response.headers['Content-Disposition'].rstrip('"').endswith('.xlsx')


def test_export_dashboard_csv(client, sample_dashboard):
    dashboard_id, _ = sample_dashboard
    response = client.post(f'/dashboards/{dashboard_id}/export/csv')

    assert response.status_code == 200
    assert response.mimetype == 'text/csv'
    rows = list(csv.reader(io.StringIO(response.data.decode('utf-8-sig'))))
    assert rows[0] == ['Dashboard Summary']
    assert ['Revenue'] in rows
    assert ['Metric', 'Value', 'Change', 'Change %'] in rows


def test_export_dashboard_unknown_format(client, sample_dashboard):
    dashboard_id, _ = sample_dashboard
    response = client.post(f'/dashboards/{dashboard_id}/export/pdf')
    assert response.status_code == 400
    assert 'Unsupported export format: pdf' in response.get_json()['message']


def test_export_missing_dashboard(client):
    response = client.post('/dashboards/999/export/xlsx')
    assert response.status_code == 404
    assert response.get_json() == {'success': False, 'message': 'Dashboard not found.'}


def test_export_widget_csv_with_filters(client, sample_dashboard):
    _, (kpi_id, _, _, _) = sample_dashboard
    response = client.post(f'/widgets/{kpi_id}/export', json={'filters': {'region': ['us', 'eu']}})

    assert response.status_code == 200
    assert 'revenue_' in response.headers['Content-Disposition']
    rows = list(csv.reader(io.StringIO(response.data.decode('utf-8-sig'))))
    assert rows[0] == ['Filters Applied: Region: us, eu', 'Metric', 'Value', 'Change', 'Change %', 'Period']
    assert rows[1] == ['', '', '', '', '', '']
    assert rows[2][:5] == ['Revenue', '42', '5', '13.5', 'Current']


def test_export_widget_filters_from_query_string(client, sample_dashboard):
    _, (kpi_id, _, _, _) = sample_dashboard
    response = client.post(f'/widgets/{kpi_id}/export?status=active')
    rows = list(csv.reader(io.StringIO(response.data.decode('utf-8-sig'))))
    assert rows[0][0] == 'Filters Applied: Status: active'


def test_export_widget_resolver_error(client, sample_dashboard):
    _, (_, broken_id, _, _) = sample_dashboard
    response = client.post(f'/widgets/{broken_id}/export')
    assert response.status_code == 422
    assert response.get_json()['message'] == 'Unsupported data source: warehouse'


def test_export_inactive_widget(client, sample_dashboard):
    _, (_, _, _, hidden_id) = sample_dashboard
    response = client.post(f'/widgets/{hidden_id}/export')
    assert response.status_code == 404
