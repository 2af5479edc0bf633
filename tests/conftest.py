"""
Pytest configuration and fixtures.
"""
import sys
import os
from datetime import datetime

import pytest

# Add project root to Python path
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__) + '/..'))


@pytest.fixture(scope='session')
def app():
    """Create application for testing."""
    from app import create_app, db
    from config import Config

    class TestConfig(Config):
        TESTING = True
        import tempfile
        db_fd, db_path = tempfile.mkstemp()
        SQLALCHEMY_DATABASE_URI = f'sqlite:///{db_path}'
        EXPORT_STORE_FILES = False
        EXPORT_DEFAULT_FORMAT = 'xlsx'

    app = create_app(TestConfig)

    with app.app_context():
        db.create_all()

    return app


@pytest.fixture(scope='function', autouse=True)
def clean_db(app):
    """Clean database between tests."""
    with app.app_context():
        from app import db
        db.drop_all()
        db.create_all()
    yield


@pytest.fixture(scope='function')
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture(scope='function')
def export_folder(app, tmp_path):
    """Point EXPORT_FOLDER at a temporary directory and turn file storage on."""
    old_folder = app.config['EXPORT_FOLDER']
    old_store = app.config['EXPORT_STORE_FILES']
    app.config['EXPORT_FOLDER'] = str(tmp_path)
    app.config['EXPORT_STORE_FILES'] = True
    yield tmp_path
    app.config['EXPORT_FOLDER'] = old_folder
    app.config['EXPORT_STORE_FILES'] = old_store


@pytest.fixture(scope='function')
def sample_dashboard(app):
    """
    A dashboard owned by 'Ada Lovelace' with three active widgets
    (KPI, failing bar chart, table) and one inactive widget.
    Returns (dashboard_id, [widget ids in order]).
    """
    from app.models import db, User, Dashboard, Widget

    with app.app_context():
        user = User(name='Ada Lovelace', email='ada@example.com')
        dashboard = Dashboard(
            name='Quarterly Sales',
            user=user,
            created_at=datetime(2025, 9, 18, 10, 25, 42),
        )
        kpi = Widget(
            title='Revenue',
            type='KPI',
            order_index=0,
            data_source={'type': 'static', 'payload': {'value': 42, 'change': 5, 'changePercentage': 13.5}},
        )
        broken = Widget(
            title='Sales by Region',
            type='BarChart',
            order_index=1,
            data_source={'type': 'warehouse', 'query': 'select 1'},
        )
        table = Widget(
            title='Top Customers',
            type='Table',
            order_index=2,
            data_source={'type': 'static', 'payload': {
                'columns': ['Name', 'Orders'],
                'rows': [{'name': 'Acme', 'orders': 12}, {'name': 'Globex', 'orders': 7}],
            }},
        )
        hidden = Widget(
            title='Old Chart',
            type='PieChart',
            order_index=3,
            is_active=False,
            data_source={'type': 'static', 'payload': {'data': [{'category': 'A', 'value': 1}]}},
        )
        dashboard.widgets.extend([kpi, broken, table, hidden])
        db.session.add(dashboard)
        db.session.commit()
        return dashboard.id, [kpi.id, broken.id, table.id, hidden.id]
