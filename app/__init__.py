from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import MetaData


# Extension instances are created without an app and bound inside the factory

# Naming convention for SQLAlchemy constraints
convention = {
    "ix": 'ix_%(column_0_label)s',
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s"
}
metadata = MetaData(naming_convention=convention)

db = SQLAlchemy(metadata=metadata)


def create_app(config_class='config.Config'):
    """
    Application Factory Function
    """

    app = Flask(__name__, instance_relative_config=True)

    app.config.from_object(config_class)

    db.init_app(app)

    # Register Blueprints
    # Imports are *inside* the factory to avoid circular import issues
    with app.app_context():
        from .dashboard_routes import dashboards_bp

        # Import models so SQLAlchemy knows about them
        from . import models

        app.register_blueprint(dashboards_bp)

    # Register CLI commands
    from app.commands.cleanup_exports import cleanup_exports

    app.cli.add_command(cleanup_exports)

    return app
