import os
from dotenv import load_dotenv

# Load environment variables from .env file
BASE_DIR = os.path.abspath(os.path.dirname(__file__))
dotenv_path = os.path.join(BASE_DIR, '.env')

# Load the .env file from that specific path
load_dotenv(dotenv_path=dotenv_path)


def _env_flag(name, default='false'):
    return os.getenv(name, default).lower() in ['true', 'on', '1']


class Config:
    """Base configuration class."""

    SECRET_KEY = os.getenv('SECRET_KEY') or 'dev-fallback-secret-key-change-in-prod'
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL') or \
        'sqlite:///' + os.path.join(BASE_DIR, 'dashboards.db')

    # Flask-SQLAlchemy settings
    SQLALCHEMY_ENGINE_OPTIONS = {'pool_recycle': 280}
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Export settings
    EXPORT_FOLDER = os.getenv('EXPORT_FOLDER') or os.path.join(BASE_DIR, 'exports')
    EXPORT_STORE_FILES = _env_flag('EXPORT_STORE_FILES')
    EXPORT_RETENTION_DAYS = int(os.getenv('EXPORT_RETENTION_DAYS', 7))
    EXPORT_DEFAULT_FORMAT = os.getenv('EXPORT_DEFAULT_FORMAT', 'xlsx')
