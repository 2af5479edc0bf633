"""
Models package for the dashboard export application.
"""
from .base import db

from .user import User
from .dashboard import Dashboard
from .widget import Widget

__all__ = ['db', 'User', 'Dashboard', 'Widget']
