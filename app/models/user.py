"""User model for dashboard owners."""
from datetime import datetime

from .base import db


class User(db.Model):
    __tablename__ = 'users'
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(120), unique=True, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    dashboards = db.relationship('Dashboard', back_populates='user', lazy='dynamic')

    def __repr__(self):
        return f'<User {self.id}: {self.name}>'
