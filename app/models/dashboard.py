"""Dashboard model: a named collection of widgets owned by a user."""
from datetime import datetime

from .base import db


class Dashboard(db.Model):
    __tablename__ = 'dashboards'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=True, index=True)
    filters = db.Column(db.JSON, nullable=True)
    is_public = db.Column(db.Boolean, default=False, nullable=False)
    is_active = db.Column(db.Boolean, default=True, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = db.relationship('User', back_populates='dashboards')
    widgets = db.relationship(
        'Widget',
        back_populates='dashboard',
        order_by='Widget.order_index',
        cascade='all, delete-orphan'
    )

    def __repr__(self):
        return f'<Dashboard {self.id}: {self.name}>'

    @property
    def owner_name(self):
        return self.user.name if self.user and self.user.name else None

    def active_widgets(self):
        """Active widgets in display order."""
        return [w for w in self.widgets if w.is_active]

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'owner_name': self.owner_name,
            'filters': self.filters or {},
            'is_public': self.is_public,
            'is_active': self.is_active,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'widget_count': len(self.active_widgets()),
        }
