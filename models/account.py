from datetime import datetime
from .database import db

ROLES = ('CADRE', 'LEADER', 'ADMIN', 'SUPER_ADMIN')
ADMIN_ROLES = ('ADMIN', 'SUPER_ADMIN')
NAME_MAX_LENGTH = 100


class Account(db.Model):
    """Database model for registered cadre, leader and admin accounts."""
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(NAME_MAX_LENGTH), nullable=False)
    mobile = db.Column(db.String(10), nullable=False, unique=True)  # login handle, never changes
    password_hash = db.Column(db.String(255), nullable=False)
    role = db.Column(db.String(20), nullable=False, default='CADRE')

    # Region, copied verbatim from the registration form
    state = db.Column(db.String(100))
    district = db.Column(db.String(100))
    constituency = db.Column(db.String(150))

    is_active = db.Column(db.Boolean, nullable=False, default=True)
    can_post = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    used_invite_id = db.Column(db.Integer, db.ForeignKey('invite.id'), unique=True)

    # Relationships
    leader_profile = db.relationship('LeaderProfile', backref='account', uselist=False,
                                     cascade='all, delete-orphan')
    used_invite = db.relationship('Invite', foreign_keys=[used_invite_id])

    @property
    def is_admin(self):
        return self.role in ADMIN_ROLES

    def to_public_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'mobile': self.mobile,
            'role': self.role,
        }

    def to_admin_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'mobile': self.mobile,
            'role': self.role,
            'state': self.state,
            'district': self.district,
            'constituency': self.constituency,
            'isActive': self.is_active,
            'canPost': self.can_post,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
        }
