from datetime import datetime
from .database import db


class Invite(db.Model):
    """Database model for single-use registration invite codes."""
    id = db.Column(db.Integer, primary_key=True)
    code = db.Column(db.String(32), nullable=False, unique=True)
    role = db.Column(db.String(20), nullable=False)
    used = db.Column(db.Boolean, nullable=False, default=False)  # false -> true only
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    expires_at = db.Column(db.DateTime)  # NULL means no expiry

    # Seeded codes have no creator
    created_by_id = db.Column(db.Integer, db.ForeignKey('account.id', use_alter=True,
                                                        name='fk_invite_created_by_id'))
    used_by_id = db.Column(db.Integer, db.ForeignKey('account.id', use_alter=True,
                                                     name='fk_invite_used_by_id'))

    created_by = db.relationship('Account', foreign_keys=[created_by_id])
    used_by = db.relationship('Account', foreign_keys=[used_by_id])

    def is_expired(self, now=None):
        if self.expires_at is None:
            return False
        return self.expires_at <= (now or datetime.utcnow())

    def to_dict(self):
        return {
            'id': self.id,
            'code': self.code,
            'role': self.role,
            'used': self.used,
            'expiresAt': self.expires_at.isoformat() if self.expires_at else None,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
            'createdBy': ({'id': self.created_by.id, 'name': self.created_by.name}
                          if self.created_by else None),
            'usedBy': ({'id': self.used_by.id, 'name': self.used_by.name}
                       if self.used_by else None),
        }
