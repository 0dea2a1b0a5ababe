from datetime import datetime
from .database import db


class LeaderProfile(db.Model):
    """Public profile attached to a LEADER account."""
    id = db.Column(db.Integer, primary_key=True)
    account_id = db.Column(db.Integer, db.ForeignKey('account.id', ondelete='CASCADE'),
                           nullable=False, unique=True)
    slug = db.Column(db.String(120), nullable=False, unique=True)
    designation = db.Column(db.String(100), nullable=False)
    constituency = db.Column(db.String(150))
    bio = db.Column(db.Text)
    photo_url = db.Column(db.String(500))
    social_links = db.Column(db.JSON)  # {"twitter": "...", "youtube": "..."}
    verified = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            'slug': self.slug,
            'name': self.account.name,
            'designation': self.designation,
            'state': self.account.state,
            'constituency': self.constituency,
            'bio': self.bio,
            'photoUrl': self.photo_url,
            'socialLinks': self.social_links or {},
            'verified': self.verified,
        }
