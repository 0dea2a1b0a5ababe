import os
from models import db, Account, Invite
from .auth import hash_password

SUPER_ADMIN_MOBILE = os.environ.get('SUPER_ADMIN_MOBILE', '9999999999')
SUPER_ADMIN_PASSWORD = os.environ.get('SUPER_ADMIN_PASSWORD', 'admin123')

SAMPLE_INVITES = [
    ('CADRE001', 'CADRE'),
    ('LEADER01', 'LEADER'),
    ('ADMIN001', 'ADMIN'),
]


def seed_database(mobile=SUPER_ADMIN_MOBILE, password=SUPER_ADMIN_PASSWORD):
    """Create the bootstrap super admin and sample invite codes. Safe to re-run."""
    super_admin = Account.query.filter_by(mobile=mobile).first()
    if super_admin is None:
        super_admin = Account(
            name='Super Admin',
            mobile=mobile,
            password_hash=hash_password(password),
            role='SUPER_ADMIN',
            state='Andhra Pradesh',
        )
        db.session.add(super_admin)
        db.session.flush()
        print(f"[Seed] Created super admin {mobile}")

    created = []
    for code, role in SAMPLE_INVITES:
        if Invite.query.filter_by(code=code).first() is None:
            db.session.add(Invite(code=code, role=role, created_by_id=super_admin.id))
            created.append(code)

    db.session.commit()
    if created:
        print(f"[Seed] Sample invite codes created: {', '.join(created)}")
    return super_admin
