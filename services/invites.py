"""
Invite ledger: the single source of truth for who may register with which role.

Consumption goes through one conditional UPDATE so that two requests holding
the same code can never both succeed. None of the read helpers commit; the
caller owns the transaction.
"""
from datetime import datetime, timedelta
from sqlalchemy import update, delete
from models import db, Invite
from utils import generate_invite_code
from .errors import (InvalidInviteRole, InvalidInviteExpiry, InviteRoleForbidden,
                     InviteNotFound, InviteInUse)

# Roles an administrator can hand out; SUPER_ADMIN is never invitable
INVITABLE_ROLES = ('CADRE', 'LEADER', 'ADMIN')


def find_by_code(code):
    return Invite.query.filter_by(code=code).first()


def mark_used_if_unused(invite_id, account_id):
    """Flip used false->true for exactly one caller. Returns False if already used."""
    result = db.session.execute(
        update(Invite)
        .where(Invite.id == invite_id, Invite.used.is_(False))
        .values(used=True, used_by_id=account_id)
    )
    return result.rowcount == 1


def create_invite(role, created_by, expires_in_days=None):
    """Generate a new invite code for `role` on behalf of an admin account"""
    if role not in INVITABLE_ROLES:
        raise InvalidInviteRole()

    # Only SUPER_ADMIN can create ADMIN invites
    if role == 'ADMIN' and created_by.role != 'SUPER_ADMIN':
        raise InviteRoleForbidden()

    expires_at = None
    if expires_in_days not in (None, ''):
        try:
            days = int(expires_in_days)
        except (TypeError, ValueError):
            raise InvalidInviteExpiry()
        if days <= 0:
            raise InvalidInviteExpiry()
        expires_at = datetime.utcnow() + timedelta(days=days)

    # Generate unique code
    while True:
        code = generate_invite_code()
        if not find_by_code(code):
            break

    invite = Invite(code=code, role=role, created_by_id=created_by.id, expires_at=expires_at)
    db.session.add(invite)
    db.session.commit()

    print(f"[Invites] {created_by.mobile} created {role} invite {code}"
          f"{' expiring ' + expires_at.isoformat() if expires_at else ''}")
    return invite


def list_invites(used=None, page=1, limit=20):
    """Page through invites, newest first. Returns (items, total)."""
    query = Invite.query
    if used is not None:
        query = query.filter(Invite.used.is_(used))

    total = query.count()
    items = (query.order_by(Invite.created_at.desc(), Invite.id.desc())
             .offset((page - 1) * limit)
             .limit(limit)
             .all())
    return items, total


def delete_invite(invite_id):
    """Delete an unused invite. Used invites are permanent."""
    result = db.session.execute(
        delete(Invite).where(Invite.id == invite_id, Invite.used.is_(False))
    )
    if result.rowcount == 1:
        db.session.commit()
        print(f"[Invites] Deleted invite {invite_id}")
        return

    db.session.rollback()
    if db.session.get(Invite, invite_id) is None:
        raise InviteNotFound()
    raise InviteInUse()
