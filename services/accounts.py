"""
Account administration: listing and the active/can-post toggles.

These toggles are the only changes an account sees after registration;
name, mobile and role stay as registered.
"""
from models import db, Account, ROLES
from .errors import AccountIdRequired, NoAccountChanges, AccountNotFound

# Request keys mapped to the flags they control
ACCOUNT_FLAGS = {
    'isActive': 'is_active',
    'canPost': 'can_post',
}


def list_accounts(role=None, is_active=None, search=None, page=1, limit=20):
    """Page through accounts, newest first. Returns (items, total)."""
    query = Account.query
    if role in ROLES:
        query = query.filter(Account.role == role)
    if is_active is not None:
        query = query.filter(Account.is_active.is_(is_active))
    if search:
        query = query.filter(db.or_(
            Account.name.ilike(f'%{search}%'),
            Account.mobile.contains(search),
        ))

    total = query.count()
    items = (query.order_by(Account.created_at.desc(), Account.id.desc())
             .offset((page - 1) * limit)
             .limit(limit)
             .all())
    return items, total


def update_account_flags(account_id, changes):
    """
    Apply the boolean flags present in `changes` to an account.

    Keys other than isActive/canPost, and values that are not real booleans,
    are ignored. Raises NoAccountChanges if nothing usable is left.
    """
    if isinstance(account_id, bool):
        raise AccountIdRequired()
    try:
        account_id = int(account_id)
    except (TypeError, ValueError):
        raise AccountIdRequired()

    updates = {column: changes[key] for key, column in ACCOUNT_FLAGS.items()
               if isinstance(changes.get(key), bool)}
    if not updates:
        raise NoAccountChanges()

    account = db.session.get(Account, account_id)
    if account is None:
        raise AccountNotFound()

    for column, value in updates.items():
        setattr(account, column, value)
    db.session.commit()

    print(f"[Accounts] Updated account {account.id}: "
          + ', '.join(f'{column}={value}' for column, value in updates.items()))
    return account
