"""
Invite-gated registration.

Validation is a chain of small predicates run in a fixed order; the first one
that fails raises and nothing is written. Once everything passes, the account
insert, the invite consumption and (for leaders) the profile insert happen in
one transaction that is rolled back as a whole on any failure.
"""
import os
from datetime import datetime
from flask import current_app
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from models import db, Account, LeaderProfile, NAME_MAX_LENGTH
from utils import is_valid_mobile, clean_optional
from .auth import hash_password
from .invites import find_by_code, mark_used_if_unused
from .slugs import allocate_slug
from .errors import (MissingField, InvalidMobileFormat, DuplicateMobile, InvalidInviteCode,
                     InviteAlreadyUsed, InviteExpired, WeakPassword, NameTooLong,
                     StorageFailure)

# Configuration
MIN_PASSWORD_LENGTH = int(os.environ.get('MIN_PASSWORD_LENGTH', '6'))
DEFAULT_DESIGNATION = os.environ.get('DEFAULT_DESIGNATION', 'Party Leader')
MAX_SLUG_RETRIES = 5

REQUIRED_FIELDS = ('name', 'mobile', 'password', 'inviteCode')


def _text(value):
    return '' if value is None else str(value)


# Validation predicates

def check_required_fields(data):
    for field in REQUIRED_FIELDS:
        value = data.get(field)
        if not isinstance(value, str) or not value.strip():
            raise MissingField()
    if len(data['name'].strip()) > NAME_MAX_LENGTH:
        raise NameTooLong(max_length=NAME_MAX_LENGTH)


def check_mobile_format(mobile):
    if not is_valid_mobile(_text(mobile)):
        raise InvalidMobileFormat()


def check_mobile_available(mobile):
    if Account.query.filter_by(mobile=mobile).first():
        raise DuplicateMobile()


def check_invite_exists(invite):
    if invite is None:
        raise InvalidInviteCode()


def check_invite_unused(invite):
    if invite.used:
        raise InviteAlreadyUsed()


def check_invite_not_expired(invite, now=None):
    if invite.is_expired(now):
        raise InviteExpired()


def check_password_policy(password, min_length=MIN_PASSWORD_LENGTH):
    if len(_text(password)) < min_length:
        raise WeakPassword(min_length=min_length)


def validate_registration(data, now=None):
    """Run every check in order and return the invite the request will consume"""
    check_required_fields(data)
    mobile = _text(data['mobile'])
    check_mobile_format(mobile)
    check_mobile_available(mobile)

    invite = find_by_code(_text(data['inviteCode']).strip())
    check_invite_exists(invite)
    check_invite_unused(invite)
    check_invite_not_expired(invite, now or datetime.utcnow())

    check_password_policy(data['password'])
    return invite


# Workflow

def _create_leader_profile(account, constituency):
    """Insert the leader profile, moving to the next slug if a concurrent insert wins"""
    lost = set()
    while True:
        slug = allocate_slug(account.name, exclude=lost)
        try:
            with db.session.begin_nested():
                profile = LeaderProfile(
                    account_id=account.id,
                    slug=slug,
                    designation=DEFAULT_DESIGNATION,
                    constituency=constituency,
                )
                db.session.add(profile)
            return profile
        except IntegrityError:
            lost.add(slug)
            print(f"[Register] Slug '{slug}' taken by a concurrent insert, retrying")
            if len(lost) >= MAX_SLUG_RETRIES:
                raise


def register_account(data, now=None):
    """
    Create an account from a registration request and consume its invite.

    The role always comes from the invite. LEADER invites also get a
    LeaderProfile with a freshly allocated slug. Returns the public
    projection of the new account.

    Raises a RegistrationError subclass on any failure; nothing is persisted
    in that case.
    """
    invite = validate_registration(data, now)
    invite_id, role = invite.id, invite.role
    password_hash = hash_password(_text(data['password']))

    mobile = _text(data['mobile'])
    constituency = clean_optional(data.get('constituency'))

    try:
        account = Account(
            name=_text(data['name']).strip(),
            mobile=mobile,
            password_hash=password_hash,
            role=role,
            state=clean_optional(data.get('state')),
            district=clean_optional(data.get('district')),
            constituency=constituency,
            used_invite_id=invite_id,
        )
        db.session.add(account)
        try:
            db.session.flush()
        except IntegrityError:
            # Lost a race on the mobile number or on the invite itself
            db.session.rollback()
            if Account.query.filter_by(mobile=mobile).first():
                raise DuplicateMobile()
            raise InviteAlreadyUsed()

        if not mark_used_if_unused(invite_id, account.id):
            db.session.rollback()
            print(f"[Register] Invite {invite_id} consumed by a concurrent request")
            raise InviteAlreadyUsed()

        if role == 'LEADER':
            profile = _create_leader_profile(account, constituency)
            print(f"[Register] Created leader profile '{profile.slug}'")

        db.session.commit()

    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.exception(
            "Registration failed for mobile %s with invite %s: %s", mobile, invite_id, e)
        raise StorageFailure() from e

    print(f"[Register] Account {account.id} ({role}) registered with invite {invite_id}")
    return account.to_public_dict()
