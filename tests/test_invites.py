import re
from datetime import datetime, timedelta
import pytest
from models import db, Invite
from services.errors import (InvalidInviteRole, InvalidInviteExpiry, InviteRoleForbidden,
                             InviteNotFound, InviteInUse)
from services.invites import (find_by_code, mark_used_if_unused, create_invite,
                              list_invites, delete_invite)


def test_find_by_code(make_invite):
    invite = make_invite(code='CADRE001', role='CADRE')
    assert find_by_code('CADRE001').id == invite.id
    assert find_by_code('cadre001') is None
    assert find_by_code('MISSING') is None


def test_mark_used_succeeds_exactly_once(make_invite, make_account):
    invite = make_invite()
    first = make_account('9000000001')
    second = make_account('9000000002')

    assert mark_used_if_unused(invite.id, first.id) is True
    assert mark_used_if_unused(invite.id, second.id) is False
    db.session.commit()

    db.session.expire_all()
    invite = db.session.get(Invite, invite.id)
    assert invite.used is True
    assert invite.used_by_id == first.id


def test_create_invite(super_admin):
    invite = create_invite('LEADER', super_admin)

    assert re.fullmatch(r'[0-9A-F]{8}', invite.code)
    assert invite.role == 'LEADER'
    assert invite.used is False
    assert invite.expires_at is None
    assert invite.created_by_id == super_admin.id


def test_create_invite_with_expiry(super_admin):
    before = datetime.utcnow()
    invite = create_invite('CADRE', super_admin, expires_in_days='7')
    assert before + timedelta(days=7) <= invite.expires_at <= datetime.utcnow() + timedelta(days=7)


@pytest.mark.parametrize('days', ['soon', 0, -3])
def test_create_invite_rejects_bad_expiry(super_admin, days):
    with pytest.raises(InvalidInviteExpiry):
        create_invite('CADRE', super_admin, expires_in_days=days)


@pytest.mark.parametrize('role', [None, 'SUPER_ADMIN', 'leader', 'VOTER'])
def test_create_invite_rejects_role(super_admin, role):
    with pytest.raises(InvalidInviteRole):
        create_invite(role, super_admin)


def test_only_super_admin_creates_admin_invites(make_account, super_admin):
    admin = make_account('9000000001', role='ADMIN')
    with pytest.raises(InviteRoleForbidden):
        create_invite('ADMIN', admin)

    assert create_invite('ADMIN', super_admin).role == 'ADMIN'
    assert create_invite('LEADER', admin).role == 'LEADER'


def test_list_invites_filters_and_pages(make_invite):
    for i in range(5):
        make_invite(code=f'CODE{i}', role='CADRE', used=(i % 2 == 0))

    items, total = list_invites()
    assert total == 5
    assert [invite.code for invite in items] == ['CODE4', 'CODE3', 'CODE2', 'CODE1', 'CODE0']

    items, total = list_invites(used=False)
    assert total == 2
    assert {invite.code for invite in items} == {'CODE1', 'CODE3'}

    items, total = list_invites(page=2, limit=2)
    assert total == 5
    assert [invite.code for invite in items] == ['CODE2', 'CODE1']


def test_delete_unused_invite(make_invite):
    invite_id = make_invite().id
    delete_invite(invite_id)
    assert db.session.get(Invite, invite_id) is None


def test_delete_used_invite_refused(make_invite):
    invite_id = make_invite(used=True).id
    with pytest.raises(InviteInUse):
        delete_invite(invite_id)
    assert db.session.get(Invite, invite_id) is not None


def test_delete_missing_invite(app):
    with pytest.raises(InviteNotFound):
        delete_invite(4242)
