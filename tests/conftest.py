import pytest
from app import create_app
from models import db, Account, Invite
from services.auth import hash_password


@pytest.fixture
def app():
    app = create_app({
        'TESTING': True,
        'SECRET_KEY': 'test-secret',
        'SQLALCHEMY_DATABASE_URI': 'sqlite:///:memory:',
    })
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_invite(app):
    """Factory for invite rows; commits so requests see them"""
    def _make_invite(code='LEADER2024', role='LEADER', **kwargs):
        invite = Invite(code=code, role=role, **kwargs)
        db.session.add(invite)
        db.session.commit()
        return invite
    return _make_invite


@pytest.fixture
def make_account(app):
    def _make_account(mobile, role='CADRE', password='secret1', name='Test User', **kwargs):
        account = Account(name=name, mobile=mobile, role=role,
                          password_hash=hash_password(password), **kwargs)
        db.session.add(account)
        db.session.commit()
        return account
    return _make_account


@pytest.fixture
def super_admin(make_account):
    return make_account('9999999999', role='SUPER_ADMIN', password='admin123', name='Super Admin')


@pytest.fixture
def login(client):
    def _login(mobile, password):
        return client.post('/api/login', json={'mobile': mobile, 'password': password})
    return _login


@pytest.fixture
def payload():
    """Registration request body for the LEADER2024 invite"""
    def _payload(**overrides):
        data = {
            'name': 'Ravi Kumar',
            'mobile': '9876543210',
            'password': 'secret1',
            'inviteCode': 'LEADER2024',
        }
        data.update(overrides)
        return data
    return _payload
