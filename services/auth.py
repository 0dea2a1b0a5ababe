import os
from functools import wraps
from flask import session, jsonify
from werkzeug.security import generate_password_hash, check_password_hash
from models import db, Account
from utils import t

# Salted scrypt by default; the digest records method and cost parameters
PASSWORD_HASH_METHOD = os.environ.get('PASSWORD_HASH_METHOD', 'scrypt')


def hash_password(plaintext):
    return generate_password_hash(plaintext, method=PASSWORD_HASH_METHOD)


def verify_password(plaintext, digest):
    return check_password_hash(digest, plaintext)


def authenticate(mobile, password):
    """Return the active account matching the credentials, or None"""
    account = Account.query.filter_by(mobile=mobile).first()
    if not account or not account.is_active:
        return None
    if not verify_password(password, account.password_hash):
        return None
    return account


def current_account():
    account_id = session.get('account_id')
    if account_id is None:
        return None
    return db.session.get(Account, account_id)


def login_required(f):
    """Decorator to require a logged-in, active account"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        account = current_account()
        if account is None or not account.is_active:
            return jsonify({'error': t('unauthorized')}), 401
        return f(*args, **kwargs)
    return decorated_function


def admin_required(f):
    """Decorator to require an ADMIN or SUPER_ADMIN account"""
    @wraps(f)
    @login_required
    def decorated_function(*args, **kwargs):
        if not current_account().is_admin:
            return jsonify({'error': t('forbidden')}), 403
        return f(*args, **kwargs)
    return decorated_function
