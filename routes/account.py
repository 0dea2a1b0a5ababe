from flask import Blueprint, jsonify, session
from services import authenticate
from utils import t, json_body

account_bp = Blueprint('account', __name__, url_prefix='/api')


@account_bp.route('/login', methods=['POST'])
def login():
    """Log in with mobile number and password"""
    data = json_body()
    mobile = str(data.get('mobile') or '')
    password = str(data.get('password') or '')

    account = authenticate(mobile, password) if mobile and password else None
    if account is None:
        return jsonify({'error': t('invalid_login')}), 401

    session.clear()
    session['account_id'] = account.id
    session['account_role'] = account.role
    return jsonify({'success': True, 'user': account.to_public_dict()})


@account_bp.route('/logout', methods=['POST'])
def logout():
    """Logout current account"""
    session.pop('account_id', None)
    session.pop('account_role', None)
    return jsonify({'success': True})
