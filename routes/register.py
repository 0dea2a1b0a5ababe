from flask import Blueprint, jsonify
from services import register_account, RegistrationError
from utils import t, json_body

register_bp = Blueprint('register', __name__, url_prefix='/api')


@register_bp.route('/register', methods=['POST'])
def register():
    """Register with an invite code"""
    try:
        user = register_account(json_body())
    except RegistrationError as e:
        body, status = e.to_response()
        return jsonify(body), status

    return jsonify({
        'success': True,
        'message': t('registration_success'),
        'user': user,
    }), 201
