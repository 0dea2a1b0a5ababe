from math import ceil
from flask import Blueprint, request, jsonify, current_app
from sqlalchemy.exc import SQLAlchemyError
from models import db
from services import admin_required, current_account, InviteError, AccountError
from services.accounts import list_accounts, update_account_flags
from services.invites import create_invite, list_invites, delete_invite
from utils import t, json_body

admin_bp = Blueprint('admin', __name__, url_prefix='/api/admin')


def _int_arg(name, default):
    try:
        return max(int(request.args.get(name, default)), 1)
    except ValueError:
        return default


@admin_bp.route('/invites', methods=['GET'])
@admin_required
def get_invites():
    """List invite codes, optionally filtered by used=true/false"""
    used = {'true': True, 'false': False}.get(request.args.get('used'))
    page = _int_arg('page', 1)
    limit = _int_arg('limit', 20)

    try:
        invites, total = list_invites(used=used, page=page, limit=limit)
    except SQLAlchemyError:
        current_app.logger.exception("Error fetching invites")
        return jsonify({'error': t('invite_fetch_failed')}), 500

    return jsonify({
        'items': [invite.to_dict() for invite in invites],
        'total': total,
        'page': page,
        'pageSize': limit,
        'totalPages': ceil(total / limit),
    })


@admin_bp.route('/invites', methods=['POST'])
@admin_required
def post_invite():
    """Generate a new invite code"""
    data = json_body()

    try:
        invite = create_invite(data.get('role'), current_account(),
                               expires_in_days=data.get('expiresInDays'))
    except InviteError as e:
        body, status = e.to_response()
        return jsonify(body), status
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception("Error creating invite")
        return jsonify({'error': t('invite_create_failed')}), 500

    return jsonify({'success': True, 'invite': invite.to_dict()}), 201


@admin_bp.route('/invites', methods=['DELETE'])
@admin_required
def remove_invite():
    """Delete an unused invite code"""
    try:
        invite_id = int(request.args.get('id', ''))
    except ValueError:
        return jsonify({'error': t('invite_id_required')}), 400

    try:
        delete_invite(invite_id)
    except InviteError as e:
        body, status = e.to_response()
        return jsonify(body), status
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception("Error deleting invite %s", invite_id)
        return jsonify({'error': t('invite_delete_failed')}), 500

    return jsonify({'success': True})


@admin_bp.route('/users', methods=['GET'])
@admin_required
def get_users():
    """List accounts, filtered by role, isActive and a name/mobile search"""
    is_active = {'true': True, 'false': False}.get(request.args.get('isActive'))
    page = _int_arg('page', 1)
    limit = _int_arg('limit', 20)

    try:
        accounts, total = list_accounts(role=request.args.get('role'),
                                        is_active=is_active,
                                        search=request.args.get('search', '').strip(),
                                        page=page, limit=limit)
    except SQLAlchemyError:
        current_app.logger.exception("Error fetching users")
        return jsonify({'error': t('users_fetch_failed')}), 500

    return jsonify({
        'items': [account.to_admin_dict() for account in accounts],
        'total': total,
        'page': page,
        'pageSize': limit,
        'totalPages': ceil(total / limit),
    })


@admin_bp.route('/users', methods=['PATCH'])
@admin_required
def patch_user():
    """Toggle an account's isActive / canPost flags"""
    data = json_body()

    try:
        account = update_account_flags(data.get('userId'), data)
    except AccountError as e:
        body, status = e.to_response()
        return jsonify(body), status
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception("Error updating user %s", data.get('userId'))
        return jsonify({'error': t('user_update_failed')}), 500

    return jsonify({'success': True, 'user': account.to_admin_dict()})
