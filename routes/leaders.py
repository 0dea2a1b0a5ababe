from flask import Blueprint, jsonify, request
from models import Account, LeaderProfile
from utils import t

leaders_bp = Blueprint('leaders', __name__, url_prefix='/api/leaders')


@leaders_bp.route('')
def leader_list():
    """Verified leaders of active accounts, newest first, optionally by state"""
    query = (LeaderProfile.query.join(Account)
             .filter(LeaderProfile.verified.is_(True), Account.is_active.is_(True)))
    state = request.args.get('state')
    if state:
        query = query.filter(Account.state == state)

    profiles = query.order_by(LeaderProfile.created_at.desc(), LeaderProfile.id.desc()).all()
    return jsonify({'items': [profile.to_dict() for profile in profiles]})


@leaders_bp.route('/<slug>')
def leader_detail(slug):
    """Public leader profile by slug; unverified profiles are reachable by direct link"""
    profile = LeaderProfile.query.filter_by(slug=slug).first()
    if profile is None or not profile.account.is_active:
        return jsonify({'error': t('leader_not_found')}), 404
    return jsonify(profile.to_dict())
