import os
import re
import uuid
from flask import request

# Configuration
INVITE_CODE_LENGTH = int(os.environ.get('INVITE_CODE_LENGTH', '8'))

MOBILE_PATTERN = re.compile(r'^[0-9]{10}$')


def generate_invite_code():
    """Generate an uppercase invite code from a random UUID"""
    return uuid.uuid4().hex[:INVITE_CODE_LENGTH].upper()


def is_valid_mobile(mobile):
    """Indian mobile numbers are exactly 10 digits, no country code"""
    return bool(MOBILE_PATTERN.fullmatch(mobile or ''))


def clean_optional(value):
    """Strip a free-text form value, mapping blanks to None"""
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def json_body():
    """Request JSON object, or an empty dict for anything else"""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}
