from .helpers import generate_invite_code, is_valid_mobile, clean_optional, json_body
from .i18n import get_language, t

__all__ = ['generate_invite_code', 'is_valid_mobile', 'clean_optional', 'json_body', 'get_language', 't']
