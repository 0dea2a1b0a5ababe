from .auth import (hash_password, verify_password, authenticate, current_account,
                   login_required, admin_required)
from .registration import register_account
from .errors import ServiceError, RegistrationError, InviteError, AccountError

__all__ = ['hash_password', 'verify_password', 'authenticate', 'current_account',
           'login_required', 'admin_required', 'register_account',
           'ServiceError', 'RegistrationError', 'InviteError', 'AccountError']
