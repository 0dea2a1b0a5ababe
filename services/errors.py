"""
Domain errors raised by the registration workflow, the invite ledger and
account administration.

Each error carries the HTTP status it maps to and a translation key for the
message shown to the client. Blueprints turn them into JSON responses.
"""
from utils.i18n import t


class ServiceError(Exception):
    status_code = 400
    message_key = None

    def __init__(self, **params):
        self.params = params
        super().__init__(self.code)

    @property
    def code(self):
        return type(self).__name__

    @property
    def message(self):
        return t(self.message_key, **self.params)

    def to_response(self):
        return {'error': self.message}, self.status_code


# Registration failures, in the order they are checked

class RegistrationError(ServiceError):
    pass


class MissingField(RegistrationError):
    message_key = 'missing_fields'


class InvalidMobileFormat(RegistrationError):
    message_key = 'invalid_mobile'


class DuplicateMobile(RegistrationError):
    message_key = 'duplicate_mobile'


class InvalidInviteCode(RegistrationError):
    message_key = 'invalid_invite'


class InviteAlreadyUsed(RegistrationError):
    message_key = 'invite_used'


class InviteExpired(RegistrationError):
    message_key = 'invite_expired'


class WeakPassword(RegistrationError):
    message_key = 'weak_password'


class NameTooLong(RegistrationError):
    message_key = 'name_too_long'


class StorageFailure(RegistrationError):
    """Unexpected database error; details go to the log, never to the client."""
    status_code = 500
    message_key = 'registration_failed'


# Invite administration

class InviteError(ServiceError):
    pass


class InvalidInviteRole(InviteError):
    message_key = 'invite_role_required'


class InvalidInviteExpiry(InviteError):
    message_key = 'invite_expiry_invalid'


class InviteRoleForbidden(InviteError):
    status_code = 403
    message_key = 'invite_admin_only_super'


class InviteNotFound(InviteError):
    status_code = 404
    message_key = 'invite_not_found'


class InviteInUse(InviteError):
    message_key = 'invite_delete_used'


# Account administration

class AccountError(ServiceError):
    pass


class AccountIdRequired(AccountError):
    message_key = 'account_id_required'


class NoAccountChanges(AccountError):
    message_key = 'account_no_changes'


class AccountNotFound(AccountError):
    status_code = 404
    message_key = 'account_not_found'
