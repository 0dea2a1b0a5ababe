from .database import db
from .account import Account, ROLES, ADMIN_ROLES, NAME_MAX_LENGTH
from .invite import Invite
from .leader_profile import LeaderProfile

__all__ = ['db', 'Account', 'Invite', 'LeaderProfile', 'ROLES', 'ADMIN_ROLES', 'NAME_MAX_LENGTH']
