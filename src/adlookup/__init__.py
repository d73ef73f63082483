"""Look up user information and account state in Active Directory."""

from .config import DirectoryConfig
from .exceptions import (
    DirectoryError,
    DirectoryProtocolError,
    UserNotFoundError,
)
from .factory import Factory
from .models.directory import DirectoryEntry, UserProfile
from .models.enums import AccountStatus, UserAccountControl
from .services.account import AccountStatusService
from .services.profile import UserProfileService
from .storage.base import DirectoryStorage
from .storage.ldap import LDAPStorage
from .storage.memory import MemoryStorage
from .storage.session import LDAPSessionProvider

__all__ = [
    "AccountStatus",
    "AccountStatusService",
    "DirectoryConfig",
    "DirectoryEntry",
    "DirectoryError",
    "DirectoryProtocolError",
    "DirectoryStorage",
    "Factory",
    "LDAPSessionProvider",
    "LDAPStorage",
    "MemoryStorage",
    "UserAccountControl",
    "UserNotFoundError",
    "UserProfile",
    "UserProfileService",
]
