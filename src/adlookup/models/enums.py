"""Enums used in adlookup models."""

from __future__ import annotations

from enum import Enum, IntFlag

__all__ = [
    "AccountStatus",
    "UserAccountControl",
]


class AccountStatus(Enum):
    """Result of checking whether an account is enabled."""

    enabled = "enabled"
    """The account exists and is enabled."""

    disabled = "disabled"
    """The account exists and is administratively disabled."""

    not_found = "not_found"
    """No account with that name exists."""

    unknown = "unknown"
    """The account exists but its state could not be determined."""

    unavailable = "unavailable"
    """The directory could not be queried."""


class UserAccountControl(IntFlag):
    """Flags in the Active Directory ``userAccountControl`` attribute.

    Only `ACCOUNTDISABLE` is used to decide whether an account is enabled.
    The rest are named for log output.
    """

    SCRIPT = 0x00000001
    ACCOUNTDISABLE = 0x00000002
    HOMEDIR_REQUIRED = 0x00000008
    LOCKOUT = 0x00000010
    PASSWD_NOTREQD = 0x00000020
    PASSWD_CANT_CHANGE = 0x00000040
    ENCRYPTED_TEXT_PWD_ALLOWED = 0x00000080
    TEMP_DUPLICATE_ACCOUNT = 0x00000100
    NORMAL_ACCOUNT = 0x00000200
    INTERDOMAIN_TRUST_ACCOUNT = 0x00000800
    WORKSTATION_TRUST_ACCOUNT = 0x00001000
    SERVER_TRUST_ACCOUNT = 0x00002000
    DONT_EXPIRE_PASSWORD = 0x00010000
    MNS_LOGON_ACCOUNT = 0x00020000
    SMARTCARD_REQUIRED = 0x00040000
    TRUSTED_FOR_DELEGATION = 0x00080000
    NOT_DELEGATED = 0x00100000
    USE_DES_KEY_ONLY = 0x00200000
    DONT_REQ_PREAUTH = 0x00400000
    PASSWORD_EXPIRED = 0x00800000
    TRUSTED_TO_AUTH_FOR_DELEGATION = 0x01000000
