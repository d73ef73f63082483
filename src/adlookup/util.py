"""General utility functions for directory entries."""

from __future__ import annotations

import re

from bonsai.utils import escape_filter_exp

from .constants import NO_DATA, USER_FILTER_TEMPLATE
from .models.directory import DirectoryEntry
from .models.enums import UserAccountControl

__all__ = [
    "build_user_filter",
    "extract_attribute",
    "is_account_disabled",
    "parse_account_control",
]

_ACCOUNT_CONTROL_REGEX = re.compile("-?[0-9]+")


def build_user_filter(username: str, *, escape: bool = False) -> str:
    """Build the search filter for a user object.

    Parameters
    ----------
    username
        Account name (``sAMAccountName``) to search for.
    escape
        Whether to escape LDAP filter special characters in the account name.

    Returns
    -------
    str
        LDAP search filter matching user objects with that account name.

    Notes
    -----
    By default the account name is substituted verbatim, so a name containing
    ``*``, ``(``, ``)``, ``\\``, or NUL changes the meaning of the filter.
    Callers that accept untrusted account names should enable escaping.
    """
    if escape:
        username = escape_filter_exp(username)
    return USER_FILTER_TEMPLATE.format(username)


def extract_attribute(entry: DirectoryEntry, attribute: str) -> str:
    """Get the first value of an attribute from a directory entry.

    Parameters
    ----------
    entry
        Raw directory entry.
    attribute
        Name of the attribute.

    Returns
    -------
    str
        First value of the attribute, or ``No Data`` if the attribute is
        missing or has no values. Binary values are decoded as UTF-8.
    """
    values = entry.get(attribute)
    if not values:
        return NO_DATA
    value = values[0]
    if isinstance(value, bytes):
        return value.decode(errors="replace")
    return str(value)


def is_account_disabled(account_control: int) -> bool:
    """Determine whether ``userAccountControl`` flags mark a disabled account.

    Parameters
    ----------
    account_control
        Value of the ``userAccountControl`` attribute.

    Returns
    -------
    bool
        `True` if the ``ACCOUNTDISABLE`` bit is set, `False` otherwise. All
        other bits are ignored.
    """
    flag = UserAccountControl.ACCOUNTDISABLE
    return (account_control & flag) == flag


def parse_account_control(value: str) -> int:
    """Parse the value of a ``userAccountControl`` attribute.

    Only ASCII decimal integers, optionally negative, that fit in 32 bits
    (signed or unsigned) are accepted.

    Parameters
    ----------
    value
        Raw attribute value.

    Returns
    -------
    int
        Parsed account control flags.

    Raises
    ------
    ValueError
        Raised if the value is not a decimal integer in the 32-bit range.
    """
    value = value.strip()
    if not _ACCOUNT_CONTROL_REGEX.fullmatch(value):
        raise ValueError(f"Not a decimal integer: {value!r}")
    account_control = int(value)
    if not -(2**31) <= account_control < 2**32:
        raise ValueError(f"Out of 32-bit range: {value}")
    return account_control
