"""Constants for adlookup."""

from __future__ import annotations

__all__ = [
    "ACCOUNT_CONTROL_ATTRIBUTE",
    "CONFIG_PATH",
    "LDAP_PORT",
    "NO_DATA",
    "PROFILE_ATTRIBUTES",
    "USER_FILTER_TEMPLATE",
]

ACCOUNT_CONTROL_ATTRIBUTE = "userAccountControl"
"""Attribute holding the Active Directory account control flags."""

CONFIG_PATH = "/etc/adlookup/adlookup.yaml"
"""Default configuration path."""

LDAP_PORT = 389
"""Default port of the directory server."""

NO_DATA = "No Data"
"""Value substituted for attributes that are missing from an entry."""

PROFILE_ATTRIBUTES = ["title", "givenName", "sn", "displayName"]
"""Attributes requested when fetching a user profile, in request order."""

USER_FILTER_TEMPLATE = "(&(objectClass=user)(sAMAccountName={}))"
"""Search filter for a user object by account name.

The account name is substituted into the template as-is unless filter escaping
has been enabled in the configuration.
"""
