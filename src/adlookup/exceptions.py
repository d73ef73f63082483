"""Exceptions for adlookup."""

from __future__ import annotations

from safir.slack.blockkit import SlackException

__all__ = [
    "DirectoryError",
    "DirectoryProtocolError",
    "UserNotFoundError",
]


class DirectoryError(SlackException):
    """Base class for errors talking to the directory.

    The directory may be affected by an outage, so the query services catch
    these and only log them. The username, if known, is carried in the
    ``user`` attribute.
    """


class DirectoryProtocolError(DirectoryError):
    """Binding to or searching the directory server failed.

    Raised for unreachable hosts, TLS or port failures, rejected credentials,
    and errors sending a search request.
    """


class UserNotFoundError(DirectoryError):
    """No directory entry matched the requested account name."""
