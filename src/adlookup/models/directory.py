"""Data models for directory entries."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import asdict, dataclass

from ..constants import NO_DATA

__all__ = ["DirectoryEntry", "UserProfile"]

type DirectoryEntry = Mapping[str, Sequence[str | bytes]]
"""One raw entry returned by a directory search.

Maps attribute names to the ordered list of that attribute's values.
"""


@dataclass(frozen=True, slots=True)
class UserProfile:
    """Profile information for a user from the directory.

    Every field holds ``No Data`` if the corresponding attribute was missing
    from the directory entry or the user could not be found.
    """

    email_address: str = NO_DATA
    """Email address. Not currently retrieved from the directory."""

    user_name: str = NO_DATA
    """Given name, from ``givenName``."""

    user_family: str = NO_DATA
    """Family name, from ``sn``."""

    user_full_name: str = NO_DATA
    """Display name, from ``displayName``."""

    user_title: str = NO_DATA
    """Job title, from ``title``."""

    def to_dict(self) -> dict[str, str]:
        """Convert to a dictionary suitable for JSON output."""
        return asdict(self)
