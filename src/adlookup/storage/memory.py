"""In-memory directory backend.

Serves user objects from a list of records instead of an LDAP server. Intended
for test suites and local development, where it stands in for `LDAPStorage`
behind the same interface.
"""

from __future__ import annotations

import json
from collections.abc import AsyncIterator, Iterable, Mapping, Sequence
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, Self

import structlog
from structlog.stdlib import BoundLogger

from ..exceptions import DirectoryProtocolError
from ..models.directory import DirectoryEntry
from ..util import build_user_filter
from .base import DirectoryStorage

__all__ = ["MemoryStorage"]


class MemoryStorage(DirectoryStorage):
    """Directory backend holding user records in memory.

    Each record maps attribute names to a value or a list of values and must
    contain ``sAMAccountName``. Account names and attribute names are matched
    case-insensitively, as Active Directory does. Returned entries use the
    attribute names as requested.

    Parameters
    ----------
    users
        User records to serve.
    logger
        Logger for debug messages.
    """

    def __init__(
        self,
        users: Iterable[Mapping[str, Any]] = (),
        logger: BoundLogger | None = None,
    ) -> None:
        self._logger = logger or structlog.get_logger("adlookup")
        self._users: dict[str, dict[str, list[str]]] = {}
        self._fail: set[str] = set()
        self._unavailable = False
        for user in users:
            self.add_user(user)

    @classmethod
    def from_file(cls, path: Path, logger: BoundLogger | None = None) -> Self:
        """Load user records from a JSON file.

        Parameters
        ----------
        path
            Path to a JSON file containing an object whose ``users`` key
            holds a list of user records.
        logger
            Logger for debug messages.

        Returns
        -------
        MemoryStorage
            Backend serving those records.
        """
        data = json.loads(path.read_text())
        return cls(data.get("users", []), logger)

    def add_user(self, user: Mapping[str, Any]) -> None:
        """Add or replace a user record.

        Parameters
        ----------
        user
            Attributes of the user. Scalar values are stored as single-valued
            attributes and `None` values are dropped.
        """
        entry: dict[str, list[str]] = {}
        for attr, value in user.items():
            if value is None:
                continue
            if isinstance(value, list):
                entry[attr] = [str(v) for v in value]
            else:
                entry[attr] = [str(value)]
        self._users[entry["sAMAccountName"][0].lower()] = entry

    def fail_on(self, username: str) -> None:
        """Make searches for the given account name fail.

        Parameters
        ----------
        username
            Account name for which searches should raise
            `~adlookup.exceptions.DirectoryProtocolError`.
        """
        self._fail.add(username.lower())

    def set_unavailable(self, unavailable: bool = True) -> None:
        """Make every session fail as if the server were unreachable.

        Parameters
        ----------
        unavailable
            Whether sessions should fail.
        """
        self._unavailable = unavailable

    @asynccontextmanager
    async def open_session(self) -> AsyncIterator[Self]:
        if self._unavailable:
            raise DirectoryProtocolError("Directory server is unavailable")
        yield self

    async def search(
        self, base_dn: str, username: str, attributes: Sequence[str]
    ) -> list[DirectoryEntry]:
        search = build_user_filter(username)
        logger = self._logger.bind(ldap_base=base_dn, ldap_search=search)
        async with self.open_session():
            if username.lower() in self._fail:
                msg = "Simulated directory failure"
                raise DirectoryProtocolError(msg, username)
            logger.debug("Searching in-memory directory")
            user = self._users.get(username.lower())
            if user is None:
                return []
            values = {a.lower(): v for a, v in user.items()}
            entry: dict[str, list[str]] = {}
            for attr in attributes:
                if attr.lower() in values:
                    entry[attr] = values[attr.lower()]
            return [entry]
