"""Base class for directory storage backends.

The query services only talk to the directory through this interface, so
the live LDAP backend can be swapped for the in-memory backend without any
changes to the service logic.
"""

from __future__ import annotations

from abc import ABCMeta, abstractmethod
from collections.abc import Sequence
from contextlib import AbstractAsyncContextManager
from typing import Any

from ..models.directory import DirectoryEntry

__all__ = ["DirectoryStorage"]


class DirectoryStorage(metaclass=ABCMeta):
    """Interface to a directory that can be searched for user objects."""

    @abstractmethod
    def open_session(self) -> AbstractAsyncContextManager[Any]:
        """Open an authenticated session to the directory.

        Returns
        -------
        contextlib.AbstractAsyncContextManager
            Context manager yielding the session. The session is closed when
            the context exits.

        Raises
        ------
        DirectoryProtocolError
            Raised on entering the context if the session could not be
            established.
        """

    @abstractmethod
    async def search(
        self, base_dn: str, username: str, attributes: Sequence[str]
    ) -> list[DirectoryEntry]:
        """Search for the user object with the given account name.

        Parameters
        ----------
        base_dn
            Base DN of the subtree to search.
        username
            Account name (``sAMAccountName``) to search for.
        attributes
            Attributes to retrieve.

        Returns
        -------
        list of DirectoryEntry
            Matching entries, possibly empty, as returned by the directory.

        Raises
        ------
        DirectoryProtocolError
            Raised if the session could not be established or the search
            failed.
        """
