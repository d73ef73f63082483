"""LDAP storage layer for adlookup."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from contextlib import AbstractAsyncContextManager

import bonsai
import structlog
from bonsai import LDAPSearchScope
from bonsai.asyncio import AIOLDAPConnection
from structlog.stdlib import BoundLogger

from ..config import DirectoryConfig
from ..exceptions import DirectoryProtocolError
from ..models.directory import DirectoryEntry
from ..util import build_user_filter
from .base import DirectoryStorage
from .session import LDAPSessionProvider

__all__ = ["LDAPStorage"]


class LDAPStorage(DirectoryStorage):
    """LDAP storage layer.

    Every search opens its own connection through the session provider and
    closes it before returning.

    Parameters
    ----------
    config
        Directory configuration.
    sessions
        Provider of authenticated LDAP connections.
    logger
        Logger for debug messages and errors.
    """

    def __init__(
        self,
        config: DirectoryConfig,
        sessions: LDAPSessionProvider,
        logger: BoundLogger | None = None,
    ) -> None:
        self._config = config
        self._sessions = sessions
        logger = logger or structlog.get_logger("adlookup")
        self._logger = logger.bind(ldap_url=config.url)

    def open_session(self) -> AbstractAsyncContextManager[AIOLDAPConnection]:
        return self._sessions.session()

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
            Attributes to retrieve. The server returns only these.

        Returns
        -------
        list of DirectoryEntry
            Matching entries exactly as returned by the server.

        Raises
        ------
        DirectoryProtocolError
            Raised if connecting, binding, or running the search failed.
        """
        search = build_user_filter(
            username, escape=self._config.escape_filter_values
        )
        logger = self._logger.bind(
            ldap_attrs=list(attributes),
            ldap_base=base_dn,
            ldap_search=search,
            user=username,
        )

        try:
            async with self.open_session() as conn:
                logger.info("Sending LDAP search")
                return await conn.search(
                    base=base_dn,
                    scope=LDAPSearchScope.SUB,
                    filter_exp=search,
                    attrlist=list(attributes),
                    timeout=self._config.timeout,
                )
        except DirectoryProtocolError as e:
            e.user = username
            raise
        except (bonsai.LDAPError, OSError, asyncio.TimeoutError) as e:
            logger.exception("Cannot query LDAP", error=str(e))
            msg = f"Error querying LDAP: {e}"
            raise DirectoryProtocolError(msg, username) from e
