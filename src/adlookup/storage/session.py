"""Authenticated sessions to the LDAP server."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import bonsai
import structlog
from bonsai import LDAPClient
from bonsai.asyncio import AIOLDAPConnection
from structlog.stdlib import BoundLogger

from ..config import DirectoryConfig
from ..exceptions import DirectoryProtocolError

__all__ = ["LDAPSessionProvider"]


class LDAPSessionProvider:
    """Open authenticated connections to the LDAP server.

    A new connection is opened and bound for every session. Connections are
    never pooled or shared.

    Parameters
    ----------
    config
        Directory configuration.
    logger
        Logger for debug messages and errors.
    """

    def __init__(
        self, config: DirectoryConfig, logger: BoundLogger | None = None
    ) -> None:
        self._config = config
        logger = logger or structlog.get_logger("adlookup")
        self._logger = logger.bind(ldap_url=config.url)

    def create_client(self) -> LDAPClient:
        """Create an LDAP client with the configured bind settings.

        bonsai only speaks LDAP version 3, so there is no protocol version to
        set.

        Returns
        -------
        bonsai.LDAPClient
            Client that will do a simple bind as ``DOMAIN\\username`` and will
            not ask the server to chase referrals.
        """
        client = LDAPClient(self._config.url)
        client.set_credentials(
            "SIMPLE",
            user=self._config.bind_user,
            password=self._config.password.get_secret_value(),
        )
        client.set_server_chase_referrals(False)
        return client

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AIOLDAPConnection]:
        """Open and bind a connection to the LDAP server.

        The connection is closed when the context exits, whether or not the
        body raised an exception.

        Yields
        ------
        bonsai.asyncio.AIOLDAPConnection
            Bound connection to the LDAP server.

        Raises
        ------
        DirectoryProtocolError
            Raised if the server could not be reached or rejected the bind.
        """
        client = self.create_client()
        logger = self._logger.bind(ldap_user=self._config.bind_user)
        try:
            conn = await client.connect(
                is_async=True, timeout=self._config.timeout
            )
        except (bonsai.LDAPError, OSError, asyncio.TimeoutError) as e:
            msg = "Cannot connect to LDAP server"
            logger.exception(msg, error=str(e))
            raise DirectoryProtocolError(f"{msg}: {e}") from e
        logger.info("Connected to LDAP server")
        try:
            yield conn
        finally:
            conn.close()
