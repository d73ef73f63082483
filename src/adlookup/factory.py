"""Create adlookup components."""

from __future__ import annotations

import structlog
from structlog.stdlib import BoundLogger

from .config import DirectoryConfig
from .services.account import AccountStatusService
from .services.profile import UserProfileService
from .storage.base import DirectoryStorage
from .storage.ldap import LDAPStorage
from .storage.session import LDAPSessionProvider

__all__ = ["Factory"]


class Factory:
    """Build adlookup components.

    Uses the configuration to construct the directory backend and the query
    services built on top of it.

    Parameters
    ----------
    config
        Directory configuration.
    storage
        Directory backend to use instead of the LDAP server, such as
        `~adlookup.storage.memory.MemoryStorage` in tests.
    logger
        Logger to use. If not given, the ``adlookup`` structlog logger will
        be used.
    """

    def __init__(
        self,
        config: DirectoryConfig,
        *,
        storage: DirectoryStorage | None = None,
        logger: BoundLogger | None = None,
    ) -> None:
        self._config = config
        self._storage = storage
        self._logger = logger or structlog.get_logger("adlookup")

    def create_account_status_service(self) -> AccountStatusService:
        """Create a service for checking account state.

        Returns
        -------
        AccountStatusService
            Newly-created account state service.
        """
        return AccountStatusService(
            storage=self.create_storage(),
            base_dn=self._config.base_dn,
            logger=self._logger,
        )

    def create_profile_service(self) -> UserProfileService:
        """Create a service for retrieving user profiles.

        Returns
        -------
        UserProfileService
            Newly-created profile service.
        """
        return UserProfileService(
            storage=self.create_storage(),
            base_dn=self._config.base_dn,
            logger=self._logger,
        )

    def create_storage(self) -> DirectoryStorage:
        """Create the directory backend.

        Returns
        -------
        DirectoryStorage
            The backend passed to the constructor, if any, otherwise a new
            LDAP backend.
        """
        if self._storage:
            return self._storage
        sessions = LDAPSessionProvider(self._config, self._logger)
        return LDAPStorage(self._config, sessions, self._logger)
