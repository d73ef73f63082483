"""Service layer for account state."""

from __future__ import annotations

from structlog.stdlib import BoundLogger

from ..constants import ACCOUNT_CONTROL_ATTRIBUTE
from ..models.enums import AccountStatus, UserAccountControl
from ..storage.base import DirectoryStorage
from ..util import (
    extract_attribute,
    is_account_disabled,
    parse_account_control,
)

__all__ = ["AccountStatusService"]


class AccountStatusService:
    """Check whether accounts exist and are enabled.

    Parameters
    ----------
    storage
        Directory backend to search.
    base_dn
        Base DN under which to search for users.
    logger
        Logger to use.
    """

    def __init__(
        self, *, storage: DirectoryStorage, base_dn: str, logger: BoundLogger
    ) -> None:
        self._storage = storage
        self._base_dn = base_dn
        self._logger = logger

    async def get_status(self, username: str) -> AccountStatus:
        """Determine the state of an account.

        Never raises. Directory failures are logged and reported as
        `AccountStatus.unavailable`.

        Parameters
        ----------
        username
            Account name (``sAMAccountName``) of the user.

        Returns
        -------
        AccountStatus
            State of the account.
        """
        logger = self._logger.bind(user=username)
        try:
            entries = await self._storage.search(
                self._base_dn, username, [ACCOUNT_CONTROL_ATTRIBUTE]
            )
        except Exception as e:
            logger.exception("Cannot check account state", error=str(e))
            return AccountStatus.unavailable
        if not entries:
            logger.warning("User not found in directory")
            return AccountStatus.not_found

        entry = entries[0]
        if not entry.get(ACCOUNT_CONTROL_ATTRIBUTE):
            msg = f"{ACCOUNT_CONTROL_ATTRIBUTE} attribute not found for user"
            logger.warning(msg)
            return AccountStatus.unknown
        value = extract_attribute(entry, ACCOUNT_CONTROL_ATTRIBUTE)
        try:
            account_control = parse_account_control(value)
        except ValueError as e:
            msg = f"Invalid {ACCOUNT_CONTROL_ATTRIBUTE} value"
            logger.exception(msg, value=value, error=str(e))
            return AccountStatus.unknown

        known = UserAccountControl(account_control & 0xFFFFFFFF)
        flags = [f.name for f in known]
        if is_account_disabled(account_control):
            logger.info("User account is disabled", flags=flags)
            return AccountStatus.disabled
        logger.info("User account is enabled", flags=flags)
        return AccountStatus.enabled

    async def is_enabled(self, username: str) -> bool:
        """Check whether an account exists and is enabled.

        Never raises. Every failure, including a missing user, an
        indeterminate account state, or an unreachable directory, returns
        `False`. Use `get_status` to tell those cases apart.

        Parameters
        ----------
        username
            Account name (``sAMAccountName``) of the user.

        Returns
        -------
        bool
            `True` if the account exists and is enabled, `False` otherwise.
        """
        status = await self.get_status(username)
        return status == AccountStatus.enabled
