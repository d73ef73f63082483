"""Service layer for user profiles."""

from __future__ import annotations

from structlog.stdlib import BoundLogger

from ..constants import PROFILE_ATTRIBUTES
from ..exceptions import UserNotFoundError
from ..models.directory import UserProfile
from ..storage.base import DirectoryStorage
from ..util import extract_attribute

__all__ = ["UserProfileService"]


class UserProfileService:
    """Retrieve user profile information from the directory.

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

    async def find_profile(self, username: str) -> UserProfile:
        """Get the profile of a user, distinguishing failures.

        Parameters
        ----------
        username
            Account name (``sAMAccountName``) of the user.

        Returns
        -------
        UserProfile
            Profile of the user, with ``No Data`` for any missing attributes.

        Raises
        ------
        UserNotFoundError
            Raised if no user with that account name exists.
        DirectoryProtocolError
            Raised if the directory could not be queried.
        """
        entries = await self._storage.search(
            self._base_dn, username, PROFILE_ATTRIBUTES
        )
        if not entries:
            self._logger.warning("User not found in directory", user=username)
            raise UserNotFoundError(f"User {username} not found", username)
        entry = entries[0]
        profile = UserProfile(
            user_name=extract_attribute(entry, "givenName"),
            user_family=extract_attribute(entry, "sn"),
            user_full_name=extract_attribute(entry, "displayName"),
            user_title=extract_attribute(entry, "title"),
        )
        self._logger.info(
            "User found in directory",
            user=username,
            full_name=profile.user_full_name,
            title=profile.user_title,
        )
        return profile

    async def get_profile(self, username: str) -> UserProfile:
        """Get the profile of a user.

        Never raises. Failures are logged and, like a user who does not
        exist, produce a profile with every field set to ``No Data``. Use
        `find_profile` to tell those cases apart.

        Parameters
        ----------
        username
            Account name (``sAMAccountName``) of the user.

        Returns
        -------
        UserProfile
            Profile of the user.
        """
        try:
            return await self.find_profile(username)
        except UserNotFoundError:
            return UserProfile()
        except Exception as e:
            msg = "Cannot retrieve user profile"
            self._logger.exception(msg, user=username, error=str(e))
            return UserProfile()
