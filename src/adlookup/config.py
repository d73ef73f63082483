"""Configuration for adlookup.

The directory settings are normally read from a YAML file, but every setting
can be overridden by an environment variable with the ``ADLOOKUP_`` prefix,
and the bind password is normally only injected that way. The configuration
object is passed explicitly to the components that need it; nothing reads it
from global state.
"""

from __future__ import annotations

from pathlib import Path
from typing import Self, override

import yaml
from pydantic import Field, SecretStr, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)
from safir.logging import LogLevel, configure_logging

from .constants import LDAP_PORT

__all__ = ["DirectoryConfig"]


class DirectoryConfig(BaseSettings):
    """Configuration for directory queries."""

    model_config = SettingsConfigDict(env_prefix="ADLOOKUP_", extra="forbid")

    host: str = Field(
        ...,
        title="Directory server host",
        description="Host name or IP address of the LDAP server",
    )

    port: int = Field(LDAP_PORT, title="Directory server port")

    base_dn: str = Field(
        ...,
        title="Base DN for user searches",
        description="Root of the subtree searched for user objects",
    )

    domain: str = Field(
        ...,
        title="Domain name",
        description=(
            "NetBIOS domain name used to qualify the bind username, as in"
            " ``DOMAIN\\username``"
        ),
    )

    username: str = Field(
        ...,
        title="Bind username",
        description="Account used for simple binds to the directory",
    )

    password: SecretStr = Field(
        ...,
        title="Bind password",
        description=(
            "Password for the bind username. Normally set via the"
            " ``ADLOOKUP_PASSWORD`` environment variable."
        ),
    )

    timeout: float | None = Field(
        None,
        title="Query timeout",
        description=(
            "Timeout in seconds applied to connecting and to each search. If"
            " not set, directory calls wait indefinitely."
        ),
    )

    escape_filter_values: bool = Field(
        False,
        title="Escape account names in search filters",
        description=(
            "If set, escape LDAP filter special characters in account names"
            " before substituting them into the search filter. Account names"
            " are otherwise used verbatim."
        ),
    )

    log_level: LogLevel = Field(
        LogLevel.INFO,
        title="Logging level",
        description="Python logging level",
    )

    @field_validator("timeout")
    @classmethod
    def _validate_timeout(cls, v: float | None) -> float | None:
        if v is not None and v <= 0:
            raise ValueError("timeout must be positive")
        return v

    @override
    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Override the sources of settings.

        Deactivate :file:`.env` and secret file support. Environment variables
        take precedence over init parameters, which come from the YAML
        configuration file.
        """
        return (env_settings, init_settings)

    @property
    def bind_user(self) -> str:
        """Domain-qualified username for simple binds."""
        return f"{self.domain}\\{self.username}"

    @property
    def url(self) -> str:
        """LDAP URL of the directory server."""
        return f"ldap://{self.host}:{self.port}"

    @classmethod
    def from_file(cls, path: Path) -> Self:
        """Construct a DirectoryConfig object from a configuration file.

        Parameters
        ----------
        path
            Path to the configuration file in YAML.

        Returns
        -------
        DirectoryConfig
            The corresponding `DirectoryConfig` object.
        """
        with path.open("r") as f:
            return cls(**(yaml.safe_load(f) or {}))

    def configure_logging(self) -> None:
        """Configure logging based on the adlookup configuration."""
        configure_logging(name="adlookup", log_level=self.log_level)
