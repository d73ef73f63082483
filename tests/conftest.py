"""Test fixtures."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from safir.logging import LogLevel, Profile, configure_logging

from adlookup.config import DirectoryConfig
from adlookup.factory import Factory
from adlookup.storage.memory import MemoryStorage

from .support.config import configure, data_path
from .support.constants import TEST_PASSWORD
from .support.ldap import MockLDAP, patch_ldap


@pytest.fixture(autouse=True)
def environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Set default values of environment variables for testing."""
    monkeypatch.setenv("ADLOOKUP_PASSWORD", TEST_PASSWORD)


@pytest.fixture(autouse=True)
def json_logging() -> None:
    """Log in JSON so that tests can parse log messages."""
    configure_logging(
        name="adlookup",
        profile=Profile.production,
        log_level=LogLevel.DEBUG,
        add_timestamp=True,
    )


@pytest.fixture
def config() -> DirectoryConfig:
    """Return the default test configuration."""
    return configure("ldap")


@pytest.fixture
def factory(config: DirectoryConfig) -> Factory:
    """Return a factory that talks to the mock LDAP server."""
    return Factory(config)


@pytest.fixture
def memory_factory(
    config: DirectoryConfig, memory_storage: MemoryStorage
) -> Factory:
    """Return a factory that uses the in-memory directory."""
    return Factory(config, storage=memory_storage)


@pytest.fixture
def memory_storage() -> MemoryStorage:
    """Return an in-memory directory loaded with the test users."""
    return MemoryStorage.from_file(data_path("fake-ldap-data.json"))


@pytest.fixture
def mock_ldap() -> Iterator[MockLDAP]:
    """Replace the bonsai LDAP client with a mock."""
    yield from patch_ldap(TEST_PASSWORD)
