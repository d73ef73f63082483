"""Tests for the user profile service."""

from __future__ import annotations

import bonsai
import pytest
from _pytest.logging import LogCaptureFixture

from adlookup.constants import NO_DATA
from adlookup.exceptions import DirectoryProtocolError, UserNotFoundError
from adlookup.factory import Factory
from adlookup.models.directory import UserProfile
from adlookup.storage.memory import MemoryStorage

from ..support.constants import TEST_BASE_DN
from ..support.ldap import MockLDAP
from ..support.logging import parse_log


@pytest.mark.asyncio
async def test_get_profile(
    memory_factory: Factory, caplog: LogCaptureFixture
) -> None:
    profile_service = memory_factory.create_profile_service()

    caplog.clear()
    profile = await profile_service.get_profile("jdoe")
    assert profile == UserProfile(
        email_address=NO_DATA,
        user_name="John",
        user_family="Doe",
        user_full_name="John Doe",
        user_title="Software Engineer",
    )

    profile = await profile_service.get_profile("asmith")
    assert profile.user_full_name == "Alice Smith"
    assert profile.user_title == "Product Manager"

    messages = parse_log(caplog)
    assert [m for m in messages if m["severity"] == "info"] == [
        {
            "event": "User found in directory",
            "full_name": "John Doe",
            "severity": "info",
            "title": "Software Engineer",
            "user": "jdoe",
        },
        {
            "event": "User found in directory",
            "full_name": "Alice Smith",
            "severity": "info",
            "title": "Product Manager",
            "user": "asmith",
        },
    ]


@pytest.mark.asyncio
async def test_partial_profile(memory_factory: Factory) -> None:
    profile_service = memory_factory.create_profile_service()

    profile = await profile_service.get_profile("bjones")
    assert profile == UserProfile(
        user_name="Bob", user_full_name="Bob Jones"
    )
    assert profile.user_family == NO_DATA
    assert profile.user_title == NO_DATA
    assert profile.email_address == NO_DATA


@pytest.mark.asyncio
async def test_not_found(
    memory_factory: Factory, caplog: LogCaptureFixture
) -> None:
    profile_service = memory_factory.create_profile_service()

    caplog.clear()
    profile = await profile_service.get_profile("nonexistentuser")
    assert profile == UserProfile()
    assert profile.to_dict() == {
        "email_address": NO_DATA,
        "user_name": NO_DATA,
        "user_family": NO_DATA,
        "user_full_name": NO_DATA,
        "user_title": NO_DATA,
    }
    messages = parse_log(caplog)
    assert messages[-1] == {
        "event": "User not found in directory",
        "severity": "warning",
        "user": "nonexistentuser",
    }

    with pytest.raises(UserNotFoundError) as excinfo:
        await profile_service.find_profile("nonexistentuser")
    assert excinfo.value.user == "nonexistentuser"


@pytest.mark.asyncio
async def test_directory_failure(
    memory_factory: Factory,
    memory_storage: MemoryStorage,
    caplog: LogCaptureFixture,
) -> None:
    profile_service = memory_factory.create_profile_service()
    memory_storage.fail_on("jdoe")

    caplog.clear()
    profile = await profile_service.get_profile("jdoe")
    assert profile == UserProfile()
    messages = parse_log(caplog)
    assert messages[-1]["event"] == "Cannot retrieve user profile"
    assert messages[-1]["severity"] == "error"
    assert messages[-1]["user"] == "jdoe"

    with pytest.raises(DirectoryProtocolError):
        await profile_service.find_profile("jdoe")

    # Other users are unaffected.
    profile = await profile_service.get_profile("asmith")
    assert profile.user_name == "Alice"

    memory_storage.set_unavailable()
    assert await profile_service.get_profile("asmith") == UserProfile()


@pytest.mark.asyncio
async def test_ldap_profile(factory: Factory, mock_ldap: MockLDAP) -> None:
    mock_ldap.add_test_user(
        TEST_BASE_DN,
        "jdoe",
        {
            "givenName": ["John"],
            "sn": ["Doe"],
            "displayName": ["John Doe"],
            "title": ["Software Engineer"],
            "userAccountControl": ["512"],
        },
    )
    profile_service = factory.create_profile_service()

    profile = await profile_service.get_profile("jdoe")
    assert profile.user_full_name == "John Doe"
    assert mock_ldap.searches[0]["attributes"] == [
        "title",
        "givenName",
        "sn",
        "displayName",
    ]

    mock_ldap.fail_search = bonsai.LDAPError("Server is busy")
    assert await profile_service.get_profile("jdoe") == UserProfile()
    assert mock_ldap.open_sessions == 0
