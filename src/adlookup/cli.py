"""Command-line interface for directory lookups."""

from __future__ import annotations

import json
from pathlib import Path

import click
import structlog
from safir.asyncio import run_with_asyncio
from safir.click import display_help

from .config import DirectoryConfig
from .constants import CONFIG_PATH
from .exceptions import DirectoryError
from .factory import Factory
from .models.enums import AccountStatus
from .storage.memory import MemoryStorage

__all__ = [
    "help",
    "main",
    "profile",
    "status",
]


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(message="%(version)s")
def main() -> None:
    """Look up users in Active Directory."""


@main.command()
@click.argument("topic", default=None, required=False, nargs=1)
@click.pass_context
def help(ctx: click.Context, topic: str | None) -> None:
    """Show help for any command."""
    display_help(main, ctx, topic)


@main.command()
@click.argument("username")
@click.option(
    "--config-path",
    envvar="ADLOOKUP_CONFIG_PATH",
    type=click.Path(path_type=Path),
    default=CONFIG_PATH,
    help="Directory configuration file.",
)
@click.option(
    "--users-file",
    envvar="ADLOOKUP_USERS_FILE",
    type=click.Path(path_type=Path, exists=True, dir_okay=False),
    default=None,
    help="Serve users from this JSON file instead of the LDAP server.",
)
@run_with_asyncio
async def profile(
    username: str, *, config_path: Path, users_file: Path | None
) -> None:
    """Print the profile of a user as JSON."""
    factory = _create_factory(config_path, users_file)
    profile_service = factory.create_profile_service()
    try:
        user_profile = await profile_service.find_profile(username)
    except DirectoryError as e:
        raise click.ClickException(str(e)) from e
    click.echo(json.dumps(user_profile.to_dict(), indent=2))


@main.command()
@click.argument("username")
@click.option(
    "--config-path",
    envvar="ADLOOKUP_CONFIG_PATH",
    type=click.Path(path_type=Path),
    default=CONFIG_PATH,
    help="Directory configuration file.",
)
@click.option(
    "--users-file",
    envvar="ADLOOKUP_USERS_FILE",
    type=click.Path(path_type=Path, exists=True, dir_okay=False),
    default=None,
    help="Serve users from this JSON file instead of the LDAP server.",
)
@run_with_asyncio
async def status(
    username: str, *, config_path: Path, users_file: Path | None
) -> None:
    """Print whether an account is enabled.

    Exits with status 1 unless the account exists and is enabled.
    """
    factory = _create_factory(config_path, users_file)
    account_service = factory.create_account_status_service()
    account_status = await account_service.get_status(username)
    click.echo(account_status.value)
    if account_status != AccountStatus.enabled:
        raise click.exceptions.Exit(1)


def _create_factory(config_path: Path, users_file: Path | None) -> Factory:
    """Load the configuration and create a component factory."""
    config = DirectoryConfig.from_file(config_path)
    config.configure_logging()
    logger = structlog.get_logger("adlookup")
    storage = None
    if users_file:
        storage = MemoryStorage.from_file(users_file, logger)
    return Factory(config, storage=storage, logger=logger)
