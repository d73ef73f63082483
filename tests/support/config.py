"""Build test configuration for adlookup."""

from __future__ import annotations

from pathlib import Path

from adlookup.config import DirectoryConfig

__all__ = [
    "config_path",
    "configure",
    "data_path",
]


def data_path(filename: str) -> Path:
    """Return the path to a test data file.

    Parameters
    ----------
    filename
        Path of the file relative to the test data directory.

    Returns
    -------
    Path
        The path to that file.
    """
    return Path(__file__).parent.parent / "data" / filename


def config_path(filename: str) -> Path:
    """Return the path to a test configuration file.

    Parameters
    ----------
    filename
        The base name of a test configuration file.

    Returns
    -------
    Path
        The path to that file.
    """
    return data_path("config") / (filename + ".yaml")


def configure(filename: str) -> DirectoryConfig:
    """Load a test configuration.

    The bind password must already be set in the environment.

    Parameters
    ----------
    filename
        Configuration file to use.

    Returns
    -------
    DirectoryConfig
        The new configuration.
    """
    return DirectoryConfig.from_file(config_path(filename))
