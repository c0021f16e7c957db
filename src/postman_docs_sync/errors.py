"""Errors raised by a sync run.

All of them are click exceptions, so the CLI prints "Error: <message>"
and exits with status 1.
"""

import click


class SyncError(click.ClickException):
    """Base class for failures that abort a sync run."""


class ConfigError(SyncError):
    """Required configuration is missing or invalid."""


class CollectionNotFoundError(SyncError):
    """No collection matches the configured name."""

    def __init__(self, name: str):
        super().__init__(f'Collection "{name}" not found.')
        self.name = name


class ApiError(SyncError):
    """A Postman API call failed."""
