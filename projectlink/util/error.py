"""Errors raised outside the domain: settings and infrastructure."""


class UtilError(Exception):
    """Base for infrastructure errors. Never mapped to a client response."""


class ConfigurationError(UtilError):
    """Settings are unsafe or inconsistent for the chosen environment."""


class DatabaseUnavailableError(UtilError):
    """The database did not accept connections within the retry budget."""
