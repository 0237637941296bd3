"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Configuration error."""

    pass


class StorageError(UtilError):
    """Visitor-local storage could not be read or written."""

    pass
