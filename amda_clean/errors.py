"""Exceptions raised by the archive cleaner."""


class AmdaCleanError(Exception):
    """Base class for errors the CLI reports without a traceback."""


class ConfigError(AmdaCleanError):
    """The configuration file is unreadable or names unknown settings."""


class ExtractionError(AmdaCleanError):
    """The source archive could not be expanded."""
