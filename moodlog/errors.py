"""Exception types for MoodLog."""


class MoodLogError(Exception):
    """Base class for MoodLog errors."""


class StorageError(MoodLogError):
    """Raised when the entry store cannot read or write entries."""


class ConfigError(MoodLogError):
    """Raised when the configuration file cannot be loaded."""
