"""Exceptions raised while building a feed."""


class FeedError(Exception):
    """Base class for every fatal error the tool reports."""


class ConfigError(FeedError):
    """The channel config file is missing, unreadable or malformed."""


class SourceError(FeedError):
    """The episode source file is missing, unreadable or not a valid episode list."""


class OutputError(FeedError):
    """The feed could not be serialized or written to the target path."""
