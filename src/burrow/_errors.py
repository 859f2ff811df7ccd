"""Burrow error hierarchy.

All burrow-specific errors inherit from BurrowError for easy catching.
"""


class BurrowError(Exception):
    """Base error for all burrow operations."""


class ConfigError(BurrowError):
    """Invalid or missing configuration."""


class RouteConfigError(ConfigError):
    """The route set is empty or not a sequence of routes.

    Raised at load time, never at generation time: an empty routes
    directory still generates a valid module.
    """


class ScanError(BurrowError):
    """A routes directory could not be read during a scan."""


class OutputError(BurrowError):
    """The generated file could not be written."""
