"""Exceptions raised by sdf2mesh."""


class ConfigurationError(ValueError):
    """Invalid grid dimensions, sample buffers or implicit-function output."""
