from __future__ import annotations


class SnakeError(Exception):
    """Base class for errors raised by snake_arcade."""


class ConfigError(SnakeError, ValueError):
    """A grid size or tick interval outside the accepted range."""
