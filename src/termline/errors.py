"""Exceptions raised by termline."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """Invalid construction-time option (negative history size, no provider)."""


class TerminalUnavailableError(OSError):
    """The terminal cannot be used: stdin is not a TTY or output is closed."""
