"""Top-level error types."""

from __future__ import annotations


class ConfigError(Exception):
    """Raised when a session configuration file fails loading or validation."""
