"""Configuration-related exceptions."""

from __future__ import annotations

from vouch.exceptions.base import VouchError


class ConfigError(VouchError, ValueError):
    """Raised when an error dictionary file is missing or malformed."""
