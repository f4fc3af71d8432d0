"""Shared exception hierarchy for vouch."""

from __future__ import annotations

from .base import VouchError
from .collection import EmptyCollectionError
from .config import ConfigError

__all__ = [
    "ConfigError",
    "EmptyCollectionError",
    "VouchError",
]
