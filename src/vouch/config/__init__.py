"""Error customisation config carried by validation scopes."""

from __future__ import annotations

from vouch.config.model import ErrorCallback, ErrorConfig, merge_error_config

__all__ = [
    "ErrorCallback",
    "ErrorConfig",
    "merge_error_config",
]
