"""Shared type aliases for vouch."""

from .common import Classification, ErrorCode, MessageFormatter, Metadata

__all__ = [
    "Classification",
    "ErrorCode",
    "MessageFormatter",
    "Metadata",
]
