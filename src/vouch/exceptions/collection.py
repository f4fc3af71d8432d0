"""Exceptions raised while composing validation errors."""

from __future__ import annotations

from vouch.exceptions.base import VouchError


class EmptyCollectionError(VouchError, RuntimeError):
    """Raised when an empty error aggregate is rendered or constructed.

    An aggregate with no members must never reach a caller: "no errors" is
    always ``None``. Hitting this exception is a programming error upstream.
    """
