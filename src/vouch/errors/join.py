"""Combine, flatten and filter validation errors."""

from __future__ import annotations

import logging
from typing import Any

from vouch.errors.base import MultiError, ValidationError, flatten_errors
from vouch.errors.collection import ValidationErrorCollection
from vouch.path.serializers import DEFAULT, PathSerializer

logger = logging.getLogger(__name__)


def as_validation_errors(value: Any) -> tuple[ValidationError, ...]:
    """Convert *value* into a flat tuple of atomic errors.

    ``None`` and values outside the validation error family convert to an
    empty tuple. Any :class:`ValidationError` is accepted: composites and
    legacy collections are spliced, everything else is kept as one member.
    """
    if value is None:
        return ()
    if isinstance(value, ValidationError):
        return flatten_errors((value,))
    if isinstance(value, ValidationErrorCollection):
        return flatten_errors(value)
    logger.debug("Dropping non-validation error: %s", type(value).__name__)
    return ()


def join(*errors: Any) -> ValidationError | None:
    """Join errors into one value, splicing composites instead of nesting them.

    Returns ``None`` when nothing remains, the single member itself when
    exactly one remains, and a :class:`MultiError` otherwise. Member order
    is the order of first appearance.
    """
    members = [member for err in errors for member in as_validation_errors(err)]
    if not members:
        return None
    if len(members) == 1:
        return members[0]
    return MultiError(members)


def unwrap(err: Any) -> tuple[ValidationError, ...]:
    """Uniform list view: ``()`` for ``None``, ``(err,)`` for an atomic error, members otherwise."""
    return as_validation_errors(err)


def for_path(err: Any, path: str) -> ValidationError | None:
    """Errors whose default-form path equals *path* exactly, joined; ``None`` if none match."""
    return for_path_as(err, path, DEFAULT)


def for_path_as(err: Any, path: str, serializer: PathSerializer) -> ValidationError | None:
    """Like :func:`for_path`, comparing paths rendered by *serializer*."""
    return join(*(member for member in unwrap(err) if member.path_as(serializer) == path))
