"""Legacy list-shaped error aggregate.

Kept for callers that predate :func:`vouch.join`. Unlike a joined error it
does not flatten its members and it can be mutated with :meth:`append`.
New code should use :func:`vouch.join` and :func:`vouch.unwrap`.

Not safe for concurrent mutation: code that evaluates rules in parallel
must build separate errors and combine them with :func:`vouch.join`.
"""

from __future__ import annotations

import warnings
from collections.abc import Iterator

from vouch.errors.base import ValidationError
from vouch.exceptions import EmptyCollectionError, VouchError
from vouch.path.serializers import DEFAULT, PathSerializer


class ValidationErrorCollection(VouchError):
    """Ordered list of validation errors that can itself be raised."""

    def __init__(self, errors: list[ValidationError] | None = None) -> None:
        self._errors: list[ValidationError] = list(errors or [])
        super().__init__()

    def __str__(self) -> str:
        if len(self._errors) > 1:
            return f"{self._errors[0]} (and {len(self._errors) - 1} more)"
        if self._errors:
            return str(self._errors[0])
        raise EmptyCollectionError("empty collection; return None instead of an empty collection")

    def __repr__(self) -> str:
        return f"ValidationErrorCollection({self._errors!r})"

    def __len__(self) -> int:
        return len(self._errors)

    def __iter__(self) -> Iterator[ValidationError]:
        return iter(self._errors)

    def __getitem__(self, position: int) -> ValidationError:
        return self._errors[position]

    def append(self, err: ValidationError) -> None:
        self._errors.append(err)

    def size(self) -> int:
        """Deprecated: use ``len(collection)``."""
        warnings.warn("size() is deprecated, use len()", DeprecationWarning, stacklevel=2)
        return len(self._errors)

    def all(self) -> list[ValidationError]:
        """Deprecated: iterate the collection or call :meth:`unwrap`."""
        warnings.warn("all() is deprecated, iterate or use unwrap()", DeprecationWarning, stacklevel=2)
        return list(self._errors)

    def unwrap(self) -> list[ValidationError]:
        return list(self._errors)

    def first(self) -> ValidationError | None:
        return self._errors[0] if self._errors else None

    def for_path(self, path: str) -> ValidationErrorCollection | None:
        """Errors whose default-form path equals *path*, or ``None``."""
        return self.for_path_as(path, DEFAULT)

    def for_path_as(self, path: str, serializer: PathSerializer) -> ValidationErrorCollection | None:
        matched = [err for err in self._errors if err.path_as(serializer) == path]
        if not matched:
            return None
        return ValidationErrorCollection(matched)

    def internal(self) -> bool:
        return any(err.internal() for err in self._errors)

    def permission(self) -> bool:
        if self.internal():
            return False
        return any(err.permission() for err in self._errors)

    def validation(self) -> bool:
        if not self._errors:
            return False
        return not self.internal() and not self.permission()


def collection(*errors: ValidationError) -> ValidationErrorCollection:
    """Create a legacy collection from zero or more errors."""
    return ValidationErrorCollection(list(errors))
