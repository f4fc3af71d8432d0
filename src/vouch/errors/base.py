"""Validation error values: the atomic error and the joined composite.

Both shapes satisfy the :class:`ValidationError` contract. A composite
delegates every per-error accessor to its first member, except
:meth:`~ValidationError.unwrap`, which exposes all members, and the
classification predicates, which aggregate over all members.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Mapping, Sequence
from types import MappingProxyType
from typing import Any

from vouch.constants.classification import CLASSIFICATION_RANK, INTERNAL, PERMISSION, VALIDATION
from vouch.dictionary import default_dictionary
from vouch.exceptions import EmptyCollectionError, VouchError
from vouch.path.segments import PathSegment, extract_segments
from vouch.path.serializers import DEFAULT, PathSerializer
from vouch.types import Classification, ErrorCode


class ValidationError(VouchError, ABC):
    """Contract shared by atomic and composite validation errors."""

    @property
    @abstractmethod
    def code(self) -> ErrorCode: ...

    @property
    @abstractmethod
    def short_error(self) -> str:
        """Brief constant description suitable for API responses."""

    @property
    @abstractmethod
    def docs_uri(self) -> str: ...

    @property
    @abstractmethod
    def trace_uri(self) -> str: ...

    @property
    @abstractmethod
    def meta(self) -> Mapping[str, Any]: ...

    @property
    @abstractmethod
    def params(self) -> tuple[Any, ...]:
        """Format arguments used to render the long message."""

    @property
    @abstractmethod
    def classification(self) -> Classification | None: ...

    @abstractmethod
    def path_as(self, serializer: PathSerializer) -> str:
        """Serialize the error's path with *serializer*."""

    @abstractmethod
    def unwrap(self) -> tuple[ValidationError, ...]:
        """Members of a composite; ``()`` for an atomic error."""

    @property
    def path(self) -> str:
        """Path in the default ``/a/b/0`` form."""
        return self.path_as(DEFAULT)

    def internal(self) -> bool:
        return self.classification == INTERNAL

    def permission(self) -> bool:
        return self.classification == PERMISSION

    def validation(self) -> bool:
        return self.classification == VALIDATION


class SingleError(ValidationError):
    """One validation failure at one path. Immutable after construction."""

    def __init__(
        self,
        *,
        code: ErrorCode,
        message: str,
        path: PathSegment | None = None,
        short: str = "",
        docs_uri: str = "",
        trace_uri: str = "",
        meta: Mapping[str, Any] | None = None,
        params: Sequence[Any] = (),
        classification: Classification | None = None,
    ) -> None:
        super().__init__(message)
        self._code = code
        self._segment = path
        self._message = message
        self._short = short
        self._docs_uri = docs_uri
        self._trace_uri = trace_uri
        self._meta: Mapping[str, Any] = MappingProxyType(dict(meta or {}))
        self._params = tuple(params)
        self._classification: Classification = (
            classification if classification is not None else default_dictionary().classification(code)
        )

    def __str__(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return f"SingleError(code={self._code!r}, path={self.path!r}, message={self._message!r})"

    @property
    def code(self) -> ErrorCode:
        return self._code

    @property
    def segment(self) -> PathSegment | None:
        """Leaf path segment the error was raised at."""
        return self._segment

    @property
    def message(self) -> str:
        return self._message

    @property
    def short_error(self) -> str:
        return self._short

    @property
    def docs_uri(self) -> str:
        return self._docs_uri

    @property
    def trace_uri(self) -> str:
        return self._trace_uri

    @property
    def meta(self) -> Mapping[str, Any]:
        return self._meta

    @property
    def params(self) -> tuple[Any, ...]:
        return self._params

    @property
    def classification(self) -> Classification:
        return self._classification

    def path_as(self, serializer: PathSerializer) -> str:
        return serializer.serialize(extract_segments(self._segment))

    def unwrap(self) -> tuple[ValidationError, ...]:
        return ()


class MultiError(ValidationError):
    """Ordered, flat group of atomic errors produced by :func:`vouch.join`.

    Never construct an empty one for a caller: "no errors" is ``None``.
    Rendering an empty group raises :class:`EmptyCollectionError`.
    """

    def __init__(self, members: Iterable[ValidationError]) -> None:
        self._members = flatten_errors(members)
        super().__init__(*self._members)

    def __str__(self) -> str:
        first = self._first()
        if len(self._members) > 1:
            return f"{first} (and {len(self._members) - 1} more)"
        return str(first)

    def __repr__(self) -> str:
        return f"MultiError({list(self._members)!r})"

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[ValidationError]:
        return iter(self._members)

    def _first(self) -> ValidationError:
        if not self._members:
            raise EmptyCollectionError("empty error group; return None instead of an empty group")
        return self._members[0]

    @property
    def members(self) -> tuple[ValidationError, ...]:
        return self._members

    @property
    def code(self) -> ErrorCode:
        return self._first().code

    @property
    def short_error(self) -> str:
        return self._first().short_error

    @property
    def docs_uri(self) -> str:
        return self._first().docs_uri

    @property
    def trace_uri(self) -> str:
        return self._first().trace_uri

    @property
    def meta(self) -> Mapping[str, Any]:
        return self._first().meta

    @property
    def params(self) -> tuple[Any, ...]:
        return self._first().params

    @property
    def classification(self) -> Classification | None:
        return aggregate_classification(self._members)

    def path_as(self, serializer: PathSerializer) -> str:
        return self._first().path_as(serializer)

    def unwrap(self) -> tuple[ValidationError, ...]:
        return self._members


def aggregate_classification(errors: Iterable[ValidationError]) -> Classification | None:
    """Most severe classification among *errors*; ``None`` when there are none.

    Internal outranks permission, which outranks validation.
    """
    worst: Classification | None = None
    for err in errors:
        candidate = err.classification
        if candidate is None:
            continue
        if worst is None or CLASSIFICATION_RANK[candidate] > CLASSIFICATION_RANK[worst]:
            worst = candidate
    return worst


def flatten_errors(errors: Iterable[ValidationError]) -> tuple[ValidationError, ...]:
    """Splice composites into their members, keeping first-appearance order.

    An error whose :meth:`~ValidationError.unwrap` is empty is atomic and kept
    as is, whatever its concrete type. Empty groups contribute nothing.
    """
    flat: list[ValidationError] = []
    for err in errors:
        members = err.unwrap()
        if not members:
            if not isinstance(err, MultiError):
                flat.append(err)
            continue
        for member in members:
            flat.extend((member,) if member is err else flatten_errors((member,)))
    return tuple(flat)
