"""Layered lookup table from error code to classification and messages."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from vouch.constants import codes, messages
from vouch.constants.classification import INTERNAL, PERMISSION, VALIDATION
from vouch.types import Classification, ErrorCode


@dataclass(frozen=True)
class ErrorEntry:
    """Metadata for one error code."""

    classification: Classification
    short: str
    pattern: str


UNKNOWN_ENTRY: ErrorEntry = ErrorEntry(INTERNAL, messages.SHORT_UNKNOWN, messages.LONG_UNKNOWN)

_DEFAULT_ENTRIES: Mapping[ErrorCode, ErrorEntry] = MappingProxyType(
    {
        codes.UNKNOWN: UNKNOWN_ENTRY,
        codes.INTERNAL: ErrorEntry(INTERNAL, messages.SHORT_INTERNAL, messages.LONG_INTERNAL),
        codes.TIMEOUT: ErrorEntry(INTERNAL, messages.SHORT_TIMEOUT, messages.LONG_TIMEOUT),
        codes.CANCELLED: ErrorEntry(INTERNAL, messages.SHORT_CANCELLED, messages.LONG_CANCELLED),
        codes.TYPE: ErrorEntry(VALIDATION, messages.SHORT_TYPE, messages.LONG_TYPE),
        codes.RANGE: ErrorEntry(VALIDATION, messages.SHORT_RANGE, messages.LONG_RANGE),
        codes.REQUIRED: ErrorEntry(VALIDATION, messages.SHORT_REQUIRED, messages.LONG_REQUIRED),
        codes.NULL: ErrorEntry(VALIDATION, messages.SHORT_NULL, messages.LONG_NULL),
        codes.UNEXPECTED: ErrorEntry(VALIDATION, messages.SHORT_UNEXPECTED, messages.LONG_UNEXPECTED),
        codes.MIN: ErrorEntry(VALIDATION, messages.SHORT_MIN, messages.LONG_MIN),
        codes.MAX: ErrorEntry(VALIDATION, messages.SHORT_MAX, messages.LONG_MAX),
        codes.MIN_EXCLUSIVE: ErrorEntry(VALIDATION, messages.SHORT_MIN_EXCLUSIVE, messages.LONG_MIN_EXCLUSIVE),
        codes.MAX_EXCLUSIVE: ErrorEntry(VALIDATION, messages.SHORT_MAX_EXCLUSIVE, messages.LONG_MAX_EXCLUSIVE),
        codes.MIN_LEN: ErrorEntry(VALIDATION, messages.SHORT_MIN_LEN, messages.LONG_MIN_LEN),
        codes.MAX_LEN: ErrorEntry(VALIDATION, messages.SHORT_MAX_LEN, messages.LONG_MAX_LEN),
        codes.PATTERN: ErrorEntry(VALIDATION, messages.SHORT_PATTERN, messages.LONG_PATTERN),
        codes.ENCODING: ErrorEntry(VALIDATION, messages.SHORT_ENCODING, messages.LONG_ENCODING),
        codes.EXPIRED: ErrorEntry(VALIDATION, messages.SHORT_EXPIRED, messages.LONG_EXPIRED),
        codes.FORBIDDEN: ErrorEntry(PERMISSION, messages.SHORT_FORBIDDEN, messages.LONG_FORBIDDEN),
        codes.NOT_ALLOWED: ErrorEntry(PERMISSION, messages.SHORT_NOT_ALLOWED, messages.LONG_NOT_ALLOWED),
        codes.VALUE_MISMATCH: ErrorEntry(VALIDATION, messages.SHORT_VALUE_MISMATCH, messages.LONG_VALUE_MISMATCH),
    }
)


class ErrorDictionary:
    """Immutable chain of code-to-entry layers.

    Lookups check the local layer first and then walk up through the
    parents. Overrides never mutate a layer; :meth:`with_code` stacks a new
    one-entry layer on top of the receiver.
    """

    __slots__ = ("_entries", "_parent")

    def __init__(
        self,
        entries: Mapping[ErrorCode, ErrorEntry] | None = None,
        parent: ErrorDictionary | None = None,
    ) -> None:
        self._entries: Mapping[ErrorCode, ErrorEntry] = MappingProxyType(dict(entries or {}))
        self._parent = parent

    @property
    def parent(self) -> ErrorDictionary | None:
        return self._parent

    def entry(self, code: ErrorCode) -> ErrorEntry:
        """Return the entry for *code*; unknown codes resolve to an internal entry."""
        layer: ErrorDictionary | None = self
        while layer is not None:
            found = layer._entries.get(code)
            if found is not None:
                return found
            layer = layer._parent
        return UNKNOWN_ENTRY

    def classification(self, code: ErrorCode) -> Classification:
        return self.entry(code).classification

    def short_error(self, code: ErrorCode) -> str:
        return self.entry(code).short

    def error_pattern(self, code: ErrorCode) -> str:
        return self.entry(code).pattern

    def with_code(self, code: ErrorCode, entry: ErrorEntry) -> ErrorDictionary:
        """Return a new dictionary layered over this one with *code* overridden."""
        return ErrorDictionary({code: entry}, parent=self)

    def codes(self) -> frozenset[ErrorCode]:
        """All codes visible through this chain."""
        visible: set[ErrorCode] = set()
        layer: ErrorDictionary | None = self
        while layer is not None:
            visible.update(layer._entries)
            layer = layer._parent
        return frozenset(visible)

    def __repr__(self) -> str:
        depth = 0
        layer = self._parent
        while layer is not None:
            depth += 1
            layer = layer._parent
        return f"ErrorDictionary(entries={len(self._entries)}, depth={depth})"


_DEFAULT_DICTIONARY: ErrorDictionary = ErrorDictionary(_DEFAULT_ENTRIES)


def default_dictionary() -> ErrorDictionary:
    """Return the process-wide built-in dictionary."""
    return _DEFAULT_DICTIONARY


def new_dictionary() -> ErrorDictionary:
    """Return an empty layer that inherits every built-in entry."""
    return ErrorDictionary(parent=_DEFAULT_DICTIONARY)
