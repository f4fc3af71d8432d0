"""Immutable validation scope threaded through rule evaluation.

A scope carries the ambient state used when constructing errors: the
current path, the error config, the error dictionary and the message
formatter. Scopes form a parent chain; every ``with_*`` call returns a
child layer holding only the value it sets, and lookups walk from the
child towards the root. Children shadow parents, never the reverse.
"""

from __future__ import annotations

from typing import Any

from vouch.config import ErrorConfig, merge_error_config
from vouch.dictionary import ErrorDictionary, default_dictionary
from vouch.formatting import format_message
from vouch.path.segments import FieldSegment, IndexSegment, PathSegment, extract_segments
from vouch.path.serializers import DEFAULT
from vouch.types import MessageFormatter

_PATH = "path"
_CONFIG = "config"
_DICTIONARY = "dictionary"
_FORMATTER = "formatter"


class ValidationScope:
    """One layer of ambient validation state."""

    __slots__ = ("_key", "_parent", "_value")

    def __init__(self, parent: ValidationScope | None = None, key: str = "", value: Any = None) -> None:
        self._parent = parent
        self._key = key
        self._value = value

    @classmethod
    def root(cls) -> ValidationScope:
        """Return an empty scope: no path, no config, built-in dictionary."""
        return cls()

    @classmethod
    def of(cls, scope: ValidationScope | None) -> ValidationScope:
        return scope if scope is not None else cls()

    @property
    def parent(self) -> ValidationScope | None:
        return self._parent

    def _lookup(self, key: str) -> Any:
        layer: ValidationScope | None = self
        while layer is not None:
            if layer._key == key:
                return layer._value
            layer = layer._parent
        return None

    @property
    def path(self) -> PathSegment | None:
        """Leaf segment of the current traversal position."""
        return self._lookup(_PATH)

    @property
    def config(self) -> ErrorConfig | None:
        return self._lookup(_CONFIG)

    @property
    def dictionary(self) -> ErrorDictionary:
        found = self._lookup(_DICTIONARY)
        return found if found is not None else default_dictionary()

    @property
    def formatter(self) -> MessageFormatter:
        found = self._lookup(_FORMATTER)
        return found if found is not None else format_message

    def with_field(self, name: str) -> ValidationScope:
        return ValidationScope(self, _PATH, FieldSegment(name=name, parent=self.path))

    def with_index(self, value: int) -> ValidationScope:
        return ValidationScope(self, _PATH, IndexSegment(index=value, parent=self.path))

    def with_path(self, segment: PathSegment | None) -> ValidationScope:
        """Replace the current path with *segment* (``None`` resets to the root)."""
        return ValidationScope(self, _PATH, segment)

    def with_config(self, config: ErrorConfig | None) -> ValidationScope:
        """Merge *config* over the inherited config; ``None`` is a no-op."""
        if config is None:
            return self
        return ValidationScope(self, _CONFIG, merge_error_config(self.config, config))

    def without_callback(self) -> ValidationScope:
        """Return a child scope whose config has no callback."""
        config = self.config
        if config is None or config.callback is None:
            return self
        return ValidationScope(self, _CONFIG, config.without_callback())

    def with_dictionary(self, dictionary: ErrorDictionary) -> ValidationScope:
        if dictionary is None:
            raise ValueError("expected dictionary to not be None")
        return ValidationScope(self, _DICTIONARY, dictionary)

    def with_formatter(self, formatter: MessageFormatter) -> ValidationScope:
        if formatter is None:
            raise ValueError("expected formatter to not be None")
        return ValidationScope(self, _FORMATTER, formatter)

    def __repr__(self) -> str:
        return f"ValidationScope(path={DEFAULT.serialize(extract_segments(self.path))!r})"
