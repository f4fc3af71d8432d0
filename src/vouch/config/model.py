"""Per-call error customisation and its child-over-parent merge."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from vouch.types import ErrorCode

if TYPE_CHECKING:
    from vouch.errors import ValidationError
    from vouch.scope import ValidationScope

type ErrorCallback = Callable[[ValidationScope, ValidationError], ValidationError]


@dataclass(frozen=True)
class ErrorConfig:
    """Overrides applied to errors constructed within a scope.

    Empty strings and ``None`` mean "not set". Instances are immutable;
    the ``with_*`` methods return a new config merged over this one.
    """

    short: str = ""
    long: str = ""
    docs_uri: str = ""
    trace_uri: str = ""
    code: ErrorCode | None = None
    meta: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    callback: ErrorCallback | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.meta, MappingProxyType):
            object.__setattr__(self, "meta", MappingProxyType(dict(self.meta)))

    def __hash__(self) -> int:
        # Meta values must be hashable, as with any tuple member.
        return hash(
            (
                self.short,
                self.long,
                self.docs_uri,
                self.trace_uri,
                self.code,
                frozenset(self.meta.items()),
                self.callback,
            )
        )

    @classmethod
    def of(cls, config: ErrorConfig | None) -> ErrorConfig:
        """Return *config*, or an all-empty config when it is ``None``."""
        return config if config is not None else cls()

    def is_empty(self) -> bool:
        return self == ErrorConfig()

    def with_error_message(self, short: str, long: str) -> ErrorConfig:
        return merge_error_config(self, ErrorConfig(short=short, long=long))

    def with_docs_uri(self, uri: str) -> ErrorConfig:
        return merge_error_config(self, ErrorConfig(docs_uri=uri))

    def with_trace_uri(self, uri: str) -> ErrorConfig:
        return merge_error_config(self, ErrorConfig(trace_uri=uri))

    def with_code(self, code: ErrorCode) -> ErrorConfig:
        return merge_error_config(self, ErrorConfig(code=code))

    def with_meta(self, key: str, value: Any) -> ErrorConfig:
        return merge_error_config(self, ErrorConfig(meta={key: value}))

    def with_callback(self, fn: ErrorCallback) -> ErrorConfig:
        return merge_error_config(self, ErrorConfig(callback=fn))

    def without_callback(self) -> ErrorConfig:
        """Return a copy of this config with the callback cleared."""
        return ErrorConfig(
            short=self.short,
            long=self.long,
            docs_uri=self.docs_uri,
            trace_uri=self.trace_uri,
            code=self.code,
            meta=self.meta,
        )


def merge_error_config(parent: ErrorConfig | None, child: ErrorConfig | None) -> ErrorConfig | None:
    """Merge *child* over *parent*.

    Non-empty child scalars win, metadata maps are unioned with child keys
    overriding, and the child's callback wins when set. Either side may be
    ``None``; when both are, the result is ``None``.
    """
    if child is None:
        return parent
    if parent is None:
        return child

    return ErrorConfig(
        short=child.short or parent.short,
        long=child.long or parent.long,
        docs_uri=child.docs_uri or parent.docs_uri,
        trace_uri=child.trace_uri or parent.trace_uri,
        code=child.code if child.code is not None else parent.code,
        meta={**parent.meta, **child.meta},
        callback=child.callback if child.callback is not None else parent.callback,
    )
