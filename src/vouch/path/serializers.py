"""Path serializers rendering segment sequences into text.

Every serializer is a stateless, pure function of the root-to-leaf
segment sequence. None of them look at error codes, configs or
dictionaries.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from vouch.constants.path import (
    BRACKET_QUOTE_TRIGGERS,
    DOT_SEPARATOR,
    JSON_POINTER_ESCAPES,
    JSONPATH_ROOT,
    POINTER_SEPARATOR,
)
from vouch.path.segments import IndexSegment, PathSegment


class PathSerializer(Protocol):
    """Anything that turns a root-to-leaf segment sequence into a string."""

    def serialize(self, segments: Sequence[PathSegment]) -> str: ...


class DefaultPathSerializer:
    """``/a/b/0`` style paths.

    Each segment gets a leading ``/``, except when the path starts with an
    index: then no leading slash is emitted at all (``0/1``).
    """

    def serialize(self, segments: Sequence[PathSegment]) -> str:
        if not segments:
            return ""
        joined = POINTER_SEPARATOR.join(str(seg) for seg in segments)
        if isinstance(segments[0], IndexSegment):
            return joined
        return POINTER_SEPARATOR + joined


class JSONPointerSerializer:
    """RFC 6901 JSON Pointer paths, e.g. ``/a~1b/c~0d/0``."""

    def serialize(self, segments: Sequence[PathSegment]) -> str:
        if not segments:
            return ""
        parts = [
            str(seg.index) if isinstance(seg, IndexSegment) else escape_json_pointer(seg.name) for seg in segments
        ]
        return POINTER_SEPARATOR + POINTER_SEPARATOR.join(parts)


class JSONPathSerializer:
    """JSONPath expressions, e.g. ``$.users[0]['first.name']``.

    The empty path renders as ``$`` (the whole document), unlike the other
    serializers which render it as an empty string.
    """

    def serialize(self, segments: Sequence[PathSegment]) -> str:
        return JSONPATH_ROOT + _render_dotted(segments, leading_dot=True)


class DotNotationSerializer:
    """Dot notation without a prefix, e.g. ``users[0].name``."""

    def serialize(self, segments: Sequence[PathSegment]) -> str:
        return _render_dotted(segments, leading_dot=False)


def escape_json_pointer(name: str) -> str:
    """Escape a field name as an RFC 6901 reference token."""
    for raw, escaped in JSON_POINTER_ESCAPES:
        name = name.replace(raw, escaped)
    return name


def quote_field(name: str) -> str:
    """Return *name* bracket-quoted when it holds ``.``, ``[`` or ``]``, else unchanged."""
    if any(char in name for char in BRACKET_QUOTE_TRIGGERS):
        escaped = name.replace("'", "\\'")
        return f"['{escaped}']"
    return name


def _render_dotted(segments: Sequence[PathSegment], *, leading_dot: bool) -> str:
    parts: list[str] = []
    for position, seg in enumerate(segments):
        if isinstance(seg, IndexSegment):
            parts.append(f"[{seg.index}]")
            continue
        rendered = quote_field(seg.name)
        needs_dot = leading_dot or position > 0
        if needs_dot and not rendered.startswith("["):
            parts.append(DOT_SEPARATOR)
        parts.append(rendered)
    return "".join(parts)


DEFAULT: DefaultPathSerializer = DefaultPathSerializer()
JSON_POINTER: JSONPointerSerializer = JSONPointerSerializer()
JSON_PATH: JSONPathSerializer = JSONPathSerializer()
DOT_NOTATION: DotNotationSerializer = DotNotationSerializer()
