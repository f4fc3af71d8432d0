"""Path rendering constants shared by the path serializers."""

from __future__ import annotations

POINTER_SEPARATOR: str = "/"
JSONPATH_ROOT: str = "$"
DOT_SEPARATOR: str = "."

# Field names containing any of these are rendered in bracket-quoted form.
BRACKET_QUOTE_TRIGGERS: frozenset[str] = frozenset({".", "[", "]"})

# RFC 6901 escapes; order matters, "~" must be escaped before "/".
JSON_POINTER_ESCAPES: tuple[tuple[str, str], ...] = (
    ("~", "~0"),
    ("/", "~1"),
)
