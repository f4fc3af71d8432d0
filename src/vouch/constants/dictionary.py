"""Schema constants for YAML error dictionary files."""

from __future__ import annotations

DICTIONARY_TOP_KEY: str = "codes"

ALLOWED_TOP_KEYS: frozenset[str] = frozenset({DICTIONARY_TOP_KEY})

REQUIRED_ENTRY_KEYS: frozenset[str] = frozenset({"classification", "short", "message"})

ALLOWED_ENTRY_KEYS: frozenset[str] = REQUIRED_ENTRY_KEYS
