"""Load error dictionary overrides from YAML files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from vouch.constants.classification import VALID_CLASSIFICATIONS
from vouch.constants.dictionary import (
    ALLOWED_ENTRY_KEYS,
    ALLOWED_TOP_KEYS,
    DICTIONARY_TOP_KEY,
    REQUIRED_ENTRY_KEYS,
)
from vouch.dictionary.model import ErrorDictionary, ErrorEntry, default_dictionary
from vouch.exceptions import ConfigError

logger = logging.getLogger(__name__)


def load_dictionary(path: Path, base: ErrorDictionary | None = None) -> ErrorDictionary:
    """Load a YAML dictionary file and layer its entries over *base*.

    *base* defaults to the built-in dictionary. Raises ConfigError when the
    file is missing, unreadable or malformed.
    """
    path = path.resolve()
    if not path.exists():
        raise ConfigError(f"Dictionary file not found: {path}")

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Failed to read dictionary file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML dictionary file at {path}: {exc}") from exc

    dictionary = base if base is not None else default_dictionary()
    for code, entry in parse_dictionary(raw, str(path)).items():
        dictionary = dictionary.with_code(code, entry)
        logger.debug("Loaded dictionary entry: %s (%s)", code, entry.classification)
    return dictionary


def parse_dictionary(raw: Any, source: str = "<dictionary>") -> dict[str, ErrorEntry]:
    """Validate an already-parsed dictionary document and return its entries."""
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"{source}: dictionary file must be a YAML mapping")

    unknown_top = set(raw.keys()) - ALLOWED_TOP_KEYS
    if unknown_top:
        raise ConfigError(f"{source}: unknown top-level keys: {sorted(unknown_top)}")

    codes_raw = raw.get(DICTIONARY_TOP_KEY, {})
    if codes_raw is None:
        codes_raw = {}
    if not isinstance(codes_raw, dict):
        raise ConfigError(f"{source}: '{DICTIONARY_TOP_KEY}' must be a mapping")

    entries: dict[str, ErrorEntry] = {}
    for code, entry_raw in codes_raw.items():
        if not isinstance(code, str) or not code.strip():
            raise ConfigError(f"{source}: error codes must be non-empty strings, got {code!r}")
        entries[code] = _parse_entry(entry_raw, f"{source}: {DICTIONARY_TOP_KEY}.{code}")
    return entries


def _parse_entry(value: Any, where: str) -> ErrorEntry:
    if not isinstance(value, dict):
        raise ConfigError(f"{where} must be a mapping")

    unknown = set(value.keys()) - ALLOWED_ENTRY_KEYS
    if unknown:
        raise ConfigError(f"{where}: unknown keys: {sorted(unknown)}")
    for key in sorted(REQUIRED_ENTRY_KEYS):
        if key not in value:
            raise ConfigError(f"{where}: missing required key '{key}'")

    classification = value["classification"]
    if not isinstance(classification, str) or classification not in VALID_CLASSIFICATIONS:
        raise ConfigError(
            f"{where}: classification must be one of {sorted(VALID_CLASSIFICATIONS)}, got {classification!r}"
        )

    return ErrorEntry(
        classification=classification,
        short=_ensure_string(value["short"], f"{where}.short"),
        pattern=_ensure_string(value["message"], f"{where}.message"),
    )


def _ensure_string(value: Any, key_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"{key_name} must be a string")
    return value
