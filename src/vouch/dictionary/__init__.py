"""Error dictionary: code to classification and message templates.

This package facade re-exports the public names so that callers can use
``from vouch.dictionary import ...``.
"""

from __future__ import annotations

from vouch.dictionary.loader import load_dictionary, parse_dictionary
from vouch.dictionary.model import (
    UNKNOWN_ENTRY,
    ErrorDictionary,
    ErrorEntry,
    default_dictionary,
    new_dictionary,
)

__all__ = [
    "UNKNOWN_ENTRY",
    "ErrorDictionary",
    "ErrorEntry",
    "default_dictionary",
    "load_dictionary",
    "new_dictionary",
    "parse_dictionary",
]
