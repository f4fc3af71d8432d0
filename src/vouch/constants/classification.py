"""Error classifications and their severity ordering."""

from __future__ import annotations

from vouch.types import Classification

VALIDATION: Classification = "validation"
PERMISSION: Classification = "permission"
INTERNAL: Classification = "internal"

VALID_CLASSIFICATIONS: frozenset[str] = frozenset({VALIDATION, PERMISSION, INTERNAL})

# Higher rank wins when aggregating.
CLASSIFICATION_RANK: dict[str, int] = {
    VALIDATION: 1,
    PERMISSION: 2,
    INTERNAL: 3,
}
