"""Cross-module type aliases."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Literal

type ErrorCode = str
type Classification = Literal["validation", "permission", "internal"]
type Metadata = Mapping[str, Any]
type MessageFormatter = Callable[..., str]
