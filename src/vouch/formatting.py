"""Default message formatter used when a scope does not supply one."""

from __future__ import annotations

import re
from typing import Any

PLACEHOLDER_PATTERN: re.Pattern[str] = re.compile(r"\{(\d*)(?::([^{}]*))?\}")


def format_message(template: str, *args: Any) -> str:
    """Safe positional formatting - unfillable placeholders left as literal text.

    ``{}`` takes the next argument and ``{N}`` the N-th, both with an optional
    ``:spec``. Placeholders without a matching argument, named fields such as
    ``{YYYY-MM-DD}`` and surplus arguments are ignored, so rendering never
    raises on a template that does not line up with its arguments.
    """
    if not args:
        return template

    position = 0

    def _substitute(match: re.Match[str]) -> str:
        nonlocal position
        slot, spec = match.group(1), match.group(2) or ""
        if slot:
            chosen = int(slot)
        else:
            chosen = position
            position += 1
        if chosen >= len(args):
            return match.group(0)
        try:
            return format(args[chosen], spec)
        except (TypeError, ValueError):
            return match.group(0)

    return PLACEHOLDER_PATTERN.sub(_substitute, template)
