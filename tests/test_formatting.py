"""Tests for the default message formatter."""

from __future__ import annotations

import pytest

from vouch.formatting import format_message


@pytest.mark.parametrize(
    ("template", "args", "expected"),
    [
        pytest.param("must be at least {}", (10,), "must be at least 10", id="auto"),
        pytest.param("expected {} but got {}", ("int", "str"), "expected int but got str", id="two-auto"),
        pytest.param("got {1}, wanted {0}", ("a", "b"), "got b, wanted a", id="numbered"),
        pytest.param("ratio {:.2f}", (0.5,), "ratio 0.50", id="format-spec"),
        pytest.param("no placeholders", (10,), "no placeholders", id="surplus-args"),
        pytest.param("literal {braces}", (), "literal {braces}", id="no-args"),
    ],
)
def test_renders_positional_placeholders(template: str, args: tuple[object, ...], expected: str) -> None:
    assert format_message(template, *args) == expected


def test_named_field_is_left_literal() -> None:
    assert format_message("use format {YYYY-MM-DD}, got {}", "x") == "use format {YYYY-MM-DD}, got x"


def test_missing_argument_leaves_placeholder() -> None:
    assert format_message("expected {} but got {}", "int") == "expected int but got {}"
    assert format_message("slot {3}", "a") == "slot {3}"


def test_bad_format_spec_leaves_placeholder() -> None:
    assert format_message("value {:d}", "text") == "value {:d}"


def test_unbalanced_braces_are_left_alone() -> None:
    assert format_message("open { and close }", 1) == "open { and close }"
