"""Tests for explicit validation scopes."""

from __future__ import annotations

import sys

import pytest

from vouch import DEFAULT, ErrorConfig, ErrorEntry, ValidationScope, default_dictionary
from vouch.constants import codes
from vouch.formatting import format_message
from vouch.path import extract_segments, path_from


def _render(scope: ValidationScope) -> str:
    return DEFAULT.serialize(extract_segments(scope.path))


def test_root_scope_defaults(root_scope: ValidationScope) -> None:
    assert root_scope.path is None
    assert root_scope.config is None
    assert root_scope.dictionary is default_dictionary()
    assert root_scope.formatter is format_message


def test_of_none_is_root() -> None:
    scope = ValidationScope.of(None)
    assert scope.path is None
    existing = ValidationScope.root().with_field("a")
    assert ValidationScope.of(existing) is existing


def test_path_builds_on_parent(root_scope: ValidationScope) -> None:
    scope = root_scope.with_field("users").with_index(0).with_field("name")
    assert _render(scope) == "/users/0/name"


def test_child_path_does_not_leak_to_parent(root_scope: ValidationScope) -> None:
    parent = root_scope.with_field("a")
    parent.with_field("b")
    assert _render(parent) == "/a"


def test_sibling_scopes_share_parent_segment(root_scope: ValidationScope) -> None:
    parent = root_scope.with_field("items")
    first = parent.with_index(0)
    second = parent.with_index(1)
    assert first.path.parent is second.path.parent  # type: ignore[union-attr]
    assert _render(first) == "/items/0"
    assert _render(second) == "/items/1"


def test_with_path_none_resets_to_root(root_scope: ValidationScope) -> None:
    scope = root_scope.with_field("a").with_path(None)
    assert scope.path is None


def test_nested_configs_merge_child_over_parent(root_scope: ValidationScope) -> None:
    outer = root_scope.with_config(ErrorConfig(docs_uri="https://docs", short="outer"))
    inner = outer.with_field("email").with_config(ErrorConfig(short="inner"))

    assert inner.config == ErrorConfig(docs_uri="https://docs", short="inner")
    assert outer.config == ErrorConfig(docs_uri="https://docs", short="outer")


def test_with_config_none_is_noop(root_scope: ValidationScope) -> None:
    assert root_scope.with_config(None) is root_scope


def test_without_callback_strips_only_callback(root_scope: ValidationScope) -> None:
    scope = root_scope.with_config(ErrorConfig(short="s", callback=lambda s, e: e))
    stripped = scope.without_callback()
    assert stripped.config is not None
    assert stripped.config.callback is None
    assert stripped.config.short == "s"
    assert scope.config.callback is not None  # type: ignore[union-attr]


def test_without_callback_when_unset_returns_self(root_scope: ValidationScope) -> None:
    assert root_scope.without_callback() is root_scope


def test_with_dictionary_shadows_default(root_scope: ValidationScope) -> None:
    dictionary = default_dictionary().with_code(codes.MIN, ErrorEntry("internal", "s", "m"))
    scope = root_scope.with_dictionary(dictionary).with_field("a")
    assert scope.dictionary is dictionary
    assert root_scope.dictionary is default_dictionary()


def test_with_formatter_shadows_default(root_scope: ValidationScope) -> None:
    def shout(template: str, *args: object) -> str:
        return format_message(template, *args).upper()

    scope = root_scope.with_formatter(shout)
    assert scope.formatter is shout


@pytest.mark.parametrize("method", ["with_dictionary", "with_formatter"])
def test_none_collaborators_are_rejected(root_scope: ValidationScope, method: str) -> None:
    with pytest.raises(ValueError, match="to not be None"):
        getattr(root_scope, method)(None)


def test_format_message_behaviour() -> None:
    assert format_message("must be at least {}", 10) == "must be at least 10"
    assert format_message("no placeholders", 10) == "no placeholders"
    assert format_message("literal {braces}") == "literal {braces}"


def test_repr_renders_default_path(root_scope: ValidationScope) -> None:
    assert repr(root_scope) == "ValidationScope(path='')"
    assert repr(root_scope.with_field("a").with_index(0)) == "ValidationScope(path='/a/0')"


def test_repr_of_deep_path_does_not_recurse(root_scope: ValidationScope) -> None:
    depth = sys.getrecursionlimit() + 100
    scope = root_scope.with_path(path_from(*(["f"] * depth)))
    assert repr(scope) == "ValidationScope(path=" + repr("/f" * depth) + ")"
