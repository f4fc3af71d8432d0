"""Shared pytest fixtures for vouch tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from vouch import ValidationError, ValidationScope, errorf
from vouch.constants import codes


@pytest.fixture(scope="session")
def fixtures_root() -> Path:
    """Return root directory for test fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def dictionaries_root(fixtures_root: Path) -> Path:
    """Return the directory holding YAML dictionary fixtures."""
    return fixtures_root / "dictionaries"


@pytest.fixture
def root_scope() -> ValidationScope:
    return ValidationScope.root()


@pytest.fixture
def make_error() -> Callable[..., ValidationError]:
    """Build an error at the path given by root-to-leaf parts."""

    def _make(*parts: str | int, code: str = codes.MIN, message: str = "message") -> ValidationError:
        scope = ValidationScope.root()
        for part in parts:
            scope = scope.with_index(part) if isinstance(part, int) else scope.with_field(part)
        return errorf(code, scope, "short", message)

    return _make
