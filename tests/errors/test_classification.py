"""Tests for atomic and aggregate error classification."""

from __future__ import annotations

import pytest

from vouch import SingleError, ValidationError, aggregate_classification, join
from vouch.constants import codes


def _err(code: str) -> ValidationError:
    return SingleError(code=code, message=code)


def _flags(err: ValidationError | None) -> tuple[bool, bool, bool]:
    assert err is not None
    return err.validation(), err.permission(), err.internal()


@pytest.mark.parametrize(
    ("code", "expected"),
    [
        pytest.param(codes.MIN, (True, False, False), id="validation"),
        pytest.param(codes.FORBIDDEN, (False, True, False), id="permission"),
        pytest.param(codes.TIMEOUT, (False, False, True), id="internal"),
    ],
)
def test_atomic_predicates(code: str, expected: tuple[bool, bool, bool]) -> None:
    assert _flags(_err(code)) == expected


def test_only_validation_members() -> None:
    joined = join(_err(codes.MIN), _err(codes.MAX))
    assert _flags(joined) == (True, False, False)


def test_internal_member_wins_regardless_of_others() -> None:
    joined = join(_err(codes.MIN), _err(codes.FORBIDDEN), _err(codes.INTERNAL))
    assert _flags(joined) == (False, False, True)


def test_permission_member_wins_without_internal() -> None:
    joined = join(_err(codes.MIN), _err(codes.NOT_ALLOWED), _err(codes.MAX))
    assert _flags(joined) == (False, True, False)


def test_order_does_not_matter() -> None:
    joined = join(_err(codes.INTERNAL), _err(codes.MIN))
    assert joined is not None
    assert joined.classification == "internal"


def test_aggregate_classification_of_nothing_is_none() -> None:
    assert aggregate_classification([]) is None


def test_aggregate_classification_picks_most_severe() -> None:
    assert aggregate_classification([_err(codes.MIN)]) == "validation"
    assert aggregate_classification([_err(codes.MIN), _err(codes.FORBIDDEN)]) == "permission"
    assert aggregate_classification([_err(codes.FORBIDDEN), _err(codes.CANCELLED)]) == "internal"
