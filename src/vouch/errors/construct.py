"""Constructors that build errors from a validation scope.

Construction order: resolve the default messages, apply the scope's
config overrides, render the long message with the scope formatter,
classify the final code with the scope dictionary, and finally hand the
error to the config callback, whose return value is used instead.

The callback receives the scope with its callback stripped, so a
callback that builds a replacement error through :func:`errorf` or
:func:`error` does not re-enter itself.
"""

from __future__ import annotations

from typing import Any

from vouch.constants import codes
from vouch.errors.base import SingleError, ValidationError
from vouch.scope import ValidationScope
from vouch.types import ErrorCode


def errorf(code: ErrorCode, scope: ValidationScope | None, short: str, long: str, *args: Any) -> ValidationError:
    """Build an error with an explicit short label and long message template."""
    scope = ValidationScope.of(scope)
    config = scope.config

    actual_code = code
    actual_short = short
    actual_long = long
    docs_uri = ""
    trace_uri = ""
    meta: dict[str, Any] = {}

    if config is not None:
        if config.code is not None:
            actual_code = config.code
        actual_short = config.short or short
        actual_long = config.long or long
        docs_uri = config.docs_uri
        trace_uri = config.trace_uri
        meta = dict(config.meta)

    err: ValidationError = SingleError(
        code=actual_code,
        path=scope.path,
        message=scope.formatter(actual_long, *args),
        short=actual_short,
        docs_uri=docs_uri,
        trace_uri=trace_uri,
        meta=meta,
        params=args,
        classification=scope.dictionary.classification(actual_code),
    )

    if config is not None and config.callback is not None:
        err = config.callback(scope.without_callback(), err)
    return err


def error(code: ErrorCode, scope: ValidationScope | None, *args: Any) -> ValidationError:
    """Build an error whose messages come from the scope's dictionary."""
    scope = ValidationScope.of(scope)
    entry = scope.dictionary.entry(code)
    return errorf(code, scope, entry.short, entry.pattern, *args)


def coercion_error(scope: ValidationScope | None, expected: str, received: str) -> ValidationError:
    """Error for a value of type *received* where *expected* was required."""
    return error(codes.TYPE, scope, expected, received)


def range_error(scope: ValidationScope | None, target: str) -> ValidationError:
    """Error for a value that is understood but does not fit in *target*.

    For example, 300 cannot be narrowed to an 8-bit integer.
    """
    return error(codes.RANGE, scope, target)
