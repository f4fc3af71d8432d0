"""Validation error values, constructors and composition helpers."""

from __future__ import annotations

from vouch.errors.base import MultiError, SingleError, ValidationError, aggregate_classification, flatten_errors
from vouch.errors.collection import ValidationErrorCollection, collection
from vouch.errors.construct import coercion_error, error, errorf, range_error
from vouch.errors.join import as_validation_errors, for_path, for_path_as, join, unwrap

__all__ = [
    "MultiError",
    "SingleError",
    "ValidationError",
    "ValidationErrorCollection",
    "aggregate_classification",
    "as_validation_errors",
    "coercion_error",
    "collection",
    "error",
    "errorf",
    "flatten_errors",
    "for_path",
    "for_path_as",
    "join",
    "range_error",
    "unwrap",
]
