"""Default short labels and long message templates for built-in codes.

Short labels are constant strings suitable for API responses. Long
templates use ``str.format`` positional placeholders and are rendered with
the scope's message formatter.
"""

from __future__ import annotations

SHORT_UNKNOWN: str = "unknown error"
SHORT_INTERNAL: str = "internal error"
SHORT_TIMEOUT: str = "timeout"
SHORT_CANCELLED: str = "cancelled"
SHORT_TYPE: str = "invalid type"
SHORT_RANGE: str = "out of range"
SHORT_REQUIRED: str = "required"
SHORT_NULL: str = "null not allowed"
SHORT_UNEXPECTED: str = "unexpected"
SHORT_MIN: str = "below minimum"
SHORT_MAX: str = "above maximum"
SHORT_MIN_EXCLUSIVE: str = "below minimum"
SHORT_MAX_EXCLUSIVE: str = "above maximum"
SHORT_MIN_LEN: str = "too short"
SHORT_MAX_LEN: str = "too long"
SHORT_PATTERN: str = "invalid format"
SHORT_ENCODING: str = "invalid encoding"
SHORT_EXPIRED: str = "expired"
SHORT_FORBIDDEN: str = "forbidden"
SHORT_NOT_ALLOWED: str = "not allowed"
SHORT_VALUE_MISMATCH: str = "value mismatch"

LONG_UNKNOWN: str = "an unknown error occurred"
LONG_INTERNAL: str = "an internal error occurred"
LONG_TIMEOUT: str = "operation timed out"
LONG_CANCELLED: str = "operation was cancelled"
LONG_TYPE: str = "expected {} but got {}"
LONG_RANGE: str = "value is out of range for {}"
LONG_REQUIRED: str = "value is required"
LONG_NULL: str = "value cannot be null"
LONG_UNEXPECTED: str = "value was not expected"
LONG_MIN: str = "must be at least {}"
LONG_MAX: str = "must be at most {}"
LONG_MIN_EXCLUSIVE: str = "must be greater than {}"
LONG_MAX_EXCLUSIVE: str = "must be less than {}"
LONG_MIN_LEN: str = "length must be at least {}"
LONG_MAX_LEN: str = "length must be at most {}"
LONG_PATTERN: str = "value does not match the required format"
LONG_ENCODING: str = "value is not properly encoded"
LONG_EXPIRED: str = "value has expired"
LONG_FORBIDDEN: str = "value is forbidden"
LONG_NOT_ALLOWED: str = "value is not one of the allowed options"
LONG_VALUE_MISMATCH: str = "value does not match"
