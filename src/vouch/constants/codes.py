"""Built-in error codes.

Codes identify an error without string-comparing its message. Codes are
opaque: compare them, never parse them. Applications defining their own
codes should prefix them to avoid clashing with future built-ins.
"""

from __future__ import annotations

UNKNOWN: str = "UNKNOWN"  # cause of the failure was not specified
INTERNAL: str = "INTERNAL"  # unexpected failure, details hidden from end users
TIMEOUT: str = "TIMEOUT"  # validation did not finish in time
CANCELLED: str = "CANCELLED"  # validation was cancelled by the caller
TYPE: str = "TYPE"  # value could not be coerced to the expected type
RANGE: str = "RANGE"  # value does not fit in the target type
REQUIRED: str = "REQUIRED"  # value is missing
NULL: str = "NULL"  # value is null where null is not allowed
UNEXPECTED: str = "UNEXPECTED"  # value was not expected to be present
MIN: str = "MIN"
MAX: str = "MAX"
MIN_EXCLUSIVE: str = "MIN_EXCLUSIVE"
MAX_EXCLUSIVE: str = "MAX_EXCLUSIVE"
MIN_LEN: str = "MIN_LEN"
MAX_LEN: str = "MAX_LEN"
PATTERN: str = "PATTERN"  # value does not match a pattern or expression
ENCODING: str = "ENCODING"
EXPIRED: str = "EXPIRED"
FORBIDDEN: str = "FORBIDDEN"
NOT_ALLOWED: str = "NOT_ALLOWED"
VALUE_MISMATCH: str = "VALUE_MISMATCH"

ALL_CODES: tuple[str, ...] = (
    UNKNOWN,
    INTERNAL,
    TIMEOUT,
    CANCELLED,
    TYPE,
    RANGE,
    REQUIRED,
    NULL,
    UNEXPECTED,
    MIN,
    MAX,
    MIN_EXCLUSIVE,
    MAX_EXCLUSIVE,
    MIN_LEN,
    MAX_LEN,
    PATTERN,
    ENCODING,
    EXPIRED,
    FORBIDDEN,
    NOT_ALLOWED,
    VALUE_MISMATCH,
)
