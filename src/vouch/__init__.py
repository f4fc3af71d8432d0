"""vouch: structured, path-addressed validation errors."""

from vouch.config import ErrorCallback, ErrorConfig, merge_error_config
from vouch.dictionary import ErrorDictionary, ErrorEntry, default_dictionary, load_dictionary, new_dictionary
from vouch.errors import (
    MultiError,
    SingleError,
    ValidationError,
    ValidationErrorCollection,
    aggregate_classification,
    coercion_error,
    collection,
    error,
    errorf,
    for_path,
    for_path_as,
    join,
    range_error,
    unwrap,
)
from vouch.exceptions import ConfigError, EmptyCollectionError, VouchError
from vouch.path import (
    DEFAULT,
    DOT_NOTATION,
    JSON_PATH,
    JSON_POINTER,
    DefaultPathSerializer,
    DotNotationSerializer,
    JSONPathSerializer,
    JSONPointerSerializer,
    PathSegment,
    PathSerializer,
)
from vouch.scope import ValidationScope

__version__ = "0.3.0"

__all__ = [
    "DEFAULT",
    "DOT_NOTATION",
    "JSON_PATH",
    "JSON_POINTER",
    "ConfigError",
    "DefaultPathSerializer",
    "DotNotationSerializer",
    "EmptyCollectionError",
    "ErrorCallback",
    "ErrorConfig",
    "ErrorDictionary",
    "ErrorEntry",
    "JSONPathSerializer",
    "JSONPointerSerializer",
    "MultiError",
    "PathSegment",
    "PathSerializer",
    "SingleError",
    "ValidationError",
    "ValidationErrorCollection",
    "ValidationScope",
    "VouchError",
    "__version__",
    "aggregate_classification",
    "coercion_error",
    "collection",
    "default_dictionary",
    "error",
    "errorf",
    "for_path",
    "for_path_as",
    "join",
    "load_dictionary",
    "merge_error_config",
    "new_dictionary",
    "range_error",
    "unwrap",
]
