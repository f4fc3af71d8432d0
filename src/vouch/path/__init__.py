"""Path segments and the serializers that render them."""

from .segments import FieldSegment, IndexSegment, PathSegment, extract_segments, field, index, path_from
from .serializers import (
    DEFAULT,
    DOT_NOTATION,
    JSON_PATH,
    JSON_POINTER,
    DefaultPathSerializer,
    DotNotationSerializer,
    JSONPathSerializer,
    JSONPointerSerializer,
    PathSerializer,
)

__all__ = [
    "DEFAULT",
    "DOT_NOTATION",
    "JSON_PATH",
    "JSON_POINTER",
    "DefaultPathSerializer",
    "DotNotationSerializer",
    "FieldSegment",
    "IndexSegment",
    "JSONPathSerializer",
    "JSONPointerSerializer",
    "PathSegment",
    "PathSerializer",
    "extract_segments",
    "field",
    "index",
    "path_from",
]
