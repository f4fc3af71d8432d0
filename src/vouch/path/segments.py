"""Parent-linked path segments describing a traversal position.

A path is a chain of immutable segments where each node points at its
parent. Errors keep a reference to the leaf only; the full path is
recovered on demand with :func:`extract_segments`.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldSegment:
    """A named field step, e.g. the ``name`` in ``/users/0/name``."""

    name: str
    parent: PathSegment | None = None

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class IndexSegment:
    """An array index step, e.g. the ``0`` in ``/users/0/name``."""

    index: int
    parent: PathSegment | None = None

    def __post_init__(self) -> None:
        if isinstance(self.index, bool) or not isinstance(self.index, int) or self.index < 0:
            raise ValueError(f"path index must be a non-negative integer, got {self.index!r}")

    def __str__(self) -> str:
        return str(self.index)


type PathSegment = FieldSegment | IndexSegment


def field(name: str, parent: PathSegment | None = None) -> FieldSegment:
    """Append a named field segment below *parent*."""
    return FieldSegment(name=name, parent=parent)


def index(value: int, parent: PathSegment | None = None) -> IndexSegment:
    """Append an array index segment below *parent*."""
    return IndexSegment(index=value, parent=parent)


def path_from(*parts: str | int) -> PathSegment | None:
    """Build a chain from root-to-leaf parts and return its leaf.

    Strings become field segments and integers become index segments.
    Returns ``None`` when no parts are given.
    """
    leaf: PathSegment | None = None
    for part in parts:
        if isinstance(part, int) and not isinstance(part, bool):
            leaf = IndexSegment(index=part, parent=leaf)
        else:
            leaf = FieldSegment(name=str(part), parent=leaf)
    return leaf


def extract_segments(leaf: PathSegment | None) -> tuple[PathSegment, ...]:
    """Return the chain ending at *leaf* ordered from root to leaf."""
    collected: list[PathSegment] = []
    current = leaf
    while current is not None:
        collected.append(current)
        current = current.parent
    collected.reverse()
    return tuple(collected)
