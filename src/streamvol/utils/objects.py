"""Tolerant accessors for nested configuration shapes.

Every helper here degrades to a default or sentinel instead of raising, so
callers can read partially populated configuration without guarding each
level by hand.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any

_MISSING = object()


class NodeKind(str, Enum):
    """Shape of a node visited while walking a path."""

    MAPPING = "mapping"
    SEQUENCE = "sequence"
    SCALAR = "scalar"
    NULL = "null"


def node_kind(node: Any) -> NodeKind:
    if node is None:
        return NodeKind.NULL
    if isinstance(node, Mapping):
        return NodeKind.MAPPING
    if isinstance(node, Sequence) and not isinstance(node, (str, bytes, bytearray)):
        return NodeKind.SEQUENCE
    return NodeKind.SCALAR


def split_path(path: Any) -> list[Any]:
    """Split a dotted path into segments; non-string paths are a single segment."""

    if isinstance(path, str):
        return path.split(".")
    return [path]


def _as_index(segment: Any) -> int | None:
    if isinstance(segment, bool):
        return None
    if isinstance(segment, int):
        return segment
    if isinstance(segment, str) and segment.isascii() and segment.isdigit():
        return int(segment)
    return None


def _mapping_step(node: Mapping, segment: Any) -> Any:
    candidates = [segment]
    index = _as_index(segment)
    if isinstance(segment, int) and index is not None:
        candidates.append(str(segment))
    elif isinstance(segment, str) and index is not None:
        candidates.append(index)

    for candidate in candidates:
        try:
            if candidate in node:
                return node[candidate]
        except (TypeError, KeyError):
            continue
    return _MISSING


def _sequence_step(node: Sequence, segment: Any) -> Any:
    index = _as_index(segment)
    if index is None or not 0 <= index < len(node):
        return _MISSING
    return node[index]


def _step(node: Any, segment: Any) -> Any:
    kind = node_kind(node)
    if kind is NodeKind.MAPPING:
        return _mapping_step(node, segment)
    if kind is NodeKind.SEQUENCE:
        return _sequence_step(node, segment)
    # Scalars cannot be stepped into.
    return _MISSING


def get(container: Any, path: Any, default: Any = None) -> Any:
    """Resolve ``path`` inside ``container``, returning ``default`` when missing.

    ``path`` is a key, an integer index or a dot-delimited string such as
    ``"audio.volume.default"``. Digit segments index into sequences.

    A ``None`` reached while walking stops resolution and is returned as is,
    even when segments remain; it is never replaced by ``default``. A missing
    key, an out-of-range index or a scalar with segments left over all
    resolve to ``default``.
    """

    if container is None:
        return default

    node = container
    for segment in split_path(path):
        if node is None:
            return None
        node = _step(node, segment)
        if node is _MISSING:
            return default
    return node


def pick(container: Any, *keys: Any) -> Any:
    """Return a shallow dict holding only ``keys`` copied from ``container``.

    A ``None`` container is returned unchanged.
    """

    if container is None:
        return container

    picked: dict[Any, Any] = {}
    for key in keys:
        value = _step(container, key)
        if value is not _MISSING:
            picked[key] = value
    return picked


def starts_with(value: Any, prefix: Any = "") -> bool:
    if not isinstance(value, str) or not isinstance(prefix, str):
        return False
    return value.startswith(prefix)


__all__ = ["NodeKind", "get", "node_kind", "pick", "split_path", "starts_with"]
