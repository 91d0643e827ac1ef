"""Dot-path access into nested state made of mappings, sequences and scalars."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .errors import StatePathError

_MISSING = object()


def split_path(path: str) -> list[str]:
    return path.split(".") if path else []


def _index(segment: str) -> int | None:
    return int(segment) if segment.isdecimal() and segment.isascii() else None


def get_path(state: Any, path: str, default: Any = None) -> Any:
    """Read the value at ``path``; any absent segment yields ``default``."""
    node = state
    for segment in split_path(path):
        if isinstance(node, Mapping):
            node = node.get(segment, _MISSING)
        elif isinstance(node, (list, tuple)):
            idx = _index(segment)
            node = node[idx] if idx is not None and idx < len(node) else _MISSING
        else:
            node = _MISSING
        if node is _MISSING:
            return default
    return node


def set_path(state: Any, path: str, value: Any) -> Any:
    """
    Return a copy of ``state`` with ``value`` stored at ``path``

    Only containers along the path are copied; siblings are shared with the
    previous state. Missing or scalar intermediates become dicts. Lists are
    padded with ``None`` when the index is past the end.

    Raises:
        StatePathError: a list segment is not a non-negative integer
    """
    return _assign(state, split_path(path), value, path)


def _assign(node: Any, segments: list[str], value: Any, path: str) -> Any:
    if not segments:
        return value
    head, rest = segments[0], segments[1:]

    if isinstance(node, (list, tuple)):
        idx = _index(head)
        if idx is None:
            raise StatePathError(path, f'segment "{head}" is not a list index')
        items = list(node)
        if idx >= len(items):
            items.extend([None] * (idx + 1 - len(items)))
        items[idx] = _assign(items[idx], rest, value, path)
        return tuple(items) if isinstance(node, tuple) else items

    copied = dict(node) if isinstance(node, Mapping) else {}
    copied[head] = _assign(copied.get(head), rest, value, path)
    return copied
