"""Kernel utils – enum lookup helpers."""
from __future__ import annotations

from enum import Enum
from typing import Callable, Hashable, TypeVar

E = TypeVar("E", bound=Enum)
K = TypeVar("K", bound=Hashable)


def enum_value_of(enum_cls: type[E], name: str | None, default: E | None = None) -> E | None:
    """Return the member of *enum_cls* called *name*.

    ``None`` yields ``None``; an unknown name yields *default*.
    """
    if name is None:
        return None
    try:
        return enum_cls[name]
    except KeyError:
        return default


def build_lookup_map(enum_cls: type[E], key: Callable[[E], K]) -> dict[K, E]:
    """Build an ordered ``key(member) -> member`` map over *enum_cls*.

    Later members win when two members share a key.
    """
    return {key(member): member for member in enum_cls}


__all__ = ["build_lookup_map", "enum_value_of"]
