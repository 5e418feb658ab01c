"""Kernel plugin – PluginListener port."""
from __future__ import annotations

from typing import Protocol, TypeVar

P = TypeVar("P")
Q = TypeVar("Q")


class PluginListener(Protocol[P, Q]):
    """Observer notified when a :class:`PluginCache` activates or retires a plugin."""

    def on_activate_plugin(self, plugin: P, params: Q) -> None: ...

    def on_deactivate_plugin(self, plugin: P) -> None: ...


__all__ = ["PluginListener"]
