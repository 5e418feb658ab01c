"""Kernel plugin – PluginCache.

A lazily rebuilt, dirty-checked holder for a single "plugin": any object
derived from parameters that may change over the life of a process.

Callers ask for the plugin on every use instead of keeping a reference::

    cache.get(params).do_something()

The cache hands back the plugin it already holds unless :meth:`PluginCache.is_dirty`
says the new *params* invalidate it, in which case the old plugin is
deactivated and a replacement is created and activated.

Two ways to supply the behaviour:

* subclass and override :meth:`~PluginCache.make_plugin` and
  :meth:`~PluginCache.is_dirty` (optionally the ``on_activate`` /
  ``on_deactivate`` hooks), or
* inject plain callables::

      cache = PluginCache(create=build_theme, is_dirty=lambda p, old, new: old != new)
"""
from __future__ import annotations

import logging
import threading
from typing import Callable, Generic, TypeVar

from pluglog.kernel.plugin.listener import PluginListener
from pluglog.kernel.utils import require_not_none

P = TypeVar("P")
Q = TypeVar("Q")

logger = logging.getLogger(__name__)


class PluginCache(Generic[P, Q]):
    """Holds at most one active plugin and the params that produced it.

    ``get`` is serialized per instance, so concurrent callers never build two
    replacements for the same dirty plugin. Hooks and the listener run while
    the lock is held; the lock is re-entrant for the calling thread.
    """

    def __init__(
        self,
        *,
        create: Callable[[Q], P] | None = None,
        is_dirty: Callable[[P, Q, Q], bool] | None = None,
        on_activate: Callable[[P, Q], None] | None = None,
        on_deactivate: Callable[[P], None] | None = None,
        listener: PluginListener[P, Q] | None = None,
    ) -> None:
        self._create = create
        self._is_dirty = is_dirty
        self._on_activate = on_activate
        self._on_deactivate = on_deactivate
        self._listener = listener
        self._active_plugin: P | None = None
        self._active_params: Q | None = None
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def active_plugin(self) -> P | None:
        """The currently active plugin, or ``None`` before the first ``get``."""
        return self._active_plugin

    @property
    def active_params(self) -> Q | None:
        """The params the active plugin was built from."""
        return self._active_params

    @property
    def listener(self) -> PluginListener[P, Q] | None:
        return self._listener

    @listener.setter
    def listener(self, listener: PluginListener[P, Q] | None) -> None:
        self._listener = listener

    # ------------------------------------------------------------------
    # Core
    # ------------------------------------------------------------------

    def get(self, params: Q) -> P:
        """Return a plugin appropriate to *params*, rebuilding it if dirty.

        When the cached plugin is still clean, *params* is discarded: the
        params that created the plugin stay the comparison baseline.
        """
        require_not_none(params, "params must not be None", parameter="params")
        with self._lock:
            plugin = self._active_plugin
            if plugin is not None and not self.is_dirty(plugin, self._active_params, params):  # type: ignore[arg-type]
                return plugin

            if plugin is not None:
                logger.debug("plugin_cache.deactivating cache=%s", type(self).__name__)
                self.on_deactivate(plugin)
                if self._listener is not None:
                    self._listener.on_deactivate_plugin(plugin)
                # a deactivated plugin is never handed out again, even if the rebuild fails
                self._active_plugin = None
                self._active_params = None

            plugin = self.make_plugin(params)
            self._active_plugin = plugin
            self._active_params = params
            logger.debug("plugin_cache.activated cache=%s params=%r", type(self).__name__, params)
            self.on_activate(plugin, params)
            if self._listener is not None:
                self._listener.on_activate_plugin(plugin, params)
            return plugin

    # ------------------------------------------------------------------
    # Extension points
    # ------------------------------------------------------------------

    def make_plugin(self, params: Q) -> P:
        """Create a new plugin for *params*."""
        if self._create is None:
            raise NotImplementedError(f"{type(self).__name__} must override make_plugin() or pass create=")
        return self._create(params)

    def is_dirty(self, plugin: P, old_params: Q, params: Q) -> bool:
        """Return ``True`` when *plugin* (built from *old_params*) must be rebuilt for *params*."""
        if self._is_dirty is None:
            raise NotImplementedError(f"{type(self).__name__} must override is_dirty() or pass is_dirty=")
        return self._is_dirty(plugin, old_params, params)

    def on_activate(self, plugin: P, params: Q) -> None:
        """Called right after *plugin* becomes active."""
        if self._on_activate is not None:
            self._on_activate(plugin, params)

    def on_deactivate(self, plugin: P) -> None:
        """Called right before *plugin* is replaced."""
        if self._on_deactivate is not None:
            self._on_deactivate(plugin)


__all__ = ["PluginCache"]
