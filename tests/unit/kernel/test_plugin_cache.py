"""Unit tests for the kernel PluginCache."""

from __future__ import annotations

import threading
from typing import Any

import pytest

from pluglog.kernel.errors import MissingParameterError
from pluglog.kernel.plugin import PluginCache


class Theme:
    def __init__(self, name: str) -> None:
        self.name = name


class RecordingListener:
    def __init__(self) -> None:
        self.events: list[tuple[str, Any]] = []

    def on_activate_plugin(self, plugin: Any, params: Any) -> None:
        self.events.append(("activate", plugin))

    def on_deactivate_plugin(self, plugin: Any) -> None:
        self.events.append(("deactivate", plugin))


def _make_cache(events: list[tuple[str, Any]] | None = None, **kwargs: Any) -> PluginCache[Theme, str]:
    events = events if events is not None else []
    return PluginCache(
        create=lambda name: Theme(name),
        is_dirty=lambda plugin, old, new: old != new,
        on_activate=lambda plugin, params: events.append(("on_activate", plugin)),
        on_deactivate=lambda plugin: events.append(("on_deactivate", plugin)),
        **kwargs,
    )


# ---------------------------------------------------------------------------
# Stability
# ---------------------------------------------------------------------------


class TestPluginCacheStability:
    def test_first_get_creates_and_activates(self) -> None:
        events: list[tuple[str, Any]] = []
        cache = _make_cache(events)
        plugin = cache.get("dark")
        assert plugin.name == "dark"
        assert cache.active_plugin is plugin
        assert cache.active_params == "dark"
        assert events == [("on_activate", plugin)]

    def test_empty_before_first_get(self) -> None:
        cache = _make_cache()
        assert cache.active_plugin is None
        assert cache.active_params is None

    def test_value_equal_params_return_same_instance(self) -> None:
        created: list[str] = []

        def create(name: str) -> Theme:
            created.append(name)
            return Theme(name)

        cache: PluginCache[Theme, str] = PluginCache(create=create, is_dirty=lambda p, old, new: old != new)
        first = cache.get("".join(["da", "rk"]))
        second = cache.get("dark")
        third = cache.get(str("dark"))
        assert first is second is third
        assert created == ["dark"]

    def test_repeated_get_never_deactivates(self) -> None:
        events: list[tuple[str, Any]] = []
        cache = _make_cache(events)
        for _ in range(5):
            cache.get("light")
        assert [name for name, _ in events] == ["on_activate"]

    def test_clean_get_keeps_first_baseline(self) -> None:
        cache: PluginCache[list[int], int] = PluginCache(
            create=lambda value: [value],
            is_dirty=lambda plugin, old, new: abs(new - old) > 10,
        )
        first = cache.get(0)
        assert cache.get(8) is first
        assert cache.active_params == 0
        # 15 is within 10 of 8 but not of the stored baseline 0
        rebuilt = cache.get(15)
        assert rebuilt is not first
        assert cache.active_params == 15


# ---------------------------------------------------------------------------
# Invalidation
# ---------------------------------------------------------------------------


class TestPluginCacheInvalidation:
    def test_dirty_params_replace_plugin(self) -> None:
        cache = _make_cache()
        dark = cache.get("dark")
        light = cache.get("light")
        assert light is not dark
        assert light.name == "light"
        assert cache.active_plugin is light
        assert cache.active_params == "light"

    def test_deactivation_precedes_activation(self) -> None:
        events: list[tuple[str, Any]] = []
        listener = RecordingListener()
        cache = _make_cache(events, listener=listener)
        dark = cache.get("dark")
        light = cache.get("light")
        assert events == [("on_activate", dark), ("on_deactivate", dark), ("on_activate", light)]
        assert listener.events == [("activate", dark), ("deactivate", dark), ("activate", light)]

    def test_old_plugin_deactivated_exactly_once(self) -> None:
        events: list[tuple[str, Any]] = []
        cache = _make_cache(events)
        dark = cache.get("dark")
        cache.get("light")
        cache.get("light")
        cache.get("blue")
        assert events.count(("on_deactivate", dark)) == 1

    def test_listener_can_be_replaced_and_cleared(self) -> None:
        cache = _make_cache()
        listener = RecordingListener()
        cache.listener = listener
        assert cache.listener is listener
        cache.get("dark")
        cache.listener = None
        cache.get("light")
        assert [name for name, _ in listener.events] == ["activate"]

    def test_failed_rebuild_does_not_deactivate_twice(self) -> None:
        failures = [RuntimeError("factory down")]
        deactivated: list[str] = []
        listener = RecordingListener()

        def create(params: int) -> str:
            if params == 2 and failures:
                raise failures.pop()
            return f"plugin-{params}"

        cache: PluginCache[str, int] = PluginCache(
            create=create,
            is_dirty=lambda plugin, old, new: old != new,
            on_deactivate=deactivated.append,
            listener=listener,
        )
        cache.get(1)
        with pytest.raises(RuntimeError, match="factory down"):
            cache.get(2)
        assert cache.active_plugin is None
        assert cache.active_params is None

        assert cache.get(2) == "plugin-2"
        assert deactivated == ["plugin-1"]
        assert listener.events == [
            ("activate", "plugin-1"),
            ("deactivate", "plugin-1"),
            ("activate", "plugin-2"),
        ]


# ---------------------------------------------------------------------------
# Subclassing and misuse
# ---------------------------------------------------------------------------


class WeekdayCache(PluginCache[str, int]):
    """Rebuilds only when the weekend flag flips."""

    def __init__(self) -> None:
        super().__init__()
        self.activated: list[str] = []
        self.deactivated: list[str] = []

    def make_plugin(self, params: int) -> str:
        return "weekend" if params >= 5 else "weekday"

    def is_dirty(self, plugin: str, old_params: int, params: int) -> bool:
        return (old_params >= 5) != (params >= 5)

    def on_activate(self, plugin: str, params: int) -> None:
        self.activated.append(plugin)

    def on_deactivate(self, plugin: str) -> None:
        self.deactivated.append(plugin)


class TestPluginCacheSubclass:
    def test_overrides_drive_rebuilds(self) -> None:
        cache = WeekdayCache()
        assert cache.get(0) == "weekday"
        assert cache.get(3) == "weekday"
        assert cache.get(6) == "weekend"
        assert cache.activated == ["weekday", "weekend"]
        assert cache.deactivated == ["weekday"]

    def test_none_params_fail_fast(self) -> None:
        cache = WeekdayCache()
        with pytest.raises(MissingParameterError):
            cache.get(None)  # type: ignore[arg-type]
        assert cache.activated == []

    def test_none_params_rejected_after_activation(self) -> None:
        cache = WeekdayCache()
        plugin = cache.get(1)
        with pytest.raises(ValueError):
            cache.get(None)  # type: ignore[arg-type]
        assert cache.active_plugin is plugin

    def test_missing_factory_raises(self) -> None:
        cache: PluginCache[str, int] = PluginCache(is_dirty=lambda p, old, new: True)
        with pytest.raises(NotImplementedError):
            cache.get(1)

    def test_missing_dirty_predicate_raises_on_second_get(self) -> None:
        cache: PluginCache[str, int] = PluginCache(create=str)
        assert cache.get(1) == "1"
        with pytest.raises(NotImplementedError):
            cache.get(2)


# ---------------------------------------------------------------------------
# Concurrency
# ---------------------------------------------------------------------------


class TestPluginCacheConcurrency:
    def test_hook_may_reenter_cache(self) -> None:
        seen: list[Any] = []
        cache: PluginCache[Theme, str] = PluginCache(
            create=Theme,
            is_dirty=lambda plugin, old, new: old != new,
        )
        cache._on_activate = lambda plugin, params: seen.append(cache.get(params))
        plugin = cache.get("dark")
        assert seen == [plugin]

    def test_concurrent_gets_keep_hooks_balanced(self) -> None:
        activated: list[Theme] = []
        deactivated: list[Theme] = []
        cache: PluginCache[Theme, str] = PluginCache(
            create=Theme,
            is_dirty=lambda plugin, old, new: old != new,
            on_activate=lambda plugin, params: activated.append(plugin),
            on_deactivate=deactivated.append,
        )
        barrier = threading.Barrier(8)

        def worker(index: int) -> None:
            barrier.wait()
            for round_ in range(200):
                cache.get("dark" if (index + round_) % 2 else "light")

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(activated) == len(deactivated) + 1
        assert activated[-1] is cache.active_plugin
        assert all(plugin in activated for plugin in deactivated)
        assert cache.active_plugin not in deactivated
