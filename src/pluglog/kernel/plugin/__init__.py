"""Kernel – lazily rebuilt plugin cache."""
from pluglog.kernel.plugin.cache import PluginCache
from pluglog.kernel.plugin.listener import PluginListener

__all__ = ["PluginCache", "PluginListener"]
