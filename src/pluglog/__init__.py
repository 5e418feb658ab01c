"""
pluglog – Plugin cache and call-site formatting loggers.

Import path convention::

    from pluglog.kernel.plugin import PluginCache
    from pluglog.observability.logging import LogManager, Placeholder, Severity
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
