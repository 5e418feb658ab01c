"""Kernel utils – small helpers shared by the plugin and logging layers."""
from pluglog.kernel.utils.enums import build_lookup_map, enum_value_of
from pluglog.kernel.utils.objects import require_not_none

__all__ = ["build_lookup_map", "enum_value_of", "require_not_none"]
