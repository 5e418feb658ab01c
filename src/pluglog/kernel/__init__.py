"""Kernel – errors, plugin cache and small object helpers with no outer dependencies."""
