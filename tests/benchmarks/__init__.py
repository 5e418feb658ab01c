"""pluglog benchmarks (pytest-benchmark).

Covers the per-write cost of call-site formatting and the plugin cache
lookup path. Run with::

    pytest tests/benchmarks/ --benchmark-sort=median

or as plain functional tests::

    pytest tests/benchmarks/ --benchmark-disable
"""
