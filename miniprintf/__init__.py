"""A small printf-style formatter for a fixed set of conversions.

The ``printf`` module holds ``render`` and ``printf``; the ``conversions``
module renders single values.
"""

__version__ = "0.1.0"
__all__ = ["conversions", "printf"]