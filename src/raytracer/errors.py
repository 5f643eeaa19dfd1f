"""
Where: `raytracer.errors`.
What: the exception types raised by the numeric core and the PPM exporters.
Why: callers catch one family per failure kind instead of matching messages.

Out-of-range matrix cells and canvas pixels use the builtin `IndexError`, and a
zero-magnitude `Tuple.normalize()` uses the builtin `ZeroDivisionError`.
"""

from __future__ import annotations


class ConfigurationError(ValueError):
    """A matrix was requested or combined with an order outside its contract.

    Raised for orders other than 2, 3 or 4, for products of matrices whose
    orders differ, and for applying a non order-4 matrix to a `Tuple`.
    These are programming errors, not recoverable runtime conditions.
    """


class PPMFormatError(ValueError):
    """The text handed to the PPM reader is not valid P3 data."""


class PPMWriteError(RuntimeError):
    """Persisting serialized PPM text failed (directory creation or write)."""


__all__ = ["ConfigurationError", "PPMFormatError", "PPMWriteError"]
