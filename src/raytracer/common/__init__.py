"""
Where: `raytracer.common` package.
What: small shared helpers (env parsing, settings, tolerance, logging, type aliases).
Why: keep the numeric core and the exporters free of ad-hoc `os.getenv` and epsilon code.
"""

from .tolerance import EPSILON, approx_equal

__all__ = [
    "EPSILON",
    "approx_equal",
]
