"""
Where: `raytracer.common.tolerance`
What: the absolute-tolerance float comparison shared by Tuple, Color and Matrix.
Why: every value type compares with the same epsilon, so it is defined once here.
"""

from __future__ import annotations

import sys
from typing import Iterable

# Machine epsilon for IEEE-754 double precision (~2.22e-16).
EPSILON: float = sys.float_info.epsilon


def approx_equal(a: float, b: float, epsilon: float = EPSILON) -> bool:
    """`True` when `|a - b| <= epsilon`.

    Absolute, not relative: values far from zero only compare equal when they
    are bit-identical or one ulp apart at magnitude ~1.
    """
    return abs(a - b) <= epsilon


def all_approx_equal(
    left: Iterable[float], right: Iterable[float], epsilon: float = EPSILON
) -> bool:
    """Pairwise `approx_equal` over two equally long sequences."""
    return all(approx_equal(a, b, epsilon) for a, b in zip(left, right, strict=True))


__all__ = ["EPSILON", "approx_equal", "all_approx_equal"]
