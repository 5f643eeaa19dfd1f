"""
Where: `raytracer.core` subpackage.
What: the numeric value types (Tuple, Color, Matrix) and the Canvas framebuffer.
Why: everything above it (exporters, future shading) builds on these primitives.
"""

from .canvas import Canvas
from .color import BLACK, Color
from .matrix import IDENTITY, Matrix
from .tuples import Tuple, point, vector

__all__ = [
    "Canvas",
    "Color",
    "BLACK",
    "Matrix",
    "IDENTITY",
    "Tuple",
    "point",
    "vector",
]
