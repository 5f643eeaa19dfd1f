"""
raytracer: numeric kernel and image output for a ray tracer.

- `Tuple` / `point` / `vector`: homogeneous coordinates
- `Color`: RGB with saturating 8-bit quantization
- `Matrix` / `IDENTITY`: square matrices of order 2, 3 or 4
- `Canvas`: framebuffer, serialized with `serialize_ppm` and saved with `save_ppm`

Usage:
    from raytracer import Canvas, Color, serialize_ppm

    c = Canvas.create(5, 3)
    c.write(0, 0, Color(1.5, 0, 0))
    text = serialize_ppm(c)
"""

from raytracer.core import BLACK, IDENTITY, Canvas, Color, Matrix, Tuple, point, vector
from raytracer.errors import ConfigurationError, PPMFormatError, PPMWriteError
from raytracer.export import PPMWriter, load_ppm, parse_ppm, save_ppm, serialize_ppm

__version__ = "0.1.0"

__all__ = [
    "Tuple",
    "point",
    "vector",
    "Color",
    "BLACK",
    "Matrix",
    "IDENTITY",
    "Canvas",
    "PPMWriter",
    "serialize_ppm",
    "parse_ppm",
    "load_ppm",
    "save_ppm",
    "ConfigurationError",
    "PPMFormatError",
    "PPMWriteError",
]
