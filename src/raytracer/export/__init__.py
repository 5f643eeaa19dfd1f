"""
Where: `raytracer.export` subpackage.
What: PPM (P3) serialization, parsing and file persistence.
"""

from .file import save_ppm
from .ppm import PPMWriter, load_ppm, parse_ppm, serialize_ppm

__all__ = [
    "PPMWriter",
    "serialize_ppm",
    "parse_ppm",
    "load_ppm",
    "save_ppm",
]
