"""
Where: type aliases of `raytracer.common`.
What: short aliases for the fixed-size float/int rows passed across modules.
Why: keep them in a dependency-free place to avoid cycles.
"""

Vec3 = tuple[float, float, float]
Vec4 = tuple[float, float, float, float]
Rgb8 = tuple[int, int, int]

Row2 = tuple[float, float]
Row3 = tuple[float, float, float]
Row4 = tuple[float, float, float, float]


__all__ = ["Vec3", "Vec4", "Rgb8", "Row2", "Row3", "Row4"]
