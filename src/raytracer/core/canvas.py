"""
Where: `raytracer.core.canvas`.
What: the framebuffer, a dense width x height grid of colors.
Why: the renderer writes pixels one by one and the exporters read the whole grid
at once, so the grid is a single numpy block rather than per-pixel objects.

Data model (invariants):
- `pixels: float64 ndarray (height, width, 3)`; row index is `y`, column index is `x`.
- Every cell starts black (0, 0, 0); channels are stored unclamped.
- `width`/`height` are fixed at creation; writes outside them raise `IndexError`,
  the grid never grows.
"""

from __future__ import annotations

import numbers

import numpy as np

from .color import Color


class Canvas:
    """Mutable framebuffer owned by a single caller at a time."""

    __slots__ = ("_width", "_height", "_pixels")

    def __init__(self, width: int, height: int) -> None:
        w = _as_index(width, "width")
        h = _as_index(height, "height")
        if w <= 0 or h <= 0:
            raise ValueError(f"canvas size must be positive, got {w}x{h}")
        self._width = w
        self._height = h
        self._pixels = np.zeros((h, w, 3), dtype=np.float64)

    @classmethod
    def create(cls, width: int, height: int) -> "Canvas":
        """Allocate a `width x height` canvas with every pixel black."""
        return cls(width, height)

    @classmethod
    def from_array(cls, pixels: np.ndarray) -> "Canvas":
        """Build a canvas from a `(height, width, 3)` array of channel values (copied)."""
        arr = np.asarray(pixels, dtype=np.float64)
        if arr.ndim != 3 or arr.shape[2] != 3:
            raise ValueError(f"pixels must have shape (height, width, 3), got {arr.shape}")
        canvas = cls(arr.shape[1], arr.shape[0])
        canvas._pixels[:, :, :] = arr
        return canvas

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _check_bounds(self, x: int, y: int) -> tuple[int, int]:
        xi = _as_index(x, "x")
        yi = _as_index(y, "y")
        # Negative indices would silently wrap on an ndarray, so both ends are checked.
        if not (0 <= xi < self._width and 0 <= yi < self._height):
            raise IndexError(
                f"pixel ({xi}, {yi}) is outside a {self._width}x{self._height} canvas"
            )
        return xi, yi

    def write(self, x: int, y: int, color: Color) -> None:
        """Replace the color of exactly one pixel."""
        xi, yi = self._check_bounds(x, y)
        self._pixels[yi, xi] = (color.red, color.green, color.blue)

    def pixel_at(self, x: int, y: int) -> Color:
        """Return the stored color of one pixel (a new value, not a view)."""
        xi, yi = self._check_bounds(x, y)
        r, g, b = self._pixels[yi, xi]
        return Color(r, g, b)

    def fill(self, color: Color) -> None:
        """Paint every pixel with `color`."""
        self._pixels[:, :] = (color.red, color.green, color.blue)

    def as_array(self, *, copy: bool = False) -> np.ndarray:
        """Return the `(height, width, 3)` grid.

        Parameters
        ----------
        copy : bool, default False
            True returns a writeable deep copy; False a read-only view.

        Notes
        -----
        The read-only view keeps exporters from mutating the canvas behind its
        owner's back. Use `copy=True` when the caller needs to write.
        """
        if copy:
            return self._pixels.copy()
        view = self._pixels.view()
        view.setflags(write=False)
        return view

    def __repr__(self) -> str:  # pragma: no cover - display only
        return f"Canvas({self._width}x{self._height})"


def _as_index(value: object, name: str) -> int:
    # bool is an int subclass but never a meaningful coordinate
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    return int(value)


__all__ = ["Canvas"]
