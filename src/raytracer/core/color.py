"""
Where: `raytracer.core.color`.
What: real-valued RGB color and its quantization to 8-bit channels.
Why: channels stay unbounded during arithmetic (light can overshoot 1.0) and are
only clamped when an image is written, so both halves live together here.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from raytracer.common.tolerance import all_approx_equal
from raytracer.common.types import Rgb8, Vec3

MAX_CHANNEL_VALUE = 255


def quantize_channel(value: float) -> int:
    """Map one channel to an int in [0, 255].

    `clamp(round(value * 255), 0, 255)`, rounding halves away from zero. Negative
    inputs are clamped to 0 after rounding, so `floor(x + 0.5)` gives the same
    result as a half-away-from-zero round over the whole input range.

    Non-finite channels saturate too: `+inf -> 255`, `-inf -> 0`, `nan -> 0`.
    """
    v = float(value)
    if math.isnan(v):
        return 0
    # Clamp while still a float; `int()` of an infinity raises.
    scaled = min(max(v * MAX_CHANNEL_VALUE + 0.5, 0.0), float(MAX_CHANNEL_VALUE))
    return int(math.floor(scaled))


def quantize_array(channels: np.ndarray) -> np.ndarray:
    """Vectorized `quantize_channel` for any array of channel values (-> int64)."""
    scaled = np.floor(np.asarray(channels, dtype=np.float64) * MAX_CHANNEL_VALUE + 0.5)
    # NaN passes through `np.clip` and would cast to INT64_MIN.
    scaled = np.nan_to_num(scaled, nan=0.0)
    return np.clip(scaled, 0, MAX_CHANNEL_VALUE).astype(np.int64)


@dataclass(frozen=True, slots=True, eq=False)
class Color:
    """Immutable (red, green, blue) value; channels are not clamped."""

    red: float
    green: float
    blue: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "red", float(self.red))
        object.__setattr__(self, "green", float(self.green))
        object.__setattr__(self, "blue", float(self.blue))

    @classmethod
    def create(cls, red: float, green: float, blue: float) -> "Color":
        return cls(red, green, blue)

    def add(self, other: "Color") -> "Color":
        return Color(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def subtract(self, other: "Color") -> "Color":
        return Color(self.red - other.red, self.green - other.green, self.blue - other.blue)

    def multiply(self, other: "Color") -> "Color":
        """Hadamard (channel-wise) product, used to blend light and surface colors."""
        return Color(self.red * other.red, self.green * other.green, self.blue * other.blue)

    def multiply_by_scalar(self, factor: float) -> "Color":
        f = float(factor)
        return Color(self.red * f, self.green * f, self.blue * f)

    def to_quantized(self) -> Rgb8:
        """Saturating 8-bit channels, e.g. `Color(-0.5, 0, 1.5) -> (0, 0, 255)`."""
        return (
            quantize_channel(self.red),
            quantize_channel(self.green),
            quantize_channel(self.blue),
        )

    def to_ppm_triple(self) -> str:
        """Quantized channels separated by single spaces, e.g. `"255 0 0"`."""
        r, g, b = self.to_quantized()
        return f"{r} {g} {b}"

    def as_tuple(self) -> Vec3:
        return (self.red, self.green, self.blue)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return all_approx_equal(self.as_tuple(), other.as_tuple())

    __hash__ = None  # type: ignore[assignment]

    # Operator sugar
    def __add__(self, other: "Color") -> "Color":
        if not isinstance(other, Color):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "Color") -> "Color":
        if not isinstance(other, Color):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: "Color | float") -> "Color":
        if isinstance(other, Color):
            return self.multiply(other)
        if isinstance(other, (int, float)):
            return self.multiply_by_scalar(other)
        return NotImplemented

    def __rmul__(self, factor: float) -> "Color":
        if isinstance(factor, (int, float)):
            return self.multiply_by_scalar(factor)
        return NotImplemented

    def __str__(self) -> str:
        return self.to_ppm_triple()


BLACK = Color(0.0, 0.0, 0.0)


__all__ = [
    "Color",
    "BLACK",
    "MAX_CHANNEL_VALUE",
    "quantize_channel",
    "quantize_array",
]
