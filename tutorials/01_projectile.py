#!/usr/bin/env python3
"""
Tutorial 01: plotting a projectile

A point is launched with an initial velocity and stepped through a world with
gravity and wind. Every tick plots the current position on a canvas, and the
result is saved as a P3 image under the configured output directory
(`ppm/` by default, `RT_PPM_DIR` overrides it).

    python tutorials/01_projectile.py
"""
import logging
import os
import sys
from pathlib import Path

# Ensure the in-repo package is importable without installing it
SRC_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir, "src"))
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from raytracer import Canvas, Color, point, save_ppm, vector
from raytracer.common.logging import setup_default_logging

TRAIL_COLOR = Color(1.0, 0.7, 0.7)


def plot_trajectory(width: int = 60, height: int = 30) -> Canvas:
    """Step the projectile until it lands and plot every on-canvas position.

    Canvas rows grow downwards, so the height is flipped before writing.
    """
    canvas = Canvas.create(width, height)
    position = point(0.0, 1.0, 0.0)
    velocity = vector(1.0, 1.8, 0.0).normalize().multiply_by_scalar(2.5)
    gravity = vector(0.0, -0.1, 0.0)
    wind = vector(-0.01, 0.0, 0.0)

    while position.y > 0:
        x = int(round(position.x))
        y = height - int(round(position.y))
        if 0 <= x < width and 0 <= y < height:
            canvas.write(x, y, TRAIL_COLOR)
        position = position + velocity
        velocity = velocity + gravity + wind
    return canvas


def main() -> Path:
    setup_default_logging()
    logger = logging.getLogger(__name__)
    canvas = plot_trajectory()
    path = save_ppm(canvas)
    logger.info("Trajectory saved: %s (%dx%d)", path, canvas.width, canvas.height)
    return path


if __name__ == "__main__":
    main()
