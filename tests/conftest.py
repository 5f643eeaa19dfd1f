"""Shared fixtures.

- The 5x3 reference canvas used by the PPM scenarios
- An isolated PPM output directory (env override + settings reload)
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest

from raytracer.common import settings
from raytracer.core.canvas import Canvas
from raytracer.core.color import Color
from raytracer.core.matrix import Matrix


@pytest.fixture()
def scenario_canvas() -> Canvas:
    """5x3 canvas with three pixels set (over-range red, half green, mixed blue)."""
    c = Canvas.create(5, 3)
    c.write(0, 0, Color(1.5, 0.0, 0.0))
    c.write(2, 1, Color(0.0, 0.5, 0.0))
    c.write(4, 2, Color(-0.5, 0.0, 1.0))
    return c


@pytest.fixture()
def matrix_a() -> Matrix:
    return Matrix.order4(
        (1.0, 2.0, 3.0, 4.0),
        (5.0, 6.0, 7.0, 8.0),
        (9.0, 8.0, 7.0, 6.0),
        (5.0, 4.0, 3.0, 2.0),
    )


@pytest.fixture()
def ppm_out_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point `RT_PPM_DIR` at a not-yet-existing directory under `tmp_path`."""
    out = tmp_path / "out" / "ppm"
    monkeypatch.setenv("RT_PPM_DIR", str(out))
    settings.reload_from_env()
    yield out
    monkeypatch.delenv("RT_PPM_DIR", raising=False)
    settings.reload_from_env()
