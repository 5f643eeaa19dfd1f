"""
Where: `raytracer.util.paths`.
What: resolve and create the directory PPM files are written to.
Why: the exporters only ask for a directory and stay free of settings lookups.
"""

from __future__ import annotations

from pathlib import Path

from raytracer.common import settings


def ensure_ppm_dir() -> Path:
    """Create the PPM output directory and return it.

    - The location comes from `settings.get().PPM_OUTPUT_DIR`; relative paths are
      resolved against the current working directory.
    - An existing directory is returned as is.
    - `exist_ok=True` keeps concurrent callers safe.
    """
    out = Path(settings.get().PPM_OUTPUT_DIR).expanduser()
    if not out.is_absolute():
        out = Path.cwd() / out
    out.mkdir(parents=True, exist_ok=True)
    return out


__all__ = ["ensure_ppm_dir"]
