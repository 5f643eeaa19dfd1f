"""
Where: `raytracer.export.file`.
What: persist a canvas as a `.ppm` file under a generated or given name.
Why: the serializer stays pure text; naming, directories and disk errors live here.
"""

from __future__ import annotations

import logging
import secrets
import string
from pathlib import Path

from raytracer.common import settings
from raytracer.core.canvas import Canvas
from raytracer.errors import PPMWriteError
from raytracer.util.paths import ensure_ppm_dir

from .ppm import serialize_ppm

logger = logging.getLogger(__name__)

PPM_SUFFIX = ".ppm"
_NAME_ALPHABET = string.ascii_letters + string.digits


def random_ppm_name(length: int | None = None) -> str:
    """Random alphanumeric stem plus `.ppm`, e.g. `"aZ3k9QwE1x.ppm"`.

    `length` defaults to `settings.get().PPM_NAME_LENGTH` (10).
    """
    n = settings.get().PPM_NAME_LENGTH if length is None else int(length)
    if n < 1:
        raise ValueError(f"name length must be >= 1, got {n}")
    stem = "".join(secrets.choice(_NAME_ALPHABET) for _ in range(n))
    return stem + PPM_SUFFIX


def save_ppm(canvas: Canvas, path: Path | str | None = None) -> Path:
    """Serialize `canvas` and write it as the entire content of a file.

    Parameters
    ----------
    canvas : Canvas
        Image to persist.
    path : Path | str | None
        Target file. None writes into the configured output directory (created
        when absent) under a random name; an existing name is never overwritten.

    Returns
    -------
    Path
        The path written.

    Raises
    ------
    PPMWriteError
        When the directory cannot be created or the file cannot be written.
    """
    text = serialize_ppm(canvas)

    try:
        if path is None:
            out_dir = ensure_ppm_dir()
            logger.debug("ppm output directory: %s", out_dir)
            target = _unique_path(out_dir)
        else:
            target = Path(path)
        target.write_text(text, encoding="ascii")
    except OSError as e:
        raise PPMWriteError(f"failed to write PPM file: {e}") from e

    logger.info("wrote %dx%d PPM to %s", canvas.width, canvas.height, target)
    return target


def _unique_path(out_dir: Path) -> Path:
    while True:
        cand = out_dir / random_ppm_name()
        if not cand.exists():
            return cand


__all__ = ["save_ppm", "random_ppm_name", "PPM_SUFFIX"]
