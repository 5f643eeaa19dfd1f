"""
Where: `raytracer.export.ppm`.
What: Canvas <-> plain-text Portable Pixmap (P3) conversion.
Why: P3 is the one bit-exact output contract of the renderer; keeping the writer
and the reader side by side keeps both views of the format in sync.

Output layout (exact bytes):

    P3
    <width> <height>
    255
    <pixel data>

Pixel data walks rows top to bottom (`y` outer) and pixels left to right (`x`
inner). Each pixel is its quantized "R G B" triple. Values are space separated and
a newline replaces the space after every 5th triple (15 values), counted across
row boundaries. The last triple is always followed by a newline and nothing else.

    # 5x3 canvas = 15 triples -> exactly 3 lines of 5 triples
    # 4x2 canvas =  8 triples -> a line of 5 triples, then a line of 3
"""

from __future__ import annotations

import io
import logging
import re
from pathlib import Path
from typing import IO

import numpy as np

from raytracer.core.canvas import Canvas
from raytracer.core.color import MAX_CHANNEL_VALUE, quantize_array
from raytracer.errors import PPMFormatError

logger = logging.getLogger(__name__)

PPM_MAGIC = "P3"
TRIPLES_PER_LINE = 5
# Upper bound of the max-value header field in the netpbm format
PPM_MAX_MAXVAL = 65535

_COMMENT_RE = re.compile(r"#[^\r\n]*")
# Unsigned ASCII decimal digits only (no sign, no "_" separators).
_DECIMAL_RE = re.compile(r"[0-9]+")


class PPMWriter:
    """Streams a canvas as P3 text into an open text file object.

    - Header: magic, dimensions, max value (always 255)
    - Body: quantized triples wrapped every `TRIPLES_PER_LINE` triples
    """

    def write(self, canvas: Canvas, fp: IO[str]) -> None:
        """Write `canvas` as P3 text to `fp`.

        Parameters
        ----------
        canvas : Canvas
            Source framebuffer; it is only read.
        fp : IO[str]
            Text sink (open file, `io.StringIO`, ...).
        """
        # --- Header ---
        fp.write(f"{PPM_MAGIC}\n{canvas.width} {canvas.height}\n{MAX_CHANNEL_VALUE}\n")

        # --- Body ---
        # (height, width, 3) -> (height * width, 3), y outer and x inner
        quantized = quantize_array(canvas.as_array()).reshape(-1, 3)
        triples = [f"{r} {g} {b}" for r, g, b in quantized.tolist()]
        for start in range(0, len(triples), TRIPLES_PER_LINE):
            fp.write(" ".join(triples[start : start + TRIPLES_PER_LINE]) + "\n")


def serialize_ppm(canvas: Canvas) -> str:
    """Return the complete P3 text of `canvas`."""
    buf = io.StringIO()
    PPMWriter().write(canvas, buf)
    return buf.getvalue()


def parse_ppm(text: str) -> Canvas:
    """Parse P3 text back into a `Canvas`.

    Accepts any whitespace layout, `#` comments and a max value in 1..65535.
    Channel values are stored as `value / maxval`, so an image written with
    `serialize_ppm` reads back with identical quantized pixels.

    Raises
    ------
    PPMFormatError
        Wrong magic, non-integer or out-of-range fields, or a pixel count that
        does not match the declared dimensions.
    """
    tokens = _COMMENT_RE.sub(" ", text).split()
    if not tokens or tokens[0] != PPM_MAGIC:
        found = tokens[0] if tokens else "<empty>"
        raise PPMFormatError(f"expected magic {PPM_MAGIC!r}, found {found!r}")
    if len(tokens) < 4:
        raise PPMFormatError("truncated header (need width, height and max value)")

    width = _parse_int(tokens[1], "width")
    height = _parse_int(tokens[2], "height")
    maxval = _parse_int(tokens[3], "max value")
    if width <= 0 or height <= 0:
        raise PPMFormatError(f"image size must be positive, got {width}x{height}")
    if not (0 < maxval <= PPM_MAX_MAXVAL):
        raise PPMFormatError(f"max value must be in 1..{PPM_MAX_MAXVAL}, got {maxval}")

    body = tokens[4:]
    expected = width * height * 3
    if len(body) != expected:
        raise PPMFormatError(
            f"expected {expected} channel values for {width}x{height}, got {len(body)}"
        )
    if not all(_DECIMAL_RE.fullmatch(tok) for tok in body):
        raise PPMFormatError("pixel data must be unsigned decimal integers")
    ints = [int(tok) for tok in body]
    if max(ints) > maxval:
        raise PPMFormatError(f"channel value outside 0..{maxval}")
    values = np.array(ints, dtype=np.int64)

    logger.debug("parsed P3 image %dx%d (maxval=%d)", width, height, maxval)
    pixels = values.reshape(height, width, 3).astype(np.float64) / float(maxval)
    return Canvas.from_array(pixels)


def load_ppm(path: str | Path) -> Canvas:
    """Read a P3 file from disk and parse it."""
    return parse_ppm(Path(path).read_text(encoding="ascii"))


def _parse_int(token: str, name: str) -> int:
    if not _DECIMAL_RE.fullmatch(token):
        raise PPMFormatError(f"{name} must be an unsigned decimal integer, got {token!r}")
    return int(token)


__all__ = [
    "PPMWriter",
    "serialize_ppm",
    "parse_ppm",
    "load_ppm",
    "PPM_MAGIC",
    "TRIPLES_PER_LINE",
]
