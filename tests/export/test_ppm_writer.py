from __future__ import annotations

import io
import math

import pytest

from raytracer.core.canvas import Canvas
from raytracer.core.color import Color
from raytracer.export.ppm import PPMWriter, parse_ppm, serialize_ppm

SCENARIO_PPM = (
    "P3\n5 3\n255\n"
    "255 0 0 0 0 0 0 0 0 0 0 0 0 0 0\n"
    "0 0 0 0 0 0 0 128 0 0 0 0 0 0 0\n"
    "0 0 0 0 0 0 0 0 0 0 0 0 0 0 255\n"
)


@pytest.mark.smoke
def test_scenario_canvas_serializes_exactly(scenario_canvas: Canvas) -> None:
    assert serialize_ppm(scenario_canvas) == SCENARIO_PPM


def test_writer_streams_into_text_io(scenario_canvas: Canvas) -> None:
    fp = io.StringIO()
    PPMWriter().write(scenario_canvas, fp)
    assert fp.getvalue() == SCENARIO_PPM


def test_header_lines() -> None:
    lines = serialize_ppm(Canvas.create(7, 2)).splitlines()
    assert lines[0] == "P3"
    assert lines[1] == "7 2"
    assert lines[2] == "255"


def test_wrapping_follows_triple_count_not_row_width() -> None:
    # 4x2 = 8 triples: one full line of 5, then 3; the first row (4 triples)
    # is continued on the same line.
    c = Canvas.create(4, 2)
    c.write(0, 1, Color(1.0, 1.0, 1.0))
    body = serialize_ppm(c).split("\n")[3:]
    assert body == [
        "0 0 0 0 0 0 0 0 0 0 0 0 255 255 255",
        "0 0 0 0 0 0 0 0 0",
        "",
    ]


def test_every_line_holds_at_most_15_values() -> None:
    c = Canvas.create(10, 2)
    c.fill(Color(1.0, 0.8, 0.6))
    body = serialize_ppm(c).splitlines()[3:]
    assert len(body) == 4
    for line in body:
        assert line == " ".join(["255 204 153"] * 5)


def test_single_pixel_canvas_ends_with_one_newline() -> None:
    text = serialize_ppm(Canvas.create(1, 1))
    assert text == "P3\n1 1\n255\n0 0 0\n"


def test_output_ends_with_single_newline_when_count_is_multiple_of_five() -> None:
    text = serialize_ppm(Canvas.create(5, 1))
    assert text.endswith("0 0 0\n")
    assert not text.endswith("\n\n")


def test_no_trailing_space_on_any_line() -> None:
    c = Canvas.create(3, 3)
    for line in serialize_ppm(c).split("\n"):
        assert not line.endswith(" ")


def test_serialization_does_not_modify_canvas(scenario_canvas: Canvas) -> None:
    before = scenario_canvas.as_array(copy=True)
    serialize_ppm(scenario_canvas)
    assert (scenario_canvas.as_array() == before).all()
    assert scenario_canvas.pixel_at(0, 0) == Color(1.5, 0.0, 0.0)


def test_non_finite_channels_stay_in_byte_range() -> None:
    inf = Color(math.inf, -math.inf, 1.0)
    c = Canvas.create(3, 1)
    c.write(0, 0, inf)
    c.write(1, 0, inf.subtract(inf))  # nan in the first two channels
    c.write(2, 0, Color(math.nan, 0.5, -math.inf))
    text = serialize_ppm(c)
    assert text.splitlines()[3] == "255 0 255 0 0 0 0 128 0"
    values = [int(v) for v in " ".join(text.splitlines()[3:]).split()]
    assert all(0 <= v <= 255 for v in values)
    # the output must read back with the package's own reader
    assert parse_ppm(text).pixel_at(0, 0).to_quantized() == (255, 0, 255)
