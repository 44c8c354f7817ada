"""Tests for SVG serialization."""

import pytest

from blobqr.svg.serializer import background_rect, fmt, rect, serialize_svg


@pytest.mark.parametrize(
    "value, expected",
    [
        (9.0, "9"),
        (30, "30"),
        (0.5, "0.5"),
        (2.25, "2.25"),
        (20.999, "21"),
        (-0.0, "0"),
        (-4.5, "-4.5"),
    ],
)
def test_fmt(value, expected):
    assert fmt(value) == expected


def test_rect_attribute_order():
    elem = rect(30, 0, 30, 30, "#000", rx="6")
    assert list(elem) == ["tag", "x", "y", "width", "height", "rx", "fill"]


def test_document_header():
    svg = serialize_svg([background_rect(90, 90, "#FFFFFF")], 90, 90)
    lines = svg.splitlines()
    assert lines[0] == '<?xml version="1.0" encoding="UTF-8"?>'
    assert 'viewBox="0 0 90 90"' in lines[1]
    assert 'shape-rendering="crispEdges"' in lines[1]
    assert lines[2] == '  <rect width="90" height="90" fill="#FFFFFF" />'
    assert lines[-1] == "</svg>"


def test_nested_children():
    group = {"tag": "g", "class": "finder", "children": [rect(0, 0, 1, 1, "#000")]}
    svg = serialize_svg([group], 10, 10)
    assert '  <g class="finder">\n    <rect x="0" y="0" width="1" height="1" fill="#000" />\n  </g>' in svg


def test_attribute_values_escaped():
    svg = serialize_svg([{"tag": "path", "d": "M0,0 Z", "fill": 'a"<b'}], 10, 10)
    assert 'fill="a&quot;&lt;b"' in svg


def test_no_rendering_hint():
    svg = serialize_svg([], 10, 10, shape_rendering=None)
    assert "shape-rendering" not in svg


def test_title_escaped():
    svg = serialize_svg([], 10, 10, title="a & b")
    assert "<title>a &amp; b</title>" in svg
