"""Tests for finder ornaments."""

from blobqr.engine import RenderConfig
from blobqr.engine.finder import finder_ornaments, finder_pattern, finder_positions
from blobqr.engine.matrix import build_matrix


def test_concentric_squares():
    elem = finder_pattern(0, 0, 30, 7, "#112233")
    assert elem["tag"] == "g"
    outer, middle, center = elem["children"]

    assert (outer["x"], outer["width"], outer["fill"]) == ("0", "210", "#112233")
    assert (middle["x"], middle["width"], middle["fill"]) == ("30", "150", "#FFFFFF")
    assert (center["x"], center["width"], center["fill"]) == ("60", "90", "#112233")


def test_corner_radius_follows_module_size():
    elem = finder_pattern(0, 0, 30, 7, "#000")
    assert all(child["rx"] == "6" and child["ry"] == "6" for child in elem["children"])


def test_offset_origin():
    outer, middle, _ = finder_pattern(420, 0, 30, 7, "#000")["children"]
    assert (outer["x"], outer["y"]) == ("420", "0")
    assert (middle["x"], middle["y"]) == ("450", "30")


def test_three_canonical_corners():
    assert finder_positions(21) == [(0, 0), (420, 0), (0, 420)]
    assert finder_positions(25, RenderConfig(module_size=10)) == [(0, 0), (180, 0), (0, 180)]


def test_ornaments_use_color():
    ornaments = finder_ornaments(21, "#abcdef")
    assert len(ornaments) == 3
    for elem in ornaments:
        assert elem["class"] == "finder"
        assert elem["children"][0]["fill"] == "#abcdef"


def test_positions_sit_inside_quiet_zone():
    config = RenderConfig(border=4)
    assert finder_positions(29, config) == [(120, 120), (540, 120), (120, 540)]


def test_ornaments_cover_real_finders_with_border():
    config = RenderConfig(border=4)
    matrix = build_matrix("HELLO", config)
    assert matrix.shape == (29, 29)

    for elem, (x, y) in zip(finder_ornaments(29, "#000", config), finder_positions(29, config)):
        outer = elem["children"][0]
        assert (outer["x"], outer["y"]) == (str(x), str(y))
        r, c = y // config.module_size, x // config.module_size
        assert matrix[r, c : c + 7].all()
        assert matrix[r : r + 7, c].all()
