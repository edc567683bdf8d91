import pytest

from prediction.geometry import Point, Rect, distance
from prediction.keys import ideal_path, key_for_point, sample_path


def test_rect_rejects_zero_area():
    with pytest.raises(ValueError):
        Rect(0, 0, 0, 10)


def test_rect_contains_is_inclusive():
    rect = Rect(10, 10, 20, 20)
    assert rect.contains(Point(10, 10))
    assert rect.contains(Point(30, 30))
    assert not rect.contains(Point(30.01, 20))
    assert rect.center == Point(20, 20)


def test_key_for_point_first_match_wins_on_overlap():
    layout = {"a": Rect(0, 0, 20, 20), "b": Rect(10, 0, 20, 20)}
    assert key_for_point(Point(15, 5), layout) == "a"
    assert key_for_point(Point(25, 5), layout) == "b"


def test_key_for_point_outside_every_key(layout):
    assert key_for_point(Point(-5, -5), layout) is None
    assert key_for_point(Point(200, 500), {}) is None


def test_key_for_point_on_qwerty(layout):
    # Keys are 40 wide, rows 50 tall; the first row starts at x=0
    assert key_for_point(Point(180, 25), layout) == "t"
    assert key_for_point(Point(40, 75), layout) == "a"
    assert key_for_point(Point(200, 175), layout) == "space"


def test_ideal_path_uses_key_centers(layout):
    assert ideal_path("cat", layout) == (
        Point(160, 125), Point(40, 75), Point(180, 25),
    )


def test_ideal_path_is_case_folded(layout):
    assert ideal_path("CaT", layout) == ideal_path("cat", layout)


def test_ideal_path_skips_characters_without_keys(layout):
    assert ideal_path("c-a-t", layout) == ideal_path("cat", layout)
    assert ideal_path("éè", layout) == ()


def test_sample_path_keeps_vertices_and_spacing():
    points = (Point(0, 0), Point(30, 0), Point(30, 40))
    sampled = sample_path(points, 10.0)
    for vertex in points:
        assert vertex in sampled
    for a, b in zip(sampled, sampled[1:]):
        assert distance(a, b) <= 10.0 + 1e-9


def test_sample_path_rejects_bad_spacing():
    with pytest.raises(ValueError):
        sample_path((Point(0, 0), Point(1, 1)), 0)
