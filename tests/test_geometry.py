"""Tests for rectangle and point primitives."""

from pixelprobe.core.geometry import Point, Rect, scale_factors


def test_contains_is_half_open() -> None:
    r = Rect(0, 0, 200, 100)
    assert r.contains(Point(0, 0))
    assert r.contains(Point(199.9, 99.9))
    assert not r.contains(Point(200, 50))
    assert not r.contains(Point(50, 100))
    assert not r.contains(Point(-0.1, 10))


def test_contains_respects_origin() -> None:
    r = Rect(100, 125, 100, 50)
    assert r.contains(Point(150, 150))
    assert not r.contains(Point(99, 150))


def test_negative_size_clamped_to_zero() -> None:
    r = Rect(0, 0, -1, -5)
    assert (r.width, r.height) == (0, 0)
    assert r.is_empty
    assert not r.contains(Point(0, 0))


def test_clamped_raises_degenerate_sizes() -> None:
    assert Rect(5, 5, 0, 0).clamped() == Rect(5, 5, 1, 1)
    assert Rect(0, 0, 30, 40).clamped() == Rect(0, 0, 30, 40)


def test_is_empty() -> None:
    assert Rect(0, 0, 0, 10).is_empty
    assert not Rect(0, 0, 1, 1).is_empty


def test_scale_factors_guard_zero_image() -> None:
    assert scale_factors(200, 100, 100, 50) == (2.0, 2.0)
    assert scale_factors(10, 10, 0, 0) == (10.0, 10.0)
