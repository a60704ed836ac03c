import numpy as np
import pytest

from rebaseview.model.geometry_builder import as_closed_xy, circle_points, ellipse_points, offset_points


def test_circle_points_shape_and_first_point():
    pts = circle_points(10.0, -5.0, 2.0, segments=16)

    assert pts.shape == (16, 2)
    assert pts.dtype == np.float64
    np.testing.assert_allclose(pts[0], [12.0, -5.0])
    # the loop is implicit, the first point is not repeated
    assert not np.allclose(pts[0], pts[-1])


def test_circle_points_are_evenly_spaced_on_the_circle():
    pts = circle_points(0.0, 0.0, 3.0, segments=128)

    radii = np.hypot(pts[:, 0], pts[:, 1])
    np.testing.assert_allclose(radii, 3.0)

    angles = np.unwrap(np.arctan2(pts[:, 1], pts[:, 0]))
    np.testing.assert_allclose(np.diff(angles), 2.0 * np.pi / 128)


def test_circle_points_is_deterministic():
    a = circle_points(1.5, 2.5, 100.0, segments=64)
    b = circle_points(1.5, 2.5, 100.0, segments=64)
    assert np.array_equal(a, b)


def test_circle_points_accepts_huge_centers():
    pts = circle_points(4e8, 4e8, 1000.0, segments=32)
    offsets = pts - 4e8
    np.testing.assert_allclose(np.hypot(offsets[:, 0], offsets[:, 1]), 1000.0, atol=1e-6)


def test_ellipse_points_axes():
    pts = ellipse_points(0.0, 0.0, 4.0, 1.0, segments=4)
    np.testing.assert_allclose(pts, [[4.0, 0.0], [0.0, 1.0], [-4.0, 0.0], [0.0, -1.0]], atol=1e-12)


def test_offset_points_returns_new_array():
    src = np.array([[10.0, 20.0], [30.0, 40.0]])
    out = offset_points(src, 10.0, 20.0)

    np.testing.assert_array_equal(out, [[0.0, 0.0], [20.0, 20.0]])
    np.testing.assert_array_equal(src, [[10.0, 20.0], [30.0, 40.0]])
    assert out is not src


def test_as_closed_xy_appends_first_point():
    ring = as_closed_xy([(0, 0), (1, 0), (1, 1)])
    assert ring.shape == (4, 2)
    np.testing.assert_array_equal(ring[-1], ring[0])


def test_as_closed_xy_keeps_closed_ring():
    ring = as_closed_xy([(0, 0), (1, 0), (1, 1), (0, 0)])
    assert ring.shape == (4, 2)


@pytest.mark.parametrize("bad", [[], [1.0, 2.0, 3.0], [[1.0, 2.0, 3.0]]])
def test_as_closed_xy_rejects_bad_shapes(bad):
    with pytest.raises(ValueError):
        as_closed_xy(bad)
