import dataclasses
import math

import numpy as np
import pytest

from rebaseview.model.geometry_primitives import (
    BoundingBox,
    CirclePrimitive,
    MaterializedGeometry,
    Point2,
    PointsPrimitive,
    PolylinePrimitive,
    RenderKind,
    Style,
)


def test_point_arithmetic():
    a = Point2(4e8, 4e8)
    b = Point2(1.5, -2.5)
    assert a + b == Point2(4e8 + 1.5, 4e8 - 2.5)
    assert (a + b) - a == Point2(1.5, -2.5)
    assert -b == Point2(-1.5, 2.5)


def test_point_of_coerces_pairs_and_arrays():
    assert Point2.of((1, 2)) == Point2(1.0, 2.0)
    assert Point2.of(np.array([3.0, 4.0])) == Point2(3.0, 4.0)
    p = Point2(5.0, 6.0)
    assert Point2.of(p) is p


def test_point_is_finite():
    assert Point2(1.0, 2.0).is_finite()
    assert not Point2(math.nan, 0.0).is_finite()
    assert not Point2(0.0, math.inf).is_finite()


def test_circle_validation():
    with pytest.raises(ValueError):
        CirclePrimitive(center=Point2(0, 0), radius=0.0)
    with pytest.raises(ValueError):
        CirclePrimitive(center=Point2(0, 0), radius=-1.0)
    with pytest.raises(ValueError):
        CirclePrimitive(center=Point2(0, 0), radius=1.0, segments=2)
    with pytest.raises(ValueError):
        CirclePrimitive(center=Point2(math.nan, 0), radius=1.0)


def test_circle_accepts_tuple_center_and_is_immutable():
    circle = CirclePrimitive(center=(10.0, 20.0), radius=5.0)
    assert circle.center == Point2(10.0, 20.0)
    assert circle.segments == 128
    with pytest.raises(dataclasses.FrozenInstanceError):
        circle.radius = 6.0


def test_circle_kind_follows_style():
    assert CirclePrimitive(center=(0, 0), radius=1.0).kind is RenderKind.LINE
    assert CirclePrimitive(center=(0, 0), radius=1.0, style=Style(filled=True)).kind is RenderKind.MESH


def test_circle_world_bounds():
    box = CirclePrimitive(center=(4e8, -4e8), radius=1000.0).world_bounds()
    assert box == BoundingBox(4e8 - 1000.0, -4e8 - 1000.0, 4e8 + 1000.0, -4e8 + 1000.0)


def test_polyline_validation():
    with pytest.raises(ValueError):
        PolylinePrimitive(points=[(0, 0)])
    with pytest.raises(ValueError):
        PolylinePrimitive(points=[(0, 0), (math.inf, 1)])


def test_polyline_converts_points():
    line = PolylinePrimitive(points=[(0, 0), (3, 4)], closed=True)
    assert line.points == (Point2(0.0, 0.0), Point2(3.0, 4.0))
    np.testing.assert_array_equal(line.world_points(), [[0.0, 0.0], [3.0, 4.0]])
    assert line.world_bounds() == BoundingBox(0.0, 0.0, 3.0, 4.0)


def test_points_primitive_validation():
    with pytest.raises(ValueError):
        PointsPrimitive(points=[])
    assert PointsPrimitive(points=[(1, 1)]).kind is RenderKind.POINTS


def test_bounding_box_empty():
    box = BoundingBox.empty()
    assert box.is_empty
    assert box.size == (0.0, 0.0)
    with pytest.raises(ValueError):
        _ = box.center


def test_bounding_box_union_and_center():
    a = BoundingBox(0.0, 0.0, 2.0, 2.0)
    b = BoundingBox(-2.0, 1.0, 1.0, 6.0)
    box = BoundingBox.empty().union(a).union(b)
    assert box == BoundingBox(-2.0, 0.0, 2.0, 6.0)
    assert box.center == Point2(0.0, 3.0)
    assert box.size == (4.0, 6.0)


def test_bounding_box_scaled_and_translated():
    box = BoundingBox(-1.0, -2.0, 1.0, 2.0)
    assert box.scaled(2.0) == BoundingBox(-2.0, -4.0, 2.0, 4.0)
    assert box.translated(Point2(10.0, 20.0)) == BoundingBox(9.0, 18.0, 11.0, 22.0)
    assert BoundingBox.empty().scaled(2.0).is_empty


def test_bounding_box_from_points():
    box = BoundingBox.from_points([[1.0, 5.0], [-3.0, 2.0]])
    assert box == BoundingBox(-3.0, 2.0, 1.0, 5.0)
    assert box.contains(Point2(0.0, 3.0))
    assert BoundingBox.from_points(np.empty((0, 2))).is_empty


def test_materialized_positions_are_read_only():
    circle = CirclePrimitive(center=(0, 0), radius=1.0, segments=8)
    geometry = MaterializedGeometry(circle, Point2(0, 0), np.zeros((8, 2)), RenderKind.LINE, closed=True)

    assert geometry.n_points == 8
    with pytest.raises(ValueError):
        geometry.positions[0, 0] = 1.0


def test_materialized_world_positions_add_base_point():
    line = PolylinePrimitive(points=[(0, 0), (1, 1)])
    geometry = MaterializedGeometry(line, Point2(100.0, 200.0), [[0.0, 0.0], [1.0, 1.0]], RenderKind.LINE)
    np.testing.assert_array_equal(geometry.world_positions(), [[100.0, 200.0], [101.0, 201.0]])
