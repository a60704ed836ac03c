"""
Drawing (Controller)
====================
Holds the authoritative world-space primitives and the current base point.

Why is this file needed?
------------------------
1. Precision: The rendering stage stores float32 positions. Coordinates of
   10^8 - 10^9 units collapse there. Everything uploaded is therefore
   expressed relative to a base point chosen near the geometry.
2. Single path: This is the only place that calls the geometry builder.
   New renderable geometry is always recomputed from the float64 world
   parameters and the base point, never derived from buffers already on
   the rendering stage.
3. Resources: Each rebuild disposes the old render items before creating
   new ones.

Classes:
    Drawing: Primitive registry + base point + materialization.
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional

from rebaseview.model.geometry_builder import circle_points, offset_points
from rebaseview.model.geometry_primitives import (
    ORIGIN,
    BoundingBox,
    CirclePrimitive,
    MaterializedGeometry,
    Point2,
    PointLike,
    PointsPrimitive,
    PolylinePrimitive,
    Primitive,
    RenderKind,
)
from rebaseview.render.backend import RenderBackend
from rebaseview.view.scene import SceneGraph

logger = logging.getLogger(__name__)


def materialize(primitive: Primitive, base_point: Point2) -> MaterializedGeometry:
    """
    Compute the base-relative vertices of a primitive in float64.

    Circles subtract the base point from the center before generating the
    ring so that the trigonometric offsets are added to small numbers.
    """
    if isinstance(primitive, CirclePrimitive):
        c = primitive.center
        positions = circle_points(
            c.x - base_point.x,
            c.y - base_point.y,
            primitive.radius,
            primitive.segments,
        )
        return MaterializedGeometry(primitive, base_point, positions, primitive.kind, closed=True)

    if isinstance(primitive, PolylinePrimitive):
        positions = offset_points(primitive.world_points(), base_point.x, base_point.y)
        return MaterializedGeometry(primitive, base_point, positions, RenderKind.LINE, closed=primitive.closed)

    if isinstance(primitive, PointsPrimitive):
        positions = offset_points(primitive.world_points(), base_point.x, base_point.y)
        return MaterializedGeometry(primitive, base_point, positions, RenderKind.POINTS)

    raise TypeError(f"Unsupported primitive type: {type(primitive).__name__}")


class Drawing:
    """
    World-space drawing materialized into a scene relative to one base point.

    The base point starts at the origin. Setting it rebuilds every render
    item from scratch.
    """

    def __init__(
        self,
        scene: Optional[SceneGraph] = None,
        backend: Optional[RenderBackend] = None,
        primitives: Iterable[Primitive] = (),
    ) -> None:
        self.scene: SceneGraph = scene if scene is not None else SceneGraph()
        self.backend: RenderBackend = backend if backend is not None else RenderBackend()
        self._base_point: Point2 = ORIGIN
        self._primitives: list[Primitive] = []
        self._materialized: list[MaterializedGeometry] = []

        for primitive in primitives:
            self.add_primitive(primitive)

    # ------------------------------------------------------------------------------
    # Base point
    # ------------------------------------------------------------------------------

    @property
    def base_point(self) -> Point2:
        return self._base_point

    @base_point.setter
    def base_point(self, value: PointLike) -> None:
        self.set_base_point(value)

    def get_base_point(self) -> Point2:
        return self._base_point

    def set_base_point(self, point: PointLike) -> None:
        """
        Install a new base point and rebuild all geometry relative to it.

        All materializations are computed before the scene is touched. If the
        upload fails afterwards, the previous base point is restored and its
        geometry is uploaded again before the error propagates.
        """
        new_base = Point2.of(point)
        if not new_base.is_finite():
            raise ValueError(f"Base point must be finite, got {new_base}.")

        rebuilt = [materialize(p, new_base) for p in self._primitives]

        previous = self._base_point
        previous_geometry = list(self._materialized)
        try:
            self._upload(rebuilt)
        except Exception:
            logger.error(
                f"Rebuild at ({new_base.x:.3f}, {new_base.y:.3f}) failed; "
                f"restoring base point ({previous.x:.3f}, {previous.y:.3f})."
            )
            self._upload(previous_geometry)
            raise
        self._base_point = new_base
        logger.info(
            f"Base point moved from ({previous.x:.3f}, {previous.y:.3f}) "
            f"to ({new_base.x:.3f}, {new_base.y:.3f}); {len(rebuilt)} primitives rebuilt."
        )

    # ------------------------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------------------------

    @property
    def primitives(self) -> tuple[Primitive, ...]:
        return tuple(self._primitives)

    @property
    def materialized(self) -> tuple[MaterializedGeometry, ...]:
        return tuple(self._materialized)

    def add_primitive(self, primitive: Primitive) -> Primitive:
        """Register a world-space primitive and materialize it immediately."""
        geometry = materialize(primitive, self._base_point)
        item = self.backend.create(geometry)
        self._primitives.append(primitive)
        self._materialized.append(geometry)
        self.scene.add(item)
        logger.debug(f"Added {type(primitive).__name__} ({geometry.n_points} points).")
        return primitive

    def add_primitives(self, primitives: Iterable[Primitive]) -> None:
        for primitive in primitives:
            self.add_primitive(primitive)

    def clear(self) -> None:
        """Remove all primitives and dispose their render items."""
        self._primitives.clear()
        self._materialized.clear()
        self.scene.clear()

    def world_bounds(self) -> BoundingBox:
        """Bounds of the authoritative world-space parameters (float64)."""
        box = BoundingBox.empty()
        for primitive in self._primitives:
            box = box.union(primitive.world_bounds())
        return box

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _upload(self, geometries: list[MaterializedGeometry]) -> None:
        """
        Dispose the current render items, then create the new ones.

        On failure the items created so far are disposed as well, leaving the
        scene empty.
        """
        self.scene.clear()
        try:
            for geometry in geometries:
                self.scene.add(self.backend.create(geometry))
        except Exception:
            self.scene.clear()
            raise
        self._materialized = list(geometries)
