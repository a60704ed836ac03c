"""
Viewport Controller
===================
Connects the drawing, the scene and the camera.

Why is this file needed?
------------------------
1. Rebase: It reads the (base-relative) scene bounds, converts their center
   to world space and installs it as the drawing's new base point.
2. Picking: Screen <-> world conversions add or subtract the base point in
   float64 after (or before) the camera projection, so the user always sees
   true world coordinates while the camera only ever works with small ones.
3. Framing: Zoom-to-fit operates in the same base-relative frame as the
   uploaded geometry.

Classes:
    ViewportController
"""
from __future__ import annotations

import logging
from typing import Optional

from rebaseview.config import DEFAULT_ZOOM_MARGIN
from rebaseview.controller.drawing import Drawing
from rebaseview.model.geometry_primitives import BoundingBox, Point2, PointLike
from rebaseview.view.camera import OrthographicCamera
from rebaseview.view.scene import SceneGraph

logger = logging.getLogger(__name__)


class ViewportController:
    def __init__(
        self,
        drawing: Drawing,
        camera: Optional[OrthographicCamera] = None,
        scene: Optional[SceneGraph] = None,
    ) -> None:
        self.drawing = drawing
        self.scene = scene if scene is not None else drawing.scene
        self.camera = camera if camera is not None else OrthographicCamera()

    @property
    def base_point(self) -> Point2:
        return self.drawing.base_point

    # ------------------------------------------------------------------------------
    # Rebase
    # ------------------------------------------------------------------------------

    def rebase(self) -> Optional[Point2]:
        """
        Move the base point to the center of the current scene.

        Returns the new base point, or None if the scene is empty.
        """
        box = self.scene.get_bounds()
        if box.is_empty:
            logger.debug("Rebase skipped: scene is empty.")
            return None

        previous = self.drawing.base_point
        world_center = box.center + previous
        self.drawing.set_base_point(world_center)

        # keep the same world region on screen: the camera lives in the base-relative frame
        self.camera.look_at(self.camera.position + previous - world_center)
        return world_center

    # ------------------------------------------------------------------------------
    # Coordinate conversion
    # ------------------------------------------------------------------------------

    def screen_to_world(self, screen_point: PointLike) -> Point2:
        """Client pixel (origin top-left) -> true world coordinates."""
        relative = self.camera.client_to_world(screen_point)
        return relative + self.drawing.base_point

    def world_to_screen(self, world_point: PointLike) -> tuple[float, float]:
        """True world coordinates -> client pixel (origin top-left)."""
        relative = Point2.of(world_point) - self.drawing.base_point
        return self.camera.world_to_client(relative)

    def screen_to_relative(self, screen_point: PointLike) -> Point2:
        """Client pixel -> base-relative (scene) coordinates."""
        return self.camera.client_to_world(screen_point)

    def world_to_ndc(self, world_point: PointLike) -> tuple[float, float]:
        relative = Point2.of(world_point) - self.drawing.base_point
        return self.camera.project(relative)

    def visible_world_bounds(self) -> BoundingBox:
        return self.camera.visible_bounds().translated(self.drawing.base_point)

    # ------------------------------------------------------------------------------
    # Framing
    # ------------------------------------------------------------------------------

    def zoom_to(self, box: BoundingBox, margin: float = DEFAULT_ZOOM_MARGIN) -> bool:
        """Frame a base-relative box. Returns False if nothing was done."""
        if box.is_empty:
            logger.debug("Zoom skipped: empty bounds.")
            return False
        if not self.camera.fit(box, margin):
            logger.debug("Bounds have no extent; camera recentered without zoom change.")
        logger.debug(f"Camera framed on {box}: {self.camera!r}")
        return True

    def zoom_to_fit(self, margin: float = DEFAULT_ZOOM_MARGIN) -> bool:
        return self.zoom_to(self.scene.get_bounds(), margin)

    def resize(self, width: int, height: int) -> None:
        self.camera.update_frustum(width, height)
