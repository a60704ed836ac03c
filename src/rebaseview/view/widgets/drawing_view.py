"""
2D Drawing View (PyVista Wrapper)
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional

from PySide6.QtCore import Signal
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QVBoxLayout, QWidget
from pyvistaqt import QtInteractor

from rebaseview.config import BACKGROUND_COLOR, DEFAULT_ZOOM_MARGIN
from rebaseview.controller.drawing import Drawing
from rebaseview.controller.viewport import ViewportController
from rebaseview.model.geometry_primitives import Point2, Primitive
from rebaseview.render.backend import RenderBackend
from rebaseview.view.camera import OrthographicCamera
from rebaseview.view.scene import SceneGraph

logger = logging.getLogger(__name__)


class DrawingView(QWidget):
    """
    Locked orthographic XY view of a `Drawing`.

    The VTK camera is the source of truth while the user pans and zooms; it
    is copied into the `OrthographicCamera` before every conversion and
    written back after programmatic framing.
    """
    mouse_moved = Signal(float, float)
    base_point_changed = Signal(float, float)

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.plotter: QtInteractor = QtInteractor(self)
        layout.addWidget(self.plotter)
        self._init_plotter()

        self.scene = SceneGraph()
        self.backend = RenderBackend(self.plotter)
        self.drawing = Drawing(scene=self.scene, backend=self.backend)
        self.camera = OrthographicCamera(*self.plotter.window_size)
        self.controller = ViewportController(self.drawing, self.camera, self.scene)

        self._attach_observers()

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def add_primitives(self, primitives: Iterable[Primitive]) -> None:
        self.drawing.add_primitives(primitives)
        self.plotter.render()

    def rebase(self) -> Optional[Point2]:
        self._pull_camera()
        base = self.controller.rebase()
        if base is not None:
            self._push_camera()
            self.base_point_changed.emit(base.x, base.y)
        return base

    def zoom_to_fit(self, margin: float = DEFAULT_ZOOM_MARGIN) -> None:
        self._sync_viewport_size()
        if self.controller.zoom_to_fit(margin):
            self._push_camera()

    def screen_to_world(self, x: float, y: float) -> Point2:
        """Client pixel (origin top-left) to world coordinates."""
        self._pull_camera()
        return self.controller.screen_to_world((x, y))

    # ------------------------------------------------------------------------------
    # Internal: Setup & Observers
    # ------------------------------------------------------------------------------

    def _init_plotter(self) -> None:
        self.plotter.set_background(BACKGROUND_COLOR)
        self.plotter.enable_parallel_projection()
        self.plotter.view_xy()
        self.plotter.enable_image_style()

    def _attach_observers(self) -> None:
        iren = self.plotter.iren
        iren.add_observer("MouseMoveEvent", lambda *_: self._on_mouse_move())
        iren.add_observer("ConfigureEvent", lambda *_: self._sync_viewport_size())

    def _on_mouse_move(self) -> None:
        self._sync_viewport_size()
        x, y = self.camera.display_to_client(self.plotter.iren.get_event_position())
        world = self.screen_to_world(x, y)
        self.mouse_moved.emit(world.x, world.y)

    def _sync_viewport_size(self) -> None:
        w, h = self.plotter.window_size
        if (w, h) != (self.camera.width, self.camera.height):
            self.controller.resize(w, h)

    # ---- camera mirroring ----

    def _pull_camera(self) -> None:
        """VTK camera -> OrthographicCamera."""
        self._sync_viewport_size()
        cam = self.plotter.camera
        fx, fy, _ = cam.focal_point
        self.camera.look_at((fx, fy))
        scale = float(cam.parallel_scale)
        if scale > 0.0:
            self.camera.zoom = self.camera.frustum / scale

    def _push_camera(self) -> None:
        """OrthographicCamera -> VTK camera."""
        cx, cy = self.camera.position
        cam = self.plotter.camera
        cam.position = (cx, cy, self.camera.distance)
        cam.focal_point = (cx, cy, 0.0)
        cam.up = (0.0, 1.0, 0.0)
        cam.parallel_scale = self.camera.half_extent[1]
        self.plotter.reset_camera_clipping_range()
        self.plotter.render()

    def closeEvent(self, event: QCloseEvent) -> None:
        self.drawing.clear()
        self.plotter.close()
        event.accept()
