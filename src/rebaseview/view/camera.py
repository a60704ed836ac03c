"""
Orthographic 2D Camera
Looks down the Z axis at the XY plane. Positions are expressed in the same
base-relative frame as the uploaded geometry.

Coordinate systems used below:
    world  - base-relative XY coordinates of the scene
    NDC    - normalized device coordinates, (-1, -1) bottom-left, (1, 1) top-right
    client - window pixels, origin at the top-left corner, Y pointing down
"""
from __future__ import annotations

from rebaseview.config import CAMERA_DISTANCE, CAMERA_FRUSTUM, DEFAULT_VIEWPORT_SIZE
from rebaseview.model.geometry_primitives import ORIGIN, BoundingBox, Point2, PointLike


class OrthographicCamera:
    def __init__(
        self,
        width: int = DEFAULT_VIEWPORT_SIZE[0],
        height: int = DEFAULT_VIEWPORT_SIZE[1],
        frustum: float = CAMERA_FRUSTUM,
        distance: float = CAMERA_DISTANCE,
    ) -> None:
        self.frustum = frustum
        self.distance = distance
        self.position: Point2 = ORIGIN
        self.zoom: float = 1.0

        self.left = self.right = self.top = self.bottom = 0.0
        self.width = self.height = 1
        self.update_frustum(width, height)

    def __repr__(self) -> str:
        return (
            f"OrthographicCamera(position=({self.position.x:g}, {self.position.y:g}), "
            f"zoom={self.zoom:g}, viewport={self.width}x{self.height})"
        )

    # ---- configuration ----

    @property
    def aspect(self) -> float:
        return self.width / self.height

    def update_frustum(self, width: int | None = None, height: int | None = None) -> None:
        """Resize the viewport and rebuild the view volume around the new aspect ratio."""
        if width is not None:
            self.width = max(1, int(width))
        if height is not None:
            self.height = max(1, int(height))
        aspect = self.aspect
        self.left = -aspect * self.frustum
        self.right = aspect * self.frustum
        self.top = self.frustum
        self.bottom = -self.frustum

    def look_at(self, target: PointLike) -> None:
        self.position = Point2.of(target)

    @property
    def half_extent(self) -> tuple[float, float]:
        """Half width and half height of the visible area in world units."""
        return (self.right - self.left) / (2.0 * self.zoom), (self.top - self.bottom) / (2.0 * self.zoom)

    def visible_bounds(self) -> BoundingBox:
        half_w, half_h = self.half_extent
        c = self._view_center()
        return BoundingBox(c.x - half_w, c.y - half_h, c.x + half_w, c.y + half_h)

    def fit(self, box: BoundingBox, margin: float = 1.0) -> bool:
        """
        Center on `box` and zoom so that it fills the view, scaled by `margin`.

        Returns False (zoom untouched) when the box has no extent.
        """
        self.look_at(box.center)
        w = box.width * margin
        h = box.height * margin
        if w <= 0.0 and h <= 0.0:
            return False

        ratios = []
        if w > 0.0:
            ratios.append((self.right - self.left) / w)
        if h > 0.0:
            ratios.append((self.top - self.bottom) / h)
        self.zoom = min(ratios)
        return True

    # ---- projection ----

    def project(self, point: PointLike) -> tuple[float, float]:
        """World (camera frame) -> NDC."""
        p = Point2.of(point)
        c = self._view_center()
        half_w, half_h = self.half_extent
        return (p.x - c.x) / half_w, (p.y - c.y) / half_h

    def unproject(self, ndc: PointLike) -> Point2:
        """NDC -> world (camera frame)."""
        nx, ny = ndc
        c = self._view_center()
        half_w, half_h = self.half_extent
        return Point2(c.x + nx * half_w, c.y + ny * half_h)

    # ---- client window ----

    def client_to_ndc(self, point: PointLike) -> tuple[float, float]:
        x, y = point
        return (x / self.width) * 2.0 - 1.0, -(y / self.height) * 2.0 + 1.0

    def ndc_to_client(self, ndc: PointLike) -> tuple[float, float]:
        nx, ny = ndc
        return ((nx + 1.0) / 2.0) * self.width, ((-ny + 1.0) / 2.0) * self.height

    def display_to_client(self, point: PointLike) -> tuple[float, float]:
        """VTK display pixels (origin bottom-left) -> client pixels (origin top-left)."""
        x, y = point
        # pixel rows run 0 .. height - 1 in both systems
        return x, (self.height - 1) - y

    def client_to_world(self, point: PointLike) -> Point2:
        return self.unproject(self.client_to_ndc(point))

    def world_to_client(self, point: PointLike) -> tuple[float, float]:
        return self.ndc_to_client(self.project(point))

    def world_to_ndc(self, point: PointLike) -> tuple[float, float]:
        return self.project(point)

    def _view_center(self) -> Point2:
        # an asymmetric frustum shifts the view center away from the camera position
        return Point2(
            self.position.x + (self.left + self.right) / (2.0 * self.zoom),
            self.position.y + (self.top + self.bottom) / (2.0 * self.zoom),
        )
