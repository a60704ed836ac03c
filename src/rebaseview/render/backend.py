"""
Rendering Stage (PyVista / VTK)
===============================
Wraps the limited-precision part of the pipeline.

Why is this file needed?
------------------------
1. Precision boundary: vertex positions are stored as float32 `PolyData`
   points, exactly as VTK's OpenGL mappers consume them. Whatever precision
   is lost here is gone for good.
2. Resource lifecycle: every handle created here must be disposed, which
   removes its actor from the plotter and releases the VTK buffers.
3. Capability tags: a handle knows once, at creation, whether it is a line,
   a mesh or a point set.

Classes:
    RenderItem: Opaque handle to one piece of uploaded geometry.
    RenderBackend: Factory for handles, optionally bound to a plotter.
"""
from __future__ import annotations

import itertools
import logging
from typing import Optional, TYPE_CHECKING

import numpy as np
import pyvista as pv
from vtkmodules.vtkFiltersGeneral import vtkContourTriangulator

from rebaseview.config import RENDER_DTYPE
from rebaseview.model.geometry_builder import as_closed_xy
from rebaseview.model.geometry_primitives import BoundingBox, MaterializedGeometry, RenderKind, Style

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class RenderItem:
    """
    Uploaded geometry. Exposes bounds and disposal only; its points cannot
    be moved, scaled or otherwise transformed.
    """

    def __init__(
        self,
        item_id: int,
        kind: RenderKind,
        polydata: pv.PolyData,
        backend: RenderBackend,
    ) -> None:
        self._id = item_id
        self._kind = kind
        self._polydata: Optional[pv.PolyData] = polydata
        self._backend = backend
        self.actor: Optional[pv.Actor] = None

    def __repr__(self) -> str:
        state = "disposed" if self.disposed else f"{self.n_points} pts"
        return f"RenderItem(id={self._id}, kind={self._kind.value}, {state})"

    @property
    def id(self) -> int:
        return self._id

    @property
    def kind(self) -> RenderKind:
        return self._kind

    @property
    def disposed(self) -> bool:
        return self._polydata is None

    @property
    def n_points(self) -> int:
        return int(self._require().n_points)

    def stored_points(self) -> npt.NDArray[np.float32]:
        """A copy of the XY positions as the rendering stage holds them."""
        return np.array(self._require().points[:, :2], dtype=RENDER_DTYPE)

    def local_bounds(self) -> BoundingBox:
        """Bounds of the stored (float32) positions."""
        pd = self._require()
        if pd.n_points == 0:
            return BoundingBox.empty()
        x_min, x_max, y_min, y_max = pd.bounds[:4]
        return BoundingBox(float(x_min), float(y_min), float(x_max), float(y_max))

    def dispose(self) -> None:
        """Release the actor and the VTK buffers. Safe to call twice."""
        if self._polydata is None:
            return
        self._backend._release(self)
        self._polydata = None

    def _require(self) -> pv.PolyData:
        if self._polydata is None:
            raise RuntimeError(f"RenderItem {self._id} has been disposed.")
        return self._polydata


class RenderBackend:
    """
    Creates render items from materialized geometry.

    When a plotter is given, each item is also added to it as an actor and
    removed again on dispose. Without a plotter the backend is headless,
    which is what the tests use.
    """

    def __init__(self, plotter: Optional[pv.Plotter] = None) -> None:
        self.plotter = plotter
        self._ids = itertools.count(1)
        self._live: dict[int, RenderItem] = {}

    @property
    def live_count(self) -> int:
        """Number of items created and not yet disposed."""
        return len(self._live)

    def create(self, geometry: MaterializedGeometry) -> RenderItem:
        if geometry.kind is RenderKind.LINE:
            polydata = self._line_polydata(geometry.positions, closed=geometry.closed)
        elif geometry.kind is RenderKind.MESH:
            polydata = self._mesh_polydata(geometry.positions)
        elif geometry.kind is RenderKind.POINTS:
            polydata = self._points_polydata(geometry.positions)
        else:
            raise ValueError(f"Unsupported render kind: {geometry.kind}")

        item = RenderItem(next(self._ids), geometry.kind, polydata, self)
        if self.plotter is not None:
            item.actor = self._add_actor(polydata, geometry.kind, geometry.style)
        self._live[item.id] = item
        logger.debug(f"Created {item!r}")
        return item

    def _release(self, item: RenderItem) -> None:
        if item.actor is not None and self.plotter is not None:
            self.plotter.remove_actor(item.actor, render=False)
        item.actor = None
        self._live.pop(item.id, None)
        logger.debug(f"Disposed render item {item.id}")

    # ---- plotter ----

    def _add_actor(self, polydata: pv.PolyData, kind: RenderKind, style: Style) -> pv.Actor:
        if kind is RenderKind.POINTS:
            return self.plotter.add_mesh(
                polydata,
                color=style.color,
                opacity=style.opacity,
                point_size=style.point_size,
                render_points_as_spheres=True,
                pickable=False,
                show_scalar_bar=False,
                reset_camera=False,
            )
        return self.plotter.add_mesh(
            polydata,
            color=style.color,
            line_width=style.line_width,
            opacity=style.opacity,
            pickable=False,
            show_scalar_bar=False,
            reset_camera=False,
        )

    # ---- buffers ----

    @staticmethod
    def _to_render_points(xy: npt.ArrayLike) -> npt.NDArray[np.float32]:
        """(N, 2) float64 -> (N, 3) float32 on Z=0. This is where precision is lost."""
        xy = np.asarray(xy, dtype=np.float64).reshape(-1, 2)
        n = xy.shape[0]
        return np.c_[xy, np.zeros((n, 1))].astype(RENDER_DTYPE)

    def _line_polydata(self, positions: npt.NDArray[np.float64], closed: bool) -> pv.PolyData:
        n = positions.shape[0]
        pd = pv.PolyData(self._to_render_points(positions))
        # remove vertex cells, so they don't show up as dots
        pd.verts = np.empty(0, np.int_)
        # line loop: the closing segment reuses point 0 instead of duplicating it
        ids = np.arange(n, dtype=np.int_)
        if closed:
            ids = np.append(ids, 0)
        pd.lines = np.hstack([[ids.size], ids])
        return pd

    def _points_polydata(self, positions: npt.NDArray[np.float64]) -> pv.PolyData:
        n = positions.shape[0]
        pd = pv.PolyData(self._to_render_points(positions))
        pd.verts = np.c_[np.ones(n, dtype=np.int_), np.arange(n, dtype=np.int_)].ravel()
        return pd

    def _mesh_polydata(self, positions: npt.NDArray[np.float64]) -> pv.PolyData:
        """Triangulate a closed ring on Z=0 into a filled mesh."""
        ring = as_closed_xy(positions)
        n = ring.shape[0]
        outline = pv.PolyData(self._to_render_points(ring))
        outline.lines = np.hstack([[n], np.arange(n, dtype=np.int_)])

        tri = vtkContourTriangulator()
        tri.SetInputData(outline)
        tri.Update()

        mesh = pv.wrap(tri.GetOutput())
        if mesh.n_points and mesh.points.dtype != RENDER_DTYPE:
            mesh.points = mesh.points.astype(RENDER_DTYPE)
        return mesh
