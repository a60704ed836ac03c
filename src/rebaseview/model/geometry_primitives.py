"""
Geometric Primitives in World Space.

Primitives are the authoritative, immutable description of a drawing. They
are always expressed in full float64 world coordinates (survey or project
origin) and are never handed to the rendering stage directly; see
`rebaseview.controller.drawing` for the materialization step.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Sequence, Tuple, Union, TYPE_CHECKING

import numpy as np

from rebaseview.config import DEFAULT_COLOR, DEFAULT_LINE_WIDTH, DEFAULT_SEGMENTS, MIN_CIRCLE_SEGMENTS, WORLD_DTYPE

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Point2:
    """A point (or offset) in the XY plane, stored in full precision."""
    x: float
    y: float

    def __add__(self, other: Point2) -> Point2:
        if not isinstance(other, Point2):
            return NotImplemented
        return Point2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point2) -> Point2:
        if not isinstance(other, Point2):
            return NotImplemented
        return Point2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Point2:
        return Point2(-self.x, -self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    @classmethod
    def of(cls, value: PointLike) -> Point2:
        """Coerce a Point2, a pair or a length-2 array into a Point2."""
        if isinstance(value, Point2):
            return value
        x, y = value
        return cls(float(x), float(y))

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y], dtype=WORLD_DTYPE)


PointLike = Union[Point2, Tuple[float, float], Sequence[float]]

ORIGIN = Point2(0.0, 0.0)


class RenderKind(Enum):
    """Capability tag of a piece of renderable geometry, fixed at creation."""
    LINE = "line"
    MESH = "mesh"
    POINTS = "points"


@dataclass(frozen=True)
class Style:
    color: str | tuple[float, float, float] = DEFAULT_COLOR
    line_width: float = DEFAULT_LINE_WIDTH
    opacity: float = 1.0
    filled: bool = False  # circles only: triangulated disk instead of outline
    point_size: float = 5.0


@dataclass(frozen=True)
class BoundingBox:
    """
    Axis-aligned box in the XY plane.

    The empty box has inverted infinite bounds so that `union` with any
    non-empty box returns the other box unchanged.
    """
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @classmethod
    def empty(cls) -> BoundingBox:
        return cls(math.inf, math.inf, -math.inf, -math.inf)

    @classmethod
    def from_points(cls, points: npt.ArrayLike) -> BoundingBox:
        arr = np.asarray(points, dtype=WORLD_DTYPE).reshape(-1, 2)
        if arr.shape[0] == 0:
            return cls.empty()
        x_min, y_min = arr.min(axis=0)
        x_max, y_max = arr.max(axis=0)
        return cls(float(x_min), float(y_min), float(x_max), float(y_max))

    @property
    def is_empty(self) -> bool:
        return self.max_x < self.min_x or self.max_y < self.min_y

    @property
    def center(self) -> Point2:
        if self.is_empty:
            raise ValueError("An empty bounding box has no center.")
        return Point2((self.min_x + self.max_x) / 2.0, (self.min_y + self.max_y) / 2.0)

    @property
    def width(self) -> float:
        return 0.0 if self.is_empty else self.max_x - self.min_x

    @property
    def height(self) -> float:
        return 0.0 if self.is_empty else self.max_y - self.min_y

    @property
    def size(self) -> Tuple[float, float]:
        return self.width, self.height

    def union(self, other: BoundingBox) -> BoundingBox:
        return BoundingBox(
            min(self.min_x, other.min_x),
            min(self.min_y, other.min_y),
            max(self.max_x, other.max_x),
            max(self.max_y, other.max_y),
        )

    def scaled(self, factor: float) -> BoundingBox:
        """Grow (or shrink) the box about its center by `factor`."""
        if self.is_empty:
            return self
        c = self.center
        half_w = self.width * factor / 2.0
        half_h = self.height * factor / 2.0
        return BoundingBox(c.x - half_w, c.y - half_h, c.x + half_w, c.y + half_h)

    def translated(self, offset: Point2) -> BoundingBox:
        if self.is_empty:
            return self
        return BoundingBox(
            self.min_x + offset.x,
            self.min_y + offset.y,
            self.max_x + offset.x,
            self.max_y + offset.y,
        )

    def contains(self, point: Point2) -> bool:
        return self.min_x <= point.x <= self.max_x and self.min_y <= point.y <= self.max_y


def _as_point_tuple(points: Iterable[PointLike]) -> tuple[Point2, ...]:
    return tuple(Point2.of(p) for p in points)


@dataclass(frozen=True)
class CirclePrimitive:
    """A circle approximated by a regular polygon with `segments` sides."""
    center: Point2
    radius: float
    segments: int = DEFAULT_SEGMENTS
    style: Style = field(default_factory=Style)

    def __post_init__(self) -> None:
        object.__setattr__(self, "center", Point2.of(self.center))
        if not self.center.is_finite():
            raise ValueError(f"Circle center must be finite, got {self.center}.")
        if not math.isfinite(self.radius) or self.radius <= 0.0:
            raise ValueError(f"Circle radius must be a positive finite number, got {self.radius}.")
        if self.segments < MIN_CIRCLE_SEGMENTS:
            raise ValueError(f"A circle needs at least {MIN_CIRCLE_SEGMENTS} segments, got {self.segments}.")

    @property
    def kind(self) -> RenderKind:
        return RenderKind.MESH if self.style.filled else RenderKind.LINE

    def world_bounds(self) -> BoundingBox:
        c, r = self.center, self.radius
        return BoundingBox(c.x - r, c.y - r, c.x + r, c.y + r)


@dataclass(frozen=True)
class PolylinePrimitive:
    """An open or closed chain of straight segments through world points."""
    points: tuple[Point2, ...]
    closed: bool = False
    style: Style = field(default_factory=Style)

    def __post_init__(self) -> None:
        pts = _as_point_tuple(self.points)
        if len(pts) < 2:
            raise ValueError(f"A polyline needs at least 2 points, got {len(pts)}.")
        if not all(p.is_finite() for p in pts):
            raise ValueError("Polyline points must be finite.")
        object.__setattr__(self, "points", pts)

    @property
    def kind(self) -> RenderKind:
        return RenderKind.LINE

    def world_points(self) -> npt.NDArray[np.float64]:
        return np.array([[p.x, p.y] for p in self.points], dtype=WORLD_DTYPE)

    def world_bounds(self) -> BoundingBox:
        return BoundingBox.from_points(self.world_points())


@dataclass(frozen=True)
class PointsPrimitive:
    """Point markers (survey stations, snap targets)."""
    points: tuple[Point2, ...]
    style: Style = field(default_factory=Style)

    def __post_init__(self) -> None:
        pts = _as_point_tuple(self.points)
        if not pts:
            raise ValueError("A point set needs at least one point.")
        if not all(p.is_finite() for p in pts):
            raise ValueError("Marker points must be finite.")
        object.__setattr__(self, "points", pts)

    @property
    def kind(self) -> RenderKind:
        return RenderKind.POINTS

    def world_points(self) -> npt.NDArray[np.float64]:
        return np.array([[p.x, p.y] for p in self.points], dtype=WORLD_DTYPE)

    def world_bounds(self) -> BoundingBox:
        return BoundingBox.from_points(self.world_points())


Primitive = Union[CirclePrimitive, PolylinePrimitive, PointsPrimitive]


@dataclass(frozen=True)
class MaterializedGeometry:
    """
    Base-relative vertices of one primitive, as computed in float64 before
    upload to the rendering stage.

    `positions` is read-only: new geometry is only ever produced by
    materializing the primitive again.
    """
    primitive: Primitive
    base_point: Point2
    positions: npt.NDArray[np.float64]
    kind: RenderKind
    closed: bool = False

    def __post_init__(self) -> None:
        arr = np.array(self.positions, dtype=WORLD_DTYPE).reshape(-1, 2)
        arr.flags.writeable = False
        object.__setattr__(self, "positions", arr)

    @property
    def n_points(self) -> int:
        return int(self.positions.shape[0])

    @property
    def style(self) -> Style:
        return self.primitive.style

    def world_positions(self) -> npt.NDArray[np.float64]:
        """Recover world coordinates by adding the base point back."""
        return self.positions + self.base_point.to_array()
