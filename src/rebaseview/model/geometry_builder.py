from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from rebaseview.config import DEFAULT_SEGMENTS, WORLD_DTYPE

if TYPE_CHECKING:
    from numpy import typing as npt


def circle_points(
    center_x: float,
    center_y: float,
    radius: float,
    segments: int = DEFAULT_SEGMENTS,
) -> npt.NDArray[np.float64]:
    """
    Discretize a circle in XY into an (N, 2) closed loop.

    The loop is implicit: the first point is not repeated at the end.

    Args:
        center_x: X coordinate of the circle center.
        center_y: Y coordinate of the circle center.
        radius: Circle radius.
        segments: Number of points (and sides) of the polygon.

    Returns:
        An array of shape (segments, 2) with points at angles 2*pi*i/segments.
    """
    return ellipse_points(center_x, center_y, radius, radius, segments)


def ellipse_points(
    center_x: float,
    center_y: float,
    a: float,
    b: float,
    segments: int = DEFAULT_SEGMENTS,
) -> npt.NDArray[np.float64]:
    """
    Discretize an axis-aligned ellipse in XY into an (N, 2) closed loop.

    The inputs are used as given, in whatever frame the caller works in.
    Callers that hand the result to the rendering stage must pass
    base-relative centers, otherwise the points lose precision on upload.

    Args:
        center_x: X coordinate of the ellipse center.
        center_y: Y coordinate of the ellipse center.
        a: Semi-axis along X.
        b: Semi-axis along Y.
        segments: Number of points.

    Returns:
        An array of shape (segments, 2).
    """
    i = np.arange(segments, dtype=WORLD_DTYPE)
    theta = i / segments * 2.0 * np.pi
    return np.c_[center_x + np.cos(theta) * a, center_y + np.sin(theta) * b]


def offset_points(
    points: npt.ArrayLike,
    dx: float,
    dy: float,
) -> npt.NDArray[np.float64]:
    """
    Subtract (dx, dy) from every point of an (N, 2) array.

    Returns a new float64 array; the input is never modified.
    """
    arr = np.asarray(points, dtype=WORLD_DTYPE).reshape(-1, 2)
    return arr - np.array([dx, dy], dtype=WORLD_DTYPE)


def as_closed_xy(a: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """
    Ensure the polyline is closed by repeating the first point at the end if necessary.

    Args:
        a: List of (x, y) tuples or (N, 2) array of points.

    Returns:
        (N, 2) array of points with the first point repeated at the end if needed.

    Raises:
        ValueError: If the input is empty or not of shape (N, 2).
    """
    arr = np.asarray(a, dtype=WORLD_DTYPE)
    if arr.ndim != 2 or arr.shape[1] != 2 or arr.shape[0] == 0:
        raise ValueError(f"Expected shape (N, 2), got {arr.shape}.")

    if not np.array_equal(arr[0], arr[-1]):
        arr = np.vstack([arr, arr[0]])

    return arr
