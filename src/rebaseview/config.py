"""
Configuration & Global Constants
================================
This module serves as the central registry for the numeric defaults of the
viewer.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (segment counts, frustum sizes,
   zoom margins) from being scattered throughout the code.
2. Precision: It names the numeric format of the rendering stage in one
   place, so tests and the render backend agree on what "float32" means.

Exports:
    RENDER_DTYPE: Numeric type of vertex buffers handed to VTK.
    WORLD_DTYPE: Numeric type of authoritative world-space data.
    DEFAULT_SEGMENTS (int): Circle discretization.
    DEFAULT_ZOOM_MARGIN (float): Margin applied by zoom-to-fit.
"""
import numpy as np

# Numeric formats
WORLD_DTYPE = np.float64
RENDER_DTYPE = np.float32

# Geometry defaults
DEFAULT_SEGMENTS: int = 128
DEFAULT_COLOR: str = "red"
DEFAULT_LINE_WIDTH: float = 1.0
MIN_CIRCLE_SEGMENTS: int = 3

# Camera defaults
CAMERA_FRUSTUM: float = 400.0  # half height of the view volume at zoom 1
CAMERA_DISTANCE: float = 500.0
DEFAULT_ZOOM_MARGIN: float = 1.1

# Viewer defaults
DEFAULT_VIEWPORT_SIZE: tuple[int, int] = (1280, 800)
BACKGROUND_COLOR: str = "white"

# Demo drawing: a circle referenced to a survey origin far from (0, 0)
DEMO_CENTER: tuple[float, float] = (10e8 * 4, 10e8 * 4)
DEMO_RADIUS: float = 1000.0
