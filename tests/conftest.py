import sys
from pathlib import Path

import pytest

# Make `rebaseview` importable when pytest runs from a source checkout.
_SRC = Path(__file__).resolve().parents[1] / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from rebaseview.controller.drawing import Drawing  # noqa: E402
from rebaseview.controller.viewport import ViewportController  # noqa: E402
from rebaseview.model.geometry_primitives import CirclePrimitive, Point2  # noqa: E402
from rebaseview.render.backend import RenderBackend  # noqa: E402
from rebaseview.view.camera import OrthographicCamera  # noqa: E402
from rebaseview.view.scene import SceneGraph  # noqa: E402

FAR_CENTER = Point2(4e8, 4e8)
VERY_FAR_CENTER = Point2(4e9, 4e9)


@pytest.fixture
def backend():
    return RenderBackend()


@pytest.fixture
def scene():
    return SceneGraph()


@pytest.fixture
def drawing(scene, backend):
    return Drawing(scene=scene, backend=backend)


@pytest.fixture
def camera():
    return OrthographicCamera(width=800, height=600)


@pytest.fixture
def controller(drawing, camera):
    return ViewportController(drawing, camera)


@pytest.fixture
def far_circle():
    return CirclePrimitive(center=FAR_CENTER, radius=1000.0, segments=128)


@pytest.fixture
def very_far_circle():
    return CirclePrimitive(center=VERY_FAR_CENTER, radius=1000.0, segments=128)
