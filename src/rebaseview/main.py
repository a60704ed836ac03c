"""
Application Initialization
==========================
Builds the demo drawing and starts the Qt event loop.

The demo reproduces the precision problem: a 128-sided circle of radius
1000 placed at (4e9, 4e9). Before rebasing, the float32 vertex buffers can
only hold positions 256 units apart and the circle renders as a coarse
polygon; after "Rebase" it is smooth again.
"""
import logging
import sys

from PySide6.QtCore import QTimer
from PySide6.QtWidgets import QApplication

from rebaseview.config import DEFAULT_SEGMENTS, DEMO_CENTER, DEMO_RADIUS
from rebaseview.logging_config import setup_logging
from rebaseview.model.geometry_primitives import CirclePrimitive, Point2, PointsPrimitive
from rebaseview.view.main_window import MainWindow, VISIBLE_APP_NAME


def demo_primitives() -> list:
    center = Point2(*DEMO_CENTER)
    return [
        CirclePrimitive(center=center, radius=DEMO_RADIUS, segments=DEFAULT_SEGMENTS),
        PointsPrimitive(points=(center,)),
    ]


def main() -> int:
    setup_logging(level=logging.INFO, silence_vtk=True)

    app = QApplication(sys.argv)
    app.setApplicationName(VISIBLE_APP_NAME)

    window = MainWindow()
    window.view.add_primitives(demo_primitives())
    window.show()

    # fit once the render window has its final size
    QTimer.singleShot(0, window.view.zoom_to_fit)

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
