"""
Main Application Window
=======================
Toolbar with the rebase/zoom actions, the drawing view, and a status bar
showing the world coordinates under the mouse.
"""
from typing import Optional

from PySide6.QtGui import QAction
from PySide6.QtWidgets import QLabel, QMainWindow, QToolBar, QWidget

from rebaseview.view.widgets.drawing_view import DrawingView

VISIBLE_APP_NAME = "Rebase Viewer"


class MainWindow(QMainWindow):
    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1280, 800)

        self.view = DrawingView(self)
        self.setCentralWidget(self.view)

        # --- TOOLBAR ---
        toolbar = QToolBar("View")
        self.addToolBar(toolbar)

        self.act_rebase = QAction("Rebase", self)
        self.act_rebase.setToolTip("Move the rendering origin to the center of the drawing")
        self.act_rebase.triggered.connect(self.on_rebase)
        toolbar.addAction(self.act_rebase)

        self.act_fit = QAction("Zoom to fit", self)
        self.act_fit.triggered.connect(lambda: self.view.zoom_to_fit())
        toolbar.addAction(self.act_fit)

        # --- STATUS BAR ---
        self.label_x = QLabel("X: -")
        self.label_y = QLabel("Y: -")
        self.label_base = QLabel("Base: (0.00, 0.00)")
        status = self.statusBar()
        status.addWidget(self.label_x)
        status.addWidget(self.label_y)
        status.addPermanentWidget(self.label_base)

        # --- SIGNAL CONNECTIONS ---
        self.view.mouse_moved.connect(self.on_mouse_moved)
        self.view.base_point_changed.connect(self.on_base_point_changed)

    def on_rebase(self) -> None:
        if self.view.rebase() is not None:
            self.view.zoom_to_fit()
            # the scene is already centered on its own bounds
            self.act_rebase.setEnabled(False)

    def on_mouse_moved(self, x: float, y: float) -> None:
        self.label_x.setText(f"X: {x:.2f}")
        self.label_y.setText(f"Y: {y:.2f}")

    def on_base_point_changed(self, x: float, y: float) -> None:
        self.label_base.setText(f"Base: ({x:.2f}, {y:.2f})")
