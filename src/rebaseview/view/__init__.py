"""
The VIEW layer: scene container, camera model and the Qt/PyVista widgets.
Only `widgets` and `main_window` import Qt.
"""
