"""
Logging Configuration
Sets up the global logger for the viewer and optionally mutes VTK's own
warning window, which otherwise pops up on Windows for every degenerate
triangulation.
"""
import logging
import sys
from typing import Optional

from vtkmodules.vtkCommonCore import vtkObject


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    silence_vtk: bool = False,
) -> logging.Logger:
    """
    Configures the logger for the 'rebaseview' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
        silence_vtk: Turn off VTK's global warning display.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("rebaseview")
    logger.setLevel(level)

    # Restarting the viewer in the same interpreter must not duplicate output
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if silence_vtk:
        vtkObject.GlobalWarningDisplayOff()
        logger.debug("VTK warning display disabled.")

    logger.info("Logging initialized.")
    return logger
