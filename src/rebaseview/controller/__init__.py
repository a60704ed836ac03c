"""
The CONTROLLER layer owns the base point and turns world-space primitives
into render items, and maps between screen and world coordinates.
"""
