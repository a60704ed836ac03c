"""
rebaseview
==========
Precision-safe rendering of 2D drawings with very large world coordinates.

Geometry is kept in float64 world space and re-materialized relative to a
movable base point before it reaches the float32 rendering stage.
"""
__version__ = "0.1.0"
