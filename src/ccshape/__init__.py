"""
ccshape - Connected Component Shapes
====================================
Geometry over a single extracted connected component.

A `Shape` holds pixel coordinates in insertion order and derives:
    - circumscribed rectangle corners, width, height and areas
    - bounding-rectangle center and centroid
    - coverage of the circumscribed rectangle
    - an isolated square raster image of the shape
"""

from .core import DegenerateShapeError, EmptyShapeError, Point, RasterImage, Shape, ShapeError
from .logger import LogEntry, LogLevel, ShapeLogger, get_logger, set_logger

__version__ = "0.1.0"

__all__ = [
    # Data types
    "Point",
    "Shape",
    "RasterImage",

    # Errors
    "ShapeError",
    "EmptyShapeError",
    "DegenerateShapeError",

    # Logging
    "ShapeLogger",
    "LogLevel",
    "LogEntry",
    "get_logger",
    "set_logger",
]
