"""Shape model, its collaborators and error types."""

from .models import DegenerateShapeError, EmptyShapeError, Point, ShapeError
from .raster import RasterImage
from .shape import Shape

__all__ = [
    "Point",
    "Shape",
    "RasterImage",
    "ShapeError",
    "EmptyShapeError",
    "DegenerateShapeError",
]
