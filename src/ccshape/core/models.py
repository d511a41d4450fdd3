"""
Base structures shared by the shape model.

Holds the pixel coordinate type and the errors raised by geometry queries.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """2D point in pixel coordinates."""

    x: int
    y: int

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def to_tuple(self) -> tuple[int, int]:
        return self.x, self.y


class ShapeError(ValueError):
    """Base class for errors raised by shape geometry queries."""


class EmptyShapeError(ShapeError):
    """Raised when a derived-geometry query is made on a shape with no points."""

    def __init__(self, operation: str):
        super().__init__(f"{operation} is undefined for an empty shape")
        self.operation = operation


class DegenerateShapeError(ShapeError):
    """Raised when the circumscribed rectangle has zero area (point or line)."""

    def __init__(self, operation: str, width: int, height: int):
        super().__init__(
            f"{operation} is undefined for a zero-area rectangle ({width}x{height})"
        )
        self.operation = operation
        self.width = width
        self.height = height


__all__ = [
    "Point",
    "ShapeError",
    "EmptyShapeError",
    "DegenerateShapeError",
]
