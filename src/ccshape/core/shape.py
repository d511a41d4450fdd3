"""
Connected component represented as an ordered list of pixel coordinates.

Every derived value (corners, size, centroid, coverage, image) is
recomputed from the current points on each call; nothing is cached.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Dict, Iterator, List, Optional, Union

from ccshape.config import (
    BACKGROUND_VALUE,
    DEFAULT_FILLED_THRESHOLD,
    DEFAULT_HOLLOW_THRESHOLD,
    FOREGROUND_VALUE,
)
from ccshape.core import math_tools
from ccshape.core.models import DegenerateShapeError, EmptyShapeError, Point
from ccshape.core.raster import RasterImage, check_pixel_value
from ccshape.logger import LogLevel, get_logger


class Shape:
    """
    A connected component: pixel coordinates in insertion order.

    Duplicates are kept and no connectivity is enforced; the labeling that
    produced the points is the caller's business. Shapes are mutable and
    therefore unhashable.
    """

    __hash__ = None

    def __init__(self, points: Optional[List[Point]] = None):
        self._points: List[Point] = [] if points is None else points

    # Construction

    @classmethod
    def empty(cls) -> "Shape":
        return cls()

    @classmethod
    def from_seed(cls, x: int, y: int) -> "Shape":
        """Shape holding the single point (x, y)."""
        return cls([Point(x, y)])

    @classmethod
    def from_points(cls, points: List[Point]) -> "Shape":
        """
        Shape that takes ownership of `points`.

        The list is stored as-is: no copy, no validation, no deduplication.
        Callers must not mutate it afterwards except through `add_point`.
        """
        return cls(points)

    def deep_clone(self) -> "Shape":
        """Independent copy: new list, new point values, same order."""
        return Shape([Point(p.x, p.y) for p in self._points])

    # Mutation

    def add_point(self, x: Union[int, Point], y: Optional[int] = None) -> None:
        """Append a point, given either as a `Point` or as x and y."""
        if isinstance(x, Point):
            if y is not None:
                raise TypeError("add_point() takes a Point or x and y, not both")
            self._points.append(x)
            return
        if y is None:
            raise TypeError("add_point() missing the y coordinate")
        self._points.append(Point(x, y))

    # Queries

    def get_points(self) -> List[Point]:
        """
        The live list of points.

        This is the shape's own storage, not a copy: mutating it mutates the
        shape. Use `deep_clone().get_points()` for an isolated list.
        """
        return self._points

    def contains(self, x: Union[int, Point], y: Optional[int] = None) -> bool:
        """Exact match on both coordinates, by linear scan."""
        if isinstance(x, Point):
            if y is not None:
                raise TypeError("contains() takes a Point or x and y, not both")
            x, y = x.x, x.y
        elif y is None:
            raise TypeError("contains() missing the y coordinate")
        return any(p.x == x and p.y == y for p in self._points)

    def is_identical_to(self, other: "Shape") -> bool:
        """
        True if both shapes hold the same points in the same order.

        Order matters: a permutation of the same points is not identical.
        See `same_points_as` for an order-insensitive comparison.
        """
        if len(self._points) != len(other._points):
            return False
        return all(
            a.x == b.x and a.y == b.y for a, b in zip(self._points, other._points)
        )

    def same_points_as(self, other: "Shape") -> bool:
        """True if both shapes hold the same points with the same multiplicity, in any order."""
        return Counter(p.to_tuple() for p in self._points) == Counter(
            p.to_tuple() for p in other._points
        )

    def get_xs(self) -> List[int]:
        return [p.x for p in self._points]

    def get_ys(self) -> List[int]:
        return [p.y for p in self._points]

    def is_empty(self) -> bool:
        return not self._points

    # Circumscribed rectangle

    def _require_points(self, operation: str) -> None:
        if self.is_empty():
            error = EmptyShapeError(operation)
            get_logger().error(LogLevel.ERROR, "Query on empty shape", exception=error)
            raise error

    def get_top_left(self) -> Point:
        self._require_points("get_top_left")
        return Point(math_tools.minimum(self.get_xs()), math_tools.minimum(self.get_ys()))

    def get_top_right(self) -> Point:
        self._require_points("get_top_right")
        return Point(math_tools.maximum(self.get_xs()), math_tools.minimum(self.get_ys()))

    def get_bottom_left(self) -> Point:
        self._require_points("get_bottom_left")
        return Point(math_tools.minimum(self.get_xs()), math_tools.maximum(self.get_ys()))

    def get_bottom_right(self) -> Point:
        """
        Bottom-right corner: (max x, max y).

        Earlier versions returned (min x, max y) here, which made every
        coverage denominator zero.
        """
        self._require_points("get_bottom_right")
        return Point(math_tools.maximum(self.get_xs()), math_tools.maximum(self.get_ys()))

    def get_width(self) -> int:
        return self.get_top_right().x - self.get_top_left().x

    def get_height(self) -> int:
        return self.get_bottom_left().y - self.get_top_left().y

    def get_rect_area(self) -> int:
        """Area of the circumscribed rectangle."""
        return self.get_width() * self.get_height()

    def get_squ_area(self) -> int:
        """Area of the circumscribed square."""
        return max(self.get_width(), self.get_height()) ** 2

    def get_center(self) -> Point:
        """
        Center pixel of the circumscribed rectangle.

        May lie outside the shape itself, e.g. for a ring.
        """
        top_left = self.get_top_left()
        return Point(top_left.x + self.get_width() // 2, top_left.y + self.get_height() // 2)

    def get_centroid(self) -> Point:
        """
        Mean point coordinates, truncated toward zero.

        May lie outside the shape itself, e.g. for a ring.
        """
        self._require_points("get_centroid")
        return Point(math_tools.average(self.get_xs()), math_tools.average(self.get_ys()))

    def compute_coverage(self) -> float:
        """
        Share of the circumscribed rectangle occupied by the shape.

        With 2 shape pixels for every non-shape pixel this returns 2/3.
        Raises DegenerateShapeError when the rectangle has zero area.
        """
        top_left, bottom_right = self.get_top_left(), self.get_bottom_right()
        width = bottom_right.x - top_left.x
        height = bottom_right.y - top_left.y
        area = width * height
        if area == 0:
            error = DegenerateShapeError("compute_coverage", width, height)
            get_logger().error(LogLevel.ERROR, "Coverage of zero-area rectangle", exception=error)
            raise error
        return len(self._points) / area

    def is_filled(self, threshold: float = DEFAULT_FILLED_THRESHOLD) -> bool:
        """True if coverage reaches `threshold`. Zero-area shapes are never filled."""
        try:
            return self.compute_coverage() >= threshold
        except DegenerateShapeError:
            return False

    def is_hollow(self, threshold: float = DEFAULT_HOLLOW_THRESHOLD) -> bool:
        """True if coverage does not exceed `threshold`. Zero-area shapes are never hollow."""
        try:
            return self.compute_coverage() <= threshold
        except DegenerateShapeError:
            return False

    def describe(self) -> Dict[str, Any]:
        """Derived geometry as a plain dict; coverage is None for zero-area shapes."""
        try:
            coverage: Optional[float] = self.compute_coverage()
        except DegenerateShapeError:
            coverage = None

        return {
            "point_count": len(self._points),
            "top_left": self.get_top_left().to_tuple(),
            "bottom_right": self.get_bottom_right().to_tuple(),
            "width": self.get_width(),
            "height": self.get_height(),
            "rect_area": self.get_rect_area(),
            "squ_area": self.get_squ_area(),
            "center": self.get_center().to_tuple(),
            "centroid": self.get_centroid().to_tuple(),
            "coverage": coverage,
        }

    # Rasterization

    def create_image(
        self,
        inclusive: bool = False,
        background: int = BACKGROUND_VALUE,
        foreground: int = FOREGROUND_VALUE,
    ) -> RasterImage:
        """
        Square image holding only this shape, black on a white background.

        The side is max(width, height); the shape's minimum x and y map to
        column and row 0. Translated coordinates span [0, side], so points on
        the far edge fall outside the buffer and are skipped. With
        `inclusive=True` the side grows by one and every point is drawn.
        """
        self._require_points("create_image")
        try:
            background = check_pixel_value(background)
            foreground = check_pixel_value(foreground)
        except ValueError as error:
            get_logger().error(LogLevel.ERROR, "Invalid raster values", exception=error)
            raise

        side = max(self.get_width(), self.get_height())
        if inclusive:
            side += 1

        origin = Point(math_tools.minimum(self.get_xs()), math_tools.minimum(self.get_ys()))
        logger = get_logger()

        with logger.timed_step(LogLevel.RASTER, "Rasterized shape", side=side, points=len(self._points)):
            image = RasterImage(side, side)
            image.set_color(background)
            image.fill()

            skipped = 0
            for point in self._points:
                offset = point - origin
                if not image.put_pixel(offset.x, offset.y, foreground):
                    skipped += 1

        if skipped:
            logger.warning(LogLevel.RASTER, "Points outside image were skipped", skipped=skipped, side=side)
        return image

    # Python protocol

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __contains__(self, point: object) -> bool:
        return isinstance(point, Point) and self.contains(point)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Shape):
            return NotImplemented
        return self.is_identical_to(other)

    def __repr__(self) -> str:
        return f"Shape(points={len(self._points)})"


__all__ = ["Shape"]
