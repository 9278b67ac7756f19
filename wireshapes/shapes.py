import enum
import logging
import math
from dataclasses import dataclass, fields, is_dataclass
from typing import Iterator, NamedTuple, Union

import numpy as np

from .math import all_finite, lerp, ring_points, step_fraction
from .transform import IDENTITY, Transform, transform_segment

UP = np.array([0.0, 1.0, 0.0])


class ShapeKind(enum.Enum):
    PYRAMID = "pyramid"
    CYLINDER = "cylinder"
    RECTANGLE = "rectangle"
    SPHERE = "sphere"
    CAPSULE = "capsule"


class LineSegment(NamedTuple):
    start: np.ndarray
    end: np.ndarray


def _ring_segments(points: np.ndarray) -> Iterator[LineSegment]:
    """
    Connect consecutive points, then connect the last point back to the first one.
    """
    for i in range(1, len(points)):
        yield LineSegment(points[i - 1], points[i])
    if len(points):
        yield LineSegment(points[-1], points[0])


def _cylinder_segments(
    center: np.ndarray, height: float, radius: float, segments: int
) -> Iterator[LineSegment]:
    bottom = ring_points(center - UP * height / 2, radius, segments)
    top = ring_points(center + UP * height / 2, radius, segments)

    for i in range(segments):
        yield LineSegment(bottom[i], bottom[(i + 1) % segments])
        yield LineSegment(top[i], top[(i + 1) % segments])
        yield LineSegment(bottom[i], top[i])


class Shape:
    """
    Base class for the parametric shapes. A Shape instance only holds the shape's parameters,
    geometry is computed from scratch each time segments are requested. Shapes are built
    around a reference point (the transform's center) with +Y as up axis.

    Subclasses are frozen dataclasses and must implement _segments_impl().
    """

    kind: ShapeKind = None

    def segments_local(self, center=(0.0, 0.0, 0.0)) -> Iterator[LineSegment]:
        """
        Generate the untransformed segments of the shape built around ``center``. Shapes with
        non-finite dimensions generate no segment.
        :param center: reference point of the shape
        :return: iterator of LineSegment
        """
        values = [getattr(self, f.name) for f in fields(self)] if is_dataclass(self) else []
        if not all_finite(*values):
            logging.warning(f"non-finite parameter in {self}, no segment generated")
            return iter(())
        return self._segments_impl(np.asarray(center, dtype=np.double))

    def generate(self, transform: Union[Transform, None] = None) -> Iterator[LineSegment]:
        """
        Generate the shape's segments, transformed by ``transform``.
        :param transform: transform to apply, its center is the shape's reference point
        :return: iterator of transformed LineSegment
        """
        if transform is None:
            transform = IDENTITY
        for start, end in self.segments_local(transform.center):
            yield LineSegment(*transform_segment(start, end, transform))

    def compile(self, transform: Union[Transform, None] = None) -> np.ndarray:
        """
        Generate all segments at once.
        :return: [Nx2x3] ndarray of segments
        """
        segments = [np.array(s) for s in self.generate(transform)]
        if not segments:
            return np.empty(shape=(0, 2, 3))
        return np.array(segments)

    # noinspection PyMethodMayBeStatic
    def segment_count(self) -> int:
        return 0

    # noinspection PyMethodMayBeStatic
    def _segments_impl(self, center: np.ndarray) -> Iterator[LineSegment]:
        return iter(())


@dataclass(frozen=True)
class Pyramid(Shape):
    """
    Pyramid with a square base lying in the XZ plane through the center and its apex
    ``height`` above the center.
    """

    base_size: float = 1.0
    height: float = 1.0

    kind = ShapeKind.PYRAMID

    def segment_count(self) -> int:
        return 8

    def _segments_impl(self, center: np.ndarray) -> Iterator[LineSegment]:
        half = self.base_size * 0.5
        base = center + np.array(
            [(-half, 0, -half), (half, 0, -half), (half, 0, half), (-half, 0, half)]
        )
        apex = center + UP * self.height

        # base square
        yield from _ring_segments(base)

        # edges from each base vertex to the apex
        for vertex in base:
            yield LineSegment(vertex, apex)


@dataclass(frozen=True)
class Rectangle(Shape):
    """
    Rectangle in the XZ plane: ``width`` along X, ``height`` along Z.
    """

    width: float = 2.0
    height: float = 1.0

    kind = ShapeKind.RECTANGLE

    def segment_count(self) -> int:
        return 4

    def _segments_impl(self, center: np.ndarray) -> Iterator[LineSegment]:
        half_w = self.width * 0.5
        half_h = self.height * 0.5
        corners = center + np.array(
            [
                (-half_w, 0, -half_h),
                (half_w, 0, -half_h),
                (half_w, 0, half_h),
                (-half_w, 0, half_h),
            ]
        )
        return _ring_segments(corners)


@dataclass(frozen=True)
class Cylinder(Shape):
    """
    Vertical cylinder centered on the reference point. Each of the ``segments`` ring
    subdivisions produces a bottom edge, a top edge and a vertical edge, in that order.
    """

    height: float = 2.0
    radius: float = 1.0
    segments: int = 20

    kind = ShapeKind.CYLINDER

    def segment_count(self) -> int:
        return 3 * max(self.segments, 0)

    def _segments_impl(self, center: np.ndarray) -> Iterator[LineSegment]:
        if self.segments <= 0:
            return iter(())
        return _cylinder_segments(center, self.height, self.radius, self.segments)


@dataclass(frozen=True)
class Sphere(Shape):
    """
    Latitude/longitude sphere, ``segments`` is used for both directions.

    Latitude rings go from the south to the north pole (both collapsed rings included) and
    are made of ``segments + 1`` points, the last repeating the first, plus a closing edge.
    Meridians are drawn for ``segments`` longitudes only (the 360 degrees one would overlap
    the first), pole to pole, plus a closing edge from the north pole back to the south pole.
    """

    radius: float = 1.0
    segments: int = 12

    kind = ShapeKind.SPHERE

    def segment_count(self) -> int:
        n = max(self.segments, 0)
        return 0 if n == 0 else (n + 1) * (2 * n + 1)

    def _latitudes(self) -> np.ndarray:
        n = self.segments
        return np.radians([lerp(-90.0, 90.0, i / n) for i in range(n + 1)])

    def _segments_impl(self, center: np.ndarray) -> Iterator[LineSegment]:
        n = self.segments
        if n <= 0:
            return

        latitudes = self._latitudes()

        # latitude rings
        for lat in latitudes:
            ring_center = center + UP * math.sin(lat) * self.radius
            yield from _ring_segments(
                ring_points(ring_center, math.cos(lat) * self.radius, n, closed=True)
            )

        # meridians
        ys = np.sin(latitudes) * self.radius
        rs = np.cos(latitudes) * self.radius
        for j in range(n):
            lon = math.radians(lerp(0.0, 360.0, j / n))
            points = center + np.array([math.cos(lon) * rs, ys, math.sin(lon) * rs]).T
            yield from _ring_segments(points)


@dataclass(frozen=True)
class Capsule(Shape):
    """
    Cylinder body of ``height`` with a hemispherical cap added on each end, so the capsule
    extends ``radius`` beyond ``height / 2`` on both sides. Caps are only made of latitude
    rings, ``segments // 2`` steps from their base ring to their pole.
    """

    radius: float = 0.5
    height: float = 2.0
    segments: int = 12

    kind = ShapeKind.CAPSULE

    @property
    def hemi_steps(self) -> int:
        return max(self.segments, 0) // 2

    def segment_count(self) -> int:
        n = max(self.segments, 0)
        if n == 0:
            return 0
        return 3 * n + 2 * (self.hemi_steps + 1) * (n + 1)

    def _hemisphere(self, base_center: np.ndarray, direction: float) -> Iterator[LineSegment]:
        steps = self.hemi_steps
        for i in range(steps + 1):
            lat = math.radians(lerp(0.0, 90.0, step_fraction(i, steps)))
            ring_center = base_center + direction * UP * math.sin(lat) * self.radius
            ring = ring_points(ring_center, math.cos(lat) * self.radius, self.segments, True)
            yield from _ring_segments(ring)

    def _segments_impl(self, center: np.ndarray) -> Iterator[LineSegment]:
        if self.segments <= 0:
            return

        yield from _cylinder_segments(center, self.height, self.radius, self.segments)
        yield from self._hemisphere(center + UP * self.height / 2, 1.0)
        yield from self._hemisphere(center - UP * self.height / 2, -1.0)


SHAPES = {cls.kind: cls for cls in (Pyramid, Cylinder, Rectangle, Sphere, Capsule)}


def make_shape(kind: Union[ShapeKind, str], **params) -> Shape:
    """
    Create a shape from its kind and parameters. Missing parameters take the shape's
    defaults.
    :param kind: a ShapeKind or its (case insensitive) name
    :return: the shape instance
    """
    if isinstance(kind, str):
        try:
            kind = ShapeKind[kind.upper()]
        except KeyError as exc:
            raise ValueError(f"unknown shape kind '{kind}'") from exc
    if kind not in SHAPES:
        raise ValueError(f"unknown shape kind {kind!r}")

    return SHAPES[kind](**params)


def generate(shape: Shape, transform: Union[Transform, None] = None) -> Iterator[LineSegment]:
    """
    Generate the transformed segments of a shape, see Shape.generate().
    """
    if not isinstance(shape, Shape):
        raise ValueError(f"expected a Shape instance, got {type(shape).__name__}")
    return shape.generate(transform)
