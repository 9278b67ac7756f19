import math
from typing import Sequence, Tuple, Union

import numpy as np

from .math import as_vector, vertices_matmul

AXES = "xyz"

# Euler convention of the host engine: Z first, then X, then Y around the fixed axes, which
# is the intrinsic Y-X-Z order
ENGINE_ORDER = "yxz"


def _rotation_x(angle: float) -> np.ndarray:
    s, c = math.sin(angle), math.cos(angle)
    return np.array(([1, 0, 0], [0, c, -s], [0, s, c]))


def _rotation_y(angle: float) -> np.ndarray:
    s, c = math.sin(angle), math.cos(angle)
    return np.array(([c, 0, s], [0, 1, 0], [-s, 0, c]))


def _rotation_z(angle: float) -> np.ndarray:
    s, c = math.sin(angle), math.cos(angle)
    return np.array(([c, -s, 0], [s, c, 0], [0, 0, 1]))


_AXIS_ROTATIONS = {"x": _rotation_x, "y": _rotation_y, "z": _rotation_z}


def _validate_order(order: str) -> str:
    order = str(order).lower()
    if sorted(order) != sorted(AXES):
        raise ValueError(f"rotation order '{order}' must be a permutation of '{AXES}'")
    return order


def rotation_matrix(rotation: Sequence[float], order: str = "xyz") -> np.ndarray:
    """
    Build a 3x3 rotation matrix from Euler angles.
    :param rotation: (x, y, z) angles in degrees
    :param order: intrinsic rotation order, "xyz" rotates around X, then the new Y, then the
        new Z axis
    :return: 3x3 rotation matrix
    """
    order = _validate_order(order)
    angles = dict(zip(AXES, np.radians(as_vector(rotation))))

    # intrinsic order a-b-c is R = Ra @ Rb @ Rc, so the rotations are left-multiplied from
    # the last axis to the first
    matrix = np.identity(3)
    for axis in reversed(order):
        matrix = _AXIS_ROTATIONS[axis](angles[axis]) @ matrix
    return matrix


def rotate_point(
    point: Sequence[float],
    center: Sequence[float],
    rotation: Sequence[float],
    order: str = "xyz",
) -> np.ndarray:
    """
    Rotate a point about ``center``: ``center + R(rotation) @ (point - center)``.
    """
    center = as_vector(center)
    return center + rotation_matrix(rotation, order) @ (as_vector(point) - center)


class Transform:
    """
    Rigid rotation about a center point. The rotation is given as Euler angles in degrees.
    Transform instances are immutable, use ``replace()`` to derive a modified copy.
    """

    def __init__(
        self,
        center: Union[Sequence[float], None] = None,
        rotation: Union[Sequence[float], None] = None,
        order: str = "xyz",
    ):
        """
        :param center: center of rotation, also the reference point the shapes are built
            around (defaults to the origin)
        :param rotation: (x, y, z) Euler angles in degrees (defaults to no rotation)
        :param order: intrinsic rotation order, see ``rotation_matrix()``
        """
        self._center = np.zeros(3) if center is None else as_vector(center)
        self._rotation = np.zeros(3) if rotation is None else as_vector(rotation)
        self._order = _validate_order(order)
        self._rotation_matrix = rotation_matrix(self._rotation, self._order)

        self._center.flags.writeable = False
        self._rotation.flags.writeable = False
        self._rotation_matrix.flags.writeable = False

    def __repr__(self):
        return (
            f"Transform(center={self._center.tolist()}, rotation={self._rotation.tolist()}, "
            f"order='{self._order}')"
        )

    def __eq__(self, other):
        if not isinstance(other, Transform):
            return NotImplemented
        return (
            np.array_equal(self._center, other._center)
            and np.array_equal(self._rotation, other._rotation)
            and self._order == other._order
        )

    def __hash__(self):
        return hash((tuple(self._center), tuple(self._rotation), self._order))

    @property
    def center(self) -> np.ndarray:
        return self._center

    @property
    def rotation(self) -> np.ndarray:
        return self._rotation

    @property
    def order(self) -> str:
        return self._order

    @property
    def rotation_matrix(self) -> np.ndarray:
        return self._rotation_matrix

    @property
    def matrix(self) -> np.ndarray:
        """
        Homogeneous 4x4 matrix equivalent to this transform, for hosts which push a model
        matrix instead of transforming vertices.
        """
        to_origin = np.identity(4)
        to_origin[0:3, 3] = -self._center
        rotate = np.identity(4)
        rotate[0:3, 0:3] = self._rotation_matrix
        from_origin = np.identity(4)
        from_origin[0:3, 3] = self._center
        return from_origin @ rotate @ to_origin

    def replace(self, **kwargs) -> "Transform":
        params = dict(center=self._center, rotation=self._rotation, order=self._order)
        params.update(kwargs)
        return Transform(**params)

    def apply(self, points: np.ndarray) -> np.ndarray:
        """
        Rotate an array of points about the transform's center.
        :param points: [... x 3] array of points
        :return: transformed points (identical shape as input)
        """
        points = np.asarray(points, dtype=np.double)
        if points.shape[-1] != 3:
            raise ValueError(f"points array has shape {points.shape} instead of (..., 3)")
        if len(points) == 0:
            return np.empty_like(points)
        return self._center + vertices_matmul(points - self._center, self._rotation_matrix)

    def rotate_point(self, point: Sequence[float]) -> np.ndarray:
        return self.apply(as_vector(point))


IDENTITY = Transform()


def transform_segment(
    start: np.ndarray, end: np.ndarray, transform: Transform
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Apply ``transform`` to both end points of a segment.
    """
    start, end = transform.apply(np.array([start, end]))
    return start, end


def emit_segment(sink, start: np.ndarray, end: np.ndarray, transform: Transform) -> None:
    """
    Transform a segment and forward it to the sink. This is the only path through which
    shape geometry reaches a sink.
    :param sink: a ``wireshapes.sinks.LineSink`` with an open batch
    :param start: untransformed start point
    :param end: untransformed end point
    :param transform: transform to apply
    """
    sink.emit(*transform_segment(start, end, transform))
