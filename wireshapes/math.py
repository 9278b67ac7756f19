import math
from typing import Sequence, Union

import numpy as np


def as_vector(
    x: Union[Sequence[float], float],
    y: Union[float, None] = None,
    z: Union[float, None] = None,
) -> np.ndarray:
    """
    Build a length 3 float vector. Either one 3-sequence or 3 floats can be passed as
    arguments.
    :param x: either a 3-sequence of coordinates or the x coordinate
    :param y: y coordinate
    :param z: z coordinate
    :return: (3,) float64 array
    """
    try:
        if y is None or z is None:
            if len(x) != 3:
                raise ValueError(f"expected 3 components, got {len(x)}")
            v_x, v_y, v_z = float(x[0]), float(x[1]), float(x[2])
        else:
            v_x, v_y, v_z = float(x), float(y), float(z)
    except Exception as exc:
        raise ValueError("Argument must be either one vector or three coordinates") from exc

    return np.array([v_x, v_y, v_z], dtype=np.double)


def vertices_matmul(vertices: np.ndarray, matrix: np.ndarray) -> np.ndarray:
    """
    Apply a matrix multiplication to all vertices in the input array. The vertices coordinates
    are assumed to be stored in the input's last dimension.
    :param vertices: [d0 x ... x dN x M] N-dimensional array of M-sized vertices
    :param matrix: [M x M] matrix
    :return: transformed vertices (identical shape as input)
    """

    if len(matrix.shape) != 2 or matrix.shape[0] != matrix.shape[1]:
        raise ValueError("matrix must be square")

    if vertices.shape[-1] != matrix.shape[0]:
        raise ValueError(
            f"matrix dimension ({matrix.shape[0]}x{matrix.shape[1]}) does not match vertex "
            f"dimension ({vertices.shape[-1]})"
        )

    if len(vertices) == 0:
        return np.empty_like(vertices)

    if len(vertices.shape) == 1:
        return matrix @ vertices

    # vertices needs to be reshaped such that the last two dimensions are (..., N, 1)
    # then matmul can be applied as it broadcast the matrix on the last two dimension of the
    # other operand
    shape = vertices.shape
    output = matrix @ vertices.reshape((*shape, 1))
    return output.reshape(shape)


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def step_fraction(i: int, steps: int) -> float:
    """
    Return ``i / steps``, or 0 when there are no steps to divide into.
    """
    if steps == 0:
        return 0.0
    return i / steps


def all_finite(*values: float) -> bool:
    return all(math.isfinite(v) for v in values)


def ring_points(
    center: np.ndarray, radius: float, count: int, closed: bool = False
) -> np.ndarray:
    """
    Compute points of a horizontal circle (XZ plane) around ``center``. Angles are
    ``360 * j / count`` degrees, starting on the +X axis and turning towards +Z.
    :param center: (3,) ring center
    :param radius: ring radius
    :param count: number of subdivisions
    :param closed: if True, ``count + 1`` points are returned, the last one repeating the
        first angle (360 degrees)
    :return: [count(+1) x 3] array of points
    """
    if count <= 0:
        return np.empty(shape=(0, 3))

    n = count + 1 if closed else count
    t = np.radians(360.0 * np.arange(n) / count)
    offsets = np.array([np.cos(t) * radius, np.zeros_like(t), np.sin(t) * radius]).transpose()
    return center + offsets
