import math

import numpy as np
import pytest

from wireshapes.math import (
    all_finite,
    as_vector,
    lerp,
    ring_points,
    step_fraction,
    vertices_matmul,
)


def test_vertices_matmul_empty():
    # Empty input is accepted, and returns empty output
    m = np.random.rand(3, 3)
    i = np.reshape(np.array([]), (0, 3))
    o = vertices_matmul(i, m)

    assert len(o) == 0
    assert np.all(o == i)


@pytest.mark.parametrize("n", (range(1, 5)))
def test_vertices_matmul_single_vertex(n):
    # a single vertex is accepted and is multiplied by a matrix
    m = np.random.rand(n, n)
    i = np.random.rand(n)
    o = vertices_matmul(i, m)
    assert np.allclose(m @ i, o)


def test_vertices_matmul_non_square_matrix():
    # non square matrices are not accepted and throw ValueError
    m = np.random.rand(3, 4)
    i = np.random.rand(1, 3)

    with pytest.raises(ValueError):
        vertices_matmul(i, m)


@pytest.mark.parametrize(("nm", "ni"), ((3, 4), (4, 3), (1, 5), (5, 1)))
def test_vertices_matmul_dim_mismatch(nm, ni):
    m = np.random.rand(nm, nm)
    i = np.random.rand(1, ni)
    with pytest.raises(ValueError):
        vertices_matmul(i, m)


def test_vertices_matmul_three_dimensions():
    m = np.random.rand(3, 3)
    segs = np.random.rand(5, 2, 3)
    o = vertices_matmul(segs, m)

    assert o.shape == segs.shape
    for seg, o_seg in zip(segs, o):
        assert np.allclose(o_seg[0], m @ seg[0])
        assert np.allclose(o_seg[1], m @ seg[1])


def test_as_vector_args():
    v1 = as_vector([1, 2, 3])
    v2 = as_vector(1, 2, 3)
    v3 = as_vector(np.array([1, 2, 3]))
    assert np.array_equal(v1, v2)
    assert np.array_equal(v1, v3)
    assert v1.dtype == np.double


@pytest.mark.parametrize(
    "args", [(1, 2), ([1, 2],), ("a", 2, 3), ([1, 2], 3), ([1, 2, 3, 4],)]
)
def test_as_vector_bad_args(args):
    with pytest.raises(ValueError):
        as_vector(*args)


def test_lerp():
    assert lerp(-90, 90, 0) == -90
    assert lerp(-90, 90, 0.5) == 0
    assert lerp(-90, 90, 1) == 90


def test_step_fraction():
    assert step_fraction(1, 4) == 0.25
    assert step_fraction(0, 0) == 0.0
    assert step_fraction(3, 0) == 0.0


def test_all_finite():
    assert all_finite(1, 2.5, 3)
    assert all_finite()
    assert not all_finite(1, math.nan)
    assert not all_finite(math.inf, 1)


def test_ring_points_open():
    center = np.array([1.0, 2.0, 3.0])
    points = ring_points(center, 2.0, 4)

    assert points.shape == (4, 3)
    assert np.allclose(points[0], (3, 2, 3))
    assert np.allclose(points[1], (1, 2, 5))
    assert np.allclose(points[2], (-1, 2, 3))
    assert np.allclose(points[3], (1, 2, 1))


def test_ring_points_closed():
    points = ring_points(np.zeros(3), 1.0, 6, closed=True)

    assert points.shape == (7, 3)
    assert np.allclose(points[0], points[-1])
    assert np.allclose(np.linalg.norm(points, axis=1), 1.0)
    assert np.all(points[:, 1] == 0)


@pytest.mark.parametrize("count", [0, -3])
def test_ring_points_no_subdivision(count):
    assert ring_points(np.zeros(3), 1.0, count).shape == (0, 3)
    assert ring_points(np.zeros(3), 1.0, count, closed=True).shape == (0, 3)
