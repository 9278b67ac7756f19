import numpy as np


def segment_list_equal(s1: np.ndarray, s2: np.ndarray) -> bool:
    if len(s1) != len(s2):
        return False

    set1 = {frozenset(tuple(c) for c in s) for s in s1}
    set2 = {frozenset(tuple(c) for c in s) for s in s2}
    return set1 == set2


def rotate_z_2d(points: np.ndarray, center, angle_deg: float) -> np.ndarray:
    """
    Reference rotation about the Z axis, done coordinate by coordinate in the XY plane.
    """
    a = np.radians(angle_deg)
    c, s = np.cos(a), np.sin(a)
    points = np.asarray(points, dtype=float)
    dx = points[..., 0] - center[0]
    dy = points[..., 1] - center[1]
    out = points.copy()
    out[..., 0] = center[0] + dx * c - dy * s
    out[..., 1] = center[1] + dx * s + dy * c
    return out


def ring_radius(points: np.ndarray, center) -> np.ndarray:
    """
    Distance of points to the vertical (Y) axis through center.
    """
    points = np.asarray(points, dtype=float)
    return np.hypot(points[..., 0] - center[0], points[..., 2] - center[2])
