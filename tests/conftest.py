import random

import pytest

from wireshapes import Capsule, Cylinder, Pyramid, Rectangle, Sphere, Transform


@pytest.fixture
def random_transform():
    u = random.uniform
    return Transform(
        center=(u(-10, 10), u(-10, 10), u(-10, 10)),
        rotation=(u(-180, 180), u(-180, 180), u(-180, 180)),
    )


@pytest.fixture(
    params=[
        Pyramid(base_size=2, height=1),
        Rectangle(width=2, height=1),
        Cylinder(height=2, radius=1, segments=8),
        Sphere(radius=1.5, segments=6),
        Capsule(radius=0.5, height=2, segments=7),
    ],
    ids=lambda s: type(s).__name__,
)
def any_shape(request):
    return request.param
