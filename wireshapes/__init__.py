from .renderer import WireframeRenderer
from .shapes import (
    Capsule,
    Cylinder,
    LineSegment,
    Pyramid,
    Rectangle,
    Shape,
    ShapeKind,
    Sphere,
    generate,
    make_shape,
)
from .sinks import LineSink, MatplotlibSink, SegmentCollector
from .transform import Transform, emit_segment, rotate_point, rotation_matrix
