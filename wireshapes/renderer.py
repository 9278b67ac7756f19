import logging
from typing import Any, Union

from .shapes import Shape, ShapeKind, make_shape
from .sinks import LineSink
from .transform import IDENTITY, Transform, emit_segment


class WireframeRenderer:
    """
    Draws one shape into a line sink. The renderer holds the host-facing configuration: the
    shape (kind and parameters), the transform and the color used for the batch. Geometry is
    regenerated on each pass.
    """

    def __init__(
        self,
        shape: Shape,
        transform: Union[Transform, None] = None,
        color: Any = None,
    ):
        """
        :param shape: shape to draw
        :param transform: center and rotation of the shape (identity if None)
        :param color: color of the lines, passes are skipped while it is None
        """
        if not isinstance(shape, Shape):
            raise ValueError("only Shape instances may be drawn by a WireframeRenderer")

        self.shape = shape
        self.transform = IDENTITY if transform is None else transform
        self.color = color

    def set_shape(self, kind: Union[ShapeKind, str], **params) -> None:
        """
        Replace the shape.
        :param kind: shape kind or its name
        :param params: shape parameters, see make_shape()
        """
        self.shape = make_shape(kind, **params)

    def render(self, sink: LineSink) -> int:
        """
        Generate the shape's segments and draw them in a single batch.
        :param sink: line sink
        :return: number of segments drawn
        """
        if self.color is None:
            logging.debug("no color set, skipping render pass")
            return 0

        count = 0
        sink.begin_batch(self.color)
        try:
            for start, end in self.shape.segments_local(self.transform.center):
                emit_segment(sink, start, end, self.transform)
                count += 1
        finally:
            sink.end_batch()

        logging.debug(f"rendered {count} segments for {self.shape}")
        return count

    def on_post_render(self, sink: LineSink) -> int:
        """
        Entry point for the host's end-of-frame callback.
        """
        return self.render(sink)

    def on_draw_gizmos(self, sink: LineSink) -> int:
        """
        Entry point for the host's editor visualization callback.
        """
        return self.render(sink)
