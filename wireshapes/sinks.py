import abc
import logging
from typing import Any, List

import matplotlib.pyplot as plt
import numpy as np


class LineSink(abc.ABC):
    """
    Consumer of line segments. Segments are delivered in batches: one ``begin_batch()``
    call, any number of ``emit()`` calls, one ``end_batch()`` call.
    """

    @abc.abstractmethod
    def begin_batch(self, color: Any) -> None:
        """
        Start a batch of lines.
        :param color: active color for every line of the batch
        """

    @abc.abstractmethod
    def emit(self, start: np.ndarray, end: np.ndarray) -> None:
        """
        Add one line to the current batch.
        :param start: (3,) start point
        :param end: (3,) end point
        """

    @abc.abstractmethod
    def end_batch(self) -> None:
        pass


class SegmentCollector(LineSink):
    """
    Sink that records batches in memory, mainly used for tests and for hosts which want
    the segments as arrays.
    """

    def __init__(self):
        self._batches: List[List[np.ndarray]] = []
        self._colors = []
        self._open = False

    def begin_batch(self, color: Any) -> None:
        if self._open:
            raise RuntimeError("begin_batch() called while a batch is already open")
        self._open = True
        self._colors.append(color)
        self._batches.append([])

    def emit(self, start: np.ndarray, end: np.ndarray) -> None:
        if not self._open:
            raise RuntimeError("emit() called outside of a batch")
        self._batches[-1].append(np.array([start, end], dtype=np.double))

    def end_batch(self) -> None:
        if not self._open:
            raise RuntimeError("end_batch() called without matching begin_batch()")
        self._open = False

    @property
    def is_open(self) -> bool:
        return self._open

    @property
    def batch_count(self) -> int:
        return len(self._batches)

    @property
    def colors(self) -> list:
        return list(self._colors)

    def batch(self, index: int) -> np.ndarray:
        """
        Return the segments of one batch.
        :param index: batch index (negative values count from the last batch)
        :return: [Nx2x3] ndarray of segments
        """
        segments = self._batches[index]
        if not segments:
            return np.empty(shape=(0, 2, 3))
        return np.array(segments)

    @property
    def segments(self) -> np.ndarray:
        """
        Return the segments of the last batch as a [Nx2x3] array.
        """
        if not self._batches:
            return np.empty(shape=(0, 2, 3))
        return self.batch(-1)

    def clear(self) -> None:
        self._batches = []
        self._colors = []
        self._open = False


class MatplotlibSink(LineSink):
    """
    Sink drawing the lines on a matplotlib 3D axes. Batches are accumulated until ``show()``
    is called.

    The shapes use +Y as up axis, while matplotlib's 3D axes use +Z, so Y and Z are swapped
    when plotting.
    """

    def __init__(self):
        self._batches = []
        self._current = None

    def begin_batch(self, color: Any) -> None:
        self._current = (color, [])

    def emit(self, start: np.ndarray, end: np.ndarray) -> None:
        if self._current is None:
            raise RuntimeError("emit() called outside of a batch")
        self._current[1].append((start, end))

    def end_batch(self) -> None:
        if self._current is None:
            raise RuntimeError("end_batch() called without matching begin_batch()")
        color, lines = self._current
        self._batches.append((color, np.array(lines).reshape((-1, 2, 3))))
        self._current = None
        logging.info(f"batch of {len(lines)} lines ready for display")

    def plot(self, ax=None, lw: float = 0.8):
        """
        Plot all accumulated batches.
        :param ax: matplotlib 3D axes (a new figure is created if None)
        :param lw: line width
        :return: the axes
        """
        if ax is None:
            fig = plt.figure()
            ax = fig.add_subplot(projection="3d")

        all_points = []
        for color, lines in self._batches:
            for seg in lines:
                ax.plot(seg[:, 0], seg[:, 2], seg[:, 1], "-", color=color, lw=lw)
            all_points.append(lines.reshape((-1, 3)))

        if all_points:
            points = np.vstack(all_points)
            if len(points):
                _set_equal_aspect(ax, points)
        ax.set_xlabel("x")
        ax.set_ylabel("z")
        ax.set_zlabel("y")
        return ax

    def show(self, show_axes: bool = True, **kwargs) -> None:
        """
        Display the accumulated lines with matplotlib.
        :param show_axes: if True, axes are displayed
        """
        ax = self.plot(**kwargs)
        if not show_axes:
            ax.set_axis_off()
        plt.show()


def _set_equal_aspect(ax, points: np.ndarray) -> None:
    lo = points.min(axis=0)
    hi = points.max(axis=0)
    mid = (lo + hi) / 2
    half = max(float(np.max(hi - lo)) / 2, 1e-9)
    ax.set_xlim(mid[0] - half, mid[0] + half)
    ax.set_ylim(mid[2] - half, mid[2] + half)
    ax.set_zlim(mid[1] - half, mid[1] + half)

