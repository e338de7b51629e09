"""Base frame source class.

This module defines the FrameSource abstract base class: a lazy sequence of
RGB bitmaps with a single "next frame or end" operation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator

import numpy as np

from ..errors import FrameSourceError


class FrameSource(ABC):
    """Base class for all frame sources.

    Subclasses implement :meth:`_next_frame`, returning the next bitmap or
    None once the source is exhausted. Consumers call :meth:`read` or simply
    iterate. Decoder failures are raised as :class:`FrameSourceError`.

    Example:
        class NoiseSource(FrameSource):
            def _next_frame(self) -> np.ndarray | None:
                return np.random.randint(0, 256, (24, 32, 3), dtype=np.uint8)

        for frame in NoiseSource():
            show(frame)
    """

    def __init__(self) -> None:
        self._frames_read: int = 0
        self._closed: bool = False

    @abstractmethod
    def _next_frame(self) -> np.ndarray | None:
        """Produce the next frame or None at the end."""
        ...

    def read(self) -> np.ndarray | None:
        """Return the next (h, w, 3) uint8 RGB bitmap, or None at the end.

        :raises FrameSourceError: if the source is closed or the frame could
            not be decoded
        """
        if self._closed:
            raise FrameSourceError(f"{type(self).__name__} is closed")
        frame = self._next_frame()
        if frame is not None:
            self._frames_read += 1
        return frame

    @property
    def frame_count(self) -> int:
        """Number of frames iteration yields.

        Returns 0 for infinite/unknown length sources (cameras, looping
        animations, videos).
        """
        return 0

    @property
    def frames_read(self) -> int:
        """Frames delivered so far."""
        return self._frames_read

    @property
    def is_closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Release decoder resources. Subclasses should call super().close()."""
        self._closed = True

    def __iter__(self) -> Iterator[np.ndarray]:
        while (frame := self.read()) is not None:
            yield frame

    def __enter__(self) -> "FrameSource":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
