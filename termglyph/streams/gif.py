"""Animated GIF source based on Pillow's ImageSequence."""

from __future__ import annotations

import logging
import os

import PIL.Image
import PIL.ImageSequence
import numpy as np

from ..errors import FrameSourceError
from .base import FrameSource

logger = logging.getLogger(__name__)


class GifSource(FrameSource):
    """All frames of a GIF animation.

    Frames are decoded once on the first read. With ``loop=True`` the
    decoded frames are repeated forever.

    Example:
        with GifSource("spinner.gif", loop=True) as gif:
            for frame in gif:
                show(frame)
    """

    def __init__(self, path: str | os.PathLike, *, loop: bool = False) -> None:
        """
        :param path: Path to the GIF file
        :param loop: Whether to restart with the first frame after the last one
        """
        super().__init__()
        self._path = path
        self._loop = loop
        self._frames: list[np.ndarray] | None = None
        self._position = 0

    @property
    def loop(self) -> bool:
        return self._loop

    @property
    def frame_count(self) -> int:
        if self._loop or self.is_closed:
            return 0
        return len(self._decode())

    def _decode(self) -> list[np.ndarray]:
        if self._frames is None:
            try:
                with PIL.Image.open(self._path) as image:
                    self._frames = [
                        np.asarray(frame.convert("RGB"))
                        for frame in PIL.ImageSequence.Iterator(image)
                    ]
            except (OSError, ValueError, EOFError) as e:
                raise FrameSourceError(f"Failed to decode GIF {self._path}: {e}") from e
            logger.debug(f"Decoded {len(self._frames)} frames from {self._path}")
        return self._frames

    def _next_frame(self) -> np.ndarray | None:
        frames = self._decode()
        if not frames:
            return None
        if self._position >= len(frames):
            if not self._loop:
                return None
            self._position = 0
        frame = frames[self._position]
        self._position += 1
        return frame

    def close(self) -> None:
        super().close()
        self._frames = None
