"""Still image source: one decoded PNG or JPEG file."""

from __future__ import annotations

import logging
import os

import PIL.Image
import numpy as np

from ..errors import FrameSourceError
from .base import FrameSource

logger = logging.getLogger(__name__)


def load_rgb(path: str | os.PathLike) -> np.ndarray:
    """Decode an image file into an (h, w, 3) uint8 array.

    :raises FrameSourceError: if the file can not be opened or decoded
    """
    try:
        with PIL.Image.open(path) as image:
            return np.asarray(image.convert("RGB"))
    except (OSError, ValueError, PIL.Image.DecompressionBombError) as e:
        raise FrameSourceError(f"Failed to decode image {path}: {e}") from e


class StillImageSource(FrameSource):
    """A single still frame.

    The file is decoded lazily on the first read.
    """

    def __init__(self, path: str | os.PathLike) -> None:
        super().__init__()
        self._path = path
        self._delivered = False

    @property
    def frame_count(self) -> int:
        return 1

    def _next_frame(self) -> np.ndarray | None:
        if self._delivered:
            return None
        frame = load_rgb(self._path)
        logger.debug(f"Decoded still image {self._path}: {frame.shape[1]}x{frame.shape[0]}")
        self._delivered = True
        return frame
