"""Video file source.

This module provides VideoSource for decoding MP4 / MKV files with OpenCV.
"""

from __future__ import annotations

import logging
import os

import cv2
import numpy as np

from ..errors import FrameSourceError
from .base import FrameSource

logger = logging.getLogger(__name__)


class VideoSource(FrameSource):
    """Sequential video decoding.

    Frames are decoded one by one in file order. With ``loop=True`` the
    decoder is rewound to the first frame once the end is reached, so the
    video is decoded again from the start instead of being buffered.

    Example:
        with VideoSource("/path/to/video.mp4", loop=True) as video:
            for frame in video:
                show(frame)

    Attributes:
        fps: Source frame rate reported by the container
    """

    def __init__(self, path: str | os.PathLike, *, loop: bool = False) -> None:
        """
        :param path: Path to the video file
        :param loop: Whether to restart when the video ends
        """
        super().__init__()
        self._path = str(path)
        self._loop = loop
        self._cap = None
        self.fps: float = 30.0
        self._frame_total: int = 0

    def _open(self):
        if self._cap is None:
            cap = cv2.VideoCapture(self._path)
            if not cap.isOpened():
                raise FrameSourceError(f"Failed to open video source: {self._path}")
            self.fps = cap.get(cv2.CAP_PROP_FPS) or 30.0
            self._frame_total = int(cap.get(cv2.CAP_PROP_FRAME_COUNT))
            logger.debug(
                f"Opened video {self._path}: {self._frame_total} frames at {self.fps:.1f} fps"
            )
            self._cap = cap
        return self._cap

    @property
    def frame_count(self) -> int:
        # Container frame counts are estimates, so iteration stops on read failure
        return 0

    def _next_frame(self) -> np.ndarray | None:
        cap = self._open()
        ret, frame = cap.read()
        if not ret and self._loop and self.frames_read > 0:
            logger.debug(f"Rewinding {self._path}")
            cap.set(cv2.CAP_PROP_POS_FRAMES, 0)
            ret, frame = cap.read()
        if not ret or frame is None:
            return None
        # Convert BGR (OpenCV default) to RGB
        return cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)

    def close(self) -> None:
        """Release the video capture."""
        super().close()
        if self._cap is not None:
            self._cap.release()
            self._cap = None
