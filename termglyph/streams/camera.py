"""Camera/webcam source.

This module provides CameraSource for live camera capture.
"""

from __future__ import annotations

import logging

import cv2
import numpy as np

from ..errors import FrameSourceError
from .base import FrameSource

logger = logging.getLogger(__name__)


class CameraSource(FrameSource):
    """Live camera/webcam capture.

    Unlike a video, a camera has no end: iteration continues until ``limit``
    frames were captured or forever if no limit is given. A failed capture
    raises :class:`FrameSourceError`.

    Example:
        with CameraSource(0) as camera:
            for frame in camera:
                show(frame)

    Attributes:
        device: Camera device index (0, 1, etc.)
    """

    def __init__(self, device: int = 0, *, limit: int | None = None) -> None:
        """
        :param device: Camera device index (0 = first camera)
        :param limit: Number of frames to capture (None = unlimited)
        """
        super().__init__()
        self.device = device
        self._limit = limit
        self._cap = None

    def _open(self):
        if self._cap is None:
            cap = cv2.VideoCapture(self.device)
            if not cap.isOpened():
                raise FrameSourceError(f"Failed to open camera device: {self.device}")
            logger.debug(
                f"Opened camera {self.device}: "
                f"{int(cap.get(cv2.CAP_PROP_FRAME_WIDTH))}x"
                f"{int(cap.get(cv2.CAP_PROP_FRAME_HEIGHT))}"
            )
            self._cap = cap
        return self._cap

    @property
    def frame_count(self) -> int:
        return self._limit or 0

    def _next_frame(self) -> np.ndarray | None:
        if self._limit is not None and self.frames_read >= self._limit:
            return None
        ret, frame = self._open().read()
        if not ret or frame is None:
            raise FrameSourceError(f"Failed to get next frame from camera {self.device}")
        # Convert BGR (OpenCV default) to RGB
        return cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)

    def close(self) -> None:
        """Release the camera capture."""
        super().close()
        if self._cap is not None:
            self._cap.release()
            self._cap = None
