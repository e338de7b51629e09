"""termglyph frame sources.

This package provides the producers of the bitmaps the player renders:

- FrameSource: Abstract base class for all frame sources
- StillImageSource: A single decoded PNG / JPEG image
- GifSource: All frames of an animated GIF, optionally cycled
- VideoSource: Video file decoding via OpenCV, optionally looped
- CameraSource: Live camera/webcam capture

All sources are iterables of (h, w, 3) uint8 RGB arrays and context managers.

Example:
    from termglyph.streams import VideoSource

    with VideoSource("movie.mp4") as video:
        for frame in video:
            process(frame)
"""

from .base import FrameSource
from .still import StillImageSource
from .gif import GifSource
from .video import VideoSource
from .camera import CameraSource

__all__ = [
    "FrameSource",
    "StillImageSource",
    "GifSource",
    "VideoSource",
    "CameraSource",
]
