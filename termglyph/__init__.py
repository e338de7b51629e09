"""
termglyph - Render images, animations, videos and camera frames as
colored text art in the terminal.
"""

from .config import RenderConfig, GLYPH_WIDTH, RESERVED_ROWS
from .errors import (
    TermGlyphError,
    TerminalTooSmall,
    FrameSourceError,
    UnsupportedMediaError,
    InvalidSourceError,
)
from .palette import HEAT_MAP, glyph_for, glyph_index, luminance
from .resize import TerminalGeometry, canvas_size, fit_size, resize_bitmap
from .renderer import FrameRenderer, as_rgb
from .events import EventManager, ResizeWatcher
from .terminal import TerminalScreen
from .player import StreamPlayer, play, render_still

__all__ = [
    # Configuration
    "RenderConfig",
    "GLYPH_WIDTH",
    "RESERVED_ROWS",
    # Errors
    "TermGlyphError",
    "TerminalTooSmall",
    "FrameSourceError",
    "UnsupportedMediaError",
    "InvalidSourceError",
    # Palette
    "HEAT_MAP",
    "glyph_for",
    "glyph_index",
    "luminance",
    # Resizing
    "TerminalGeometry",
    "canvas_size",
    "fit_size",
    "resize_bitmap",
    # Rendering
    "FrameRenderer",
    "as_rgb",
    # Events
    "EventManager",
    "ResizeWatcher",
    # Playback
    "TerminalScreen",
    "StreamPlayer",
    "play",
    "render_still",
]

__version__ = "0.1.0"
