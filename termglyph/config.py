"""Render configuration and the fixed layout constants of the glyph palette."""

from __future__ import annotations

from dataclasses import dataclass

# Every rendered pixel is drawn as a glyph string this many columns wide
GLYPH_WIDTH = 3
# Rows kept free below the image for the shell prompt and cursor
RESERVED_ROWS = 3

DEFAULT_FRAME_DELAY_MS = 200


@dataclass(frozen=True)
class RenderConfig:
    """Immutable per-run rendering options.

    :param colorize: Draw each glyph in the pixel's own 24-bit color
    :param resize: Shrink frames to fit the current terminal
    :param block_characters: Always draw the solid block glyph
    :param frame_delay: Pause between frames in seconds
    :param loop: Repeat animated sources forever
    """

    colorize: bool = False
    resize: bool = False
    block_characters: bool = False
    frame_delay: float = DEFAULT_FRAME_DELAY_MS / 1000.0
    loop: bool = False

    def __post_init__(self):
        if self.frame_delay < 0:
            raise ValueError(f"frame_delay must not be negative, got {self.frame_delay}")

    @classmethod
    def from_milliseconds(cls, delay_ms: int, **flags) -> "RenderConfig":
        """Create a config from a frame delay given in milliseconds."""
        return cls(frame_delay=delay_ms / 1000.0, **flags)


__all__ = ["RenderConfig", "GLYPH_WIDTH", "RESERVED_ROWS", "DEFAULT_FRAME_DELAY_MS"]
