"""
Stream player - pace a sequence of bitmaps through the frame renderer.

Example:
    from termglyph import RenderConfig, play
    from termglyph.streams import GifSource

    with GifSource("spinner.gif", loop=True) as frames:
        play(frames, RenderConfig(colorize=True, resize=True))

Playback is a single blocking loop: render a frame, poll the registered
events (terminal resize), sleep for the configured delay, pull the next
frame. It ends when the source is exhausted or on the first error.
"""

from __future__ import annotations

import time
from collections.abc import Sized
from typing import Iterable

import numpy as np

from .config import RenderConfig
from .errors import FrameSourceError, TermGlyphError
from .events import EventManager, ResizeWatcher
from .renderer import FrameRenderer
from .streams.base import FrameSource
from .terminal import TerminalScreen


def _known_length(frames: Iterable[np.ndarray]) -> int | None:
    """Number of frames still to come if the source is known to be finite, else None."""
    if isinstance(frames, FrameSource):
        if not frames.frame_count:
            return None
        return max(0, frames.frame_count - frames.frames_read)
    if isinstance(frames, Sized):
        return len(frames)
    return None


class StreamPlayer:
    """Render frame sequences to a terminal screen."""

    def __init__(self, config: RenderConfig, screen: TerminalScreen | None = None):
        """
        :param config: Rendering options of this run
        :param screen: Target screen (the process' terminal if None)
        """
        self.config = config
        self.screen = screen if screen is not None else TerminalScreen()
        self.renderer = FrameRenderer(config, self.screen)
        self.events = EventManager()
        self.frames_rendered = 0

    def render_still(self, bitmap: np.ndarray) -> None:
        """Render a single frame, without any delay."""
        self.renderer.render(bitmap)
        self.frames_rendered += 1

    def play(self, frames: Iterable[np.ndarray]) -> None:
        """
        Render every frame of the sequence in order.

        Sequences may be infinite; playback then only ends with the process
        or with an error.

        :param frames: Iterable of bitmaps, e.g. a FrameSource
        :raises TerminalTooSmall: if resizing is enabled and the terminal is too small
        :raises FrameSourceError: if the source fails to produce a frame
        :raises OSError: if writing to the terminal fails
        """
        watcher = ResizeWatcher(self.screen.geometry, self.screen.clear)
        event_id = watcher.attach(self.events)
        try:
            total = _known_length(frames)
            iterator = iter(frames)
            index = 0
            while True:
                try:
                    frame = next(iterator)
                except StopIteration:
                    return
                except TermGlyphError:
                    raise
                except Exception as e:
                    raise FrameSourceError(f"Failed to read frame {index}: {e}") from e

                self.render_still(frame)
                self.events.run()
                index += 1
                if total is not None and index >= total:
                    return
                time.sleep(self.config.frame_delay)
        finally:
            self.events.remove(event_id)


def render_still(
    bitmap: np.ndarray, config: RenderConfig, screen: TerminalScreen | None = None
) -> None:
    """Render one bitmap to the terminal."""
    StreamPlayer(config, screen).render_still(bitmap)


def play(
    frames: Iterable[np.ndarray],
    config: RenderConfig,
    screen: TerminalScreen | None = None,
) -> None:
    """Play a sequence of bitmaps in the terminal."""
    StreamPlayer(config, screen).play(frames)


__all__ = ["StreamPlayer", "render_still", "play"]
