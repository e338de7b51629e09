"""Terminal access: geometry queries and the output stream, based on blessed."""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Iterator, TextIO

from blessed import Terminal

from .renderer import CLEAR_SCREEN, RESET
from .resize import TerminalGeometry


class TerminalScreen:
    """
    The terminal the frames are drawn to.

    Wraps a :class:`blessed.Terminal` bound to the output stream. Geometry is
    queried synchronously on every call so resizes are visible at once.
    """

    def __init__(self, stream: TextIO | None = None, terminal: Terminal | None = None):
        """
        :param stream: Output stream (sys.stdout if None)
        :param terminal: Terminal to query (created for the stream if None)
        """
        self.stream = stream if stream is not None else sys.stdout
        self.terminal = terminal if terminal is not None else Terminal(stream=self.stream)

    def geometry(self) -> TerminalGeometry:
        """Current (columns, rows) of the terminal."""
        return TerminalGeometry(self.terminal.width, self.terminal.height)

    def clear(self) -> None:
        """Clear the whole screen."""
        self.stream.write(CLEAR_SCREEN)
        self.stream.flush()

    @contextmanager
    def session(self) -> Iterator["TerminalScreen"]:
        """Hide the cursor during playback and reset colors afterwards."""
        with self.terminal.hidden_cursor():
            try:
                yield self
            finally:
                self.stream.write(RESET)
                self.stream.flush()


__all__ = ["TerminalScreen"]
