"""Tests for the stream player."""

import itertools
from unittest.mock import patch

import numpy as np
import pytest

from termglyph.config import RenderConfig
from termglyph.errors import FrameSourceError, TerminalTooSmall
from termglyph.player import StreamPlayer, play, render_still
from termglyph.renderer import CLEAR_SCREEN, CURSOR_HOME
from termglyph.streams import GifSource


def frames_written(screen) -> list[str]:
    """Split the screen output into the rendered frames."""
    output = screen.stream.getvalue().replace(CLEAR_SCREEN, "")
    return output.split(CURSOR_HOME)[1:]


class TestRenderStill:
    """Tests for single frame rendering."""

    def test_render_still(self, screen, solid):
        with patch("termglyph.player.time.sleep") as sleep:
            render_still(solid(255), RenderConfig(), screen)
        assert screen.stream.getvalue() == CURSOR_HOME + "███\n"
        sleep.assert_not_called()

    def test_counts_frames(self, screen, solid):
        player = StreamPlayer(RenderConfig(), screen)
        player.render_still(solid(0))
        assert player.frames_rendered == 1


class TestPlay:
    """Tests for StreamPlayer.play."""

    def test_single_frame_does_not_sleep(self, screen, solid):
        with patch("termglyph.player.time.sleep") as sleep:
            play([solid(255)], RenderConfig(frame_delay=1.0), screen)
        assert frames_written(screen) == ["███\n"]
        sleep.assert_not_called()

    def test_sleeps_between_frames(self, screen, solid):
        frames = [solid(0), solid(128), solid(255)]
        with patch("termglyph.player.time.sleep") as sleep:
            play(frames, RenderConfig(frame_delay=0.25), screen)
        assert frames_written(screen) == ["   \n", "!!!\n", "███\n"]
        assert sleep.call_count == 2
        sleep.assert_called_with(0.25)

    def test_unknown_length_sleeps_after_every_frame(self, screen, solid):
        frames = (solid(v) for v in (0, 255))
        with patch("termglyph.player.time.sleep") as sleep:
            play(frames, RenderConfig(frame_delay=0.1), screen)
        assert len(frames_written(screen)) == 2
        assert sleep.call_count == 2

    def test_empty_sequence(self, screen):
        with patch("termglyph.player.time.sleep") as sleep:
            play([], RenderConfig(), screen)
        assert screen.stream.getvalue() == ""
        sleep.assert_not_called()

    def test_cyclic_sequence(self, screen, solid):
        """Frame n of a cycle equals frame n mod cycle length."""
        cycle = [solid(0), solid(128), solid(255)]
        with patch("termglyph.player.time.sleep"):
            play(itertools.islice(itertools.cycle(cycle), 8), RenderConfig(), screen)
        written = frames_written(screen)
        assert len(written) == 8
        for n, frame in enumerate(written):
            assert frame == written[n % 3]
        assert written[:3] == ["   \n", "!!!\n", "███\n"]

    def test_looping_gif(self, screen, gif_path):
        with patch("termglyph.player.time.sleep"), GifSource(gif_path, loop=True) as gif:
            play(itertools.islice(gif, 7), RenderConfig(), screen)
        written = frames_written(screen)
        assert len(written) == 7
        assert written[3] == written[0]
        assert written[6] == written[0]
        assert written[1] != written[0]

    def test_partly_read_source_does_not_sleep_after_last_frame(self, screen, gif_path):
        with patch("termglyph.player.time.sleep") as sleep, GifSource(gif_path) as gif:
            gif.read()
            play(gif, RenderConfig(), screen)
        assert len(frames_written(screen)) == 2
        assert sleep.call_count == 1

    def test_resize_clears_once(self, make_screen, solid):
        """(80, 24) then (100, 30) clears exactly once, between frames one and two."""
        screen = make_screen((80, 24), (100, 30))
        with patch("termglyph.player.time.sleep"):
            play([solid(0), solid(255), solid(0)], RenderConfig(), screen)
        assert screen.clears == 1
        output = screen.stream.getvalue()
        first, second = output.index(CURSOR_HOME), output.index(CURSOR_HOME, 1)
        assert first < output.index(CLEAR_SCREEN) < second

    def test_no_clear_without_resize(self, screen, solid):
        with patch("termglyph.player.time.sleep"):
            play([solid(0)] * 4, RenderConfig(), screen)
        assert screen.clears == 0

    def test_event_manager_polled_once_per_frame(self, screen, solid):
        player = StreamPlayer(RenderConfig(), screen)
        with patch("termglyph.player.time.sleep"), patch.object(
            player.events, "run", wraps=player.events.run
        ) as run:
            player.play([solid(0)] * 3)
        assert run.call_count == 3
        assert len(player.events) == 0

    def test_source_error_aborts(self, screen, solid):
        def frames():
            yield solid(255)
            raise ValueError("corrupt frame")

        with patch("termglyph.player.time.sleep"):
            with pytest.raises(FrameSourceError) as info:
                play(frames(), RenderConfig(), screen)
        assert isinstance(info.value.__cause__, ValueError)
        assert frames_written(screen) == ["███\n"]

    def test_source_error_passes_through(self, screen):
        def frames():
            raise FrameSourceError("camera gone")
            yield  # pragma: no cover

        with pytest.raises(FrameSourceError, match="camera gone"):
            play(frames(), RenderConfig(), screen)

    def test_terminal_too_small_aborts(self, make_screen, solid):
        screen = make_screen((2, 2))
        pulled = []

        def frames():
            for value in (0, 255):
                pulled.append(value)
                yield solid(value)

        with patch("termglyph.player.time.sleep"):
            with pytest.raises(TerminalTooSmall):
                play(frames(), RenderConfig(resize=True), screen)
        assert pulled == [0]

    def test_write_error_aborts(self, screen, solid):
        def broken(_text):
            raise BrokenPipeError("closed")

        screen.stream.write = broken
        with patch("termglyph.player.time.sleep") as sleep:
            with pytest.raises(BrokenPipeError):
                play([solid(0), solid(255)], RenderConfig(), screen)
        sleep.assert_not_called()

    def test_renders_numpy_gray_frames(self, screen):
        with patch("termglyph.player.time.sleep"):
            play([np.full((1, 2), 255, dtype=np.uint8)], RenderConfig(), screen)
        assert frames_written(screen) == ["██████\n"]
