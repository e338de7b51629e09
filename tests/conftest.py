"""
Pytest fixtures for termglyph tests
"""

import io
from contextlib import contextmanager

import numpy as np
import PIL.Image
import pytest

from termglyph.renderer import CLEAR_SCREEN
from termglyph.resize import TerminalGeometry


class FlushCountingIO(io.StringIO):
    """StringIO remembering how often it was flushed."""

    def __init__(self):
        super().__init__()
        self.flushes = 0

    def flush(self):
        self.flushes += 1
        super().flush()


class FakeScreen:
    """Screen with a scripted geometry sequence and an in-memory stream.

    The last geometry is repeated once the script is exhausted.
    """

    def __init__(self, *geometries: tuple[int, int]):
        self.stream = FlushCountingIO()
        self._geometries = [TerminalGeometry(*g) for g in geometries or [(80, 24)]]
        self.queries = 0
        self.clears = 0
        self.sessions = 0

    def geometry(self) -> TerminalGeometry:
        geometry = self._geometries[min(self.queries, len(self._geometries) - 1)]
        self.queries += 1
        return geometry

    def clear(self) -> None:
        self.clears += 1
        self.stream.write(CLEAR_SCREEN)
        self.stream.flush()

    @contextmanager
    def session(self):
        self.sessions += 1
        yield self


@pytest.fixture
def screen() -> FakeScreen:
    """An 80x24 terminal."""
    return FakeScreen((80, 24))


@pytest.fixture
def make_screen():
    """Factory for screens with scripted geometries."""
    return FakeScreen


def _solid(value, width: int = 1, height: int = 1) -> np.ndarray:
    """A bitmap filled with one gray value or RGB color."""
    pixels = np.zeros((height, width, 3), dtype=np.uint8)
    pixels[:, :] = value
    return pixels


@pytest.fixture
def gradient() -> np.ndarray:
    """A 20x40 RGB gradient."""
    pixels = np.zeros((20, 40, 3), dtype=np.uint8)
    for y in range(20):
        for x in range(40):
            pixels[y, x] = [int(x * 6), int(y * 12), 128]
    return pixels


@pytest.fixture
def png_path(tmp_path, gradient):
    """A PNG file holding the gradient."""
    path = tmp_path / "gradient.png"
    PIL.Image.fromarray(gradient).save(path)
    return path


GIF_COLORS = [(0, 0, 0), (128, 128, 128), (255, 255, 255)]


@pytest.fixture
def gif_path(tmp_path):
    """A three frame GIF: black, gray, white."""
    path = tmp_path / "rgb.gif"
    frames = [PIL.Image.new("RGB", (8, 6), color) for color in GIF_COLORS]
    frames[0].save(path, save_all=True, append_images=frames[1:], duration=100, loop=0)
    return path


@pytest.fixture
def solid():
    """Factory for single colored bitmaps: solid(value, width=1, height=1)."""
    return _solid
