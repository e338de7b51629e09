"""
Media dispatch - choose the frame source for a webcam, file path or URL.

File types are detected from the file content, not from the file name.
Supported are MP4 and MKV videos, PNG and JPEG images and GIF animations.
"""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from contextlib import contextmanager
from enum import Enum
from pathlib import Path
from typing import Iterator
from urllib.error import URLError
from urllib.request import urlopen

import filetype

from .errors import FrameSourceError, InvalidSourceError, UnsupportedMediaError
from .streams import CameraSource, FrameSource, GifSource, StillImageSource, VideoSource

logger = logging.getLogger(__name__)

HTTP_PROTOCOL_URL_HEADER = "http://"
HTTPS_PROTOCOL_URL_HEADER = "https://"

FETCH_TIMEOUT = 30


class MediaKind(Enum):
    """Kind of frame source a file is decoded with."""

    VIDEO = "video"
    STILL = "still"
    GIF = "gif"


SUPPORTED_EXTENSIONS: dict[str, MediaKind] = {
    "mp4": MediaKind.VIDEO,
    "mkv": MediaKind.VIDEO,
    "png": MediaKind.STILL,
    "jpg": MediaKind.STILL,
    "gif": MediaKind.GIF,
}
"Detected file extensions and the source kind they are decoded with"


def sniff(path: str | os.PathLike) -> MediaKind:
    """
    Detect the media kind of a file from its content.

    :raises UnsupportedMediaError: if the type is unknown or not supported
    """
    kind = filetype.guess(str(path))
    if kind is None or kind.extension not in SUPPORTED_EXTENSIONS:
        found = kind.mime if kind is not None else "unknown"
        raise UnsupportedMediaError(
            f"Provided file type was not expected (Not MP4/MKV/JPG/PNG/GIF): {found}"
        )
    logger.debug(f"Detected {kind.mime} for {path}")
    return SUPPORTED_EXTENSIONS[kind.extension]


def is_url(location: str) -> bool:
    return location.startswith(HTTP_PROTOCOL_URL_HEADER) or location.startswith(
        HTTPS_PROTOCOL_URL_HEADER
    )


def fetch(url: str) -> Path:
    """
    Download remote media into a temporary file.

    The file name carries the extension of the detected type. The caller
    is responsible for deleting the file.

    :raises FrameSourceError: if the download fails
    """
    logger.info(f"Fetching {url}")
    target = tempfile.NamedTemporaryFile(delete=False)
    path = Path(target.name)
    try:
        with target, urlopen(url, timeout=FETCH_TIMEOUT) as response:
            shutil.copyfileobj(response, target)
    except (URLError, OSError, ValueError) as e:
        path.unlink(missing_ok=True)
        raise FrameSourceError(f"Failed to fetch {url}: {e}") from e
    kind = filetype.guess(str(path))
    if kind is not None:
        path = path.rename(path.with_suffix(f".{kind.extension}"))
    logger.debug(f"Stored {path.stat().st_size} bytes from {url} in {path}")
    return path


def source_for_file(path: str | os.PathLike, *, loop: bool = False) -> FrameSource:
    """Create the frame source matching the content of a local file."""
    kind = sniff(path)
    if kind == MediaKind.VIDEO:
        return VideoSource(path, loop=loop)
    if kind == MediaKind.GIF:
        return GifSource(path, loop=loop)
    return StillImageSource(path)


@contextmanager
def open_source(
    location: str | None, *, loop: bool = False, webcam: bool = False, device: int = 0
) -> Iterator[FrameSource]:
    """
    Open the frame source for a command line location.

    Without ``loop`` a webcam delivers a single frame. Downloaded files are
    removed again when the context exits.

    :param location: File path or http(s) URL, ignored for webcams
    :param loop: Repeat animations / stream the webcam continuously
    :param webcam: Capture from the camera instead of a file
    :param device: Camera device index
    :raises InvalidSourceError: if the location is neither a file nor a URL
    """
    downloaded: Path | None = None
    if webcam:
        source = CameraSource(device, limit=None if loop else 1)
    elif location is not None and os.path.isfile(location):
        source = source_for_file(location, loop=loop)
    elif location is not None and is_url(location):
        downloaded = fetch(location)
        try:
            source = source_for_file(downloaded, loop=loop)
        except Exception:
            downloaded.unlink(missing_ok=True)
            raise
    else:
        raise InvalidSourceError(
            "No valid input media provided (Webcam/File on your local file system/Network URL)"
        )
    try:
        with source:
            yield source
    finally:
        if downloaded is not None:
            downloaded.unlink(missing_ok=True)


__all__ = [
    "MediaKind",
    "SUPPORTED_EXTENSIONS",
    "sniff",
    "is_url",
    "fetch",
    "source_for_file",
    "open_source",
]
