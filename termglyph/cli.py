"""
Command line front-end.

Usage:
    termglyph -f photo.jpg -c -r
    termglyph -f animation.gif -c -r -l -a 100
    termglyph -f https://example.com/clip.mp4 -r
    termglyph -w -l -c -r
"""

from __future__ import annotations

import argparse
import logging
import sys

from .config import DEFAULT_FRAME_DELAY_MS, RenderConfig
from .errors import TermGlyphError
from .media import open_source
from .player import StreamPlayer
from .terminal import TerminalScreen

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="termglyph",
        description="Render images, GIFs, videos and webcam frames as text art in the terminal",
    )
    parser.add_argument(
        "-f", "--file-path", help="Image, GIF or video to display (local path or URL)"
    )
    parser.add_argument(
        "-c", "--colored", action="store_true", help="Colorize the glyph output"
    )
    parser.add_argument(
        "-r",
        "--resize",
        action="store_true",
        help="Fit the image to the terminal, preserving its aspect ratio",
    )
    parser.add_argument(
        "-a",
        "--animation-delay",
        type=int,
        default=DEFAULT_FRAME_DELAY_MS,
        metavar="MS",
        help="Time to wait between frames in milliseconds (default: %(default)s)",
    )
    parser.add_argument(
        "-l",
        "--loop-animation",
        action="store_true",
        help="Loop animations; streams the webcam instead of taking a single frame",
    )
    parser.add_argument(
        "-b",
        "--block-character",
        action="store_true",
        help="Draw every pixel with the solid block glyph",
    )
    parser.add_argument(
        "-w", "--webcam-feed", action="store_true", help="Display frames from the webcam"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug output to stderr"
    )
    return parser


def config_from_args(args: argparse.Namespace) -> RenderConfig:
    """Build the render configuration from parsed arguments."""
    return RenderConfig.from_milliseconds(
        args.animation_delay,
        colorize=args.colored,
        resize=args.resize,
        block_characters=args.block_character,
        loop=args.loop_animation,
    )


def run(args: argparse.Namespace, screen: TerminalScreen | None = None) -> None:
    """Display the requested media."""
    config = config_from_args(args)
    screen = screen if screen is not None else TerminalScreen()
    player = StreamPlayer(config, screen)
    with open_source(
        args.file_path, loop=config.loop, webcam=args.webcam_feed
    ) as source:
        screen.clear()
        if source.frame_count == 1:
            frame = source.read()
            if frame is not None:
                player.render_still(frame)
            return
        with screen.session():
            player.play(source)
    logger.debug(f"Rendered {player.frames_rendered} frames")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.file_path and not args.webcam_feed:
        parser.error("one of --file-path or --webcam-feed is required")
    if args.animation_delay < 0:
        parser.error("--animation-delay must not be negative")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        run(args)
    except KeyboardInterrupt:
        return 130
    except TermGlyphError as e:
        print(f"termglyph: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"termglyph: output failed: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
