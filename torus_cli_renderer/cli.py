#
# PROJECT: torus-cli-renderer
# MODULE: torus_cli_renderer/cli.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import argparse
import curses
import logging
import sys

from .config import TorusConfig
from .display import StreamDisplay
from .renderer import Renderer
from .app import run_session

logger = logging.getLogger(__name__)


def _positive_int(value):
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if n <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value!r}")
    return n


def parse_args(argv=None):
    """CLI argument parser."""
    epilog = """\
keys:
  Up/Down       tilt faster/slower      r, s    reset speeds
  Right/Left    spin faster/slower      p       pause
  Esc           quit

examples:
  %(prog)s                                  Animate at terminal size
  %(prog)s --width 80 --height 24           Fixed 80x24 frame
  %(prog)s --once > torus.txt               Render one frame to stdout
  %(prog)s --log-file torus.log --log-level DEBUG
"""
    parser = argparse.ArgumentParser(
        description="Rotating ASCII torus for the terminal",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("--width", type=_positive_int,
                        help="Frame width in columns (default: terminal width)")
    parser.add_argument("--height", type=_positive_int,
                        help="Frame height in rows (default: terminal height)")
    parser.add_argument("--once", action="store_true",
                        help="Render a single frame to stdout and exit")
    parser.add_argument("--log-file",
                        help="Write log messages to this file")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Log level for --log-file (default: INFO)")
    return parser.parse_args(argv)


def configure_logging(log_file=None, level="INFO"):
    """
    Route package logs to a file, or nowhere. The terminal belongs to the
    animation, so nothing is logged to the console.
    """
    root = logging.getLogger("torus_cli_renderer")
    if log_file:
        handler = logging.FileHandler(log_file)
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)-7s %(name)s: %(message)s"))
        root.setLevel(level)
    else:
        handler = logging.NullHandler()
    root.addHandler(handler)


def build_config(args) -> TorusConfig:
    overrides = {}
    if args.width:
        overrides['width'] = args.width
    if args.height:
        overrides['height'] = args.height
    return TorusConfig.detect_terminal(**overrides)


def render_once(config: TorusConfig, stream=None):
    """Render the torus at its starting angles as a single frame."""
    Renderer(config).render(StreamDisplay(stream), 0.0, 0.0)


def main(argv=None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_file, args.log_level)
    config = build_config(args)

    try:
        if args.once:
            render_once(config)
        else:
            run_session(config)
    except KeyboardInterrupt:
        pass
    except (OSError, curses.error) as e:
        logger.exception("Output failed")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0
