#!/usr/bin/env python3
#
# PROJECT: ascii-cube
# MODULE: ascii_cube/__main__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import argparse
import curses
import logging
import sys
import traceback

from .color import build_face_colors, parse_hex_color
from .config import CubeConfig, CANVAS_WIDTH, CANVAS_HEIGHT
from .demo import initial_parameters, main as run_demo
from .frame import FrameState
from .parameters import CUBE_WIDTH
from .rasterizer import FACE_TAGS
from .renderer import canvas_to_text, hud_lines

logger = logging.getLogger("ascii_cube")


def face_color_arg(text):
    """argparse type for TAG=#RRGGBB."""
    tag, sep, value = text.partition('=')
    tag = tag.strip().upper()
    if not sep or tag not in FACE_TAGS:
        raise argparse.ArgumentTypeError(
            f"expected TAG=#RRGGBB with TAG one of {', '.join(FACE_TAGS)}, got {text!r}")
    rgb = parse_hex_color(value)
    if rgb is None:
        raise argparse.ArgumentTypeError(f"invalid hex color {value!r}")
    return tag, rgb


def positive_int(text):
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return value


def positive_float(text):
    value = float(text)
    if not value > 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {text}")
    return value


def parse_args(argv=None):
    """CLI argument parser."""
    epilog = """\
keys:
  a / e / r   alpha  auto-rotate / +2.5 / -5.0
  b / d / f   beta   auto-rotate / +2.5 / -5.0
  g / c / v   gamma  auto-rotate / +2.5 / -5.0
  u / j       distance from camera +1.5 / -1.0
  i / k       projection scale +1.5 / -1.0
  o / l       resolution step +0.1 / -0.1
  z           reset      q  quit

examples:
  %(prog)s                                  Static cube, toggle rotation with a/b/g
  %(prog)s --auto                           Spin on all three axes
  %(prog)s --face-color F=#FF8800 --auto    Orange front face
  %(prog)s --once --no-color                Print one frame and exit
"""
    parser = argparse.ArgumentParser(
        prog="ascii-cube",
        description="Rotating ASCII cube renderer",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("--width", type=positive_int, default=CANVAS_WIDTH,
                        help=f"Canvas width in characters (default: {CANVAS_WIDTH})")
    parser.add_argument("--height", type=positive_int, default=CANVAS_HEIGHT,
                        help=f"Canvas height in characters (default: {CANVAS_HEIGHT})")
    parser.add_argument("--cube-width", type=positive_int, default=CUBE_WIDTH,
                        help=f"Cube edge length in model units (default: {CUBE_WIDTH})")
    parser.add_argument("--fps", type=positive_float, default=60.0,
                        help="Target frame rate (default: 60)")
    parser.add_argument("--no-color", action="store_true",
                        help="Disable color output")
    parser.add_argument("--face-color", type=face_color_arg, action="append",
                        default=[], metavar="TAG=#RRGGBB",
                        help="Override the color of one face (repeatable)")
    parser.add_argument("--auto", action="store_true",
                        help="Start with auto-rotation enabled on all axes")
    parser.add_argument("--once", action="store_true",
                        help="Print a single frame to stdout and exit")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable verbose logging (INFO level)")
    parser.add_argument("-vv", "--debug", action="store_true",
                        help="Enable debug logging (DEBUG level)")
    parser.add_argument("--log-file",
                        help="Write log messages to this file instead of stderr")
    return parser.parse_args(argv)


def setup_logging(verbose: bool = False, debug: bool = False, log_file=None) -> None:
    """
    Sets up the logging configuration.
    Log records go to log_file when given, so they do not garble the curses screen.
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, filename=log_file,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def build_config(args) -> CubeConfig:
    config = CubeConfig.detect_terminal(
        canvas_width=args.width,
        canvas_height=args.height,
        cube_width=args.cube_width,
        frame_interval=1.0 / args.fps,
        face_colors=build_face_colors(dict(args.face_color)),
    )
    if args.no_color:
        config.use_color = False
    return config


def render_once(config: CubeConfig, params) -> str:
    """One frame plus the HUD as printable text."""
    frame = FrameState(config.canvas_width, config.canvas_height,
                       config.background, params)
    frame.begin_frame()
    frame.rasterize(config.half_cube_width)
    palette = config.face_colors if config.use_color else None
    lines = canvas_to_text(frame.canvas, palette)
    lines.append("")
    lines.extend(hud_lines(frame.params))
    return "\n".join(lines)


def cli(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(verbose=args.verbose, debug=args.debug, log_file=args.log_file)

    config = build_config(args)
    params = initial_parameters(auto=args.auto)
    logger.info("config: %s", config)

    if args.once:
        print(render_once(config, params))
        return 0

    try:
        curses.wrapper(lambda s: run_demo(s, config, params))
    except KeyboardInterrupt:
        pass
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        traceback.print_exc()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(cli())
