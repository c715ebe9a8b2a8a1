#
# PROJECT: ascii-cube
# MODULE: ascii_cube/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import curses
from itertools import groupby
from types import MappingProxyType

from .canvas import Canvas
from .color import colorize, init_face_colors
from .parameters import RenderParameters


def hud_lines(params: RenderParameters):
    """Current parameter values with their key bindings."""
    def auto(flag):
        return 'on ' if flag else 'off'

    p = params
    return [
        f"alpha : {p.alpha:8.2f}   auto {auto(p.auto_alpha)}   (e/r: +/- | a: auto)",
        f"beta  : {p.beta:8.2f}   auto {auto(p.auto_beta)}   (d/f: +/- | b: auto)",
        f"gamma : {p.gamma:8.2f}   auto {auto(p.auto_gamma)}   (c/v: +/- | g: auto)",
        "",
        f"DISTANCE_FROM_CAMERA : {p.distance_from_camera:8.2f}   (u/j: +/-)",
        f"PROJECTION_SCALE     : {p.projection_scale:8.2f}   (i/k: +/-)",
        f"RESOLUTION_STEP      : {p.resolution_step:8.2f}   (o/l: +/-)",
        "",
        "z: reset",
        "q: quit",
    ]


def canvas_to_text(canvas: Canvas, face_colors=None):
    """
    Character buffer as a list of text rows.
    With face_colors (tag -> (r, g, b)) every face tag is wrapped in an
    ANSI color escape; background and unknown characters stay plain.
    """
    rows = canvas.rows()
    if not face_colors:
        return rows
    return [''.join(colorize(ch, face_colors[ch]) if ch in face_colors else ch
                    for ch in row)
            for row in rows]


class Renderer:
    """
    Curses presentation of a finished frame.

    draw(stdscr, canvas, params) writes the character grid, each face tag in
    its own color pair, followed by the parameter HUD. It does NOT call
    stdscr.refresh(); the caller does that once per frame.
    """

    def __init__(self, face_attrs=None):
        self.face_attrs = MappingProxyType(dict(face_attrs or {}))

    def init_colors(self, face_colors, use_color=True):
        """Allocate curses color pairs. Call once after curses.wrapper init."""
        self.face_attrs = init_face_colors(face_colors, use_color)

    def draw(self, stdscr, canvas: Canvas, params: RenderParameters):
        stdscr.erase()
        th, tw = stdscr.getmaxyx()
        if th <= 0 or tw <= 0:
            return

        background = canvas.background
        attrs = self.face_attrs
        for y, row in enumerate(canvas.rows()[:th]):
            x = 0
            for ch, run in groupby(row):
                n = len(list(run))
                if ch != background and x < tw:
                    self._put(stdscr, y, x, ch * min(n, tw - x), attrs.get(ch, 0))
                x += n

        for i, line in enumerate(hud_lines(params)):
            y = canvas.h + 1 + i
            if y >= th:
                break
            if line:
                self._put(stdscr, y, 0, line[:tw], curses.A_BOLD)

    @staticmethod
    def _put(stdscr, y, x, text, attr):
        try:
            stdscr.addstr(y, x, text, attr)
        except curses.error:
            # Writing the bottom-right cell moves the cursor off-screen and raises
            pass
