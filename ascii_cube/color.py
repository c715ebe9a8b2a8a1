#
# PROJECT: ascii-cube
# MODULE: ascii_cube/color.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import curses
import logging
from types import MappingProxyType

logger = logging.getLogger(__name__)

# Face tag -> (r, g, b). Tags match rasterizer.FACES.
DEFAULT_FACE_COLORS = MappingProxyType({
    'F': (255, 255, 0),    # yellow
    'K': (255, 0, 0),      # red
    'L': (0, 255, 255),    # cyan
    'R': (255, 0, 255),    # magenta
    'T': (0, 0, 255),      # blue
    'B': (0, 255, 0),      # green
})

def parse_hex_color(hex_str):
    """
    Parse a hex color string to an (r, g, b) tuple.
    Accepts: '#RRGGBB' or 'RRGGBB' (case-insensitive).
    Returns: (r, g, b) tuple with values 0-255, or None on failure.
    """
    if hex_str is None:
        return None
    val = str(hex_str).strip().lstrip('#')
    if len(val) != 6:
        return None
    try:
        r = int(val[0:2], 16)
        g = int(val[2:4], 16)
        b = int(val[4:6], 16)
        return (r, g, b)
    except ValueError:
        return None

def build_face_colors(overrides=None):
    """
    Build the immutable face-tag color table once at startup.
    overrides maps face tags to (r, g, b) and replaces the defaults for those tags.
    """
    table = dict(DEFAULT_FACE_COLORS)
    for tag, rgb in (overrides or {}).items():
        if tag not in DEFAULT_FACE_COLORS:
            raise ValueError(f"unknown face tag {tag!r}")
        table[tag] = tuple(rgb)
    return MappingProxyType(table)

# --- xterm-256 palette matching ---

# The 6x6x6 color cube occupies indices 16-231.
# Each axis has values: 0, 95, 135, 175, 215, 255
_CUBE_VALUES = [0, 95, 135, 175, 215, 255]

# Grayscale ramp occupies indices 232-255 (24 shades).
# Values: 8, 18, 28, ..., 238

# ANSI 0-7 approximate RGB values
_ANSI8 = [
    (0, 0, 0),       # 0  black
    (128, 0, 0),     # 1  red
    (0, 128, 0),     # 2  green
    (128, 128, 0),   # 3  yellow
    (0, 0, 128),     # 4  blue
    (128, 0, 128),   # 5  magenta
    (0, 128, 128),   # 6  cyan
    (192, 192, 192), # 7  white
]

def _rgb_to_nearest_xterm(r, g, b):
    """Find the nearest xterm-256 index for an (r, g, b) color.
    Searches the 6x6x6 cube and the grayscale ramp for best match."""

    def _nearest_cube_val(v):
        best_i = 0
        best_d = abs(v - _CUBE_VALUES[0])
        for i in range(1, 6):
            d = abs(v - _CUBE_VALUES[i])
            if d < best_d:
                best_d = d
                best_i = i
        return best_i

    ri = _nearest_cube_val(r)
    gi = _nearest_cube_val(g)
    bi = _nearest_cube_val(b)
    cube_idx = 16 + ri * 36 + gi * 6 + bi
    cr, cg, cb = _CUBE_VALUES[ri], _CUBE_VALUES[gi], _CUBE_VALUES[bi]
    cube_dist = (r - cr) ** 2 + (g - cg) ** 2 + (b - cb) ** 2

    gray_avg = (r + g + b) // 3
    gray_step = max(0, min(23, (gray_avg - 8 + 5) // 10))
    gray_idx = 232 + gray_step
    gv = 8 + gray_step * 10
    gray_dist = (r - gv) ** 2 + (g - gv) ** 2 + (b - gv) ** 2

    return gray_idx if gray_dist < cube_dist else cube_idx

def _rgb_to_nearest_ansi8(r, g, b):
    """Find the nearest basic ANSI color index (0-7) for an (r, g, b) color.
    Used on terminals that only support 8 colors."""
    best_idx = 0
    best_dist = (r - _ANSI8[0][0]) ** 2 + (g - _ANSI8[0][1]) ** 2 + (b - _ANSI8[0][2]) ** 2
    for i in range(1, 8):
        ar, ag, ab = _ANSI8[i]
        d = (r - ar) ** 2 + (g - ag) ** 2 + (b - ab) ** 2
        if d < best_dist:
            best_dist = d
            best_idx = i
    return best_idx

def colorize(text, rgb):
    """Wrap text in an xterm-256 foreground escape sequence (for plain stdout)."""
    idx = _rgb_to_nearest_xterm(*rgb)
    return f"\033[38;5;{idx}m{text}\033[0m"

def init_face_colors(face_colors, use_color=True):
    """
    Initialize one curses color pair per face tag.
    Color mode cascade:
      1. True color  – can_change_color(): init_color() with exact RGB
      2. xterm-256   – 256+ colors: nearest xterm-256 index
      3. 8-color     – basic ANSI palette approximation
      4. Mono        – no color
    Must be called after curses initialisation.
    Returns an immutable mapping tag -> curses attribute (empty in mono mode).
    """
    if not use_color or not curses.has_colors():
        return MappingProxyType({})

    curses.start_color()

    # Try to use default background transparency
    bg = curses.COLOR_BLACK
    try:
        curses.use_default_colors()
        bg = -1
    except curses.error:
        pass

    num_colors = getattr(curses, 'COLORS', 8)
    can_redefine = curses.can_change_color()

    attrs = {}
    for i, (tag, (r, g, b)) in enumerate(sorted(face_colors.items())):
        if can_redefine and num_colors >= 256:
            # Slots from 16 upward leave ANSI 0-15 untouched
            fg = 16 + i
            try:
                curses.init_color(fg, r * 1000 // 255, g * 1000 // 255, b * 1000 // 255)
            except curses.error:
                fg = _rgb_to_nearest_xterm(r, g, b)
        elif num_colors >= 256:
            fg = _rgb_to_nearest_xterm(r, g, b)
        elif num_colors >= 8:
            fg = _rgb_to_nearest_ansi8(r, g, b)
        else:
            return MappingProxyType({})

        pair_id = i + 1
        try:
            curses.init_pair(pair_id, fg, bg)
            attrs[tag] = curses.color_pair(pair_id)
        except curses.error:
            logger.warning("could not allocate color pair for face %s", tag)

    logger.info("initialised %d face colors (%d terminal colors)", len(attrs), num_colors)
    return MappingProxyType(attrs)
