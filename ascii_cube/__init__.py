#
# PROJECT: ascii-cube
# MODULE: ascii_cube/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .math_utils import Vec3, Mat3, rotate_point, inverse_rotate_point
from .projection import ScreenPoint, project_point
from .canvas import Canvas, DEPTH_SENTINEL
from .rasterizer import Face, FACES, FACE_TAGS, draw_cube, face_points, sample_axis
from .parameters import RenderParameters, clamp_resolution_step
from .actions import CubeAction, LoopControl, apply_action, key_to_action, DEFAULT_KEY_BINDINGS
from .frame import FrameState
from .input_listener import InputListener, poll_action
from .color import DEFAULT_FACE_COLORS, build_face_colors, parse_hex_color
from .config import CubeConfig
from .renderer import Renderer, canvas_to_text, hud_lines
