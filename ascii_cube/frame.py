#
# PROJECT: ascii-cube
# MODULE: ascii_cube/frame.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .actions import CubeAction, LoopControl, apply_action
from .canvas import Canvas
from .parameters import (
    RenderParameters, AUTO_ALPHA_STEP, AUTO_BETA_STEP, AUTO_GAMMA_STEP,
)
from .rasterizer import draw_cube


class FrameState:
    """
    Per-process render state: the canvas (character + depth buffers) and
    the live RenderParameters.

    One frame is begin_frame() -> rasterize() -> present -> apply() for
    pending input -> advance_auto_rotation().
    """

    def __init__(self, width: int, height: int, background: str = ' ',
                 params: RenderParameters = None):
        self.canvas = Canvas(width, height, background)
        self.params = params if params is not None else RenderParameters()

    @property
    def aspect_ratio(self) -> float:
        return self.canvas.w / self.canvas.h

    def begin_frame(self):
        """Clear both buffers; must run before every sampling pass."""
        self.canvas.clear()

    def rasterize(self, half_width: float) -> int:
        return draw_cube(self.canvas, self.params, half_width, self.aspect_ratio)

    def apply(self, action: CubeAction) -> LoopControl:
        return apply_action(self.params, action)

    def advance_auto_rotation(self):
        p = self.params
        p.alpha += AUTO_ALPHA_STEP * p.auto_alpha
        p.beta += AUTO_BETA_STEP * p.auto_beta
        p.gamma += AUTO_GAMMA_STEP * p.auto_gamma
