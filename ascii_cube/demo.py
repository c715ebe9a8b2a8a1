#
# PROJECT: ascii-cube
# MODULE: ascii_cube/demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import curses
import logging
import time

from .actions import LoopControl
from .config import CubeConfig
from .frame import FrameState
from .input_listener import InputListener, poll_action
from .parameters import RenderParameters
from .renderer import Renderer

logger = logging.getLogger(__name__)


def initial_parameters(auto: bool = False) -> RenderParameters:
    params = RenderParameters()
    if auto:
        params.auto_alpha = params.auto_beta = params.auto_gamma = 1.0
    return params


class DemoApp:
    """
    Interactive cube: render loop on the main thread, keys from a
    background InputListener, one action folded in per frame.
    """

    def __init__(self, stdscr, config: CubeConfig, params: RenderParameters = None):
        self.stdscr = stdscr
        self.config = config
        self.running = True

        # ── Curses setup ────────────────────────────────────────────────
        curses.curs_set(0)

        # Keys are read from a private 1x1 window so the worker thread never
        # touches the screen the render loop draws into.
        self.input_win = curses.newwin(1, 1, 0, 0)
        self.input_win.keypad(True)
        self.input_win.timeout(int(config.input_poll_interval * 1000))

        # ── Renderer + curses color init ────────────────────────────────
        renderer = Renderer()
        renderer.init_colors(config.face_colors, config.use_color)
        self.renderer = renderer

        self.frame = FrameState(config.canvas_width, config.canvas_height,
                                config.background, params)
        self.listener = InputListener(self.input_win.getch)

        self.frame_count = 0

    def step(self):
        """Render one frame and fold in at most one pending action."""
        frame = self.frame
        frame.begin_frame()
        frame.rasterize(self.config.half_cube_width)

        self.renderer.draw(self.stdscr, frame.canvas, frame.params)
        self.stdscr.refresh()
        self.frame_count += 1

        action = poll_action(self.listener)
        if action is not None:
            if frame.apply(action) is LoopControl.STOP:
                self.running = False
                return

        frame.advance_auto_rotation()

    def run(self):
        logger.info("render loop started (%dx%d, %.3fs/frame)",
                    self.config.canvas_width, self.config.canvas_height,
                    self.config.frame_interval)
        self.listener.start()
        try:
            while self.running:
                self.step()
                time.sleep(self.config.frame_interval)
        finally:
            self.listener.stop()
            logger.info("render loop stopped after %d frames", self.frame_count)


def main(stdscr, config: CubeConfig, params: RenderParameters = None):
    """Entry point called from curses.wrapper."""
    app = DemoApp(stdscr, config, params)
    app.run()
