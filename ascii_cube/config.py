#
# PROJECT: ascii-cube
# MODULE: ascii_cube/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import os
from dataclasses import dataclass, field
from typing import Mapping, Tuple

from .color import DEFAULT_FACE_COLORS
from .parameters import CUBE_WIDTH

CANVAS_WIDTH = 80
CANVAS_HEIGHT = 40
BACKGROUND = ' '
FRAME_INTERVAL = 0.016       # seconds, ~60 Hz; render time is not subtracted
INPUT_POLL_INTERVAL = 0.1    # seconds the input thread blocks per read


@dataclass
class CubeConfig:
    """Static settings of the cube demo; fixed for the lifetime of the process."""
    canvas_width: int = CANVAS_WIDTH
    canvas_height: int = CANVAS_HEIGHT
    cube_width: int = CUBE_WIDTH
    background: str = BACKGROUND
    use_color: bool = True
    frame_interval: float = FRAME_INTERVAL
    input_poll_interval: float = INPUT_POLL_INTERVAL
    face_colors: Mapping[str, Tuple[int, int, int]] = field(
        default_factory=lambda: DEFAULT_FACE_COLORS, repr=False)

    def __post_init__(self):
        if self.canvas_width <= 0 or self.canvas_height <= 0:
            raise ValueError(
                f"canvas must be positive, got {self.canvas_width}x{self.canvas_height}")
        if self.cube_width <= 0:
            raise ValueError(f"cube width must be positive, got {self.cube_width}")
        if len(self.background) != 1:
            raise ValueError(f"background must be one character, got {self.background!r}")
        if self.frame_interval < 0:
            raise ValueError(f"frame interval must not be negative, got {self.frame_interval}")

    @property
    def aspect_ratio(self) -> float:
        return self.canvas_width / self.canvas_height

    @property
    def half_cube_width(self) -> int:
        return self.cube_width // 2

    @classmethod
    def detect_terminal(cls, **overrides) -> 'CubeConfig':
        """
        Guess terminal capabilities from the environment and return a config.
        TERM=dumb/unknown or a set NO_COLOR disable color; accurate color
        detection requires curses initialization, so this is a pre-init guess.
        """
        term = os.environ.get('TERM', '').lower()
        is_dumb = term in ('dumb', 'unknown')
        no_color = bool(os.environ.get('NO_COLOR'))

        settings = dict(use_color=not (is_dumb or no_color))
        settings.update(overrides)
        return cls(**settings)
