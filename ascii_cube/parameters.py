#
# PROJECT: ascii-cube
# MODULE: ascii_cube/parameters.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math
from dataclasses import dataclass, astuple, fields

CUBE_WIDTH = 25
HALF_CUBE_WIDTH = CUBE_WIDTH // 2
DISTANCE_FROM_CAMERA = 53.0 + HALF_CUBE_WIDTH
PROJECTION_SCALE = DISTANCE_FROM_CAMERA / 2.0
RESOLUTION_STEP = 0.6
MIN_RESOLUTION_STEP = 0.05
# Upper bound on samples along one face edge; keeps a frame near 60k points.
MAX_SAMPLES_PER_AXIS = 100

# Degrees added per frame while an axis has auto-rotation enabled.
AUTO_ALPHA_STEP = 2.5
AUTO_BETA_STEP = 2.0
AUTO_GAMMA_STEP = 1.5


def clamp_resolution_step(step: float) -> float:
    """Keep the face sampling step strictly positive and finite."""
    if not math.isfinite(step) or step < MIN_RESOLUTION_STEP:
        return MIN_RESOLUTION_STEP
    return step


@dataclass
class RenderParameters:
    """Rotation and camera state for the cube; mutated in place every frame."""
    alpha: float = 0.0           # Rotation around Z (degrees)
    beta: float = 0.0            # Rotation around Y (degrees)
    gamma: float = 0.0           # Rotation around X (degrees)
    auto_alpha: float = 0.0      # 0.0 / 1.0 multiplier of AUTO_ALPHA_STEP
    auto_beta: float = 0.0
    auto_gamma: float = 0.0
    distance_from_camera: float = DISTANCE_FROM_CAMERA
    projection_scale: float = PROJECTION_SCALE
    resolution_step: float = RESOLUTION_STEP

    def reset(self):
        """Restore every field to its default value."""
        for f in fields(self):
            setattr(self, f.name, f.default)

    def as_tuple(self):
        return astuple(self)
