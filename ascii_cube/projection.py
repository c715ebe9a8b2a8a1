#
# PROJECT: ascii-cube
# MODULE: ascii_cube/projection.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math
from typing import NamedTuple, Optional


class ScreenPoint(NamedTuple):
    """A projected sample: integer pixel position plus its depth key."""
    xp: int
    yp: int
    depth_key: float


def _round_pixel(value: float) -> int:
    # Halves round up, so 4.5 -> 5 and -0.5 -> 0.
    return math.floor(value + 0.5)


def project_point(point, distance_from_camera: float, projection_scale: float,
                  width: int, height: int,
                  aspect_ratio: float) -> Optional[ScreenPoint]:
    """
    Perspective-project a rotated point onto a width x height canvas.

    The camera sits at the origin looking down -z and the cube is pushed
    away from it by distance_from_camera, so a positive model z moves a
    point toward the camera:

        effective_z = distance_from_camera - z
        depth_key   = 1 / effective_z          (larger = nearer)

    Screen rows grow downward, hence the inverted y. Points behind the
    camera get a negative depth_key; they are still returned but can never
    win against the empty-cell sentinel of the depth buffer.

    Returns None when the sample must be dropped: degenerate depth
    (effective_z == 0), non-finite coordinates, or a pixel outside
    [0, width) x [0, height).
    """
    x, y, z = point
    effective_z = distance_from_camera - z
    if effective_z == 0:
        return None
    depth_key = 1.0 / effective_z

    sx = width / 2.0 + projection_scale * depth_key * x * aspect_ratio
    sy = height / 2.0 - projection_scale * depth_key * y
    if not (math.isfinite(sx) and math.isfinite(sy) and math.isfinite(depth_key)):
        return None

    xp = _round_pixel(sx)
    yp = _round_pixel(sy)
    if xp < 0 or xp >= width or yp < 0 or yp >= height:
        return None
    return ScreenPoint(xp, yp, depth_key)
