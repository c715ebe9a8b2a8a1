#
# PROJECT: ascii-cube
# MODULE: ascii_cube/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from typing import NamedTuple

from .canvas import Canvas
from .math_utils import Mat3, Vec3
from .parameters import MAX_SAMPLES_PER_AXIS, RenderParameters, clamp_resolution_step
from .projection import project_point


class Face(NamedTuple):
    """One cube side: the coordinate `axis` is held at sign * half_width."""
    tag: str
    axis: int
    sign: int


# Axes follow the right-hand rule: x right, y up, z toward the viewer.
FACES = (
    Face('F', 2, +1),  # front
    Face('K', 2, -1),  # back
    Face('L', 0, -1),  # left
    Face('R', 0, +1),  # right
    Face('T', 1, +1),  # top
    Face('B', 1, -1),  # bottom
)

FACE_TAGS = tuple(face.tag for face in FACES)


def sample_axis(half_width: float, step: float):
    """
    Grid coordinates -H, -H + S, ... strictly below H.

    S is clamped to MIN_RESOLUTION_STEP and also widened so no more than
    about MAX_SAMPLES_PER_AXIS values are produced for large cubes.
    """
    step = max(clamp_resolution_step(step),
               2.0 * half_width / MAX_SAMPLES_PER_AXIS)
    values = []
    i = 0
    v = -half_width
    while v < half_width:
        values.append(v)
        i += 1
        v = -half_width + i * step
    return values


def _face_coords(face: Face, half_width: float, values):
    fixed = face.sign * half_width
    for u in values:
        for v in values:
            if face.axis == 0:
                yield fixed, u, v
            elif face.axis == 1:
                yield u, fixed, v
            else:
                yield u, v, fixed


def face_points(face: Face, half_width: float, step: float):
    """Every sample point of one face, as Vec3."""
    for x, y, z in _face_coords(face, half_width, sample_axis(half_width, step)):
        yield Vec3(x, y, z)


def draw_cube(canvas: Canvas, params: RenderParameters, half_width: float,
              aspect_ratio: float, faces=FACES) -> int:
    """
    Point-sample every face, rotate, project and depth-test into canvas.

    This is not a polygon fill: coverage depends on resolution_step relative
    to the canvas, and coarse steps leave visible gaps.

    Returns the number of samples that landed on the canvas.
    """
    rot = Mat3.euler(params.alpha, params.beta, params.gamma)
    (m0, m1, m2), (m3, m4, m5), (m6, m7, m8) = rot.m

    values = sample_axis(half_width, params.resolution_step)
    w, h = canvas.w, canvas.h
    distance = params.distance_from_camera
    scale = params.projection_scale
    plot = canvas.plot

    landed = 0
    for face in faces:
        tag = face.tag
        for i, j, k in _face_coords(face, half_width, values):
            rotated = (i * m0 + j * m1 + k * m2,
                       i * m3 + j * m4 + k * m5,
                       i * m6 + j * m7 + k * m8)
            sp = project_point(rotated, distance, scale, w, h, aspect_ratio)
            if sp is None:
                continue
            landed += 1
            plot(sp.xp, sp.yp, sp.depth_key, tag)
    return landed
