import itertools
import random

import pytest

from ascii_cube.canvas import Canvas
from ascii_cube.parameters import MAX_SAMPLES_PER_AXIS, MIN_RESOLUTION_STEP, RenderParameters
from ascii_cube.rasterizer import FACE_TAGS, FACES, draw_cube, face_points, sample_axis


def render(params, width=80, height=40, half_width=12, faces=FACES):
    canvas = Canvas(width, height)
    draw_cube(canvas, params, half_width, width / height, faces)
    return canvas


def test_sample_axis_is_half_open():
    assert sample_axis(5, 5) == [-5, 0]
    assert sample_axis(1, 0.5) == [-1.0, -0.5, 0.0, 0.5]


@pytest.mark.parametrize("step", [0.0, -1.0, float('nan'), float('inf'), 0.001])
def test_sample_axis_clamps_bad_steps(step):
    values = sample_axis(1, step)
    assert values == sample_axis(1, MIN_RESOLUTION_STEP)
    assert values and all(-1 <= v < 1 for v in values)


def test_face_points_hold_one_axis():
    for face in FACES:
        points = list(face_points(face, 2, 1.0))
        assert len(points) == 16
        assert all(p[face.axis] == face.sign * 2 for p in points)


def test_all_six_faces_have_distinct_tags():
    assert sorted(FACE_TAGS) == ['B', 'F', 'K', 'L', 'R', 'T']
    assert len({(f.axis, f.sign) for f in FACES}) == 6


def test_small_canvas_exact_frame():
    # 10x10 canvas, half-width 5, step 5: every face is sampled at
    # coordinates {-5, 0}, the camera looks straight at the front face.
    params = RenderParameters(distance_from_camera=20.0, projection_scale=20.0,
                              resolution_step=5.0)
    canvas = Canvas(10, 10)
    landed = draw_cube(canvas, params, 5, 1.0)

    assert landed == 16
    assert canvas.rows() == [
        'T    T    ',
        ' T   T    ',
        '          ',
        '          ',
        '          ',
        'LL   F   R',
        '          ',
        '          ',
        '          ',
        ' L   K   R',
    ]
    # the front face is nearest at the center
    assert canvas.depth(5, 5) == pytest.approx(1 / 15)


def test_small_canvas_shows_every_face():
    params = RenderParameters(distance_from_camera=20.0, projection_scale=15.0,
                              resolution_step=5.0)
    canvas = Canvas(10, 10)
    landed = draw_cube(canvas, params, 5, 1.0)

    assert landed == 22
    rows = canvas.rows()
    assert rows == [
        '          ',
        ' T   T    ',
        '  T  T    ',
        '          ',
        '          ',
        'FLL  F  RR',
        '          ',
        '          ',
        '  L  K  R ',
        ' L   B   R',
    ]
    tags = [c for row in rows for c in row if c != ' ']
    assert set(tags) == set(FACE_TAGS)
    # one character per cell, so each covered cell holds exactly one tag
    assert all(len(row) == 10 for row in rows)
    assert len(tags) == canvas.covered()


def test_face_order_does_not_change_result():
    params = RenderParameters(alpha=30.0, beta=45.0, gamma=15.0, resolution_step=1.0)
    expected = render(params).snapshot()

    orders = [tuple(reversed(FACES)), FACES[3:] + FACES[:3]]
    rng = random.Random(7)
    for _ in range(3):
        shuffled = list(FACES)
        rng.shuffle(shuffled)
        orders.append(tuple(shuffled))

    for order in orders:
        assert render(params, faces=order).snapshot() == expected


def test_edge_on_view_face_order():
    # Straight-on view: shared cube edges tie on depth exactly
    params = RenderParameters(resolution_step=2.0)
    expected = render(params).snapshot()
    for order in itertools.islice(itertools.permutations(FACES), 0, 720, 97):
        assert render(params, faces=order).snapshot() == expected


def test_default_view_shows_front_face():
    canvas = render(RenderParameters())
    text = ''.join(canvas.rows())
    assert canvas.cell(40, 20) == 'F'
    counts = {tag: text.count(tag) for tag in FACE_TAGS}
    assert max(counts, key=counts.get) == 'F'


def test_rotated_cube_shows_several_faces():
    canvas = render(RenderParameters(alpha=20.0, beta=35.0, gamma=25.0))
    visible = set(''.join(canvas.rows())) - {' '}
    assert len(visible) >= 2


def test_coarse_step_leaves_gaps():
    fine = render(RenderParameters(resolution_step=0.6))
    coarse = render(RenderParameters(resolution_step=3.0))
    assert coarse.covered() < fine.covered()


def test_step_wider_than_cube_samples_one_point_per_face():
    canvas = render(RenderParameters(alpha=10.0, beta=20.0, resolution_step=24.0))
    assert canvas.covered() <= 6


def test_non_positive_step_terminates():
    params = RenderParameters(resolution_step=0.0)
    canvas = Canvas(20, 10)
    landed = draw_cube(canvas, params, 1, 2.0)
    assert landed > 0


def test_fine_step_is_capped_for_large_cubes():
    values = sample_axis(12, MIN_RESOLUTION_STEP)
    assert len(values) <= MAX_SAMPLES_PER_AXIS + 1
    assert values == sample_axis(12, 24 / MAX_SAMPLES_PER_AXIS)
    # small cubes still get the plain minimum step
    small = sample_axis(1, MIN_RESOLUTION_STEP)
    assert small[1] - small[0] == pytest.approx(MIN_RESOLUTION_STEP)


def test_camera_inside_cube_is_not_an_error():
    canvas = Canvas(80, 40)
    landed = draw_cube(canvas, RenderParameters(distance_from_camera=5.0), 12, 2.0)
    assert landed >= 0
    assert set("".join(canvas.rows())) <= set(FACE_TAGS) | {" "}
