import curses
import random

import pytest

from ascii_cube.actions import (
    DEFAULT_KEY_BINDINGS, CubeAction, LoopControl, apply_action, key_to_action,
)
from ascii_cube.parameters import MIN_RESOLUTION_STEP, RenderParameters

DEFAULTS = RenderParameters().as_tuple()


@pytest.mark.parametrize("action, field, delta", [
    (CubeAction.INCREASE_ALPHA, 'alpha', 2.5),
    (CubeAction.DECREASE_ALPHA, 'alpha', -5.0),
    (CubeAction.INCREASE_BETA, 'beta', 2.5),
    (CubeAction.DECREASE_BETA, 'beta', -5.0),
    (CubeAction.INCREASE_GAMMA, 'gamma', 2.5),
    (CubeAction.DECREASE_GAMMA, 'gamma', -5.0),
    (CubeAction.INCREASE_DISTANCE_FROM_CAMERA, 'distance_from_camera', 1.5),
    (CubeAction.DECREASE_DISTANCE_FROM_CAMERA, 'distance_from_camera', -1.0),
    (CubeAction.INCREASE_PROJECTION_SCALE, 'projection_scale', 1.5),
    (CubeAction.DECREASE_PROJECTION_SCALE, 'projection_scale', -1.0),
    (CubeAction.INCREASE_RESOLUTION_STEP, 'resolution_step', 0.1),
    (CubeAction.DECREASE_RESOLUTION_STEP, 'resolution_step', -0.1),
])
def test_fixed_deltas(action, field, delta):
    params = RenderParameters()
    before = getattr(params, field)
    assert apply_action(params, action) is LoopControl.CONTINUE
    assert getattr(params, field) == pytest.approx(before + delta)


@pytest.mark.parametrize("action, field", [
    (CubeAction.TOGGLE_AUTO_ALPHA, 'auto_alpha'),
    (CubeAction.TOGGLE_AUTO_BETA, 'auto_beta'),
    (CubeAction.TOGGLE_AUTO_GAMMA, 'auto_gamma'),
])
def test_toggle_flips_flag(action, field):
    params = RenderParameters()
    apply_action(params, action)
    assert getattr(params, field) == 1.0
    apply_action(params, action)
    assert getattr(params, field) == 0.0


def test_toggle_uses_one_minus_current():
    params = RenderParameters(auto_beta=0.25)
    apply_action(params, CubeAction.TOGGLE_AUTO_BETA)
    assert params.auto_beta == 0.75


def test_resolution_step_never_drops_below_minimum():
    params = RenderParameters()
    for _ in range(10):
        apply_action(params, CubeAction.DECREASE_RESOLUTION_STEP)
    assert params.resolution_step == MIN_RESOLUTION_STEP
    apply_action(params, CubeAction.INCREASE_RESOLUTION_STEP)
    assert params.resolution_step == pytest.approx(MIN_RESOLUTION_STEP + 0.1)


def test_reset_restores_defaults_after_any_history():
    rng = random.Random(1234)
    edits = [a for a in CubeAction if a not in (CubeAction.RESET, CubeAction.QUIT)]
    params = RenderParameters()
    for _ in range(200):
        apply_action(params, rng.choice(edits))
    params.alpha = 1e9
    assert params.as_tuple() != DEFAULTS

    assert apply_action(params, CubeAction.RESET) is LoopControl.RESET
    assert params.as_tuple() == DEFAULTS


def test_quit_signals_stop_without_mutation():
    params = RenderParameters(alpha=10.0)
    before = params.as_tuple()
    assert apply_action(params, CubeAction.QUIT) is LoopControl.STOP
    assert params.as_tuple() == before


def test_every_action_has_a_key():
    bound = set(DEFAULT_KEY_BINDINGS.values())
    assert bound == set(CubeAction)


@pytest.mark.parametrize("key, action", [
    ('a', CubeAction.TOGGLE_AUTO_ALPHA),
    (ord('e'), CubeAction.INCREASE_ALPHA),
    (ord('l'), CubeAction.DECREASE_RESOLUTION_STEP),
    ('z', CubeAction.RESET),
    (ord('q'), CubeAction.QUIT),
])
def test_key_to_action(key, action):
    assert key_to_action(key) is action


@pytest.mark.parametrize("key", [-1, 'x', ord('Q'), curses.KEY_UP, 0x110000, ''])
def test_unbound_keys(key):
    assert key_to_action(key) is None


def test_custom_bindings():
    bindings = {'w': CubeAction.INCREASE_ALPHA}
    assert key_to_action('w', bindings) is CubeAction.INCREASE_ALPHA
    assert key_to_action('e', bindings) is None
