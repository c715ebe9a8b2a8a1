#
# PROJECT: ascii-cube
# MODULE: ascii_cube/actions.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
from enum import Enum, auto
from types import MappingProxyType
from typing import Optional

from .parameters import RenderParameters, clamp_resolution_step

logger = logging.getLogger(__name__)


class CubeAction(Enum):
    """Discrete parameter edits a user can trigger."""
    TOGGLE_AUTO_ALPHA = auto()
    INCREASE_ALPHA = auto()
    DECREASE_ALPHA = auto()

    TOGGLE_AUTO_BETA = auto()
    INCREASE_BETA = auto()
    DECREASE_BETA = auto()

    TOGGLE_AUTO_GAMMA = auto()
    INCREASE_GAMMA = auto()
    DECREASE_GAMMA = auto()

    INCREASE_DISTANCE_FROM_CAMERA = auto()
    DECREASE_DISTANCE_FROM_CAMERA = auto()

    INCREASE_PROJECTION_SCALE = auto()
    DECREASE_PROJECTION_SCALE = auto()

    INCREASE_RESOLUTION_STEP = auto()
    DECREASE_RESOLUTION_STEP = auto()

    RESET = auto()
    QUIT = auto()


class LoopControl(Enum):
    """What the main loop should do after an action was applied."""
    CONTINUE = auto()
    RESET = auto()
    STOP = auto()


_TOGGLES = {
    CubeAction.TOGGLE_AUTO_ALPHA: 'auto_alpha',
    CubeAction.TOGGLE_AUTO_BETA: 'auto_beta',
    CubeAction.TOGGLE_AUTO_GAMMA: 'auto_gamma',
}

# Fixed deltas; decreases are larger than increases for the angles, the
# camera distance and the projection scale.
_DELTAS = {
    CubeAction.INCREASE_ALPHA: ('alpha', 2.5),
    CubeAction.DECREASE_ALPHA: ('alpha', -5.0),
    CubeAction.INCREASE_BETA: ('beta', 2.5),
    CubeAction.DECREASE_BETA: ('beta', -5.0),
    CubeAction.INCREASE_GAMMA: ('gamma', 2.5),
    CubeAction.DECREASE_GAMMA: ('gamma', -5.0),
    CubeAction.INCREASE_DISTANCE_FROM_CAMERA: ('distance_from_camera', 1.5),
    CubeAction.DECREASE_DISTANCE_FROM_CAMERA: ('distance_from_camera', -1.0),
    CubeAction.INCREASE_PROJECTION_SCALE: ('projection_scale', 1.5),
    CubeAction.DECREASE_PROJECTION_SCALE: ('projection_scale', -1.0),
    CubeAction.INCREASE_RESOLUTION_STEP: ('resolution_step', 0.1),
    CubeAction.DECREASE_RESOLUTION_STEP: ('resolution_step', -0.1),
}

DEFAULT_KEY_BINDINGS = MappingProxyType({
    'a': CubeAction.TOGGLE_AUTO_ALPHA,
    'e': CubeAction.INCREASE_ALPHA,
    'r': CubeAction.DECREASE_ALPHA,

    'b': CubeAction.TOGGLE_AUTO_BETA,
    'd': CubeAction.INCREASE_BETA,
    'f': CubeAction.DECREASE_BETA,

    'g': CubeAction.TOGGLE_AUTO_GAMMA,
    'c': CubeAction.INCREASE_GAMMA,
    'v': CubeAction.DECREASE_GAMMA,

    'u': CubeAction.INCREASE_DISTANCE_FROM_CAMERA,
    'j': CubeAction.DECREASE_DISTANCE_FROM_CAMERA,

    'i': CubeAction.INCREASE_PROJECTION_SCALE,
    'k': CubeAction.DECREASE_PROJECTION_SCALE,

    'o': CubeAction.INCREASE_RESOLUTION_STEP,
    'l': CubeAction.DECREASE_RESOLUTION_STEP,

    'z': CubeAction.RESET,
    'q': CubeAction.QUIT,
})


def key_to_action(key, bindings=DEFAULT_KEY_BINDINGS) -> Optional[CubeAction]:
    """
    Look up the action bound to a key.

    key may be a one-character string or an integer key code as returned by
    curses getch(); -1 (no key) and unbound keys give None.
    """
    if isinstance(key, int):
        if key < 0:
            return None
        try:
            key = chr(key)
        except (ValueError, OverflowError):
            return None
    return bindings.get(key)


def apply_action(params: RenderParameters, action: CubeAction) -> LoopControl:
    """Fold one action into params and tell the caller how to continue."""
    if action is CubeAction.QUIT:
        logger.debug("quit requested")
        return LoopControl.STOP

    if action is CubeAction.RESET:
        params.reset()
        logger.debug("parameters reset to defaults")
        return LoopControl.RESET

    if action in _TOGGLES:
        name = _TOGGLES[action]
        setattr(params, name, 1.0 - getattr(params, name))
    else:
        name, delta = _DELTAS[action]
        value = getattr(params, name) + delta
        if name == 'resolution_step':
            clamped = clamp_resolution_step(value)
            if clamped != value:
                logger.info("resolution step %.2f clamped to %.2f", value, clamped)
            value = clamped
        setattr(params, name, value)

    logger.debug("%s -> %s = %.2f", action.name, name, getattr(params, name))
    return LoopControl.CONTINUE
