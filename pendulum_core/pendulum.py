#!/usr/bin/env python3
"""
A single double pendulum: its physical state, its trail and its color.

A Pendulum exclusively owns its PendulumState and TrailBuffer. Nothing else holds
a mutable reference to either; the renderer only ever sees PendulumSnapshot
values built by snapshot().
"""
import random

from .config import SimConfig
from .data_models import Color, PendulumSnapshot, PendulumState
from .physics import bob_positions, integrate
from .trail import TrailBuffer
from .utils import require_int
from . import constants


def default_state(config: SimConfig) -> PendulumState:
    """The fixed starting configuration: both rods at the configured angles, at rest."""
    return PendulumState(
        theta1=config.initial_theta1,
        omega1=0.0,
        theta2=config.initial_theta2,
        omega2=0.0,
        params=config.params,
    )


def random_state(config: SimConfig, rng: random.Random) -> PendulumState:
    """
    A starting configuration with both angles drawn uniformly from [-pi, pi).

    Velocities start at zero and the physical parameters come from `config`;
    only the angles are randomized.
    """
    return PendulumState(
        theta1=rng.uniform(constants.RANDOM_THETA_MIN, constants.RANDOM_THETA_MAX),
        omega1=0.0,
        theta2=rng.uniform(constants.RANDOM_THETA_MIN, constants.RANDOM_THETA_MAX),
        omega2=0.0,
        params=config.params,
    )


class Pendulum:
    """
    One simulated double pendulum.

    Args:
        state: initial PendulumState
        color: RGB display color, fixed for the life of the pendulum
        trail_capacity: maximum number of trail points kept
        substeps: RK4 steps per tick
        trail_visible: initial visibility of the trail
    """

    def __init__(self, state: PendulumState, color: Color, trail_capacity: int,
                 substeps: int = constants.SUBSTEPS_PER_FRAME, trail_visible: bool = True):
        self._state = state
        self._color = tuple(color)
        self._substeps = require_int("substeps_per_frame", substeps, 1)
        self._trail = TrailBuffer(trail_capacity, visible=trail_visible)

    @property
    def state(self) -> PendulumState:
        return self._state

    @property
    def color(self) -> Color:
        return self._color

    @property
    def trail(self) -> TrailBuffer:
        return self._trail

    def tick(self, dt: float) -> None:
        """Advance by `dt` seconds and record the new bob 2 position in the trail."""
        self._state = integrate(self._state, dt, self._substeps)
        _, bob2 = bob_positions(self._state)
        self._trail.push(bob2)

    def reset_state(self, state: PendulumState) -> None:
        """Replace the physical state and forget the trail."""
        self._state = state
        self._trail.clear()

    def snapshot(self) -> PendulumSnapshot:
        bob1, bob2 = bob_positions(self._state)
        return PendulumSnapshot(
            state=self._state,
            color=self._color,
            bob1=bob1,
            bob2=bob2,
            trail=self._trail.contiguous_view(),
        )
