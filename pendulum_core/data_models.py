#!/usr/bin/env python3
"""
Data models for the Double Pendulum simulator.

This module defines the value types shared between physics, the simulation and
rendering.

Units and usage
- Angles are in radians measured from the downward vertical, angular velocities
  in rad/s. Angles are never wrapped.
- Lengths are in meters [m], masses in kg, gravity in m/s^2.
- World positions are (x, y) in meters relative to the pivot, with y growing
  downward like screen space.
- Every type here is immutable; the integrator returns new states rather than
  mutating old ones.
"""
from dataclasses import dataclass, field, replace
from typing import Sequence, Tuple

from .utils import require_finite, require_positive

Point = Tuple[float, float]
Color = Tuple[int, int, int]


@dataclass(frozen=True)
class PendulumParams:
    """
    Fixed physical parameters of one double pendulum.

    Fields:
    - length1, length2: rod lengths in meters (> 0)
    - mass1, mass2: bob masses in kilograms (> 0)
    - gravity: gravitational acceleration in m/s^2 (finite)
    """
    length1: float
    length2: float
    mass1: float
    mass2: float
    gravity: float

    def __post_init__(self):
        for name in ("length1", "length2", "mass1", "mass2"):
            object.__setattr__(self, name, require_positive(name, getattr(self, name)))
        object.__setattr__(self, "gravity", require_finite("gravity", self.gravity))

    @property
    def reach(self) -> float:
        """Distance from the pivot to bob 2 when both rods are aligned."""
        return self.length1 + self.length2


@dataclass(frozen=True)
class PendulumState:
    """
    Dynamic configuration of one double pendulum plus its parameters.

    Fields:
    - theta1, theta2: rod angles from the vertical (rad)
    - omega1, omega2: angular velocities (rad/s)
    - params: the PendulumParams this state evolves under
    """
    theta1: float
    omega1: float
    theta2: float
    omega2: float
    params: PendulumParams

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.theta1, self.omega1, self.theta2, self.omega2)

    def with_values(self, values: Sequence[float]) -> "PendulumState":
        th1, w1, th2, w2 = values
        return replace(self, theta1=th1, omega1=w1, theta2=th2, omega2=w2)


@dataclass(frozen=True)
class PendulumSnapshot:
    """
    Read-only view of one pendulum handed to the renderer once per frame.

    `trail` is a TrailView over the pendulum's trail buffer; later ticks and
    capacity changes do not alter it.
    """
    state: PendulumState
    color: Color
    bob1: Point
    bob2: Point
    trail: Sequence[Point] = field(default=())


@dataclass(frozen=True)
class SimulationSnapshot:
    """Everything the renderer needs for one frame."""
    pendulums: Tuple[PendulumSnapshot, ...]
    trails_visible: bool

    def __len__(self) -> int:
        return len(self.pendulums)
