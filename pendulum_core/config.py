#!/usr/bin/env python3
"""
Immutable simulation configuration.

A SimConfig is built once at startup (from the command line or in tests) and
passed explicitly into Simulation and Pendulum construction. All validation
happens here; an invalid value never reaches the integrator.
"""
from dataclasses import dataclass, replace
from typing import Optional

from . import constants
from .data_models import PendulumParams
from .utils import require_finite, require_int, require_optional_int, require_positive


@dataclass(frozen=True)
class SimConfig:
    """
    Tunable constants of one simulation run.

    Fields:
    - frame_rate: physics ticks per second
    - substeps_per_frame: RK4 subdivisions of each tick
    - trail_capacity: maximum points kept per trail (0 disables trails)
    - length1, length2, mass1, mass2, gravity: physical parameters shared by all pendulums
    - max_pendulums: optional cap for create_pendulum (None = unbounded)
    - max_ticks_per_update: cap on catch-up ticks per rendered frame
    - initial_theta1, initial_theta2: angles of the default pendulum
    - show_trails: trail visibility at startup
    """
    frame_rate: int = constants.FRAME_RATE
    substeps_per_frame: int = constants.SUBSTEPS_PER_FRAME
    trail_capacity: int = constants.TRAIL_CAPACITY
    length1: float = constants.DEFAULT_LENGTH
    length2: float = constants.DEFAULT_LENGTH
    mass1: float = constants.DEFAULT_MASS
    mass2: float = constants.DEFAULT_MASS
    gravity: float = constants.GRAVITY
    max_pendulums: Optional[int] = None
    max_ticks_per_update: int = constants.MAX_TICKS_PER_UPDATE
    initial_theta1: float = constants.DEFAULT_THETA
    initial_theta2: float = constants.DEFAULT_THETA
    show_trails: bool = False

    def __post_init__(self):
        def set_(name, val):
            object.__setattr__(self, name, val)

        set_("frame_rate", require_int("frame_rate", self.frame_rate, 1))
        set_("substeps_per_frame", require_int("substeps_per_frame", self.substeps_per_frame, 1))
        set_("trail_capacity", require_int("trail_capacity", self.trail_capacity, 0))
        set_("max_pendulums", require_optional_int("max_pendulums", self.max_pendulums, 1))
        set_("max_ticks_per_update", require_int("max_ticks_per_update", self.max_ticks_per_update, 1))
        for name in ("length1", "length2", "mass1", "mass2"):
            set_(name, require_positive(name, getattr(self, name)))
        for name in ("gravity", "initial_theta1", "initial_theta2"):
            set_(name, require_finite(name, getattr(self, name)))
        set_("show_trails", bool(self.show_trails))

    @property
    def tick_dt(self) -> float:
        """Simulated seconds per tick."""
        return 1.0 / self.frame_rate

    @property
    def substep_dt(self) -> float:
        return self.tick_dt / self.substeps_per_frame

    @property
    def params(self) -> PendulumParams:
        return PendulumParams(
            length1=self.length1,
            length2=self.length2,
            mass1=self.mass1,
            mass2=self.mass2,
            gravity=self.gravity,
        )

    def replace(self, **changes) -> "SimConfig":
        """Return a validated copy with the given fields changed."""
        return replace(self, **changes)
