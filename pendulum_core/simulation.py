#!/usr/bin/env python3
"""
Simulation controller: owns every pendulum and the global trail toggle.

Control flow per rendered frame
1) The application translates key presses into Command values.
2) update(elapsed, commands) applies the commands in order, then runs as many
   fixed-length ticks as the elapsed wall time allows.
3) snapshot() hands the renderer an immutable view of every pendulum.

Pendulums are independent: each tick advances them one after another with no
shared mutable state, so the update order never changes any trajectory.

Trail policy: trails are always appended, on every tick, whether or not they are
visible. toggle_trails() only flips the flag the renderer checks.
"""
import enum
import logging
import random
from typing import Iterable, List, Optional

from .config import SimConfig
from .data_models import Color, PendulumState, SimulationSnapshot
from .pendulum import Pendulum, default_state, random_state
from .utils import require_int
from . import constants

logger = logging.getLogger(__name__)


class Command(enum.Enum):
    """User commands, one per key binding."""
    CREATE = "create"
    RESET = "reset"
    TOGGLE_TRAILS = "toggle_trails"
    QUIT = "quit"


class Simulation:
    """
    Ordered collection of pendulums plus global settings.

    Args:
        config: immutable run configuration (defaults to SimConfig())
        rng: random source for create_pendulum; defaults to random.Random(seed)
        seed: seed for the default random source
        count: pendulums present at construction. The first is the default
            configuration, the rest are created as by create_pendulum().
    """

    def __init__(self, config: Optional[SimConfig] = None, rng: Optional[random.Random] = None,
                 seed=None, count: int = 1):
        self.config = config if config is not None else SimConfig()
        self.rng = rng if rng is not None else random.Random(seed)
        self._pendulums: List[Pendulum] = []
        self._trails_visible = self.config.show_trails
        self._trail_capacity = self.config.trail_capacity
        self._color_index = 0
        self._accumulator = 0.0
        self.tick_count = 0

        count = require_int("count", count, 0)
        if count:
            self._append(default_state(self.config))
        for _ in range(count - 1):
            if not self.create_pendulum():
                break

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._pendulums)

    @property
    def pendulum_count(self) -> int:
        return len(self._pendulums)

    @property
    def trails_visible(self) -> bool:
        return self._trails_visible

    @property
    def trail_capacity(self) -> int:
        return self._trail_capacity

    def snapshot(self) -> SimulationSnapshot:
        """Immutable per-frame view of all pendulums, their trails and colors."""
        return SimulationSnapshot(
            pendulums=tuple(p.snapshot() for p in self._pendulums),
            trails_visible=self._trails_visible,
        )

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_pendulum(self) -> bool:
        """
        Append a pendulum with random initial angles.

        Returns False without changing anything when max_pendulums is reached.
        """
        cap = self.config.max_pendulums
        if cap is not None and len(self._pendulums) >= cap:
            logger.debug("pendulum cap of %d reached; create ignored", cap)
            return False
        self._append(random_state(self.config, self.rng))
        return True

    def reset(self) -> None:
        """Go back to exactly one pendulum in the default configuration."""
        self._pendulums = []
        self._color_index = 0
        self._append(default_state(self.config))
        logger.debug("simulation reset")

    def toggle_trails(self) -> None:
        """Flip trail visibility; trail contents are left untouched."""
        self._trails_visible = not self._trails_visible
        for p in self._pendulums:
            p.trail.visible = self._trails_visible
        logger.debug("trails %s", "shown" if self._trails_visible else "hidden")

    def set_trail_capacity(self, capacity: int) -> None:
        """Resize every trail, now and for pendulums created later."""
        self._trail_capacity = require_int("trail_capacity", capacity, 0)
        for p in self._pendulums:
            p.trail.set_capacity(self._trail_capacity)

    def apply(self, command: Command) -> None:
        if command is Command.CREATE:
            self.create_pendulum()
        elif command is Command.RESET:
            self.reset()
        elif command is Command.TOGGLE_TRAILS:
            self.toggle_trails()
        # QUIT belongs to the application loop

    # ------------------------------------------------------------------
    # Time stepping
    # ------------------------------------------------------------------

    def tick(self, dt: Optional[float] = None) -> None:
        """Advance every pendulum by one tick of `dt` seconds (default 1/frame_rate)."""
        if dt is None:
            dt = self.config.tick_dt
        for p in self._pendulums:
            p.tick(dt)
        self.tick_count += 1

    def update(self, elapsed: float, commands: Iterable[Command] = ()) -> int:
        """
        Apply pending commands, then run the fixed ticks `elapsed` seconds call for.

        Leftover time below one tick is carried to the next call. At most
        max_ticks_per_update ticks run per call; any further backlog is dropped
        so a long stall does not freeze the next frames.

        Returns:
            Number of ticks run.
        """
        for command in commands:
            self.apply(command)

        if elapsed > 0:
            self._accumulator += elapsed
        tick_dt = self.config.tick_dt
        steps = int(self._accumulator / tick_dt)
        limit = self.config.max_ticks_per_update
        if steps > limit:
            logger.debug("dropping %d ticks of backlog", steps - limit)
            steps = limit
            self._accumulator = 0.0
        else:
            self._accumulator -= steps * tick_dt

        for _ in range(steps):
            self.tick(tick_dt)
        return steps

    # ------------------------------------------------------------------

    def _next_color(self) -> Color:
        color = constants.PALETTE[self._color_index % len(constants.PALETTE)]
        self._color_index += 1
        return color

    def _append(self, state: PendulumState) -> None:
        pendulum = Pendulum(
            state,
            self._next_color(),
            trail_capacity=self._trail_capacity,
            substeps=self.config.substeps_per_frame,
            trail_visible=self._trails_visible,
        )
        self._pendulums.append(pendulum)
        logger.debug("pendulum #%d created (theta1=%.3f, theta2=%.3f)",
                     len(self._pendulums), state.theta1, state.theta2)
