#!/usr/bin/env python3
"""
Double Pendulum application entry point and renderer/input coordination.

What this module does
- Parses the command line into a single immutable SimConfig.
- Runs the pygame loop: polls input, feeds key commands and elapsed time into the
  Simulation, then draws the frame from the Simulation's snapshot.

Controls
- C: add a pendulum with random starting angles
- R: reset to a single pendulum in the default configuration
- T: show/hide trails (trails keep recording while hidden; each fades from
  the background color at its oldest point to the pendulum color at its newest)
- Q or closing the window: quit

Running
1) Install dependencies: `pip install pygame`
2) Run this module: `python pendulum_sim.py [count] [show_trail]`
   e.g. `python pendulum_sim.py 5 true` starts with five pendulums and trails on.
"""

import argparse
import logging
import sys
from typing import List, Optional, Sequence, Tuple

import pygame
from pygame import gfxdraw

from pendulum_core import constants
from pendulum_core.camera import Camera2D
from pendulum_core.config import SimConfig
from pendulum_core.data_models import SimulationSnapshot
from pendulum_core.errors import InvalidConfigurationError
from pendulum_core.simulation import Command, Simulation

logger = logging.getLogger(__name__)

RENDER_FPS = 60

KEY_BINDINGS = {
    pygame.K_c: Command.CREATE,
    pygame.K_r: Command.RESET,
    pygame.K_t: Command.TOGGLE_TRAILS,
    pygame.K_q: Command.QUIT,
}

# ============================================================
# Command line
# ============================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Chaotic double pendulum simulator")
    parser.add_argument("count", nargs="?", type=int, default=1,
                        help="number of pendulums at startup (default: 1)")
    parser.add_argument("show_trail", nargs="?", default="false",
                        help="'true' to draw trails from the start")
    parser.add_argument("--trail-capacity", type=int, default=constants.TRAIL_CAPACITY,
                        help="points kept per trail")
    parser.add_argument("--substeps", type=int, default=constants.SUBSTEPS_PER_FRAME,
                        help="RK4 substeps per physics tick")
    parser.add_argument("--frame-rate", type=int, default=constants.FRAME_RATE,
                        help="physics ticks per second")
    parser.add_argument("--max-pendulums", type=int, default=None,
                        help="ignore C once this many pendulums exist")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for random starting angles")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def build_config(args: argparse.Namespace) -> SimConfig:
    """Turn parsed arguments into a validated SimConfig."""
    return SimConfig(
        frame_rate=args.frame_rate,
        substeps_per_frame=args.substeps,
        trail_capacity=args.trail_capacity,
        max_pendulums=args.max_pendulums,
        show_trails=args.show_trail == "true",
    )


def translate_key(key: int) -> Optional[Command]:
    return KEY_BINDINGS.get(key)

# ============================================================
# Pygame Renderer
# ============================================================

class PygameRenderer:
    """
    Pygame loop: polls keys, steps the simulation, draws pendulums, trails and HUD.
    """
    def __init__(self, sim: Simulation):
        self.sim = sim
        self.camera = Camera2D(reach=sim.config.params.reach)
        self.surface = None
        self.clock = None
        self.running = True

    def run(self):
        pygame.init()
        pygame.display.set_caption(constants.WINDOW_TITLE)
        self.surface = pygame.display.set_mode((constants.VIEW_WIDTH, constants.VIEW_HEIGHT),
                                               pygame.RESIZABLE)
        self.camera.set_viewport_size(constants.VIEW_WIDTH, constants.VIEW_HEIGHT)
        self.clock = pygame.time.Clock()
        logger.info("window %dx%d, %d pendulum(s)", constants.VIEW_WIDTH,
                    constants.VIEW_HEIGHT, len(self.sim))

        try:
            elapsed = 0.0
            while self.running:
                commands = self.handle_events()
                if not self.running:
                    break
                self.sim.update(elapsed, commands)
                self.draw(self.sim.snapshot())
                elapsed = self.clock.tick(RENDER_FPS) / 1000.0
        finally:
            pygame.quit()

    def handle_events(self) -> List[Command]:
        commands = []
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                w = max(event.w, constants.MIN_VIEW_SIZE[0])
                h = max(event.h, constants.MIN_VIEW_SIZE[1])
                self.surface = pygame.display.set_mode((w, h), pygame.RESIZABLE)
                self.camera.set_viewport_size(w, h)

            elif event.type == pygame.KEYDOWN:
                command = translate_key(event.key)
                if command is Command.QUIT:
                    self.running = False
                elif command is not None:
                    commands.append(command)
        return commands

    def draw(self, snapshot: SimulationSnapshot):
        surf = self.surface
        surf.fill(constants.BACKGROUND_COLOR)
        pivot = _safe_point(self.camera.world_to_screen((0.0, 0.0)))

        if snapshot.trails_visible:
            for p in snapshot.pendulums:
                if len(p.trail) > 1:
                    pts = [self.camera.world_to_screen(pt) for pt in p.trail]
                    draw_fading_trail(surf, p.color, pts)

        for p in snapshot.pendulums:
            bob1 = _safe_point(self.camera.world_to_screen(p.bob1))
            bob2 = _safe_point(self.camera.world_to_screen(p.bob2))
            if pivot is None or bob1 is None or bob2 is None:
                continue
            pygame.draw.lines(surf, constants.ROD_COLOR, False, [pivot, bob1, bob2],
                              constants.ROD_WIDTH)
            for bob in (bob1, bob2):
                gfxdraw.filled_circle(surf, bob[0], bob[1], constants.BOB_RADIUS, p.color)
                gfxdraw.aacircle(surf, bob[0], bob[1], constants.BOB_RADIUS, p.color)

        if pivot is not None:
            gfxdraw.filled_circle(surf, pivot[0], pivot[1], constants.PIVOT_RADIUS, constants.PIVOT_COLOR)
            gfxdraw.aacircle(surf, pivot[0], pivot[1], constants.PIVOT_RADIUS, constants.PIVOT_COLOR)

        # HUD text
        draw_text(surf, f"FPS: {round(self.clock.get_fps())}", 10, 10, constants.HUD_COLOR)
        draw_text(surf, f"Pendulums count: {len(snapshot)}", 10, 28, constants.HUD_COLOR)

        pygame.display.flip()

def fade_color(color, background, t: float) -> Tuple[int, int, int]:
    """Blend `background` (t=0) into `color` (t=1)."""
    t = max(0.0, min(1.0, t))
    return tuple(int(round(b + (c - b) * t)) for c, b in zip(color, background))

def draw_fading_trail(surface, color, pts):
    # oldest segment closest to the background, newest in full color
    n = len(pts) - 1
    for i in range(n):
        shade = fade_color(color, constants.BACKGROUND_COLOR, (i + 1) / n)
        pygame.draw.aaline(surface, shade, pts[i], pts[i + 1])

_cached_font = None

def draw_text(surface, text, x, y, color):
    global _cached_font
    if _cached_font is None:
        _cached_font = pygame.font.Font(None, 22)
    img = _cached_font.render(text, True, color)
    surface.blit(img, (x, y))

def _safe_point(pt: Tuple[int, int]) -> Optional[Tuple[int, int]]:
    x, y = int(pt[0]), int(pt[1])
    limit = constants.SAFE_COORD_LIMIT
    if -limit <= x <= limit and -limit <= y <= limit:
        return (x, y)
    return None

# ============================================================
# Application Entry
# ============================================================

def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        config = build_config(args)
        sim = Simulation(config, seed=args.seed, count=args.count)
    except InvalidConfigurationError as exc:
        parser.error(str(exc))

    PygameRenderer(sim).run()
    return 0

if __name__ == "__main__":
    sys.exit(main())
