#!/usr/bin/env python3
"""
Shared constants for the Double Pendulum simulator (SI units unless stated otherwise).

Keeping defaults in one place helps ensure values are consistent across the
codebase and makes tuning easier. Nothing here is mutated at runtime; the values
only seed a SimConfig built once at startup.
"""
import math

# Physical defaults
GRAVITY = 9.8  # m/s^2
DEFAULT_LENGTH = 1.0  # m, both rods
DEFAULT_MASS = 1.0  # kg, both bobs
DEFAULT_THETA = 1.0  # rad from vertical, both rods of the default pendulum

# Physics controls
FRAME_RATE = 240  # physics ticks per second
SUBSTEPS_PER_FRAME = 4  # RK4 steps per tick
MAX_TICKS_PER_UPDATE = 32  # cap per rendered frame so a stall cannot snowball

# Trails
TRAIL_CAPACITY = 100  # points kept per pendulum

# Random initial angles are drawn from [RANDOM_THETA_MIN, RANDOM_THETA_MAX)
RANDOM_THETA_MIN = -math.pi
RANDOM_THETA_MAX = math.pi

# Rendering (viewport)
VIEW_WIDTH = 400
VIEW_HEIGHT = 400
MIN_VIEW_SIZE = (200, 200)
WINDOW_TITLE = "Double Pendulum"
BACKGROUND_COLOR = (26, 51, 77)
PIVOT_COLOR = (255, 255, 255)
ROD_COLOR = (255, 255, 255)
HUD_COLOR = (255, 255, 255)
PIVOT_RADIUS = 10  # px
BOB_RADIUS = 8  # px
ROD_WIDTH = 2  # px
VIEW_MARGIN = 0.9  # fraction of the half-window the full reach may occupy

# Pendulum colors, handed out in creation order
PALETTE = (
    (230, 90, 90),
    (90, 200, 120),
    (100, 149, 237),
    (255, 204, 0),
    (200, 120, 230),
    (80, 210, 210),
    (255, 150, 60),
    (235, 235, 235),
)

# Safety: avoid drawing outside reasonable integer pixel ranges
SAFE_COORD_LIMIT = 30000
