#!/usr/bin/env python3
"""
Core Physics Engine for the Double Pendulum simulator

Responsibilities
- Evaluate the double-pendulum equations of motion as a first-order ODE system in
  (theta1, omega1, theta2, omega2).
- Advance a PendulumState using a fourth-order Runge-Kutta (RK4) time integrator,
  subdivided into a fixed number of substeps per tick.
- Provide small helpers for bob positions and total mechanical energy.

Units and conventions
- Angles are in radians from the downward vertical; positive angles swing toward +x.
- World positions are in meters relative to the pivot, y grows downward.
- Time steps are in seconds [s].

Numerical notes
- The equations come from the Lagrangian of two point masses on massless rigid rods.
  The shared denominator 2*m1 + m2 - m2*cos(2*delta) is >= 2*m1 > 0 for positive
  masses, so the system has no singularity for finite inputs.
- Fixed step sizes only; no adaptive stepping.
- Energy: RK4 is not symplectic; total energy will slowly drift over long runs.
  With the default 4 substeps at 240 Hz the drift is far below anything visible.

Threading
- This module is pure compute and stateless. Every function returns new values.
"""

import math
from typing import Tuple

from .data_models import PendulumParams, PendulumState, Point

Vector4 = Tuple[float, float, float, float]


def derivatives(values: Vector4, params: PendulumParams) -> Vector4:
    """
    Compute the time derivatives of (theta1, omega1, theta2, omega2).

    With delta = theta1 - theta2 and D = 2*m1 + m2 - m2*cos(2*delta):

        alpha1 = (-g(2m1 + m2) sin th1 - m2 g sin(th1 - 2 th2)
                  - 2 sin(delta) m2 (w2^2 l2 + w1^2 l1 cos(delta))) / (l1 D)
        alpha2 = (2 sin(delta) (w1^2 l1 (m1 + m2) + g (m1 + m2) cos th1
                  + w2^2 l2 m2 cos(delta))) / (l2 D)

    Args:
        values: (theta1, omega1, theta2, omega2)
        params: physical parameters of the pendulum

    Returns:
        (omega1, alpha1, omega2, alpha2)
    """
    th1, w1, th2, w2 = values
    m1, m2 = params.mass1, params.mass2
    l1, l2 = params.length1, params.length2
    g = params.gravity

    delta = th1 - th2
    sin_delta = math.sin(delta)
    cos_delta = math.cos(delta)
    denom = 2.0 * m1 + m2 - m2 * math.cos(2.0 * delta)

    num1 = -g * (2.0 * m1 + m2) * math.sin(th1)
    num1 -= m2 * g * math.sin(th1 - 2.0 * th2)
    num1 -= 2.0 * sin_delta * m2 * (w2 * w2 * l2 + w1 * w1 * l1 * cos_delta)
    alpha1 = num1 / (l1 * denom)

    num2 = 2.0 * sin_delta * (
        w1 * w1 * l1 * (m1 + m2)
        + g * (m1 + m2) * math.cos(th1)
        + w2 * w2 * l2 * m2 * cos_delta
    )
    alpha2 = num2 / (l2 * denom)

    return (w1, alpha1, w2, alpha2)


def _offset(base: Vector4, slope: Vector4, h: float) -> Vector4:
    return (
        base[0] + h * slope[0],
        base[1] + h * slope[1],
        base[2] + h * slope[2],
        base[3] + h * slope[3],
    )


def rk4_step(state: PendulumState, dt: float) -> PendulumState:
    """
    Perform one Runge-Kutta 4th order integration step.

    Workflow:
    1) k1 at t
    2) k2 at t + dt/2 using k1
    3) k3 at t + dt/2 using k2
    4) k4 at t + dt using k3
    Combine (k1 + 2*k2 + 2*k3 + k4)/6.

    Args:
        state: state to advance (not modified)
        dt: step size in seconds (> 0)

    Returns:
        The advanced PendulumState.
    """
    params = state.params
    y0 = state.as_tuple()

    k1 = derivatives(y0, params)
    k2 = derivatives(_offset(y0, k1, dt * 0.5), params)
    k3 = derivatives(_offset(y0, k2, dt * 0.5), params)
    k4 = derivatives(_offset(y0, k3, dt), params)

    sixth = dt / 6.0
    return state.with_values(
        tuple(y0[i] + sixth * (k1[i] + 2.0 * k2[i] + 2.0 * k3[i] + k4[i]) for i in range(4))
    )


def integrate(state: PendulumState, dt: float, substeps: int) -> PendulumState:
    """Advance `state` by `dt` seconds using `substeps` RK4 steps of dt/substeps."""
    h = dt / substeps
    for _ in range(substeps):
        state = rk4_step(state, h)
    return state


def bob_positions(state: PendulumState) -> Tuple[Point, Point]:
    """
    Compute bob positions in meters relative to the pivot at (0, 0).

    Bob 1 hangs from the pivot on rod 1; bob 2 hangs from bob 1 on rod 2.

    Returns:
        ((x1, y1), (x2, y2))
    """
    l1, l2 = state.params.length1, state.params.length2
    x1 = l1 * math.sin(state.theta1)
    y1 = l1 * math.cos(state.theta1)
    x2 = x1 + l2 * math.sin(state.theta2)
    y2 = y1 + l2 * math.cos(state.theta2)
    return (x1, y1), (x2, y2)


def total_energy(state: PendulumState) -> float:
    """
    Total mechanical energy (kinetic + potential) in joules.

    Potential energy is measured from the pivot height, so a pendulum hanging at
    rest has energy -g * (m1*l1 + m2*(l1 + l2)).
    """
    p = state.params
    th1, w1, th2, w2 = state.as_tuple()

    v1x = p.length1 * w1 * math.cos(th1)
    v1y = -p.length1 * w1 * math.sin(th1)
    v2x = v1x + p.length2 * w2 * math.cos(th2)
    v2y = v1y - p.length2 * w2 * math.sin(th2)
    kinetic = 0.5 * p.mass1 * (v1x * v1x + v1y * v1y) + 0.5 * p.mass2 * (v2x * v2x + v2y * v2y)

    # heights above the pivot
    h1 = -p.length1 * math.cos(th1)
    h2 = h1 - p.length2 * math.cos(th2)
    potential = p.gravity * (p.mass1 * h1 + p.mass2 * h2)
    return kinetic + potential
