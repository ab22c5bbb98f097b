# MIT License (see LICENSE)
"""
Numerical integrators for N-body systems.

This module provides time-stepping methods to advance the simulation state.
Both integrators solve
    dx/dt = v,         dv/dt = a(x, v, t)

for all particles at once. Migration forces depend on velocity, so the
acceleration callback is re-evaluated wherever a scheme needs it rather
than held fixed over the step.

Available integrators:
- rk4_step: Fixed-step 4th-order Runge-Kutta (high accuracy)
- leapfrog_step: Kick-drift-kick leapfrog (symplectic for conservative forces)

Reference:
    Runge-Kutta methods: https://en.wikipedia.org/wiki/Runge-Kutta_methods
    Leapfrog: https://en.wikipedia.org/wiki/Leapfrog_integration
"""
from __future__ import annotations
from typing import Callable

import numpy as np

from ..types import Particle

# Fills particle.acc for the current particle state.
AccelerationFn = Callable[[list[Particle]], None]


def _state(particles: list[Particle]) -> tuple[np.ndarray, np.ndarray]:
    x = np.array([p.position for p in particles], dtype=np.float64)
    v = np.array([p.velocity for p in particles], dtype=np.float64)
    return x, v


def _set_state(particles: list[Particle], x: np.ndarray, v: np.ndarray) -> None:
    for i, p in enumerate(particles):
        p.position = x[i].copy()
        p.velocity = v[i].copy()


def _accelerations(particles: list[Particle], accel_fn: AccelerationFn) -> np.ndarray:
    accel_fn(particles)
    return np.array([p.acc for p in particles], dtype=np.float64)


def rk4_step(particles: list[Particle], dt: float, accel_fn: AccelerationFn) -> None:
    """
    Advance all particles by dt using classical 4th-order Runge-Kutta.

    RK4 evaluates derivatives at 4 points within the timestep and combines
    them with weights (1, 2, 2, 1)/6 to achieve O(dt⁵) local error.

    Args:
        particles: Particles to integrate (modified in-place).
        dt: Timestep.
        accel_fn: Callback that fills ``p.acc`` for the current state.

    Reference:
        https://en.wikipedia.org/wiki/Runge-Kutta_methods#The_Runge-Kutta_method
    """
    x0, v0 = _state(particles)

    def f(x, v):
        """Evaluate derivatives at an arbitrary state."""
        _set_state(particles, x, v)
        return v, _accelerations(particles, accel_fn)

    k1 = f(x0, v0)
    k2 = f(x0 + 0.5 * dt * k1[0], v0 + 0.5 * dt * k1[1])
    k3 = f(x0 + 0.5 * dt * k2[0], v0 + 0.5 * dt * k2[1])
    k4 = f(x0 + dt * k3[0], v0 + dt * k3[1])

    x1 = x0 + (dt / 6.0) * (k1[0] + 2 * k2[0] + 2 * k3[0] + k4[0])
    v1 = v0 + (dt / 6.0) * (k1[1] + 2 * k2[1] + 2 * k3[1] + k4[1])
    _set_state(particles, x1, v1)


def leapfrog_step(particles: list[Particle], dt: float, accel_fn: AccelerationFn) -> None:
    """
    Advance all particles using kick-drift-kick leapfrog.

        v(t+dt/2) = v(t) + a(t) dt/2
        x(t+dt)   = x(t) + v(t+dt/2) dt
        v(t+dt)   = v(t+dt/2) + a(t+dt) dt/2

    The closing kick evaluates velocity-dependent forces at the half-step
    velocity, which is first-order accurate for those terms. Use rk4_step
    when damping timescales are short compared to the orbital period.

    Reference:
        https://en.wikipedia.org/wiki/Leapfrog_integration
    """
    x0, v0 = _state(particles)
    a0 = _accelerations(particles, accel_fn)

    v_half = v0 + 0.5 * dt * a0
    x1 = x0 + dt * v_half
    _set_state(particles, x1, v_half)

    a1 = _accelerations(particles, accel_fn)
    _set_state(particles, x1, v_half + 0.5 * dt * a1)
