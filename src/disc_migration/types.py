# MIT License (see LICENSE)
"""
Core type definitions for the migration model.

Defines the fundamental data structures:
- Coordinates: reference-frame selector for orbit-based forces.
- Particle: point mass with 3D kinematic state and named parameters.
- Orbit: osculating elements of a particle relative to a reference body.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import numpy as np

from .util import f64


class Coordinates(str, Enum):
    """
    Frame in which orbital elements are measured.

    JACOBI: each particle relative to the centre of mass of all interior ones.
    BARYCENTRIC: each particle relative to the system centre of mass.
    PARTICLE: each particle relative to one reference particle ("primary").
    """
    JACOBI = "jacobi"
    BARYCENTRIC = "barycentric"
    PARTICLE = "particle"


@dataclass
class Particle:
    """
    A point mass with full kinematic state.

    Attributes:
        m: Mass in simulation units.
        position: Position [x, y, z].
        velocity: Velocity [vx, vy, vz].
        params: Named scalar parameters attached to this particle, e.g.
                ``tau_a``, ``tau_e``, ``tau_inc`` or ``primary``.
        acc: Accumulated acceleration (cleared each force evaluation).
        id: Unique identifier assigned by Simulation.add().

    Note:
        Position and velocity are converted to float64 numpy arrays on init.
    """
    m: float
    position: np.ndarray | tuple[float, float, float] = (0.0, 0.0, 0.0)
    velocity: np.ndarray | tuple[float, float, float] = (0.0, 0.0, 0.0)
    params: dict[str, Any] = field(default_factory=dict)

    # Runtime state (not user-specified)
    acc: np.ndarray = field(default_factory=lambda: np.zeros(3, dtype=np.float64))
    id: int = -1

    def __post_init__(self) -> None:
        """Convert position/velocity to float64 arrays for consistent numerics."""
        self.position = f64(self.position)
        self.velocity = f64(self.velocity)
        self.acc = f64(self.acc)
        if self.position.shape != (3,) or self.velocity.shape != (3,):
            raise ValueError(
                f"Particle position and velocity must have 3 components, "
                f"got {self.position.shape} and {self.velocity.shape}"
            )

    def clear_acceleration(self) -> None:
        """Reset accumulated acceleration to zero for the next evaluation."""
        self.acc[:] = 0.0

    def copy(self) -> "Particle":
        """Detached snapshot with the same state and a copy of params."""
        return Particle(
            m=self.m,
            position=self.position.copy(),
            velocity=self.velocity.copy(),
            params=dict(self.params),
            acc=self.acc.copy(),
            id=self.id,
        )


@dataclass(frozen=True)
class Orbit:
    """
    Osculating orbital elements.

    Attributes:
        a: Semimajor axis (negative for hyperbolic orbits).
        e: Eccentricity.
        inc: Inclination in radians, measured from the reference plane.
        d: Separation from the reference body.
        v: Relative speed.
        h: Specific angular momentum magnitude.
    """
    a: float
    e: float
    inc: float
    d: float = 0.0
    v: float = 0.0
    h: float = 0.0
