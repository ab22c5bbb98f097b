# MIT License (see LICENSE)
"""
Reference-frame reduction for orbit-based forces.

An orbit-based force is written for a single particle and the body it
orbits. ``com_force`` decides, for a chosen coordinate system, which body
each particle is measured against, calls the per-particle function and
accumulates the result into ``particle.acc``:

- Jacobi: particle i orbits the centre of mass of particles 0..i-1. The
  back-reaction -(m_i/M_interior) a is shared by all interior particles,
  which keeps the total momentum unchanged.
- Barycentric: every particle orbits the system centre of mass. Particle 0
  (the central star) is not forced and no back-reaction is applied.
- Particle: every particle orbits one reference particle, flagged with the
  parameter ``reference_name``. The reference receives -(m_i/m_ref) a.

The per-particle function never sees the frame choice.
"""
from __future__ import annotations
import logging
from typing import Any, Callable, Sequence

import numpy as np

from ..errors import ConfigurationError, MigrationError
from ..params import get_param
from ..types import Coordinates, Particle
from ..util import zeros3

logger = logging.getLogger(__name__)

# (G, force, particle, source) -> acceleration
ParticleForce = Callable[[float, Any, Particle, Particle], np.ndarray]


def com_of_pair(a: Particle, b: Particle) -> Particle:
    """Centre of mass of two particles as a new (parameterless) particle."""
    m = a.m + b.m
    if m > 0.0:
        position = (a.m * a.position + b.m * b.position) / m
        velocity = (a.m * a.velocity + b.m * b.velocity) / m
    else:
        position, velocity = a.position.copy(), a.velocity.copy()
    return Particle(m=m, position=position, velocity=velocity)


def center_of_mass(particles: Sequence[Particle]) -> Particle:
    """Centre of mass of all particles."""
    com = Particle(m=0.0)
    for p in particles:
        com = com_of_pair(com, p)
    return com


def find_reference(particles: Sequence[Particle], reference_name: str) -> int:
    """
    Index of the first particle whose ``reference_name`` parameter is set.

    Raises:
        ConfigurationError: If no particle carries the parameter.
    """
    for i, p in enumerate(particles):
        if get_param(p, reference_name):
            return i
    raise ConfigurationError(
        f"Particle coordinates need one particle with the '{reference_name}' parameter set"
    )


def _evaluate(
    calculate_force: ParticleForce,
    G: float,
    force: Any,
    particles: Sequence[Particle],
    i: int,
    source: Particle,
) -> np.ndarray:
    try:
        return calculate_force(G, force, particles[i], source)
    except MigrationError as err:
        logger.error(f"Force evaluation failed for particle {i}: {err}")
        raise


def com_force(
    G: float,
    force: Any,
    coordinates: Coordinates,
    particles: Sequence[Particle],
    calculate_force: ParticleForce,
    back_reactions_inclusive: bool = True,
    reference_name: str = "primary",
) -> None:
    """
    Apply an orbit-based force to all particles in the given frame.

    Args:
        G: Gravitational constant.
        force: Force configuration passed through to calculate_force.
        coordinates: Frame in which each particle's source body is chosen.
        particles: All particles; accelerations are added to ``p.acc``.
        calculate_force: Per-particle acceleration function.
        back_reactions_inclusive: Apply reactions to the source bodies.
        reference_name: Particle parameter marking the reference body for
                        PARTICLE coordinates.

    Note:
        Modifies particle.acc in-place.
    """
    n = len(particles)
    if n < 2:
        return

    if coordinates is Coordinates.JACOBI:
        com = Particle(m=particles[0].m,
                       position=particles[0].position.copy(),
                       velocity=particles[0].velocity.copy())
        for i in range(1, n):
            p = particles[i]
            a = _evaluate(calculate_force, G, force, particles, i, com)
            p.acc += a
            if back_reactions_inclusive and com.m > 0.0:
                ratio = p.m / com.m
                for j in range(i):
                    particles[j].acc -= ratio * a
            com = com_of_pair(com, p)

    elif coordinates is Coordinates.BARYCENTRIC:
        com = center_of_mass(particles)
        for i in range(1, n):
            particles[i].acc += _evaluate(calculate_force, G, force, particles, i, com)

    elif coordinates is Coordinates.PARTICLE:
        ref_index = find_reference(particles, reference_name)
        ref = particles[ref_index]
        reaction = zeros3()
        for i in range(n):
            if i == ref_index:
                continue
            p = particles[i]
            a = _evaluate(calculate_force, G, force, particles, i, ref)
            p.acc += a
            if back_reactions_inclusive and ref.m > 0.0:
                reaction -= (p.m / ref.m) * a
        ref.acc += reaction

    else:
        raise ConfigurationError(f"Unknown coordinates: {coordinates!r}")
