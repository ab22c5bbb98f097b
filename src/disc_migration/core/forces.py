# MIT License (see LICENSE)
"""
Point-mass gravity for the host simulation.

All force functions add to particle.acc in-place and are designed to be
called during the acceleration accumulation phase of a simulation step.

Key concepts:
- Accelerations are accumulated in particle.acc before integration.
- Pairwise gravity is O(N²); fine for planetary systems of a few bodies.
"""
from __future__ import annotations

import numpy as np

from ..types import Particle
from ..util import norm2


def apply_gravity_pairwise(particles: list[Particle], G: float, eps: float = 0.0) -> None:
    """
    Apply Newtonian gravity between all pairs of particles.

    Implements a_i = G m_j r_ij / |r_ij|³ for every pair, using Newton's
    third law to evaluate each pair once.

    Args:
        particles: List of particles. Massless particles feel gravity but
                   exert none.
        G: Gravitational constant.
        eps: Plummer softening length. The effective distance is
             sqrt(r² + eps²).

    Note:
        Modifies particle.acc in-place.
    """
    n = len(particles)
    for i in range(n):
        pi = particles[i]
        for j in range(i + 1, n):
            pj = particles[j]
            if pi.m == 0.0 and pj.m == 0.0:
                continue

            r = pj.position - pi.position
            r2 = norm2(r) + eps * eps
            inv_r3 = 1.0 / (r2 * np.sqrt(r2))
            g = G * r * inv_r3

            pi.acc += pj.m * g
            pj.acc -= pi.m * g
