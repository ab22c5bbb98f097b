# MIT License (see LICENSE)
"""
Utilities for calculating physical invariants and conserved quantities.

Used for verifying simulation correctness. Without migration forces the
total energy, momentum and angular momentum of an N-body system are
conserved (within integration error). Migration removes energy and angular
momentum from the planets but, with back-reactions, never linear momentum.
"""
from __future__ import annotations
import numpy as np

from ..types import Particle
from ..util import norm


def total_energy(particles: list[Particle], G: float) -> float:
    """
    Total kinetic plus gravitational potential energy.

    E = Σ 0.5 m v² - Σ_{i<j} G m_i m_j / r_ij
    """
    ke = 0.0
    for p in particles:
        ke += 0.5 * p.m * float(np.dot(p.velocity, p.velocity))
    pe = 0.0
    n = len(particles)
    for i in range(n):
        for j in range(i + 1, n):
            d = norm(particles[j].position - particles[i].position)
            if d > 0.0:
                pe -= G * particles[i].m * particles[j].m / d
    return ke + pe


def linear_momentum(particles: list[Particle]) -> np.ndarray:
    """
    Total linear momentum P = Σ m v.

    Returns:
        Momentum vector [Px, Py, Pz].
    """
    P = np.zeros(3, dtype=np.float64)
    for p in particles:
        P += p.m * p.velocity
    return P


def angular_momentum(particles: list[Particle]) -> np.ndarray:
    """Total angular momentum L = Σ m r × v about the origin."""
    L = np.zeros(3, dtype=np.float64)
    for p in particles:
        L += p.m * np.cross(p.position, p.velocity)
    return L


def momentum_rate(particles: list[Particle]) -> np.ndarray:
    """Σ m a over the accumulated accelerations; zero for internal forces."""
    dP = np.zeros(3, dtype=np.float64)
    for p in particles:
        dP += p.m * p.acc
    return dP
