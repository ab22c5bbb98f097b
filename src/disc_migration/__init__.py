# MIT License (see LICENSE)
"""
disc_migration - Type I planet-disc migration for N-body simulations.

This package provides an acceleration that makes a planet's semimajor axis,
eccentricity and inclination evolve on the timescales set by a power-law
gaseous disc (Tanaka & Ward 2004), including a planet trap at the inner disc
edge, plus a small host N-body simulation to apply it in.

Main entry points:
    - MigrationForce: Force configuration (disc parameters, coordinates).
    - migration_acceleration: Per-particle acceleration.
    - Simulation: N-body container with gravity, integrators and forces.
    - Particle: Point mass with state and named parameters.

Submodules:
    - core: Disc model, timescales, planet trap, migration force, frames.
    - io: JSON setup files.

Example:
    from disc_migration import Simulation, Particle, MigrationForce

    sim = Simulation(G=1.0, dt=1e-2)
    sim.add(Particle(m=1.0))
    sim.add_orbiting(m=1e-5, a=1.0)
    sim.add_force(MigrationForce(params={
        "inner_disc_edge": 0.1, "disc_edge_width": 0.05,
        "alpha": 1.0, "initial_disc_surface_density": 1e-3,
    }))
    sim.integrate(10.0)
"""
from .core.migration import MigrationForce, migration_acceleration
from .errors import MigrationError, DomainError, ConfigurationError, OrbitError
from .simulation import Simulation
from .types import Coordinates, Orbit, Particle

__all__ = [
    # Simulation
    "Simulation",
    "Particle",
    "Orbit",
    "Coordinates",
    # Migration
    "MigrationForce",
    "migration_acceleration",
    # Errors
    "MigrationError",
    "DomainError",
    "ConfigurationError",
    "OrbitError",
]
