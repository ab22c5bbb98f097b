# MIT License (see LICENSE)
"""
Core physics components.

This subpackage provides:
    - Disc model: aspect ratio and surface density power laws.
    - Timescales: Type I wave, eccentricity and semimajor-axis timescales.
    - Planet trap at the inner disc edge.
    - The Type I migration force and its frame reduction.
    - Host pieces: orbital elements, point-mass gravity, integrators.

Typical usage:
    from disc_migration.core import MigrationForce, migration_acceleration

    force = MigrationForce(params={"alpha": 1.0, ...})
    acc = migration_acceleration(G, force, planet, star)
"""
from .disc import aspect_ratio, surface_density
from .timescales import (
    angular_frequency,
    wave_timescale,
    eccentricity_damping_timescale,
    torque_reversal_factor,
    semi_major_axis_damping_timescale,
    disc_timescales,
    DiscTimescales,
)
from .trap import trap_factor
from .orbit import particle_to_orbit, orbit_to_particle
from .frames import com_force, center_of_mass, com_of_pair
from .migration import (
    MigrationForce,
    migration_acceleration,
    apply_type_I_migration,
)
from .forces import apply_gravity_pairwise
from .integrators import rk4_step, leapfrog_step

__all__ = [
    # Disc
    "aspect_ratio",
    "surface_density",
    # Timescales
    "angular_frequency",
    "wave_timescale",
    "eccentricity_damping_timescale",
    "torque_reversal_factor",
    "semi_major_axis_damping_timescale",
    "disc_timescales",
    "DiscTimescales",
    # Trap
    "trap_factor",
    # Orbits and frames
    "particle_to_orbit",
    "orbit_to_particle",
    "com_force",
    "center_of_mass",
    "com_of_pair",
    # Migration
    "MigrationForce",
    "migration_acceleration",
    "apply_type_I_migration",
    # Host
    "apply_gravity_pairwise",
    "rk4_step",
    "leapfrog_step",
]
