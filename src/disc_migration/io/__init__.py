# MIT License (see LICENSE)
"""
Input/Output utilities for simulation setups.

Typical usage:
    from disc_migration.io import load_simulation, save_simulation

    sim = load_simulation("setup.json")
    save_simulation(sim, "output.json")
"""
from .json_io import (
    load_simulation,
    load_simulation_raw,
    save_simulation,
    simulation_to_json,
    particle_to_json,
    particle_from_json,
    force_to_json,
    force_from_json,
)

__all__ = [
    # Loading
    "load_simulation",
    "load_simulation_raw",
    # Saving
    "save_simulation",
    # Serialization
    "simulation_to_json",
    "particle_to_json",
    "particle_from_json",
    "force_to_json",
    "force_from_json",
]
