# MIT License (see LICENSE)
"""
JSON serialization and deserialization for simulation setups.

JSON Schema Overview:
---------------------
{
  "G": float,                      # Default: 1.0
  "dt": float,                     # Timestep, default: 1e-3
  "integrator": string,            # "rk4" or "leapfrog"
  "softening": float,              # Default: 0.0
  "time": float,                   # Default: 0.0
  "particles": [
    {
      "m": float,                  # Required
      "position": [x, y, z],       # Default: [0, 0, 0]
      "velocity": [vx, vy, vz],    # Default: [0, 0, 0]
      "params": {                  # Optional
        "tau_a": float, "tau_e": float, "tau_inc": float,
        "primary": bool
      }
    }
  ],
  "forces": [                      # Optional
    {
      "type": "type_I_migration",
      "name": string,              # Optional
      "params": {
        "coordinates": "jacobi" | "barycentric" | "particle",
        "inner_disc_edge": float,
        "disc_edge_width": float,
        "alpha": float,
        "beta": float,
        "initial_disc_surface_density": float
      }
    }
  ]
}

Infinite timescales are written as the strings "inf" / "-inf" since JSON
has no literal for them.
"""
from __future__ import annotations
import json
import logging
import math
from typing import TYPE_CHECKING, Any

import numpy as np

from ..core.migration import MigrationForce
from ..types import Coordinates, Particle

if TYPE_CHECKING:
    from ..simulation import Simulation

logger = logging.getLogger(__name__)

FORCE_TYPE = "type_I_migration"


def load_simulation_raw(path: str) -> dict[str, Any]:
    """Load raw JSON data from a setup file without object construction."""
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_simulation(path: str) -> "Simulation":
    """
    Load and construct a Simulation from a JSON file.

    Raises:
        FileNotFoundError: If the file cannot be found.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If required fields are missing or malformed.
    """
    # Import locally to avoid circular import
    from ..simulation import Simulation

    logger.info(f"Loading simulation setup from: {path}")
    data = load_simulation_raw(path)

    sim = Simulation(
        G=float(data.get("G", 1.0)),
        dt=float(data.get("dt", 1e-3)),
        integrator=data.get("integrator", "rk4"),
        softening=float(data.get("softening", 0.0)),
    )
    sim.time = float(data.get("time", 0.0))

    for p_data in data.get("particles", []):
        sim.add(particle_from_json(p_data))
    for f_data in data.get("forces", []):
        sim.add_force(force_from_json(f_data))

    logger.debug(f"Loaded {len(sim.particles)} particles and {len(sim.forces)} forces.")
    return sim


def particle_from_json(d: dict[str, Any]) -> Particle:
    """Parse a single particle definition from a dictionary."""
    if "m" not in d:
        raise ValueError("Particle definition missing required 'm' field.")
    position = d.get("position", [0.0, 0.0, 0.0])
    velocity = d.get("velocity", [0.0, 0.0, 0.0])
    if len(position) != 3 or len(velocity) != 3:
        raise ValueError("Particle position and velocity need 3 components.")
    return Particle(
        m=float(d["m"]),
        position=tuple(position),
        velocity=tuple(velocity),
        params={k: _decode_value(v) for k, v in d.get("params", {}).items()},
    )


def particle_to_json(p: Particle) -> dict[str, Any]:
    """Serialize a Particle; empty params are omitted."""
    result = {
        "m": p.m,
        "position": _to_list(p.position),
        "velocity": _to_list(p.velocity),
    }
    if p.params:
        result["params"] = {k: _encode_value(v) for k, v in p.params.items()}
    return result


def force_from_json(d: dict[str, Any]) -> MigrationForce:
    """Parse a force definition. Only Type I migration is known."""
    f_type = d.get("type", FORCE_TYPE)
    if f_type != FORCE_TYPE:
        raise ValueError(f"Unknown force type: '{f_type}'")
    params = {k: _decode_value(v) for k, v in d.get("params", {}).items()}
    return MigrationForce(params=params, name=d.get("name", FORCE_TYPE))


def force_to_json(force: MigrationForce) -> dict[str, Any]:
    return {
        "type": FORCE_TYPE,
        "name": force.name,
        "params": {k: _encode_value(v) for k, v in force.params.items()},
    }


def simulation_to_json(sim: "Simulation") -> dict[str, Any]:
    """Serialize a complete Simulation to a dictionary."""
    result = {
        "G": sim.G,
        "dt": sim.dt,
        "particles": [particle_to_json(p) for p in sim.particles],
    }

    # Optional parameters (skip if standard defaults)
    if sim.integrator != "rk4":
        result["integrator"] = sim.integrator
    if sim.softening != 0.0:
        result["softening"] = sim.softening
    if sim.time != 0.0:
        result["time"] = sim.time
    if sim.forces:
        result["forces"] = [force_to_json(f) for f in sim.forces]
    return result


def save_simulation(sim: "Simulation", path: str, indent: int = 2) -> None:
    """Save a Simulation to a JSON file on disk."""
    data = simulation_to_json(sim)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent)
    logger.info(f"Simulation setup saved to: {path}")


def _encode_value(v: Any) -> Any:
    if isinstance(v, Coordinates):
        return v.value
    if isinstance(v, (float, np.floating)) and math.isinf(v):
        return "inf" if v > 0 else "-inf"
    if isinstance(v, np.generic):
        return v.item()
    return v


def _decode_value(v: Any) -> Any:
    if v == "inf":
        return math.inf
    if v == "-inf":
        return -math.inf
    return v


def _to_list(arr: Any) -> list[float]:
    """Helper: Convert numpy array or tuple to a clean list of floats."""
    if isinstance(arr, np.ndarray):
        return arr.tolist()
    return list(arr)
