import json
import math

import numpy as np
import pytest
from disc_migration.core.migration import MigrationForce
from disc_migration.io.json_io import (
    force_from_json,
    load_simulation,
    particle_from_json,
    save_simulation,
    simulation_to_json,
)
from disc_migration.simulation import Simulation
from disc_migration.types import Coordinates, Particle


def test_simulation_json_round_trip(tmp_path):
    sim = Simulation(G=39.47841760435743, dt=1e-3, integrator="leapfrog")
    sim.add(Particle(m=1.0))
    sim.add(Particle(m=3e-6, position=(1, 0, 0), velocity=(0, 6.28, 0),
                     params={"tau_a": -1e5, "tau_e": math.inf}))
    sim.add_force(MigrationForce(params={
        "coordinates": Coordinates.BARYCENTRIC,
        "inner_disc_edge": 0.1,
        "disc_edge_width": 0.02,
        "alpha": 1.5,
        "initial_disc_surface_density": 1e-4,
    }))

    path = tmp_path / "setup.json"
    save_simulation(sim, str(path))
    raw = json.loads(path.read_text())
    assert raw["particles"][1]["params"]["tau_e"] == "inf"
    assert raw["forces"][0]["params"]["coordinates"] == "barycentric"

    sim2 = load_simulation(str(path))
    assert sim2.G == sim.G
    assert sim2.integrator == "leapfrog"
    assert len(sim2.particles) == 2
    np.testing.assert_allclose(sim2.particles[1].velocity, [0, 6.28, 0])
    assert sim2.particles[1].params["tau_e"] == math.inf
    assert sim2.particles[1].params["tau_a"] == -1e5
    assert "params" not in raw["particles"][0]

    force = sim2.forces[0]
    assert force.coordinates is Coordinates.BARYCENTRIC
    assert force.disc_parameters().alpha == 1.5
    assert simulation_to_json(sim2) == simulation_to_json(sim)


def test_particle_definition_errors():
    with pytest.raises(ValueError, match="'m'"):
        particle_from_json({"position": [0, 0, 0]})
    with pytest.raises(ValueError):
        particle_from_json({"m": 1.0, "position": [0, 0]})


def test_unknown_force_type():
    with pytest.raises(ValueError, match="Unknown force type"):
        force_from_json({"type": "stark", "params": {}})
