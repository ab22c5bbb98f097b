import logging

import numpy as np
import pytest
from disc_migration.core.frames import com_force, center_of_mass, com_of_pair
from disc_migration.core.invariants import momentum_rate
from disc_migration.core.migration import MigrationForce, apply_type_I_migration
from disc_migration.errors import ConfigurationError, DomainError
from disc_migration.types import Coordinates, Particle


def make_system():
    star = Particle(m=1.0, position=(0.001, 0, 0), velocity=(0, -0.002, 0))
    inner = Particle(m=1e-3, position=(1.0, 0, 0), velocity=(0, 1.0, 0.01), params={"tau_a": 1e3, "tau_e": 50.0})
    outer = Particle(m=3e-4, position=(0, 2.0, 0.05), velocity=(-0.7, 0.05, 0), params={"tau_a": -2e3, "tau_inc": 80.0})
    return [star, inner, outer]


def test_center_of_mass():
    a = Particle(m=1.0, position=(0, 0, 0), velocity=(1, 0, 0))
    b = Particle(m=3.0, position=(4, 0, 0), velocity=(0, 0, 0))
    com = com_of_pair(a, b)
    assert com.m == 4.0
    np.testing.assert_allclose(com.position, [3.0, 0, 0])
    np.testing.assert_allclose(com.velocity, [0.25, 0, 0])
    np.testing.assert_allclose(center_of_mass([a, b]).position, com.position)
    # Massless pairs keep the first position
    np.testing.assert_allclose(com_of_pair(Particle(m=0.0, position=(1, 1, 1)), Particle(m=0.0)).position, [1, 1, 1])


def test_jacobi_sources():
    """Particle i is measured against the centre of mass of particles 0..i-1."""
    particles = make_system()
    seen = []

    def record(G, force, p, source):
        seen.append((p.m, source.m, source.position.copy()))
        return np.zeros(3)

    com_force(1.0, None, Coordinates.JACOBI, particles, record)
    assert [s[0] for s in seen] == [1e-3, 3e-4]
    assert seen[0][1] == 1.0
    np.testing.assert_allclose(seen[0][2], particles[0].position)
    assert seen[1][1] == pytest.approx(1.001)
    np.testing.assert_allclose(seen[1][2], com_of_pair(particles[0], particles[1]).position)


@pytest.mark.parametrize("coordinates", [Coordinates.JACOBI, Coordinates.PARTICLE])
def test_back_reactions_conserve_momentum(coordinates):
    particles = make_system()
    particles[0].params["primary"] = True
    force = MigrationForce(params={"coordinates": coordinates})
    apply_type_I_migration(1.0, force, particles)

    assert np.linalg.norm(particles[1].acc) > 0
    assert np.linalg.norm(particles[0].acc) > 0
    np.testing.assert_allclose(momentum_rate(particles), np.zeros(3), atol=1e-18)


def test_barycentric_leaves_star_alone():
    particles = make_system()
    force = MigrationForce(params={"coordinates": "barycentric"})
    apply_type_I_migration(1.0, force, particles)
    np.testing.assert_array_equal(particles[0].acc, np.zeros(3))
    assert np.linalg.norm(particles[1].acc) > 0
    assert np.linalg.norm(particles[2].acc) > 0


def test_particle_coordinates_use_flagged_reference():
    particles = make_system()
    # Make the inner planet the reference body for the outer one
    particles[1].params["primary"] = True
    seen = []

    def record(G, force, p, source):
        seen.append((p.m, source.m))
        return np.zeros(3)

    com_force(1.0, None, Coordinates.PARTICLE, particles, record)
    assert seen == [(1.0, 1e-3), (3e-4, 1e-3)]


def test_particle_coordinates_need_primary():
    particles = make_system()
    force = MigrationForce(params={"coordinates": Coordinates.PARTICLE})
    with pytest.raises(ConfigurationError, match="primary"):
        apply_type_I_migration(1.0, force, particles)


def test_failure_is_logged_and_raised(caplog):
    particles = make_system()
    particles[2] = Particle(m=-1.0, position=(0, 2.0, 0), velocity=(-0.7, 0, 0))
    force = MigrationForce()
    with caplog.at_level(logging.ERROR, logger="disc_migration"):
        with pytest.raises(DomainError):
            apply_type_I_migration(1.0, force, particles)
    assert "particle 2" in caplog.text


def test_single_particle_is_noop():
    star = Particle(m=1.0)
    com_force(1.0, None, Coordinates.JACOBI, [star], lambda *args: np.ones(3))
    np.testing.assert_array_equal(star.acc, np.zeros(3))
