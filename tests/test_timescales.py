import math

import pytest
from disc_migration.core.timescales import (
    angular_frequency,
    wave_timescale,
    eccentricity_damping_timescale,
    torque_reversal_factor,
    semi_major_axis_damping_timescale,
    disc_timescales,
)
from disc_migration.errors import DomainError


def test_wave_timescale_reference_disc():
    """
    m_p = 1e-5, M* = 1, Sigma(1) = 1e-3, Hr = 0.02, a = 1, G = 1:
      t_wave = 1 / (1e-5 * 1e-3) * 0.02^4 / 1 = 16
    """
    t_wave = wave_timescale(1.0, 1e-5, 1.0, 1.0, 1.0, 1e-3, 1.0, 0.02)
    assert t_wave == pytest.approx(16.0, rel=1e-12)


def test_wave_timescale_uses_omega_at_semimajor_axis():
    """Sigma is taken at r, Omega at a."""
    G, mp, ms, sigma0, alpha, hr = 1.0, 1e-5, 1.0, 1e-3, 1.0, 0.02
    a, r = 2.0, 1.5
    expected = (ms * ms / (mp * sigma0 / r * a * a)) * hr ** 4 * math.sqrt(a ** 3 / (G * ms))
    assert wave_timescale(G, mp, ms, a, r, sigma0, alpha, hr) == pytest.approx(expected, rel=1e-12)
    assert angular_frequency(G, ms, a) == pytest.approx(math.sqrt(1 / 8))


@pytest.mark.parametrize("mp, a, sigma0", [
    (0.0, 1.0, 1e-3),
    (-1e-5, 1.0, 1e-3),
    (1e-5, 0.0, 1e-3),
    (1e-5, -2.0, 1e-3),
    (1e-5, 1.0, 0.0),
])
def test_wave_timescale_domain(mp, a, sigma0):
    with pytest.raises(DomainError):
        wave_timescale(1.0, mp, 1.0, a, 1.0, sigma0, 1.0, 0.02)


def test_torque_reversal_factor_circular_is_one():
    assert torque_reversal_factor(0.0, 0.02) == 1.0


def test_torque_reversal_factor_grows_towards_pole():
    hr = 0.02
    values = [torque_reversal_factor(x * hr, hr) for x in (0.5, 1.0, 1.5, 2.0)]
    assert all(b > a for a, b in zip(values, values[1:])), values
    # Close to the pole the denominator dominates
    assert torque_reversal_factor(2.019 * hr, hr) > 100.0


def test_torque_reversal_factor_pole_is_domain_error():
    hr = 0.02
    with pytest.raises(DomainError):
        torque_reversal_factor(2.02 * hr, hr)
    with pytest.raises(DomainError):
        torque_reversal_factor(0.1, hr)


def test_eccentricity_damping_timescale():
    t_wave = 16.0
    assert eccentricity_damping_timescale(t_wave, 0.0, 0.02) == pytest.approx(t_wave / 0.780)
    # e = Hr: bracket = 1 - 0.14 + 0.06 = 0.92
    assert eccentricity_damping_timescale(t_wave, 0.02, 0.02) == pytest.approx(t_wave / 0.780 * 0.92)


def test_eccentricity_damping_rejects_bad_input():
    with pytest.raises(DomainError):
        eccentricity_damping_timescale(16.0, -0.01, 0.02)
    with pytest.raises(DomainError):
        eccentricity_damping_timescale(16.0, 0.01, 0.0)


def test_semi_major_axis_damping_timescale():
    # 2 * 16 / (2.7 + 1.1) * 0.02^2 * 1
    t_a = semi_major_axis_damping_timescale(16.0, 1.0, 0.02, 1.0)
    assert t_a == pytest.approx(32.0 / 3.8 * 4e-4, rel=1e-12)


def test_timescales_scale_linearly_with_wave_timescale():
    e, hr, alpha = 0.01, 0.02, 1.0
    pe = torque_reversal_factor(e, hr)
    te1 = eccentricity_damping_timescale(10.0, e, hr)
    te3 = eccentricity_damping_timescale(30.0, e, hr)
    ta1 = semi_major_axis_damping_timescale(10.0, alpha, hr, pe)
    ta3 = semi_major_axis_damping_timescale(30.0, alpha, hr, pe)
    assert te3 == pytest.approx(3 * te1, rel=1e-14)
    assert ta3 == pytest.approx(3 * ta1, rel=1e-14)


def test_disc_timescales_bundle():
    ts = disc_timescales(1.0, 1e-5, 1.0, 1.0, 0.0, 1.0, 1e-3, 1.0, 0.0)
    assert ts.hr == 0.02
    assert ts.sigma == pytest.approx(1e-3)
    assert ts.t_wave == pytest.approx(16.0)
    assert ts.pe == 1.0
    assert ts.t_e == pytest.approx(16.0 / 0.780)
    assert ts.t_a == pytest.approx(32.0 / 3.8 * 4e-4)


def test_disc_timescales_without_semimajor_axis_part():
    """Past the P(e) pole, t_e is still defined when t_a is not requested."""
    with pytest.raises(DomainError):
        disc_timescales(1.0, 1e-5, 1.0, 1.0, 0.1, 1.0, 1e-3, 1.0, 0.0)
    ts = disc_timescales(1.0, 1e-5, 1.0, 1.0, 0.1, 1.0, 1e-3, 1.0, 0.0, semi_major_axis=False)
    assert ts.pe is None and ts.t_a is None
    assert ts.t_e == pytest.approx(eccentricity_damping_timescale(16.0, 0.1, 0.02))
