from __future__ import annotations

import math

import numpy as np
import pytest

from tunneling_app.adapters.solver_barrier.barrier import _solve_scattering, solve
from tunneling_app.domain.coefficients import WaveCoefficients
from tunneling_app.domain.models import PhysicalParameters, SolverSettings


def _finite(c: WaveCoefficients) -> bool:
    return (
        all(z.is_finite() for z in (c.r, c.t, c.c1, c.c2, c.c2_edge))
        and all(math.isfinite(v) for v in (c.k1, c.k2, c.transmission_prob, c.energy))
    )


def _grid() -> list[PhysicalParameters]:
    out = []
    for V0 in (0.0, 2.5, 6.0, 10.0):
        for L in (0.2, 1.2, 4.0):
            for E in np.linspace(0.1, 10.0, 34):
                out.append(
                    PhysicalParameters(energy=float(E), barrier_height=V0, barrier_width=L, mass=1.0)
                )
    # exact degeneracies and a heavier particle
    out.append(PhysicalParameters(energy=6.0, barrier_height=6.0, barrier_width=1.0))
    out.append(PhysicalParameters(energy=2.5, barrier_height=2.5, barrier_width=3.0, mass=2.0))
    return out


@pytest.mark.parametrize("params", _grid())
def test_probability_invariants(params: PhysicalParameters) -> None:
    c = solve(params)
    assert _finite(c)
    assert 0.0 <= c.transmission_prob <= 1.0
    # R + T = 1 and |t|² = T
    assert abs(c.r.abs2 + c.transmission_prob - 1.0) < 1e-6
    assert abs(c.t.abs2 - c.transmission_prob) < 1e-6
    # branch matches the sign of E - V0 after the guard
    assert c.is_tunneling == (c.energy < params.barrier_height)


def test_reference_tunneling_case(tunneling_coeffs: WaveCoefficients) -> None:
    c = tunneling_coeffs
    assert c.is_tunneling
    assert c.regime == "tunneling"
    assert abs(c.k1 - 3.0) < 1e-12
    assert abs(c.k2 - math.sqrt(3.0)) < 1e-12
    assert 0.0 < c.transmission_prob < 0.5


def test_transmission_preset_is_scattering(scattering_coeffs: WaveCoefficients) -> None:
    c = scattering_coeffs
    assert not c.is_tunneling
    assert abs(c.k2 - 2.0) < 1e-12
    expected = 1.0 / (1.0 + 25.0 * math.sin(3.0) ** 2 / (4.0 * 7.0 * 2.0))
    assert abs(c.transmission_prob - expected) < 1e-12
    assert 0.9 < c.transmission_prob < 1.0


def test_block_preset_is_small_but_positive(block_params: PhysicalParameters) -> None:
    c = solve(block_params)
    assert c.is_tunneling
    assert 0.0 < c.transmission_prob < 1e-4


def test_near_degenerate_energy_stays_finite() -> None:
    c = solve(PhysicalParameters(energy=6.0001, barrier_height=6.0, barrier_width=1.2))
    assert _finite(c)
    assert abs(c.r.abs2 + c.transmission_prob - 1.0) < 1e-6


@pytest.mark.parametrize("E", [6.0, 6.00005, 5.99995])
def test_degeneracy_guard_shifts_energy(E: float) -> None:
    c = solve(PhysicalParameters(energy=E, barrier_height=6.0, barrier_width=1.2))
    assert c.energy == pytest.approx(E + 1e-3, abs=1e-15)
    assert not c.is_tunneling
    assert _finite(c)


def test_guard_constants_come_from_settings() -> None:
    settings = SolverSettings(degeneracy_eps=0.1, degeneracy_offset=0.5)
    c = solve(PhysicalParameters(energy=5.95, barrier_height=6.0, barrier_width=1.0), settings)
    assert c.energy == pytest.approx(6.45)
    # outside the default window nothing moves
    c = solve(PhysicalParameters(energy=5.95, barrier_height=6.0, barrier_width=1.0))
    assert c.energy == 5.95 and c.is_tunneling


def test_no_barrier_is_fully_transparent() -> None:
    c = solve(PhysicalParameters(energy=3.0, barrier_height=0.0, barrier_width=2.0))
    assert not c.is_tunneling
    assert c.transmission_prob == 1.0
    assert abs(c.r) < 1e-15
    assert abs(complex(c.t) - 1.0) < 1e-12


def test_resonance_transmits_completely() -> None:
    # k'L = π  =>  sin(k'L) = 0
    V0, L = 5.0, 1.5
    E = V0 + (math.pi / L) ** 2 / 2.0
    c = solve(PhysicalParameters(energy=E, barrier_height=V0, barrier_width=L))
    assert c.transmission_prob == pytest.approx(1.0, abs=1e-12)
    assert abs(c.r) < 1e-6


def test_opaque_barrier_does_not_overflow() -> None:
    c = solve(PhysicalParameters(energy=1.0, barrier_height=10.0, barrier_width=500.0))
    assert c.is_tunneling
    assert _finite(c)
    assert c.transmission_prob == 0.0
    assert abs(c.r.abs2 - 1.0) < 1e-12


def test_exact_barrier_top_without_guard_reflects() -> None:
    k1 = math.sqrt(12.0)
    c = _solve_scattering(6.0, 6.0, 1.0, 1.0, k1)
    assert c.transmission_prob == 0.0
    assert c.r.abs2 == 1.0
    assert _finite(c)


def test_tunneling_branch_is_monotonic_in_energy() -> None:
    V0, L = 6.0, 1.2
    T = [
        solve(PhysicalParameters(energy=float(E), barrier_height=V0, barrier_width=L)).transmission_prob
        for E in np.linspace(0.1, V0 - 0.01, 200)
    ]
    assert np.all(np.diff(T) > 0.0)
