from __future__ import annotations

import logging
import math

from tunneling_app.domain.coefficients import WaveCoefficients
from tunneling_app.domain.complex_num import I, ONE, ZERO, ComplexNumber
from tunneling_app.domain.models import PhysicalParameters, SolverSettings

logger = logging.getLogger(__name__)

# ħ = 1 throughout; every quantity lives in the resulting natural units.


def _guarded_energy(E: float, V0: float, settings: SolverSettings) -> float:
    # E ≈ V0 makes the penetration/propagation denominators vanish
    if abs(E - V0) < settings.degeneracy_eps:
        logger.debug("E=%g within %g of V0=%g; nudging by %g",
                     E, settings.degeneracy_eps, V0, settings.degeneracy_offset)
        return E + settings.degeneracy_offset
    return E


def _sech(y: float) -> float:
    # 1/cosh(y) without overflowing for large y
    e = math.exp(-abs(y))
    return 2.0 * e / (1.0 + e * e)


def _interior_halves(A: ComplexNumber, B: ComplexNumber) -> tuple[ComplexNumber, ComplexNumber]:
    return (A + B).scale(0.5), (A - B).scale(0.5)


def _solve_tunneling(E: float, V0: float, L: float, m: float, k1: float) -> WaveCoefficients:
    kappa = math.sqrt(2.0 * m * (V0 - E))
    kL = kappa * L

    # Everything is divided through by cosh(κL):
    #   D/cosh = 1 - iγ tanh,  sinh²/(1 + γ₊² sinh²) = tanh²/(sech² + γ₊² tanh²)
    th = math.tanh(kL)
    sech = _sech(kL)
    gamma = (k1 * k1 - kappa * kappa) / (2.0 * k1 * kappa)
    gamma_plus = (kappa * kappa + k1 * k1) / (2.0 * k1 * kappa)

    # γ₊² = V0² / (4E(V0-E)), so this is 1/(1 + V0² sinh²(κL) / (4E(V0-E)))
    T = (sech * sech) / (sech * sech + gamma_plus * gamma_plus * th * th)

    D = ComplexNumber(1.0, -gamma * th)
    t = ComplexNumber.cis(-k1 * L).scale(sech) / D
    r = ComplexNumber(0.0, -gamma_plus * th) / D

    # ψ = c1 e^{-κx} + c2 e^{κx}, value and slope matched at x = 0
    A = ONE + r
    B = I * ComplexNumber(k1 / kappa) * (ONE - r)
    c2, c1 = _interior_halves(A, B)
    # c2·e^{κL} from the matching at x = L; the x = 0 value above loses all
    # precision once e^{κL} outgrows 1/eps
    c2_edge = t * ComplexNumber.cis(k1 * L) * ComplexNumber(0.5, 0.5 * k1 / kappa)

    return WaveCoefficients(
        r=r, t=t, c1=c1, c2=c2, c2_edge=c2_edge, k1=k1, k2=kappa,
        is_tunneling=True, transmission_prob=T, energy=E,
    )


def _solve_scattering(E: float, V0: float, L: float, m: float, k1: float) -> WaveCoefficients:
    k_prime = math.sqrt(2.0 * m * (E - V0))
    if k_prime == 0.0:
        # Exactly at the barrier top with the guard bypassed: total reflection
        return WaveCoefficients(
            r=ComplexNumber(-1.0), t=ZERO, c1=ZERO, c2=ZERO, c2_edge=ZERO, k1=k1, k2=0.0,
            is_tunneling=False, transmission_prob=0.0, energy=E,
        )

    kL = k_prime * L
    s, c = math.sin(kL), math.cos(kL)
    T = 1.0 / (1.0 + (V0 * V0 * s * s) / (4.0 * E * (E - V0)))

    gamma = (k1 * k1 + k_prime * k_prime) / (2.0 * k1 * k_prime)
    gamma_minus = (k1 * k1 - k_prime * k_prime) / (2.0 * k1 * k_prime)
    D = ComplexNumber(c, -gamma * s)
    t = ComplexNumber.cis(-k1 * L) / D
    r = ComplexNumber(0.0, -gamma_minus * s) / D

    # ψ = c1 e^{ik'x} + c2 e^{-ik'x}, value and slope matched at x = 0
    A = ONE + r
    B = ComplexNumber(k1 / k_prime) * (ONE - r)
    c1, c2 = _interior_halves(A, B)

    return WaveCoefficients(
        r=r, t=t, c1=c1, c2=c2, c2_edge=c2, k1=k1, k2=k_prime,
        is_tunneling=False, transmission_prob=T, energy=E,
    )


def solve(params: PhysicalParameters, settings: SolverSettings | None = None) -> WaveCoefficients:
    """Closed-form stationary scattering state for a rectangular barrier on [0, L].

    Total over valid parameters: no exceptions, finite output. Branches on the
    (guarded) energy: E < V0 tunnels through real exponentials, E ≥ V0 passes
    over the barrier with an oscillatory interior.
    """
    settings = settings or SolverSettings()
    V0 = float(params.barrier_height)
    L = float(params.barrier_width)
    m = float(params.mass)
    E = _guarded_energy(float(params.energy), V0, settings)

    k1 = math.sqrt(2.0 * m * E)
    if E < V0:
        return _solve_tunneling(E, V0, L, m, k1)
    return _solve_scattering(E, V0, L, m, k1)
