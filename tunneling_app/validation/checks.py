from __future__ import annotations

from tunneling_app.adapters.solver_barrier.sampler import stationary_psi
from tunneling_app.domain.coefficients import WaveCoefficients
from tunneling_app.domain.models import PhysicalParameters


def flux_residual(coeffs: WaveCoefficients) -> float:
    """|1 - (R + T)| with R = |r|² and T the closed-form transmission."""
    return abs(1.0 - (coeffs.reflection_prob + coeffs.transmission_prob))


def amplitude_residual(coeffs: WaveCoefficients) -> float:
    """| |t|² - T |: closed-form probability against the amplitude-derived one."""
    return abs(coeffs.t.abs2 - coeffs.transmission_prob)


def continuity_residual(
    params: PhysicalParameters, coeffs: WaveCoefficients, *, delta: float = 1e-12
) -> float:
    """Largest jump of ψ across x = 0 and x = L.

    The global phase e^{-iEt} has unit modulus, so the jump is time independent.
    Each side is evaluated `delta` away from the interface.
    """
    L = float(params.barrier_width)
    at_0 = abs(stationary_psi(-delta, L, coeffs) - stationary_psi(0.0, L, coeffs))
    at_L = abs(stationary_psi(L, L, coeffs) - stationary_psi(L + delta, L, coeffs))
    return max(at_0, at_L)


def badge_for_residual(value: float, *, pass_th: float = 1e-6, warn_th: float = 1e-3) -> str:
    if value <= pass_th:
        return "PASS"
    if value <= warn_th:
        return "WARN"
    return "FAIL"
