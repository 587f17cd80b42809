from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from tunneling_app.domain.coefficients import WaveCoefficients, WaveSample
from tunneling_app.domain.complex_num import ComplexNumber
from tunneling_app.domain.models import PhysicalParameters


def time_phase(energy: float, time: float) -> ComplexNumber:
    """Global stationary-state phase e^{-iEt} (ħ = 1)."""
    return ComplexNumber.cis(-energy * time)


def stationary_psi(x: float, L: float, coeffs: WaveCoefficients) -> ComplexNumber:
    k1, k2 = coeffs.k1, coeffs.k2
    if x < 0.0:
        return ComplexNumber.cis(k1 * x) + coeffs.r * ComplexNumber.cis(-k1 * x)
    if x <= L:
        if coeffs.is_tunneling:
            # growing half taken relative to x = L so both exponents stay <= 0
            return (coeffs.c1.scale(math.exp(-k2 * x))
                    + coeffs.c2_edge.scale(math.exp(-k2 * (L - x))))
        return coeffs.c1 * ComplexNumber.cis(k2 * x) + coeffs.c2 * ComplexNumber.cis(-k2 * x)
    # region III shares region I's potential (0), hence the same k1
    return coeffs.t * ComplexNumber.cis(k1 * x)


def sample(
    x: float, t: float, params: PhysicalParameters, coeffs: WaveCoefficients
) -> WaveSample:
    """Evaluate Ψ(x, t) for one position: (Re Ψ, |Ψ|², V(x)).

    Pure and stateless; the caller owns the clock and the spatial grid.
    """
    L = float(params.barrier_width)
    psi = stationary_psi(float(x), L, coeffs) * time_phase(float(params.energy), float(t))
    potential = float(params.barrier_height) if 0.0 <= x <= L else 0.0
    return WaveSample(wave_real=psi.re, probability=(psi * psi.conj()).re, potential=potential)


def sample_grid(
    x: NDArray[np.floating] | list[float],
    t: float,
    params: PhysicalParameters,
    coeffs: WaveCoefficients,
) -> tuple[NDArray[np.floating], NDArray[np.floating], NDArray[np.floating]]:
    """Vectorized `sample` over a 1D grid of positions.

    Returns (wave_real, probability, potential), each shaped like `x`.
    """
    xs = np.asarray(x, dtype=float)
    L = float(params.barrier_width)
    k1, k2 = coeffs.k1, coeffs.k2
    r, tr = complex(coeffs.r), complex(coeffs.t)
    c1, c2 = complex(coeffs.c1), complex(coeffs.c2)
    c2e = complex(coeffs.c2_edge)

    left = xs < 0.0
    inside = (xs >= 0.0) & (xs <= L)
    right = xs > L

    psi = np.zeros(xs.shape, dtype=np.complex128)
    xl = xs[left]
    psi[left] = np.exp(1j * k1 * xl) + r * np.exp(-1j * k1 * xl)
    xi = xs[inside]
    if coeffs.is_tunneling:
        psi[inside] = c1 * np.exp(-k2 * xi) + c2e * np.exp(-k2 * (L - xi))
    else:
        psi[inside] = c1 * np.exp(1j * k2 * xi) + c2 * np.exp(-1j * k2 * xi)
    psi[right] = tr * np.exp(1j * k1 * xs[right])

    psi = psi * complex(time_phase(float(params.energy), float(t)))
    potential = np.where(inside, float(params.barrier_height), 0.0)
    return psi.real, np.abs(psi) ** 2, potential
