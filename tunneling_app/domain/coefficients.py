from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from .complex_num import ComplexNumber


@dataclass(frozen=True)
class WaveCoefficients:
    """
    Stationary-state solution for one parameter set (atomic snapshot).

    Region I   (x < 0):      e^{i k1 x} + r e^{-i k1 x}
    Region II  (0 ≤ x ≤ L):  c1 e^{-k2 x} + c2 e^{k2 x}     if is_tunneling
                             c1 e^{i k2 x} + c2 e^{-i k2 x} otherwise
    Region III (x > L):      t e^{i k1 x}

    The tunneling interior is sampled as c1 e^{-k2 x} + c2_edge e^{-k2 (L - x)},
    so no exponent is ever positive.

    `energy` is the energy the solver actually used (after the E ≈ V0 guard).
    """

    r: ComplexNumber
    t: ComplexNumber
    c1: ComplexNumber
    c2: ComplexNumber
    c2_edge: ComplexNumber  # c2·e^{k2 L} when tunneling, c2 otherwise
    k1: float
    k2: float  # κ when tunneling, k' otherwise
    is_tunneling: bool
    transmission_prob: float
    energy: float

    @property
    def reflection_prob(self) -> float:
        return self.r.abs2

    @property
    def regime(self) -> str:
        return "tunneling" if self.is_tunneling else "scattering"


class WaveSample(NamedTuple):
    wave_real: float
    probability: float
    potential: float
