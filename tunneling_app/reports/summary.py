from __future__ import annotations

import math
from datetime import datetime, timezone
from textwrap import dedent

from tunneling_app.domain.coefficients import WaveCoefficients
from tunneling_app.domain.models import PhysicalParameters


def de_broglie_wavelength(coeffs: WaveCoefficients) -> float:
    return 2.0 * math.pi / coeffs.k1


def stat_metrics(coeffs: WaveCoefficients) -> list[tuple[str, str]]:
    """(label, value) pairs for the stats bar above the plots."""
    return [
        ("Condition", coeffs.regime.capitalize()),
        ("Transmission (T)", f"{coeffs.transmission_prob * 100:.2f}%"),
        ("Reflection (R)", f"{coeffs.reflection_prob * 100:.2f}%"),
        ("Wavelength (λ)", f"{de_broglie_wavelength(coeffs):.2f} u"),
    ]


def summary_markdown(params: PhysicalParameters, coeffs: WaveCoefficients) -> str:
    interior = "κ (decay)" if coeffs.is_tunneling else "k' (interior)"
    md = f"""
    # Barrier summary (Auto‑generated)

    **Generated:** {datetime.now(timezone.utc).isoformat()}

    ## Parameters
    E={params.energy:.3g}, V₀={params.barrier_height:.3g}, L={params.barrier_width:.3g}, m={params.mass:.3g} (ħ = 1).

    ## Result
    - Condition: **{coeffs.regime.capitalize()}**
    - Transmission T: {coeffs.transmission_prob * 100:.2f}%
    - Reflection R: {coeffs.reflection_prob * 100:.2f}%
    - Wavelength λ = 2π/k₁: {de_broglie_wavelength(coeffs):.2f} u
    - k₁={coeffs.k1:.4g}, {interior}={coeffs.k2:.4g}
    """
    if coeffs.energy != params.energy:
        md += f"""
    E was shifted to {coeffs.energy:.6g} to step off the E = V₀ singularity.
    """
    return dedent(md).strip() + "\n"
