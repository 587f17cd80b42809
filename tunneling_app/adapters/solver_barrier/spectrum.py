from __future__ import annotations

from typing import Sequence

import numpy as np
import xarray as xr

from tunneling_app.adapters.solver_barrier.barrier import solve
from tunneling_app.domain.models import PhysicalParameters, SolverSettings


def transmission_spectrum(
    params: PhysicalParameters,
    energies: Sequence[float] | np.ndarray,
    settings: SolverSettings | None = None,
) -> xr.Dataset:
    """T(E), R(E) for fixed V0, L, m over a grid of energies.

    Below V0 the curve rises monotonically; above V0 it oscillates, reaching 1
    at the resonances k'L = nπ.
    """
    E = np.asarray(energies, dtype=float)
    if E.ndim != 1 or (E <= 0.0).any():
        raise ValueError("energies must be a 1D array of positive values")

    T = np.zeros(E.size, dtype=float)
    R = np.zeros(E.size, dtype=float)
    tunneling = np.zeros(E.size, dtype=bool)
    for i, e in enumerate(E):
        c = solve(params.model_copy(update={"energy": float(e)}), settings)
        T[i] = c.transmission_prob
        R[i] = c.reflection_prob
        tunneling[i] = c.is_tunneling

    return xr.Dataset(
        data_vars=dict(
            transmission=(("energy",), T),
            reflection=(("energy",), R),
            is_tunneling=(("energy",), tunneling),
        ),
        coords=dict(energy=E),
        attrs=dict(
            barrier_height=float(params.barrier_height),
            barrier_width=float(params.barrier_width),
            mass=float(params.mass),
        ),
    )
