from __future__ import annotations

import numpy as np
import xarray as xr

from tunneling_app.adapters.solver_barrier.barrier import solve
from tunneling_app.adapters.solver_barrier.sampler import sample_grid
from tunneling_app.domain.models import FrameRequest, FrameResult, SolverScalars
from tunneling_app.domain.ports import SolverEngine
from tunneling_app.validation.checks import (
    amplitude_residual,
    continuity_residual,
    flux_residual,
)


class BarrierEngine(SolverEngine):
    """Closed-form rectangular barrier. Samples one frame per request.

    The coefficient snapshot is taken from the request when present; otherwise
    the parameters are solved once and the whole grid uses that result.
    """

    def run(self, request: FrameRequest) -> FrameResult:
        params = request.params
        coeffs = request.coeffs if request.coeffs is not None else solve(params, request.solver)

        x = np.linspace(float(request.x_min), float(request.x_max), int(request.n_points))
        wave_real, probability, potential = sample_grid(x, request.time, params, coeffs)

        ds = xr.Dataset(
            data_vars=dict(
                wave_real=(("x",), wave_real),
                probability=(("x",), probability),
                potential=(("x",), potential),
            ),
            coords=dict(x=x),
            attrs=dict(
                time=float(request.time),
                regime=coeffs.regime,
                transmission_prob=float(coeffs.transmission_prob),
                note="Rectangular barrier (closed form)",
            ),
        )

        scalars = SolverScalars(
            flux_residual=flux_residual(coeffs),
            amplitude_residual=amplitude_residual(coeffs),
            continuity_residual=continuity_residual(params, coeffs),
            notes=coeffs.regime,
        )
        return FrameResult(data=ds, scalars=scalars)
