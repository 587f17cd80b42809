from __future__ import annotations

from typing import Any

import pytest

from tunneling_app.adapters.solver_barrier.barrier import solve
from tunneling_app.adapters.solver_barrier.engine import BarrierEngine
from tunneling_app.domain.coefficients import WaveCoefficients
from tunneling_app.domain.models import PhysicalParameters
from tunneling_app.orchestration.session import build_frame_request, init_session
from tunneling_app.plotting_plotly.presenter import PlotPresenterPlotly


@pytest.fixture(scope="session")
def tunneling_params() -> PhysicalParameters:
    """Reference configuration: E < V0."""
    return PhysicalParameters(energy=4.5, barrier_height=6.0, barrier_width=1.2, mass=1.0)


@pytest.fixture(scope="session")
def scattering_params() -> PhysicalParameters:
    """'Transmission' preset: E > V0."""
    return PhysicalParameters(energy=7.0, barrier_height=5.0, barrier_width=1.5, mass=1.0)


@pytest.fixture(scope="session")
def block_params() -> PhysicalParameters:
    """'Block' preset: tall, wide barrier."""
    return PhysicalParameters(energy=4.0, barrier_height=10.0, barrier_width=2.0, mass=1.0)


@pytest.fixture(scope="session")
def tunneling_coeffs(tunneling_params: PhysicalParameters) -> WaveCoefficients:
    return solve(tunneling_params)


@pytest.fixture(scope="session")
def scattering_coeffs(scattering_params: PhysicalParameters) -> WaveCoefficients:
    return solve(scattering_params)


@pytest.fixture(scope="session")
def presenter() -> PlotPresenterPlotly:
    """Plotly presenter under test."""
    return PlotPresenterPlotly()


@pytest.fixture(scope="session")
def small_frame() -> Any:
    """One frame of the default session on a coarse grid."""
    session = init_session()
    return BarrierEngine().run(build_frame_request(session, n_points=61))


@pytest.fixture(scope="session")
def wave_fig(small_frame: Any, presenter: PlotPresenterPlotly) -> Any:
    return presenter.wave_plot(small_frame, init_session().config.params)
