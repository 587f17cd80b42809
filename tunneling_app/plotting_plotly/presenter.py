#"""
#Plotly-based presenter implementing PlotPresenter.
#"""
from __future__ import annotations
import numpy as np
import xarray as xr
import plotly.graph_objects as go
from tunneling_app.adapters.solver_barrier.engine import BarrierEngine
from tunneling_app.domain.models import FrameResult, PhysicalParameters
from tunneling_app.domain.ports import PlotPresenter, SolverEngine
from tunneling_app.orchestration.session import AppSession, build_frame_request

# Energies share the wavefunction axis, shrunk so the barrier stays readable
ENERGY_SCALE = 1.0 / 5.0


class PlotPresenterPlotly(PlotPresenter):
    def _frame_traces(self, ds: xr.Dataset) -> list[go.Scatter]:
        x = ds.coords["x"].values
        return [
            go.Scatter(x=x, y=ds["probability"].values, mode="lines", fill="tozeroy",
                       name="|Ψ(x)|²", line=dict(color="rgba(188, 19, 254, 0.6)", width=1)),
            go.Scatter(x=x, y=ds["wave_real"].values, mode="lines",
                       name="Re[Ψ(x,t)]", line=dict(color="#00f3ff", width=2)),
        ]

    def _static_traces(self, ds: xr.Dataset, params: PhysicalParameters) -> list[go.Scatter]:
        x = ds.coords["x"].values
        x_lo, x_hi = float(x[0]), float(x[-1])
        return [
            go.Scatter(x=x, y=ds["potential"].values * ENERGY_SCALE, mode="lines",
                       fill="tozeroy", name=f"V₀ = {params.barrier_height:g}",
                       line=dict(color="#ff003c", width=2, shape="hv")),
            go.Scatter(x=[x_lo, x_hi], y=[params.energy * ENERGY_SCALE] * 2, mode="lines",
                       name=f"E = {params.energy:g}", line=dict(color="#0aff68", dash="dash")),
        ]

    def wave_plot(self, result: FrameResult, params: PhysicalParameters) -> go.Figure:
        ds: xr.Dataset = result.data  # type: ignore
        fig = go.Figure(data=self._frame_traces(ds) + self._static_traces(ds, params))
        fig.update_layout(
            xaxis_title="Position x",
            yaxis_title="Amplitude",
            template="plotly_dark",
            title=f"Ψ(x, t) at t={float(ds.attrs['time']):.2f} ({ds.attrs['regime']})",
        )
        return fig

    def wave_animation(
        self, session: AppSession, n_frames: int = 60, engine: SolverEngine | None = None
    ) -> go.Figure:
        """Animated figure: `n_frames` successive clock ticks from ONE coefficient snapshot."""
        engine = engine or BarrierEngine()
        base = build_frame_request(session)
        dt = session.config.view.time_step
        params = session.config.params

        frames = []
        first: xr.Dataset | None = None
        for i in range(int(n_frames)):
            req = base.model_copy(update={"time": base.time + i * dt})
            ds: xr.Dataset = engine.run(req).data  # type: ignore
            if first is None:
                first = ds
            frames.append(go.Frame(data=self._frame_traces(ds), traces=[0, 1], name=str(i)))
        if first is None:
            raise ValueError("n_frames must be ≥ 1")

        fig = go.Figure(
            data=self._frame_traces(first) + self._static_traces(first, params), frames=frames
        )
        fig.update_layout(
            xaxis_title="Position x",
            yaxis_title="Amplitude",
            yaxis=dict(range=[-2.5, 4.5]),
            template="plotly_dark",
            title=f"Ψ(x, t): {session.coeffs.regime}, T={session.coeffs.transmission_prob:.4f}",
            updatemenus=[dict(
                type="buttons",
                showactive=False,
                buttons=[dict(label="Play", method="animate",
                              args=[None, dict(frame=dict(duration=30, redraw=False),
                                               transition=dict(duration=0),
                                               fromcurrent=True, mode="immediate")])],
            )],
        )
        return fig

    def transmission_plot(self, spectrum: xr.Dataset, energy: float | None = None) -> go.Figure:
        E = spectrum.coords["energy"].values
        fig = go.Figure()
        fig.add_trace(go.Scatter(x=E, y=spectrum["transmission"].values,
                                 mode="lines", name="T(E)"))
        fig.add_trace(go.Scatter(x=E, y=spectrum["reflection"].values,
                                 mode="lines", name="R(E)"))
        if energy is not None:
            i = int(np.argmin(np.abs(E - energy)))
            fig.add_trace(go.Scatter(x=[float(E[i])],
                                     y=[float(spectrum["transmission"].values[i])],
                                     mode="markers", name="current E",
                                     marker=dict(size=10)))
        fig.add_vline(x=float(spectrum.attrs["barrier_height"]), line_dash="dot",
                      annotation_text="E = V₀")
        fig.update_layout(
            xaxis_title="Energy E",
            yaxis_title="Probability",
            template="plotly_white",
            title="Transmission / reflection vs energy",
        )
        return fig
